from __future__ import annotations

import pytest

from hireassess.core import BlueprintCompiler, QuestionGenerator, pick_difficulty
from hireassess.schemas import (
    Blueprint,
    CodingQuestion,
    MCQQuestion,
    PreferenceSignals,
    ScenarioQuestion,
    ShortQuestion,
)


def build_blueprint(**kwargs) -> Blueprint:
    notes = kwargs.pop("notes", "")
    return BlueprintCompiler().compile(notes=notes, **kwargs)


def test_default_blueprint_yields_four_general_questions():
    questions = QuestionGenerator().generate(build_blueprint())

    assert [q.id for q in questions] == ["Q1", "Q2", "Q3", "Q4"]
    assert [q.type for q in questions] == ["MCQ", "short", "coding", "scenario"]
    assert {q.skill for q in questions} == {"general"}


def test_generation_is_deterministic():
    blueprint = build_blueprint(
        role="Backend Engineer",
        stack=["Python", "PostgreSQL"],
        notes="hard, at least 2 system design",
    )
    generator = QuestionGenerator()

    first = [q.model_dump() for q in generator.generate(blueprint)]
    second = [q.model_dump() for q in generator.generate(blueprint)]

    assert first == second


def test_types_follow_canonical_order_per_skill():
    blueprint = build_blueprint(stack=["React", "Node"], types=["scenario", "MCQ", "coding"])

    questions = QuestionGenerator().generate(blueprint)

    assert [(q.id, q.skill, q.type) for q in questions] == [
        ("Q1", "React", "MCQ"),
        ("Q2", "React", "coding"),
        ("Q3", "React", "scenario"),
        ("Q4", "Node", "MCQ"),
        ("Q5", "Node", "coding"),
        ("Q6", "Node", "scenario"),
    ]


def test_every_requested_skill_and_type_is_covered():
    stack = ["Go", "Kubernetes", "Redis"]
    types = ["short", "coding"]
    questions = QuestionGenerator().generate(build_blueprint(stack=stack, types=types))

    pairs = {(q.skill, q.type) for q in questions}
    for skill in stack:
        for qtype in types:
            assert (skill, qtype) in pairs


def test_unknown_types_are_ignored():
    questions = QuestionGenerator().generate(build_blueprint(types=["essay", "short"]))

    assert [q.type for q in questions] == ["short"]


def test_system_design_questions_are_appended():
    blueprint = build_blueprint(stack=["React"], types=["MCQ"], notes="at least 2 system design")

    questions = QuestionGenerator().generate(blueprint)

    assert len(questions) == 3
    assert sum(q.time for q in questions) == 2 + 15 + 15
    design = [q for q in questions if q.skill == "system-design"]
    assert [q.id for q in design] == ["Q2", "Q3"]
    for question in design:
        assert isinstance(question, ScenarioQuestion)
        assert question.difficulty == "hard"
        assert question.time == 15
        assert len(question.rubric) == 6


def test_system_design_flag_alone_adds_one_question_with_role():
    blueprint = build_blueprint(role="payments API", types=["short"], notes="include system design")

    questions = QuestionGenerator().generate(blueprint)

    design = [q for q in questions if q.skill == "system-design"]
    assert len(design) == 1
    assert "payments API" in design[0].prompt


def test_system_design_prompt_falls_back_to_service():
    blueprint = Blueprint(
        types=["MCQ"],
        nl_notes_parsed=PreferenceSignals(min_design_count=1),
    )

    design = QuestionGenerator().generate(blueprint)[-1]

    assert design.prompt.startswith("Design a scalable service ")


@pytest.mark.parametrize(
    ("bias", "qtype", "expected"),
    [
        ("hard", "coding", "hard"),
        ("hard", "MCQ", "medium"),
        ("hard", "scenario", "medium"),
        ("easy", "coding", "easy"),
        ("easy", "short", "easy"),
        ("balanced", "coding", "medium"),
        ("balanced", "short", "easy"),
    ],
)
def test_pick_difficulty_policy(bias, qtype, expected):
    assert pick_difficulty(qtype, bias) == expected


def test_templates_have_expected_shapes():
    questions = QuestionGenerator().generate(build_blueprint(stack=["Vue"], notes="beginner"))
    mcq, short, coding, scenario = questions

    assert isinstance(mcq, MCQQuestion)
    assert len(mcq.options) == 4 and mcq.answer == 1 and mcq.time == 2
    assert isinstance(short, ShortQuestion)
    assert len(short.key_points) == 3 and short.time == 3
    assert isinstance(coding, CodingQuestion)
    assert coding.time == 10 and len(coding.tests) == 2
    assert coding.tests[0].expected_output is True
    assert isinstance(scenario, ScenarioQuestion)
    assert len(scenario.rubric) == 4 and "Vue" in scenario.prompt
    assert {q.difficulty for q in questions} == {"easy"}
