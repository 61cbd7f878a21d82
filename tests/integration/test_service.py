from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator

import pytest

from hireassess.container import create_container
from hireassess.core import BlueprintCompiler, QuestionGenerator, ResponseEvaluator
from hireassess.service import AssessmentService, InvalidInput, NotFound
from hireassess.storage import InMemoryAssessmentStore, JsonFileAssessmentStore


def sequential_ids() -> Iterator[str]:
    index = 0
    while True:
        index += 1
        yield f"T{index:06d}"


def build_service(store=None) -> AssessmentService:
    ids = sequential_ids()
    return AssessmentService(
        compiler=BlueprintCompiler(),
        generator=QuestionGenerator(),
        evaluator=ResponseEvaluator(),
        store=store if store is not None else InMemoryAssessmentStore(),
        id_factory=lambda: next(ids),
        clock=lambda: "2024-06-01T09:00:00+00:00",
    )


def test_generate_test_assigns_id_and_persists():
    service = build_service()
    blueprint = service.create_blueprint(
        role="Frontend Engineer",
        stack=["React"],
        types=["MCQ"],
        notes="at least 2 system design",
    )

    assessment = service.generate_test(blueprint)

    assert assessment.id == "T000001"
    assert assessment.created_at == "2024-06-01T09:00:00+00:00"
    assert len(assessment.questions) == 3
    assert assessment.total_time == 32
    assert service.fetch_test("T000001") == assessment


def test_generate_test_accepts_json_blueprint_mapping():
    service = build_service()

    assessment = service.generate_test({"stack": ["Go"], "types": ["short"]})

    assert [q.skill for q in assessment.questions] == ["Go"]
    assert assessment.blueprint.nl_notes_parsed.difficulty_bias == "balanced"


def test_generate_test_requires_blueprint():
    with pytest.raises(InvalidInput):
        build_service().generate_test(None)


def test_generate_test_rejects_non_mapping_blueprint():
    with pytest.raises(InvalidInput):
        build_service().generate_test(["React"])  # type: ignore[arg-type]


def test_submit_answers_scores_and_stores_result():
    service = build_service()
    assessment = service.generate_test(service.create_blueprint(stack=["React"], types=["MCQ"]))

    report = service.submit_answers(assessment.id, {"Q1": {"choice": 1}})

    assert report.overall_score == 100
    stored = service.fetch_result(assessment.id)
    assert stored.report == report
    assert stored.submitted_at == "2024-06-01T09:00:00+00:00"


def test_submit_answers_with_no_responses_scores_zero():
    service = build_service()
    assessment = service.generate_test(service.create_blueprint())

    report = service.submit_answers(assessment.id, None)

    assert report.overall_score == 0
    assert len(report.findings) == 4


def test_unknown_ids_raise_not_found():
    service = build_service()

    with pytest.raises(NotFound) as exc:
        service.submit_answers("T-missing", {})
    assert "T-missing" in str(exc.value)

    with pytest.raises(NotFound):
        service.fetch_test("T-missing")

    with pytest.raises(NotFound):
        service.fetch_result("T-missing")


def test_service_works_against_json_file_store(tmp_path: Path):
    path = tmp_path / "store.json"
    service = build_service(store=JsonFileAssessmentStore(path))

    assessment = service.generate_test(service.create_blueprint(stack=["Python"]))
    service.submit_answers(assessment.id, {"Q1": {"choice": 1}})

    data = json.loads(path.read_text(encoding="utf-8"))
    assert list(data["tests"]) == [assessment.id]
    assert data["tests"][assessment.id]["questions"][0]["id"] == "Q1"
    assert data["results"][assessment.id]["report"]["overallScore"] == 25
    assert data["results"][assessment.id]["submittedAt"] == "2024-06-01T09:00:00+00:00"


def test_container_service_generates_default_ids():
    service = create_container().service()

    assessment = service.generate_test(service.create_blueprint())

    assert assessment.id.startswith("T")
    assert len(assessment.id) == 7
    assert assessment.created_at


@pytest.mark.parametrize(
    "blueprint",
    [
        {"stack": ["React"], "duration": "sixty"},
        {"stack": ["React"], "role": 42},
        {"stack": ["React", None]},
        {"stack": "React"},
        {"stack": ["React"], "nlNotesParsed": {"minDesignCount": -1}},
    ],
)
def test_generate_test_defaults_malformed_blueprint_fields(blueprint):
    service = build_service()

    assessment = service.generate_test(blueprint)

    assert assessment.blueprint.stack == ["React"]
    assert [q.skill for q in assessment.questions] == ["React"] * 4
    assert assessment.blueprint.nl_notes_parsed.min_design_count == 0
    assert service.fetch_test(assessment.id) == assessment


def test_generate_test_keeps_well_formed_fields_beside_malformed_ones():
    service = build_service()

    assessment = service.generate_test(
        {"role": 42, "duration": "sixty", "stack": ["Go"], "types": ["MCQ"]}
    )

    assert assessment.blueprint.role == "42"
    assert assessment.blueprint.duration is None
    assert [q.type for q in assessment.questions] == ["MCQ"]


def test_generate_test_from_empty_mapping_uses_defaults():
    service = build_service()

    assessment = service.generate_test({})

    assert [q.type for q in assessment.questions] == ["MCQ", "short", "coding", "scenario"]
    assert {q.skill for q in assessment.questions} == {"general"}


def test_generate_test_reads_snake_case_signals():
    service = build_service()

    assessment = service.generate_test(
        {"stack": ["Go"], "types": ["MCQ"], "nl_notes_parsed": {"min_design_count": 2}}
    )

    assert [q.skill for q in assessment.questions] == ["Go", "system-design", "system-design"]
