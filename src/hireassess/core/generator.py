"\"\"\"Deterministic question generation from a blueprint.\"\"\""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from ..schemas import (
    QUESTION_TYPES,
    Blueprint,
    CodingQuestion,
    CodingTestCase,
    Difficulty,
    MCQQuestion,
    Question,
    ScenarioQuestion,
    ShortQuestion,
)

SYSTEM_DESIGN_SKILL = "system-design"
DEFAULT_SKILL = "general"

# (bias, is_coding) -> difficulty
_DIFFICULTY_POLICY: dict[tuple[str, bool], Difficulty] = {
    ("hard", True): "hard",
    ("hard", False): "medium",
    ("easy", True): "easy",
    ("easy", False): "easy",
    ("balanced", True): "medium",
    ("balanced", False): "easy",
}


def pick_difficulty(question_type: str, bias: str) -> Difficulty:
    """Map a question type and difficulty bias to a difficulty level."""
    key = (bias if bias in ("hard", "easy") else "balanced", question_type == "coding")
    return _DIFFICULTY_POLICY[key]


@dataclass
class GeneratorConfig:
    """Per-type time estimates in minutes."""

    time_estimates: dict[str, int] = field(
        default_factory=lambda: {"MCQ": 2, "short": 3, "coding": 10, "scenario": 5}
    )
    system_design_time: int = 15


def _mcq_template(skill: str) -> dict[str, Any]:
    return {
        "prompt": f"Which of the following is TRUE about {skill}?",
        "options": [
            "It is always synchronous by default.",
            "Best practices include modularization and testing.",
            "It guarantees O(1) memory usage.",
            "It cannot be deployed to production.",
        ],
        "answer": 1,
    }


def _short_template(skill: str) -> dict[str, Any]:
    return {
        "prompt": f"Briefly explain a common pitfall in {skill} and how to avoid it.",
        "key_points": ["mention trade-offs", "mention testing", "mention performance"],
    }


def _coding_template(skill: str) -> dict[str, Any]:
    return {
        "prompt": (
            "Write a function to check if a string is a palindrome "
            "(ignore case & non-alphanumerics)."
        ),
        "starter_code": (
            "function isPalindrome(s){\n  // your code\n}\nmodule.exports = isPalindrome;"
        ),
        "tests": [
            CodingTestCase(input="A man, a plan, a canal: Panama", expected_output=True),
            CodingTestCase(input="race a car", expected_output=False),
        ],
        "evaluator_hint": "strip non-alphanumeric, toLowerCase, compare reversed",
    }


def _scenario_template(skill: str) -> dict[str, Any]:
    return {
        "prompt": (
            f"Your team's {skill} service spikes latency under load. "
            "Outline 3 likely causes and 3 concrete mitigations."
        ),
        "rubric": [
            "Root causes identified (3+)",
            "Mitigations actionable and relevant",
            "Mentions monitoring/observability",
            "Considers trade-offs",
        ],
    }


_TEMPLATES: dict[str, tuple[type, Callable[[str], dict[str, Any]]]] = {
    "MCQ": (MCQQuestion, _mcq_template),
    "short": (ShortQuestion, _short_template),
    "coding": (CodingQuestion, _coding_template),
    "scenario": (ScenarioQuestion, _scenario_template),
}

SYSTEM_DESIGN_RUBRIC: tuple[str, ...] = (
    "Scalability & load distribution",
    "Data modeling & storage choice",
    "Caching strategy",
    "Asynch processing / queues",
    "Consistency & failure handling",
    "Observability",
)


class QuestionGenerator:
    """Expand a blueprint into an ordered, id-tagged question list."""

    def __init__(self, *, config: GeneratorConfig | None = None) -> None:
        self._config = config or GeneratorConfig()

    def generate(self, blueprint: Blueprint) -> list[Question]:
        skills = blueprint.stack or [DEFAULT_SKILL]
        requested = set(blueprint.types) if blueprint.types else set(QUESTION_TYPES)
        ordered_types = [qtype for qtype in QUESTION_TYPES if qtype in requested]
        signals = blueprint.nl_notes_parsed

        drafts: list[tuple[type, dict[str, Any]]] = []
        for skill in skills:
            for qtype in ordered_types:
                model, template = _TEMPLATES[qtype]
                fields = {
                    "skill": skill,
                    "difficulty": pick_difficulty(qtype, signals.difficulty_bias),
                    "time": self._config.time_estimates[qtype],
                    **template(skill),
                }
                drafts.append((model, fields))

        if signals.include_system_design or signals.min_design_count > 0:
            for _ in range(max(1, signals.min_design_count)):
                drafts.append((ScenarioQuestion, self._system_design_fields(blueprint.role)))

        return [
            model(id=f"Q{index}", **fields)
            for index, (model, fields) in enumerate(drafts, start=1)
        ]

    def _system_design_fields(self, role: str | None) -> dict[str, Any]:
        return {
            "skill": SYSTEM_DESIGN_SKILL,
            "difficulty": "hard",
            "time": self._config.system_design_time,
            "prompt": (
                f"Design a scalable {role or 'service'} that handles 10k RPS. "
                "Cover data model, caching, queues, consistency, and monitoring."
            ),
            "rubric": list(SYSTEM_DESIGN_RUBRIC),
        }
