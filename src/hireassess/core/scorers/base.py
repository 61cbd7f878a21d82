from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Sequence, runtime_checkable

from ...schemas import CodingTestCase


@dataclass(slots=True)
class ScoreResult:
    """Outcome of scoring a single answer."""

    correct: bool
    need: str | None = None


@runtime_checkable
class Scorer(Protocol):
    """Scorer contract for one or more question types."""

    question_types: tuple[str, ...]

    def score(self, question: Any, response: Any) -> ScoreResult:
        """Return the scoring outcome for a single answer."""


@runtime_checkable
class CodeJudge(Protocol):
    """Correctness decision for a coding answer."""

    def judge(self, code: str, tests: Sequence[CodingTestCase]) -> bool:
        """Return True when ``code`` is accepted against ``tests``."""


def response_field(response: Any, key: str) -> Any:
    """Read ``key`` from a response payload, tolerating malformed payloads."""
    if not isinstance(response, dict):
        return None
    return response.get(key)


def response_text(response: Any, key: str) -> str:
    value = response_field(response, key)
    return value if isinstance(value, str) else ""
