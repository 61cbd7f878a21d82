"\"\"\"Phrase-coverage scoring for short answers and scenarios.\"\"\""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Sequence

from ...schemas import ScenarioQuestion, ShortQuestion
from .base import ScoreResult, response_text


@dataclass
class KeyPointConfig:
    """Share of key points an answer must touch to count as correct."""

    min_ratio: float = 0.5


class KeyPointScorer:
    """Check an answer for the leading word of each key point or rubric line.

    Only the first whitespace-delimited token of each phrase is searched for,
    so phrases that share a leading word ("mention ...") all match together.
    """

    question_types = ("short", "scenario")

    def __init__(self, *, config: KeyPointConfig | None = None) -> None:
        self._config = config or KeyPointConfig()

    def score(self, question: ShortQuestion | ScenarioQuestion, response: Any) -> ScoreResult:
        points = self._points(question)
        text = response_text(response, "text").lower()
        missed = [point for point in points if not self._covers(text, point)]
        matched = len(points) - len(missed)
        required = math.ceil(len(points) * self._config.min_ratio)

        if matched >= required:
            return ScoreResult(correct=True)
        return ScoreResult(correct=False, need=f"Missed key points: {', '.join(missed)}")

    @staticmethod
    def _points(question: ShortQuestion | ScenarioQuestion) -> Sequence[str]:
        if isinstance(question, ShortQuestion):
            return question.key_points
        return question.rubric

    @staticmethod
    def _covers(text: str, point: str) -> bool:
        tokens = point.split()
        if not tokens:
            return True
        return tokens[0].lower() in text
