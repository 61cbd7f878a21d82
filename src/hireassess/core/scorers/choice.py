"\"\"\"Exact-match scoring for multiple choice questions.\"\"\""

from __future__ import annotations

from typing import Any

from ...schemas import MCQQuestion
from .base import ScoreResult, response_field

REVIEW_FUNDAMENTALS = "Review fundamentals / best practices."


class ChoiceScorer:
    """Correct only when the chosen index equals the answer index."""

    question_types = ("MCQ",)

    def score(self, question: MCQQuestion, response: Any) -> ScoreResult:
        choice = response_field(response, "choice")
        # bool is an int subclass; True must not count as index 1
        correct = (
            isinstance(choice, int)
            and not isinstance(choice, bool)
            and choice == question.answer
        )
        if correct:
            return ScoreResult(correct=True)
        return ScoreResult(correct=False, need=REVIEW_FUNDAMENTALS)
