"\"\"\"Static heuristic judging for coding answers.\"\"\""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Sequence

from ...schemas import CodingQuestion, CodingTestCase
from .base import CodeJudge, ScoreResult, response_text

CODING_GUIDANCE = "Coding: ensure normalization, reversal, and comparison logic."


@dataclass
class HeuristicJudgeConfig:
    """Token patterns that must all appear in a palindrome-style answer."""

    normalization_patterns: list[str] = field(
        default_factory=lambda: [r"replace", r"\[\^?(?:a-z|A-Z|0-9)", r"\\W", r"isalnum"]
    )
    casefold_patterns: list[str] = field(
        default_factory=lambda: [r"toLowerCase", r"\.lower\(", r"\.casefold\("]
    )
    reversal_patterns: list[str] = field(
        default_factory=lambda: [r"reverse\(", r"reversed\(", r"\[::-1\]"]
    )


class HeuristicCodeJudge:
    """Keyword-sniffing stand-in for a sandboxed test runner.

    The reference cases are accepted for interface compatibility but never
    executed; an answer passes when it shows a normalization step, a case
    folding call and a reversal.
    """

    def __init__(self, *, config: HeuristicJudgeConfig | None = None) -> None:
        self._config = config or HeuristicJudgeConfig()
        self._predicates = [
            self._compile(self._config.normalization_patterns),
            self._compile(self._config.casefold_patterns),
            self._compile(self._config.reversal_patterns),
        ]

    def judge(self, code: str, tests: Sequence[CodingTestCase]) -> bool:
        if not code:
            return False
        return all(pattern.search(code) for pattern in self._predicates)

    @staticmethod
    def _compile(patterns: Sequence[str]) -> re.Pattern[str]:
        return re.compile("|".join(f"(?:{pattern})" for pattern in patterns), re.IGNORECASE)


class CodingScorer:
    """Delegate coding correctness to a pluggable judge."""

    question_types = ("coding",)

    def __init__(self, *, judge: CodeJudge | None = None) -> None:
        self._judge = judge or HeuristicCodeJudge()

    def score(self, question: CodingQuestion, response: Any) -> ScoreResult:
        code = response_text(response, "code")
        if self._judge.judge(code, question.tests):
            return ScoreResult(correct=True)
        return ScoreResult(correct=False, need=CODING_GUIDANCE)
