"\"\"\"Scoring of candidate responses into a per-skill report.\"\"\""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping

from ..schemas import Assessment, Finding, Report, SkillTally
from .generator import SYSTEM_DESIGN_SKILL
from .scorers import ChoiceScorer, CodingScorer, KeyPointScorer, Scorer, ScoreResult

SYSTEM_DESIGN_PRACTICE = (
    "Practice system design: load balancing, caching, queues, and observability."
)
TIMED_DRILLS = "Review fundamentals and do targeted practice with timed drills."
LEVERAGE_STRENGTHS = "Leverage strengths to mentor peers or tackle advanced problems."
UNSCORED = "No scorer available for {qtype} answers; review manually."


class ResponseEvaluator:
    """Score each question with its type's scorer and aggregate per skill."""

    DEFAULT_STRENGTH_THRESHOLD = 0.7
    DEFAULT_WEAKNESS_THRESHOLD = 0.5

    def __init__(
        self,
        scorers: Iterable[Scorer] | None = None,
        *,
        strength_threshold: float | None = None,
        weakness_threshold: float | None = None,
    ) -> None:
        scorer_list = list(scorers) if scorers is not None else [
            ChoiceScorer(),
            KeyPointScorer(),
            CodingScorer(),
        ]
        self._scorers = {
            qtype: scorer for scorer in scorer_list for qtype in scorer.question_types
        }
        self._strength_threshold = (
            self.DEFAULT_STRENGTH_THRESHOLD if strength_threshold is None else strength_threshold
        )
        self._weakness_threshold = (
            self.DEFAULT_WEAKNESS_THRESHOLD if weakness_threshold is None else weakness_threshold
        )

    def evaluate(
        self,
        assessment: Assessment,
        responses: Mapping[str, Any] | None = None,
    ) -> Report:
        answers = responses if isinstance(responses, Mapping) else {}
        per_skill: dict[str, SkillTally] = {}
        findings: list[Finding] = []
        correct_total = 0

        for question in assessment.questions:
            scorer = self._scorers.get(question.type)
            if scorer is None:
                result = ScoreResult(correct=False, need=UNSCORED.format(qtype=question.type))
            else:
                result = scorer.score(question, answers.get(question.id))

            tally = per_skill.setdefault(question.skill, SkillTally())
            tally.total += 1
            if result.correct:
                tally.correct += 1
                correct_total += 1
            else:
                findings.append(Finding(question_id=question.id, need=result.need or ""))

        strengths = [
            skill for skill, tally in per_skill.items() if tally.ratio >= self._strength_threshold
        ]
        weaknesses = [
            skill for skill, tally in per_skill.items() if tally.ratio < self._weakness_threshold
        ]

        return Report(
            overall_score=self._overall_score(correct_total, len(assessment.questions)),
            per_skill=per_skill,
            strengths=strengths,
            weaknesses=weaknesses,
            findings=findings,
            recommendations=self._recommend(strengths, weaknesses),
        )

    @staticmethod
    def _overall_score(correct: int, total: int) -> int:
        if total == 0:
            return 0
        # half-up rounding, not banker's rounding
        return int(math.floor(100 * correct / total + 0.5))

    @staticmethod
    def _recommend(strengths: list[str], weaknesses: list[str]) -> list[str]:
        recommendations: list[str] = []
        if SYSTEM_DESIGN_SKILL in weaknesses:
            recommendations.append(SYSTEM_DESIGN_PRACTICE)
        if weaknesses:
            recommendations.append(TIMED_DRILLS)
        if strengths:
            recommendations.append(LEVERAGE_STRENGTHS)
        return recommendations
