"\"\"\"Core assessment engine components.\"\"\""

from __future__ import annotations

from .compiler import BlueprintCompiler
from .evaluation import ResponseEvaluator
from .extractor import DEFAULT_SIGNAL_RULES, ConstraintExtractor, SignalRule
from .generator import GeneratorConfig, QuestionGenerator, pick_difficulty
from .scorers import (
    ChoiceScorer,
    CodeJudge,
    CodingScorer,
    HeuristicCodeJudge,
    HeuristicJudgeConfig,
    KeyPointConfig,
    KeyPointScorer,
    ScoreResult,
    Scorer,
)


__all__ = [
    "BlueprintCompiler",
    "ChoiceScorer",
    "CodeJudge",
    "CodingScorer",
    "ConstraintExtractor",
    "DEFAULT_SIGNAL_RULES",
    "GeneratorConfig",
    "HeuristicCodeJudge",
    "HeuristicJudgeConfig",
    "KeyPointConfig",
    "KeyPointScorer",
    "QuestionGenerator",
    "ResponseEvaluator",
    "ScoreResult",
    "Scorer",
    "SignalRule",
    "pick_difficulty",
]
