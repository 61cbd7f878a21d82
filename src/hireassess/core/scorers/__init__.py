"\"\"\"Per-type answer scorers for the response evaluator.\"\"\""

from .base import CodeJudge, Scorer, ScoreResult
from .choice import ChoiceScorer
from .coding import CodingScorer, HeuristicCodeJudge, HeuristicJudgeConfig
from .key_points import KeyPointConfig, KeyPointScorer

__all__ = [
    "CodeJudge",
    "Scorer",
    "ScoreResult",
    "ChoiceScorer",
    "CodingScorer",
    "HeuristicCodeJudge",
    "HeuristicJudgeConfig",
    "KeyPointConfig",
    "KeyPointScorer",
]
