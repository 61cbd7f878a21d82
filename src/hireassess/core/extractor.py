"\"\"\"Rule-based constraint extraction from free-text hiring notes.\"\"\""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from ..schemas import PreferenceSignals


@dataclass(frozen=True, slots=True)
class SignalRule:
    """One row of the signal table: a field name and how to read it."""

    field: str
    read: Callable[[str], object]


def _matches(pattern: str) -> Callable[[str], bool]:
    compiled = re.compile(pattern)
    return lambda text: compiled.search(text) is not None


_HARD_PATTERN = re.compile(r"hard|advanced")
_EASY_PATTERN = re.compile(r"easy|beginner")
_MIN_DESIGN_PATTERN = re.compile(r"at\s*least\s*(\d+)\s*(system\s*design|design)")


def _difficulty_bias(text: str) -> str:
    if _HARD_PATTERN.search(text):
        return "hard"
    if _EASY_PATTERN.search(text):
        return "easy"
    return "balanced"


def _min_design_count(text: str) -> int:
    match = _MIN_DESIGN_PATTERN.search(text)
    return int(match.group(1)) if match else 0


DEFAULT_SIGNAL_RULES: tuple[SignalRule, ...] = (
    SignalRule("emphasize_problem_solving", _matches(r"problem[-\s]?solving|dsa|algorithms")),
    SignalRule("include_system_design", _matches(r"system\s*design")),
    SignalRule("heavy_on_coding", _matches(r"heavy.*coding|coding[-\s]?heavy")),
    SignalRule("scenario_based", _matches(r"scenario|case study|situational")),
    SignalRule("add_unit_tests", _matches(r"unit test|test case")),
    SignalRule("difficulty_bias", _difficulty_bias),
    SignalRule("min_design_count", _min_design_count),
)


class ConstraintExtractor:
    """Turn a hiring note into ``PreferenceSignals`` via a fixed signal table."""

    def __init__(self, *, rules: tuple[SignalRule, ...] | None = None) -> None:
        self._rules = rules if rules is not None else DEFAULT_SIGNAL_RULES
        unknown = [
            rule.field for rule in self._rules if rule.field not in PreferenceSignals.model_fields
        ]
        if unknown:
            raise ValueError(f"Signal rules target unknown PreferenceSignals fields: {unknown}")

    def extract(self, notes: str | None) -> PreferenceSignals:
        text = notes.lower() if isinstance(notes, str) else ""
        values = {rule.field: rule.read(text) for rule in self._rules}
        return PreferenceSignals(**values)
