"\"\"\"Pydantic schema definitions for blueprints, questions and reports.\"\"\""

from __future__ import annotations

from .assessment import Assessment, Finding, Report, SkillTally, SubmissionRecord
from .blueprint import Blueprint, DifficultyBias, PreferenceSignals
from .question import (
    QUESTION_TYPES,
    CodingQuestion,
    CodingTestCase,
    Difficulty,
    MCQQuestion,
    Question,
    QuestionType,
    ScenarioQuestion,
    ShortQuestion,
    parse_question,
)

__all__ = [
    "Assessment",
    "Blueprint",
    "CodingQuestion",
    "CodingTestCase",
    "Difficulty",
    "DifficultyBias",
    "Finding",
    "MCQQuestion",
    "PreferenceSignals",
    "Question",
    "QuestionType",
    "QUESTION_TYPES",
    "Report",
    "ScenarioQuestion",
    "ShortQuestion",
    "SkillTally",
    "SubmissionRecord",
    "parse_question",
]
