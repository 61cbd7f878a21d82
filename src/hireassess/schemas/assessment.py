from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .blueprint import Blueprint
from .question import Question


class Assessment(BaseModel):
    """Generated assessment: blueprint plus its ordered questions."""

    id: str
    blueprint: Blueprint
    questions: list[Question] = Field(default_factory=list)
    created_at: str

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @property
    def total_time(self) -> int:
        return sum(question.time for question in self.questions)

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class SkillTally(BaseModel):
    """Correct/total counters for one skill bucket."""

    correct: int = 0
    total: int = 0

    model_config = ConfigDict(extra="forbid")

    @property
    def ratio(self) -> float:
        if self.total == 0:
            return 0.0
        return self.correct / self.total


class Finding(BaseModel):
    """Remediation note for an incorrect answer."""

    question_id: str
    need: str

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Report(BaseModel):
    """Per-skill breakdown of a scored submission."""

    overall_score: int = Field(default=0, ge=0, le=100)
    per_skill: dict[str, SkillTally] = Field(default_factory=dict)
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    findings: list[Finding] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class SubmissionRecord(BaseModel):
    """Stored outcome of an answered assessment."""

    report: Report
    submitted_at: str

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
