"\"\"\"Blueprint and free-text preference schemas.\"\"\""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DifficultyBias = Literal["easy", "balanced", "hard"]


class PreferenceSignals(BaseModel):
    """Structured preferences detected in a hiring note."""

    emphasize_problem_solving: bool = False
    include_system_design: bool = False
    heavy_on_coding: bool = False
    scenario_based: bool = False
    add_unit_tests: bool = False
    difficulty_bias: DifficultyBias = "balanced"
    min_design_count: int = Field(default=0, ge=0)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class Blueprint(BaseModel):
    """Compiled assessment specification."""

    role: str | None = None
    stack: list[str] = Field(default_factory=list)
    experience: str | None = None
    types: list[str] = Field(default_factory=list)
    duration: int | None = None
    nl_notes_parsed: PreferenceSignals = Field(default_factory=PreferenceSignals)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )
