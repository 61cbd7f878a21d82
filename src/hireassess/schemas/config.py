"\"\"\"Pydantic configuration schema for YAML settings.\"\"\""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError


class CoreConfig(BaseModel):
    strength_threshold: float | None = None
    weakness_threshold: float | None = None


class ScorerConfig(BaseModel):
    key_points: dict[str, Any] | None = None
    coding: dict[str, Any] | None = None


class StorageConfig(BaseModel):
    path: str | None = None


class AppConfig(BaseModel):
    core: CoreConfig = Field(default_factory=CoreConfig)
    scorers: ScorerConfig = Field(default_factory=ScorerConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        core_settings = self.core.model_dump(exclude_none=True)
        if core_settings:
            settings["core"] = core_settings
        scorer_settings = self.scorers.model_dump(exclude_none=True)
        if scorer_settings:
            settings["scorers"] = scorer_settings
        storage_settings = self.storage.model_dump(exclude_none=True)
        if storage_settings:
            settings["storage"] = storage_settings
        return settings


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
