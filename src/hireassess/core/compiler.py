"\"\"\"Blueprint compilation from explicit fields and a free-text note.\"\"\""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from ..schemas import Blueprint, PreferenceSignals
from .extractor import ConstraintExtractor


class BlueprintCompiler:
    """Combine explicit hiring fields with extracted note preferences.

    Empty ``stack``/``types`` are kept empty; the generator resolves their
    defaults so the blueprint records exactly what the caller asked for.
    Malformed optional fields fall back to ``None`` instead of raising.
    """

    def __init__(self, *, extractor: ConstraintExtractor | None = None) -> None:
        self._extractor = extractor or ConstraintExtractor()

    def compile(
        self,
        *,
        role: str | None = None,
        stack: Iterable[str] | None = None,
        experience: str | None = None,
        types: Iterable[str] | None = None,
        duration: int | None = None,
        notes: str | None = None,
    ) -> Blueprint:
        return Blueprint(
            role=_optional_text(role),
            stack=_text_list(stack),
            experience=_optional_text(experience),
            types=_text_list(types),
            duration=_optional_minutes(duration),
            nl_notes_parsed=self._extractor.extract(notes),
        )

    @staticmethod
    def restore(raw: Mapping[str, Any]) -> Blueprint:
        """Rebuild a blueprint from a JSON mapping, defaulting malformed fields."""
        return Blueprint(
            role=_optional_text(_pick(raw, "role")),
            stack=_text_list(_pick(raw, "stack")),
            experience=_optional_text(_pick(raw, "experience")),
            types=_text_list(_pick(raw, "types")),
            duration=_optional_minutes(_pick(raw, "duration")),
            nl_notes_parsed=_signals(_pick(raw, "nlNotesParsed", "nl_notes_parsed")),
        )


def _pick(raw: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in raw:
            return raw[key]
    return None


def _signals(value: Any) -> PreferenceSignals:
    if isinstance(value, PreferenceSignals):
        return value
    if not isinstance(value, Mapping):
        return PreferenceSignals()
    try:
        return PreferenceSignals.model_validate(dict(value))
    except ValidationError:
        return PreferenceSignals()


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _text_list(values: Iterable[Any] | None) -> list[str]:
    if values is None:
        return []
    if isinstance(values, str):
        return [values] if values else []
    if isinstance(values, Mapping) or not isinstance(values, Iterable):
        return []
    return [str(value) for value in values if value is not None]


def _optional_minutes(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
