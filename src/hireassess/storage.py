"\"\"\"Record stores for generated assessments and submission results.\"\"\""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Literal, Protocol, runtime_checkable

Collection = Literal["tests", "results"]
COLLECTIONS: tuple[Collection, ...] = ("tests", "results")


@runtime_checkable
class AssessmentStore(Protocol):
    """Key-value record store keyed by opaque id.

    ``get`` returns ``None`` for unknown ids. Read-modify-write cycles are not
    atomic across concurrent writers.
    """

    def get(self, collection: Collection, record_id: str) -> dict[str, Any] | None:
        """Return the stored record or ``None``."""

    def put(self, collection: Collection, record_id: str, record: dict[str, Any]) -> None:
        """Insert or replace a record."""


class InMemoryAssessmentStore:
    """Process-local store, mainly for tests and embedding."""

    def __init__(self) -> None:
        self._data: dict[str, dict[str, dict[str, Any]]] = {name: {} for name in COLLECTIONS}

    def get(self, collection: Collection, record_id: str) -> dict[str, Any] | None:
        record = self._data[collection].get(record_id)
        return copy.deepcopy(record) if record is not None else None

    def put(self, collection: Collection, record_id: str, record: dict[str, Any]) -> None:
        self._data[collection][record_id] = copy.deepcopy(record)


class JsonFileAssessmentStore:
    """Single JSON document holding ``{"tests": {...}, "results": {...}}``."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, collection: Collection, record_id: str) -> dict[str, Any] | None:
        return self._load()[collection].get(record_id)

    def put(self, collection: Collection, record_id: str, record: dict[str, Any]) -> None:
        data = self._load()
        data[collection][record_id] = record
        self._save(data)

    def _load(self) -> dict[str, dict[str, Any]]:
        if not self._path.exists():
            self._save({name: {} for name in COLLECTIONS})
        with self._path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid store JSON in {self._path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Store file {self._path} must contain a JSON object")
        for name in COLLECTIONS:
            data.setdefault(name, {})
        return data

    def _save(self, data: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(data, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
