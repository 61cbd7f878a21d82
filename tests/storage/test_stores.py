from __future__ import annotations

import json
from pathlib import Path

import pytest

from hireassess.storage import (
    AssessmentStore,
    InMemoryAssessmentStore,
    JsonFileAssessmentStore,
)


def test_json_store_creates_file_on_first_read(tmp_path: Path):
    path = tmp_path / "nested" / "store.json"
    store = JsonFileAssessmentStore(path)

    assert store.get("tests", "T1") is None
    assert json.loads(path.read_text(encoding="utf-8")) == {"tests": {}, "results": {}}


def test_json_store_round_trips_records(tmp_path: Path):
    path = tmp_path / "store.json"
    store = JsonFileAssessmentStore(path)

    store.put("tests", "T1", {"id": "T1", "questions": []})
    store.put("results", "T1", {"report": {"overallScore": 0}})

    reopened = JsonFileAssessmentStore(path)
    assert reopened.get("tests", "T1") == {"id": "T1", "questions": []}
    assert reopened.get("results", "T1") == {"report": {"overallScore": 0}}


def test_json_store_rejects_corrupt_file(tmp_path: Path):
    path = tmp_path / "store.json"
    path.write_text("{broken", encoding="utf-8")

    with pytest.raises(ValueError):
        JsonFileAssessmentStore(path).get("tests", "T1")


def test_in_memory_store_isolates_callers():
    store = InMemoryAssessmentStore()
    record = {"id": "T1", "questions": []}
    store.put("tests", "T1", record)

    record["questions"].append("mutated")
    fetched = store.get("tests", "T1")

    assert fetched == {"id": "T1", "questions": []}
    assert isinstance(store, AssessmentStore)
    assert store.get("results", "T1") is None
