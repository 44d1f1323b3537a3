from __future__ import annotations

"""
Unit tests for the batch domain models and the error taxonomy.
"""

import dataclasses

import pytest

from batchjson.domain.batch_models import (
    BatchResult,
    LoadFailure,
    build_summary,
    create_error_result,
    create_success_result,
)
from batchjson.domain.errors import (
    BatchLoadError,
    DirectoryAccessError,
    FileReadError,
    JsonParseError,
)


def _failure(name: str = "bad.json") -> LoadFailure:
    return LoadFailure(file_name=name, path=f"/d/{name}", kind="JsonParseError", error="x", line=1, column=2)


def test_models_are_immutable():
    result = create_success_result("/d", [1], ["a.json"], [], [], 1.0)

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.ok = False  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        _failure().kind = "FileReadError"  # type: ignore[misc]


def test_build_summary_counters_are_consistent():
    summary = build_summary([{}, []], [_failure()], ["notes.txt", ".x"], 12.34567)

    assert summary == {
        "listed": 5,
        "considered": 3,
        "succeeded": 2,
        "failed": 1,
        "skipped": 2,
        "items": 0,
        "elapsed_ms": 12.346,
        "fail_fast": False,
        "sorted": False,
    }


def test_build_summary_totals_item_counts():
    summary = build_summary([{"a": 1}, [1, 2], "s"], [], [], 1.0, item_counts=[1, 2, None])

    assert summary["items"] == 3


def test_success_result_keeps_item_counts_aligned():
    result = create_success_result("/d", [[1, 2], "s"], ["a.json", "b.json"], [], [], 1.0, item_counts=[2, None])

    assert result.item_counts == [2, None]
    assert len(result.item_counts) == len(result.documents)


def test_success_result_may_carry_failures():
    failures = [_failure()]
    result = create_success_result("/d", ["doc"], ["a.json"], failures, [], 3.0)

    assert result.ok is True
    assert result.error == ""
    assert result.failures == failures


def test_error_result_discards_documents():
    result = create_error_result("boom", "/d", summary_extra={"error_kind": "DirectoryAccessError"})

    assert isinstance(result, BatchResult)
    assert result.ok is False
    assert result.documents == []
    assert result.loaded_files == []
    assert result.summary["error_kind"] == "DirectoryAccessError"


def test_error_hierarchy():
    for cls in (DirectoryAccessError, FileReadError, JsonParseError):
        assert issubclass(cls, BatchLoadError)
        assert cls.kind == cls.__name__


def test_error_messages():
    assert str(FileReadError("/d/a.json", "Permission denied")) == "/d/a.json: Permission denied"
    assert str(JsonParseError("/d/a.json", "Expecting value", 1, 6)) == "/d/a.json:1:6: Expecting value"
    assert str(JsonParseError("/d/a.json", "bad constant")) == "/d/a.json: bad constant"
    assert str(DirectoryAccessError("", "No input directory configured")) == "No input directory configured"
