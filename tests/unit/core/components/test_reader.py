from __future__ import annotations

"""
Unit tests for the File Reader component.

Verifies:
1. Raw bytes are returned untouched.
2. Every OS-level failure surfaces as FileReadError with the cause chained.
"""

import os
from unittest.mock import patch

import pytest

from batchjson.core.pipeline.components.reader import read_file_bytes
from batchjson.domain.errors import FileReadError


def test_read_file_bytes_returns_raw_content(tmp_path):
    """Bytes are not decoded or altered by the reader."""
    f = tmp_path / "doc.json"
    payload = '{"name": "café"}'.encode("utf-8")
    f.write_bytes(payload)

    assert read_file_bytes(str(f)) == payload


def test_read_file_bytes_empty_file(tmp_path):
    f = tmp_path / "empty.json"
    f.write_bytes(b"")

    assert read_file_bytes(str(f)) == b""


def test_read_missing_file_raises_file_read_error(tmp_path):
    """A file removed between listing and reading is a FileReadError."""
    missing = tmp_path / "gone.json"

    with pytest.raises(FileReadError) as exc_info:
        read_file_bytes(str(missing))

    assert exc_info.value.path == str(missing)
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_read_directory_raises_file_read_error(tmp_path):
    """Opening a directory is reported, never propagated as a raw OSError."""
    folder = tmp_path / "folder.json"
    folder.mkdir()

    with pytest.raises(FileReadError):
        read_file_bytes(str(folder))


def test_read_permission_denied_is_wrapped(tmp_path):
    """Permission errors carry the OS reason."""
    f = tmp_path / "locked.json"
    f.write_text("{}", encoding="utf-8")

    denied = PermissionError(13, os.strerror(13))
    with patch("builtins.open", side_effect=denied):
        with pytest.raises(FileReadError) as exc_info:
            read_file_bytes(str(f))

    assert exc_info.value.reason == os.strerror(13)
    assert exc_info.value.kind == "FileReadError"
