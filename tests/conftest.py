from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries and JSON directories.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Mirrors the keys of 'batchjson.domain.config.get_default_config'.
    """
    return {
        "input_path": str(tmp_path),
        "extensions": [".json"],
        "exclude_patterns": [r"^\."],
        "sort_entries": True,
        "fail_fast": False,
    }


@pytest.fixture
def json_dir(tmp_path: Path) -> Path:
    """
    Directory with three valid documents.

    /data
      a.json  {"x": 1}
      b.json  [1, 2, 3]
      c.json  "hello"
    """
    root = tmp_path / "data"
    root.mkdir()
    (root / "a.json").write_text('{"x":1}', encoding="utf-8")
    (root / "b.json").write_text("[1,2,3]", encoding="utf-8")
    (root / "c.json").write_text('"hello"', encoding="utf-8")
    return root


@pytest.fixture
def mixed_dir(json_dir: Path) -> Path:
    """
    json_dir plus one invalid document and entries the policy skips.

    /data
      a.json, b.json, c.json   valid
      broken.json              {"a":
      notes.txt                wrong extension
      .hidden.json             dot-file
      nested.json/             directory with a JSON-looking name
    """
    (json_dir / "broken.json").write_text('{"a":', encoding="utf-8")
    (json_dir / "notes.txt").write_text("not a document", encoding="utf-8")
    (json_dir / ".hidden.json").write_text("{}", encoding="utf-8")
    (json_dir / "nested.json").mkdir()
    return json_dir
