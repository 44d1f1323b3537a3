from __future__ import annotations

"""
Strict JSON Parsing Component.

Decodes UTF-8 bytes and parses exactly one JSON value. Stricter than the
json module defaults: a byte-order mark and the NaN/Infinity extensions are
rejected, so that a file accepted here is accepted by any standard JSON
parser.
"""

import codecs
import json
from typing import Any, NoReturn, Tuple

from batchjson.domain.errors import JsonParseError


def parse_document(raw: bytes, path: str) -> Any:
    """
    Parse raw file content into a JSON value.

    Any top-level value is accepted (object, array, string, number,
    boolean, null). Duplicate object keys keep the last value.

    Args:
        raw: File content.
        path: Source path, used for error reporting only.

    Returns:
        Any: The parsed document.

    Raises:
        JsonParseError: On undecodable bytes, a byte-order mark, invalid
                        syntax, non-standard constants or excessive nesting.
    """
    if raw.startswith(codecs.BOM_UTF8):
        raise JsonParseError(path, "Unexpected UTF-8 byte-order mark", 1, 1)

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        line, column = _byte_position(raw, e.start)
        raise JsonParseError(path, f"Invalid UTF-8: {e.reason}", line, column) from e

    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise JsonParseError(path, e.msg, e.lineno, e.colno) from e
    except ValueError as e:
        raise JsonParseError(path, str(e)) from e
    except RecursionError as e:
        raise JsonParseError(path, "Document nesting is too deep") from e


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"Non-standard JSON constant '{name}'")


def _byte_position(raw: bytes, offset: int) -> Tuple[int, int]:
    """1-based (line, column) of a byte offset."""
    line = raw.count(b"\n", 0, offset) + 1
    column = offset - (raw.rfind(b"\n", 0, offset) + 1) + 1
    return line, column
