from __future__ import annotations

"""
Unit tests for the strict JSON parser component.

Verifies:
1. Every JSON value type is accepted at top level.
2. Structural equality of parsed documents (key sets, array order, scalars).
3. Rejections: malformed syntax, BOM, invalid UTF-8, NaN/Infinity.
4. Error positions are 1-based line/column.
"""

import codecs
import json

import pytest

from batchjson.core.pipeline.components.parser import parse_document
from batchjson.domain.errors import JsonParseError


@pytest.mark.parametrize(
    "raw, expected",
    [
        (b'{"x":1}', {"x": 1}),
        (b"[1,2,3]", [1, 2, 3]),
        (b'"hello"', "hello"),
        (b"42", 42),
        (b"-1.5e3", -1500.0),
        (b"true", True),
        (b"false", False),
        (b"null", None),
        (b"  \n\t{}\n", {}),
    ],
)
def test_parse_accepts_any_top_level_value(raw, expected):
    assert parse_document(raw, "doc.json") == expected


def test_parse_preserves_structure_of_serialized_value():
    """A serialized value parses back to a structurally equal document."""
    value = {
        "tracks": [{"name": "Børns", "ms": 215000}, {"name": "日本", "ms": 1}],
        "nested": {"empty": [], "flag": False, "none": None},
        "ratio": 0.25,
    }
    raw = json.dumps(value, ensure_ascii=False).encode("utf-8")

    doc = parse_document(raw, "doc.json")

    assert doc == value
    assert set(doc) == set(value)
    assert [t["name"] for t in doc["tracks"]] == ["Børns", "日本"]


def test_parse_duplicate_keys_keep_last_value():
    assert parse_document(b'{"a": 1, "a": 2}', "dup.json") == {"a": 2}


def test_parse_truncated_object_reports_position():
    """The canonical broken document '{"a":' fails with a position."""
    with pytest.raises(JsonParseError) as exc_info:
        parse_document(b'{"a":', "broken.json")

    err = exc_info.value
    assert err.kind == "JsonParseError"
    assert err.path == "broken.json"
    assert err.line == 1
    assert err.column == 6
    assert "Expecting value" in err.reason


def test_parse_error_on_later_line():
    raw = b'{\n  "a": 1,\n  "b": ]\n}'

    with pytest.raises(JsonParseError) as exc_info:
        parse_document(raw, "doc.json")

    assert exc_info.value.line == 3


def test_parse_empty_content_is_invalid():
    with pytest.raises(JsonParseError) as exc_info:
        parse_document(b"", "empty.json")

    assert exc_info.value.line == 1
    assert exc_info.value.column == 1


def test_parse_rejects_trailing_data():
    with pytest.raises(JsonParseError):
        parse_document(b"{} {}", "two.json")


def test_parse_rejects_byte_order_mark():
    with pytest.raises(JsonParseError) as exc_info:
        parse_document(codecs.BOM_UTF8 + b"{}", "bom.json")

    assert "byte-order mark" in exc_info.value.reason


def test_parse_rejects_invalid_utf8_with_position():
    raw = b'{"a":\n "\xff"}'

    with pytest.raises(JsonParseError) as exc_info:
        parse_document(raw, "latin.json")

    err = exc_info.value
    assert err.reason.startswith("Invalid UTF-8")
    assert (err.line, err.column) == (2, 3)
    assert isinstance(err.__cause__, UnicodeDecodeError)


@pytest.mark.parametrize("literal", [b"NaN", b"Infinity", b"-Infinity", b'{"v": NaN}'])
def test_parse_rejects_non_standard_constants(literal):
    with pytest.raises(JsonParseError) as exc_info:
        parse_document(literal, "nan.json")

    assert "Non-standard JSON constant" in exc_info.value.reason


def test_parse_rejects_excessive_nesting():
    raw = b"[" * 100000 + b"]" * 100000

    with pytest.raises(JsonParseError) as exc_info:
        parse_document(raw, "deep.json")

    assert "too deep" in exc_info.value.reason
