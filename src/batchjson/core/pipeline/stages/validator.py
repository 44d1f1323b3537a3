from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between untrusted configuration sources (CLI, environment, API
callers) and the engine. Merges onto the domain defaults and coerces every
field to the type the engine expects.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from batchjson.domain.config import get_default_config

logger = logging.getLogger(__name__)

_TRUE_WORDS = ("true", "yes", "1")
_FALSE_WORDS = ("false", "no", "0")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    path = merged.get("input_path")
    if path is None:
        merged["input_path"] = ""
    elif isinstance(path, str):
        merged["input_path"] = path.strip()
    else:
        _reject("input_path", "str", path, warnings, strict)
        merged["input_path"] = defaults["input_path"]

    for field in ("sort_entries", "fail_fast"):
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    exclude = _as_list_str(merged.get("exclude_patterns"), "exclude_patterns", warnings, strict)
    # An explicitly empty exclusion list is meaningful
    merged["exclude_patterns"] = exclude if exclude is not None else defaults["exclude_patterns"]

    exts = _as_list_str(merged.get("extensions"), "extensions", warnings, strict)
    merged["extensions"] = _normalize_extensions(exts or [], warnings, strict) or defaults["extensions"]

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _reject(field: str, expected: str, value: Any, warnings: List[str], strict: bool) -> None:
    msg = f"Invalid field '{field}': expected {expected}, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Accept real booleans; yes/no style strings are coerced in lenient mode."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if isinstance(value, str) and not strict:
        s = value.strip().lower()
        if s in _TRUE_WORDS or s in _FALSE_WORDS:
            warnings.append(f"Field '{field}' converted from '{value}' to bool.")
            return s in _TRUE_WORDS

    _reject(field, "bool", value, warnings, strict)
    return fallback


def _as_list_str(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[List[str]]:
    """
    Coerce to a list of stripped strings.

    Returns None when the value is unusable and the default applies. CSV
    strings are split in lenient mode.
    """
    if value is None:
        return None

    if isinstance(value, str) and not strict:
        warnings.append(f"Field '{field}' converted from CSV string to list.")
        return [x.strip() for x in value.split(",") if x.strip()] or None

    if not isinstance(value, (list, tuple)):
        _reject(field, "list[str]", value, warnings, strict)
        return None

    out: List[str] = []
    for i, item in enumerate(value):
        if not isinstance(item, str):
            msg = f"Invalid item in '{field}[{i}]': expected str."
            if strict:
                raise TypeError(msg)
            warnings.append(f"{msg} Item discarded.")
        elif item.strip():
            out.append(item.strip())
    return out


def _normalize_extensions(exts: List[str], warnings: List[str], strict: bool) -> List[str]:
    """Dot-prefix, lower-case and de-duplicate extensions."""
    out: List[str] = []
    for ext in exts:
        e = ext.lower()
        if not e.startswith("."):
            if strict:
                raise ValueError(f"Invalid extension '{ext}': must start with '.'.")
            warnings.append(f"Extension '{ext}' corrected to '.{e}'.")
            e = "." + e
        if e not in out:
            out.append(e)
    return out
