from __future__ import annotations

"""
Entry Filtering Engine.

Regex-based exclusion and extension matching for directory entries. Pure
name-based checks; the regular-file test lives with the scanner because it
needs the filesystem.
"""

import logging
import os
import re
from typing import List

from batchjson.domain.constants import DEFAULT_EXCLUDE_PATTERNS, DEFAULT_EXTENSIONS

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CONFIGURATION DEFAULTS
# -----------------------------------------------------------------------------

def default_extensions() -> List[str]:
    """
    Get the default list of document extensions.

    Returns:
        List[str]: [".json"]
    """
    return list(DEFAULT_EXTENSIONS)


def default_exclude_patterns() -> List[str]:
    """
    Get the default exclusion regex list (hidden entries).

    Returns:
        List[str]: Raw regex strings.
    """
    return list(DEFAULT_EXCLUDE_PATTERNS)

# -----------------------------------------------------------------------------
# PATTERN COMPILATION AND MATCHING
# -----------------------------------------------------------------------------

def compile_patterns(patterns: List[str]) -> List[re.Pattern]:
    """
    Transform raw regex strings into compiled Pattern objects.

    Malformed expressions are dropped with a warning; the batch still runs.

    Args:
        patterns: List of raw regex strings.

    Returns:
        List[re.Pattern]: Compiled regex objects.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error as e:
            logger.warning(f"Ignoring invalid exclude pattern '{p}': {e}")
    return compiled


def matches_any(name: str, compiled_patterns: List[re.Pattern]) -> bool:
    """True if the name matches at least one compiled pattern."""
    return any(rx.search(name) for rx in compiled_patterns)


def has_extension(name: str, extensions: List[str]) -> bool:
    """
    Case-insensitive extension check.

    Args:
        name: Entry name.
        extensions: Dot-prefixed, lower-case extensions.

    Returns:
        bool: True if the name ends with one of the extensions.
    """
    _, ext = os.path.splitext(name)
    return ext.lower() in extensions
