from __future__ import annotations

"""
Domain Constants.

Centralizes the static values shared by the loader, the configuration layer
and the interfaces: timing labels, entry filtering defaults and environment
variable names.
"""

from typing import List

# Environment variable consulted when no input directory is given explicitly
INPUT_DIR_ENV_VAR = "BATCHJSON_INPUT_DIR"

# -----------------------------------------------------------------------------
# TIMING LABELS
# -----------------------------------------------------------------------------

LISTING_TIMING_LABEL = "LISTING FILES"
BATCH_TIMING_LABEL = "PARSING FILES"
FILE_TIMING_PREFIX = "    - "

# -----------------------------------------------------------------------------
# ENTRY FILTERING DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_EXTENSIONS: List[str] = [".json"]

# Hidden files (editor swap files, .DS_Store, ...) are never documents
DEFAULT_EXCLUDE_PATTERNS: List[str] = [r"^\."]

