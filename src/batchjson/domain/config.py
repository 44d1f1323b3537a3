from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration of a batch and the layering of
configuration sources: built-in defaults, then the environment. CLI
overrides are merged on top by the interface layer.
"""

import logging
import os
from typing import Any, Dict, Mapping, Optional

from batchjson.domain.constants import (
    DEFAULT_EXCLUDE_PATTERNS,
    DEFAULT_EXTENSIONS,
    INPUT_DIR_ENV_VAR,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    There is no default input directory: an empty
    'input_path' must be filled by the environment or the CLI.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": "",

        # Entry Policy
        "extensions": list(DEFAULT_EXTENSIONS),
        "exclude_patterns": list(DEFAULT_EXCLUDE_PATTERNS),
        "sort_entries": False,

        # Failure Policy
        "fail_fast": False,
    }


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Retrieve the defaults with environment overrides applied.

    Args:
        environ: Mapping to read variables from. Defaults to os.environ.

    Returns:
        Dict[str, Any]: The resolved configuration.
    """
    env = os.environ if environ is None else environ
    config = get_default_config()

    input_dir = (env.get(INPUT_DIR_ENV_VAR) or "").strip()
    if input_dir:
        logger.debug(f"Input directory taken from ${INPUT_DIR_ENV_VAR}: {input_dir}")
        config["input_path"] = input_dir

    return config
