from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict, List, Optional

from batchjson.domain.constants import INPUT_DIR_ENV_VAR

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the batchjson CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="batchjson",
        description="Load every JSON file of a directory and report per-file timing and failures.",
    )

    # --- Input ---
    p.add_argument(
        "input_dir",
        nargs="?",
        default=None,
        help=f"Directory to load. Falls back to ${INPUT_DIR_ENV_VAR}.",
    )
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Directory to load (takes precedence over the positional argument).",
    )

    # --- Entry Policy ---
    p.add_argument(
        "--ext",
        dest="extensions",
        default=None,
        help="Comma-separated list of accepted extensions (default: .json).",
    )
    p.add_argument(
        "--exclude",
        dest="exclude_patterns",
        action="append",
        default=None,
        metavar="REGEX",
        help="Skip entry names matching REGEX. Repeat for several patterns.",
    )
    p.add_argument(
        "--include-hidden",
        action="store_true",
        help="Do not skip dot-files.",
    )
    p.add_argument(
        "--sort",
        action="store_true",
        help="Process entries in name order instead of directory order.",
    )

    # --- Failure Policy ---
    p.add_argument(
        "--fail-fast",
        action="store_true",
        help="Abort the whole batch on the first unreadable or invalid file.",
    )

    # --- Output ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the batch summary as JSON.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration and exit.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors (hides timing output).",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to a rotating file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset. None means
                        "not given on the command line".
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path or args.input_dir

    if args.extensions:
        overrides["extensions"] = _split_csv(args.extensions)

    if args.include_hidden:
        overrides["exclude_patterns"] = []
    if args.exclude_patterns:
        overrides["exclude_patterns"] = [p for p in args.exclude_patterns if p]

    if args.sort:
        overrides["sort_entries"] = True
    if args.fail_fast:
        overrides["fail_fast"] = True

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of stripped strings."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
