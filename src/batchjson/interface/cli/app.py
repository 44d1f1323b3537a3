from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration layering
(defaults, environment, CLI overrides), batch execution and result
rendering. The loaded documents stay in memory; only the outcome of the
batch is reported.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from batchjson.core.pipeline.engine import run_pipeline
from batchjson.core.pipeline.stages.validator import validate_config
from batchjson.domain.batch_models import BatchResult
from batchjson.domain.config import load_config
from batchjson.domain.constants import INPUT_DIR_ENV_VAR
from batchjson.domain.errors import DirectoryAccessError
from batchjson.infra.logging import LoggingConfig, configure_logging, get_logger
from batchjson.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FILE_ERRORS = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 if every considered file loaded, 1 if any file failed or the
             batch was aborted, 2 on a configuration or directory error,
             130 if interrupted.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        log_level = "DEBUG"
    elif args.quiet:
        log_level = "WARNING"
    else:
        log_level = "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(load_config(), overrides)

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if not clean_conf["input_path"]:
        msg = f"No input directory given. Pass INPUT_DIR or set ${INPUT_DIR_ENV_VAR}."
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_USAGE

    logger.info(f"Targeting input directory: {clean_conf['input_path']}")
    try:
        result = run_pipeline(clean_conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    if args.json_output:
        print(json.dumps(result_to_payload(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return exit_code_for(result)

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of override values into the base configuration.

    Only known keys are merged and None values are ignored, so a flag that
    was not given never erases an environment value.
    """
    out = dict(base)
    keys_to_merge = [
        "input_path", "extensions", "exclude_patterns", "sort_entries", "fail_fast",
    ]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# RESULT MAPPING
# -----------------------------------------------------------------------------

def exit_code_for(result: BatchResult) -> int:
    """Map a batch outcome to a process exit code."""
    if not result.ok:
        if result.summary.get("error_kind") == DirectoryAccessError.kind:
            return EXIT_USAGE
        return EXIT_FILE_ERRORS
    return EXIT_FILE_ERRORS if result.failures else EXIT_OK


def result_to_payload(result: BatchResult) -> Dict[str, Any]:
    """JSON-serializable view of a result, without the documents themselves."""
    return {
        "ok": result.ok,
        "error": result.error,
        "input_path": result.input_path,
        "summary": result.summary,
        "loaded_files": list(result.loaded_files),
        "item_counts": list(result.item_counts),
        "failures": [asdict(f) for f in result.failures],
        "skipped_entries": list(result.skipped_entries),
    }

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: BatchResult) -> None:
    """
    Print the batch outcome to standard output.

    Counts are always printed. Loaded files are listed with their top-level
    item count and failures with their cause.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    summary = result.summary
    print(f"Input directory: {result.input_path}")
    print(f"Files loaded: {summary.get('succeeded', 0)}")
    print(f"Files failed: {summary.get('failed', 0)}")
    print(f"Items loaded: {summary.get('items', 0)}")
    print(f"Entries skipped: {summary.get('skipped', 0)}")
    print(f"Elapsed: {result.elapsed_ms:.3f}ms")

    if result.loaded_files:
        print("\nLoaded files:")
        for name, count in zip(result.loaded_files, result.item_counts):
            entries = count if count is not None else "-"
            print(f"  - {name}: entries: {entries}")

    if result.failures:
        print("\nFailures:")
        for f in result.failures:
            position = f" (line {f.line}, column {f.column})" if f.line is not None else ""
            print(f"  - {f.file_name}: {f.kind}: {f.error}{position}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
