from __future__ import annotations

"""
Batch Orchestration Pipeline.

Coordinates one batch:
1. Checks the input directory (fatal on failure, before any timing mark),
   then lists it inside its own timing mark.
2. Classifies entries against the entry policy.
3. Loads each candidate sequentially, in order, inside the batch timing mark.
4. Splits outcomes into documents and failures.
"""

import logging
import os
from typing import Any, Dict, List, Optional

from batchjson.core.pipeline.components.filters import (
    compile_patterns,
    default_exclude_patterns,
    default_extensions,
)
from batchjson.core.pipeline.stages.validator import validate_config
from batchjson.core.pipeline.stages.worker import load_file_task
from batchjson.core.services.scanner import yield_batch_entries
from batchjson.core.services.timing import LoggingTimingSink, TimingSink
from batchjson.domain.batch_models import (
    BatchResult,
    LoadFailure,
    build_summary,
    create_error_result,
    create_success_result,
)
from batchjson.domain.constants import BATCH_TIMING_LABEL, LISTING_TIMING_LABEL
from batchjson.domain.errors import BatchLoadError, DirectoryAccessError
from batchjson.infra.fs import check_directory, list_entries, normalize_path

logger = logging.getLogger(__name__)


def load_all(
        input_path: str,
        *,
        timing: Optional[TimingSink] = None,
        extensions: Optional[List[str]] = None,
        exclude_patterns: Optional[List[str]] = None,
        sort_entries: bool = False,
        fail_fast: bool = False,
) -> BatchResult:
    """
    Load every JSON document of a directory.

    Files are processed strictly one after another. Document i of the
    result is the i-th successfully loaded entry.

    Args:
        input_path: Directory to load.
        timing: Observability sink. Defaults to a LoggingTimingSink.
        extensions: Accepted extensions (lower-case, dot-prefixed).
        exclude_patterns: Raw regexes; matching entry names are skipped.
        sort_entries: Process entries in name order instead of listing order.
        fail_fast: Re-raise the first file error instead of collecting it.

    Returns:
        BatchResult: Documents, failures and skipped entries of the batch.

    Raises:
        DirectoryAccessError: If the directory cannot be listed.
        FileReadError, JsonParseError: Only when fail_fast is True.
    """
    sink = timing if timing is not None else LoggingTimingSink()
    exts = extensions if extensions is not None else default_extensions()
    exclude_rx = compile_patterns(
        exclude_patterns if exclude_patterns is not None else default_exclude_patterns()
    )

    check_directory(input_path)

    sink.start(LISTING_TIMING_LABEL)
    try:
        entries = list_entries(input_path)
    finally:
        sink.end(LISTING_TIMING_LABEL)
    logger.debug(f"Listed {len(entries)} entries in {input_path}")

    documents: List[Any] = []
    loaded_files: List[str] = []
    item_counts: List[Optional[int]] = []
    failures: List[LoadFailure] = []
    skipped: List[str] = []

    sink.start(BATCH_TIMING_LABEL)
    try:
        index = 0
        for entry in yield_batch_entries(input_path, entries, exts, exclude_rx, sort_entries):
            if entry["status"] == "skipped":
                skipped.append(entry["file_name"])
                continue

            outcome = load_file_task(index, entry["file_name"], entry["file_path"], sink)
            index += 1

            if outcome["ok"]:
                documents.append(outcome["document"])
                loaded_files.append(outcome["file_name"])
                item_counts.append(outcome["item_count"])
                continue

            if fail_fast:
                raise outcome["exception"]
            failures.append(outcome["failure"])
    finally:
        elapsed_ms = sink.end(BATCH_TIMING_LABEL)

    summary = build_summary(
        documents, failures, skipped, elapsed_ms, fail_fast, sort_entries, item_counts
    )
    logger.info(
        f"Batch finished. Loaded: {summary['succeeded']} ({summary['items']} items), "
        f"Failed: {summary['failed']}, Skipped: {summary['skipped']}"
    )

    return create_success_result(
        input_path, documents, loaded_files, failures, skipped, elapsed_ms, summary,
        item_counts=item_counts,
    )


def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        timing: Optional[TimingSink] = None,
) -> BatchResult:
    """
    Validate a configuration and run one batch with it.

    Batch-level errors never propagate: they become a result with ok=False
    and an empty Result Collection.

    Args:
        config: Raw or partial configuration dictionary.
        timing: Observability sink passed through to load_all().

    Returns:
        BatchResult: Outcome of the batch.
    """
    logger.info("Pipeline execution started.")

    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    base_path = normalize_path(cfg["input_path"])

    try:
        return load_all(
            base_path,
            timing=timing,
            extensions=cfg["extensions"],
            exclude_patterns=cfg["exclude_patterns"],
            sort_entries=cfg["sort_entries"],
            fail_fast=cfg["fail_fast"],
        )
    except BatchLoadError as e:
        logger.error(f"Batch aborted: {e}")
        failures: List[LoadFailure] = []
        if not isinstance(e, DirectoryAccessError):
            failures.append(_failure_from_error(e))
        return create_error_result(
            str(e),
            base_path,
            failures=failures,
            summary_extra={"error_kind": e.kind},
        )


def _failure_from_error(error: BatchLoadError) -> LoadFailure:
    return LoadFailure(
        file_name=os.path.basename(error.path),
        path=error.path,
        kind=error.kind,
        error=error.reason,
        line=getattr(error, "line", None),
        column=getattr(error, "column", None),
    )
