from __future__ import annotations

"""
Batch Domain Data Models.

Defines the data structures and factory functions used to communicate a
batch run between the loader engine and the interface layer. A batch result
always carries both sides of the outcome: the documents that loaded and the
files that did not.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# PER-ITEM MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LoadFailure:
    """
    Encapsulates a file that was listed and considered but not loaded.

    Attributes:
        file_name: Entry name as returned by the directory listing.
        path: Full path resolved against the input directory.
        kind: Error class name ("FileReadError" or "JsonParseError").
        error: Human readable cause.
        line: 1-based line of a parse error, if known.
        column: 1-based column of a parse error, if known.
    """
    file_name: str
    path: str
    kind: str
    error: str
    line: Optional[int] = None
    column: Optional[int] = None


@dataclass(frozen=True)
class TimingEvent:
    """
    Single observability mark for a named operation.

    Attributes:
        label: Operation name (batch label or per-file label).
        phase: Either "start" or "end".
        elapsed_ms: Wall-clock duration, only set on "end".
    """
    label: str
    phase: str
    elapsed_ms: Optional[float] = None

# -----------------------------------------------------------------------------
# BATCH MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class BatchResult:
    """
    Unified result object of one batch run.

    Attributes:
        ok: False only when the batch itself could not complete
            (directory error, configuration error, fail-fast abort).
        error: Descriptive message when ok is False.
        input_path: Normalized directory that was processed.
        documents: Result Collection, in processing order.
        loaded_files: Entry names aligned index-for-index with documents.
        item_counts: Top-level item count of each document (None for scalars),
                     aligned with documents.
        failures: Files that were considered but failed to load.
        skipped_entries: Entries excluded by the entry policy.
        elapsed_ms: Total batch duration.
        summary: Counters and run flags for reporting.
    """
    ok: bool
    error: str
    input_path: str

    documents: List[Any] = field(default_factory=list)
    loaded_files: List[str] = field(default_factory=list)
    item_counts: List[Optional[int]] = field(default_factory=list)
    failures: List[LoadFailure] = field(default_factory=list)
    skipped_entries: List[str] = field(default_factory=list)

    elapsed_ms: float = 0.0
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def build_summary(
        documents: List[Any],
        failures: List[LoadFailure],
        skipped_entries: List[str],
        elapsed_ms: float,
        fail_fast: bool = False,
        sort_entries: bool = False,
        item_counts: Optional[List[Optional[int]]] = None,
) -> Dict[str, Any]:
    """
    Compute the reporting counters of a batch.

    Returns:
        Dict[str, Any]: listed/considered/succeeded/failed/skipped counters,
                        the total item count and the run flags.
    """
    considered = len(documents) + len(failures)
    return {
        "listed": considered + len(skipped_entries),
        "considered": considered,
        "succeeded": len(documents),
        "failed": len(failures),
        "skipped": len(skipped_entries),
        "items": sum(c for c in (item_counts or []) if c is not None),
        "elapsed_ms": round(elapsed_ms, 3),
        "fail_fast": fail_fast,
        "sorted": sort_entries,
    }


def create_error_result(
        error: str,
        input_path: str,
        failures: Optional[List[LoadFailure]] = None,
        elapsed_ms: float = 0.0,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> BatchResult:
    """
    Create a failed batch result. Documents are always discarded.

    Args:
        error: Detailed error description.
        input_path: The target input directory.
        failures: The failure that aborted the batch, if file-level.
        elapsed_ms: Time spent before the abort.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        BatchResult: An immutable error result object.
    """
    return BatchResult(
        ok=False,
        error=error,
        input_path=input_path,
        failures=failures or [],
        elapsed_ms=elapsed_ms,
        summary=summary_extra or {},
    )


def create_success_result(
        input_path: str,
        documents: List[Any],
        loaded_files: List[str],
        failures: List[LoadFailure],
        skipped_entries: List[str],
        elapsed_ms: float,
        summary_extra: Optional[Dict[str, Any]] = None,
        item_counts: Optional[List[Optional[int]]] = None,
) -> BatchResult:
    """
    Create a completed batch result.

    A completed batch may still contain failures; ok only states that the
    batch ran to the end.

    Returns:
        BatchResult: An immutable result object.
    """
    return BatchResult(
        ok=True,
        error="",
        input_path=input_path,
        documents=documents,
        loaded_files=loaded_files,
        item_counts=item_counts or [],
        failures=failures,
        skipped_entries=skipped_entries,
        elapsed_ms=elapsed_ms,
        summary=summary_extra or {},
    )
