from __future__ import annotations

"""
Atomic Load Worker.

Encapsulates the read-then-parse lifecycle of a single file, bracketed by a
per-file timing mark. load_one() raises; load_file_task() wraps the same
work into a success-or-failure record so one bad file cannot abort a batch.
"""

import logging
from typing import Any, Dict, Optional

from batchjson.core.pipeline.components.parser import parse_document
from batchjson.core.pipeline.components.reader import read_file_bytes
from batchjson.core.services.timing import TimingSink
from batchjson.domain.batch_models import LoadFailure
from batchjson.domain.constants import FILE_TIMING_PREFIX
from batchjson.domain.errors import FileReadError, JsonParseError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def file_timing_label(file_path: str) -> str:
    """Timing label of a single file."""
    return f"{FILE_TIMING_PREFIX}{file_path}"


def count_items(document: Any) -> Optional[int]:
    """
    Number of top-level items of a document.

    Returns:
        Optional[int]: Array length or object key count, None for scalars.
    """
    if isinstance(document, (list, dict)):
        return len(document)
    return None


def load_one(file_path: str, timing: TimingSink) -> Any:
    """
    Read and parse one file.

    The start mark is emitted before reading; the end mark is emitted once
    parsing has finished, whether it succeeded or not.

    Args:
        file_path: Full path of the file.
        timing: Sink receiving the per-file marks.

    Returns:
        Any: The parsed document.

    Raises:
        FileReadError: If the file cannot be read.
        JsonParseError: If the content is not valid JSON.
    """
    label = file_timing_label(file_path)
    timing.start(label)
    try:
        raw = read_file_bytes(file_path)
        return parse_document(raw, file_path)
    finally:
        timing.end(label)


def load_file_task(
        index: int,
        file_name: str,
        file_path: str,
        timing: TimingSink,
) -> Dict[str, Any]:
    """
    Execute load_one() and wrap its outcome.

    Args:
        index: Position of the entry in processing order.
        file_name: Entry name as listed.
        file_path: Full path of the entry.
        timing: Sink receiving the per-file marks.

    Returns:
        Dict[str, Any]: {"ok": True, ..., "document": value, "item_count": n}
                        on success,
                        {"ok": False, ..., "failure": LoadFailure, "exception": exc}
                        on a read or parse error.
    """
    base = {"index": index, "file_name": file_name, "path": file_path}

    try:
        document = load_one(file_path, timing)
    except JsonParseError as e:
        logger.warning(f"Invalid JSON in {file_name}: {e.reason}")
        failure = LoadFailure(
            file_name=file_name,
            path=file_path,
            kind=e.kind,
            error=e.reason,
            line=e.line,
            column=e.column,
        )
        return {**base, "ok": False, "failure": failure, "exception": e}
    except FileReadError as e:
        logger.error(f"Cannot read {file_name}: {e.reason}")
        failure = LoadFailure(
            file_name=file_name,
            path=file_path,
            kind=e.kind,
            error=e.reason,
        )
        return {**base, "ok": False, "failure": failure, "exception": e}

    item_count = count_items(document)
    logger.debug(f"Loaded {file_name}: entries: {item_count}")
    return {**base, "ok": True, "document": document, "item_count": item_count}
