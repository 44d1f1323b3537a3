from __future__ import annotations

"""
Entry Discovery Service.

Walks a single directory listing (no recursion) in the order the platform
returns it, or sorted on request, and classifies each entry as a document
candidate or a skipped entry.
"""

import logging
import re
from typing import Dict, Iterable, List

from batchjson.core.pipeline.components.filters import has_extension, matches_any
from batchjson.infra.fs import is_non_regular_entry, resolve_entry

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def yield_batch_entries(
        input_path: str,
        entries: List[str],
        extensions: List[str],
        exclude_rx: List[re.Pattern],
        sort_entries: bool = False,
) -> Iterable[Dict[str, str]]:
    """
    Classify listed entries against the entry policy.

    Args:
        input_path: Directory the entries were listed from.
        entries: Entry names as returned by the listing.
        extensions: Accepted lower-case, dot-prefixed extensions.
        exclude_rx: Compiled exclusion patterns matched on the name.
        sort_entries: Yield in lexicographic order instead of listing order.

    Yields:
        Dict[str, str]: One record per entry:
                        - file_name: Entry name.
                        - file_path: Full path.
                        - status: "process" or "skipped".
                        - reason: Why the entry was skipped ("" otherwise).
    """
    names = sorted(entries) if sort_entries else entries

    for file_name in names:
        file_path = resolve_entry(input_path, file_name)

        reason = ""
        if matches_any(file_name, exclude_rx):
            reason = "excluded by pattern"
        elif not has_extension(file_name, extensions):
            reason = "extension not accepted"
        elif is_non_regular_entry(file_path):
            reason = "not a regular file"

        if reason:
            logger.debug(f"Skipping entry '{file_name}': {reason}")

        yield {
            "file_name": file_name,
            "file_path": file_path,
            "status": "skipped" if reason else "process",
            "reason": reason,
        }
