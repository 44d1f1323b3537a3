from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Directory listing and path primitives used by the loader. Acts as the only
place where the 'os' module touches the input directory, so that listing
failures are translated into the loader's error taxonomy in one spot.
"""

import os
from typing import List, Optional

from batchjson.domain.errors import DirectoryAccessError

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str]) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). An empty input stays empty.

    Args:
        path: Raw input path string.

    Returns:
        str: Normalized absolute path, or "" if nothing was given.
    """
    p = (path or "").strip()
    if not p:
        return ""
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def resolve_entry(base_dir: str, name: str) -> str:
    """Join an entry name onto its directory. Pure, no I/O."""
    return os.path.join(base_dir, name)

# -----------------------------------------------------------------------------
# DIRECTORY LISTING API
# -----------------------------------------------------------------------------

def check_directory(directory: str) -> None:
    """
    Ensure the input directory is configured and is an existing directory.

    Args:
        directory: Directory to check.

    Raises:
        DirectoryAccessError: If the path is empty, missing or not a directory.
    """
    if not directory:
        raise DirectoryAccessError(directory, "No input directory configured")
    if not os.path.exists(directory):
        raise DirectoryAccessError(directory, "Directory does not exist")
    if not os.path.isdir(directory):
        raise DirectoryAccessError(directory, "Not a directory")


def list_entries(directory: str) -> List[str]:
    """
    List the entry names of a directory in filesystem order.

    The order is whatever the platform returns; no sorting is applied.

    Args:
        directory: Directory to list.

    Returns:
        List[str]: Entry names (not full paths).

    Raises:
        DirectoryAccessError: If the directory is missing, is not a
                              directory, or cannot be read.
    """
    check_directory(directory)

    try:
        return os.listdir(directory)
    except OSError as e:
        raise DirectoryAccessError(directory, e.strerror or str(e)) from e


def is_non_regular_entry(path: str) -> bool:
    """
    Check for an existing entry that is not a regular file.

    Symlinks are followed. A dangling link or an entry that vanished after
    the listing is not reported here, so the read attempt surfaces it.
    """
    return os.path.exists(path) and not os.path.isfile(path)
