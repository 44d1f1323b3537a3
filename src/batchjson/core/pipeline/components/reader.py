from __future__ import annotations

"""
File Reading Component.

Reads a document file in one go. JSON has to be parsed as a whole, so there
is nothing to gain from streaming; the raw bytes are handed to the parser,
which owns decoding.
"""

from batchjson.domain.errors import FileReadError

# -----------------------------------------------------------------------------
# READ OPERATIONS
# -----------------------------------------------------------------------------

def read_file_bytes(file_path: str) -> bytes:
    """
    Read the full content of a file.

    Args:
        file_path: Absolute path to the target file.

    Returns:
        bytes: Raw file content.

    Raises:
        FileReadError: If the file cannot be opened or read (missing,
                       permission denied, directory, removed after listing).
    """
    try:
        with open(file_path, "rb") as f:
            return f.read()
    except OSError as e:
        raise FileReadError(file_path, e.strerror or str(e)) from e
