from __future__ import annotations

"""
Loader Error Taxonomy.

Directory-level failures are fatal for a batch; file-level failures are
recoverable and end up as LoadFailure records unless fail-fast mode is on.
"""

from typing import Optional


class BatchLoadError(Exception):
    """Base class for every failure raised by the batch loader."""

    kind = "BatchLoadError"

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(str(self))

    def __str__(self) -> str:
        if not self.path:
            return self.reason
        return f"{self.path}: {self.reason}"


class DirectoryAccessError(BatchLoadError):
    """The input directory is missing, not a directory, or unreadable."""

    kind = "DirectoryAccessError"


class FileReadError(BatchLoadError):
    """A listed entry could not be opened or read."""

    kind = "FileReadError"


class JsonParseError(BatchLoadError):
    """File content is not a valid JSON document."""

    kind = "JsonParseError"

    def __init__(
            self,
            path: str,
            reason: str,
            line: Optional[int] = None,
            column: Optional[int] = None,
    ) -> None:
        self.line = line
        self.column = column
        super().__init__(path, reason)

    def __str__(self) -> str:
        if self.line is not None and self.column is not None:
            return f"{self.path}:{self.line}:{self.column}: {self.reason}"
        return f"{self.path}: {self.reason}"
