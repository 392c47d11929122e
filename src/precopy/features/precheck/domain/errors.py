"""Errors that leave a precheck verdict indeterminate."""

from __future__ import annotations

from pathlib import Path


class PrecheckError(Exception):
    """Base class for failures that abort a whole tree comparison.

    Attributes:
        path: Filesystem path whose access failed.
        cause: Underlying operating system error.
    """

    action: str = "access"

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"Cannot {self.action} '{path}': {reason}")


class ListingError(PrecheckError):
    """A directory could not be enumerated."""

    action = "list directory"


class FileIOError(PrecheckError):
    """A file could not be opened or read."""

    action = "read file"


__all__ = ["FileIOError", "ListingError", "PrecheckError"]
