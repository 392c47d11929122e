"""Ports for the precheck feature."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Callable, Protocol

from ..domain.models import DirectoryEntry, DivergenceNote

NoteListener = Callable[[DivergenceNote], None]


class FilesystemPort(Protocol):
    """Read-only filesystem operations needed by the comparison use cases."""

    def scan_directory(self, path: Path) -> list[DirectoryEntry]:
        """Return a snapshot of the immediate entries of ``path``.

        Raises:
            OSError: If the directory cannot be enumerated.
        """

        ...

    def open_binary(self, path: Path) -> BinaryIO:
        """Open ``path`` for binary reading.

        Raises:
            OSError: If the file cannot be opened.
        """

        ...


__all__ = ["FilesystemPort", "NoteListener"]
