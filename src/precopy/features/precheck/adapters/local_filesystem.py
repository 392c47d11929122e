"""Filesystem adapter for precheck use cases."""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO

from ..domain.models import DirectoryEntry, EntryKind
from ..usecases.ports import FilesystemPort


class LocalFileSystem(FilesystemPort):
    """Thin read-only wrapper around the local filesystem.

    Entries are classified without following symbolic links, so a link to a
    directory is reported as ``EntryKind.OTHER`` and never traversed.
    """

    def scan_directory(self, path: Path) -> list[DirectoryEntry]:
        with os.scandir(path) as iterator:
            return [self._snapshot(entry) for entry in iterator]

    def open_binary(self, path: Path) -> BinaryIO:
        return open(path, "rb")

    @staticmethod
    def _snapshot(entry: os.DirEntry[str]) -> DirectoryEntry:
        if entry.is_dir(follow_symlinks=False):
            return DirectoryEntry(name=entry.name, kind=EntryKind.DIRECTORY)
        kind = EntryKind.FILE if entry.is_file(follow_symlinks=False) else EntryKind.OTHER
        size = entry.stat(follow_symlinks=False).st_size
        return DirectoryEntry(name=entry.name, kind=kind, size=size)


__all__ = ["LocalFileSystem"]
