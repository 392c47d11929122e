"""
Summary: Pair same-named entries across two directory trees and collect divergences.
Why: Decide whether merging a source tree into a destination would clobber differing data.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path, PurePath
from typing import final

from precopy.platform.logging import logger

from ..domain.errors import ListingError
from ..domain.models import DirectoryEntry, DivergenceKind, DivergenceNote, EntryPair
from .file_comparator import FileComparator
from .ports import FilesystemPort, NoteListener


def pair_entries(
    source_dir: Path,
    destination_dir: Path,
    source_entries: list[DirectoryEntry],
    destination_entries: dict[str, DirectoryEntry],
    relative_dir: PurePath,
) -> Iterator[EntryPair]:
    """Yield a pair for every source entry whose name also exists in the destination.

    Source entries are visited in name order; names found on one side only are skipped.
    """

    for source_entry in sorted(source_entries, key=lambda entry: entry.name):
        destination_entry = destination_entries.get(source_entry.name)
        if destination_entry is None:
            continue
        yield EntryPair(
            relative_path=relative_dir / source_entry.name,
            source_path=source_dir / source_entry.name,
            destination_path=destination_dir / destination_entry.name,
            source=source_entry,
            destination=destination_entry,
        )


@final
class TreeComparator:
    """Recursive comparison of two directory trees.

    Each call returns the notes for its own subtree as a tuple; callers merge
    them, so no accumulator is shared between recursion levels.
    """

    def __init__(
        self,
        filesystem: FilesystemPort,
        file_comparator: FileComparator | None = None,
        on_note: NoteListener | None = None,
    ) -> None:
        """Initialize the comparator.

        Args:
            filesystem: Port used to list directories and open files.
            file_comparator: Content comparator. Defaults to one built on ``filesystem``.
            on_note: Optional callback invoked as soon as each note is produced.
        """
        self._filesystem = filesystem
        self._file_comparator = file_comparator or FileComparator(filesystem)
        self._on_note = on_note

    def compare(
        self,
        source_dir: Path,
        destination_dir: Path,
        relative_dir: PurePath = PurePath(),
    ) -> tuple[DivergenceNote, ...]:
        """Compare the colliding entries of two directories recursively.

        Args:
            source_dir: Directory whose contents would be copied.
            destination_dir: Directory that would receive the copy.
            relative_dir: Position of both directories below the compared roots.

        Returns:
            tuple[DivergenceNote, ...]: Divergences found in this subtree.

        Raises:
            ListingError: If either directory cannot be enumerated.
            FileIOError: If a colliding file cannot be opened or read.
        """
        logger.debug("Comparing directory %s against %s", source_dir, destination_dir)
        destination_entries = {
            entry.name: entry for entry in self._scan(destination_dir)
        }
        source_entries = self._scan(source_dir)

        notes: list[DivergenceNote] = []
        for pair in pair_entries(
            source_dir,
            destination_dir,
            source_entries,
            destination_entries,
            relative_dir,
        ):
            notes.extend(self._compare_pair(pair))
        return tuple(notes)

    def _compare_pair(self, pair: EntryPair) -> tuple[DivergenceNote, ...]:
        if pair.source.is_dir and pair.destination.is_dir:
            return self.compare(pair.source_path, pair.destination_path, pair.relative_path)
        if pair.source.is_dir != pair.destination.is_dir:
            return (self._note(pair, DivergenceKind.TYPE_MISMATCH),)
        if pair.source.size != pair.destination.size:
            return (self._note(pair, DivergenceKind.SIZE_MISMATCH),)
        if not self._file_comparator.content_equals(pair.source_path, pair.destination_path):
            return (self._note(pair, DivergenceKind.CONTENT_MISMATCH),)
        return ()

    def _note(self, pair: EntryPair, kind: DivergenceKind) -> DivergenceNote:
        note = DivergenceNote.for_pair(pair, kind)
        if self._on_note is not None:
            self._on_note(note)
        return note

    def _scan(self, directory: Path) -> list[DirectoryEntry]:
        try:
            return self._filesystem.scan_directory(directory)
        except OSError as exc:
            raise ListingError(directory, exc) from exc


__all__ = ["TreeComparator", "pair_entries"]
