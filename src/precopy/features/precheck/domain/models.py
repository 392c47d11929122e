"""Data structures describing directory entries and detected divergences."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path, PurePath


class EntryKind(StrEnum):
    """Type tag of a directory entry as observed at listing time."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


class DivergenceKind(StrEnum):
    """Dimension in which a colliding pair differs."""

    TYPE_MISMATCH = "type-mismatch"
    SIZE_MISMATCH = "size-mismatch"
    CONTENT_MISMATCH = "content-mismatch"


class Verdict(StrEnum):
    """Aggregate determination derived from the divergence notes."""

    SAFE = "safe"
    UNSAFE = "unsafe"

    @staticmethod
    def from_notes(notes: Collection["DivergenceNote"]) -> "Verdict":
        """Return ``SAFE`` when ``notes`` is empty, ``UNSAFE`` otherwise."""

        return Verdict.UNSAFE if notes else Verdict.SAFE


@dataclass(slots=True, frozen=True)
class DirectoryEntry:
    """Snapshot of one entry in a directory listing.

    Attributes:
        name: Entry name, unique within its parent listing.
        kind: File, directory, or other (symlinks, devices, sockets).
        size: Byte length reported by ``lstat`` for non-directories, ``None`` otherwise.
    """

    name: str
    kind: EntryKind
    size: int | None = None

    @property
    def is_dir(self) -> bool:
        """Return True when the entry is a directory."""

        return self.kind is EntryKind.DIRECTORY


@dataclass(slots=True, frozen=True)
class EntryPair:
    """Two same-named entries found at the same relative position in both trees."""

    relative_path: PurePath
    source_path: Path
    destination_path: Path
    source: DirectoryEntry
    destination: DirectoryEntry


_MESSAGE_TEMPLATES: dict[DivergenceKind, str] = {
    DivergenceKind.TYPE_MISMATCH: "'{source}' and '{destination}' have different types",
    DivergenceKind.SIZE_MISMATCH: "'{source}' and '{destination}' have different sizes",
    DivergenceKind.CONTENT_MISMATCH: "'{source}' and '{destination}' content differs",
}


@dataclass(slots=True, frozen=True)
class DivergenceNote:
    """One unsafe condition detected for a colliding pair."""

    source_path: Path
    destination_path: Path
    relative_path: PurePath
    kind: DivergenceKind

    @classmethod
    def for_pair(cls, pair: EntryPair, kind: DivergenceKind) -> "DivergenceNote":
        """Build a note describing ``pair`` diverging in ``kind``."""

        return cls(
            source_path=pair.source_path,
            destination_path=pair.destination_path,
            relative_path=pair.relative_path,
            kind=kind,
        )

    @property
    def message(self) -> str:
        """Human-readable description of the divergence."""

        return _MESSAGE_TEMPLATES[self.kind].format(
            source=self.source_path,
            destination=self.destination_path,
        )


__all__ = [
    "DirectoryEntry",
    "DivergenceKind",
    "DivergenceNote",
    "EntryKind",
    "EntryPair",
    "Verdict",
]
