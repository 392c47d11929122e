# Where: precopy.features.precheck.__init__
# What: Expose the tree comparison use cases and their domain types.
# Why: Provide a cohesive import surface for application and UI layers.

from .domain import (
    DirectoryEntry,
    DivergenceKind,
    DivergenceNote,
    EntryKind,
    EntryPair,
    FileIOError,
    ListingError,
    PrecheckError,
    Verdict,
)
from .usecases import (
    FileComparator,
    FilesystemPort,
    NoteListener,
    PrecheckEvent,
    TreeComparator,
)

__all__ = [
    "DirectoryEntry",
    "DivergenceKind",
    "DivergenceNote",
    "EntryKind",
    "EntryPair",
    "FileComparator",
    "FileIOError",
    "FilesystemPort",
    "ListingError",
    "NoteListener",
    "PrecheckError",
    "PrecheckEvent",
    "TreeComparator",
    "Verdict",
]
