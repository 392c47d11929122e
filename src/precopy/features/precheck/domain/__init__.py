"""Domain types for the precheck feature."""

from .errors import FileIOError, ListingError, PrecheckError
from .models import (
    DirectoryEntry,
    DivergenceKind,
    DivergenceNote,
    EntryKind,
    EntryPair,
    Verdict,
)

__all__ = [
    "DirectoryEntry",
    "DivergenceKind",
    "DivergenceNote",
    "EntryKind",
    "EntryPair",
    "FileIOError",
    "ListingError",
    "PrecheckError",
    "Verdict",
]
