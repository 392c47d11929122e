"""Use cases for comparing directory trees before a merge."""

from .file_comparator import FileComparator, read_chunk
from .ports import FilesystemPort, NoteListener
from .precheck_types import PrecheckEvent
from .tree_comparator import TreeComparator, pair_entries

__all__ = [
    "FileComparator",
    "FilesystemPort",
    "NoteListener",
    "PrecheckEvent",
    "TreeComparator",
    "pair_entries",
    "read_chunk",
]
