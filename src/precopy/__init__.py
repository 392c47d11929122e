"""precopy: check that two directory trees can be merged without clobbering data."""

from precopy.application.services.precheck_service import compare_trees, files_equal
from precopy.features.precheck.domain import (
    DivergenceKind,
    DivergenceNote,
    FileIOError,
    ListingError,
    PrecheckError,
    Verdict,
)

__version__ = "0.1.0"

__all__ = [
    "DivergenceKind",
    "DivergenceNote",
    "FileIOError",
    "ListingError",
    "PrecheckError",
    "Verdict",
    "__version__",
    "compare_trees",
    "files_equal",
]
