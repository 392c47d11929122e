"""Application services orchestrating precheck runs."""

from .precheck_service import (
    PrecheckReport,
    PrecheckRequest,
    PrecheckService,
    compare_trees,
    files_equal,
)

__all__ = [
    "PrecheckReport",
    "PrecheckRequest",
    "PrecheckService",
    "compare_trees",
    "files_equal",
]
