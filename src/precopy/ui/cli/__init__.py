"""Command line interface package."""

from precopy.ui.cli.cli import (
    EXIT_COPY_UNSAFE,
    EXIT_INTERRUPTED,
    EXIT_OTHER_ERRORS,
    EXIT_SAFE,
    CommandProcessor,
    main,
)

__all__ = [
    "EXIT_COPY_UNSAFE",
    "EXIT_INTERRUPTED",
    "EXIT_OTHER_ERRORS",
    "EXIT_SAFE",
    "CommandProcessor",
    "main",
]
