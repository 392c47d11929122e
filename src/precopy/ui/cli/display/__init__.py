"""Display management for CLI interface."""

from precopy.ui.cli.display.verdict import SAFE_MESSAGE, UNSAFE_MESSAGE, VerdictDisplay

__all__ = ["SAFE_MESSAGE", "UNSAFE_MESSAGE", "VerdictDisplay"]
