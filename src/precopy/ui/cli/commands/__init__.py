"""Command execution package for CLI."""

from precopy.ui.cli.commands.check import CheckCommand

__all__ = ["CheckCommand"]
