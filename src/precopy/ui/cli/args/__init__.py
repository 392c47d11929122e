"""Command line argument handling package."""

from precopy.ui.cli.args.parser import ArgumentParser
from precopy.ui.cli.args.options import CheckArgs

__all__ = ["ArgumentParser", "CheckArgs"]
