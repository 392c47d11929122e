"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final


@final
@dataclass(slots=True)
class CheckArgs:
    """Command line arguments for a precheck run."""

    source_path: Path
    destination_path: Path
    verbose: bool
    quiet: bool
    show_notes: bool
    chunk_size: int


__all__ = ["CheckArgs"]
