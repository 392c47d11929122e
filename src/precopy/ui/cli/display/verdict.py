"""src/precopy/ui/cli/display/verdict.py
What: Render the final precheck verdict on the console.
Why: Keep user-facing wording in one place for scripts that parse it.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from precopy.application.services import PrecheckReport
from precopy.features.precheck import DivergenceKind

SAFE_MESSAGE = "Safe to copy"
UNSAFE_MESSAGE = "It may be unsafe"

_KIND_LABELS: dict[DivergenceKind, str] = {
    DivergenceKind.TYPE_MISMATCH: "Type mismatches",
    DivergenceKind.SIZE_MISMATCH: "Size mismatches",
    DivergenceKind.CONTENT_MISMATCH: "Content mismatches",
}


@final
class VerdictDisplay:
    """Handles verdict display in CLI."""

    console: Console

    def __init__(self) -> None:
        """Initialize verdict display."""
        self.console = Console()

    def show_verdict(self, report: PrecheckReport, quiet: bool = False) -> None:
        """Display the verdict and a per-kind summary of divergences.

        Args:
            report: Completed precheck report.
            quiet: Whether to suppress all output.
        """
        if quiet:
            return

        if report.is_safe:
            self.console.print(f"[green]{SAFE_MESSAGE}[/green]")
            return

        self.console.print(f"[bold red]{UNSAFE_MESSAGE}[/bold red]")
        for kind, count in report.counts_by_kind().items():
            self.console.print(f"[red]  • {_KIND_LABELS[kind]}: {count}[/red]")
