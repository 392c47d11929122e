"""src/precopy/ui/cli/commands/check.py
What: Execute a precheck run for two directory roots via the CLI.
Why: Bridge parsed arguments with the application service and verdict display.
"""

from precopy.application.services import PrecheckReport, PrecheckRequest, PrecheckService
from precopy.ui.cli.args.options import CheckArgs
from precopy.ui.cli.display.verdict import VerdictDisplay


class CheckCommand:
    """Command comparing a source tree against a destination tree."""

    args: CheckArgs
    app: PrecheckService
    request: PrecheckRequest
    verdict_display: VerdictDisplay

    def __init__(self, args: CheckArgs) -> None:
        """Initialize the command.

        Args:
            args: Command line arguments.
        """
        self.args = args
        self.app = PrecheckService()
        self.request = PrecheckRequest(
            source_root=args.source_path,
            destination_root=args.destination_path,
            chunk_size=args.chunk_size,
            report_notes=args.show_notes,
        )
        self.verdict_display = VerdictDisplay()

    def execute(self) -> PrecheckReport:
        """Execute the precheck.

        Returns:
            PrecheckReport: Completed report.

        Raises:
            PrecheckError: If the verdict cannot be determined.
        """
        report = self.app.run(self.request)
        self.verdict_display.show_verdict(report, quiet=self.args.quiet)
        return report
