"""Command line interface for precopy."""

import sys
from typing import Final, final

from precopy.features.precheck import PrecheckError
from precopy.platform.logging import logger
from precopy.ui.cli.args import ArgumentParser
from precopy.ui.cli.commands import CheckCommand

EXIT_SAFE: Final[int] = 0
EXIT_COPY_UNSAFE: Final[int] = 3
EXIT_OTHER_ERRORS: Final[int] = 4
EXIT_INTERRUPTED: Final[int] = 130


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Exits with ``EXIT_COPY_UNSAFE`` when divergences were found and with
        ``EXIT_OTHER_ERRORS`` when the check could not be completed.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            report = CheckCommand(args).execute()
            if not report.is_safe:
                sys.exit(EXIT_COPY_UNSAFE)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(EXIT_INTERRUPTED)
        except PrecheckError:
            # Already reported by the service as a structured error event.
            sys.exit(EXIT_OTHER_ERRORS)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(EXIT_OTHER_ERRORS)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Unsafe verdicts and failures
        leave through ``sys.exit(...)``, so this return is only reached when
        the trees are safe to merge.
    """
    CommandProcessor.process_command()
    return EXIT_SAFE
