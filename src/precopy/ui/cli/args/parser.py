"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from precopy.config.settings import load_settings
from precopy.platform.logging import setup_logger
from precopy.ui.cli.args.options import CheckArgs

USAGE_EPILOG = """\
Exit status is only zero when merging folders is safe, so that you could chain it with rsync, e.g.:
  precopy src_folder dest_folder && rsync -ra --remove-sent-files src_folder/ dest_folder
(Note the trailing slash with the first rsync argument)

Exit status: 0 safe to copy, 3 it may be unsafe, 4 the check could not be completed.
"""


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="precopy",
            usage="%(prog)s SRC DEST [options]",
            description="Check that merging SRC into DEST will not overwrite files that differ.",
            epilog=USAGE_EPILOG,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "source_path",
            nargs="?",
            help="Directory whose contents would be copied",
            metavar="SRC",
        )
        _ = parser.add_argument(
            "destination_path",
            nargs="?",
            help="Directory that would receive the copy",
            metavar="DEST",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed traversal information",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
        _ = parser.add_argument(
            "--no-notes",
            action="store_true",
            help="Do not report individual divergences while checking",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CheckArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CheckArgs: Processed command line arguments.

        Raises:
            SystemExit: With status 0 after printing usage when SRC or DEST is missing.
            TypeError: If the configuration file holds a value of the wrong type.
            tomllib.TOMLDecodeError: If the configuration file is not valid TOML.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if not parsed_args.source_path or not parsed_args.destination_path:
            parser.print_help()
            sys.exit(0)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        settings = load_settings()
        _ = setup_logger(log_file=settings.log_file, console_level=log_level)

        return CheckArgs(
            source_path=Path(parsed_args.source_path),
            destination_path=Path(parsed_args.destination_path),
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            show_notes=settings.show_notes and not parsed_args.no_notes,
            chunk_size=settings.chunk_size,
        )
