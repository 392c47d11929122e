"""Application service for checking whether two trees can be merged safely.

This layer wires the local filesystem adapter into the comparison use cases
and reports progress through structured log events, so every UI reuses the
same orchestration.
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Any, final

from precopy.features.precheck import (
    DivergenceKind,
    DivergenceNote,
    FileComparator,
    FilesystemPort,
    NoteListener,
    PrecheckError,
    PrecheckEvent,
    TreeComparator,
    Verdict,
)
from precopy.features.precheck.adapters import LocalFileSystem
from precopy.platform.logging import logger


@dataclass(frozen=True)
class PrecheckRequest:
    """Input parameters for a precheck run.

    Attributes:
        source_root: Tree whose contents would be copied.
        destination_root: Tree that would receive the copy.
        chunk_size: Override for the content comparison chunk size.
        report_notes: Log each divergence as soon as it is found.
    """

    source_root: Path
    destination_root: Path
    chunk_size: int | None = None
    report_notes: bool = True


@dataclass(frozen=True)
class PrecheckReport:
    """Outcome of one completed precheck run."""

    source_root: Path
    destination_root: Path
    notes: tuple[DivergenceNote, ...]
    duration_seconds: float = 0.0

    @property
    def verdict(self) -> Verdict:
        return Verdict.from_notes(self.notes)

    @property
    def is_safe(self) -> bool:
        return self.verdict is Verdict.SAFE

    def counts_by_kind(self) -> dict[DivergenceKind, int]:
        """Return how many notes were recorded per divergence kind."""

        counts = Counter(note.kind for note in self.notes)
        return {kind: counts[kind] for kind in DivergenceKind if counts[kind]}


def compare_trees(
    source_root: Path | str,
    destination_root: Path | str,
    *,
    chunk_size: int | None = None,
    on_note: NoteListener | None = None,
    filesystem: FilesystemPort | None = None,
) -> tuple[DivergenceNote, ...]:
    """Compare every colliding entry of two trees on the local filesystem.

    Args:
        source_root: Tree whose contents would be copied.
        destination_root: Tree that would receive the copy.
        chunk_size: Bytes read per file per step. ``None`` or a non-positive
            value selects the 64 KiB default; the configuration file is not read.
        on_note: Optional callback invoked as each divergence is found.
        filesystem: Alternative filesystem port, mainly for tests.

    Returns:
        tuple[DivergenceNote, ...]: All divergences; empty means safe to copy.

    Raises:
        ListingError: If a directory cannot be enumerated.
        FileIOError: If a colliding file cannot be opened or read.
    """
    port = filesystem or LocalFileSystem()
    comparator = TreeComparator(
        port,
        file_comparator=FileComparator(port, chunk_size=chunk_size),
        on_note=on_note,
    )
    return comparator.compare(Path(source_root), Path(destination_root))


def files_equal(
    first: Path | str,
    second: Path | str,
    *,
    chunk_size: int | None = None,
) -> bool:
    """Return True when two local files hold identical bytes.

    Args:
        first: First file to compare.
        second: Second file to compare.
        chunk_size: Bytes read per file per step. ``None`` or a non-positive
            value selects the 64 KiB default.

    Raises:
        FileIOError: If either file cannot be opened or read.
    """
    comparator = FileComparator(LocalFileSystem(), chunk_size=chunk_size)
    return comparator.content_equals(Path(first), Path(second))


@final
class PrecheckService:
    """Application service that runs a precheck and reports its progress."""

    def __init__(self, filesystem: FilesystemPort | None = None) -> None:
        self._filesystem = filesystem or LocalFileSystem()

    def run(self, request: PrecheckRequest) -> PrecheckReport:
        """Compare the two roots of ``request``.

        Args:
            request: Roots and options of the run.

        Returns:
            PrecheckReport: Notes and derived verdict.

        Raises:
            PrecheckError: If the verdict cannot be determined.
        """
        context: dict[str, Any] = {
            "source_root": request.source_root,
            "destination_root": request.destination_root,
        }
        self._log(
            logging.INFO,
            PrecheckEvent.CHECK_START,
            "Checking before copying from '%s' to '%s'",
            request.source_root,
            request.destination_root,
            **context,
        )

        def _report(note: DivergenceNote) -> None:
            self._log(
                logging.WARNING,
                PrecheckEvent.for_divergence(note.kind),
                "%s",
                note.message,
                source_path=note.source_path,
                destination_path=note.destination_path,
                **context,
            )

        start = time.perf_counter()
        try:
            notes = compare_trees(
                request.source_root,
                request.destination_root,
                chunk_size=request.chunk_size,
                on_note=_report if request.report_notes else None,
                filesystem=self._filesystem,
            )
        except PrecheckError as exc:
            self._log(
                logging.ERROR,
                PrecheckEvent.CHECK_ERROR,
                "Precheck aborted: %s",
                exc,
                error_message=str(exc),
                **context,
            )
            raise

        report = PrecheckReport(
            source_root=request.source_root,
            destination_root=request.destination_root,
            notes=notes,
            duration_seconds=time.perf_counter() - start,
        )
        self._log(
            logging.INFO,
            PrecheckEvent.CHECK_COMPLETE,
            "Precheck complete [divergences=%d, duration=%.2fs]",
            len(report.notes),
            report.duration_seconds,
            note_count=len(report.notes),
            duration_seconds=report.duration_seconds,
            **context,
        )
        return report

    @staticmethod
    def _log(
        level: int,
        event: PrecheckEvent,
        message: str,
        *message_args: object,
        **context: Any,
    ) -> None:
        extra: dict[str, Any] = {"precheck_event": event.value}
        for key, value in context.items():
            extra[key] = str(value) if isinstance(value, Path) else value
        logger.log(level, message, *message_args, extra=extra, stacklevel=2)


__all__ = [
    "PrecheckReport",
    "PrecheckRequest",
    "PrecheckService",
    "compare_trees",
    "files_equal",
]
