"""Where: Precheck feature usecases layer.
What: Structured event identifiers shared by the comparison flow and its callers.
Why: Keep log event names in one place for handlers and tests.
"""

from __future__ import annotations

from enum import StrEnum

from ..domain.models import DivergenceKind


class PrecheckEvent(StrEnum):
    """Structured event identifiers for precheck logs."""

    CHECK_START = "precheck.check.start"
    CHECK_COMPLETE = "precheck.check.complete"
    CHECK_ERROR = "precheck.check.error"
    TYPE_MISMATCH = "precheck.divergence.type"
    SIZE_MISMATCH = "precheck.divergence.size"
    CONTENT_MISMATCH = "precheck.divergence.content"

    @staticmethod
    def for_divergence(kind: DivergenceKind) -> "PrecheckEvent":
        """Return the event emitted when a note of ``kind`` is produced."""

        return _DIVERGENCE_EVENTS[kind]


_DIVERGENCE_EVENTS: dict[DivergenceKind, PrecheckEvent] = {
    DivergenceKind.TYPE_MISMATCH: PrecheckEvent.TYPE_MISMATCH,
    DivergenceKind.SIZE_MISMATCH: PrecheckEvent.SIZE_MISMATCH,
    DivergenceKind.CONTENT_MISMATCH: PrecheckEvent.CONTENT_MISMATCH,
}


__all__ = ["PrecheckEvent"]
