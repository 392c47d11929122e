"""Rich logging handler for structured precheck events.

Where: platform/logging/handlers.py
What: Render ``precheck_event`` log records with icons and compact paths.
Why: Keep console formatting out of the comparison use cases.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PathRichHandler(RichHandler):
    """Rich handler that renders precheck events with styled, compact paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "precheck.check.start": ("🔍", "cyan"),
        "precheck.check.complete": ("✅", "green"),
        "precheck.check.error": ("❌", "red"),
        "precheck.divergence.type": ("⛔", "red"),
        "precheck.divergence.size": ("📏", "yellow"),
        "precheck.divergence.content": ("⚠️", "yellow"),
    }
    _DIVERGENCE_LABELS: ClassVar[dict[str, str]] = {
        "precheck.divergence.type": "Different types",
        "precheck.divergence.size": "Different sizes",
        "precheck.divergence.content": "Content differs",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path with colored separators and compact rendering.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path`` when possible.

        Returns:
            Text: Formatted path with colored separators and ellipsis truncation.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and self._is_relative_to(pure_path, base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor:
            if isinstance(display_path, PureWindowsPath):
                display_string = anchor.rstrip("\\/") + separator
            else:
                display_string = separator
        if truncated:
            display_string += "…"
            if body_parts:
                display_string += separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    def _full_path(self, path: str) -> Text:
        """Style ``path`` exactly as given, without relativizing or truncation."""

        separator = "\\" if isinstance(self._to_pure_path(path), PureWindowsPath) else "/"
        return self._style_path_string(path, separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _is_relative_to(path: PurePath, other: PurePath) -> bool:
        """Return whether ``path`` can be expressed relative to ``other``."""

        try:
            _ = path.relative_to(other)
            return True
        except ValueError:
            return False

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        separator_chars = {separator}
        if separator == "\\":
            separator_chars.add("/")

        for char in path_string:
            if char in separator_chars or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_precheck_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured precheck events with dedicated styling."""

        event = getattr(record, "precheck_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        source_root = getattr(record, "source_root", None)
        destination_root = getattr(record, "destination_root", None)

        if event.startswith("precheck.divergence"):
            _ = body.append(self._DIVERGENCE_LABELS.get(event, "Divergence") + " ")
            source_path = getattr(record, "source_path", None)
            destination_path = getattr(record, "destination_path", None)
            if source_path:
                _ = body.append_text(self._format_path(str(source_path), base=source_root))
            if destination_path:
                _ = body.append(" ↔ ")
                _ = body.append_text(
                    self._format_path(str(destination_path), base=destination_root)
                )
        elif event == "precheck.check.start":
            _ = body.append("Checking before copying from '")
            if source_root:
                _ = body.append_text(self._full_path(str(source_root)))
            _ = body.append("' to '")
            if destination_root:
                _ = body.append_text(self._full_path(str(destination_root)))
            _ = body.append("'")
        elif event == "precheck.check.complete":
            _ = body.append("Check complete")
            metrics: list[str] = []
            note_count = getattr(record, "note_count", None)
            if isinstance(note_count, int):
                metrics.append(f"divergences={note_count}")
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                metrics.append(f"duration={duration:.2f}s")
            if metrics:
                _ = body.append(" [" + ", ".join(metrics) + "]")
        else:
            _ = body.append("Check failed")
            error_message = getattr(record, "error_message", None)
            if error_message:
                _ = body.append(f" ({error_message})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for precheck events."""

        precheck_text = self._render_precheck_message(record)
        if precheck_text is not None:
            return precheck_text

        return super().render_message(record, message)


__all__ = ["PathRichHandler"]
