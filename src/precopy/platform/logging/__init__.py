"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export configured logger, setup helpers, and custom Rich handlers.
Why: Provide a single canonical import path for every layer.
"""

from __future__ import annotations

from .config import logger, setup_logger
from .handlers import PathRichHandler

__all__ = [
    "PathRichHandler",
    "logger",
    "setup_logger",
]
