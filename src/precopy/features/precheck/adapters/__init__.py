"""Adapters binding precheck ports to concrete infrastructure."""

from .local_filesystem import LocalFileSystem

__all__ = ["LocalFileSystem"]
