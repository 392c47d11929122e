"""
Summary: Stream two files in lock-step and decide byte-for-byte equality.
Why: Bound memory to two chunks regardless of file size.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, final

from precopy.config.config import COMPARE_CHUNK_SIZE_DEFAULT

from ..domain.errors import FileIOError
from .ports import FilesystemPort


def read_chunk(stream: BinaryIO, size: int) -> bytes:
    """Read until ``size`` bytes are collected or the stream is exhausted.

    A short read is followed by further reads, so the returned chunk is only
    shorter than ``size`` at end of data.
    """

    first = stream.read(size)
    if not first or len(first) == size:
        return first or b""

    buffer = bytearray(first)
    while len(buffer) < size:
        block = stream.read(size - len(buffer))
        if not block:
            break
        buffer.extend(block)
    return bytes(buffer)


@final
class FileComparator:
    """Compare file contents chunk by chunk."""

    def __init__(self, filesystem: FilesystemPort, chunk_size: int | None = None) -> None:
        """Initialize the comparator.

        Args:
            filesystem: Port used to open files.
            chunk_size: Bytes read per file per step. ``None`` or a non-positive
                value falls back to ``COMPARE_CHUNK_SIZE_DEFAULT``.
        """
        self._filesystem = filesystem
        if chunk_size is None or chunk_size <= 0:
            chunk_size = COMPARE_CHUNK_SIZE_DEFAULT
        self.chunk_size = chunk_size

    def content_equals(self, first: Path, second: Path) -> bool:
        """Return True when both files hold identical bytes.

        Sizes are not required to match beforehand; a length difference is
        detected when one stream ends before the other.

        Raises:
            FileIOError: If either file cannot be opened or read.
        """
        with self._open(first) as left, self._open(second) as right:
            while True:
                left_chunk = self._read(left, first)
                right_chunk = self._read(right, second)
                if left_chunk != right_chunk:
                    return False
                if not left_chunk:
                    return True

    def _open(self, path: Path) -> BinaryIO:
        try:
            return self._filesystem.open_binary(path)
        except OSError as exc:
            raise FileIOError(path, exc) from exc

    def _read(self, stream: BinaryIO, path: Path) -> bytes:
        try:
            return read_chunk(stream, self.chunk_size)
        except OSError as exc:
            raise FileIOError(path, exc) from exc


__all__ = ["FileComparator", "read_chunk"]
