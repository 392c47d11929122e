"""
Summary: Validate chunked content comparison of file pairs.
Why: Equality must hold across chunk boundaries, short reads and standalone calls.
"""

from __future__ import annotations

import errno
import io
from pathlib import Path
from typing import BinaryIO

import pytest

from precopy.config import COMPARE_CHUNK_SIZE_DEFAULT
from precopy.features.precheck import FileIOError
from precopy.features.precheck.adapters import LocalFileSystem
from precopy.features.precheck.usecases.file_comparator import FileComparator, read_chunk

CHUNK = 8


class _TricklingStream(io.BytesIO):
    """Stream that never returns more than a few bytes per read call."""

    def read(self, size: int | None = -1) -> bytes:
        if size is None or size < 0:
            return super().read(3)
        return super().read(min(size, 3))


class _FailingStream(io.BytesIO):
    """Stream whose reads fail after the first chunk."""

    def __init__(self, data: bytes) -> None:
        super().__init__(data)
        self.reads = 0

    def read(self, size: int | None = -1) -> bytes:
        self.reads += 1
        if self.reads > 1:
            raise OSError(errno.EIO, "Input/output error")
        return super().read(size)


class _RecordingFilesystem(LocalFileSystem):
    """Local filesystem that records every stream it opens."""

    def __init__(self, stream_type: type[io.BytesIO] | None = None) -> None:
        self.stream_type = stream_type
        self.opened: list[BinaryIO] = []

    def open_binary(self, path: Path) -> BinaryIO:
        if self.stream_type is None:
            stream = super().open_binary(path)
        else:
            stream = self.stream_type(path.read_bytes())
        self.opened.append(stream)
        return stream


def _write(path: Path, content: bytes) -> Path:
    _ = path.write_bytes(content)
    return path


@pytest.mark.parametrize("length", [0, 1, CHUNK, CHUNK + 1, CHUNK * 13 + 5])
def test_identical_content_is_equal(tmp_path: Path, length: int) -> None:
    """Independently created files with the same bytes compare equal at any length."""

    content = bytes(index % 251 for index in range(length))
    first = _write(tmp_path / "first.bin", content)
    second = _write(tmp_path / "second.bin", content)

    comparator = FileComparator(LocalFileSystem(), chunk_size=CHUNK)

    assert comparator.content_equals(first, second) is True


def test_file_equals_itself(tmp_path: Path) -> None:
    """A file always matches itself."""

    target = _write(tmp_path / "same.bin", b"x" * (CHUNK * 3))

    assert FileComparator(LocalFileSystem(), chunk_size=CHUNK).content_equals(target, target)


@pytest.mark.parametrize(
    ("left", "right"),
    [
        (b"abc", b"abcd"),
        (b"abcd", b"abc"),
        (b"", b"a"),
        (b"a" * CHUNK, b"a" * (CHUNK + 1)),
    ],
)
def test_different_lengths_are_unequal(tmp_path: Path, left: bytes, right: bytes) -> None:
    """Calling the comparator without a size precheck still detects length differences."""

    first = _write(tmp_path / "left.bin", left)
    second = _write(tmp_path / "right.bin", right)

    assert FileComparator(LocalFileSystem(), chunk_size=CHUNK).content_equals(first, second) is False


def test_last_byte_difference_at_chunk_boundary(tmp_path: Path) -> None:
    """A difference in the final byte of the final full chunk is detected."""

    content = bytearray(b"z" * (CHUNK * 2))
    first = _write(tmp_path / "first.bin", bytes(content))
    content[-1] = ord("y")
    second = _write(tmp_path / "second.bin", bytes(content))

    assert FileComparator(LocalFileSystem(), chunk_size=CHUNK).content_equals(first, second) is False


def test_short_reads_do_not_cause_false_mismatch(tmp_path: Path) -> None:
    """Streams returning partial reads are filled to a whole chunk before comparing."""

    content = b"0123456789" * 7
    first = _write(tmp_path / "first.bin", content)
    second = _write(tmp_path / "second.bin", content)
    filesystem = _RecordingFilesystem(stream_type=_TricklingStream)

    assert FileComparator(filesystem, chunk_size=CHUNK).content_equals(first, second) is True


def test_streams_closed_after_early_mismatch(tmp_path: Path) -> None:
    """Both files are released when the comparison short-circuits."""

    first = _write(tmp_path / "first.bin", b"a" + b"x" * (CHUNK * 4))
    second = _write(tmp_path / "second.bin", b"b" + b"x" * (CHUNK * 4))
    filesystem = _RecordingFilesystem()

    assert FileComparator(filesystem, chunk_size=CHUNK).content_equals(first, second) is False
    assert len(filesystem.opened) == 2
    assert all(stream.closed for stream in filesystem.opened)


def test_missing_file_raises_file_io_error(tmp_path: Path) -> None:
    """A file that cannot be opened surfaces as FileIOError naming it, closing the other."""

    present = _write(tmp_path / "present.bin", b"data")
    missing = tmp_path / "missing.bin"
    filesystem = _RecordingFilesystem()

    with pytest.raises(FileIOError) as exc_info:
        _ = FileComparator(filesystem, chunk_size=CHUNK).content_equals(present, missing)

    assert exc_info.value.path == missing
    assert isinstance(exc_info.value.cause, FileNotFoundError)
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)
    assert all(stream.closed for stream in filesystem.opened)


def test_read_failure_raises_file_io_error(tmp_path: Path) -> None:
    """Read errors other than end of data are propagated, not treated as inequality."""

    first = _write(tmp_path / "first.bin", b"q" * (CHUNK * 3))
    second = _write(tmp_path / "second.bin", b"q" * (CHUNK * 3))
    filesystem = _RecordingFilesystem(stream_type=_FailingStream)

    with pytest.raises(FileIOError) as exc_info:
        _ = FileComparator(filesystem, chunk_size=CHUNK).content_equals(first, second)

    assert exc_info.value.path == first
    assert "Input/output error" in str(exc_info.value)
    assert all(stream.closed for stream in filesystem.opened)


def test_default_chunk_size_is_64_kib() -> None:
    """Without an explicit size the built-in default is used."""

    assert FileComparator(LocalFileSystem()).chunk_size == COMPARE_CHUNK_SIZE_DEFAULT == 64 * 1024


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_chunk_size_falls_back_to_default(size: int, tmp_path: Path) -> None:
    """A chunk of no bytes is replaced by the default instead of failing."""

    comparator = FileComparator(LocalFileSystem(), chunk_size=size)
    first = _write(tmp_path / "first.bin", b"payload")
    second = _write(tmp_path / "second.bin", b"payload")

    assert comparator.chunk_size == COMPARE_CHUNK_SIZE_DEFAULT
    assert comparator.content_equals(first, second)


def test_read_chunk_fills_until_size_or_end() -> None:
    """Partial reads are accumulated; only the final chunk may be short."""

    stream = _TricklingStream(b"abcdefghij")

    assert read_chunk(stream, 4) == b"abcd"
    assert read_chunk(stream, 4) == b"efgh"
    assert read_chunk(stream, 4) == b"ij"
    assert read_chunk(stream, 4) == b""
