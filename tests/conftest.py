"""Shared pytest fixtures for the precopy test suite."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path

import pytest

# Keep a developer's own configuration file out of the test run.
os.environ["PRECOPY_CONFIG"] = str(
    Path(__file__).resolve().parent / ".missing-config" / "config.toml"
)

TreeSpec = Mapping[str, bytes | None]


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[str, TreeSpec], Path]:
    """Create a directory tree from ``{relative_path: content}``.

    A ``None`` content creates a directory instead of a file.
    """

    def _make(name: str, entries: TreeSpec) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        for relative, content in entries.items():
            target = root / relative
            if content is None:
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_bytes(content)
        return root

    return _make
