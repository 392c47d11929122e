"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point configuration discovery at a temporary file and reset the singleton."""

    target = tmp_path / "precopy" / "config.toml"
    monkeypatch.setenv("PRECOPY_CONFIG", str(target))

    import precopy.config.config as config_module

    monkeypatch.setattr(config_module.Config, "_instance", None)
    monkeypatch.setattr(config_module.Config, "_loaded_from", None)
    return target
