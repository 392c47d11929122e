"""Shared path utilities for configuration locations.

This module centralizes how the application discovers its config file.

Policy:
- Config: ``$PRECOPY_CONFIG`` when set, otherwise
  ``$XDG_CONFIG_HOME/precopy/config.toml`` (``~/.config`` when unset).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_ENV_CONFIG_FILE: Final[str] = "PRECOPY_CONFIG"
_ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _config_home(env: Mapping[str, str] | None = None) -> Path:
    """Return the XDG configuration home directory."""

    mapping = env if env is not None else os.environ
    raw = (mapping.get(_ENV_XDG_CONFIG_HOME) or "").strip()
    if raw:
        return Path(raw)
    return Path.home() / ".config"


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the main TOML config file.

    Args:
        env: Optional environment mapping (defaults to ``os.environ``).

    Returns:
        Path: Resolved location of ``config.toml``.
    """
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: _config_home(env) / "precopy" / "config.toml",
    )


__all__ = [
    "default_config_path",
    "resolve_overridable_path",
]
