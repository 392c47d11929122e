"""Configuration management for precopy."""

import logging
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from precopy.config.paths import default_config_path

COMPARE_CHUNK_SIZE_DEFAULT: Final[int] = 64 * 1024

_logger = logging.getLogger("precopy.config")


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Optional rotating log file; console-only logging when unset
    log_file: Path | None = _path_field()

    # Bytes read per file per step while comparing contents
    chunk_size: int = COMPARE_CHUNK_SIZE_DEFAULT

    # Whether each divergence is reported as soon as it is found
    show_notes: bool = True

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    @classmethod
    def from_mapping(cls, raw: dict[str, Any]) -> "Config":
        """Build a configuration from parsed TOML, ignoring unknown keys.

        Args:
            raw: Parsed TOML document.

        Returns:
            Config: Configuration populated from ``raw``.

        Raises:
            TypeError: If a known key carries a value of the wrong type.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in raw.items():
            if key not in known:
                _logger.warning("Ignoring unknown configuration key: %s", key)
                continue
            values[key] = value

        chunk_size = values.get("chunk_size", COMPARE_CHUNK_SIZE_DEFAULT)
        if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
            raise TypeError(f"chunk_size must be an integer, got {chunk_size!r}")
        show_notes = values.get("show_notes", True)
        if not isinstance(show_notes, bool):
            raise TypeError(f"show_notes must be a boolean, got {show_notes!r}")
        log_file = values.get("log_file")
        if log_file is not None and not isinstance(log_file, str):
            raise TypeError(f"log_file must be a string, got {log_file!r}")

        return cls(**values)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            config_file: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object, or defaults when no file exists.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        target = config_file or default_config_path()

        try:
            if target.exists():
                with open(target, "rb") as f:
                    config_dict = tomllib.load(f)
                instance = cls.from_mapping(config_dict)
                _logger.debug("Configuration loaded from %s", target)
            else:
                instance = cls()
                _logger.debug("No configuration at %s; using defaults", target)
        except (OSError, tomllib.TOMLDecodeError, TypeError) as e:
            _logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = instance
        cls._loaded_from = target
        return instance
