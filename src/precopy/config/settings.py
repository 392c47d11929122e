"""Where: src/precopy/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Validate configured values once, when a command starts, instead of at import.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from precopy.config.config import COMPARE_CHUNK_SIZE_DEFAULT, Config


@dataclass(slots=True, frozen=True)
class RuntimeSettings:
    """Validated values a command run needs from the configuration file."""

    chunk_size: int = COMPARE_CHUNK_SIZE_DEFAULT
    show_notes: bool = True
    log_file: Path | None = None

    @classmethod
    def from_config(cls, configuration: Config) -> RuntimeSettings:
        """Derive settings, replacing a non-positive chunk size with the default."""

        chunk_size = configuration.chunk_size
        return cls(
            chunk_size=chunk_size if chunk_size > 0 else COMPARE_CHUNK_SIZE_DEFAULT,
            show_notes=configuration.show_notes,
            log_file=configuration.log_file,
        )


def load_settings(config_file: Path | None = None) -> RuntimeSettings:
    """Load the configuration file and derive runtime settings from it.

    Raises:
        OSError: If the configuration file cannot be read.
        tomllib.TOMLDecodeError: If the configuration file is not valid TOML.
        TypeError: If a configured value has the wrong type.
    """
    return RuntimeSettings.from_config(Config.load(config_file))


__all__ = [
    "RuntimeSettings",
    "load_settings",
]
