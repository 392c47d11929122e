"""Configuration loading and derived settings."""

from precopy.config.config import COMPARE_CHUNK_SIZE_DEFAULT, Config
from precopy.config.paths import default_config_path
from precopy.config.settings import RuntimeSettings, load_settings

__all__ = [
    "COMPARE_CHUNK_SIZE_DEFAULT",
    "Config",
    "RuntimeSettings",
    "default_config_path",
    "load_settings",
]
