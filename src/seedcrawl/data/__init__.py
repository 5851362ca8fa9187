"""Data layer utilities: JSON config loading, paths and built-in text."""

from .errors import ConfigError, ConfigLoadError, ConfigValidationError
from .paths import get_difficulty_config_path, get_save_path

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "get_difficulty_config_path",
    "get_save_path",
]
