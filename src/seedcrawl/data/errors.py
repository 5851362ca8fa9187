"""Errors raised while reading configuration files."""
from __future__ import annotations

from pathlib import Path


class ConfigError(Exception):
    """Base error for config files; `path` names the offending file when known."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigLoadError(ConfigError):
    """The file is missing, unreadable, or not JSON."""


class ConfigValidationError(ConfigError):
    """The JSON parsed but does not have the expected shape."""
