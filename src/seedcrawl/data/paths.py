"""Helpers for resolving data file locations."""
from __future__ import annotations

from pathlib import Path

DEFAULT_SAVE_FILENAME = "savegame.json"
DEFAULT_DIFFICULTY_CONFIG = Path("config") / "difficulty.json"


def get_difficulty_config_path(base_path: Path | str | None = None) -> Path:
    """Return the difficulty preset file, relative to the working directory by default."""
    if base_path is not None:
        return Path(base_path)
    return DEFAULT_DIFFICULTY_CONFIG


def get_save_path(base_path: Path | str | None = None) -> Path:
    """Return the single save slot path."""
    if base_path is not None:
        return Path(base_path)
    return Path(DEFAULT_SAVE_FILENAME)
