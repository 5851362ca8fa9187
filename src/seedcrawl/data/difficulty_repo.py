"""Repository for difficulty presets with a built-in fallback table."""
from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Dict

from seedcrawl.core.types import DIFFICULTIES, Difficulty
from seedcrawl.data import paths
from seedcrawl.data.errors import ConfigError, ConfigValidationError
from seedcrawl.data.json_loader import load_json_object
from seedcrawl.domain.difficulty import BUILTIN_PROFILES, PROFILE_FIELDS, DifficultyProfile

logger = logging.getLogger(__name__)

_FLOAT_FIELDS = {"enemy_hp_scale", "enemy_atk_scale", "enemy_def_scale", "enemy_reward_scale"}


class DifficultyRepository:
    """Loads the three presets once; any problem with the file means built-ins."""

    def __init__(self, config_path: Path | str | None = None) -> None:
        self._config_path = paths.get_difficulty_config_path(config_path)
        self._profiles: Dict[Difficulty, DifficultyProfile] | None = None

    @property
    def config_path(self) -> Path:
        return self._config_path

    def get(self, difficulty: Difficulty) -> DifficultyProfile:
        self._ensure_loaded()
        assert self._profiles is not None
        return self._profiles[difficulty]

    def all(self) -> Dict[Difficulty, DifficultyProfile]:
        self._ensure_loaded()
        assert self._profiles is not None
        return dict(self._profiles)

    def _ensure_loaded(self) -> None:
        if self._profiles is not None:
            return
        try:
            self._profiles = self._load_from_file()
        except ConfigError as exc:
            logger.debug("Using built-in difficulty presets instead of %s: %s", self.config_path, exc)
            self._profiles = dict(BUILTIN_PROFILES)

    def _load_from_file(self) -> Dict[Difficulty, DifficultyProfile]:
        raw = load_json_object(self._config_path)
        profiles: Dict[Difficulty, DifficultyProfile] = {}
        for difficulty in DIFFICULTIES:
            entry = raw.get(difficulty)
            if not isinstance(entry, dict):
                raise ConfigValidationError(f"Preset '{difficulty}' must be an object.")
            profiles[difficulty] = self._build_profile(entry, difficulty)
        return profiles

    @staticmethod
    def _build_profile(entry: dict[str, object], context: str) -> DifficultyProfile:
        values: Dict[str, object] = {}
        for name in PROFILE_FIELDS:
            if name not in entry:
                raise ConfigValidationError(f"{context}.{name} is missing.")
            value = entry[name]
            # bool is an int subclass; reject it explicitly.
            if isinstance(value, bool):
                raise ConfigValidationError(f"{context}.{name} must be numeric.")
            if name in _FLOAT_FIELDS:
                if not isinstance(value, (int, float)) or not math.isfinite(value):
                    raise ConfigValidationError(f"{context}.{name} must be a finite number.")
                values[name] = float(value)
            else:
                if not isinstance(value, int):
                    raise ConfigValidationError(f"{context}.{name} must be an integer.")
                values[name] = value
        return DifficultyProfile(**values)  # type: ignore[arg-type]
