"""Environment-driven runtime settings."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from seedcrawl.core.types import Difficulty, Language
from seedcrawl.data import paths
from seedcrawl.domain.difficulty import difficulty_from_tag
from seedcrawl.domain.language import language_from_locale_tag

ENV_SAVE_PATH = "SEEDCRAWL_SAVE_PATH"
ENV_DIFFICULTY_CONFIG = "SEEDCRAWL_DIFFICULTY_CONFIG"
ENV_LANGUAGE = "SEEDCRAWL_LANG"
ENV_DIFFICULTY = "SEEDCRAWL_DIFFICULTY"
ENV_LOG_LEVEL = "SEEDCRAWL_LOG_LEVEL"

_DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class Settings:
    save_path: Path
    difficulty_config_path: Path
    language: Language
    difficulty: Difficulty
    log_level: int


def _resolve_log_level(value: str | None) -> int:
    name = (value or _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read settings from the environment; unset or unknown values use defaults."""
    env = os.environ if environ is None else environ
    return Settings(
        save_path=paths.get_save_path(env.get(ENV_SAVE_PATH) or None),
        difficulty_config_path=paths.get_difficulty_config_path(env.get(ENV_DIFFICULTY_CONFIG) or None),
        language=language_from_locale_tag(env.get(ENV_LANGUAGE)),
        difficulty=difficulty_from_tag(env.get(ENV_DIFFICULTY)),
        log_level=_resolve_log_level(env.get(ENV_LOG_LEVEL)),
    )
