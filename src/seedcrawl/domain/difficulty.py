"""Difficulty profiles layered on top of the balance tables."""
from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict

from seedcrawl.core.types import Difficulty


@dataclass(frozen=True, slots=True)
class DifficultyProfile:
    """Per-difficulty tunables; immutable once a game session resolves it."""

    random_encounter_rate_percent: int
    world_event_rate_percent: int
    enemy_hp_scale: float
    enemy_atk_scale: float
    enemy_def_scale: float
    enemy_reward_scale: float
    enemy_skill_rate_percent: int
    run_chance_bonus_percent: int

    @staticmethod
    def scale_stat(value: int, multiplier: float) -> int:
        return scale_stat(value, multiplier)


PROFILE_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(DifficultyProfile))


def scale_stat(value: int, multiplier: float) -> int:
    """Scale a stat and round half away from zero; never below 1."""
    product = Decimal(str(value)) * Decimal(str(multiplier))
    return max(1, int(product.to_integral_value(rounding=ROUND_HALF_UP)))


def clamp_rate(value: int) -> int:
    return max(0, min(100, value))


BUILTIN_PROFILES: Dict[Difficulty, DifficultyProfile] = {
    "easy": DifficultyProfile(
        random_encounter_rate_percent=12,
        world_event_rate_percent=18,
        enemy_hp_scale=0.86,
        enemy_atk_scale=0.85,
        enemy_def_scale=0.9,
        enemy_reward_scale=0.95,
        enemy_skill_rate_percent=16,
        run_chance_bonus_percent=18,
    ),
    "normal": DifficultyProfile(
        random_encounter_rate_percent=16,
        world_event_rate_percent=14,
        enemy_hp_scale=1.0,
        enemy_atk_scale=1.0,
        enemy_def_scale=1.0,
        enemy_reward_scale=1.0,
        enemy_skill_rate_percent=26,
        run_chance_bonus_percent=0,
    ),
    "hard": DifficultyProfile(
        random_encounter_rate_percent=21,
        world_event_rate_percent=11,
        enemy_hp_scale=1.22,
        enemy_atk_scale=1.18,
        enemy_def_scale=1.15,
        enemy_reward_scale=1.12,
        enemy_skill_rate_percent=40,
        run_chance_bonus_percent=-10,
    ),
}


def difficulty_label_key(difficulty: Difficulty) -> str:
    return f"ui.difficulty.{difficulty}"


def difficulty_from_tag(tag: str | None) -> Difficulty:
    """Map a free-form setting to a difficulty, defaulting to normal."""
    normalized = (tag or "").strip().lower()
    if normalized in BUILTIN_PROFILES:
        return normalized  # type: ignore[return-value]
    return "normal"
