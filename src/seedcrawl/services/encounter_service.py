"""Builds scaled enemies for random encounters and the lair boss."""
from __future__ import annotations

from seedcrawl.core.rng import RNG
from seedcrawl.domain.balance import (
    BOSS_GROWTH,
    BOSS_TEMPLATE,
    NORMAL_ENEMIES,
    NORMAL_GROWTH,
    EnemyTemplate,
    StatGrowth,
)
from seedcrawl.domain.difficulty import DifficultyProfile, scale_stat
from seedcrawl.domain.entities import Enemy


def _build_enemy(
    template: EnemyTemplate,
    growth: StatGrowth,
    steps: int,
    profile: DifficultyProfile,
    *,
    is_boss: bool,
) -> Enemy:
    hp = scale_stat(template.hp + steps * growth.hp, profile.enemy_hp_scale)
    return Enemy(
        name=template.name,
        hp=hp,
        max_hp=hp,
        atk=scale_stat(template.atk + steps * growth.atk, profile.enemy_atk_scale),
        defense=scale_stat(template.defense + steps * growth.defense, profile.enemy_def_scale),
        exp_reward=scale_stat(template.exp + steps * growth.exp, profile.enemy_reward_scale),
        gold_reward=scale_stat(template.gold + steps * growth.gold, profile.enemy_reward_scale),
        is_boss=is_boss,
        style=template.style,
    )


def generate_enemy(player_level: int, rng: RNG, profile: DifficultyProfile) -> Enemy:
    """Pick a normal template uniformly and scale it by `level - 1`."""
    template = rng.choice(NORMAL_ENEMIES)
    return _build_enemy(template, NORMAL_GROWTH, player_level - 1, profile, is_boss=False)


def generate_boss(player_level: int, profile: DifficultyProfile) -> Enemy:
    """The lair boss grows with the full player level."""
    return _build_enemy(BOSS_TEMPLATE, BOSS_GROWTH, player_level, profile, is_boss=True)


def generate_encounter(
    player_level: int, boss: bool, rng: RNG, profile: DifficultyProfile
) -> Enemy:
    if boss:
        return generate_boss(player_level, profile)
    return generate_enemy(player_level, rng, profile)
