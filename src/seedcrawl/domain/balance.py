"""Static balance tables: enemy templates, level growth and event odds."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple

from seedcrawl.core.types import EnemyStyle


@dataclass(frozen=True, slots=True)
class EnemyTemplate:
    name: str
    hp: int
    atk: int
    defense: int
    exp: int
    gold: int
    style: EnemyStyle


@dataclass(frozen=True, slots=True)
class StatGrowth:
    """Per-level increments applied on top of a template."""

    hp: int
    atk: int
    defense: int
    exp: int
    gold: int


NORMAL_ENEMIES: Tuple[EnemyTemplate, ...] = (
    EnemyTemplate("enemy.slime", hp=18, atk=6, defense=1, exp=8, gold=6, style="skirmisher"),
    EnemyTemplate("enemy.goblin", hp=24, atk=8, defense=2, exp=11, gold=8, style="caster"),
    EnemyTemplate("enemy.wolf", hp=20, atk=10, defense=2, exp=13, gold=11, style="predator"),
    EnemyTemplate("enemy.skeleton", hp=26, atk=9, defense=3, exp=16, gold=14, style="undead"),
    EnemyTemplate("enemy.orc_brute", hp=34, atk=12, defense=4, exp=20, gold=18, style="brute"),
)
NORMAL_GROWTH = StatGrowth(hp=5, atk=2, defense=1, exp=3, gold=3)

BOSS_TEMPLATE = EnemyTemplate(
    "enemy.ancient_dragon", hp=84, atk=16, defense=7, exp=55, gold=90, style="boss"
)
BOSS_GROWTH = StatGrowth(hp=9, atk=2, defense=1, exp=8, gold=10)

# Progression
NEXT_EXP_BASE_INCREASE = 12
NEXT_EXP_LEVEL_MULTIPLIER = 6
LEVEL_UP_HP_INCREASE = 6
LEVEL_UP_MP_INCREASE = 2
LEVEL_UP_ATK_INCREASE = 2
LEVEL_UP_DEF_INCREASE = 1

# World events
WorldEventKind = Literal["gold_cache", "potion_stash", "ether_stash", "campfire", "spike_trap"]
EVENT_WEIGHTS: Tuple[Tuple[WorldEventKind, int], ...] = (
    ("gold_cache", 30),
    ("potion_stash", 22),
    ("ether_stash", 18),
    ("campfire", 16),
    ("spike_trap", 14),
)
EVENT_GOLD_MIN = 7
EVENT_GOLD_MAX = 16
EVENT_GOLD_PER_LEVEL = 2
EVENT_ITEM_MIN = 1
EVENT_ITEM_MAX = 2
EVENT_CAMPFIRE_HEAL_BASE = 8
EVENT_CAMPFIRE_HEAL_PER_LEVEL = 2
EVENT_TRAP_MIN = 4
EVENT_TRAP_MAX = 10

# Battle
ATTACK_VARIANCE = 3
FIRE_SLASH_MP_COST = 4
FIRE_SLASH_ATK_BONUS = 6
FIRE_SLASH_VARIANCE = 5
POTION_HEAL = 20
ETHER_RESTORE = 8
RUN_BASE_CHANCE = 45
RUN_BOSS_CHANCE = 12
RUN_CHANCE_MIN = 5
RUN_CHANCE_MAX = 90
ENEMY_HIT_VARIANCE = 2
BOSS_BREATH_PERCENT = 60

# Town
POTION_PRICE = 10
ETHER_PRICE = 12
HEALER_PRICE = 8
INN_PRICE = 15
QUEST_TARGET_KILLS = 3
QUEST_REWARD_GOLD = 40
