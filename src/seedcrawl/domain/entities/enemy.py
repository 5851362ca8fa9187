"""Enemy runtime model."""
from __future__ import annotations

from dataclasses import dataclass

from seedcrawl.core.types import EnemyStyle


@dataclass(slots=True)
class Enemy:
    """A spawned enemy; `name` is a catalog key or a literal display name."""

    name: str
    hp: int
    max_hp: int
    atk: int
    defense: int
    exp_reward: int
    gold_reward: int
    is_boss: bool = False
    style: EnemyStyle = "skirmisher"
