"""Ordered weapon/armor tier tables."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from seedcrawl.core.types import ArmorTier, WeaponTier


@dataclass(frozen=True, slots=True)
class TierSpec:
    bonus: int
    next_tier: str | None
    upgrade_cost: int | None  # price of moving to next_tier

    @property
    def is_max(self) -> bool:
        return self.next_tier is None


WEAPON_TIERS: Dict[WeaponTier, TierSpec] = {
    "wooden_sword": TierSpec(bonus=0, next_tier="bronze_sword", upgrade_cost=30),
    "bronze_sword": TierSpec(bonus=3, next_tier="knight_sword", upgrade_cost=85),
    "knight_sword": TierSpec(bonus=7, next_tier=None, upgrade_cost=None),
}

ARMOR_TIERS: Dict[ArmorTier, TierSpec] = {
    "cloth_armor": TierSpec(bonus=0, next_tier="chain_armor", upgrade_cost=26),
    "chain_armor": TierSpec(bonus=2, next_tier="steel_armor", upgrade_cost=80),
    "steel_armor": TierSpec(bonus=6, next_tier=None, upgrade_cost=None),
}


def weapon_bonus(tier: WeaponTier) -> int:
    return WEAPON_TIERS[tier].bonus


def armor_bonus(tier: ArmorTier) -> int:
    return ARMOR_TIERS[tier].bonus


def weapon_label_key(tier: WeaponTier) -> str:
    return f"item.weapon.{tier}"


def armor_label_key(tier: ArmorTier) -> str:
    return f"item.armor.{tier}"
