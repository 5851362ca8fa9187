"""Player runtime model."""
from __future__ import annotations

from dataclasses import dataclass, field

from seedcrawl.core.types import ArmorTier, WeaponTier
from seedcrawl.domain.equipment import armor_bonus, weapon_bonus

PLAYER_START_X = 1
PLAYER_START_Y = 1


@dataclass(slots=True)
class Bag:
    """Consumable counts."""

    potion: int = 1
    ether: int = 1


@dataclass(slots=True)
class Equipment:
    weapon: WeaponTier = "wooden_sword"
    armor: ArmorTier = "cloth_armor"


@dataclass(slots=True)
class Player:
    """The single hero: position, vitals, progression, purse and gear."""

    x: int = PLAYER_START_X
    y: int = PLAYER_START_Y
    hp: int = 40
    max_hp: int = 40
    mp: int = 12
    max_mp: int = 12
    base_atk: int = 10
    base_def: int = 4
    level: int = 1
    exp: int = 0
    next_exp: int = 20
    gold: int = 15
    equipment: Equipment = field(default_factory=Equipment)
    bag: Bag = field(default_factory=Bag)

    def total_atk(self) -> int:
        return self.base_atk + weapon_bonus(self.equipment.weapon)

    def total_def(self) -> int:
        return self.base_def + armor_bonus(self.equipment.armor)

    @property
    def is_alive(self) -> bool:
        return self.hp > 0
