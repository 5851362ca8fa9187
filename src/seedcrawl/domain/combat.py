"""Damage formula with bounded randomness."""
from __future__ import annotations

from seedcrawl.core.rng import RNG


def damage_with_roll(attack: int, defense: int, roll: int) -> int:
    """Return `attack - defense + roll`, never below 1."""
    return max(1, attack - defense + roll)


def random_damage(rng: RNG, attack: int, defense: int, variance: int) -> int:
    """Roll uniformly in [-variance, +variance] and apply the damage formula."""
    spread = abs(variance)
    roll = rng.randint(-spread, spread)
    return damage_with_roll(attack, defense, roll)
