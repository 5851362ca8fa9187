"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random
from typing import Sequence, TypeVar

T_co = TypeVar("T_co")

# Mixed into the map seed so the game stream never mirrors the world-generation stream.
RNG_SALT = 0x9E3779B97F4A7C15
_SEED_MASK = (1 << 64) - 1


class RNG:
    """Wrapper around random.Random that provides deterministic helpers."""

    def __init__(self, seed: int) -> None:
        self._seed = seed & _SEED_MASK
        self._random = Random(self._seed)

    @classmethod
    def for_game(cls, map_seed: int) -> "RNG":
        """Return the gameplay stream for a map seed (seed XOR salt)."""
        return cls((map_seed & _SEED_MASK) ^ RNG_SALT)

    @property
    def seed(self) -> int:
        return self._seed

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def randrange(self, stop: int) -> int:
        """Return a random integer N such that 0 <= N < stop."""
        return self._random.randrange(stop)

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._random.random()

    def percent(self) -> int:
        """Return a uniform roll in 0..99, used for percentage gates."""
        return self._random.randrange(100)

    def choice(self, seq: Sequence[T_co]) -> T_co:
        """Return a random element from the non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return self._random.choice(seq)
