"""Core primitives shared by every layer."""

from .rng import RNG, RNG_SALT

__all__ = ["RNG", "RNG_SALT"]
