"""Runtime entity exports."""

from .enemy import Enemy
from .player import PLAYER_START_X, PLAYER_START_Y, Bag, Equipment, Player

__all__ = [
    "Bag",
    "Enemy",
    "Equipment",
    "PLAYER_START_X",
    "PLAYER_START_Y",
    "Player",
]
