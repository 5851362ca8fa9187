"""Seeded turn-based dungeon crawler."""

__version__ = "0.1.0"
