"""Logical commands fed into the game aggregate by an input decoder."""
from __future__ import annotations

from dataclasses import dataclass

from seedcrawl.core.types import CommandKind


@dataclass(frozen=True, slots=True)
class Command:
    """A decoded command; `index` is the zero-based slot for `select`."""

    kind: CommandKind
    index: int | None = None

    @classmethod
    def select(cls, index: int) -> "Command":
        return cls("select", index)
