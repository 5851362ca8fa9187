"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

from seedcrawl.domain.entities import Enemy
from seedcrawl.domain.messages import Message

BattleOutcomeKind = Literal["continue", "escaped", "enemy_defeated", "player_defeated"]


@dataclass(slots=True)
class Battle:
    """One active fight; `defending` guards exactly one incoming enemy action."""

    enemy: Enemy
    defending: bool = False


@dataclass(slots=True)
class TurnResult:
    outcome: BattleOutcomeKind
    messages: List[Message] = field(default_factory=list)
    enemy: Enemy | None = None  # snapshot of the defeated enemy

    @property
    def is_terminal(self) -> bool:
        return self.outcome != "continue"
