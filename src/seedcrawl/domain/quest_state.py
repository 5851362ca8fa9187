"""Kill-count quest state."""
from __future__ import annotations

from dataclasses import dataclass

from seedcrawl.domain.balance import QUEST_REWARD_GOLD, QUEST_TARGET_KILLS


@dataclass(slots=True)
class QuestState:
    """Lifecycle: not accepted -> accepted -> completed -> rewarded."""

    accepted: bool = False
    completed: bool = False
    rewarded: bool = False
    kills: int = 0
    target_kills: int = QUEST_TARGET_KILLS
    reward_gold: int = QUEST_REWARD_GOLD

    def register_kill(self) -> bool:
        """Count a kill; return True only on the kill that completes the quest."""
        if not self.accepted or self.completed:
            return False
        self.kills = min(self.kills + 1, self.target_kills)
        if self.kills >= self.target_kills:
            self.completed = True
            return True
        return False

    def progress_text(self) -> str:
        return f"{self.kills}/{self.target_kills}"

    @property
    def is_active(self) -> bool:
        return self.accepted and not self.completed

    @property
    def ready_to_claim(self) -> bool:
        return self.completed and not self.rewarded
