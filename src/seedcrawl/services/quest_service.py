"""Quest board interactions and kill tracking messages."""
from __future__ import annotations

from typing import List

from seedcrawl.domain.entities import Player
from seedcrawl.domain.messages import Message, msg
from seedcrawl.domain.quest_state import QuestState


def visit_quest_board(player: Player, quest: QuestState) -> Message:
    """Accept, claim exactly once, or report where the quest stands."""
    if not quest.accepted:
        quest.accepted = True
        return msg("log.quest.accepted", target=quest.target_kills, reward=quest.reward_gold)
    if quest.ready_to_claim:
        quest.rewarded = True
        player.gold += quest.reward_gold
        return msg("log.quest.reward_claimed", reward=quest.reward_gold)
    if quest.rewarded:
        return msg("log.quest.already_claimed")
    return msg("log.quest.progress", progress=quest.progress_text())


def record_kill(quest: QuestState) -> List[Message]:
    """Register a normal-enemy kill and describe any change."""
    if quest.register_kill():
        return [
            msg("log.quest.completed", progress=quest.progress_text(), reward=quest.reward_gold)
        ]
    if quest.is_active:
        return [msg("log.quest.progress_short", progress=quest.progress_text())]
    return []


def quest_status_key(quest: QuestState) -> str:
    if not quest.accepted:
        return "ui.quest.none"
    if quest.rewarded:
        return "ui.quest.done"
    if quest.completed:
        return "ui.quest.ready"
    return "ui.quest.progress"
