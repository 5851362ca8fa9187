"""Experience, gold and level-up application after a won battle."""
from __future__ import annotations

from typing import List

from seedcrawl.domain.balance import (
    LEVEL_UP_ATK_INCREASE,
    LEVEL_UP_DEF_INCREASE,
    LEVEL_UP_HP_INCREASE,
    LEVEL_UP_MP_INCREASE,
    NEXT_EXP_BASE_INCREASE,
    NEXT_EXP_LEVEL_MULTIPLIER,
)
from seedcrawl.domain.entities import Enemy, Player
from seedcrawl.domain.messages import Message, msg


def apply_battle_rewards(player: Player, enemy: Enemy) -> List[Message]:
    """Grant rewards, then level up as many times as the exp allows."""
    messages = [
        msg(
            "log.progression.defeated_reward",
            enemy=msg(enemy.name),
            exp=enemy.exp_reward,
            gold=enemy.gold_reward,
        )
    ]
    player.exp += enemy.exp_reward
    player.gold += enemy.gold_reward
    while player.exp >= player.next_exp:
        player.exp -= player.next_exp
        level_up(player)
        messages.append(msg("log.progression.level_up", level=player.level))
    return messages


def level_up(player: Player) -> None:
    player.level += 1
    player.next_exp += NEXT_EXP_BASE_INCREASE + player.level * NEXT_EXP_LEVEL_MULTIPLIER
    player.max_hp += LEVEL_UP_HP_INCREASE
    player.max_mp += LEVEL_UP_MP_INCREASE
    player.base_atk += LEVEL_UP_ATK_INCREASE
    player.base_def += LEVEL_UP_DEF_INCREASE
    player.hp = player.max_hp
    player.mp = player.max_mp
