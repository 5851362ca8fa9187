"""Town shop, services and quest board dispatch."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal

from seedcrawl.core.types import TownAction
from seedcrawl.domain.balance import ETHER_PRICE, HEALER_PRICE, INN_PRICE, POTION_PRICE
from seedcrawl.domain.entities import Player
from seedcrawl.domain.equipment import (
    ARMOR_TIERS,
    WEAPON_TIERS,
    armor_label_key,
    weapon_label_key,
)
from seedcrawl.domain.messages import Message, msg
from seedcrawl.domain.quest_state import QuestState
from seedcrawl.services.quest_service import visit_quest_board

TownOutcomeKind = Literal["stay", "leave"]

TOWN_ACTION_LABEL_KEYS: Dict[TownAction, str] = {
    "buy_potion": "ui.town.action_buy_potion",
    "buy_ether": "ui.town.action_buy_ether",
    "upgrade_weapon": "ui.town.action_upgrade_weapon",
    "upgrade_armor": "ui.town.action_upgrade_armor",
    "healer": "ui.town.action_healer",
    "inn": "ui.town.action_inn",
    "quest_board": "ui.town.action_quest_board",
    "leave": "ui.town.action_leave",
}


@dataclass(slots=True)
class TownOutcome:
    kind: TownOutcomeKind
    message: Message

    @classmethod
    def stay(cls, message: Message) -> "TownOutcome":
        return cls("stay", message)

    @classmethod
    def leave(cls, message: Message) -> "TownOutcome":
        return cls("leave", message)


def apply_action(player: Player, quest: QuestState, action: TownAction) -> TownOutcome:
    """Validate and apply one town action; rejections always explain themselves."""
    if action == "buy_potion":
        if player.gold < POTION_PRICE:
            return TownOutcome.stay(msg("log.town.not_enough_gold_potion"))
        player.gold -= POTION_PRICE
        player.bag.potion += 1
        return TownOutcome.stay(msg("log.town.bought_potion", count=1))
    if action == "buy_ether":
        if player.gold < ETHER_PRICE:
            return TownOutcome.stay(msg("log.town.not_enough_gold_ether"))
        player.gold -= ETHER_PRICE
        player.bag.ether += 1
        return TownOutcome.stay(msg("log.town.bought_ether", count=1))
    if action == "upgrade_weapon":
        return TownOutcome.stay(_upgrade_weapon(player))
    if action == "upgrade_armor":
        return TownOutcome.stay(_upgrade_armor(player))
    if action == "healer":
        if player.hp >= player.max_hp:
            return TownOutcome.stay(msg("log.town.healer_not_needed"))
        if player.gold < HEALER_PRICE:
            return TownOutcome.stay(msg("log.town.not_enough_gold_healer", cost=HEALER_PRICE))
        player.gold -= HEALER_PRICE
        player.hp = player.max_hp
        return TownOutcome.stay(msg("log.town.healer_done", cost=HEALER_PRICE))
    if action == "inn":
        if player.hp >= player.max_hp and player.mp >= player.max_mp:
            return TownOutcome.stay(msg("log.town.inn_not_needed"))
        if player.gold < INN_PRICE:
            return TownOutcome.stay(msg("log.town.not_enough_gold_inn", cost=INN_PRICE))
        player.gold -= INN_PRICE
        player.hp = player.max_hp
        player.mp = player.max_mp
        return TownOutcome.stay(msg("log.town.inn_rest", cost=INN_PRICE))
    if action == "quest_board":
        return TownOutcome.stay(visit_quest_board(player, quest))
    if action == "leave":
        return TownOutcome.leave(msg("log.town.leaving"))
    raise ValueError(f"Unknown town action: {action}")


def _upgrade_weapon(player: Player) -> Message:
    spec = WEAPON_TIERS[player.equipment.weapon]
    if spec.is_max or spec.upgrade_cost is None:
        return msg("log.town.weapon_max")
    if player.gold < spec.upgrade_cost:
        return msg("log.town.need_more_gold_weapon", cost=spec.upgrade_cost)
    player.gold -= spec.upgrade_cost
    player.equipment.weapon = spec.next_tier  # type: ignore[assignment]
    return msg("log.town.weapon_upgraded", weapon=msg(weapon_label_key(player.equipment.weapon)))


def _upgrade_armor(player: Player) -> Message:
    spec = ARMOR_TIERS[player.equipment.armor]
    if spec.is_max or spec.upgrade_cost is None:
        return msg("log.town.armor_max")
    if player.gold < spec.upgrade_cost:
        return msg("log.town.need_more_gold_armor", cost=spec.upgrade_cost)
    player.gold -= spec.upgrade_cost
    player.equipment.armor = spec.next_tier  # type: ignore[assignment]
    return msg("log.town.armor_upgraded", armor=msg(armor_label_key(player.equipment.armor)))


def action_label(action: TownAction) -> Message:
    costs = {"buy_potion": POTION_PRICE, "buy_ether": ETHER_PRICE, "healer": HEALER_PRICE, "inn": INN_PRICE}
    if action in costs:
        return msg(TOWN_ACTION_LABEL_KEYS[action], cost=costs[action])
    return msg(TOWN_ACTION_LABEL_KEYS[action])
