"""Weighted non-combat events rolled on unresolved floor tiles."""
from __future__ import annotations

from dataclasses import dataclass

from seedcrawl.core.rng import RNG
from seedcrawl.domain.balance import (
    EVENT_CAMPFIRE_HEAL_BASE,
    EVENT_CAMPFIRE_HEAL_PER_LEVEL,
    EVENT_GOLD_MAX,
    EVENT_GOLD_MIN,
    EVENT_GOLD_PER_LEVEL,
    EVENT_ITEM_MAX,
    EVENT_ITEM_MIN,
    EVENT_TRAP_MAX,
    EVENT_TRAP_MIN,
    EVENT_WEIGHTS,
    WorldEventKind,
)
from seedcrawl.domain.difficulty import clamp_rate
from seedcrawl.domain.entities import Player
from seedcrawl.domain.messages import Message, msg


@dataclass(slots=True)
class WorldEventResult:
    kind: WorldEventKind
    message: Message
    player_dead: bool = False


def total_event_weight() -> int:
    return sum(weight for _, weight in EVENT_WEIGHTS)


def event_kind_from_roll(roll: int) -> WorldEventKind:
    """Map a roll in [0, total weight) onto the cumulative weight table."""
    threshold = 0
    for kind, weight in EVENT_WEIGHTS:
        threshold += weight
        if roll < threshold:
            return kind
    return EVENT_WEIGHTS[-1][0]


def maybe_trigger_event(rng: RNG, player: Player, event_rate_percent: int) -> WorldEventResult | None:
    """Gate on the event rate, then roll and apply one event."""
    if rng.percent() >= clamp_rate(event_rate_percent):
        return None
    kind = event_kind_from_roll(rng.randrange(total_event_weight()))
    return apply_event(kind, rng, player)


def apply_event(kind: WorldEventKind, rng: RNG, player: Player) -> WorldEventResult:
    if kind == "gold_cache":
        gold = rng.randint(EVENT_GOLD_MIN, EVENT_GOLD_MAX) + player.level * EVENT_GOLD_PER_LEVEL
        player.gold += gold
        return WorldEventResult(kind, msg("log.event.gold_cache", gold=gold))
    if kind == "potion_stash":
        amount = rng.randint(EVENT_ITEM_MIN, EVENT_ITEM_MAX)
        player.bag.potion += amount
        return WorldEventResult(kind, msg("log.event.potion_stash", count=amount))
    if kind == "ether_stash":
        amount = rng.randint(EVENT_ITEM_MIN, EVENT_ITEM_MAX)
        player.bag.ether += amount
        return WorldEventResult(kind, msg("log.event.ether_stash", count=amount))
    if kind == "campfire":
        heal = EVENT_CAMPFIRE_HEAL_BASE + player.level * EVENT_CAMPFIRE_HEAL_PER_LEVEL
        before = player.hp
        player.hp = min(player.max_hp, player.hp + heal)
        return WorldEventResult(kind, msg("log.event.campfire_heal", before=before, after=player.hp))
    if kind == "spike_trap":
        damage = rng.randint(EVENT_TRAP_MIN, EVENT_TRAP_MAX)
        player.hp = max(0, player.hp - damage)
        if player.hp == 0:
            return WorldEventResult(
                kind, msg("log.event.spike_trap_deadly", dmg=damage), player_dead=True
            )
        return WorldEventResult(kind, msg("log.event.spike_trap", dmg=damage))
    raise ValueError(f"Unknown world event kind: {kind}")
