"""Map grid constants and the one-shot world object overlay."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

from seedcrawl.core.types import NpcKind, Tile

MAP_W = 36
MAP_H = 18
TOWN_POS: Tuple[int, int] = (2, 2)
LAIR_POS: Tuple[int, int] = (MAP_W - 2, MAP_H - 2)

TileGrid = List[List[Tile]]

NPC_REWARD_GOLD: Dict[NpcKind, int] = {"wanderer": 6, "hermit": 10, "scout": 14}


@dataclass(frozen=True, slots=True)
class Position:
    x: int
    y: int


@dataclass(slots=True)
class Chest:
    pos: Position
    gold: int
    potion: int
    ether: int
    opened: bool = False


@dataclass(slots=True)
class NpcPoint:
    pos: Position
    kind: NpcKind
    reward_gold: int
    interacted: bool = False


def npc_line_key(kind: NpcKind) -> str:
    return f"log.npc.{kind}"


@dataclass(slots=True)
class WorldObjects:
    """Chests, NPCs and the set of tiles whose content is already resolved."""

    chests: List[Chest] = field(default_factory=list)
    npcs: List[NpcPoint] = field(default_factory=list)
    cleared_tiles: Set[Position] = field(default_factory=set)

    def chest_at(self, x: int, y: int) -> Chest | None:
        pos = Position(x, y)
        return next((chest for chest in self.chests if chest.pos == pos), None)

    def npc_at(self, x: int, y: int) -> NpcPoint | None:
        pos = Position(x, y)
        return next((npc for npc in self.npcs if npc.pos == pos), None)

    def has_unopened_chest(self, x: int, y: int) -> bool:
        chest = self.chest_at(x, y)
        return chest is not None and not chest.opened

    def has_active_npc(self, x: int, y: int) -> bool:
        npc = self.npc_at(x, y)
        return npc is not None and not npc.interacted

    def tile_is_cleared(self, x: int, y: int) -> bool:
        return Position(x, y) in self.cleared_tiles

    def mark_tile_cleared(self, x: int, y: int) -> None:
        self.cleared_tiles.add(Position(x, y))


def tile_at(grid: TileGrid, x: int, y: int) -> Tile:
    return grid[y][x]


def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < MAP_W and 0 <= y < MAP_H
