"""Seeded map generation and one-shot object placement."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from seedcrawl.core.rng import RNG
from seedcrawl.core.types import NPC_KINDS, Tile
from seedcrawl.domain.world import (
    LAIR_POS,
    MAP_H,
    MAP_W,
    NPC_REWARD_GOLD,
    TOWN_POS,
    Chest,
    NpcPoint,
    Position,
    TileGrid,
    WorldObjects,
)

logger = logging.getLogger(__name__)

WALL_CHANCE_PERCENT = 10
CORRIDOR_ROW = 2
CORRIDOR_COL = MAP_W - 3
SAFE_BLOCK = range(1, 4)

CHEST_COUNT = 6
CHEST_GOLD_MIN = 8
CHEST_GOLD_MAX = 20


@dataclass(slots=True)
class GeneratedWorld:
    seed: int
    grid: TileGrid
    objects: WorldObjects


def generate_map(rng: RNG) -> TileGrid:
    """Walled border, random interior walls, forced corridors to the lair."""
    grid: TileGrid = [["floor" for _ in range(MAP_W)] for _ in range(MAP_H)]
    for x in range(MAP_W):
        grid[0][x] = "wall"
        grid[MAP_H - 1][x] = "wall"
    for row in grid:
        row[0] = "wall"
        row[MAP_W - 1] = "wall"

    for y in range(1, MAP_H - 1):
        for x in range(1, MAP_W - 1):
            # Every interior tile consumes a roll so the stream stays aligned.
            if rng.percent() < WALL_CHANCE_PERCENT:
                grid[y][x] = "wall"
            if y == CORRIDOR_ROW or x == CORRIDOR_COL:
                grid[y][x] = "floor"

    for y in SAFE_BLOCK:
        for x in SAFE_BLOCK:
            grid[y][x] = "floor"

    town_x, town_y = TOWN_POS
    lair_x, lair_y = LAIR_POS
    grid[town_y][town_x] = "town"
    grid[lair_y][lair_x] = "lair"
    return grid


def _in_exclusion_zone(x: int, y: int) -> bool:
    near_town = x <= 5 and y <= 5
    near_lair = x >= MAP_W - 6 and y >= MAP_H - 5
    return near_town or near_lair


def candidate_positions(grid: TileGrid) -> List[Position]:
    tiles: List[Position] = []
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile == "floor" and not _in_exclusion_zone(x, y):
                tiles.append(Position(x, y))
    return tiles


def _take_random(candidates: List[Position], rng: RNG) -> Position | None:
    """Swap-remove a random candidate."""
    if not candidates:
        return None
    index = rng.randrange(len(candidates))
    candidates[index], candidates[-1] = candidates[-1], candidates[index]
    return candidates.pop()


def generate_world_objects(grid: TileGrid, rng: RNG) -> WorldObjects:
    candidates = candidate_positions(grid)
    objects = WorldObjects()
    for _ in range(CHEST_COUNT):
        pos = _take_random(candidates, rng)
        if pos is None:
            break
        objects.chests.append(
            Chest(
                pos=pos,
                gold=rng.randint(CHEST_GOLD_MIN, CHEST_GOLD_MAX),
                potion=rng.randint(0, 1),
                ether=rng.randint(0, 1),
            )
        )
    for kind in NPC_KINDS:
        pos = _take_random(candidates, rng)
        if pos is None:
            break
        objects.npcs.append(NpcPoint(pos=pos, kind=kind, reward_gold=NPC_REWARD_GOLD[kind]))
    return objects


def generate_world(seed: int) -> GeneratedWorld:
    """Map and objects share one stream seeded directly from the map seed."""
    rng = RNG(seed)
    grid = generate_map(rng)
    objects = generate_world_objects(grid, rng)
    logger.debug(
        "Generated world seed=%s chests=%d npcs=%d",
        seed,
        len(objects.chests),
        len(objects.npcs),
    )
    return GeneratedWorld(seed=rng.seed, grid=grid, objects=objects)


def count_tiles(grid: TileGrid, tile: Tile) -> int:
    return sum(row.count(tile) for row in grid)
