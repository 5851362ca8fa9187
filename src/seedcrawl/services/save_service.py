"""Serialization helpers for the single save slot."""
from __future__ import annotations

import contextlib
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping

from seedcrawl.core.types import (
    DIFFICULTIES,
    ENEMY_STYLES,
    GAME_MODES,
    LANGUAGES,
    NPC_KINDS,
    TILES,
    Difficulty,
    GameMode,
    Language,
)
from seedcrawl.domain.battle_models import Battle
from seedcrawl.domain.entities import Bag, Enemy, Equipment, Player
from seedcrawl.domain.equipment import ARMOR_TIERS, WEAPON_TIERS
from seedcrawl.domain.quest_state import QuestState
from seedcrawl.domain.world import MAP_H, MAP_W, Chest, NpcPoint, Position, TileGrid, WorldObjects
from seedcrawl.services.errors import SaveLoadError, SaveVersionError

logger = logging.getLogger(__name__)

SavePayload = Dict[str, Any]


@dataclass(slots=True)
class SaveSnapshot:
    """Everything the game aggregate persists."""

    mode: GameMode
    map_seed: int
    grid: TileGrid
    player: Player
    battle: Battle | None
    language: Language
    difficulty: Difficulty
    world: WorldObjects
    quest: QuestState
    log: List[str] = field(default_factory=list)
    recent_event: str | None = None
    battle_origin: Position | None = None
    settings_cursor: int = 0


class SaveService:
    """Converts snapshots to/from a validated, versioned JSON payload."""

    SAVE_VERSION = 1

    def serialize(self, snapshot: SaveSnapshot) -> SavePayload:
        """Return a JSON-serializable payload for disk persistence."""
        return {
            "version": self.SAVE_VERSION,
            "mode": snapshot.mode,
            "map_seed": snapshot.map_seed,
            "map": [list(row) for row in snapshot.grid],
            "player": self._serialize_player(snapshot.player),
            "battle": self._serialize_battle(snapshot.battle),
            "current_language": snapshot.language,
            "difficulty": snapshot.difficulty,
            "world": self._serialize_world(snapshot.world),
            "quest": {
                "accepted": snapshot.quest.accepted,
                "completed": snapshot.quest.completed,
                "rewarded": snapshot.quest.rewarded,
                "kills": snapshot.quest.kills,
                "target_kills": snapshot.quest.target_kills,
                "reward_gold": snapshot.quest.reward_gold,
            },
            "log": list(snapshot.log),
            "recent_event": snapshot.recent_event,
            "battle_origin": self._serialize_position(snapshot.battle_origin),
            "settings_cursor": snapshot.settings_cursor,
        }

    def deserialize(self, payload: Mapping[str, Any]) -> SaveSnapshot:
        """Validate every field before building anything the caller could apply."""
        if not isinstance(payload, Mapping):
            raise SaveLoadError("Save data must be a JSON object.")
        version = payload.get("version")
        if isinstance(version, bool) or version != self.SAVE_VERSION:
            raise SaveVersionError(version, self.SAVE_VERSION)
        mode = self._require_choice(payload.get("mode"), GAME_MODES, "mode")
        map_seed = self._require_int(payload.get("map_seed"), "map_seed")
        if map_seed < 0:
            raise SaveLoadError("map_seed must be a non-negative integer.")
        battle = self._coerce_battle(payload.get("battle"))
        if mode == "battle" and battle is None:
            raise SaveLoadError("Save is in battle mode but has no battle.")
        log_values = self._require_list(payload.get("log", []), "log")
        return SaveSnapshot(
            mode=mode,  # type: ignore[arg-type]
            map_seed=map_seed,
            grid=self._coerce_grid(payload.get("map")),
            player=self._coerce_player(payload.get("player")),
            battle=battle,
            language=self._require_choice(  # type: ignore[arg-type]
                payload.get("current_language"), LANGUAGES, "current_language"
            ),
            difficulty=self._require_choice(  # type: ignore[arg-type]
                payload.get("difficulty"), DIFFICULTIES, "difficulty"
            ),
            world=self._coerce_world(payload.get("world")),
            quest=self._coerce_quest(payload.get("quest")),
            log=[self._require_str(line, f"log[{index}]") for index, line in enumerate(log_values)],
            recent_event=self._coerce_optional_str(payload.get("recent_event"), "recent_event"),
            battle_origin=self._coerce_optional_position(payload.get("battle_origin"), "battle_origin"),
            settings_cursor=self._coerce_non_negative_int(
                payload.get("settings_cursor"), "settings_cursor", default=0
            ),
        )

    def save(self, snapshot: SaveSnapshot, path: Path) -> None:
        """Write atomically through a temp file so a failed write keeps the old slot."""
        payload = self.serialize(snapshot)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
            os.replace(tmp_path, path)
        except OSError as exc:
            logger.warning("Failed to write save %s: %s", path, exc)
            with contextlib.suppress(OSError):
                tmp_path.unlink()
            raise SaveLoadError(f"Unable to write {path}: {exc}") from exc
        logger.info("Saved game to %s", path)

    def load(self, path: Path) -> SaveSnapshot:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Failed to read save %s: %s", path, exc)
            raise SaveLoadError(f"Unable to read {path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise SaveLoadError(f"Save file {path} is not UTF-8 text: {exc}") from exc
        try:
            payload = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as exc:
            raise SaveLoadError(f"Save file {path} is not valid JSON: {exc}") from exc
        snapshot = self.deserialize(payload)
        logger.info("Loaded game from %s", path)
        return snapshot

    # -- serialization ---------------------------------------------------

    @staticmethod
    def _serialize_player(player: Player) -> Dict[str, Any]:
        return {
            "x": player.x,
            "y": player.y,
            "hp": player.hp,
            "max_hp": player.max_hp,
            "mp": player.mp,
            "max_mp": player.max_mp,
            "base_atk": player.base_atk,
            "base_def": player.base_def,
            "level": player.level,
            "exp": player.exp,
            "next_exp": player.next_exp,
            "gold": player.gold,
            "equipment": {"weapon": player.equipment.weapon, "armor": player.equipment.armor},
            "bag": {"potion": player.bag.potion, "ether": player.bag.ether},
        }

    @staticmethod
    def _serialize_battle(battle: Battle | None) -> Dict[str, Any] | None:
        if battle is None:
            return None
        enemy = battle.enemy
        return {
            "enemy": {
                "name": enemy.name,
                "hp": enemy.hp,
                "max_hp": enemy.max_hp,
                "atk": enemy.atk,
                "def": enemy.defense,
                "exp_reward": enemy.exp_reward,
                "gold_reward": enemy.gold_reward,
                "is_boss": enemy.is_boss,
                "style": enemy.style,
            },
            "defending": battle.defending,
        }

    def _serialize_world(self, world: WorldObjects) -> Dict[str, Any]:
        return {
            "chests": [
                {
                    "pos": self._serialize_position(chest.pos),
                    "opened": chest.opened,
                    "gold": chest.gold,
                    "potion": chest.potion,
                    "ether": chest.ether,
                }
                for chest in world.chests
            ],
            "npcs": [
                {
                    "pos": self._serialize_position(npc.pos),
                    "kind": npc.kind,
                    "interacted": npc.interacted,
                    "reward_gold": npc.reward_gold,
                }
                for npc in world.npcs
            ],
            # Sorted so identical worlds produce identical files.
            "cleared_tiles": [
                self._serialize_position(pos)
                for pos in sorted(world.cleared_tiles, key=lambda pos: (pos.y, pos.x))
            ],
        }

    @staticmethod
    def _serialize_position(pos: Position | None) -> Dict[str, int] | None:
        if pos is None:
            return None
        return {"x": pos.x, "y": pos.y}

    # -- deserialization -------------------------------------------------

    def _coerce_grid(self, value: Any) -> TileGrid:
        rows = self._require_list(value, "map")
        if len(rows) != MAP_H:
            raise SaveLoadError(f"map must have {MAP_H} rows.")
        grid: TileGrid = []
        for y, row in enumerate(rows):
            cells = self._require_list(row, f"map[{y}]")
            if len(cells) != MAP_W:
                raise SaveLoadError(f"map[{y}] must have {MAP_W} tiles.")
            grid.append(
                [
                    self._require_choice(cell, TILES, f"map[{y}][{x}]")  # type: ignore[misc]
                    for x, cell in enumerate(cells)
                ]
            )
        return grid

    def _coerce_player(self, value: Any) -> Player:
        data = self._require_dict(value, "player")
        equipment = self._require_dict(data.get("equipment"), "player.equipment")
        bag = self._require_dict(data.get("bag"), "player.bag")
        player = Player(
            x=self._require_int(data.get("x"), "player.x"),
            y=self._require_int(data.get("y"), "player.y"),
            hp=self._coerce_non_negative_int(data.get("hp"), "player.hp"),
            max_hp=self._coerce_non_negative_int(data.get("max_hp"), "player.max_hp"),
            mp=self._coerce_non_negative_int(data.get("mp"), "player.mp"),
            max_mp=self._coerce_non_negative_int(data.get("max_mp"), "player.max_mp"),
            base_atk=self._require_int(data.get("base_atk"), "player.base_atk"),
            base_def=self._require_int(data.get("base_def"), "player.base_def"),
            level=self._require_int(data.get("level"), "player.level"),
            exp=self._coerce_non_negative_int(data.get("exp"), "player.exp"),
            next_exp=self._require_int(data.get("next_exp"), "player.next_exp"),
            gold=self._coerce_non_negative_int(data.get("gold"), "player.gold"),
            equipment=Equipment(
                weapon=self._require_choice(  # type: ignore[arg-type]
                    equipment.get("weapon"), tuple(WEAPON_TIERS), "player.equipment.weapon"
                ),
                armor=self._require_choice(  # type: ignore[arg-type]
                    equipment.get("armor"), tuple(ARMOR_TIERS), "player.equipment.armor"
                ),
            ),
            bag=Bag(
                potion=self._coerce_non_negative_int(bag.get("potion"), "player.bag.potion"),
                ether=self._coerce_non_negative_int(bag.get("ether"), "player.bag.ether"),
            ),
        )
        if not (0 <= player.x < MAP_W and 0 <= player.y < MAP_H):
            raise SaveLoadError("player position is outside the map.")
        if player.hp > player.max_hp or player.mp > player.max_mp:
            raise SaveLoadError("player hp/mp exceed their maximums.")
        return player

    def _coerce_battle(self, value: Any) -> Battle | None:
        if value is None:
            return None
        data = self._require_dict(value, "battle")
        enemy_data = self._require_dict(data.get("enemy"), "battle.enemy")
        enemy = Enemy(
            name=self._require_str(enemy_data.get("name"), "battle.enemy.name"),
            hp=self._require_int(enemy_data.get("hp"), "battle.enemy.hp"),
            max_hp=self._require_int(enemy_data.get("max_hp"), "battle.enemy.max_hp"),
            atk=self._require_int(enemy_data.get("atk"), "battle.enemy.atk"),
            defense=self._require_int(enemy_data.get("def"), "battle.enemy.def"),
            exp_reward=self._require_int(enemy_data.get("exp_reward"), "battle.enemy.exp_reward"),
            gold_reward=self._require_int(enemy_data.get("gold_reward"), "battle.enemy.gold_reward"),
            is_boss=self._require_bool(enemy_data.get("is_boss"), "battle.enemy.is_boss"),
            style=self._require_choice(  # type: ignore[arg-type]
                enemy_data.get("style"), ENEMY_STYLES, "battle.enemy.style"
            ),
        )
        return Battle(enemy=enemy, defending=self._require_bool(data.get("defending"), "battle.defending"))

    def _coerce_world(self, value: Any) -> WorldObjects:
        data = self._require_dict(value, "world")
        chests: List[Chest] = []
        for index, raw in enumerate(self._require_list(data.get("chests", []), "world.chests")):
            context = f"world.chests[{index}]"
            entry = self._require_dict(raw, context)
            chests.append(
                Chest(
                    pos=self._coerce_position(entry.get("pos"), f"{context}.pos"),
                    opened=self._require_bool(entry.get("opened"), f"{context}.opened"),
                    gold=self._coerce_non_negative_int(entry.get("gold"), f"{context}.gold"),
                    potion=self._coerce_non_negative_int(entry.get("potion"), f"{context}.potion"),
                    ether=self._coerce_non_negative_int(entry.get("ether"), f"{context}.ether"),
                )
            )
        npcs: List[NpcPoint] = []
        for index, raw in enumerate(self._require_list(data.get("npcs", []), "world.npcs")):
            context = f"world.npcs[{index}]"
            entry = self._require_dict(raw, context)
            npcs.append(
                NpcPoint(
                    pos=self._coerce_position(entry.get("pos"), f"{context}.pos"),
                    kind=self._require_choice(entry.get("kind"), NPC_KINDS, f"{context}.kind"),  # type: ignore[arg-type]
                    interacted=self._require_bool(entry.get("interacted"), f"{context}.interacted"),
                    reward_gold=self._coerce_non_negative_int(
                        entry.get("reward_gold"), f"{context}.reward_gold"
                    ),
                )
            )
        cleared = {
            self._coerce_position(raw, f"world.cleared_tiles[{index}]")
            for index, raw in enumerate(
                self._require_list(data.get("cleared_tiles", []), "world.cleared_tiles")
            )
        }
        return WorldObjects(chests=chests, npcs=npcs, cleared_tiles=cleared)

    def _coerce_quest(self, value: Any) -> QuestState:
        data = self._require_dict(value, "quest")
        quest = QuestState(
            accepted=self._require_bool(data.get("accepted"), "quest.accepted"),
            completed=self._require_bool(data.get("completed"), "quest.completed"),
            rewarded=self._require_bool(data.get("rewarded"), "quest.rewarded"),
            kills=self._coerce_non_negative_int(data.get("kills"), "quest.kills"),
            target_kills=self._coerce_non_negative_int(data.get("target_kills"), "quest.target_kills"),
            reward_gold=self._coerce_non_negative_int(data.get("reward_gold"), "quest.reward_gold"),
        )
        if quest.rewarded and not quest.completed:
            raise SaveLoadError("quest cannot be rewarded before it is completed.")
        return quest

    def _coerce_position(self, value: Any, context: str) -> Position:
        data = self._require_dict(value, context)
        return Position(
            x=self._require_int(data.get("x"), f"{context}.x"),
            y=self._require_int(data.get("y"), f"{context}.y"),
        )

    def _coerce_optional_position(self, value: Any, context: str) -> Position | None:
        if value is None:
            return None
        return self._coerce_position(value, context)

    def _coerce_optional_str(self, value: Any, context: str) -> str | None:
        if value is None:
            return None
        return self._require_str(value, context)

    def _coerce_non_negative_int(self, value: Any, context: str, *, default: int | None = None) -> int:
        if value is None and default is not None:
            return default
        value_int = self._require_int(value, context)
        if value_int < 0:
            raise SaveLoadError(f"{context} must be a non-negative integer.")
        return value_int

    @staticmethod
    def _require_choice(value: Any, choices: tuple[str, ...], context: str) -> str:
        if value not in choices:
            raise SaveLoadError(f"Invalid {context} value: {value!r}")
        return value

    @staticmethod
    def _require_str(value: Any, context: str) -> str:
        if not isinstance(value, str):
            raise SaveLoadError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_int(value: Any, context: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise SaveLoadError(f"{context} must be an integer.")
        return value

    @staticmethod
    def _require_bool(value: Any, context: str) -> bool:
        if not isinstance(value, bool):
            raise SaveLoadError(f"{context} must be a boolean.")
        return value

    @staticmethod
    def _require_list(value: Any, context: str) -> List[Any]:
        if not isinstance(value, list):
            raise SaveLoadError(f"{context} must be a list.")
        return value

    @staticmethod
    def _require_dict(value: Any, context: str) -> Mapping[str, Any]:
        if not isinstance(value, dict):
            raise SaveLoadError(f"{context} must be an object.")
        return value
