"""Shared type aliases for the core and domain layers."""
from typing import Literal, Tuple

GameMode = Literal["exploration", "town", "settings", "battle", "victory", "game_over"]
Tile = Literal["floor", "wall", "town", "lair"]
Language = Literal["en", "zh-CN", "zh-TW", "ja", "ko"]
Difficulty = Literal["easy", "normal", "hard"]
EnemyStyle = Literal["skirmisher", "brute", "caster", "predator", "undead", "boss"]
WeaponTier = Literal["wooden_sword", "bronze_sword", "knight_sword"]
ArmorTier = Literal["cloth_armor", "chain_armor", "steel_armor"]
NpcKind = Literal["wanderer", "hermit", "scout"]
BattleAction = Literal["attack", "fire_slash", "defend", "potion", "ether", "run"]
TownAction = Literal[
    "buy_potion",
    "buy_ether",
    "upgrade_weapon",
    "upgrade_armor",
    "healer",
    "inn",
    "quest_board",
    "leave",
]

CommandKind = Literal[
    "up",
    "down",
    "left",
    "right",
    "select",
    "confirm",
    "back",
    "cancel",
    "settings",
    "enter_town",
    "restart",
    "quit",
    "save",
    "load",
]

GAME_MODES: Tuple[GameMode, ...] = ("exploration", "town", "settings", "battle", "victory", "game_over")
TILES: Tuple[Tile, ...] = ("floor", "wall", "town", "lair")
LANGUAGES: Tuple[Language, ...] = ("en", "zh-CN", "zh-TW", "ja", "ko")
DIFFICULTIES: Tuple[Difficulty, ...] = ("easy", "normal", "hard")
ENEMY_STYLES: Tuple[EnemyStyle, ...] = ("skirmisher", "brute", "caster", "predator", "undead", "boss")
NPC_KINDS: Tuple[NpcKind, ...] = ("wanderer", "hermit", "scout")
BATTLE_ACTIONS: Tuple[BattleAction, ...] = ("attack", "fire_slash", "defend", "potion", "ether", "run")
TOWN_ACTIONS: Tuple[TownAction, ...] = (
    "buy_potion",
    "buy_ether",
    "upgrade_weapon",
    "upgrade_armor",
    "healer",
    "inn",
    "quest_board",
    "leave",
)

__all__ = [
    "ArmorTier",
    "BATTLE_ACTIONS",
    "BattleAction",
    "CommandKind",
    "DIFFICULTIES",
    "Difficulty",
    "ENEMY_STYLES",
    "EnemyStyle",
    "GAME_MODES",
    "GameMode",
    "LANGUAGES",
    "Language",
    "NPC_KINDS",
    "NpcKind",
    "TILES",
    "TOWN_ACTIONS",
    "Tile",
    "TownAction",
    "WeaponTier",
]
