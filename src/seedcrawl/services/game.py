"""The game aggregate: owns all state and dispatches decoded commands."""
from __future__ import annotations

import logging
import secrets
from pathlib import Path
from typing import Callable, List, Protocol, Tuple

from seedcrawl.core.rng import RNG
from seedcrawl.core.types import (
    BATTLE_ACTIONS,
    DIFFICULTIES,
    LANGUAGES,
    TOWN_ACTIONS,
    Difficulty,
    GameMode,
    Language,
    Tile,
)
from seedcrawl.data import paths
from seedcrawl.data.difficulty_repo import DifficultyRepository
from seedcrawl.domain.battle_models import Battle
from seedcrawl.domain.commands import Command
from seedcrawl.domain.difficulty import DifficultyProfile, clamp_rate, difficulty_label_key
from seedcrawl.domain.entities import Enemy, Player
from seedcrawl.domain.language import language_index, language_label_key
from seedcrawl.domain.message_log import LOG_CAPACITY, MessageLog
from seedcrawl.domain.messages import Message, msg
from seedcrawl.domain.quest_state import QuestState
from seedcrawl.domain.world import Position, TileGrid, WorldObjects, in_bounds, npc_line_key, tile_at
from seedcrawl.services import (
    battle_service,
    encounter_service,
    event_service,
    progression_service,
    quest_service,
    town_service,
    world_service,
)
from seedcrawl.services.errors import SaveLoadError
from seedcrawl.services.save_service import SaveService, SaveSnapshot
from seedcrawl.services.translation_service import TranslationService

logger = logging.getLogger(__name__)

# Settings slots: every language, then every difficulty.
SETTINGS_OPTION_COUNT = len(LANGUAGES) + len(DIFFICULTIES)

_MOVES = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}


class DifficultySource(Protocol):
    def get(self, difficulty: Difficulty) -> DifficultyProfile:
        ...


def random_seed() -> int:
    return secrets.randbits(64)


class Game:
    """Single source of truth for a play session.

    Every public mutation is all-or-nothing for the fields it touches. Renderers
    read the public attributes; nothing outside this class writes them.
    """

    def __init__(
        self,
        *,
        seed: int | None = None,
        language: Language = "en",
        difficulty: Difficulty = "normal",
        difficulty_repo: DifficultySource | None = None,
        translator: TranslationService | None = None,
        save_service: SaveService | None = None,
        save_path: Path | str | None = None,
        seed_source: Callable[[], int] = random_seed,
    ) -> None:
        self.difficulty_repo: DifficultySource = difficulty_repo or DifficultyRepository()
        self.translator = translator or TranslationService()
        self.save_service = save_service or SaveService()
        self.save_path = paths.get_save_path(save_path)
        self._seed_source = seed_source

        self.language: Language = language
        self.difficulty: Difficulty = difficulty
        self.profile: DifficultyProfile = self.difficulty_repo.get(difficulty)
        self.should_quit = False
        self.settings_return_mode: GameMode = "exploration"
        self._start_new_world(seed if seed is not None else seed_source())

    # -- setup -----------------------------------------------------------

    def _start_new_world(self, seed: int) -> None:
        world = world_service.generate_world(seed)
        self.map_seed = world.seed
        self.grid: TileGrid = world.grid
        self.world: WorldObjects = world.objects
        self.rng = RNG.for_game(self.map_seed)
        self.player = Player()
        self.quest = QuestState()
        self.battle: Battle | None = None
        self.battle_origin: Position | None = None
        self.mode: GameMode = "exploration"
        self.log = MessageLog(LOG_CAPACITY)
        self.recent_event: str | None = None
        self.settings_cursor = language_index(self.language)
        self.town_cursor = 0
        self.battle_cursor = 0
        self.push(msg("log.game.welcome"))
        self.push(msg("log.game.town_hint"))
        self.push(msg("log.game.difficulty", diff=msg(difficulty_label_key(self.difficulty))))
        logger.debug("New game seed=%s difficulty=%s", self.map_seed, self.difficulty)

    # -- log -------------------------------------------------------------

    def text(self, message: Message) -> str:
        return self.translator.render(message, self.language)

    def push(self, message: Message) -> str:
        line = self.text(message)
        self.log.push(line)
        return line

    def announce(self, message: Message) -> None:
        self.recent_event = self.push(message)

    @property
    def log_lines(self) -> List[str]:
        return self.log.lines()

    # -- queries ---------------------------------------------------------

    def tile_at(self, x: int, y: int) -> Tile:
        return tile_at(self.grid, x, y)

    def current_tile(self) -> Tile:
        return self.tile_at(self.player.x, self.player.y)

    def snapshot(self) -> SaveSnapshot:
        return SaveSnapshot(
            mode=self.mode,
            map_seed=self.map_seed,
            grid=[list(row) for row in self.grid],
            player=self.player,
            battle=self.battle,
            language=self.language,
            difficulty=self.difficulty,
            world=self.world,
            quest=self.quest,
            log=self.log.lines(),
            recent_event=self.recent_event,
            battle_origin=self.battle_origin,
            settings_cursor=self.settings_cursor,
        )

    # -- command dispatch ------------------------------------------------

    def handle_command(self, command: Command) -> None:
        kind = command.kind
        if kind == "quit":
            self.should_quit = True
            return
        if kind == "cancel":
            if self.mode == "settings":
                self.close_settings()
            else:
                self.should_quit = True
            return
        if kind == "save":
            self.save_game()
            return
        if kind == "load":
            self.load_game()
            return

        if self.mode == "exploration":
            self._handle_exploration(command)
        elif self.mode == "town":
            self._handle_town(command)
        elif self.mode == "settings":
            self._handle_settings(command)
        elif self.mode == "battle":
            self._handle_battle(command)
        elif kind == "restart":
            self.restart()

    def _handle_exploration(self, command: Command) -> None:
        if command.kind == "settings":
            self.open_settings("exploration")
            return
        if command.kind == "enter_town":
            if self.current_tile() == "town":
                self.mode = "town"
                self.push(msg("log.town.menu_opened"))
            return
        delta = _MOVES.get(command.kind)
        if delta is not None:
            self.move_player(*delta)

    def _handle_town(self, command: Command) -> None:
        if command.kind == "settings":
            self.open_settings("town")
            return
        index = self._menu_index(command, "town_cursor", len(TOWN_ACTIONS))
        if index is not None:
            self.apply_town_action(index)

    def _handle_settings(self, command: Command) -> None:
        if command.kind == "up":
            self.settings_cursor = (self.settings_cursor - 1) % SETTINGS_OPTION_COUNT
        elif command.kind == "down":
            self.settings_cursor = (self.settings_cursor + 1) % SETTINGS_OPTION_COUNT
        elif command.kind == "select" and command.index is not None:
            self.select_setting(command.index)
        elif command.kind == "confirm":
            self.select_setting(self.settings_cursor)
        elif command.kind == "back":
            self.close_settings()

    def _handle_battle(self, command: Command) -> None:
        index = self._menu_index(command, "battle_cursor", len(BATTLE_ACTIONS))
        if index is not None:
            self.apply_battle_action(index)

    def _menu_index(self, command: Command, cursor_attr: str, size: int) -> int | None:
        """Move a menu cursor, or return the index an activation command picked."""
        cursor = getattr(self, cursor_attr)
        if command.kind == "up":
            setattr(self, cursor_attr, (cursor - 1) % size)
            return None
        if command.kind == "down":
            setattr(self, cursor_attr, (cursor + 1) % size)
            return None
        if command.kind == "confirm":
            return cursor
        if command.kind == "select" and command.index is not None and 0 <= command.index < size:
            setattr(self, cursor_attr, command.index)
            return command.index
        return None

    # -- exploration -----------------------------------------------------

    def move_player(self, dx: int, dy: int) -> None:
        nx = self.player.x + dx
        ny = self.player.y + dy
        if not in_bounds(nx, ny):
            return
        tile = self.tile_at(nx, ny)
        if tile == "wall":
            return
        self.player.x = nx
        self.player.y = ny
        if tile == "town":
            self.player.hp = self.player.max_hp
            self.player.mp = self.player.max_mp
            self.mode = "town"
            self.push(msg("log.town.arrived_restore"))
        elif tile == "lair":
            self.start_boss_battle()
        else:
            self._resolve_floor_tile(nx, ny)

    def _resolve_floor_tile(self, x: int, y: int) -> None:
        if self._interact_chest(x, y):
            return
        if self._interact_npc(x, y):
            return
        if self.world.tile_is_cleared(x, y):
            return
        if self.rng.percent() < clamp_rate(self.profile.random_encounter_rate_percent):
            self.start_random_battle(Position(x, y))
            return
        result = event_service.maybe_trigger_event(
            self.rng, self.player, self.profile.world_event_rate_percent
        )
        if result is None:
            return
        self.world.mark_tile_cleared(x, y)
        self.announce(result.message)
        if result.player_dead:
            self.mode = "game_over"
            self.battle = None
            self.push(msg("log.game.player_fallen_restart"))

    def _interact_chest(self, x: int, y: int) -> bool:
        chest = self.world.chest_at(x, y)
        if chest is None or chest.opened:
            return False
        chest.opened = True
        self.player.gold += chest.gold
        self.player.bag.potion += chest.potion
        self.player.bag.ether += chest.ether
        self.world.mark_tile_cleared(x, y)
        self.announce(
            msg("log.world.chest_opened", gold=chest.gold, potion=chest.potion, ether=chest.ether)
        )
        return True

    def _interact_npc(self, x: int, y: int) -> bool:
        npc = self.world.npc_at(x, y)
        if npc is None or npc.interacted:
            return False
        npc.interacted = True
        self.player.gold += npc.reward_gold
        self.world.mark_tile_cleared(x, y)
        self.push(msg(npc_line_key(npc.kind)))
        self.announce(msg("log.world.npc_reward", gold=npc.reward_gold))
        return True

    # -- battle ----------------------------------------------------------

    def start_random_battle(self, origin: Position) -> None:
        enemy = encounter_service.generate_enemy(self.player.level, self.rng, self.profile)
        self.push(msg("log.battle.wild_appears", enemy=msg(enemy.name)))
        self._enter_battle(enemy, origin)

    def start_boss_battle(self) -> None:
        enemy = encounter_service.generate_boss(self.player.level, self.profile)
        self.push(msg("log.battle.boss_blocks_path", enemy=msg(enemy.name)))
        self._enter_battle(enemy, None)

    def _enter_battle(self, enemy: Enemy, origin: Position | None) -> None:
        self.battle = Battle(enemy=enemy)
        self.battle_origin = origin
        self.battle_cursor = 0
        self.mode = "battle"

    def apply_battle_action(self, index: int) -> None:
        if not 0 <= index < len(BATTLE_ACTIONS):
            raise ValueError(f"Battle action index out of range: {index}")
        if self.battle is None:
            self.mode = "exploration"
            return
        result = battle_service.resolve_turn(
            BATTLE_ACTIONS[index], self.battle, self.player, self.rng, self.profile
        )
        for message in result.messages:
            self.push(message)

        if not result.is_terminal:
            return
        if result.outcome == "escaped":
            self.mode = "exploration"
            self.battle = None
            self.battle_origin = None
        elif result.outcome == "enemy_defeated":
            assert result.enemy is not None
            self.win_battle(result.enemy)
        else:
            self.mode = "game_over"
            self.battle = None
            self.battle_origin = None
            self.push(msg("log.game.player_fallen_restart"))

    def win_battle(self, enemy: Enemy) -> None:
        self.battle = None
        if self.battle_origin is not None:
            self.world.mark_tile_cleared(self.battle_origin.x, self.battle_origin.y)
            self.battle_origin = None

        rewards = progression_service.apply_battle_rewards(self.player, enemy)
        lines = [self.push(message) for message in rewards]
        self.recent_event = lines[0]

        if enemy.is_boss:
            self.mode = "victory"
            self.announce(msg("log.game.dragon_defeated_restart_or_quit"))
            return

        quest_messages = quest_service.record_kill(self.quest)
        for message in quest_messages:
            if self.quest.completed:
                self.announce(message)
            else:
                self.push(message)
        self.mode = "exploration"

    # -- town ------------------------------------------------------------

    def apply_town_action(self, index: int) -> None:
        if not 0 <= index < len(TOWN_ACTIONS):
            raise ValueError(f"Town action index out of range: {index}")
        outcome = town_service.apply_action(self.player, self.quest, TOWN_ACTIONS[index])
        if outcome.kind == "leave":
            self.mode = "exploration"
            self.push(outcome.message)
        else:
            self.announce(outcome.message)

    # -- settings --------------------------------------------------------

    def open_settings(self, from_mode: GameMode) -> None:
        self.settings_return_mode = from_mode
        self.settings_cursor = language_index(self.language)
        self.mode = "settings"
        self.push(msg("log.settings.opened"))

    def close_settings(self) -> None:
        self.mode = "exploration" if self.settings_return_mode == "settings" else self.settings_return_mode

    def settings_options(self) -> List[Tuple[str, Message]]:
        """Return (kind, label) pairs in cursor order."""
        options: List[Tuple[str, Message]] = [
            ("language", msg(language_label_key(language))) for language in LANGUAGES
        ]
        options.extend(
            ("difficulty", msg(difficulty_label_key(difficulty))) for difficulty in DIFFICULTIES
        )
        return options

    def select_setting(self, index: int) -> None:
        if not 0 <= index < SETTINGS_OPTION_COUNT:
            return
        self.settings_cursor = index
        if index < len(LANGUAGES):
            self.select_language(LANGUAGES[index])
        else:
            self.select_difficulty(DIFFICULTIES[index - len(LANGUAGES)])

    def select_language(self, language: Language) -> None:
        self.language = language
        self.push(msg("log.settings.language_changed", lang=msg(language_label_key(language))))

    def select_difficulty(self, difficulty: Difficulty) -> None:
        self.profile = self.difficulty_repo.get(difficulty)
        self.difficulty = difficulty
        self.push(msg("log.settings.difficulty_changed", diff=msg(difficulty_label_key(difficulty))))

    # -- lifecycle -------------------------------------------------------

    def restart(self) -> None:
        """Fresh world from a new seed, keeping language and difficulty."""
        seed = self._seed_source()
        self.profile = self.difficulty_repo.get(self.difficulty)
        self.settings_return_mode = "exploration"
        self._start_new_world(seed)

    def save_game(self) -> None:
        try:
            self.save_service.save(self.snapshot(), self.save_path)
        except SaveLoadError as exc:
            self.push(msg("log.game.save_failed", error=str(exc)))
            return
        self.announce(msg("log.game.saved_to", path=str(self.save_path)))

    def load_game(self) -> None:
        try:
            snapshot = self.save_service.load(self.save_path)
        except SaveLoadError as exc:
            logger.warning("Load failed: %s", exc)
            self.push(msg("log.game.load_failed", error=str(exc)))
            return
        self._apply_snapshot(snapshot)
        self.announce(msg("log.game.loaded_from", path=str(self.save_path)))

    def _apply_snapshot(self, snapshot: SaveSnapshot) -> None:
        profile = self.difficulty_repo.get(snapshot.difficulty)
        self.mode = snapshot.mode
        self.map_seed = snapshot.map_seed
        self.grid = snapshot.grid
        self.player = snapshot.player
        self.battle = snapshot.battle
        self.language = snapshot.language
        self.difficulty = snapshot.difficulty
        self.profile = profile
        self.world = snapshot.world
        self.quest = snapshot.quest
        self.log = MessageLog(LOG_CAPACITY, snapshot.log[-LOG_CAPACITY:])
        self.recent_event = snapshot.recent_event
        self.battle_origin = snapshot.battle_origin
        self.settings_cursor = snapshot.settings_cursor % SETTINGS_OPTION_COUNT
        self.settings_return_mode = "exploration"
        self.town_cursor = 0
        self.battle_cursor = 0
        self.should_quit = False
        self.rng = RNG.for_game(self.map_seed)
