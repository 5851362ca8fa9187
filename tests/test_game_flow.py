from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path

import pytest

from seedcrawl.core.rng import RNG
from seedcrawl.domain.commands import Command
from seedcrawl.domain.entities import Enemy
from seedcrawl.domain.message_log import LOG_CAPACITY
from seedcrawl.domain.messages import msg
from seedcrawl.domain.world import LAIR_POS, TOWN_POS, Position
from seedcrawl.services import event_service
from seedcrawl.services.event_service import WorldEventResult
from seedcrawl.services.game import Game
from tests.helpers.game_builders import QUIET_PROFILE, FixedDifficulties, build_quiet_game, path_to

BUY_POTION = 0
UPGRADE_WEAPON = 2
QUEST_BOARD = 6
LEAVE = 7
ATTACK = 0
RUN = 5


def _send(game: Game, *kinds: str) -> None:
    for kind in kinds:
        game.handle_command(Command(kind))  # type: ignore[arg-type]


def _walk(game: Game, target: tuple[int, int]) -> None:
    names = {(1, 0): "right", (-1, 0): "left", (0, 1): "down", (0, -1): "up"}
    for step in path_to(game, target):
        game.handle_command(Command(names[step]))  # type: ignore[arg-type]


def _walk_into_town(game: Game) -> None:
    _send(game, "right", "down")


def _dummy(exp: int = 1, gold: int = 1, *, is_boss: bool = False) -> Enemy:
    return Enemy(
        name="Dummy", hp=0, max_hp=5, atk=1, defense=0, exp_reward=exp, gold_reward=gold, is_boss=is_boss
    )


def _neighbor_floor(game: Game, pos: Position) -> tuple[int, int] | None:
    for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
        x, y = pos.x + dx, pos.y + dy
        if game.tile_at(x, y) == "floor" and not game.world.chest_at(x, y) and not game.world.npc_at(x, y):
            return x, y
    return None


def test_new_game_logs_welcome_hint_and_difficulty(tmp_path: Path) -> None:
    game = build_quiet_game(tmp_path)
    assert game.mode == "exploration"
    assert (game.player.x, game.player.y) == (1, 1)
    assert game.log_lines == [
        "Welcome, adventurer. The Ancient Dragon waits in its lair.",
        "The town (T) restores you and sells supplies.",
        "Difficulty: Normal",
    ]
    assert game.rng.seed == RNG.for_game(2026).seed


def test_full_flow_town_shop_and_level_up(tmp_path: Path) -> None:
    game = build_quiet_game(tmp_path, seed=2026)
    game.player.hp = 12

    _walk_into_town(game)
    assert game.mode == "town"
    assert game.player.hp == game.player.max_hp
    assert (game.player.x, game.player.y) == TOWN_POS

    game.player.gold = 100
    potions = game.player.bag.potion
    game.handle_command(Command.select(BUY_POTION))
    assert game.player.gold == 90
    assert game.player.bag.potion == potions + 1
    assert game.recent_event == "Bought 1 potion."

    game.handle_command(Command.select(LEAVE))
    assert game.mode == "exploration"

    game.player.exp = game.player.next_exp - 1
    game.player.hp = 3
    game.player.mp = 0
    game.start_random_battle(Position(1, 2))
    assert game.battle is not None
    game.battle.enemy.hp = 1
    game.handle_command(Command.select(ATTACK))

    assert game.mode == "exploration"
    assert game.battle is None
    assert game.player.level >= 2
    assert game.player.hp == game.player.max_hp
    assert game.player.mp == game.player.max_mp
    assert game.world.tile_is_cleared(1, 2)
    assert game.battle_origin is None


def test_walls_and_edges_block_movement(tmp_path: Path) -> None:
    game = build_quiet_game(tmp_path)
    _send(game, "up", "left")
    assert (game.player.x, game.player.y) == (1, 1)


def test_chest_is_claimed_once(tmp_path: Path) -> None:
    game = build_quiet_game(tmp_path)
    chest, start = next(
        (chest, spot) for chest in game.world.chests if (spot := _neighbor_floor(game, chest.pos)) is not None
    )
    game.player.x, game.player.y = start
    gold_before = game.player.gold
    dx, dy = chest.pos.x - start[0], chest.pos.y - start[1]

    game.move_player(dx, dy)
    assert chest.opened
    assert game.player.gold == gold_before + chest.gold
    assert game.world.tile_is_cleared(chest.pos.x, chest.pos.y)
    assert game.recent_event is not None and game.recent_event.startswith("Chest opened")

    game.move_player(-dx, -dy)
    game.move_player(dx, dy)
    assert game.player.gold == gold_before + chest.gold
    assert game.mode == "exploration"


def test_npc_gives_line_and_reward_once(tmp_path: Path) -> None:
    game = build_quiet_game(tmp_path)
    npc, start = next(
        (npc, spot) for npc in game.world.npcs if (spot := _neighbor_floor(game, npc.pos)) is not None
    )
    game.player.x, game.player.y = start
    gold_before = game.player.gold
    dx, dy = npc.pos.x - start[0], npc.pos.y - start[1]

    game.move_player(dx, dy)
    game.move_player(-dx, -dy)
    game.move_player(dx, dy)

    assert npc.interacted
    assert game.player.gold == gold_before + npc.reward_gold
    assert game.recent_event == f"You received {npc.reward_gold} gold."
    assert any(line.startswith(npc.kind.capitalize()) for line in game.log_lines)


def test_zero_rates_never_trigger_events_or_encounters(tmp_path: Path) -> None:
    game = build_quiet_game(tmp_path)
    for _ in range(200):
        _send(game, "down", "up")
    assert game.mode == "exploration"
    assert game.world.cleared_tiles == set()
    assert (game.player.gold, game.player.hp, game.player.bag.potion) == (15, 40, 1)


def test_encounter_remembers_origin_and_clears_it_on_win(tmp_path: Path) -> None:
    always = replace(QUIET_PROFILE, random_encounter_rate_percent=100)
    repo = FixedDifficulties({"easy": always, "normal": always, "hard": always})
    game = build_quiet_game(tmp_path, difficulty_repo=repo)
    game.world.mark_tile_cleared(1, 1)

    _send(game, "down")
    assert game.mode == "battle"
    assert game.battle_origin == Position(1, 2)
    assert game.battle_cursor == 0

    assert game.battle is not None
    game.battle.enemy.hp = 1
    game.handle_command(Command("confirm"))
    assert game.mode == "exploration"
    assert game.world.tile_is_cleared(1, 2)

    _send(game, "up", "down")
    assert game.mode == "exploration"


def test_escape_forgets_origin(tmp_path: Path) -> None:
    always = replace(QUIET_PROFILE, random_encounter_rate_percent=100)
    repo = FixedDifficulties({"easy": always, "normal": always, "hard": always})
    game = build_quiet_game(tmp_path, difficulty_repo=repo)
    game.player.hp = game.player.max_hp = 9999
    _send(game, "down")

    for _ in range(100):
        if game.mode != "battle":
            break
        game.handle_command(Command.select(RUN))

    assert game.mode == "exploration"
    assert game.battle is None
    assert game.battle_origin is None
    assert not game.world.tile_is_cleared(1, 2)


def test_defeat_moves_to_game_over_and_only_restart_works(tmp_path: Path) -> None:
    game = build_quiet_game(tmp_path, seed_source=lambda: 4242)
    game.start_boss_battle()
    assert game.battle is not None
    game.battle.enemy.atk = 999
    game.player.hp = 1

    game.handle_command(Command.select(ATTACK))
    assert game.mode == "game_over"
    assert game.player.hp == 0
    assert game.battle is None

    _send(game, "down", "settings", "enter_town")
    assert game.mode == "game_over"

    _send(game, "restart")
    assert game.mode == "exploration"
    assert game.map_seed == 4242
    assert game.player.hp == 40


def test_boss_victory_then_restart_keeps_language_and_difficulty(tmp_path: Path) -> None:
    repo = FixedDifficulties()
    game = build_quiet_game(
        tmp_path, difficulty="hard", language="ko", difficulty_repo=repo, seed_source=lambda: 77
    )
    game.player.base_atk = 999
    game.start_boss_battle()
    assert game.battle_origin is None
    game.handle_command(Command.select(ATTACK))

    assert game.mode == "victory"
    assert game.recent_event == "The Ancient Dragon is slain! Press r to play again or q to quit."
    assert game.quest.kills == 0

    _send(game, "restart")
    assert (game.language, game.difficulty, game.map_seed) == ("ko", "hard", 77)
    assert repo.requests[-1] == "hard"


def test_walking_into_lair_starts_boss_battle(tmp_path: Path) -> None:
    game = build_quiet_game(tmp_path)
    _walk(game, LAIR_POS)
    assert game.mode == "battle"
    assert game.battle is not None
    assert game.battle.enemy.is_boss


def test_lethal_world_event_ends_game(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def _deadly(rng, player, rate):
        player.hp = 0
        return WorldEventResult("spike_trap", msg("log.event.spike_trap_deadly", dmg=50), player_dead=True)

    monkeypatch.setattr(event_service, "maybe_trigger_event", _deadly)
    game = build_quiet_game(tmp_path)
    _send(game, "down")

    assert game.mode == "game_over"
    assert game.recent_event == "A spike trap deals 50 damage. It was fatal."
    assert game.world.tile_is_cleared(1, 2)


def test_quest_completion_through_battles(tmp_path: Path) -> None:
    game = build_quiet_game(tmp_path)
    _walk_into_town(game)
    game.handle_command(Command.select(QUEST_BOARD))
    assert game.quest.accepted

    for _ in range(3):
        game.win_battle(_dummy())
    assert game.quest.completed
    assert game.recent_event == "Quest complete (3/3)! Claim 40 gold at the board."

    gold = game.player.gold
    game.apply_town_action(QUEST_BOARD)
    assert game.player.gold == gold + 40
    game.apply_town_action(QUEST_BOARD)
    assert game.recent_event == "You already claimed this quest reward."
    assert game.player.gold == gold + 40


def test_town_cursor_navigation_and_confirm(tmp_path: Path) -> None:
    game = build_quiet_game(tmp_path)
    _walk_into_town(game)
    _send(game, "down", "down")
    assert game.town_cursor == UPGRADE_WEAPON
    _send(game, "confirm")
    assert game.recent_event == "You need 30 gold to upgrade your weapon."
    _send(game, "up", "up", "up")
    assert game.town_cursor == LEAVE
    _send(game, "confirm")
    assert game.mode == "exploration"


def test_enter_town_command_reopens_menu_without_restore(tmp_path: Path) -> None:
    game = build_quiet_game(tmp_path)
    _walk_into_town(game)
    game.handle_command(Command.select(LEAVE))
    game.player.hp = 5

    _send(game, "enter_town")
    assert game.mode == "town"
    assert game.player.hp == 5
    assert game.log_lines[-1] == "Town menu opened."


def test_enter_town_ignored_away_from_town(tmp_path: Path) -> None:
    game = build_quiet_game(tmp_path)
    _send(game, "enter_town")
    assert game.mode == "exploration"


def test_settings_language_difficulty_and_return(tmp_path: Path) -> None:
    repo = FixedDifficulties()
    game = build_quiet_game(tmp_path, difficulty_repo=repo)
    _walk_into_town(game)

    _send(game, "settings")
    assert game.mode == "settings"
    assert game.settings_cursor == 0

    game.handle_command(Command.select(3))
    assert game.language == "ja"
    assert game.settings_cursor == 3

    game.handle_command(Command.select(7))
    assert game.difficulty == "hard"
    assert repo.requests[-1] == "hard"
    assert game.log_lines[-1] == "Difficulty set to Hard."

    _send(game, "back")
    assert game.mode == "town"


def test_settings_cursor_wraps_and_confirm_applies(tmp_path: Path) -> None:
    game = build_quiet_game(tmp_path)
    _send(game, "settings", "up")
    assert game.settings_cursor == 7
    _send(game, "down", "down", "confirm")
    assert game.language == "zh-CN"
    assert game.mode == "settings"


def test_cancel_closes_settings_but_quits_elsewhere(tmp_path: Path) -> None:
    game = build_quiet_game(tmp_path)
    _send(game, "settings", "cancel")
    assert game.mode == "exploration"
    assert not game.should_quit
    _send(game, "cancel")
    assert game.should_quit


def test_quit_is_global(tmp_path: Path) -> None:
    game = build_quiet_game(tmp_path)
    game.start_boss_battle()
    _send(game, "quit")
    assert game.should_quit


def test_save_then_load_restores_state(tmp_path: Path) -> None:
    game = build_quiet_game(tmp_path)
    _send(game, "down")
    game.player.gold = 321
    game.world.mark_tile_cleared(5, 9)
    game.settings_cursor = 4
    _send(game, "save")
    assert game.recent_event == f"Game saved to {tmp_path / 'savegame.json'}."
    saved_log = game.log_lines

    game.player.gold = 0
    game.player.x = 1
    game.language = "ko"
    _send(game, "load")

    assert game.player.gold == 321
    assert (game.player.x, game.player.y) == (1, 2)
    assert game.world.tile_is_cleared(5, 9)
    assert game.language == "en"
    assert game.settings_cursor == 4
    assert game.log_lines[:-1] == saved_log[:-1]
    assert game.recent_event == f"Game loaded from {tmp_path / 'savegame.json'}."
    assert game.rng.seed == RNG.for_game(2026).seed


def test_save_during_battle_round_trips(tmp_path: Path) -> None:
    game = build_quiet_game(tmp_path)
    game.start_random_battle(Position(1, 3))
    assert game.battle is not None
    enemy_name = game.battle.enemy.name
    _send(game, "save")

    fresh = build_quiet_game(tmp_path, seed=1)
    _send(fresh, "load")
    assert fresh.mode == "battle"
    assert fresh.battle is not None
    assert fresh.battle.enemy.name == enemy_name
    assert fresh.battle_origin == Position(1, 3)
    assert fresh.map_seed == 2026


def test_loaded_log_is_truncated_to_capacity(tmp_path: Path) -> None:
    game = build_quiet_game(tmp_path)
    _send(game, "save")
    path = tmp_path / "savegame.json"
    payload = json.loads(path.read_text(encoding="utf-8"))
    payload["log"] = [f"old {index}" for index in range(25)]
    path.write_text(json.dumps(payload), encoding="utf-8")

    _send(game, "load")
    assert len(game.log_lines) == LOG_CAPACITY
    assert game.log_lines[0] == "old 16"


def test_load_missing_file_leaves_state_unchanged(tmp_path: Path) -> None:
    game = build_quiet_game(tmp_path)
    _send(game, "down")
    player = game.player
    position = (player.x, player.y)

    _send(game, "load")

    assert game.log_lines[-1].startswith("Load failed:")
    assert game.player is player
    assert (player.x, player.y) == position
    assert (game.mode, game.map_seed) == ("exploration", 2026)


def test_load_version_mismatch_leaves_state_unchanged(tmp_path: Path) -> None:
    game = build_quiet_game(tmp_path)
    _send(game, "save")
    path = tmp_path / "savegame.json"
    payload = json.loads(path.read_text(encoding="utf-8"))
    payload["version"] = 2
    payload["player"]["gold"] = 9999
    path.write_text(json.dumps(payload), encoding="utf-8")

    game.player.gold = 50
    recent = game.recent_event
    _send(game, "load")

    assert game.player.gold == 50
    assert game.recent_event == recent
    assert "version" in game.log_lines[-1]


def test_save_failure_is_logged(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a directory", encoding="utf-8")
    game = build_quiet_game(tmp_path, save_path=blocker / "slot.json")

    _send(game, "save")

    assert game.log_lines[-1].startswith("Save failed:")


def test_load_undecodable_save_keeps_state(tmp_path: Path) -> None:
    game = build_quiet_game(tmp_path)
    (tmp_path / "savegame.json").write_bytes(b"\xff\xfe\x00garbage")
    game.player.gold = 64

    _send(game, "load")

    assert game.log_lines[-1].startswith("Load failed:")
    assert game.player.gold == 64
    assert game.mode == "exploration"
