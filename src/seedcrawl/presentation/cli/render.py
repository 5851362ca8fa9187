"""Text rendering of the game aggregate for the console loop."""
from __future__ import annotations

from typing import Iterable, List, Sequence

from seedcrawl.core.types import BATTLE_ACTIONS, TOWN_ACTIONS
from seedcrawl.domain.equipment import armor_label_key, weapon_label_key
from seedcrawl.domain.messages import msg
from seedcrawl.services import quest_service, town_service
from seedcrawl.services.battle_service import BATTLE_ACTION_LABEL_KEYS
from seedcrawl.services.game import Game

_TILE_GLYPHS = {"floor": ".", "wall": "#", "town": "T", "lair": "D"}


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_menu(title: str, options: Sequence[str], cursor: int | None = None) -> None:
    """Display a numbered menu, marking the highlighted row."""
    render_heading(title)
    for idx, label in enumerate(options):
        marker = ">" if idx == cursor else " "
        print(f"{marker} {idx + 1}. {label}")


def render_bullet_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(f"- {line}")


def map_lines(game: Game) -> List[str]:
    rows: List[str] = []
    for y, row in enumerate(game.grid):
        cells = []
        for x, tile in enumerate(row):
            if (x, y) == (game.player.x, game.player.y):
                cells.append("@")
            elif game.world.has_unopened_chest(x, y):
                cells.append("$")
            elif game.world.has_active_npc(x, y):
                cells.append("?")
            else:
                cells.append(_TILE_GLYPHS[tile])
        rows.append("".join(cells))
    return rows


def hero_lines(game: Game) -> List[str]:
    player = game.player
    quest_key = quest_service.quest_status_key(game.quest)
    return [
        game.text(
            msg(
                "ui.stats.hero",
                level=player.level,
                hp=player.hp,
                max_hp=player.max_hp,
                mp=player.mp,
                max_mp=player.max_mp,
                atk=player.total_atk(),
                defense=player.total_def(),
                exp=player.exp,
                next_exp=player.next_exp,
                gold=player.gold,
            )
        ),
        game.text(
            msg(
                "ui.stats.gear",
                weapon=msg(weapon_label_key(player.equipment.weapon)),
                armor=msg(armor_label_key(player.equipment.armor)),
                potion=player.bag.potion,
                ether=player.bag.ether,
            )
        ),
        game.text(msg(quest_key, progress=game.quest.progress_text())),
    ]


def render_game(game: Game) -> None:
    if game.mode in ("exploration", "town"):
        render_heading("World")
        print("\n".join(map_lines(game)))
    render_heading("Hero")
    render_bullet_lines(hero_lines(game))

    if game.mode == "town":
        labels = [game.text(town_service.action_label(action)) for action in TOWN_ACTIONS]
        render_menu("Town", labels, game.town_cursor)
    elif game.mode == "battle" and game.battle is not None:
        enemy = game.battle.enemy
        render_heading("Battle")
        print(game.text(msg("ui.battle.enemy_hp", enemy=msg(enemy.name), hp=enemy.hp, max_hp=enemy.max_hp)))
        labels = [game.text(msg(BATTLE_ACTION_LABEL_KEYS[action])) for action in BATTLE_ACTIONS]
        render_menu("Actions", labels, game.battle_cursor)
    elif game.mode == "settings":
        labels = [game.text(label) for _, label in game.settings_options()]
        render_menu(game.text(msg("ui.settings.title")), labels, game.settings_cursor)
    elif game.mode == "victory":
        render_heading(game.text(msg("ui.result.victory")))
    elif game.mode == "game_over":
        render_heading(game.text(msg("ui.result.game_over")))

    render_heading("Log")
    render_bullet_lines(game.log_lines)
    if game.recent_event:
        print(game.text(msg("ui.banner.recent", event=game.recent_event)))
