"""Console-driven loop: read a key per line, dispatch, redraw."""
from __future__ import annotations

import logging

from seedcrawl.config import Settings, load_settings
from seedcrawl.data.difficulty_repo import DifficultyRepository
from seedcrawl.services.game import Game

from .keymap import decode_key
from .render import render_game

logger = logging.getLogger(__name__)

_HELP = "keys: wasd move | 1-8 select | enter confirm | o settings | t town | b back | k save | l load | r restart | q quit"


def build_game(settings: Settings) -> Game:
    """Construct the aggregate from resolved settings."""
    return Game(
        language=settings.language,
        difficulty=settings.difficulty,
        difficulty_repo=DifficultyRepository(settings.difficulty_config_path),
        save_path=settings.save_path,
    )


def main() -> None:
    """Start the interactive CLI session."""
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    game = build_game(settings)
    logger.info("Session started with seed %s", game.map_seed)
    print("=== seedcrawl ===")
    print(_HELP)
    while not game.should_quit:
        render_game(game)
        try:
            raw = input("> ")
        except EOFError:
            break
        command = decode_key(raw)
        if command is None:
            print(_HELP)
            continue
        game.handle_command(command)
    print("Goodbye!")
