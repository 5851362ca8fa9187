"""Decodes raw key names into game commands."""
from __future__ import annotations

from typing import Dict

from seedcrawl.domain.commands import Command

_KEY_COMMANDS: Dict[str, Command] = {
    "q": Command("quit"),
    "esc": Command("cancel"),
    "escape": Command("cancel"),
    "k": Command("save"),
    "l": Command("load"),
    "w": Command("up"),
    "up": Command("up"),
    "s": Command("down"),
    "down": Command("down"),
    "a": Command("left"),
    "left": Command("left"),
    "d": Command("right"),
    "right": Command("right"),
    "enter": Command("confirm"),
    "": Command("confirm"),
    "b": Command("back"),
    "o": Command("settings"),
    "t": Command("enter_town"),
    "r": Command("restart"),
}


def decode_key(key: str) -> Command | None:
    """Map a key name to a command; digits 1-9 select zero-based slots."""
    normalized = key.strip().lower()
    if len(normalized) == 1 and normalized in "123456789":
        return Command.select(int(normalized) - 1)
    return _KEY_COMMANDS.get(normalized)
