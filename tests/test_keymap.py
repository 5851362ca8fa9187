import pytest

from seedcrawl.domain.commands import Command
from seedcrawl.presentation.cli.keymap import decode_key


@pytest.mark.parametrize(
    "key, expected",
    [
        ("w", Command("up")),
        ("UP", Command("up")),
        ("a", Command("left")),
        ("s", Command("down")),
        ("right", Command("right")),
        ("", Command("confirm")),
        ("enter", Command("confirm")),
        ("q", Command("quit")),
        ("Esc", Command("cancel")),
        ("k", Command("save")),
        ("l", Command("load")),
        ("o", Command("settings")),
        ("t", Command("enter_town")),
        ("b", Command("back")),
        ("r", Command("restart")),
    ],
)
def test_decode_key_named_keys(key: str, expected: Command) -> None:
    assert decode_key(key) == expected


def test_decode_key_digits_select_zero_based_slots() -> None:
    assert decode_key("1") == Command.select(0)
    assert decode_key(" 8 ") == Command.select(7)


def test_decode_key_unknown_returns_none() -> None:
    assert decode_key("0") is None
    assert decode_key("x") is None
    assert decode_key("12") is None
