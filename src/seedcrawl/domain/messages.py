"""Translatable message descriptors produced by services."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True, slots=True)
class Message:
    """A catalog key plus format params; params may nest other messages."""

    key: str
    params: Dict[str, object] = field(default_factory=dict)


def msg(key: str, **params: object) -> Message:
    return Message(key, dict(params))
