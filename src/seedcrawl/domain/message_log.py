"""Bounded scrolling log of already-translated lines."""
from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Iterator, List

LOG_CAPACITY = 10


class MessageLog:
    """Fixed-capacity ring; pushing past capacity drops the oldest line."""

    def __init__(self, capacity: int = LOG_CAPACITY, lines: Iterable[str] = ()) -> None:
        if capacity <= 0:
            raise ValueError("Log capacity must be positive.")
        self._lines: Deque[str] = deque(maxlen=capacity)
        self._lines.extend(lines)

    @property
    def capacity(self) -> int:
        assert self._lines.maxlen is not None
        return self._lines.maxlen

    def push(self, line: str) -> None:
        self._lines.append(line)

    def lines(self) -> List[str]:
        return list(self._lines)

    def last(self) -> str | None:
        return self._lines[-1] if self._lines else None

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)
