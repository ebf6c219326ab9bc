"""core/messages.py — Player-facing message log.

The log is append-only: game logic writes ``(text, color)`` pairs,
the renderer reads them.  Nothing in the simulation reads it back.

Usage:
    game.log.add("You picked up a sword!", GREEN)
    for text, color in game.log.recent(6):
        ...
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator

from core.constants import WHITE

Color = tuple[int, int, int]


@dataclass
class MessageLog:
    """Ordered ``(text, color)`` pairs, oldest first."""

    messages: list[tuple[str, Color]] = field(default_factory=list)

    def add(self, text: str, color: Color = WHITE) -> None:
        self.messages.append((str(text), tuple(color)))

    def recent(self, n: int = 6) -> list[tuple[str, Color]]:
        """Return the *n* most recent messages (newest last)."""
        if n <= 0:
            return []
        return self.messages[-n:]

    def last_text(self) -> str:
        return self.messages[-1][0] if self.messages else ""

    def __iter__(self) -> Iterator[tuple[str, Color]]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)
