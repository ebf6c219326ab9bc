"""components.resources — Game-level state that isn't tied to one entity."""

from __future__ import annotations
from dataclasses import dataclass, field

from core.messages import MessageLog
from core.tilemap import Map
from components.entity import Entity


@dataclass
class GameState:
    """Everything the simulation owns besides the active entity list.

    ``dungeon_level`` starts at 1 and only ever goes up.
    ``inventory`` is the player's bag; equipped items live here too.
    """
    map: Map
    log: MessageLog = field(default_factory=MessageLog)
    inventory: list[Entity] = field(default_factory=list)
    dungeon_level: int = 1

    def descend(self) -> int:
        """Advance to the next depth and return it."""
        self.dungeon_level += 1
        return self.dungeon_level
