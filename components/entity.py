"""components.entity — The one polymorphic actor / item / scenery record.

Behaviour comes from which optional components are present:

    fighter    combat-capable (hp, power, defense, xp)
    ai         acts on its own each turn
    item       can be picked up and used
    equipment  can be worn

The ``stairs`` flag marks the way down to the next level.

An entity lives in exactly one collection at a time: the active map
list (index 0 is always the player) or the player's inventory.
"""

from __future__ import annotations
import math
from dataclasses import dataclass

from components.ai import Ai
from components.items import Equipment, ItemKind
from components.rpg import Fighter


@dataclass
class Entity:
    x: int
    y: int
    char: str
    color: tuple[int, int, int]
    name: str
    blocks: bool = False
    alive: bool = False
    level: int = 1                 # only meaningful for the player
    always_visible: bool = False   # drawn in explored tiles outside the FOV
    stairs: bool = False           # standing here lets the player descend
    fighter: Fighter | None = None
    ai: Ai | None = None
    item: ItemKind | None = None
    equipment: Equipment | None = None

    def pos(self) -> tuple[int, int]:
        return self.x, self.y

    def set_pos(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def distance_to(self, other: Entity) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def distance(self, x: int, y: int) -> float:
        return math.hypot(x - self.x, y - self.y)
