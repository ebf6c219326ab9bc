"""components.items — Item kinds, equipment slots and wearable bonuses."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class ItemKind(Enum):
    """What an item does when used.  Opaque to combat and generation."""
    HEAL = "heal"
    LIGHTNING = "lightning"
    CONFUSE = "confuse"
    FIREBALL = "fireball"
    SWORD = "sword"
    SHIELD = "shield"
    DAGGER = "dagger"


class Slot(Enum):
    """Equipment attachment point.  Each holds at most one equipped item."""
    LEFT_HAND = "left hand"
    RIGHT_HAND = "right hand"
    HEAD = "head"

    def __str__(self) -> str:
        return self.value


@dataclass
class Equipment:
    """Wearable component.

    ``equipped`` is only ever True while the owning entity sits in the
    player's inventory — never on the map.
    """
    slot: Slot
    equipped: bool = False
    power_bonus: int = 0
    defense_bonus: int = 0
    max_hp_bonus: int = 0
