"""ui.commands — Command objects emitted by modals.

Modals return these instead of directly mutating game state that lives
outside their scope.  The dungeon scene reads the list and applies each
effect through ``logic``.

Add new command types here whenever a modal needs to trigger a game
action.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class CloseModal:
    """Pop the top modal off the stack."""


@dataclass(frozen=True, slots=True)
class UseItem:
    """Use the inventory item at ``inventory_id``."""
    inventory_id: int


@dataclass(frozen=True, slots=True)
class DropItem:
    """Drop the inventory item at ``inventory_id`` at the player's feet."""
    inventory_id: int


@dataclass(frozen=True, slots=True)
class ChooseStat:
    """Spend a pending level-up on stat option ``index``."""
    index: int


# Union of every command type; extend as new commands are added.
UICommand = Union[CloseModal, UseItem, DropItem, ChooseStat]
