"""components.rpg — Fighter stats and death behaviour."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class DeathCallback(Enum):
    """Which death transition applies when a fighter's hp reaches 0.

    Fixed at creation time.  ``PLAYER`` also marks the one fighter whose
    equipped inventory items count toward its stats.
    """
    PLAYER = "player"
    MONSTER = "monster"


class MonsterKind(Enum):
    ORC = "orc"
    TROLL = "troll"


@dataclass
class Fighter:
    """Combat-capable component.

    ``base_*`` values never include equipment; effective stats are
    computed by ``logic.combat`` (base + equipped bonuses).
    ``xp`` is both the player's banked experience and, for monsters,
    the reward paid to whoever kills them.
    """
    hp: int
    base_max_hp: int
    base_defense: int
    base_power: int
    on_death: DeathCallback
    base_movement: int = 4
    xp: int = 0
