"""components — Entity component dataclasses, organised by domain.

Submodules
----------
entity     Entity (the single actor / item / scenery record)
rpg        Fighter, DeathCallback, MonsterKind
items      ItemKind, Slot, Equipment
ai         BasicAi, ConfusedAi, Ai
resources  GameState

All public names are re-exported here so code can simply do
``from components import Entity, Fighter``.
"""

# ── RPG ──────────────────────────────────────────────────────────────
from components.rpg import Fighter, DeathCallback, MonsterKind

# ── Items ────────────────────────────────────────────────────────────
from components.items import ItemKind, Slot, Equipment

# ── AI ───────────────────────────────────────────────────────────────
from components.ai import Ai, BasicAi, ConfusedAi

# ── Entity ───────────────────────────────────────────────────────────
from components.entity import Entity

# ── Game-level resources ─────────────────────────────────────────────
from components.resources import GameState

__all__ = [
    # rpg
    "Fighter", "DeathCallback", "MonsterKind",
    # items
    "ItemKind", "Slot", "Equipment",
    # ai
    "Ai", "BasicAi", "ConfusedAi",
    # entity
    "Entity",
    # resources
    "GameState",
]
