"""data/entities.py — Entity archetypes.

Each archetype is a descriptor dict consumed by
``logic.entity_factory.spawn_from_descriptor``.  Top-level keys are the
entity's own fields; ``fighter`` / ``equipment`` sub-dicts attach the
matching component, ``ai`` names the starting brain and ``item`` names
the item kind.
"""

# ── Player ───────────────────────────────────────────────────────────

PLAYER = {
    "name": "player",
    "char": "@",
    "color": (255, 255, 255),
    "blocks": True,
    "alive": True,
    "fighter": {
        "hp": 100, "base_max_hp": 100,
        "base_defense": 1, "base_power": 2,
        "base_movement": 4, "xp": 0,
        "on_death": "player",
    },
}

# ── Monsters ─────────────────────────────────────────────────────────

MONSTERS = {
    "orc": {
        "name": "Orc",
        "char": "o",
        "color": (63, 127, 63),
        "blocks": True,
        "alive": True,
        "always_visible": True,
        "fighter": {
            "hp": 10, "base_max_hp": 10,
            "base_defense": 0, "base_power": 3,
            "base_movement": 4, "xp": 35,
            "on_death": "monster",
        },
        "ai": "basic",
    },
    "troll": {
        "name": "Troll",
        "char": "T",
        "color": (0, 127, 0),
        "blocks": True,
        "alive": True,
        "always_visible": True,
        "fighter": {
            "hp": 16, "base_max_hp": 16,
            "base_defense": 1, "base_power": 4,
            "base_movement": 3, "xp": 100,
            "on_death": "monster",
        },
        "ai": "basic",
    },
}

# ── Items ────────────────────────────────────────────────────────────

ITEMS = {
    "heal": {
        "name": "healing potion",
        "char": "!",
        "color": (127, 0, 255),
        "item": "heal",
    },
    "lightning": {
        "name": "scroll of lightning bolt",
        "char": "#",
        "color": (255, 255, 114),
        "item": "lightning",
    },
    "fireball": {
        "name": "scroll of fireball",
        "char": "#",
        "color": (255, 255, 114),
        "item": "fireball",
    },
    "confuse": {
        "name": "scroll of confusion",
        "char": "#",
        "color": (255, 255, 114),
        "item": "confuse",
    },
    "sword": {
        "name": "sword",
        "char": "/",
        "color": (0, 191, 255),
        "item": "sword",
        "equipment": {"slot": "right hand", "power_bonus": 3},
    },
    "shield": {
        "name": "shield",
        "char": "[",
        "color": (0, 191, 255),
        "item": "shield",
        "equipment": {"slot": "left hand", "defense_bonus": 1},
    },
    "dagger": {
        "name": "dagger",
        "char": "-",
        "color": (0, 191, 255),
        "item": "dagger",
        "equipment": {"slot": "left hand", "power_bonus": 2},
    },
}

# ── Scenery ──────────────────────────────────────────────────────────

STAIRS = {
    "name": "stairs",
    "char": ">",
    "color": (255, 255, 255),
    "always_visible": True,
    "stairs": True,
}
