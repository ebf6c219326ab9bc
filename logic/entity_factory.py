"""logic/entity_factory.py — Table-driven entity spawning.

A single ``_COMPONENT_TABLE`` maps descriptor keys to component classes
and their field schemas.  ``spawn_from_descriptor`` reads the entity's
own fields, then iterates the table, casts each sub-dict and attaches
the component.

The ``make_*`` helpers pick the right archetype from ``data.entities``.
"""

from __future__ import annotations
import copy
from typing import Any, Callable

from components import (
    Entity, Fighter, DeathCallback, MonsterKind,
    Equipment, Slot, ItemKind, BasicAi,
)
from data import entities as archetypes


# ── Field-schema helpers ─────────────────────────────────────────────

def _int(v: Any, default: int = 0) -> int:
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


def _bool(v: Any, default: bool = False) -> bool:
    return bool(v) if v is not None else default


def _str(v: Any, default: str = "") -> str:
    return str(v) if v is not None else default


def _color(v: Any, default: tuple) -> tuple:
    return tuple(int(c) for c in v) if v else default


# ── Component table ──────────────────────────────────────────────────
# Each entry: (descriptor_key, ComponentClass, field_map)
# field_map: dict mapping component-kwarg → (descriptor-sub-key, cast, default)

_COMPONENT_TABLE: list[tuple[str, type, dict[str, tuple[str, Callable, Any]]]] = [
    ("fighter", Fighter, {
        "hp":            ("hp",            _int, 1),
        "base_max_hp":   ("base_max_hp",   _int, 1),
        "base_defense":  ("base_defense",  _int, 0),
        "base_power":    ("base_power",    _int, 0),
        "base_movement": ("base_movement", _int, 4),
        "xp":            ("xp",            _int, 0),
        "on_death":      ("on_death", lambda v, d: DeathCallback(v), DeathCallback.MONSTER),
    }),
    ("equipment", Equipment, {
        "slot":          ("slot", lambda v, d: Slot(v), Slot.RIGHT_HAND),
        "equipped":      ("equipped",      _bool, False),
        "power_bonus":   ("power_bonus",   _int, 0),
        "defense_bonus": ("defense_bonus", _int, 0),
        "max_hp_bonus":  ("max_hp_bonus",  _int, 0),
    }),
]

# Brain name → initial AI state
_AI_STATES = {
    "basic": BasicAi,
}


def _build_component(cls: type, field_map: dict, sub: dict) -> Any:
    """Construct a component from its field_map and descriptor sub-dict."""
    kwargs: dict[str, Any] = {}
    for kwarg_name, (sub_key, cast_fn, default) in field_map.items():
        raw = sub.get(sub_key)
        if raw is None:
            kwargs[kwarg_name] = default
        else:
            kwargs[kwarg_name] = cast_fn(raw, default)
    return cls(**kwargs)


def spawn_from_descriptor(desc: dict, x: int = 0, y: int = 0) -> Entity:
    """Create an entity at ``(x, y)`` from a data descriptor dict."""
    entity = Entity(
        x=x,
        y=y,
        char=_str(desc.get("char"), "?"),
        color=_color(desc.get("color"), (255, 255, 255)),
        name=_str(desc.get("name"), "unnamed"),
        blocks=_bool(desc.get("blocks"), False),
        alive=_bool(desc.get("alive"), False),
        always_visible=_bool(desc.get("always_visible"), False),
        stairs=_bool(desc.get("stairs"), False),
    )

    # ── Table-driven components ──────────────────────────────────────
    for key, cls, field_map in _COMPONENT_TABLE:
        if key not in desc or not isinstance(desc[key], dict):
            continue
        setattr(entity, key, _build_component(cls, field_map, desc[key]))

    # ── AI (special: name → state value) ─────────────────────────────
    if "ai" in desc:
        state = _AI_STATES.get(desc["ai"])
        if state is None:
            raise ValueError(f"unknown ai {desc['ai']!r} for {entity.name}")
        entity.ai = state()

    # ── Item kind ────────────────────────────────────────────────────
    if "item" in desc:
        entity.item = ItemKind(desc["item"])

    return entity


# ── Archetype helpers ────────────────────────────────────────────────

def make_player(x: int = 0, y: int = 0) -> Entity:
    return spawn_from_descriptor(archetypes.PLAYER, x, y)


def make_monster(x: int, y: int, kind: MonsterKind) -> Entity:
    return spawn_from_descriptor(archetypes.MONSTERS[kind.value], x, y)


def make_item(x: int, y: int, kind: ItemKind) -> Entity:
    return spawn_from_descriptor(archetypes.ITEMS[kind.value], x, y)


def make_stairs(x: int, y: int) -> Entity:
    return spawn_from_descriptor(archetypes.STAIRS, x, y)


def make_starting_dagger() -> Entity:
    """The dagger every new character carries, already equipped."""
    desc = copy.deepcopy(archetypes.ITEMS["dagger"])
    desc["equipment"]["equipped"] = True
    return spawn_from_descriptor(desc)
