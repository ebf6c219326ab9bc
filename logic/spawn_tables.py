"""Spawn tables — depth-scaled weighted selection of monsters and items.

Every depth-dependent number is a *threshold table*: a tuple of
``Transition(level, value)`` pairs sorted by level.  ``from_dungeon_level``
turns a table into a step function of depth.  The tables themselves are
plain module-level data; nothing re-encodes them per call site.

Usage:
    entries = monster_table(depth)          # → [WeightedEntry(ORC, 80), ...]
    kind = weighted_choice(entries)         # → MonsterKind.TROLL
    n = random.randint(0, max_monsters(depth))
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from components import ItemKind, MonsterKind

T = TypeVar("T")


@dataclass(frozen=True)
class Transition:
    """From depth ``level`` onward, the table yields ``value``."""
    level: int
    value: int


@dataclass(frozen=True)
class WeightedEntry(Generic[T]):
    kind: T
    weight: int


# ── Generic resolution ───────────────────────────────────────────────

def from_dungeon_level(table: Sequence[Transition], level: int) -> int:
    """Return the value of the highest threshold ``<= level``, else 0.

    *table* must be sorted by ascending ``level``.
    """
    for transition in reversed(table):
        if level >= transition.level:
            return transition.value
    return 0


def weighted_choice(entries: Sequence[WeightedEntry[T]],
                    rng: random.Random | None = None) -> T:
    """Pick one entry's kind with probability proportional to its weight.

    Draws uniformly in ``[0, total)`` and walks the table accumulating
    weights, so a zero-weight entry owns an empty span and can never be
    picked.  Raises ``ValueError`` when nothing has positive weight.
    """
    total = sum(max(0, e.weight) for e in entries)
    if total <= 0:
        raise ValueError("weighted_choice needs at least one positive weight")
    r = (rng or random).randrange(total)
    cur = 0
    for e in entries:
        if e.weight <= 0:
            continue
        cur += e.weight
        if r < cur:
            return e.kind
    raise AssertionError("unreachable: draw fell outside the table")


# ── Tables (pure data) ───────────────────────────────────────────────

MAX_MONSTERS_PER_ROOM: tuple[Transition, ...] = (
    Transition(1, 2),
    Transition(4, 3),
    Transition(6, 5),
)

MAX_ITEMS_PER_ROOM: tuple[Transition, ...] = (
    Transition(1, 1),
    Transition(4, 2),
)

MONSTER_CHANCES: dict[MonsterKind, tuple[Transition, ...]] = {
    MonsterKind.ORC:   (Transition(1, 80),),
    MonsterKind.TROLL: (Transition(3, 15), Transition(5, 30), Transition(7, 60)),
}

ITEM_CHANCES: dict[ItemKind, tuple[Transition, ...]] = {
    ItemKind.HEAL:      (Transition(1, 35),),
    ItemKind.LIGHTNING: (Transition(4, 25),),
    ItemKind.FIREBALL:  (Transition(6, 25),),
    ItemKind.CONFUSE:   (Transition(2, 10),),
    ItemKind.SWORD:     (Transition(4, 5),),
    ItemKind.SHIELD:    (Transition(8, 15),),
}


# ── Public API ───────────────────────────────────────────────────────

def _resolve(chances: dict[T, tuple[Transition, ...]], level: int) -> list[WeightedEntry[T]]:
    return [WeightedEntry(kind, from_dungeon_level(table, level))
            for kind, table in chances.items()]


def monster_table(level: int) -> list[WeightedEntry[MonsterKind]]:
    """Weighted monster distribution at dungeon depth *level*."""
    return _resolve(MONSTER_CHANCES, level)


def item_table(level: int) -> list[WeightedEntry[ItemKind]]:
    """Weighted item distribution at dungeon depth *level*."""
    return _resolve(ITEM_CHANCES, level)


def max_monsters(level: int) -> int:
    return from_dungeon_level(MAX_MONSTERS_PER_ROOM, level)


def max_items(level: int) -> int:
    return from_dungeon_level(MAX_ITEMS_PER_ROOM, level)
