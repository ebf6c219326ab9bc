"""logic/movement.py — Tile-step movement and occupancy queries.

Movement is one tile per step.  A step that would land on a wall or a
blocking entity is dropped — no retry, no alternate path.

``is_blocked`` is also what the input layer uses for player movement.
"""

from __future__ import annotations
from typing import Sequence, TypeVar

from core.tilemap import Map, tile_at
from components import Entity

T = TypeVar("T")


def pair(items: Sequence[T], first: int, second: int) -> tuple[T, T]:
    """Return ``(items[first], items[second])`` for two distinct indices.

    Attacker and defender both come out of the same entity list; asking
    for the same index twice means a broken caller, so it raises
    ``ValueError`` instead of handing back one entity under two names.
    """
    if first == second:
        raise ValueError(f"pair() needs two distinct indices, got {first} twice")
    return items[first], items[second]


def blocking_entity_at(x: int, y: int, entities: Sequence[Entity]) -> int | None:
    """Index of the first blocking entity on ``(x, y)``, or ``None``."""
    for idx, e in enumerate(entities):
        if e.blocks and e.x == x and e.y == y:
            return idx
    return None


def is_blocked(x: int, y: int, tiles: Map, entities: Sequence[Entity]) -> bool:
    """True if ``(x, y)`` is a wall or holds a blocking entity.

    Raises ``IndexError`` for coordinates outside the map.
    """
    if tile_at(tiles, x, y).blocked:
        return True
    return blocking_entity_at(x, y, entities) is not None


def move_by(idx: int, dx: int, dy: int, tiles: Map, entities: Sequence[Entity]) -> bool:
    """Step entity *idx* by ``(dx, dy)`` if the destination is free.

    Returns True if the entity moved.  ``(0, 0)`` is a valid no-op step.
    """
    if dx == 0 and dy == 0:
        return False
    e = entities[idx]
    nx, ny = e.x + dx, e.y + dy
    if is_blocked(nx, ny, tiles, entities):
        return False
    e.set_pos(nx, ny)
    return True


def step_towards(from_x: int, from_y: int, to_x: int, to_y: int) -> tuple[int, int]:
    """Unit step toward a target, rounded to one of the eight compass steps.

    Returns ``(0, 0)`` when already on the target.
    """
    dx = to_x - from_x
    dy = to_y - from_y
    distance = (dx * dx + dy * dy) ** 0.5
    if distance == 0:
        return 0, 0
    return int(round(dx / distance)), int(round(dy / distance))


def move_towards(idx: int, target_x: int, target_y: int,
                 tiles: Map, entities: Sequence[Entity]) -> bool:
    """Take one step from entity *idx* toward ``(target_x, target_y)``."""
    e = entities[idx]
    dx, dy = step_towards(e.x, e.y, target_x, target_y)
    return move_by(idx, dx, dy, tiles, entities)
