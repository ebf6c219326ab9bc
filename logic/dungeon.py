"""logic/dungeon.py — Procedural level generation.

Rooms are dropped at random and kept only if they touch no earlier
room; every kept room is chained to the one before it by an L-shaped
corridor, so the whole level is connected.  The player starts in the
centre of the first room and the stairs down sit in the centre of the
last one.

Usage::

    tiles, entities = generate(30, (6, 10), 80, 43, depth, player)
    game.map = make_map(entities, game.dungeon_level)   # next depth
"""

from __future__ import annotations
import random
from typing import Any, Sequence

from core.constants import (
    PLAYER, MAP_WIDTH, MAP_HEIGHT, MAX_ROOMS, ROOM_MIN_SIZE, ROOM_MAX_SIZE,
)
from core.tilemap import Map, Rect, Tile, new_map
from core.tuning import get as _tun
from components import Entity
from logic.entity_factory import make_monster, make_item, make_stairs
from logic.movement import is_blocked
from logic import spawn_tables


class DungeonGenerationError(RuntimeError):
    """The room settings cannot produce a playable level."""


# ── Carving ──────────────────────────────────────────────────────────

def create_room(room: Rect, tiles: Map) -> None:
    xs, ys = room.interior()
    for x in xs:
        for y in ys:
            tiles[x][y] = Tile.empty()


def create_h_tunnel(x1: int, x2: int, y: int, tiles: Map) -> None:
    for x in range(min(x1, x2), max(x1, x2) + 1):
        tiles[x][y] = Tile.empty()


def create_v_tunnel(y1: int, y2: int, x: int, tiles: Map) -> None:
    for y in range(min(y1, y2), max(y1, y2) + 1):
        tiles[x][y] = Tile.empty()


def connect_rooms(prev: Rect, new: Rect, tiles: Map, rng: Any = random) -> None:
    """Dig an L-shaped corridor between two room centres.

    Which leg comes first is a coin flip.
    """
    px, py = prev.center()
    nx, ny = new.center()
    if rng.random() < 0.5:
        create_h_tunnel(px, nx, py, tiles)
        create_v_tunnel(py, ny, nx, tiles)
    else:
        create_v_tunnel(py, ny, px, tiles)
        create_h_tunnel(px, nx, ny, tiles)


# ── Population ───────────────────────────────────────────────────────

def _random_interior(room: Rect, rng: Any) -> tuple[int, int]:
    return rng.randint(room.x1 + 1, room.x2 - 1), rng.randint(room.y1 + 1, room.y2 - 1)


def place_objects(room: Rect, tiles: Map, entities: list[Entity], depth: int,
                  rng: Any = random) -> int:
    """Scatter depth-appropriate monsters and items across *room*.

    Each spawn gets one random interior tile; if that tile is already
    blocked the spawn is dropped.  Returns how many entities were added.
    """
    added = 0

    monsters = spawn_tables.monster_table(depth)
    for _ in range(rng.randint(0, spawn_tables.max_monsters(depth))):
        x, y = _random_interior(room, rng)
        if is_blocked(x, y, tiles, entities):
            continue
        kind = spawn_tables.weighted_choice(monsters, rng)
        entities.append(make_monster(x, y, kind))
        added += 1

    items = spawn_tables.item_table(depth)
    for _ in range(rng.randint(0, spawn_tables.max_items(depth))):
        x, y = _random_interior(room, rng)
        if is_blocked(x, y, tiles, entities):
            continue
        kind = spawn_tables.weighted_choice(items, rng)
        entities.append(make_item(x, y, kind))
        added += 1

    return added


# ── Whole-level generation ───────────────────────────────────────────

def _check_settings(room_size_range: Sequence[int], map_width: int, map_height: int) -> None:
    lo, hi = room_size_range
    if lo < 3 or lo > hi:
        raise DungeonGenerationError(f"bad room size range {lo}..{hi}")
    if hi >= map_width or hi >= map_height:
        raise DungeonGenerationError(
            f"rooms up to {hi} tiles cannot fit a {map_width}x{map_height} map")


def generate(max_rooms: int, room_size_range: Sequence[int],
             map_width: int, map_height: int, depth: int,
             player: Entity | None = None,
             rng: Any = random,
             rooms: list[Rect] | None = None) -> tuple[Map, list[Entity]]:
    """Build one level.

    Returns ``(tiles, entities)``.  ``entities[0]`` is *player* (moved to
    the first room's centre) when one is given, and the last entity is
    always the stairs.  Accepted rooms are appended to *rooms* if a list
    is passed.  Raises ``DungeonGenerationError`` if no room could be
    placed at all.
    """
    _check_settings(room_size_range, map_width, map_height)
    lo, hi = room_size_range

    tiles = new_map(map_width, map_height)
    entities: list[Entity] = [player] if player is not None else []
    if rooms is None:
        rooms = []

    for _ in range(max_rooms):
        w = rng.randint(lo, hi)
        h = rng.randint(lo, hi)
        x = rng.randint(0, map_width - w - 1)
        y = rng.randint(0, map_height - h - 1)
        room = Rect.from_size(x, y, w, h)

        if any(room.intersects(other) for other in rooms):
            continue

        create_room(room, tiles)
        if rooms:
            connect_rooms(rooms[-1], room, tiles, rng)
        elif player is not None:
            # Placed before populating so nothing spawns on top of the player.
            player.set_pos(*room.center())
        place_objects(room, tiles, entities, depth, rng)
        rooms.append(room)

    if not rooms:
        raise DungeonGenerationError(
            f"no room accepted in {max_rooms} attempts on a {map_width}x{map_height} map")

    entities.append(make_stairs(*rooms[-1].center()))
    print(f"[DUNGEON] depth {depth}: {len(rooms)} rooms, {len(entities)} entities")
    return tiles, entities


def dungeon_settings() -> dict:
    """Generation parameters, tuning file first, then built-in defaults."""
    return {
        "max_rooms": _tun("dungeon", "max_rooms", MAX_ROOMS),
        "room_size_range": (
            _tun("dungeon", "room_min_size", ROOM_MIN_SIZE),
            _tun("dungeon", "room_max_size", ROOM_MAX_SIZE),
        ),
        "map_width": _tun("dungeon", "map_width", MAP_WIDTH),
        "map_height": _tun("dungeon", "map_height", MAP_HEIGHT),
    }


def make_map(entities: list[Entity], depth: int, rng: Any = random) -> Map:
    """Replace the level in place: keep only the player, build a new map.

    *entities* is truncated to the player and refilled with the new
    level's monsters, items and stairs.
    """
    player = entities[PLAYER]
    tiles, fresh = generate(depth=depth, player=player, rng=rng, **dungeon_settings())
    entities[:] = fresh
    return tiles
