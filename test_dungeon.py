"""test_dungeon.py — Level generation and map-geometry tests.

Every test seeds its own RNG, so a failure reproduces exactly.

Run:  python test_dungeon.py      (or collect with pytest)
"""
from __future__ import annotations
import sys, random, traceback
from collections import deque

# ── Test framework ──────────────────────────────────────────────────

passed = 0
failed = 0


def ok(label: str):
    global passed
    passed += 1
    print(f"  [PASS] {label}")


def fail(label: str, detail: str = ""):
    global failed
    failed += 1
    print(f"  [FAIL] {label}")
    if detail:
        for line in detail.strip().splitlines():
            print(f"         {line}")


# ── Imports ──────────────────────────────────────────────────────────

from core.constants import PLAYER, MAP_WIDTH, MAP_HEIGHT, MAX_ROOMS
from core.tilemap import Rect, new_map, tile_at
from logic.dungeon import (
    DungeonGenerationError, generate, make_map, create_room,
    create_h_tunnel, create_v_tunnel,
)
from logic.actions import take_stairs
from logic.entity_factory import make_player, make_monster, make_item, make_stairs
from logic.movement import is_blocked
from components import GameState, ItemKind, MonsterKind

import core.tuning as _tuning
_tuning.reset()


def _level(seed: int, depth: int = 1, rooms=None):
    rng = random.Random(seed)
    player = make_player()
    tiles, entities = generate(MAX_ROOMS, (6, 10), MAP_WIDTH, MAP_HEIGHT, depth,
                               player=player, rng=rng, rooms=rooms)
    return tiles, entities


def _reachable(tiles, start):
    """Flood-fill floor tiles from *start* (8-way, like movement)."""
    seen = {start}
    todo = deque([start])
    w, h = len(tiles), len(tiles[0])
    while todo:
        x, y = todo.popleft()
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                nx, ny = x + dx, y + dy
                if 0 <= nx < w and 0 <= ny < h and (nx, ny) not in seen \
                        and not tiles[nx][ny].blocked:
                    seen.add((nx, ny))
                    todo.append((nx, ny))
    return seen


# ═══════════════════════════════════════════════════════════════════
#  Geometry
# ═══════════════════════════════════════════════════════════════════

def test_intersects_is_closed_interval():
    a = Rect.from_size(0, 0, 5, 5)
    assert a.intersects(Rect.from_size(5, 5, 3, 3)), "shared corner counts"
    assert a.intersects(Rect.from_size(5, 0, 3, 3)), "shared wall counts"
    assert not a.intersects(Rect.from_size(6, 0, 3, 3))
    assert a.intersects(a)


def test_center_uses_integer_division():
    assert Rect.from_size(1, 1, 5, 6).center() == (3, 4)


def test_create_room_keeps_border_walls():
    tiles = new_map(12, 12)
    room = Rect.from_size(2, 2, 5, 5)
    create_room(room, tiles)
    assert tiles[2][4].blocked and tiles[7][4].blocked
    assert tiles[4][2].blocked and tiles[4][7].blocked
    for x in range(3, 7):
        for y in range(3, 7):
            assert not tiles[x][y].blocked


def test_tunnels_include_both_ends():
    tiles = new_map(10, 10)
    create_h_tunnel(7, 2, 5, tiles)
    create_v_tunnel(1, 3, 8, tiles)
    assert all(not tiles[x][5].blocked for x in range(2, 8))
    assert all(not tiles[8][y].blocked for y in range(1, 4))
    assert tiles[1][5].blocked and tiles[8][0].blocked


def test_out_of_bounds_tile_raises():
    tiles = new_map(5, 4)
    for x, y in [(-1, 0), (0, -1), (5, 0), (0, 4)]:
        try:
            tile_at(tiles, x, y)
        except IndexError:
            continue
        raise AssertionError(f"({x}, {y}) should be out of bounds")


# ═══════════════════════════════════════════════════════════════════
#  Generation
# ═══════════════════════════════════════════════════════════════════

def test_rooms_never_overlap():
    for seed in range(20):
        rooms = []
        _level(seed, rooms=rooms)
        assert rooms
        for i, a in enumerate(rooms):
            for b in rooms[i + 1:]:
                assert not a.intersects(b), f"seed {seed}: {a} overlaps {b}"


def test_player_starts_in_first_room_and_stairs_in_last():
    rooms = []
    tiles, entities = _level(3, rooms=rooms)
    assert entities[PLAYER].name == "player"
    assert entities[PLAYER].pos() == rooms[0].center()
    stairs = entities[-1]
    assert stairs.stairs and stairs.always_visible
    assert stairs.pos() == rooms[-1].center()


def test_every_room_is_connected():
    for seed in range(10):
        rooms = []
        tiles, entities = _level(seed, rooms=rooms)
        reach = _reachable(tiles, entities[PLAYER].pos())
        for room in rooms:
            assert room.center() in reach, f"seed {seed}: {room} cut off"


def test_spawns_stand_on_floor_without_stacking_blockers():
    for seed in range(10):
        tiles, entities = _level(seed, depth=6)
        taken = set()
        for e in entities:
            assert not tile_at(tiles, e.x, e.y).blocked, f"{e.name} inside a wall"
            if e.blocks:
                assert e.pos() not in taken, f"two blockers on {e.pos()}"
                taken.add(e.pos())


def test_zero_rooms_is_fatal():
    try:
        generate(0, (6, 10), MAP_WIDTH, MAP_HEIGHT, 1, rng=random.Random(1))
    except DungeonGenerationError:
        return
    raise AssertionError("expected DungeonGenerationError")


def test_rooms_too_big_for_map_are_fatal():
    try:
        generate(5, (6, 30), 20, 20, 1, rng=random.Random(1))
    except DungeonGenerationError:
        return
    raise AssertionError("expected DungeonGenerationError")


def test_make_map_keeps_only_the_player():
    player = make_player()
    stale = make_monster(3, 3, MonsterKind.ORC)
    entities = [player, stale]
    tiles = make_map(entities, 2, random.Random(7))
    assert entities[PLAYER] is player
    assert stale not in entities
    assert entities[-1].stairs
    assert not is_blocked(player.x, player.y, tiles, entities[1:])


# ═══════════════════════════════════════════════════════════════════
#  Stairs
# ═══════════════════════════════════════════════════════════════════

def test_stairs_are_recognised_by_flag_not_name():
    tiles = new_map(10, 10)
    create_room(Rect(0, 0, 9, 9), tiles)
    game = GameState(map=tiles)
    stairs = make_stairs(6, 6)
    stairs.name = "crumbling staircase"
    decoy = make_item(3, 3, ItemKind.HEAL)
    decoy.name = "stairs"
    entities = [make_player(3, 3), stairs, decoy]

    assert take_stairs(entities, game, random.Random(5)) is False
    assert game.dungeon_level == 1
    assert game.log.last_text() == "There are no stairs here."

    entities[PLAYER].set_pos(6, 6)
    assert take_stairs(entities, game, random.Random(5)) is True
    assert game.dungeon_level == 2
    assert entities[-1].stairs


# ── Runner ───────────────────────────────────────────────────────────

if __name__ == "__main__":
    for _name, _fn in list(globals().items()):
        if _name.startswith("test_") and callable(_fn):
            try:
                _fn()
                ok(_name)
            except Exception:
                fail(_name, traceback.format_exc())

    total = passed + failed
    print(f"\n{'='*50}")
    print(f" Dungeon Tests: {passed}/{total} passed")
    if failed:
        print(f" {failed} FAILED")
    print(f"{'='*50}")
    sys.exit(0 if failed == 0 else 1)
