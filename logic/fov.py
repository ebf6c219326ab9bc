"""logic/fov.py — Field of view around the player.

The scene owns one ``FovMap`` and calls ``compute`` whenever the player
moves (or a new level is entered).  Everything else, the AI included,
only ever asks ``is_in_fov(x, y)``.

Visibility is a ray test from the centre of the player's tile to the
centre of each tile within the torch radius.  Walls stop the ray but
are themselves visible, so room outlines light up.  Every tile seen is
marked ``explored`` on the map.
"""

from __future__ import annotations

from core.constants import TORCH_RADIUS
from core.tilemap import Map, map_size
from core.tuning import get as _tun


def has_line_of_sight(tiles: Map, x1: int, y1: int, x2: int, y2: int) -> bool:
    """True if nothing opaque lies strictly between two tiles.

    Uses a DDA grid walk between tile centres so every tile the ray
    passes through is tested.  The end tiles themselves are not.
    """
    fx, fy = x1 + 0.5, y1 + 0.5
    dx = x2 - x1
    dy = y2 - y1
    dist = (dx * dx + dy * dy) ** 0.5
    if dist < 0.01:
        return True

    # Step size: well under half a tile so corners aren't skipped
    steps = int(dist * 2.5) + 1
    sx = dx / steps
    sy = dy / steps

    prev = (x1, y1)
    for _ in range(steps):
        fx += sx
        fy += sy
        cell = (int(fx), int(fy))
        if cell == prev:
            continue
        if cell == (x2, y2):
            return True
        if tiles[cell[0]][cell[1]].block_sight:
            return False
        prev = cell
    return True


class FovMap:
    """Set of tiles the player can currently see."""

    def __init__(self, tiles: Map, radius: int | None = None):
        self.tiles = tiles
        self.radius = radius if radius is not None else _tun("fov", "torch_radius", TORCH_RADIUS)
        self._visible: set[tuple[int, int]] = set()
        self.origin: tuple[int, int] | None = None

    def reset(self, tiles: Map) -> None:
        """Switch to a new level's map; nothing is visible until ``compute``."""
        self.tiles = tiles
        self._visible.clear()
        self.origin = None

    def compute(self, x: int, y: int) -> set[tuple[int, int]]:
        w, h = map_size(self.tiles)
        r = self.radius
        visible: set[tuple[int, int]] = set()
        for tx in range(max(0, x - r), min(w, x + r + 1)):
            for ty in range(max(0, y - r), min(h, y + r + 1)):
                if (tx - x) ** 2 + (ty - y) ** 2 > r * r:
                    continue
                if has_line_of_sight(self.tiles, x, y, tx, ty):
                    visible.add((tx, ty))
                    self.tiles[tx][ty].explored = True
        self._visible = visible
        self.origin = (x, y)
        return visible

    def is_in_fov(self, x: int, y: int) -> bool:
        return (x, y) in self._visible

    # FovMap instances are handed to the AI as the visibility query
    __call__ = is_in_fov
