"""core/tilemap.py — Tile grid and room rectangles.

A map is a plain column-major grid, ``tiles[x][y]``, of ``Tile``
objects.  Its size never changes after ``new_map()`` builds it; a new
depth gets a brand-new grid rather than a patched one.

These live in ``core/`` (not ``logic/``) because generation, movement,
field of view and persistence all need them.
"""

from __future__ import annotations
from dataclasses import dataclass

Map = list[list["Tile"]]


@dataclass
class Tile:
    """One map cell.

    ``blocked`` stops movement, ``block_sight`` stops light.  Only
    ``explored`` changes after placement (set by the renderer once the
    player has seen the tile).
    """
    blocked: bool
    block_sight: bool
    explored: bool = False

    @classmethod
    def empty(cls) -> Tile:
        return cls(blocked=False, block_sight=False)

    @classmethod
    def wall(cls) -> Tile:
        return cls(blocked=True, block_sight=True)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned room footprint, ``(x1, y1)`` → ``(x2, y2)`` inclusive.

    The outermost ring is the room's wall; only the interior is carved.
    """
    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def from_size(cls, x: int, y: int, w: int, h: int) -> Rect:
        return cls(x, y, x + w, y + h)

    def center(self) -> tuple[int, int]:
        return (self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2

    def intersects(self, other: Rect) -> bool:
        """Closed-interval overlap on both axes (touching walls count)."""
        return (self.x1 <= other.x2 and self.x2 >= other.x1
                and self.y1 <= other.y2 and self.y2 >= other.y1)

    def interior(self) -> tuple[range, range]:
        """Column and row ranges of the carved floor."""
        return range(self.x1 + 1, self.x2), range(self.y1 + 1, self.y2)


def new_map(width: int, height: int) -> Map:
    """Return a *width* × *height* grid of solid wall."""
    if width <= 0 or height <= 0:
        raise ValueError(f"map size must be positive, got {width}x{height}")
    return [[Tile.wall() for _ in range(height)] for _ in range(width)]


def map_size(tiles: Map) -> tuple[int, int]:
    """Return ``(width, height)`` of *tiles*."""
    return len(tiles), len(tiles[0]) if tiles else 0


def in_bounds(tiles: Map, x: int, y: int) -> bool:
    w, h = map_size(tiles)
    return 0 <= x < w and 0 <= y < h


def tile_at(tiles: Map, x: int, y: int) -> Tile:
    """Return the tile at ``(x, y)``.

    Raises ``IndexError`` for anything outside the grid — negative
    coordinates must not silently wrap to the far edge.
    """
    if not in_bounds(tiles, x, y):
        w, h = map_size(tiles)
        raise IndexError(f"tile ({x}, {y}) outside {w}x{h} map")
    return tiles[x][y]
