"""core/constants.py — Shared constants used across the codebase.

Centralises magic numbers so there's exactly one place to change them.
Tunable gameplay values are also exposed through ``core.tuning``; the
constants here are the defaults every call site falls back to.

Coordinates
-----------
All positions are integer tile coordinates.  The map is indexed
``tiles[x][y]`` (column-major), ``0 <= x < MAP_WIDTH``,
``0 <= y < MAP_HEIGHT``.  The player is always entity index ``PLAYER``.
"""

# ── Screen / map size ───────────────────────────────────────────────
SCREEN_WIDTH = 80          # cells
SCREEN_HEIGHT = 50         # cells
MAP_WIDTH = 80             # tiles
MAP_HEIGHT = 43            # tiles

# Render
TILE_SIZE = 12             # px per cell
LIMIT_FPS = 20

# HUD panel (below the map)
BAR_WIDTH = 20
PANEL_HEIGHT = 7
PANEL_Y = SCREEN_HEIGHT - PANEL_HEIGHT
MSG_X = BAR_WIDTH + 2
MSG_HEIGHT = PANEL_HEIGHT - 1

# ── Dungeon generation ──────────────────────────────────────────────
ROOM_MAX_SIZE = 10
ROOM_MIN_SIZE = 6
MAX_ROOMS = 30

# ── Entities ────────────────────────────────────────────────────────
PLAYER = 0                 # player's index in the active entity list
INVENTORY_CAPACITY = 26    # one slot per letter a–z

# ── Progression ─────────────────────────────────────────────────────
LEVEL_UP_BASE = 200
LEVEL_UP_FACTOR = 150
LEVEL_SCREEN_WIDTH = 40
CHARACTER_SCREEN_WIDTH = 30

# ── Item effects ────────────────────────────────────────────────────
HEAL_AMOUNT = 40
LIGHTNING_DAMAGE = 40
LIGHTNING_RANGE = 5
CONFUSE_RANGE = 8
CONFUSE_NUM_TURNS = 10
FIREBALL_RADIUS = 3
FIREBALL_DAMAGE = 25

# ── Field of view ───────────────────────────────────────────────────
TORCH_RADIUS = 10

# ── Colours (RGB) ───────────────────────────────────────────────────
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
DARK_RED = (127, 0, 0)
ORANGE = (255, 127, 0)
YELLOW = (255, 255, 0)
LIGHT_YELLOW = (255, 255, 114)
GREEN = (0, 255, 0)
LIGHT_GREEN = (114, 255, 114)
DESATURATED_GREEN = (63, 127, 63)
DARKER_GREEN = (0, 127, 0)
VIOLET = (127, 0, 255)
LIGHT_VIOLET = (184, 114, 255)
LIGHT_BLUE = (114, 114, 255)
LIGHT_CYAN = (114, 255, 255)
SKY = (0, 191, 255)
LIGHT_RED = (255, 114, 114)
DARKER_RED = (127, 0, 0)
LIGHT_GREY = (159, 159, 159)

# Tile palette: (explored-but-unseen, in-view)
COLOR_DARK_WALL = (0, 0, 100)
COLOR_LIGHT_WALL = (130, 110, 50)
COLOR_DARK_GROUND = (50, 50, 150)
COLOR_LIGHT_GROUND = (200, 180, 50)
