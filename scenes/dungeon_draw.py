"""scenes/dungeon_draw.py — Rendering helpers for the dungeon scene.

All pure-draw functions live here so that DungeonScene.draw() stays
thin.  Every function receives the data it needs as parameters — no
implicit coupling to the scene object beyond what is explicitly passed.

Screen layout (in character cells): the map fills the top
MAP_HEIGHT rows; the HUD panel takes the last PANEL_HEIGHT rows.
"""

from __future__ import annotations
import textwrap
from typing import Sequence

import pygame
from core.app import App
from core.constants import (
    TILE_SIZE, SCREEN_WIDTH, BAR_WIDTH, PANEL_Y, MSG_X, MSG_HEIGHT,
    COLOR_DARK_WALL, COLOR_LIGHT_WALL, COLOR_DARK_GROUND, COLOR_LIGHT_GROUND,
    WHITE, LIGHT_GREY, LIGHT_RED, DARKER_RED, LIGHT_CYAN,
)
from core.messages import MessageLog
from core.tilemap import Map, in_bounds
from components import Entity, GameState
from logic.combat import max_hp
from logic.fov import FovMap


# ── Tiles ───────────────────────────────────────────────────────────

def draw_tiles(surface: pygame.Surface, tiles: Map, fov: FovMap):
    """Lit tiles in full colour, remembered tiles dimmed, the rest black."""
    for x, column in enumerate(tiles):
        for y, tile in enumerate(column):
            visible = fov.is_in_fov(x, y)
            if visible:
                color = COLOR_LIGHT_WALL if tile.block_sight else COLOR_LIGHT_GROUND
            elif tile.explored:
                color = COLOR_DARK_WALL if tile.block_sight else COLOR_DARK_GROUND
            else:
                continue
            surface.fill(color, (x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE))


# ── Entities ────────────────────────────────────────────────────────

def draw_entities(surface: pygame.Surface, app: App, entities: Sequence[Entity],
                  tiles: Map, fov: FovMap):
    """Draw what the player can see, blockers last so they sit on top.

    ``always_visible`` things (stairs) stay drawn once their tile has
    been explored.
    """
    shown = [
        e for e in entities
        if fov.is_in_fov(e.x, e.y)
        or (e.always_visible and in_bounds(tiles, e.x, e.y) and tiles[e.x][e.y].explored)
    ]
    shown.sort(key=lambda e: e.blocks)
    for e in shown:
        app.draw_cell(surface, e.char, e.x, e.y, e.color)


def draw_target_cursor(surface: pygame.Surface, tile: tuple[int, int], ok: bool):
    color = LIGHT_CYAN if ok else DARKER_RED
    x, y = tile
    pygame.draw.rect(surface, color, (x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE), 1)


# ── HUD panel ───────────────────────────────────────────────────────

def _draw_bar(surface: pygame.Surface, app: App, x: int, y: int, total_width: int,
              name: str, value: int, maximum: int, bar_color, back_color):
    """Horizontal gauge with ``name: value/maximum`` centred on it."""
    px, py = x * TILE_SIZE, y * TILE_SIZE
    full = total_width * TILE_SIZE
    surface.fill(back_color, (px, py, full, TILE_SIZE))
    if maximum > 0:
        filled = int(full * max(0, value) / maximum)
        if filled > 0:
            surface.fill(bar_color, (px, py, filled, TILE_SIZE))
    label = app.font_sm.render(f"{name}: {value}/{maximum}", True, WHITE)
    surface.blit(label, (px + (full - label.get_width()) // 2, py))


def _wrapped_messages(log: MessageLog, width: int, height: int) -> list[tuple[str, tuple]]:
    """The last *height* wrapped lines of the log."""
    lines: list[tuple[str, tuple]] = []
    for text, color in log.recent(height):
        for line in textwrap.wrap(text, width) or [""]:
            lines.append((line, color))
    return lines[-height:]


def names_under_mouse(mouse_tile: tuple[int, int], entities: Sequence[Entity],
                      fov: FovMap) -> str:
    x, y = mouse_tile
    return ", ".join(e.name for e in entities if e.pos() == (x, y) and fov.is_in_fov(x, y))


def draw_panel(surface: pygame.Surface, app: App, entities: Sequence[Entity],
               game: GameState, fov: FovMap, mouse_tile: tuple[int, int]):
    py = PANEL_Y * TILE_SIZE
    surface.fill((0, 0, 0), (0, py, surface.get_width(), surface.get_height() - py))

    player = entities[0]
    if player.fighter is not None:
        _draw_bar(surface, app, 1, PANEL_Y + 1, BAR_WIDTH, "HP",
                  player.fighter.hp, max_hp(player, game), LIGHT_RED, DARKER_RED)
    app.draw_text(surface, f"Dungeon level: {game.dungeon_level}",
                  TILE_SIZE, (PANEL_Y + 3) * TILE_SIZE, WHITE, font=app.font_sm)

    under = names_under_mouse(mouse_tile, entities, fov)
    if under:
        app.draw_text(surface, under, TILE_SIZE, PANEL_Y * TILE_SIZE, LIGHT_GREY,
                      font=app.font_sm)

    msg_width = SCREEN_WIDTH - MSG_X - 2
    for row, (line, color) in enumerate(_wrapped_messages(game.log, msg_width, MSG_HEIGHT)):
        app.draw_text(surface, line, MSG_X * TILE_SIZE, (PANEL_Y + 1 + row) * TILE_SIZE,
                      color, font=app.font_sm)
