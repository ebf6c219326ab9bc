"""ui.helpers — Shared drawing utilities for menu panels."""

from __future__ import annotations
import pygame

from core.constants import TILE_SIZE

ROW_H = TILE_SIZE + 4   # pixel height of one menu row


def draw_overlay(surface: pygame.Surface, alpha: int = 160) -> None:
    """Full-screen semi-transparent dark overlay."""
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, alpha))
    surface.blit(overlay, (0, 0))


def panel_rect(surface: pygame.Surface, width_cells: int, rows: int,
               header_lines: int) -> pygame.Rect:
    """Centre a panel *width_cells* wide with room for the header and rows."""
    sw, sh = surface.get_size()
    w = width_cells * TILE_SIZE
    h = (header_lines + rows) * ROW_H + 16
    return pygame.Rect((sw - w) // 2, (sh - h) // 2, w, h)


def draw_panel(surface: pygame.Surface, rect: pygame.Rect) -> None:
    pygame.draw.rect(surface, (20, 20, 30), rect)
    pygame.draw.rect(surface, (140, 140, 180), rect, 1)


def draw_menu_row(surface: pygame.Surface, app, x: int, y: int,
                  index: int, text: str, color=(255, 255, 255)) -> None:
    """Draw ``(a) text`` for option *index*."""
    letter = chr(ord("a") + index)
    app.draw_text(surface, f"({letter}) {text}", x, y, color, font=app.font_sm)
