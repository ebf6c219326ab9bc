"""ui.menu_modal — Lettered option menus.

One modal type covers every menu in the game: each option gets a
letter, pressing it emits the command built for that index.  Menus with
no options are plain message boxes that close on any key.

Factory helpers build the three menus the dungeon scene needs
(inventory, drop, level up) and the character sheet.
"""

from __future__ import annotations
from typing import Callable, Sequence

import pygame

from core.constants import INVENTORY_CAPACITY, LEVEL_SCREEN_WIDTH, CHARACTER_SCREEN_WIDTH
from ui.modal import Modal
from ui.commands import CloseModal, UseItem, DropItem, ChooseStat, UICommand
from ui.helpers import draw_overlay, panel_rect, draw_panel, draw_menu_row, ROW_H

INVENTORY_WIDTH = 50


class MenuModal(Modal):
    """Header text above up to 26 lettered options."""

    def __init__(
        self,
        header: str,
        options: Sequence[str],
        width: int,
        on_choose: Callable[[int], UICommand] | None = None,
        cancellable: bool = True,
    ) -> None:
        if len(options) > INVENTORY_CAPACITY:
            raise ValueError(f"cannot have a menu with more than {INVENTORY_CAPACITY} options")
        self.header_lines = header.split("\n") if header else []
        self.options = list(options)
        self.width = width
        self.on_choose = on_choose
        self.cancellable = cancellable

    def handle_event(self, event: pygame.event.Event) -> list[UICommand]:
        if event.type != pygame.KEYDOWN:
            return []

        # Message box: any key dismisses
        if not self.options:
            return [CloseModal()]

        char = getattr(event, "unicode", "")
        if len(char) == 1 and "a" <= char <= "z":
            index = ord(char) - ord("a")
            if index < len(self.options) and self.on_choose is not None:
                return [CloseModal(), self.on_choose(index)]

        # Anything else: close if allowed, otherwise keep asking
        if self.cancellable:
            return [CloseModal()]
        return []

    def draw(self, surface: pygame.Surface, app) -> None:
        draw_overlay(surface)
        rect = panel_rect(surface, self.width, len(self.options), len(self.header_lines))
        draw_panel(surface, rect)

        x = rect.x + 8
        y = rect.y + 8
        for line in self.header_lines:
            app.draw_text(surface, line, x, y, (255, 255, 255), font=app.font_sm)
            y += ROW_H
        for index, text in enumerate(self.options):
            draw_menu_row(surface, app, x, y, index, text)
            y += ROW_H


# ── Factories ───────────────────────────────────────────────────────

def _item_label(item) -> str:
    eq = item.equipment
    if eq is not None and eq.equipped:
        return f"{item.name} (on {eq.slot})"
    return item.name


def inventory_menu(inventory, header: str, on_choose) -> MenuModal:
    options = [_item_label(item) for item in inventory] or ["Inventory is empty."]
    if not inventory:
        on_choose = None
    return MenuModal(header, options, INVENTORY_WIDTH, on_choose)


def use_menu(inventory) -> MenuModal:
    return inventory_menu(
        inventory,
        "Press the key next to an item to use it, or any other to cancel.",
        UseItem,
    )


def drop_menu(inventory) -> MenuModal:
    return inventory_menu(
        inventory,
        "Press the key next to an item to drop it, or any other to cancel.",
        DropItem,
    )


def level_up_menu(options: Sequence[str]) -> MenuModal:
    """Must be answered: no way out except picking a stat."""
    return MenuModal(
        "Level up! Choose a stat to raise:",
        options, LEVEL_SCREEN_WIDTH, ChooseStat, cancellable=False,
    )


def message_box(text: str, width: int = CHARACTER_SCREEN_WIDTH) -> MenuModal:
    return MenuModal(text, [], width)
