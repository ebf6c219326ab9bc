"""
scenes/main_menu_scene.py — Title screen

(a) new game, (b) continue the saved game, (c) quit.  The dungeon is
pushed on top of this scene, so leaving the dungeon comes back here.
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.app import App
from core.constants import LIGHT_YELLOW, WHITE
from core.save import load_game
from logic.actions import new_game
from ui import ModalStack, CloseModal, message_box
from ui.helpers import draw_menu_row, ROW_H
from scenes.dungeon_scene import DungeonScene

TITLE = "TOMBS OF THE ANCIENT KINGS"
OPTIONS = ["Play a new game", "Continue last game", "Quit"]


class MainMenuScene(Scene):
    def __init__(self):
        self.modals = ModalStack()

    def handle_event(self, event: pygame.event.Event, app: App):
        if self.modals.is_open:
            for cmd in self.modals.handle_event(event):
                if isinstance(cmd, CloseModal):
                    self.modals.pop()
            return
        if event.type != pygame.KEYDOWN:
            return

        char = getattr(event, "unicode", "")
        if char == "a":
            entities, game = new_game()
            app.push_scene(DungeonScene(entities, game))
        elif char == "b":
            loaded = load_game()
            if loaded is None:
                self.modals.push(message_box("No saved game to load.", 24))
                return
            entities, game = loaded
            app.push_scene(DungeonScene(entities, game))
        elif char == "c" or event.key == pygame.K_ESCAPE:
            app.running = False

    def draw(self, surface: pygame.Surface, app: App):
        sw, sh = surface.get_size()
        title = app.font_lg.render(TITLE, True, LIGHT_YELLOW)
        surface.blit(title, ((sw - title.get_width()) // 2, sh // 2 - 4 * ROW_H))
        x = sw // 2 - 9 * ROW_H // 2
        y = sh // 2 - ROW_H
        for index, text in enumerate(OPTIONS):
            draw_menu_row(surface, app, x, y, index, text, WHITE)
            y += ROW_H
        self.modals.draw(surface, app)
