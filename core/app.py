"""
core/app.py — Pygame application shell

Handles the window, main loop, and scene stack.
Game screens are Scenes; push and pop them.

    app = App(title="Tombs of the Ancient Kings")
    app.push_scene(MainMenuScene())
    app.run()

The window is a fixed grid of SCREEN_WIDTH × SCREEN_HEIGHT character
cells.  Everything draws to that virtual surface, which is scaled to
the real window.
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.constants import SCREEN_WIDTH, SCREEN_HEIGHT, TILE_SIZE, LIMIT_FPS


class App:
    def __init__(self, title: str = "Tombs of the Ancient Kings",
                 width: int = SCREEN_WIDTH * TILE_SIZE,
                 height: int = SCREEN_HEIGHT * TILE_SIZE):
        pygame.init()
        self._windowed_size = (width, height)
        # The virtual (design) resolution. All game rendering targets this.
        self._virtual_size = (width, height)
        self._render_surface = pygame.Surface((width, height))
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.running = True
        self.fullscreen = False
        self.fps = LIMIT_FPS
        self.dt = 0.0

        # Scene stack: only the top scene is active
        self._scenes: list[Scene] = []

        # One cell of the character grid per glyph
        self.font = pygame.font.SysFont("monospace", TILE_SIZE, bold=True)
        self.font_sm = pygame.font.SysFont("monospace", TILE_SIZE - 1)
        self.font_lg = pygame.font.SysFont("monospace", TILE_SIZE + 6, bold=True)

    # -- Scene management --

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def push_scene(self, scene: Scene):
        if self._scenes:
            self._scenes[-1].on_exit(self)
        self._scenes.append(scene)
        scene.on_enter(self)

    def pop_scene(self):
        if self._scenes:
            self._scenes[-1].on_exit(self)
            self._scenes.pop()
        if self._scenes:
            self._scenes[-1].on_enter(self)
        else:
            self.running = False

    # -- Coordinate mapping --

    def _remap_mouse_event(self, event: pygame.event.Event) -> pygame.event.Event:
        """Return a copy of *event* with .pos mapped to virtual coords."""
        if not hasattr(event, "pos"):
            return event
        sw, sh = self.screen.get_size()
        vw, vh = self._virtual_size
        attrs: dict = {}
        for attr in ("button", "buttons", "rel", "touch", "window"):
            if hasattr(event, attr):
                attrs[attr] = getattr(event, attr)
        attrs["pos"] = (int(event.pos[0] * vw / sw), int(event.pos[1] * vh / sh))
        return pygame.event.Event(event.type, **attrs)

    # -- Main loop --

    def run(self):
        while self.running:
            self.dt = self.clock.tick(self.fps) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    # Let the scene save before the window goes away
                    if self.scene:
                        self.scene.handle_event(event, self)
                    self.running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                    self.toggle_fullscreen()
                elif event.type == pygame.VIDEORESIZE and not self.fullscreen:
                    self._windowed_size = (event.w, event.h)
                    self.screen = pygame.display.set_mode(
                        (event.w, event.h), pygame.RESIZABLE)
                elif self.scene:
                    if event.type in (pygame.MOUSEBUTTONDOWN,
                                      pygame.MOUSEBUTTONUP,
                                      pygame.MOUSEMOTION):
                        event = self._remap_mouse_event(event)
                    self.scene.handle_event(event, self)

            if self.scene:
                self.scene.update(self.dt, self)

            if self.scene:
                self._render_surface.fill((0, 0, 0))
                self.scene.draw(self._render_surface, self)

            pygame.transform.scale(self._render_surface,
                                   self.screen.get_size(), self.screen)
            pygame.display.flip()

        pygame.quit()

    def toggle_fullscreen(self):
        """Switch between windowed and fullscreen (F11)."""
        self.fullscreen = not self.fullscreen
        if self.fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode(
                self._windowed_size, pygame.RESIZABLE)

    # -- Convenience --

    def draw_text(self, surface: pygame.Surface, text: str, x: int, y: int,
                  color=(255, 255, 255), font=None):
        """Quick text draw. Returns the rect for layout chaining."""
        f = font or self.font
        img = f.render(text, True, color)
        return surface.blit(img, (x, y))

    def draw_cell(self, surface: pygame.Surface, char: str, cx: int, cy: int,
                  color=(255, 255, 255), bg=None):
        """Draw one glyph centred in character cell ``(cx, cy)``."""
        x, y = cx * TILE_SIZE, cy * TILE_SIZE
        if bg is not None:
            surface.fill(bg, (x, y, TILE_SIZE, TILE_SIZE))
        if char and char != " ":
            img = self.font.render(char, True, color)
            w, h = img.get_size()
            surface.blit(img, (x + (TILE_SIZE - w) // 2, y + (TILE_SIZE - h) // 2))
