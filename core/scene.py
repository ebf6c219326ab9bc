"""
core/scene.py — Scene interface

Every screen in the game (main menu, the dungeon itself) is a Scene.
The app holds a stack of them; only the top scene gets events,
update and draw calls.

    class MyScene(Scene):
        def on_enter(self, app):
            # setup, called when scene becomes active
            pass

        def handle_event(self, event, app):
            # pygame event
            pass

        def update(self, dt, app):
            # dt is seconds since last frame; turn-based scenes
            # usually do nothing here
            pass

        def draw(self, surface, app):
            # draw to the virtual surface
            pass
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    def on_enter(self, app: App):
        """Called when this scene becomes active (pushed or revealed)."""

    def on_exit(self, app: App):
        """Called when this scene is removed or covered."""

    def handle_event(self, event: pygame.event.Event, app: App):
        """Process a single pygame event."""

    def update(self, dt: float, app: App):
        """Advance real-time effects.  The simulation itself is turn-driven."""

    def draw(self, surface: pygame.Surface, app: App):
        """Draw to the screen surface."""
