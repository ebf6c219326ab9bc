"""logic/input_manager.py — Intent-based input layer.

Sits between raw pygame events and game actions.  The scene feeds in
raw events; the manager maps them to *intents* based on the current
**input context** (gameplay or targeting).  Lettered menus read their
own keys through the modal stack.

Other systems read the intents — they never touch raw keycodes.

Usage (in dungeon_scene):

    self.input = InputManager()
    # each frame:
    self.input.begin_frame()
    for event in events:
        self.input.feed(event)

    if self.input.just("pickup"):   # discrete press
        ...
    step = self.input.step()        # → (dx, dy) or None
"""

from __future__ import annotations
from enum import Enum, auto
import pygame

from core.constants import TILE_SIZE


# ── Input contexts ──────────────────────────────────────────────────

class InputContext(Enum):
    """Determines which key-bindings are active."""
    GAMEPLAY  = auto()   # walking around the dungeon
    TARGETING = auto()   # picking a tile for a scroll


# ── Intent names (strings for flexibility, not an enum) ─────────────
# Gameplay:  move_n move_s move_w move_e move_nw move_ne move_sw move_se
#            wait  pickup  inventory  drop  stairs  character  cancel
# Targeting: target  cancel
#
# A binding is a pygame key constant, or a one-character string that
# is matched against the typed character (so '>' works on any layout).
# Mouse buttons use negative constants: -1 = LMB, -3 = RMB.

_GAMEPLAY_BINDS: dict[str, list[int | str]] = {
    "move_n":     [pygame.K_UP, pygame.K_KP8, "k"],
    "move_s":     [pygame.K_DOWN, pygame.K_KP2, "j"],
    "move_w":     [pygame.K_LEFT, pygame.K_KP4, "h"],
    "move_e":     [pygame.K_RIGHT, pygame.K_KP6, "l"],
    "move_nw":    [pygame.K_HOME, pygame.K_KP7, "y"],
    "move_ne":    [pygame.K_PAGEUP, pygame.K_KP9, "u"],
    "move_sw":    [pygame.K_END, pygame.K_KP1, "b"],
    "move_se":    [pygame.K_PAGEDOWN, pygame.K_KP3, "n"],
    "wait":       [pygame.K_KP5, "."],
    "pickup":     ["g", ","],
    "inventory":  ["i"],
    "drop":       ["d"],
    "stairs":     [">"],
    "character":  ["c"],
    "cancel":     [pygame.K_ESCAPE],
}

_TARGETING_BINDS: dict[str, list[int | str]] = {
    "target":     [-1, pygame.K_RETURN],
    "cancel":     [-3, pygame.K_ESCAPE],
}

_STEPS: dict[str, tuple[int, int]] = {
    "move_n":  (0, -1), "move_s":  (0, 1),
    "move_w":  (-1, 0), "move_e":  (1, 0),
    "move_nw": (-1, -1), "move_ne": (1, -1),
    "move_sw": (-1, 1), "move_se": (1, 1),
    "wait":    (0, 0),
}


# ── InputManager ────────────────────────────────────────────────────

class InputManager:
    """Context-aware input mapper.

    Call ``begin_frame()`` before processing events and ``feed(event)``
    for each pygame event.  Then use ``just(intent)`` for presses.
    Turn-based play has no held keys: one press is one action.
    """

    def __init__(self):
        self.context: InputContext = InputContext.GAMEPLAY
        # Intents pressed *this frame*
        self._pressed: set[str] = set()
        # Tile under the mouse, in map coordinates
        self.mouse_tile: tuple[int, int] = (0, 0)

    # ── frame lifecycle ─────────────────────────────────────────

    def begin_frame(self):
        """Call at the start of each frame before feeding events."""
        self._pressed.clear()

    def feed(self, event: pygame.event.Event):
        """Feed a raw pygame event.  Maps it to intents based on context."""
        if event.type == pygame.MOUSEMOTION:
            self.mouse_tile = (event.pos[0] // TILE_SIZE, event.pos[1] // TILE_SIZE)

        elif event.type == pygame.KEYDOWN:
            char = getattr(event, "unicode", "")
            for intent, binds in self._active_binds().items():
                for bind in binds:
                    if (isinstance(bind, str) and bind == char) or bind == event.key:
                        self._pressed.add(intent)
                        break

        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.mouse_tile = (event.pos[0] // TILE_SIZE, event.pos[1] // TILE_SIZE)
            neg_button = -event.button  # -1 for LMB, -3 for RMB
            for intent, binds in self._active_binds().items():
                if neg_button in binds:
                    self._pressed.add(intent)

    # ── queries ─────────────────────────────────────────────────

    def just(self, intent: str) -> bool:
        """True if the intent was triggered this frame."""
        return intent in self._pressed

    def step(self) -> tuple[int, int] | None:
        """The movement step pressed this frame; ``(0, 0)`` means wait."""
        for intent, delta in _STEPS.items():
            if intent in self._pressed:
                return delta
        return None

    # ── internal ────────────────────────────────────────────────

    def _active_binds(self) -> dict[str, list[int | str]]:
        if self.context == InputContext.TARGETING:
            return _TARGETING_BINDS
        return _GAMEPLAY_BINDS
