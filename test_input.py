"""test_input.py — Key and mouse events mapped to intents.

Run:  python test_input.py      (or collect with pytest)
"""
from __future__ import annotations
import sys, traceback

# ── Test framework ──────────────────────────────────────────────────

passed = 0
failed = 0


def ok(label: str):
    global passed
    passed += 1
    print(f"  [PASS] {label}")


def fail(label: str, detail: str = ""):
    global failed
    failed += 1
    print(f"  [FAIL] {label}")
    if detail:
        for line in detail.strip().splitlines():
            print(f"         {line}")


# ── Imports ──────────────────────────────────────────────────────────

import pygame

from core.constants import TILE_SIZE
from logic.input_manager import InputManager, InputContext


def _key(key: int, char: str = "") -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key, unicode=char, mod=0)


def _click(button: int, tile: tuple[int, int]) -> pygame.event.Event:
    pos = (tile[0] * TILE_SIZE + 1, tile[1] * TILE_SIZE + 1)
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos)


def _frame(im: InputManager, *events) -> InputManager:
    im.begin_frame()
    for e in events:
        im.feed(e)
    return im


# ═══════════════════════════════════════════════════════════════════
#  Gameplay
# ═══════════════════════════════════════════════════════════════════

def test_vi_keys_and_arrows_give_the_same_step():
    im = InputManager()
    assert _frame(im, _key(pygame.K_y, "y")).step() == (-1, -1)
    assert _frame(im, _key(pygame.K_RIGHT)).step() == (1, 0)
    assert _frame(im, _key(pygame.K_PERIOD, ".")).step() == (0, 0)


def test_typed_character_binds():
    im = _frame(InputManager(), _key(pygame.K_PERIOD, ">"))
    assert im.just("stairs")
    assert im.step() is None


def test_presses_last_one_frame():
    im = _frame(InputManager(), _key(pygame.K_g, "g"))
    assert im.just("pickup")
    _frame(im)
    assert not im.just("pickup")


# ═══════════════════════════════════════════════════════════════════
#  Targeting
# ═══════════════════════════════════════════════════════════════════

def test_targeting_uses_mouse_buttons_and_ignores_movement():
    im = InputManager()
    im.context = InputContext.TARGETING
    _frame(im, _click(1, (7, 4)))
    assert im.just("target")
    assert im.mouse_tile == (7, 4)
    _frame(im, _key(pygame.K_UP))
    assert im.step() is None
    _frame(im, _click(3, (1, 1)))
    assert im.just("cancel")


# ── Runner ───────────────────────────────────────────────────────────

if __name__ == "__main__":
    for _name, _fn in list(globals().items()):
        if _name.startswith("test_") and callable(_fn):
            try:
                _fn()
                ok(_name)
            except Exception:
                fail(_name, traceback.format_exc())

    total = passed + failed
    print(f"\n{'='*50}")
    print(f" Input Tests: {passed}/{total} passed")
    if failed:
        print(f" {failed} FAILED")
    print(f"{'='*50}")
    sys.exit(0 if failed == 0 else 1)
