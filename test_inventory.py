"""test_inventory.py — Pick up, drop, and equipment slot rules.

Run:  python test_inventory.py      (or collect with pytest)
"""
from __future__ import annotations
import sys, tempfile, traceback
from pathlib import Path

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

from core.constants import INVENTORY_CAPACITY
from core.tilemap import Rect, new_map
from components import GameState, ItemKind, Slot
from logic.actions import pick_up_at_feet
from logic.dungeon import create_room
from logic.entity_factory import make_player, make_item, make_starting_dagger
from ui.menu_modal import use_menu
from logic.inventory_ops import (
    equip, dequip, equip_item, toggle_equipment, get_equipped_in_slot,
    pick_item_up, drop_item,
)

import core.tuning as _tuning
_tuning.reset()


def _setup():
    tiles = new_map(10, 10)
    create_room(Rect(0, 0, 9, 9), tiles)
    return [make_player(4, 4)], GameState(map=tiles)


# ═══════════════════════════════════════════════════════════════════
#  Slots
# ═══════════════════════════════════════════════════════════════════

def test_equipping_into_taken_slot_dequips_the_old_item_first():
    entities, game = _setup()
    dagger = make_starting_dagger()           # left hand, equipped
    shield = make_item(0, 0, ItemKind.SHIELD) # left hand
    game.inventory += [dagger, shield]

    equip_item(1, game)
    assert shield.equipment.equipped is True
    assert dagger.equipment.equipped is False
    texts = [t for t, _ in game.log]
    assert texts.index("Dequipped dagger from left hand.") < texts.index("Equipped shield on left hand.")
    assert get_equipped_in_slot(Slot.LEFT_HAND, game.inventory) == 1


def test_different_slots_are_independent():
    entities, game = _setup()
    dagger = make_starting_dagger()
    sword = make_item(0, 0, ItemKind.SWORD)
    game.inventory += [dagger, sword]
    equip_item(1, game)
    assert dagger.equipment.equipped and sword.equipment.equipped


def test_toggle_round_trip():
    entities, game = _setup()
    game.inventory.append(make_starting_dagger())
    toggle_equipment(0, game)
    assert not game.inventory[0].equipment.equipped
    toggle_equipment(0, game)
    assert game.inventory[0].equipment.equipped


def test_equip_rejects_non_equipment():
    entities, game = _setup()
    potion = make_item(0, 0, ItemKind.HEAL)
    assert equip(potion, game.log) is False
    assert game.log.last_text() == "Can't equip healing potion because it's not an Equipment."
    assert dequip(entities[0], game.log) is False
    assert game.log.last_text() == "Can't dequip player because it's not an Item."


# ═══════════════════════════════════════════════════════════════════
#  Pick up / drop
# ═══════════════════════════════════════════════════════════════════

def test_pick_up_moves_item_between_collections():
    entities, game = _setup()
    potion = make_item(4, 4, ItemKind.HEAL)
    entities.append(potion)
    assert pick_up_at_feet(entities, game)
    assert potion not in entities
    assert game.inventory == [potion]
    assert game.log.last_text() == "You picked up a healing potion!"


def test_pick_up_auto_equips_into_free_slot_only():
    entities, game = _setup()
    game.inventory.append(make_starting_dagger())
    sword = make_item(4, 4, ItemKind.SWORD)
    shield = make_item(4, 4, ItemKind.SHIELD)
    entities += [sword, shield]
    pick_item_up(1, entities, game)
    pick_item_up(1, entities, game)
    assert sword.equipment.equipped, "right hand was free"
    assert not shield.equipment.equipped, "left hand holds the dagger"


def test_full_inventory_rejects_the_next_item():
    entities, game = _setup()
    game.inventory += [make_item(0, 0, ItemKind.HEAL) for _ in range(INVENTORY_CAPACITY)]
    extra = make_item(4, 4, ItemKind.HEAL)
    entities.append(extra)
    assert pick_item_up(1, entities, game) is False
    assert len(game.inventory) == INVENTORY_CAPACITY
    assert entities[1] is extra
    assert game.log.last_text() == "Your inventory is full, cannot pick up healing potion."


def test_capacity_ignores_tuning_file():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "tuning.toml"
        path.write_text("[inventory]\ncapacity = 30\n")
        _tuning.load(path)
        try:
            entities, game = _setup()
            for _ in range(INVENTORY_CAPACITY + 1):
                entities.append(make_item(4, 4, ItemKind.HEAL))
            results = [pick_item_up(1, entities, game) for _ in range(INVENTORY_CAPACITY + 1)]
        finally:
            _tuning.reset()
    assert results[:INVENTORY_CAPACITY] == [True] * INVENTORY_CAPACITY
    assert results[-1] is False
    assert len(game.inventory) == 26
    assert len(entities) == 2
    menu = use_menu(game.inventory)
    assert len(menu.options) == 26


def test_nothing_to_pick_up():
    entities, game = _setup()
    entities.append(make_item(1, 1, ItemKind.HEAL))
    assert pick_up_at_feet(entities, game) is False
    assert game.log.last_text() == "There is nothing here to pick up."


def test_dropping_worn_item_takes_it_off():
    entities, game = _setup()
    game.inventory.append(make_starting_dagger())
    dagger = drop_item(0, game, entities)
    assert dagger.equipment.equipped is False
    assert game.inventory == []
    assert entities[-1] is dagger
    assert dagger.pos() == entities[0].pos()
    assert game.log.last_text() == "You dropped a dagger."


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
    print(f" Inventory Tests: {passed}/{total} passed")
    if failed:
        print(f" {failed} FAILED")
    print(f"{'='*50}")
    sys.exit(0 if failed == 0 else 1)
