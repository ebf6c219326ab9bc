"""logic/inventory_ops.py — Canonical inventory and equipment operations.

Items move between exactly two owned collections: the active entity
list (on the ground) and ``game.inventory`` (carried).  Each transfer
removes from one list and appends to the other in the same call, and
an item is dequipped before it leaves the inventory, so an equipped
item is never on the ground.

Public API
----------
``get_equipped_in_slot``  — inventory index of the item worn in a slot
``equip`` / ``dequip``    — flip one item's equipped flag (with log)
``equip_item``            — equip by inventory index, swapping the slot
``toggle_equipment``      — equip if unworn, dequip if worn
``pick_item_up``          — ground → inventory (auto-equip empty slot)
``drop_item``             — inventory → ground at the player's feet
"""

from __future__ import annotations
from typing import Sequence

from core.constants import (
    PLAYER, INVENTORY_CAPACITY,
    RED, GREEN, YELLOW, LIGHT_GREEN, LIGHT_YELLOW,
)
from core.messages import MessageLog
from components import Entity, GameState, Slot


def get_equipped_in_slot(slot: Slot, inventory: Sequence[Entity]) -> int | None:
    """Return the inventory index of the item equipped in *slot*, if any."""
    for idx, item in enumerate(inventory):
        eq = item.equipment
        if eq is not None and eq.equipped and eq.slot is slot:
            return idx
    return None


# ── Single-item flag changes ─────────────────────────────────────────

def equip(item: Entity, log: MessageLog) -> bool:
    """Mark *item* as equipped.  Logs and returns False if it can't be."""
    if item.item is None:
        log.add(f"Can't equip {item.name} because it's not an Item.", RED)
        return False
    eq = item.equipment
    if eq is None:
        log.add(f"Can't equip {item.name} because it's not an Equipment.", RED)
        return False
    if not eq.equipped:
        eq.equipped = True
        log.add(f"Equipped {item.name} on {eq.slot}.", LIGHT_GREEN)
    return True


def dequip(item: Entity, log: MessageLog) -> bool:
    """Mark *item* as not equipped.  Logs and returns False if it can't be."""
    if item.item is None:
        log.add(f"Can't dequip {item.name} because it's not an Item.", RED)
        return False
    eq = item.equipment
    if eq is None:
        log.add(f"Can't dequip {item.name} because it's not an Equipment.", RED)
        return False
    if eq.equipped:
        eq.equipped = False
        log.add(f"Dequipped {item.name} from {eq.slot}.", LIGHT_YELLOW)
    return True


# ── Slot rules ───────────────────────────────────────────────────────

def equip_item(inventory_id: int, game: GameState) -> bool:
    """Equip inventory item *inventory_id*, first removing whatever
    already occupies its slot.  At no point are both flagged equipped.
    """
    item = game.inventory[inventory_id]
    eq = item.equipment
    if item.item is None or eq is None:
        return equip(item, game.log)

    current = get_equipped_in_slot(eq.slot, game.inventory)
    if current is not None and current != inventory_id:
        dequip(game.inventory[current], game.log)
    return equip(item, game.log)


def dequip_item(inventory_id: int, game: GameState) -> bool:
    return dequip(game.inventory[inventory_id], game.log)


def toggle_equipment(inventory_id: int, game: GameState) -> bool:
    item = game.inventory[inventory_id]
    if item.equipment is not None and item.equipment.equipped:
        return dequip_item(inventory_id, game)
    return equip_item(inventory_id, game)


# ── Transfers between collections ────────────────────────────────────

def pick_item_up(object_id: int, entities: list[Entity], game: GameState) -> bool:
    """Move ``entities[object_id]`` into the inventory.

    A full inventory leaves the item where it is.  Wearables that fit
    an empty slot are equipped straight away.
    """
    if object_id == PLAYER:
        raise ValueError("the player cannot pick itself up")
    if len(game.inventory) >= INVENTORY_CAPACITY:
        game.log.add(
            f"Your inventory is full, cannot pick up {entities[object_id].name}.", RED)
        return False

    item = entities.pop(object_id)
    game.inventory.append(item)
    game.log.add(f"You picked up a {item.name}!", GREEN)

    eq = item.equipment
    if eq is not None and not eq.equipped:
        if get_equipped_in_slot(eq.slot, game.inventory) is None:
            equip(item, game.log)
    return True


def drop_item(inventory_id: int, game: GameState, entities: list[Entity]) -> Entity:
    """Move inventory item *inventory_id* onto the player's tile."""
    item = game.inventory[inventory_id]
    if item.equipment is not None and item.equipment.equipped:
        dequip(item, game.log)
    game.inventory.pop(inventory_id)

    player = entities[PLAYER]
    item.set_pos(player.x, player.y)
    entities.append(item)
    game.log.add(f"You dropped a {item.name}.", YELLOW)
    return item
