"""logic/actions/items.py — Using things from the inventory.

Each item kind maps to one ``cast_*`` handler that reports back with a
``UseResult``.  Consumables that took effect are removed from the bag;
equipment stays and just toggles.

Items that need a tile (confusion, fireball) take it as ``target``.
The scene asks ``needs_target(kind)`` first, lets the player pick a
tile, and passes ``None`` if they backed out.
"""

from __future__ import annotations
from enum import Enum
from typing import Callable, Sequence

from core.constants import (
    PLAYER, HEAL_AMOUNT, LIGHTNING_DAMAGE, LIGHTNING_RANGE,
    CONFUSE_RANGE, CONFUSE_NUM_TURNS, FIREBALL_RADIUS, FIREBALL_DAMAGE,
    WHITE, RED, ORANGE, LIGHT_GREEN, LIGHT_BLUE, LIGHT_VIOLET,
)
from core.tuning import get as _tun
from components import Entity, GameState, ItemKind, ConfusedAi, BasicAi
from logic.combat import take_damage, heal, max_hp
from logic.inventory_ops import toggle_equipment

Visible = Callable[[int, int], bool]
Target = tuple[int, int] | None


class UseResult(Enum):
    USED_UP = "used_up"
    USED_AND_KEPT = "used_and_kept"
    CANCELLED = "cancelled"


# ── Targeting helpers ────────────────────────────────────────────────

def closest_monster(max_range: float, entities: Sequence[Entity],
                    visible: Visible) -> int | None:
    """Index of the nearest visible monster within *max_range*, or ``None``."""
    player = entities[PLAYER]
    closest, closest_dist = None, max_range + 1
    for idx, e in enumerate(entities):
        if idx == PLAYER or e.fighter is None or e.ai is None:
            continue
        if not visible(e.x, e.y):
            continue
        dist = player.distance_to(e)
        if dist < closest_dist:
            closest, closest_dist = idx, dist
    return closest


def monster_at(x: int, y: int, entities: Sequence[Entity]) -> int | None:
    for idx, e in enumerate(entities):
        if idx != PLAYER and e.fighter is not None and e.pos() == (x, y):
            return idx
    return None


def needs_target(kind: ItemKind | None) -> tuple[bool, float | None]:
    """``(needs_a_tile, max_range)`` for an item kind.

    ``max_range`` is ``None`` when any visible tile will do.
    """
    if kind is ItemKind.CONFUSE:
        return True, _tun("items.confuse", "range", CONFUSE_RANGE)
    if kind is ItemKind.FIREBALL:
        return True, None
    return False, None


def target_valid(target: Target, entities: Sequence[Entity], visible: Visible,
                 max_range: float | None) -> bool:
    """A tile target must be in view and, if limited, within range."""
    if target is None:
        return False
    x, y = target
    if not visible(x, y):
        return False
    return max_range is None or entities[PLAYER].distance(x, y) <= max_range


# ── Effects ──────────────────────────────────────────────────────────

def cast_heal(inventory_id, entities, game, visible, target) -> UseResult:
    player = entities[PLAYER]
    if player.fighter is None:
        return UseResult.CANCELLED
    if player.fighter.hp >= max_hp(player, game):
        game.log.add("You are already at full health.", RED)
        return UseResult.CANCELLED
    game.log.add("Your wounds start to feel better!", LIGHT_VIOLET)
    heal(player, _tun("items.heal", "amount", HEAL_AMOUNT), game)
    return UseResult.USED_UP


def cast_lightning(inventory_id, entities, game, visible, target) -> UseResult:
    rng = _tun("items.lightning", "range", LIGHTNING_RANGE)
    damage = _tun("items.lightning", "damage", LIGHTNING_DAMAGE)
    monster_id = closest_monster(rng, entities, visible)
    if monster_id is None:
        game.log.add("No enemy is close enough to strike.", RED)
        return UseResult.CANCELLED

    monster = entities[monster_id]
    game.log.add(
        f"A lightning bolt strikes the {monster.name} with a loud thunder! "
        f"The damage is {damage} hit points.",
        LIGHT_BLUE,
    )
    xp = take_damage(monster, damage, game)
    if xp is not None:
        entities[PLAYER].fighter.xp += xp
    return UseResult.USED_UP


def cast_confuse(inventory_id, entities, game, visible, target) -> UseResult:
    _, max_range = needs_target(ItemKind.CONFUSE)
    if not target_valid(target, entities, visible, max_range):
        return UseResult.CANCELLED

    monster_id = monster_at(*target, entities)
    if monster_id is None:
        game.log.add("No enemy is close enough to strike.", RED)
        return UseResult.CANCELLED

    monster = entities[monster_id]
    monster.ai = ConfusedAi(
        previous_ai=monster.ai if monster.ai is not None else BasicAi(),
        num_turns=_tun("items.confuse", "turns", CONFUSE_NUM_TURNS),
    )
    game.log.add(
        f"The eyes of the {monster.name} look vacant, as it starts to stumble around!",
        LIGHT_GREEN,
    )
    return UseResult.USED_UP


def cast_fireball(inventory_id, entities, game, visible, target) -> UseResult:
    if not target_valid(target, entities, visible, None):
        return UseResult.CANCELLED

    x, y = target
    radius = _tun("items.fireball", "radius", FIREBALL_RADIUS)
    damage = _tun("items.fireball", "damage", FIREBALL_DAMAGE)
    game.log.add(
        f"The fireball explodes, burning everything within {radius} tiles!", ORANGE)

    xp_gained = 0
    for idx, e in enumerate(entities):
        if e.fighter is None or e.distance(x, y) > radius:
            continue
        game.log.add(f"The {e.name} gets burned for {damage} hit points.", ORANGE)
        xp = take_damage(e, damage, game)
        if xp is not None and idx != PLAYER:
            xp_gained += xp

    player = entities[PLAYER]
    if player.fighter is not None:
        player.fighter.xp += xp_gained
    return UseResult.USED_UP


def cast_toggle_equipment(inventory_id, entities, game, visible, target) -> UseResult:
    if game.inventory[inventory_id].equipment is None:
        return UseResult.CANCELLED
    toggle_equipment(inventory_id, game)
    return UseResult.USED_AND_KEPT


_ON_USE: dict[ItemKind, Callable[..., UseResult]] = {
    ItemKind.HEAL:      cast_heal,
    ItemKind.LIGHTNING: cast_lightning,
    ItemKind.CONFUSE:   cast_confuse,
    ItemKind.FIREBALL:  cast_fireball,
    ItemKind.SWORD:     cast_toggle_equipment,
    ItemKind.SHIELD:    cast_toggle_equipment,
    ItemKind.DAGGER:    cast_toggle_equipment,
}


# ── Public entry point ───────────────────────────────────────────────

def use_item(inventory_id: int, entities: list[Entity], game: GameState,
             visible: Visible, target: Target = None) -> UseResult:
    """Use inventory item *inventory_id*.

    ``USED_UP`` removes the item from the inventory; ``CANCELLED`` logs
    "Cancelled" and leaves everything as it was.
    """
    item = game.inventory[inventory_id]
    on_use = _ON_USE.get(item.item) if item.item is not None else None
    if on_use is None:
        game.log.add(f"The {item.name} cannot be used.", WHITE)
        return UseResult.CANCELLED

    result = on_use(inventory_id, entities, game, visible, target)
    if result is UseResult.USED_UP:
        game.inventory.pop(inventory_id)
    elif result is UseResult.CANCELLED:
        game.log.add("Cancelled", WHITE)
    return result
