"""logic/actions/player.py — Turn-level player actions.

Each function returns True when the action used up the player's turn
(the monsters then get to act) and False for free actions and soft
failures.
"""

from __future__ import annotations
import random
from typing import Any

from core.constants import PLAYER, WHITE, RED, VIOLET
from core.tilemap import Map
from components import Entity, GameState
from logic.combat import attack, heal, max_hp
from logic.dungeon import make_map
from logic.entity_factory import make_player, make_starting_dagger
from logic.inventory_ops import pick_item_up
from logic.movement import move_by, pair


def fighter_at(x: int, y: int, entities: list[Entity]) -> int | None:
    """Index of a living non-player fighter standing on ``(x, y)``."""
    for idx, e in enumerate(entities):
        if idx != PLAYER and e.fighter is not None and e.pos() == (x, y):
            return idx
    return None


def player_move_or_attack(dx: int, dy: int, entities: list[Entity], game: GameState) -> bool:
    """Bump-to-attack: hit whatever fighter is in the way, otherwise step.

    A step into a wall still spends the turn.
    """
    player = entities[PLAYER]
    target_id = fighter_at(player.x + dx, player.y + dy, entities)
    if target_id is not None:
        attacker, target = pair(entities, PLAYER, target_id)
        attack(attacker, target, game)
    else:
        move_by(PLAYER, dx, dy, game.map, entities)
    return True


def pick_up_at_feet(entities: list[Entity], game: GameState) -> bool:
    player = entities[PLAYER]
    for idx, e in enumerate(entities):
        if idx != PLAYER and e.item is not None and e.pos() == player.pos():
            return pick_item_up(idx, entities, game)
    game.log.add("There is nothing here to pick up.", WHITE)
    return False


def on_stairs(entities: list[Entity]) -> bool:
    player = entities[PLAYER]
    return any(e.stairs and e.pos() == player.pos()
               for idx, e in enumerate(entities) if idx != PLAYER)


def next_level(entities: list[Entity], game: GameState, rng: Any = random) -> Map:
    """Rest, then go one level deeper on a freshly generated map."""
    game.log.add("You take a moment to rest, and recover your strength.", VIOLET)
    player = entities[PLAYER]
    heal(player, max_hp(player, game) // 2, game)
    game.log.add(
        "After a rare moment of peace, you descend deeper into "
        "the heart of the dungeon...",
        RED,
    )
    game.descend()
    game.map = make_map(entities, game.dungeon_level, rng)
    return game.map


def take_stairs(entities: list[Entity], game: GameState, rng: Any = random) -> bool:
    """Descend if standing on the stairs.  Returns True if the level changed.

    Arriving on a new level is free: the new monsters do not get a turn.
    """
    if not on_stairs(entities):
        game.log.add("There are no stairs here.", WHITE)
        return False
    next_level(entities, game, rng)
    return True


def new_game(rng: Any = random) -> tuple[list[Entity], GameState]:
    """A fresh character on a fresh depth-1 level."""
    entities = [make_player()]
    game = GameState(map=make_map(entities, 1, rng))
    game.inventory.append(make_starting_dagger())
    game.log.add(
        "Welcome stranger! Prepare to perish in the Tombs of the Ancient Kings.",
        WHITE,
    )
    return entities, game
