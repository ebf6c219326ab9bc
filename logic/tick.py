"""logic/tick.py — Turn orchestration.

One game turn is: the player acts, then (if that action consumed the
turn) every other entity with an AI acts once, in entity-list order.
The scene owns input and rendering; everything it needs to advance the
simulation by a turn lives here.

Usage::

    from logic.tick import ai_pass, end_player_turn
"""

from __future__ import annotations
from typing import Callable, Sequence

from core.constants import PLAYER
from components import Entity, GameState
from logic.brains import take_turn


def ai_pass(entities: list[Entity], game: GameState,
            visible: Callable[[int, int], bool], rng=None) -> int:
    """Give every non-player entity with an AI one turn.

    Entities are visited by index.  Indices are stable during the pass
    because death converts in place rather than removing.  Returns the
    number of entities that acted.
    """
    acted = 0
    for idx in range(len(entities)):
        if idx == PLAYER:
            continue
        if take_turn(idx, game.map, entities, game, visible, rng):
            acted += 1
    return acted


def player_dead(entities: Sequence[Entity]) -> bool:
    player = entities[PLAYER]
    return player.fighter is None or player.fighter.hp <= 0


def end_player_turn(entities: list[Entity], game: GameState,
                    visible: Callable[[int, int], bool], rng=None) -> bool:
    """Let the monsters answer a turn-taking player action.

    Returns True if the player is still alive afterwards.
    """
    if player_dead(entities):
        return False
    ai_pass(entities, game, visible, rng)
    return not player_dead(entities)
