"""logic/brains/basic.py — Chase-and-melee brain.

A basic monster only acts while it stands in the player's field of
view: it closes the distance one step at a time and attacks once
adjacent.  Out of sight it does nothing at all.
"""

from __future__ import annotations

from core.constants import PLAYER
from components import BasicAi
from logic.brains.registry import register_brain
from logic.combat import attack
from logic.movement import move_towards, pair


def _basic_brain(idx: int, state: BasicAi, ctx) -> BasicAi:
    monster = ctx.entities[idx]
    if not ctx.visible(monster.x, monster.y):
        return state

    player = ctx.entities[PLAYER]
    if monster.distance_to(player) >= 2:
        move_towards(idx, player.x, player.y, ctx.tiles, ctx.entities)
    elif player.fighter is not None and player.fighter.hp > 0:
        attacker, target = pair(ctx.entities, idx, PLAYER)
        attack(attacker, target, ctx.game)
    return state


register_brain(BasicAi.kind, _basic_brain)
