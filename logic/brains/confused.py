"""logic/brains/confused.py — Stumbling brain wrapping a suspended one.

While confused the entity's own brain is shelved inside the state.
Each turn it takes one random step (standing still included) and burns
a turn off the counter; once the counter drops below zero the shelved
state comes back untouched.
"""

from __future__ import annotations
import random

from core.constants import RED
from components import Ai, ConfusedAi
from logic.brains.registry import register_brain
from logic.movement import move_by


def _confused_brain(idx: int, state: ConfusedAi, ctx) -> Ai:
    monster = ctx.entities[idx]
    num_turns = state.num_turns

    if num_turns >= 0:
        dx = ctx.rng.randint(-1, 1)
        dy = ctx.rng.randint(-1, 1)
        move_by(idx, dx, dy, ctx.tiles, ctx.entities)
        num_turns -= 1

    if num_turns < 0:
        ctx.game.log.add(f"The {monster.name} is no longer confused.", RED)
        return state.previous_ai
    return ConfusedAi(state.previous_ai, num_turns)


register_brain(ConfusedAi.kind, _confused_brain)
