"""logic/brains — AI state machine and turn runner.

Public API
----------
``register_brain(kind, fn)``  — add a brain to the registry
``get_brain(kind)``           — look up a brain by AI kind
``take_turn(idx, ...)``       — advance one entity's AI by one turn
``TurnContext``               — what a brain may read and touch

Brain modules register themselves at import time via ``register_brain``.
Every brain returns the entity's next AI state; ``take_turn`` stores it
back on the entity, so transitions (e.g. confusion wearing off) are
plain value swaps.
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Any, Callable

from core.tilemap import Map
from components import Entity, GameState
from logic.brains.registry import register_brain, get_brain, registered_names


@dataclass
class TurnContext:
    tiles: Map
    entities: list[Entity]
    game: GameState
    visible: Callable[[int, int], bool]
    rng: Any = random       # anything with randint(); a random.Random in tests


def take_turn(idx: int, tiles: Map, entities: list[Entity], game: GameState,
              visible: Callable[[int, int], bool], rng: Any = None) -> bool:
    """Run entity *idx*'s brain once.  Returns False if it has no AI."""
    state = entities[idx].ai
    if state is None:
        return False

    fn = get_brain(state.kind)
    if fn is None:
        raise KeyError(f"no brain registered for ai kind {state.kind!r}")

    ctx = TurnContext(tiles, entities, game, visible,
                      rng if rng is not None else random)
    entities[idx].ai = fn(idx, state, ctx)
    return True


# Import brain modules to trigger their register_brain() calls.
# These imports MUST come after the registry functions are defined.
from logic.brains import basic as _basic          # noqa: F401, E402
from logic.brains import confused as _confused    # noqa: F401, E402
