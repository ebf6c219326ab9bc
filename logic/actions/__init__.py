"""logic/actions — High-level player actions.

Thin wrappers that scenes call in response to key presses.  Each
function does everything needed so the scene stays small.

Public API (re-exported here)
-----------------------------
``player_move_or_attack``  — bump-to-attack movement
``pick_up_at_feet``        — pick up the item under the player
``take_stairs``            — descend when standing on the stairs
``next_level``             — rest and regenerate one level deeper
``new_game``               — fresh character and depth-1 level
``use_item``               — use an inventory item (``UseResult``)
``needs_target``           — does an item need a tile picked first?
``closest_monster``        — nearest visible monster in range
"""

from logic.actions.items import (              # noqa: F401
    UseResult, use_item, needs_target, closest_monster, target_valid,
)
from logic.actions.player import (             # noqa: F401
    player_move_or_attack, pick_up_at_feet, take_stairs, next_level, new_game,
)
