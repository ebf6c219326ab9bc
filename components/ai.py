"""components.ai — Monster behaviour states.

AI state is a small sum type: ``BasicAi`` or ``ConfusedAi`` wrapping
the state it will resume.  States are immutable values; each turn the
brain runner replaces ``entity.ai`` with whatever the brain returns.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class BasicAi:
    """Chase the player when visible, attack when adjacent."""
    kind: ClassVar[str] = "basic"


@dataclass(frozen=True)
class ConfusedAi:
    """Stumble randomly for ``num_turns`` more turns, then resume.

    ``previous_ai`` is inert while confused and comes back unchanged.
    """
    previous_ai: "Ai"
    num_turns: int
    kind: ClassVar[str] = "confused"


Ai = Union[BasicAi, ConfusedAi]
