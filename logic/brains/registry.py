"""logic/brains/registry.py — AI kind → brain function mapping.

Keeps the registry as a separate module so brain modules can import
``register_brain`` without pulling in the turn runner (avoids cycles).

A brain is a transition function::

    brain(idx, state, ctx) -> next_state

It may move or attack with entity *idx* and returns the AI state the
entity should hold afterwards.
"""

from __future__ import annotations
from typing import Callable


_registry: dict[str, Callable] = {}


def register_brain(kind: str, fn: Callable) -> None:
    """Register *fn* as the brain for AI states of *kind*."""
    _registry[kind] = fn


def get_brain(kind: str) -> Callable | None:
    """Return the brain function for *kind*, or ``None``."""
    return _registry.get(kind)


def registered_names() -> list[str]:
    """Return a sorted list of all registered brain kinds."""
    return sorted(_registry.keys())
