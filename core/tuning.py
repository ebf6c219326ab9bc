"""core/tuning.py — Data-driven tuning constants.

Gameplay numbers can be overridden in ``data/tuning.toml``, loaded once
at startup.  Any system can read a value with::

    from core.tuning import get
    amount = get("items.heal", "amount", HEAL_AMOUNT)

Every caller passes the matching ``core.constants`` value as the
default, so nothing breaks when the file is absent or never loaded.
"""

from __future__ import annotations
import tomllib
from pathlib import Path


DEFAULT_PATH = Path(__file__).resolve().parent.parent / "data" / "tuning.toml"

_data: dict = {}


def load(path: str | Path | None = None) -> None:
    """Replace the loaded values with the contents of *path*.

    Defaults to ``data/tuning.toml`` next to the ``core`` package.  A
    missing file leaves every lookup on its built-in default.
    """
    global _data
    path = DEFAULT_PATH if path is None else Path(path)

    if not path.exists():
        print(f"[TUNING] {path} not found, using defaults")
        _data = {}
        return

    with open(path, "rb") as f:
        _data = tomllib.load(f)
    print(f"[TUNING] Loaded {_count_leaves(_data)} values from {path}")


def reset() -> None:
    """Forget every loaded value; all lookups fall back to defaults."""
    global _data
    _data = {}


def get(section: str, key: str, default=None):
    """Read a tuning value.

    *section* uses dot-notation for nested tables, so
    ``get("items.fireball", "radius", 3)`` reads ``[items.fireball]``.
    """
    node = _data
    for part in section.split("."):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    if isinstance(node, dict):
        return node.get(key, default)
    return default


def _count_leaves(d: dict) -> int:
    return sum(_count_leaves(v) if isinstance(v, dict) else 1 for v in d.values())
