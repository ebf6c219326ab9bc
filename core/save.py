"""core/save.py — Game state persistence.

A save file (JSON) holds everything needed to resume exactly where the
player left off:
- The map, tile by tile (including what has been explored)
- Every entity on the level, player first
- The inventory, with equipped flags
- The message log and the dungeon depth

Entities are written field by field, nested AI states included, so a
confused monster comes back confused with the same turn count.
"""

from __future__ import annotations
import json
from pathlib import Path
from typing import Any

from core.messages import MessageLog
from core.tilemap import Map, Tile
from components import (
    Entity, GameState, Fighter, DeathCallback, Equipment, Slot, ItemKind,
    Ai, BasicAi, ConfusedAi,
)


SAVES_DIR = Path("saves")
FORMAT_VERSION = 1


def get_save_file(slot: int = 0) -> Path:
    """Get the path for a save slot."""
    SAVES_DIR.mkdir(parents=True, exist_ok=True)
    return SAVES_DIR / f"slot{slot}.json"


# ── Components ───────────────────────────────────────────────────────

def _ai_to_dict(ai: Ai) -> dict[str, Any]:
    if isinstance(ai, ConfusedAi):
        return {"kind": ai.kind, "previous_ai": _ai_to_dict(ai.previous_ai),
                "num_turns": ai.num_turns}
    return {"kind": ai.kind}


def _ai_from_dict(data: dict[str, Any]) -> Ai:
    kind = data["kind"]
    if kind == ConfusedAi.kind:
        return ConfusedAi(_ai_from_dict(data["previous_ai"]), int(data["num_turns"]))
    if kind == BasicAi.kind:
        return BasicAi()
    raise ValueError(f"unknown ai kind {kind!r}")


def _fighter_to_dict(f: Fighter) -> dict[str, Any]:
    return {
        "hp": f.hp, "base_max_hp": f.base_max_hp,
        "base_defense": f.base_defense, "base_power": f.base_power,
        "base_movement": f.base_movement, "xp": f.xp,
        "on_death": f.on_death.value,
    }


def _fighter_from_dict(data: dict[str, Any]) -> Fighter:
    data = dict(data)
    data["on_death"] = DeathCallback(data["on_death"])
    return Fighter(**data)


def _equipment_to_dict(eq: Equipment) -> dict[str, Any]:
    return {
        "slot": eq.slot.value, "equipped": eq.equipped,
        "power_bonus": eq.power_bonus, "defense_bonus": eq.defense_bonus,
        "max_hp_bonus": eq.max_hp_bonus,
    }


def _equipment_from_dict(data: dict[str, Any]) -> Equipment:
    data = dict(data)
    data["slot"] = Slot(data["slot"])
    return Equipment(**data)


# ── Entities ─────────────────────────────────────────────────────────

def entity_to_dict(e: Entity) -> dict[str, Any]:
    data: dict[str, Any] = {
        "x": e.x, "y": e.y,
        "char": e.char, "color": list(e.color), "name": e.name,
        "blocks": e.blocks, "alive": e.alive, "level": e.level,
        "always_visible": e.always_visible,
        "stairs": e.stairs,
    }
    if e.fighter is not None:
        data["fighter"] = _fighter_to_dict(e.fighter)
    if e.ai is not None:
        data["ai"] = _ai_to_dict(e.ai)
    if e.item is not None:
        data["item"] = e.item.value
    if e.equipment is not None:
        data["equipment"] = _equipment_to_dict(e.equipment)
    return data


def entity_from_dict(data: dict[str, Any]) -> Entity:
    return Entity(
        x=int(data["x"]),
        y=int(data["y"]),
        char=data["char"],
        color=tuple(data["color"]),
        name=data["name"],
        blocks=bool(data.get("blocks", False)),
        alive=bool(data.get("alive", False)),
        level=int(data.get("level", 1)),
        always_visible=bool(data.get("always_visible", False)),
        stairs=bool(data.get("stairs", False)),
        fighter=_fighter_from_dict(data["fighter"]) if "fighter" in data else None,
        ai=_ai_from_dict(data["ai"]) if "ai" in data else None,
        item=ItemKind(data["item"]) if "item" in data else None,
        equipment=_equipment_from_dict(data["equipment"]) if "equipment" in data else None,
    )


# ── Map ──────────────────────────────────────────────────────────────
# Each tile packs into one small int: bit 0 blocked, bit 1 block_sight,
# bit 2 explored.  Columns are kept in x order, like the grid itself.

def _tile_to_int(t: Tile) -> int:
    return int(t.blocked) | int(t.block_sight) << 1 | int(t.explored) << 2


def _tile_from_int(v: int) -> Tile:
    return Tile(blocked=bool(v & 1), block_sight=bool(v & 2), explored=bool(v & 4))


def map_to_list(tiles: Map) -> list[list[int]]:
    return [[_tile_to_int(t) for t in column] for column in tiles]


def map_from_list(data: list[list[int]]) -> Map:
    return [[_tile_from_int(v) for v in column] for column in data]


# ── Whole game ───────────────────────────────────────────────────────

def game_to_dict(entities: list[Entity], game: GameState) -> dict[str, Any]:
    return {
        "format_version": FORMAT_VERSION,
        "dungeon_level": game.dungeon_level,
        "map": map_to_list(game.map),
        "entities": [entity_to_dict(e) for e in entities],
        "inventory": [entity_to_dict(e) for e in game.inventory],
        "log": [[text, list(color)] for text, color in game.log],
    }


def game_from_dict(data: dict[str, Any]) -> tuple[list[Entity], GameState]:
    version = data.get("format_version")
    if version != FORMAT_VERSION:
        raise ValueError(f"unsupported save format {version!r}")
    log = MessageLog()
    for text, color in data.get("log", []):
        log.add(text, tuple(color))
    game = GameState(
        map=map_from_list(data["map"]),
        log=log,
        inventory=[entity_from_dict(e) for e in data.get("inventory", [])],
        dungeon_level=int(data["dungeon_level"]),
    )
    entities = [entity_from_dict(e) for e in data["entities"]]
    if not entities:
        raise ValueError("save has no player entity")
    return entities, game


def save_game(entities: list[Entity], game: GameState, path: str | Path | None = None) -> Path:
    """Write the current game to *path* (default: save slot 0).

    Returns the path written.
    """
    save_path = Path(path) if path is not None else get_save_file()
    with open(save_path, "w") as f:
        json.dump(game_to_dict(entities, game), f)
    print(f"[SAVE] Saved depth {game.dungeon_level} to {save_path}")
    return save_path


def load_game(path: str | Path | None = None) -> tuple[list[Entity], GameState] | None:
    """Load a saved game.

    Returns ``None`` if there is no save file.  A file that exists but
    can't be read back raises (``ValueError``, ``KeyError`` or
    ``json.JSONDecodeError``) rather than starting a broken game.
    """
    save_path = Path(path) if path is not None else get_save_file()
    if not save_path.exists():
        return None

    with open(save_path, "r") as f:
        data = json.load(f)
    entities, game = game_from_dict(data)
    print(f"[SAVE] Loaded depth {game.dungeon_level} from {save_path}")
    return entities, game
