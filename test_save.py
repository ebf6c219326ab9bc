"""test_save.py — Save / load round trips.

Run:  python test_save.py      (or collect with pytest)
"""
from __future__ import annotations
import sys, random, tempfile, traceback
from pathlib import Path

# ── Test framework ──────────────────────────────────────────────────

passed = 0
failed = 0


def ok(label: str):
    global passed
    passed += 1
    print(f"  [PASS] {label}")


def fail(label: str, detail: str = ""):
    global failed
    failed += 1
    print(f"  [FAIL] {label}")
    if detail:
        for line in detail.strip().splitlines():
            print(f"         {line}")


# ── Imports ──────────────────────────────────────────────────────────

from core.constants import PLAYER, RED
from core.save import (
    save_game, load_game, entity_to_dict, entity_from_dict,
    game_to_dict, game_from_dict,
)
from components import BasicAi, ConfusedAi, MonsterKind
from logic.actions import new_game
from logic.entity_factory import make_monster

import core.tuning as _tuning
_tuning.reset()


# ═══════════════════════════════════════════════════════════════════
#  Round trips
# ═══════════════════════════════════════════════════════════════════

def test_nested_confusion_survives():
    orc = make_monster(3, 4, MonsterKind.ORC)
    orc.ai = ConfusedAi(ConfusedAi(BasicAi(), 2), 7)
    back = entity_from_dict(entity_to_dict(orc))
    assert back == orc


def test_remains_round_trip_without_components():
    orc = make_monster(3, 4, MonsterKind.ORC)
    orc.fighter = None
    orc.ai = None
    orc.name = "remains of Orc"
    data = entity_to_dict(orc)
    assert "fighter" not in data and "ai" not in data
    assert entity_from_dict(data) == orc


def test_whole_game_round_trips():
    entities, game = new_game(random.Random(21))
    game.map[1][1].explored = True
    game.log.add("A test line", RED)
    game.dungeon_level = 4
    entities[PLAYER].fighter.xp = 123

    loaded_entities, loaded_game = game_from_dict(game_to_dict(entities, game))
    assert loaded_entities == entities
    assert loaded_game.map == game.map
    assert loaded_game.inventory == game.inventory
    assert loaded_game.inventory[0].equipment.equipped
    assert list(loaded_game.log) == list(game.log)
    assert loaded_game.dungeon_level == 4


def test_save_and_load_through_a_file():
    entities, game = new_game(random.Random(8))
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "slot.json"
        save_game(entities, game, path)
        loaded = load_game(path)
    assert loaded is not None
    loaded_entities, loaded_game = loaded
    assert loaded_entities[PLAYER].pos() == entities[PLAYER].pos()
    assert len(loaded_entities) == len(entities)


def test_missing_save_loads_nothing():
    with tempfile.TemporaryDirectory() as tmp:
        assert load_game(Path(tmp) / "nope.json") is None


def test_unknown_format_is_rejected():
    entities, game = new_game(random.Random(2))
    data = game_to_dict(entities, game)
    data["format_version"] = 999
    try:
        game_from_dict(data)
    except ValueError:
        return
    raise AssertionError("expected ValueError")


# ── Runner ───────────────────────────────────────────────────────────

if __name__ == "__main__":
    for _name, _fn in list(globals().items()):
        if _name.startswith("test_") and callable(_fn):
            try:
                _fn()
                ok(_name)
            except Exception:
                fail(_name, traceback.format_exc())

    total = passed + failed
    print(f"\n{'='*50}")
    print(f" Save Tests: {passed}/{total} passed")
    if failed:
        print(f" {failed} FAILED")
    print(f"{'='*50}")
    sys.exit(0 if failed == 0 else 1)
