"""test_combat.py — Attack resolution, death, healing and leveling.

Run:  python test_combat.py      (or collect with pytest)
"""
from __future__ import annotations
import sys, traceback

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

from core.tilemap import new_map
from components import Entity, Fighter, DeathCallback, GameState, MonsterKind, BasicAi
from logic.combat import (
    attack, take_damage, heal, power, defense, max_hp,
    StatChoice, xp_to_level_up, level_up_pending, check_level_up,
)
from logic.entity_factory import make_player, make_monster, make_item, make_starting_dagger
from logic.inventory_ops import dequip
from logic.movement import pair, blocking_entity_at
from components import ItemKind

import core.tuning as _tuning
_tuning.reset()


def _game() -> GameState:
    return GameState(map=new_map(10, 10))


def _fighter(name: str, hp: int, power_: int, defense_: int, xp: int = 0,
             on_death=DeathCallback.MONSTER) -> Entity:
    return Entity(
        x=1, y=1, char="x", color=(255, 255, 255), name=name,
        blocks=True, alive=True,
        fighter=Fighter(hp=hp, base_max_hp=hp, base_defense=defense_,
                        base_power=power_, on_death=on_death, xp=xp),
        ai=BasicAi() if on_death is DeathCallback.MONSTER else None,
    )


# ═══════════════════════════════════════════════════════════════════
#  Attacks
# ═══════════════════════════════════════════════════════════════════

def test_equal_power_and_defense_does_nothing():
    game = _game()
    a = _fighter("a", 30, 5, 0, on_death=DeathCallback.PLAYER)
    b = _fighter("b", 30, 0, 5, xp=50)
    assert attack(a, b, game) is None
    assert b.fighter.hp == 30
    assert a.fighter.xp == 0
    assert game.log.last_text() == "a attacks b but it has no effect!"


def test_lethal_attack_kills_once_and_pays_xp_once():
    game = _game()
    a = _fighter("a", 30, 7, 0, on_death=DeathCallback.PLAYER)
    b = _fighter("b", 5, 0, 2, xp=35)
    assert attack(a, b, game) == 35
    assert a.fighter.xp == 35
    assert b.alive is False
    # The corpse can't die (and pay out) again
    assert take_damage(b, 10, game) is None
    assert a.fighter.xp == 35


def test_monster_death_leaves_indexed_remains():
    game = _game()
    orc = make_monster(2, 2, MonsterKind.ORC)
    entities = [make_player(), orc]
    take_damage(orc, 100, game)
    assert entities[1] is orc
    assert orc.name == "remains of Orc"
    assert orc.char == "%"
    assert orc.blocks is False and orc.fighter is None and orc.ai is None
    assert blocking_entity_at(2, 2, entities) is None


def test_player_death_keeps_fighter():
    game = _game()
    player = make_player()
    take_damage(player, 500, game)
    assert player.alive is False
    assert player.char == "%"
    assert player.fighter is not None and player.fighter.hp <= 0
    assert game.log.last_text() == "You died!"


def test_non_positive_damage_is_ignored():
    game = _game()
    b = _fighter("b", 10, 0, 0)
    assert take_damage(b, 0, game) is None
    assert take_damage(b, -4, game) is None
    assert b.fighter.hp == 10


def test_pair_refuses_same_index():
    items = ["a", "b"]
    assert pair(items, 1, 0) == ("b", "a")
    try:
        pair(items, 1, 1)
    except ValueError:
        return
    raise AssertionError("expected ValueError")


# ═══════════════════════════════════════════════════════════════════
#  Equipment bonuses and healing
# ═══════════════════════════════════════════════════════════════════

def test_equipped_bonuses_only_count_for_player():
    game = _game()
    player = make_player()
    game.inventory.append(make_starting_dagger())
    sword = make_item(0, 0, ItemKind.SWORD)
    game.inventory.append(sword)            # carried but not worn
    assert power(player, game) == 2 + 2
    assert defense(player, game) == 1
    orc = make_monster(0, 0, MonsterKind.ORC)
    assert power(orc, game) == 3


def test_heal_caps_at_effective_max_hp():
    game = _game()
    player = make_player()
    helmet = make_item(0, 0, ItemKind.SHIELD)
    helmet.equipment.defense_bonus = 0
    helmet.equipment.max_hp_bonus = 20
    helmet.equipment.equipped = True
    game.inventory.append(helmet)
    player.fighter.hp = 10
    assert max_hp(player, game) == 120
    heal(player, 1000, game)
    assert player.fighter.hp == 120


def test_heal_never_lowers_hp_above_the_cap():
    game = _game()
    player = make_player()
    helmet = make_item(0, 0, ItemKind.SHIELD)
    helmet.equipment.defense_bonus = 0
    helmet.equipment.max_hp_bonus = 20
    helmet.equipment.equipped = True
    game.inventory.append(helmet)
    player.fighter.hp = 120
    dequip(helmet, game.log)
    assert max_hp(player, game) == 100
    heal(player, 5, game)
    assert player.fighter.hp == 120


# ═══════════════════════════════════════════════════════════════════
#  Leveling
# ═══════════════════════════════════════════════════════════════════

def test_level_up_threshold():
    player = make_player()
    assert xp_to_level_up(player) == 350
    player.fighter.xp = 349
    assert not level_up_pending(player)
    player.fighter.xp = 350
    assert level_up_pending(player)


def test_level_up_applies_choice_and_spends_xp():
    game = _game()
    player = make_player()
    player.fighter.xp = 400
    asked = []

    def choose(options):
        asked.append(options)
        return StatChoice.CONSTITUTION

    assert check_level_up([player], game, choose)
    assert player.level == 2
    assert player.fighter.xp == 50
    assert player.fighter.base_max_hp == 120
    assert player.fighter.hp == 120
    assert len(asked) == 1 and len(asked[0]) == 3


def test_level_up_asks_again_until_valid():
    game = _game()
    player = make_player()
    player.fighter.xp = 350
    answers = iter([None, 7, "x", 1])
    assert check_level_up([player], game, lambda _opts: next(answers))
    assert player.fighter.base_power == 3


def test_no_level_up_without_xp():
    game = _game()
    player = make_player()
    assert not check_level_up([player], game, lambda _opts: 0)
    assert player.level == 1


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
    print(f" Combat Tests: {passed}/{total} passed")
    if failed:
        print(f" {failed} FAILED")
    print(f"{'='*50}")
    sys.exit(0 if failed == 0 else 1)
