"""logic/combat.py — Attack resolution, death, healing and leveling.

Every code-path that deals damage (melee, lightning, fireball) funnels
through ``take_damage()`` so death transitions and xp payouts stay
consistent.  Effective stats are always *computed*:

    effective = base stat + sum(bonus of each equipped inventory item)

Only the player has an inventory, so only the player gets bonuses.
Level-up choices raise the base stat, never the bonus total.
"""

from __future__ import annotations
from enum import Enum
from typing import Callable, Sequence

from core.constants import (
    PLAYER, LEVEL_UP_BASE, LEVEL_UP_FACTOR,
    WHITE, RED, DARK_RED, ORANGE, YELLOW,
)
from core.tuning import get as _tun
from components import Entity, GameState, DeathCallback, Equipment


# ── Effective stats ──────────────────────────────────────────────────

def is_player(entity: Entity) -> bool:
    f = entity.fighter
    return f is not None and f.on_death is DeathCallback.PLAYER


def get_all_equipped(entity: Entity, game: GameState) -> list[Equipment]:
    """Equipment components currently worn by *entity*.

    Non-player fighters carry nothing, so this is always empty for them.
    """
    if not is_player(entity):
        return []
    return [item.equipment for item in game.inventory
            if item.equipment is not None and item.equipment.equipped]


def power(entity: Entity, game: GameState) -> int:
    base = entity.fighter.base_power if entity.fighter else 0
    return base + sum(e.power_bonus for e in get_all_equipped(entity, game))


def defense(entity: Entity, game: GameState) -> int:
    base = entity.fighter.base_defense if entity.fighter else 0
    return base + sum(e.defense_bonus for e in get_all_equipped(entity, game))


def max_hp(entity: Entity, game: GameState) -> int:
    base = entity.fighter.base_max_hp if entity.fighter else 0
    return base + sum(e.max_hp_bonus for e in get_all_equipped(entity, game))


# ── Death transitions ────────────────────────────────────────────────

def player_death(player: Entity, game: GameState) -> None:
    game.log.add("You died!", RED)
    player.char = "%"
    player.color = DARK_RED


def monster_death(monster: Entity, game: GameState) -> None:
    """Turn a monster into inert scenery in place (it keeps its index)."""
    xp = monster.fighter.xp if monster.fighter else 0
    game.log.add(f"{monster.name} is dead! You gain {xp} experience points.", ORANGE)
    monster.char = "%"
    monster.color = DARK_RED
    monster.blocks = False
    monster.fighter = None
    monster.ai = None
    monster.name = f"remains of {monster.name}"


_DEATH_CALLBACKS: dict[DeathCallback, Callable[[Entity, GameState], None]] = {
    DeathCallback.PLAYER: player_death,
    DeathCallback.MONSTER: monster_death,
}


# ── Damage ───────────────────────────────────────────────────────────

def take_damage(entity: Entity, damage: int, game: GameState) -> int | None:
    """Apply *damage* to *entity*.

    Returns the xp the entity was worth if this call killed it,
    otherwise ``None``.  Non-positive damage never changes hp, and an
    entity already at 0 hp cannot die (and pay out) a second time.
    """
    fighter = entity.fighter
    if fighter is None or damage <= 0 or fighter.hp <= 0:
        return None

    fighter.hp -= damage
    if fighter.hp > 0:
        return None

    xp = fighter.xp
    entity.alive = False
    _DEATH_CALLBACKS[fighter.on_death](entity, game)
    return xp


def attack(attacker: Entity, target: Entity, game: GameState) -> int | None:
    """Resolve one melee attack.  Returns xp gained, if the target died.

    damage = effective power − effective defense; zero or less logs a
    no-effect message and leaves hp alone.
    """
    damage = power(attacker, game) - defense(target, game)
    if damage <= 0:
        game.log.add(f"{attacker.name} attacks {target.name} but it has no effect!", WHITE)
        return None

    game.log.add(f"{attacker.name} attacks {target.name} for {damage} hit points.", WHITE)
    xp = take_damage(target, damage, game)
    if xp is not None and attacker is not target and attacker.fighter is not None:
        attacker.fighter.xp += xp
    return xp


def heal(entity: Entity, amount: int, game: GameState) -> None:
    """Restore up to *amount* hp, capped at the effective max hp.

    hp already above the cap (a max-hp item was just taken off) is left
    where it is.
    """
    fighter = entity.fighter
    if fighter is None:
        return
    fighter.hp = max(fighter.hp, min(fighter.hp + amount, max_hp(entity, game)))


# ── Leveling ─────────────────────────────────────────────────────────

class StatChoice(Enum):
    CONSTITUTION = 0   # +20 max hp (and +20 hp)
    STRENGTH = 1       # +1 power
    AGILITY = 2        # +1 defense


def xp_to_level_up(player: Entity) -> int:
    base = _tun("progression", "level_up_base", LEVEL_UP_BASE)
    factor = _tun("progression", "level_up_factor", LEVEL_UP_FACTOR)
    return base + player.level * factor


def level_up_pending(player: Entity) -> bool:
    return player.fighter is not None and player.fighter.xp >= xp_to_level_up(player)


def level_up_options(player: Entity) -> list[str]:
    f = player.fighter
    return [
        f"Constitution (+20 HP, from {f.base_max_hp})",
        f"Strength (+1 attack, from {f.base_power})",
        f"Agility (+1 defense, from {f.base_defense})",
    ]


def apply_level_up(player: Entity, game: GameState, choice: StatChoice) -> None:
    """Spend one level's worth of xp and raise the chosen base stat."""
    required = xp_to_level_up(player)
    fighter = player.fighter
    player.level += 1
    fighter.xp -= required
    game.log.add(
        f"Your battle skills grow stronger! You reached level {player.level}!",
        YELLOW,
    )
    if choice is StatChoice.CONSTITUTION:
        fighter.base_max_hp += 20
        fighter.hp += 20
    elif choice is StatChoice.STRENGTH:
        fighter.base_power += 1
    elif choice is StatChoice.AGILITY:
        fighter.base_defense += 1


def _parse_choice(raw) -> StatChoice | None:
    if isinstance(raw, StatChoice):
        return raw
    try:
        return StatChoice(raw)
    except ValueError:
        return None


def check_level_up(entities: Sequence[Entity], game: GameState,
                   choose: Callable[[list[str]], object]) -> bool:
    """Level the player up once if they have enough xp.

    *choose* is shown the three option labels and must return a
    ``StatChoice`` or its index; anything else (including ``None``) is
    treated as no answer and the player is asked again.  Returns True
    if a level was gained.
    """
    player = entities[PLAYER]
    if not level_up_pending(player):
        return False

    choice = None
    while choice is None:
        choice = _parse_choice(choose(level_up_options(player)))
    apply_level_up(player, game, choice)
    return True
