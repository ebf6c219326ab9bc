"""logic — Game rules package.

Subpackages
-----------
brains/     — AI state machine: brain registry, basic and confused brains
actions/    — player actions (move/attack, pick up, stairs, item use)

Top-level modules
-----------------
dungeon         — room-and-tunnel level generation + object placement
spawn_tables    — depth-scaled weighted spawn tables
entity_factory  — monsters, items, stairs and the player from data tables
movement        — blocking checks, move_by, move_towards
combat          — attack / take_damage / death handling / xp
inventory_ops   — pick up, drop, equip and dequip
fov             — line of sight + field of view map
tick            — monster AI pass after each player turn
input_manager   — raw input → intent mapping
"""
