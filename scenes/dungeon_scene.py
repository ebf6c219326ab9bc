"""
scenes/dungeon_scene.py — The game proper

Turn loop: read one key → the player acts → if that used the turn,
every monster acts → recompute the field of view → offer a level up if
one is pending.  Nothing moves between key presses.

Menus (inventory, drop, level up, character sheet) are modals on the
scene's ModalStack; they answer with commands that are applied here.
Scrolls that need a tile switch the input to targeting until the
player clicks a tile or backs out.
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.app import App
from core.constants import PLAYER, LIGHT_CYAN
from core.save import save_game
from components import Entity, GameState
from logic.actions import (
    UseResult, use_item, needs_target, target_valid,
    player_move_or_attack, pick_up_at_feet, take_stairs,
)
from logic.combat import (
    StatChoice, apply_level_up, level_up_pending, level_up_options,
    xp_to_level_up, max_hp, power, defense,
)
from logic.fov import FovMap
from logic.input_manager import InputManager, InputContext
from logic.inventory_ops import drop_item
from logic.tick import end_player_turn, player_dead
from ui import (
    ModalStack, CloseModal, UseItem, DropItem, ChooseStat,
    use_menu, drop_menu, level_up_menu, message_box,
)
from scenes.dungeon_draw import draw_tiles, draw_entities, draw_panel, draw_target_cursor


class DungeonScene(Scene):
    def __init__(self, entities: list[Entity], game: GameState):
        self.entities = entities
        self.game = game
        self.fov = FovMap(game.map)
        self.input = InputManager()
        self.modals = ModalStack()
        # Inventory index of a scroll waiting for a target tile
        self.pending_item: int | None = None

    # ── lifecycle ───────────────────────────────────────────────────

    def on_enter(self, app: App):
        self._recompute_fov()

    def _recompute_fov(self):
        if self.fov.tiles is not self.game.map:
            self.fov.reset(self.game.map)
        player = self.entities[PLAYER]
        self.fov.compute(player.x, player.y)

    def _save(self):
        if player_dead(self.entities):
            return
        save_game(self.entities, self.game)

    # ── events ──────────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event, app: App):
        if event.type == pygame.QUIT:
            self._save()
            return

        if self.modals.is_open:
            self._apply(self.modals.handle_event(event))
            return

        self.input.begin_frame()
        self.input.feed(event)

        if self.input.context == InputContext.TARGETING:
            self._handle_targeting()
            return

        if self.input.just("cancel"):
            self._save()
            app.pop_scene()
            return
        if player_dead(self.entities):
            return

        took_turn = False
        step = self.input.step()
        if step is not None:
            took_turn = step == (0, 0) or player_move_or_attack(*step, self.entities, self.game)
        elif self.input.just("pickup"):
            took_turn = pick_up_at_feet(self.entities, self.game)
        elif self.input.just("inventory"):
            self.modals.push(use_menu(self.game.inventory))
        elif self.input.just("drop"):
            self.modals.push(drop_menu(self.game.inventory))
        elif self.input.just("character"):
            self.modals.push(message_box(self._character_sheet()))
        elif self.input.just("stairs"):
            if take_stairs(self.entities, self.game):
                self._recompute_fov()

        if took_turn:
            self._end_turn()

    def _handle_targeting(self):
        if self.input.just("cancel"):
            self._finish_use(None)
        elif self.input.just("target"):
            self._finish_use(self.input.mouse_tile)

    # ── turn flow ───────────────────────────────────────────────────

    def _end_turn(self):
        self._recompute_fov()
        end_player_turn(self.entities, self.game, self.fov.is_in_fov)
        self._offer_level_up()

    def _offer_level_up(self):
        player = self.entities[PLAYER]
        if level_up_pending(player) and not player_dead(self.entities):
            self.modals.push(level_up_menu(level_up_options(player)))

    def _begin_use(self, inventory_id: int):
        kind = self.game.inventory[inventory_id].item
        wants_tile, _ = needs_target(kind)
        if wants_tile:
            self.pending_item = inventory_id
            self.input.context = InputContext.TARGETING
            self.game.log.add(
                "Left-click a target tile, or right-click to cancel.", LIGHT_CYAN)
            return
        self._finish_use_now(inventory_id, None)

    def _finish_use(self, target):
        inventory_id = self.pending_item
        self.pending_item = None
        self.input.context = InputContext.GAMEPLAY
        if inventory_id is not None:
            self._finish_use_now(inventory_id, target)

    def _finish_use_now(self, inventory_id: int, target):
        result = use_item(inventory_id, self.entities, self.game, self.fov.is_in_fov, target)
        if result is not UseResult.CANCELLED:
            self._end_turn()

    def _apply(self, cmds):
        for cmd in cmds:
            if isinstance(cmd, CloseModal):
                self.modals.pop()
            elif isinstance(cmd, UseItem):
                self._begin_use(cmd.inventory_id)
            elif isinstance(cmd, DropItem):
                drop_item(cmd.inventory_id, self.game, self.entities)
                self._end_turn()
            elif isinstance(cmd, ChooseStat):
                apply_level_up(self.entities[PLAYER], self.game, StatChoice(cmd.index))
                self._offer_level_up()

    def _character_sheet(self) -> str:
        player = self.entities[PLAYER]
        return "\n".join([
            "Character information",
            "",
            f"Level: {player.level}",
            f"Experience: {player.fighter.xp}",
            f"Experience to level up: {xp_to_level_up(player)}",
            "",
            f"Maximum HP: {max_hp(player, self.game)}",
            f"Attack: {power(player, self.game)}",
            f"Defense: {defense(player, self.game)}",
        ])

    # ── draw ────────────────────────────────────────────────────────

    def draw(self, surface: pygame.Surface, app: App):
        draw_tiles(surface, self.game.map, self.fov)
        draw_entities(surface, app, self.entities, self.game.map, self.fov)
        if self.input.context == InputContext.TARGETING and self.pending_item is not None:
            kind = self.game.inventory[self.pending_item].item
            _, max_range = needs_target(kind)
            tile = self.input.mouse_tile
            draw_target_cursor(
                surface, tile,
                target_valid(tile, self.entities, self.fov.is_in_fov, max_range))
        draw_panel(surface, app, self.entities, self.game, self.fov, self.input.mouse_tile)
        self.modals.draw(surface, app)
