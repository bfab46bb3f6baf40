"""
Arcade window: interactive driver and renderer for the asteroids simulation
"""

from __future__ import annotations

import logging
from typing import Dict, Hashable, Optional

import arcade

from game.configs.asteroids_config import KEYMAP_NAMES, WINDOW_CONFIG
from .control import decode_key
from .entities import EntityKind
from .params import DEFAULT_PARAMS, SimulationParams
from .simulation import ControlInput, Model, Tick, init_model, update
from .utils import Vector2, add, heading, make_rng, scale

logger = logging.getLogger(__name__)


def default_keymap() -> Dict[Hashable, str]:
    """Arcade key codes -> control axis names"""
    return {getattr(arcade.key, name): axis for name, axis in KEYMAP_NAMES.items()}


class AsteroidsWindow(arcade.Window):
    """
    Arcade window that owns the current model.

    Key presses and releases become ControlInput events, every on_update
    becomes a Tick in milliseconds. Drawing only reads the model. With
    ``interactive=False`` the window just draws whatever model it is given.
    """

    def __init__(
        self,
        params: SimulationParams = DEFAULT_PARAMS,
        model: Optional[Model] = None,
        seed: Optional[int] = None,
        interactive: bool = True,
        keymap: Optional[Dict[Hashable, str]] = None,
    ):
        super().__init__(
            int(params.width),
            int(params.height),
            WINDOW_CONFIG["title"],
            update_rate=WINDOW_CONFIG["update_rate"],
        )
        self.params = params
        self.model = model if model is not None else init_model(make_rng(seed), params)
        self.interactive = interactive
        self.keymap = keymap if keymap is not None else default_keymap()

        # Colors
        self.BG = (18, 18, 22)
        self.SHIP_C = (80, 200, 120)
        self.SHIELD_C = (120, 160, 240)
        self.ASTEROID_C = (150, 140, 130)
        self.PROJECTILE_C = (240, 210, 80)
        self.HUD_C = (220, 220, 220)

        arcade.set_background_color(self.BG)
        logger.debug("Window opened with %d movables", len(self.model.movables))

    # ----------------------------
    # Driver events
    # ----------------------------

    def on_update(self, delta_time: float):
        if not self.interactive:
            return
        self.model = update(self.model, Tick(delta_time * 1000.0), self.params)

    def _dispatch_key(self, symbol: int, pressed: bool):
        if not self.interactive:
            return
        change = decode_key(symbol, pressed, self.keymap)
        self.model = update(self.model, ControlInput(change), self.params)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.ESCAPE:
            self.close()
            return
        self._dispatch_key(symbol, True)

    def on_key_release(self, symbol: int, modifiers: int):
        self._dispatch_key(symbol, False)

    # ----------------------------
    # Rendering
    # ----------------------------

    def _to_screen(self, p: Vector2):
        # simulation y grows downwards, arcade y grows upwards
        return p.x, self.params.height - p.y

    def _draw_ship(self):
        ship = self.model.ship
        body = ship.movable
        r = body.radius
        nose = heading(ship.rotation)
        side = heading(ship.rotation + 90.0)

        tip = add(body.position, scale(nose, r))
        back = add(body.position, scale(nose, -r * 0.7))
        left = add(back, scale(side, -r * 0.7))
        right = add(back, scale(side, r * 0.7))

        arcade.draw_triangle_filled(
            *self._to_screen(tip), *self._to_screen(left), *self._to_screen(right), self.SHIP_C
        )
        if ship.control.thrust:
            flame = add(body.position, scale(nose, -r * 1.3))
            arcade.draw_line(*self._to_screen(back), *self._to_screen(flame), self.PROJECTILE_C, 2)
        if ship.control.shield:
            arcade.draw_circle_outline(*self._to_screen(body.position), r * 1.6, self.SHIELD_C, 2)

    def on_draw(self):
        """Draw the current model"""
        self.clear()

        for m in self.model.movables:
            x, y = self._to_screen(m.position)
            if m.kind is EntityKind.ASTEROID:
                arcade.draw_circle_outline(x, y, m.radius, self.ASTEROID_C, 2)
            elif m.kind is EntityKind.PROJECTILE_FRIENDLY:
                arcade.draw_circle_filled(x, y, max(m.radius, 1.0), self.PROJECTILE_C)

        self._draw_ship()

        ship = self.model.ship
        txt = (f"Heading: {ship.rotation:5.1f}  "
               f"Cooldown: {ship.fire_cooldown:5.0f}ms  "
               f"Objects: {len(self.model.movables)}")
        arcade.draw_text(txt, 12, self.height - 24, self.HUD_C, 14)
