"""
AsteroidsEnv - a headless gymnasium driver for the asteroids simulation
----------------------------------------------------------------------
- Gymnasium API on top of the pure simulation step
- Fixed frame delta in milliseconds per env step
- MultiDiscrete action space: [rotate(3), thrust(2), shoot(2), shield(2)]
- Vector observation: ship state + K nearest movables
- No collisions, so episodes only end by truncation

Quick test:
    python -m game.g2D.asteroids_env
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from game.configs.asteroids_config import ENV_CONFIG, REWARD_CONFIG
from .control import ControlChange
from .entities import EntityKind
from .params import DEFAULT_PARAMS, SimulationParams
from .simulation import ControlInput, Model, Tick, init_model, update
from .utils import clamp, wrapped_delta

logger = logging.getLogger(__name__)

_ROTATE_CHANGES = (ControlChange.ROTATE_NONE, ControlChange.ROTATE_LEFT, ControlChange.ROTATE_RIGHT)
_THRUST_CHANGES = (ControlChange.THRUST_OFF, ControlChange.THRUST_ON)
_SHOOT_CHANGES = (ControlChange.SHOOT_OFF, ControlChange.SHOOT_ON)
_SHIELD_CHANGES = (ControlChange.SHIELD_OFF, ControlChange.SHIELD_ON)


def action_to_changes(action) -> List[ControlChange]:
    """Translate a MultiDiscrete action into control changes"""
    rotate, thrust, shoot, shield = (int(a) for a in action)
    return [
        _ROTATE_CHANGES[rotate],
        _THRUST_CHANGES[thrust],
        _SHOOT_CHANGES[shoot],
        _SHIELD_CHANGES[shield],
    ]


class AsteroidsEnv(gym.Env):
    """Asteroids simulation driven one fixed tick per step"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        params: SimulationParams = DEFAULT_PARAMS,
        dt_ms: float = ENV_CONFIG["dt_ms"],
        max_steps: int = ENV_CONFIG["max_steps"],
        k_nearest: int = ENV_CONFIG["k_nearest"],
        reward_config: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode: {render_mode}"
        assert dt_ms >= 0, "dt_ms must be non-negative"
        assert max_steps >= 1, "max_steps must be at least 1"
        self.render_mode = render_mode

        self.params = params
        self.dt_ms = dt_ms
        self.max_steps = max_steps
        self.k_nearest = k_nearest
        self.reward_config = dict(REWARD_CONFIG if reward_config is None else reward_config)

        # rotate: 0 none, 1 left, 2 right; thrust/shoot/shield: 0/1
        self.action_space = spaces.MultiDiscrete([3, 2, 2, 2])

        # Ship: pos(2) vel(2) heading sin/cos(2) cooldown(1) shield(1)
        # Each movable: rel pos(2) rel vel(2) is_projectile(1)
        obs_dim = 8 + self.k_nearest * 5
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self.model: Model = None  # type: ignore
        self._step_count = 0
        self._shots = 0
        self._window = None

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        self._step_count = 0
        self._shots = 0
        # np_random is only consumed here; steps are deterministic
        self.model = init_model(self.np_random, self.params)
        logger.debug("Reset with %d asteroids (seed=%s)", len(self.model.movables), seed)

        return self._get_obs(), self._get_info()

    def step(self, action):
        for change in action_to_changes(action):
            self.model = update(self.model, ControlInput(change), self.params)

        cooldown_before = self.model.ship.fire_cooldown
        self.model = update(self.model, Tick(self.dt_ms), self.params)
        fired = self.model.ship.control.shoot and cooldown_before == 0
        self._shots += int(fired)

        reward = self._compute_reward(fired)

        self._step_count += 1
        terminated = False
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _count(self, kind: EntityKind) -> int:
        return sum(1 for m in self.model.movables if m.kind is kind)

    def _get_obs(self) -> np.ndarray:
        p = self.params
        ship = self.model.ship
        body = ship.movable
        max_speed = max(1e-6, p.max_speed)
        rad = math.radians(ship.rotation)

        obs_parts = [
            (body.position.x / p.width) * 2 - 1,
            (body.position.y / p.height) * 2 - 1,
            clamp(body.velocity.x / max_speed, -1, 1),
            clamp(body.velocity.y / max_speed, -1, 1),
            math.sin(rad),
            -math.cos(rad),
            clamp((ship.fire_cooldown / max(1e-6, p.fire_cooldown)) * 2 - 1, -1, 1),
            1.0 if ship.control.shield else -1.0,
        ]

        # offsets go the short way around the wrapped map
        offsets = [
            (wrapped_delta(body.position.x, m.position.x, p.width),
             wrapped_delta(body.position.y, m.position.y, p.height),
             m)
            for m in self.model.movables
        ]
        nearest = sorted(offsets, key=lambda o: o[0] ** 2 + o[1] ** 2)
        for i in range(self.k_nearest):
            if i < len(nearest):
                dx, dy, m = nearest[i]
                obs_parts += [
                    clamp(dx / p.width, -1, 1),
                    clamp(dy / p.height, -1, 1),
                    clamp((m.velocity.x - body.velocity.x) / max_speed, -1, 1),
                    clamp((m.velocity.y - body.velocity.y) / max_speed, -1, 1),
                    1.0 if m.kind is EntityKind.PROJECTILE_FRIENDLY else -1.0,
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0, 0.0]

        obs = np.array(obs_parts, dtype=np.float32)
        # wrap overshoot can push a position a hair past the map edge
        return np.clip(obs, -1.0, 1.0)

    def _compute_reward(self, fired: bool) -> float:
        reward = self.reward_config.get("R_ALIVE", 0.0)
        if fired:
            reward -= self.reward_config.get("R_SHOT", 0.0)
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        ship = self.model.ship
        return {
            "rotation": ship.rotation,
            "cooldown": ship.fire_cooldown,
            "num_asteroids": self._count(EntityKind.ASTEROID),
            "num_projectiles": self._count(EntityKind.PROJECTILE_FRIENDLY),
            "shots": self._shots,
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            # arcade needs a display, import only when rendering
            from .window import AsteroidsWindow
            self._window = AsteroidsWindow(params=self.params, model=self.model, interactive=False)

        self._window.model = self.model
        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(
    render: bool = False,
    seed: int = 42,
    max_steps: Optional[int] = None,
    params: SimulationParams = DEFAULT_PARAMS,
) -> Dict[str, Any]:
    """Run a random episode and return its final info dict"""
    kwargs = {} if max_steps is None else {"max_steps": max_steps}
    env = AsteroidsEnv(render_mode="human" if render else None, params=params, **kwargs)
    env.action_space.seed(seed)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.3f} over {info['step']} steps, {info['shots']} shots")
    env.close()
    return info


if __name__ == "__main__":
    run_random_episode(render=False)
