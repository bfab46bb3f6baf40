"""
Tuning constants for the simulation
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from game.configs.asteroids_config import SIM_CONFIG


@dataclass(frozen=True)
class SimulationParams:
    """Fixed simulation constants.

    Time is in milliseconds throughout: velocities are px/ms, rotation speed
    is deg/ms, cooldown and lifetimes are ms. ``acceleration`` is added once
    per thrusting tick regardless of the tick length.
    """
    width: float = 800.0
    height: float = 600.0
    rotation_speed: float = 0.2
    acceleration: float = 0.004
    max_speed: float = 0.4
    fire_speed: float = 0.5
    fire_cooldown: float = 250.0
    fire_lifetime: float = 1200.0
    ship_radius: float = 12.0
    projectile_radius: float = 2.0
    asteroid_radius: float = 40.0
    asteroid_speed: float = 0.05
    asteroid_count: int = 5

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Map dimensions must be positive, got {self.width}x{self.height}")
        for name in ("ship_radius", "projectile_radius", "asteroid_radius"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")
        if self.max_speed < 0 or self.fire_cooldown < 0 or self.asteroid_count < 0:
            raise ValueError("max_speed, fire_cooldown and asteroid_count must be >= 0")

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None) -> "SimulationParams":
        """Build params from a SIM_CONFIG-style dict, ignoring unknown keys"""
        if config is None:
            config = SIM_CONFIG
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config.items() if k in known})


DEFAULT_PARAMS = SimulationParams.from_config()
