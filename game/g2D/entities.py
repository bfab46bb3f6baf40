"""
Game entity dataclasses
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from .params import DEFAULT_PARAMS, SimulationParams
from .utils import Vector2, ZERO


class EntityKind(Enum):
    SHIP = "ship"
    PROJECTILE_FRIENDLY = "projectile_friendly"
    ASTEROID = "asteroid"
    # Reserved, nothing spawns these yet
    ENEMY = "enemy"
    PROJECTILE_HOSTILE = "projectile_hostile"


@dataclass(frozen=True)
class Movable:
    """Any simulated body with position, velocity and lifetime"""
    position: Vector2
    velocity: Vector2
    kind: EntityKind
    radius: float
    lifetime: Optional[float]  # ms left; None for infinite


def is_expired(movable: Movable) -> bool:
    """True when a finite lifetime has run out"""
    return movable.lifetime is not None and movable.lifetime <= 0


def spawn_movable(
    position: Vector2,
    velocity: Vector2,
    kind: EntityKind,
    params: SimulationParams = DEFAULT_PARAMS,
) -> Movable:
    """Create a movable with the radius and lifetime defaults of its kind"""
    if kind is EntityKind.SHIP:
        return Movable(position, velocity, kind, params.ship_radius, None)
    if kind is EntityKind.PROJECTILE_FRIENDLY:
        return Movable(position, velocity, kind, params.projectile_radius, params.fire_lifetime)
    if kind is EntityKind.ASTEROID:
        return Movable(position, velocity, kind, params.asteroid_radius, None)
    # Reserved kinds are inert and dead on arrival
    return Movable(position, velocity, kind, 0.0, 0.0)


def spawn_random_movable(
    kind: EntityKind,
    rng: np.random.Generator,
    params: SimulationParams = DEFAULT_PARAMS,
) -> Movable:
    """
    Spawn a movable at a random place in the map.

    Only asteroids are randomized: the position is drawn first, uniformly
    over the map, then the velocity, uniformly in [-asteroid_speed,
    asteroid_speed] per axis. Both draws advance ``rng`` so the next spawn
    continues from the resulting state. Other kinds come back inert without
    touching the generator.
    """
    if kind is not EntityKind.ASTEROID:
        return Movable(ZERO, ZERO, kind, 0.0, 0.0)

    x, y = rng.uniform((0.0, 0.0), (params.width, params.height))
    vx, vy = rng.uniform(-params.asteroid_speed, params.asteroid_speed, size=2)
    return spawn_movable(
        Vector2(float(x), float(y)),
        Vector2(float(vx), float(vy)),
        kind,
        params,
    )
