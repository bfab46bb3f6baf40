"""
Asteroids simulation core
-------------------------
- Immutable model: a ship plus an ordered tuple of other movables
- step(model, dt) advances everything by dt milliseconds
- update(model, event) folds control changes and frame ticks into the model

Per tick, in order:
1. rotate the ship while a rotate control is held
2. thrust along the heading, clamping each velocity axis to max_speed
3. fire if the cooldown has run out and shoot is held
4. decay finite lifetimes and drop expired movables
5. move the ship and the survivors, wrapping around the map edges

Turning, thrust and firing all read the previous rotation and velocity; the
ship then moves with its post-thrust velocity. The projectile spawned in a
tick is appended after the survivors and only starts moving and ageing next
tick.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Tuple, Union

import numpy as np

from .control import Control, ControlChange, Direction, apply_control_change
from .entities import EntityKind, Movable, is_expired, spawn_movable, spawn_random_movable
from .params import DEFAULT_PARAMS, SimulationParams
from .utils import Vector2, ZERO, add, clamp_per_axis, heading, scale, wrap_coordinate, wrap_degrees

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShipModel:
    """Player ship: pose, latched controls and fire cooldown"""
    movable: Movable
    rotation: float = 0.0  # degrees in [0, 360)
    control: Control = field(default_factory=Control)
    fire_cooldown: float = 0.0  # ms until the next shot is allowed


@dataclass(frozen=True)
class Model:
    """Whole game state; movables excludes the ship"""
    ship: ShipModel
    movables: Tuple[Movable, ...] = ()


@dataclass(frozen=True)
class Tick:
    """Frame event carrying elapsed milliseconds"""
    dt: float


@dataclass(frozen=True)
class ControlInput:
    """Control-change event from the input decoder"""
    change: ControlChange


Event = Union[Tick, ControlInput]


# ----------------------------
# Initialization
# ----------------------------

def init_model(rng: np.random.Generator, params: SimulationParams = DEFAULT_PARAMS) -> Model:
    """Centered, stationary ship and ``asteroid_count`` random asteroids"""
    center = Vector2(params.width * 0.5, params.height * 0.5)
    ship = ShipModel(movable=spawn_movable(center, ZERO, EntityKind.SHIP, params))
    asteroids = tuple(
        spawn_random_movable(EntityKind.ASTEROID, rng, params)
        for _ in range(params.asteroid_count)
    )
    return Model(ship=ship, movables=asteroids)


# ----------------------------
# Per-tick mechanics
# ----------------------------

def _rotate(rotation: float, control: Control, dt: float, params: SimulationParams) -> float:
    if control.rotate is Direction.LEFT:
        return wrap_degrees(rotation - params.rotation_speed * dt)
    if control.rotate is Direction.RIGHT:
        return wrap_degrees(rotation + params.rotation_speed * dt)
    return rotation


def _thrust(velocity: Vector2, rotation: float, control: Control, params: SimulationParams) -> Vector2:
    # No drag: without thrust the velocity carries over unchanged
    if not control.thrust:
        return velocity
    boosted = add(velocity, scale(heading(rotation), params.acceleration))
    return clamp_per_axis(boosted, params.max_speed)


def _integrate(movable: Movable, velocity: Vector2, dt: float, params: SimulationParams) -> Vector2:
    moved = add(movable.position, scale(velocity, dt))
    return Vector2(
        wrap_coordinate(moved.x, params.width),
        wrap_coordinate(moved.y, params.height),
    )


def _age(movable: Movable, dt: float) -> Movable:
    if movable.lifetime is None:
        return movable
    return replace(movable, lifetime=movable.lifetime - dt)


def step(model: Model, dt: float, params: SimulationParams = DEFAULT_PARAMS) -> Model:
    """
    Advance the model by ``dt`` milliseconds.

    Args:
        model: Current model, left untouched
        dt: Elapsed time in ms since the previous tick, >= 0
        params: Simulation constants in the same ms units

    Returns:
        The next model
    """
    if dt < 0:
        raise ValueError(f"dt must be non-negative, got {dt}")

    ship = model.ship
    body = ship.movable
    control = ship.control

    rotation = _rotate(ship.rotation, control, dt, params)
    velocity = _thrust(body.velocity, ship.rotation, control, params)

    spawned = []
    if ship.fire_cooldown == 0 and control.shoot:
        muzzle = add(body.velocity, scale(heading(ship.rotation), params.fire_speed))
        spawned.append(spawn_movable(body.position, muzzle, EntityKind.PROJECTILE_FRIENDLY, params))
        cooldown = params.fire_cooldown
        logger.debug("Fired projectile at (%.1f, %.1f)", body.position.x, body.position.y)
    else:
        cooldown = max(0.0, ship.fire_cooldown - dt)

    aged = [_age(m, dt) for m in model.movables]
    survivors = [m for m in aged if not is_expired(m)]
    if len(survivors) != len(aged):
        logger.debug("Pruned %d expired movables", len(aged) - len(survivors))

    moved = [replace(m, position=_integrate(m, m.velocity, dt, params)) for m in survivors]

    next_body = replace(body, position=_integrate(body, velocity, dt, params), velocity=velocity)
    next_ship = replace(ship, movable=next_body, rotation=rotation, fire_cooldown=cooldown)
    return Model(ship=next_ship, movables=tuple(moved + spawned))


def update(model: Model, event: Event, params: SimulationParams = DEFAULT_PARAMS) -> Model:
    """Fold a single driver event into the model"""
    if isinstance(event, ControlInput):
        control = apply_control_change(model.ship.control, event.change)
        return replace(model, ship=replace(model.ship, control=control))
    if isinstance(event, Tick):
        return step(model, event.dt, params)
    raise TypeError(f"Unknown event: {event!r}")
