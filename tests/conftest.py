import pytest
import sys
import os

# Ensure project root is in sys.path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from game.g2D.control import Control
from game.g2D.entities import EntityKind, Movable, spawn_movable
from game.g2D.params import SimulationParams
from game.g2D.simulation import Model, ShipModel
from game.g2D.utils import Vector2, ZERO


@pytest.fixture
def params():
    """Round-numbered constants so expectations are easy to compute."""
    return SimulationParams(
        width=800.0,
        height=600.0,
        rotation_speed=0.1,
        acceleration=0.1,
        max_speed=0.4,
        fire_speed=0.5,
        fire_cooldown=250.0,
        fire_lifetime=1000.0,
        ship_radius=10.0,
        projectile_radius=2.0,
        asteroid_radius=40.0,
        asteroid_speed=0.05,
        asteroid_count=4,
    )


@pytest.fixture
def make_model(params):
    """Factory for a model with a ship at the map center."""
    def _make(
        rotation=0.0,
        velocity=ZERO,
        position=Vector2(400.0, 300.0),
        control=None,
        fire_cooldown=0.0,
        movables=(),
    ):
        ship = ShipModel(
            movable=spawn_movable(position, velocity, EntityKind.SHIP, params),
            rotation=rotation,
            control=control if control is not None else Control(),
            fire_cooldown=fire_cooldown,
        )
        return Model(ship=ship, movables=tuple(movables))
    return _make


@pytest.fixture
def projectile():
    """Factory for a friendly projectile with a given lifetime."""
    def _make(lifetime, position=Vector2(100.0, 100.0), velocity=Vector2(0.1, 0.0)):
        return Movable(position, velocity, EntityKind.PROJECTILE_FRIENDLY, 2.0, lifetime)
    return _make
