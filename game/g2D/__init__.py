"""2D Game module - Asteroids simulation"""

from .asteroids_env import AsteroidsEnv, run_random_episode
from .control import Control, ControlChange, Direction, apply_control_change, decode_key
from .entities import EntityKind, Movable, spawn_movable, spawn_random_movable
from .params import DEFAULT_PARAMS, SimulationParams
from .simulation import ControlInput, Model, ShipModel, Tick, init_model, step, update

__all__ = [
    'AsteroidsEnv', 'run_random_episode',
    'Control', 'ControlChange', 'Direction', 'apply_control_change', 'decode_key',
    'EntityKind', 'Movable', 'spawn_movable', 'spawn_random_movable',
    'DEFAULT_PARAMS', 'SimulationParams',
    'ControlInput', 'Model', 'ShipModel', 'Tick', 'init_model', 'step', 'update',
]
