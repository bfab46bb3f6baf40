"""
Vector math and helpers for game mechanics
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass(frozen=True)
class Vector2:
    """2D vector value"""
    x: float = 0.0
    y: float = 0.0


ZERO = Vector2(0.0, 0.0)


def add(a: Vector2, b: Vector2) -> Vector2:
    """Component-wise sum of two vectors"""
    return Vector2(a.x + b.x, a.y + b.y)


def scale(v: Vector2, k: float) -> Vector2:
    """Multiply a vector by a scalar"""
    return Vector2(v.x * k, v.y * k)


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def clamp_per_axis(v: Vector2, max_abs: float) -> Vector2:
    """Clamp each axis independently to [-max_abs, max_abs].

    This is a square envelope: a diagonal vector may end up longer than
    max_abs.
    """
    return Vector2(clamp(v.x, -max_abs, max_abs), clamp(v.y, -max_abs, max_abs))


def wrap_coordinate(value: float, modulus: float) -> float:
    """Wrap a coordinate onto a toroidal axis of length ``modulus``.

    The integer part is reduced with a floor-based modulo and the fractional
    remainder of the input is added back, so wrap_coordinate(805, 800) == 5
    and wrap_coordinate(-0.25, 800) == 799.75.
    """
    whole = math.floor(value)
    return (whole % modulus) + abs(value - whole)


def wrap_degrees(angle: float) -> float:
    """Normalize an angle in degrees into [0, 360)"""
    wrapped = angle % 360.0
    # tiny negative inputs round up to exactly 360.0
    if wrapped >= 360.0:
        wrapped -= 360.0
    return wrapped


def heading(rotation_degrees: float) -> Vector2:
    """Unit vector the ship faces; 0 degrees points up (-y)"""
    rad = math.radians(rotation_degrees)
    return Vector2(math.sin(rad), -math.cos(rad))


def make_rng(seed: Optional[int]) -> np.random.Generator:
    """Create an explicitly owned random generator (no global seeding)"""
    return np.random.default_rng(seed)


def wrapped_delta(frm: float, to: float, modulus: float) -> float:
    """Shortest signed offset from ``frm`` to ``to`` on a toroidal axis,
    in [-modulus / 2, modulus / 2)"""
    half = modulus * 0.5
    return (to - frm + half) % modulus - half
