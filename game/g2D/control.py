"""
Latched control state and key decoding
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Hashable, Optional


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Control:
    """Which inputs are currently held; persists across frames"""
    rotate: Optional[Direction] = None
    thrust: bool = False
    shield: bool = False
    shoot: bool = False


class ControlChange(Enum):
    NONE = "none"  # no-op, e.g. an unbound key
    ROTATE_LEFT = "rotate_left"
    ROTATE_RIGHT = "rotate_right"
    ROTATE_NONE = "rotate_none"
    SHIELD_ON = "shield_on"
    SHIELD_OFF = "shield_off"
    THRUST_ON = "thrust_on"
    THRUST_OFF = "thrust_off"
    SHOOT_ON = "shoot_on"
    SHOOT_OFF = "shoot_off"


# change -> (field, value)
_CHANGES = {
    ControlChange.ROTATE_LEFT: ("rotate", Direction.LEFT),
    ControlChange.ROTATE_RIGHT: ("rotate", Direction.RIGHT),
    ControlChange.ROTATE_NONE: ("rotate", None),
    ControlChange.SHIELD_ON: ("shield", True),
    ControlChange.SHIELD_OFF: ("shield", False),
    ControlChange.THRUST_ON: ("thrust", True),
    ControlChange.THRUST_OFF: ("thrust", False),
    ControlChange.SHOOT_ON: ("shoot", True),
    ControlChange.SHOOT_OFF: ("shoot", False),
}


def apply_control_change(control: Control, change: ControlChange) -> Control:
    """Replace the one field ``change`` targets, leaving the rest untouched"""
    if change is ControlChange.NONE:
        return control
    field, value = _CHANGES[change]
    return replace(control, **{field: value})


# axis -> (change on press, change on release)
_AXES = {
    "left": (ControlChange.ROTATE_LEFT, ControlChange.ROTATE_NONE),
    "right": (ControlChange.ROTATE_RIGHT, ControlChange.ROTATE_NONE),
    "thrust": (ControlChange.THRUST_ON, ControlChange.THRUST_OFF),
    "shoot": (ControlChange.SHOOT_ON, ControlChange.SHOOT_OFF),
    "shield": (ControlChange.SHIELD_ON, ControlChange.SHIELD_OFF),
}


def decode_key(key: Hashable, pressed: bool, keymap: Dict[Hashable, str]) -> ControlChange:
    """
    Map a raw key identifier to a control change.

    Args:
        key: Key identifier as delivered by the windowing layer
        pressed: True on key down, False on key up
        keymap: Key identifier -> axis name (left, right, thrust, shoot, shield)

    Unbound keys and unknown axis names decode to ControlChange.NONE.
    """
    axis = keymap.get(key)
    if axis not in _AXES:
        return ControlChange.NONE
    on_press, on_release = _AXES[axis]
    return on_press if pressed else on_release
