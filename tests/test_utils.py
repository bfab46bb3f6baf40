"""
Tests for vector math helpers.
"""

import math

import pytest

from game.g2D.utils import (
    Vector2,
    add,
    clamp,
    clamp_per_axis,
    heading,
    make_rng,
    scale,
    wrap_coordinate,
    wrap_degrees,
    wrapped_delta,
)


class TestArithmetic:
    """Tests for add/scale/clamp."""

    def test_add_and_scale(self):
        assert add(Vector2(1.0, 2.0), Vector2(3.0, -4.0)) == Vector2(4.0, -2.0)
        assert scale(Vector2(1.5, -2.0), 2.0) == Vector2(3.0, -4.0)

    def test_clamp(self):
        assert clamp(5.0, 0.0, 1.0) == 1.0
        assert clamp(-5.0, 0.0, 1.0) == 0.0
        assert clamp(0.5, 0.0, 1.0) == 0.5

    def test_clamp_per_axis_is_independent(self):
        """Each axis is clamped on its own, not the vector length."""
        assert clamp_per_axis(Vector2(1.0, -2.0), 0.5) == Vector2(0.5, -0.5)
        assert clamp_per_axis(Vector2(0.2, -0.3), 0.5) == Vector2(0.2, -0.3)

    def test_clamp_per_axis_allows_long_diagonals(self):
        clamped = clamp_per_axis(Vector2(10.0, 10.0), 1.0)
        assert math.hypot(clamped.x, clamped.y) == pytest.approx(math.sqrt(2.0))


class TestWrapCoordinate:
    """Tests for toroidal coordinate wrapping."""

    def test_whole_number_past_edge(self):
        assert wrap_coordinate(805, 800) == 5

    def test_inside_map_unchanged(self):
        assert wrap_coordinate(799.5, 800) == 799.5
        assert wrap_coordinate(0.0, 800) == 0.0

    def test_negative_uses_floor(self):
        assert wrap_coordinate(-0.25, 800) == 799.75
        assert wrap_coordinate(-800.0, 800) == 0.0

    def test_exact_modulus_wraps_to_zero(self):
        assert wrap_coordinate(800.0, 800) == 0.0

    def test_fraction_can_overshoot_fractional_modulus(self):
        """The fractional remainder is re-added after the integer modulo."""
        wrapped = wrap_coordinate(10.9, 10.5)
        assert wrapped == pytest.approx(10.9)
        assert wrapped > 10.5


class TestAngles:
    """Tests for degree wrapping and headings."""

    @pytest.mark.parametrize("angle,expected", [(370.0, 10.0), (-90.0, 270.0), (360.0, 0.0), (0.0, 0.0)])
    def test_wrap_degrees(self, angle, expected):
        assert wrap_degrees(angle) == pytest.approx(expected)

    def test_tiny_negative_stays_below_360(self):
        wrapped = wrap_degrees(-1e-20)
        assert 0.0 <= wrapped < 360.0

    def test_heading_zero_points_up(self):
        assert heading(0.0) == Vector2(0.0, -1.0)

    def test_heading_ninety_points_right(self):
        h = heading(90.0)
        assert h.x == pytest.approx(1.0)
        assert h.y == pytest.approx(0.0, abs=1e-12)


class TestRng:
    def test_same_seed_same_stream(self):
        assert make_rng(3).uniform(size=4).tolist() == make_rng(3).uniform(size=4).tolist()


class TestWrappedDelta:
    """Tests for the shortest signed offset on a wrapped axis."""

    @pytest.mark.parametrize("frm,to,expected", [
        (5.0, 795.0, -10.0),
        (795.0, 5.0, 10.0),
        (5.0, 205.0, 200.0),
        (100.0, 100.0, 0.0),
        (0.0, 400.0, -400.0),
    ])
    def test_offsets(self, frm, to, expected):
        assert wrapped_delta(frm, to, 800.0) == pytest.approx(expected)
