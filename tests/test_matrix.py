"""Tests for matrix helpers and hue normalization."""

import math

import pytest

from bigcolor.matrix import (
    D50_TO_D65_M,
    D65_TO_D50_M,
    WHITE_D50,
    WHITE_D65,
    adapt_xyz,
    constrain_angle,
    multiply_v3_m3x3,
)

IDENTITY = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


class TestConstrainAngle:
    """Hue wrapping into [0, 360)."""

    @pytest.mark.parametrize(
        "angle,expected",
        [(0, 0), (360, 0), (720, 0), (-30, 330), (725, 5), (-360, 0), (359.5, 359.5)],
    )
    def test_known_values(self, angle, expected):
        assert constrain_angle(angle) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "angle", [-720.5, -359.0, -90.0, -0.25, 0.0, 45.5, 359.75, 1080.0, 12345.678, -1e-15]
    )
    def test_range_and_period(self, angle):
        """Result lies in [0, 360) and is periodic in 360."""
        a = constrain_angle(angle)
        assert 0.0 <= a < 360.0
        assert constrain_angle(angle + 360) == pytest.approx(a, abs=1e-9)

    def test_tiny_negative_does_not_return_360(self):
        assert constrain_angle(-1e-15) == 0.0

    @pytest.mark.parametrize("angle", [math.nan, math.inf, -math.inf])
    def test_non_finite(self, angle):
        assert constrain_angle(angle) == 0.0


class TestMultiply:
    def test_identity(self):
        assert multiply_v3_m3x3((0.1, 0.2, 0.3), IDENTITY) == (0.1, 0.2, 0.3)

    def test_row_major(self):
        m = ((1.0, 2.0, 3.0), (0.0, 1.0, 0.0), (0.0, 0.0, 2.0))
        assert multiply_v3_m3x3((1.0, 1.0, 1.0), m) == (6.0, 1.0, 2.0)


class TestAdaptXyz:
    """Bradford chromatic adaptation."""

    def test_d65_white_maps_to_d50_white(self):
        adapted = adapt_xyz(WHITE_D65, WHITE_D65, WHITE_D50)
        for got, want in zip(adapted, WHITE_D50):
            assert got == pytest.approx(want, abs=1e-3)

    def test_round_trip(self):
        xyz = (0.4124, 0.2126, 0.0193)
        there = adapt_xyz(xyz, WHITE_D65, WHITE_D50)
        back = adapt_xyz(there, WHITE_D50, WHITE_D65)
        for got, want in zip(back, xyz):
            assert got == pytest.approx(want, abs=1e-6)

    def test_same_white_is_identity(self):
        xyz = (0.3, 0.4, 0.5)
        assert adapt_xyz(xyz, WHITE_D50, WHITE_D50) == xyz

    def test_unsupported_pair_is_identity(self):
        xyz = (0.3, 0.4, 0.5)
        assert adapt_xyz(xyz, (1.0, 1.0, 1.0), WHITE_D50) == xyz

    def test_matrices_are_inverse(self):
        for col in range(3):
            unit = tuple(1.0 if i == col else 0.0 for i in range(3))
            back = multiply_v3_m3x3(multiply_v3_m3x3(unit, D65_TO_D50_M), D50_TO_D65_M)
            for got, want in zip(back, unit):
                assert got == pytest.approx(want, abs=1e-6)
