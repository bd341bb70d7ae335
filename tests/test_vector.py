"""Tests for the vector and point algebra."""

import math

import pytest

from lambert_rtx.vector import Point, Vector3


class TestVector3:

    @pytest.mark.parametrize("v", [
        Vector3(1.0, 0.0, 0.0),
        Vector3(3.0, 4.0, 12.0),
        Vector3(-0.001, 0.002, -0.0005),
        Vector3(1e6, -2e6, 3e6),
    ])
    def test_normalize_gives_unit_length(self, v):
        assert v.normalize().length() == pytest.approx(1.0, rel=1e-9)

    def test_normalize_keeps_direction(self):
        n = Vector3(0.0, 3.0, 4.0).normalize()
        assert n == Vector3(0.0, pytest.approx(0.6), pytest.approx(0.8))

    def test_normalize_zero_vector_raises(self):
        with pytest.raises(ZeroDivisionError):
            Vector3.zero().normalize()

    def test_length(self):
        assert Vector3(3.0, 4.0, 12.0).length() == 13.0
        assert Vector3(1.0, 1.0, 1.0).length() == pytest.approx(math.sqrt(3))

    def test_dot(self):
        assert Vector3(1.0, 2.0, 3.0).dot(Vector3(4.0, -5.0, 6.0)) == 12.0
        assert Vector3(1.0, 0.0, 0.0).dot(Vector3(0.0, 1.0, 0.0)) == 0.0

    def test_arithmetic(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(0.5, -1.0, 2.0)
        assert a - b == Vector3(0.5, 3.0, 1.0)
        assert a + b == Vector3(1.5, 1.0, 5.0)
        assert a * 2.0 == Vector3(2.0, 4.0, 6.0)
        assert 2.0 * a == a * 2.0
        assert -a == Vector3(-1.0, -2.0, -3.0)

    def test_is_immutable(self):
        v = Vector3(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            v.x = 5.0


class TestPoint:

    def test_point_minus_point_is_vector(self):
        d = Point(1.0, 2.0, 3.0) - Point(1.0, 0.0, -1.0)
        assert isinstance(d, Vector3)
        assert d == Vector3(0.0, 2.0, 4.0)

    def test_point_plus_vector_is_point(self):
        p = Point(1.0, 2.0, 3.0) + Vector3(0.0, 0.0, -3.0)
        assert isinstance(p, Point)
        assert p == Point(1.0, 2.0, 0.0)

    def test_origin(self):
        assert Point.origin() == Point(0.0, 0.0, 0.0)
