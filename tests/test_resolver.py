"""Tests for nearest-hit resolution."""

import pytest

from lambert_rtx.color import Color
from lambert_rtx.elements import Sphere
from lambert_rtx.resolver import LinearScan, nearest_hit
from lambert_rtx.vector import Point

RED = Color(1.0, 0.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)


def test_selects_nearest_element(axis_ray):
    far = Sphere(Point(0.0, 0.0, -10.0), 1.0, BLUE)
    near = Sphere(Point(0.0, 0.0, -5.0), 1.0, RED)
    hit = nearest_hit(axis_ray, [far, near])
    assert hit.element is near
    assert hit.distance == pytest.approx(4.0)


def test_equal_distances_keep_first(axis_ray):
    first = Sphere(Point(0.0, 0.0, -5.0), 1.0, RED)
    second = Sphere(Point(0.0, 0.0, -5.0), 1.0, BLUE)
    assert nearest_hit(axis_ray, [first, second]).element is first
    assert nearest_hit(axis_ray, [second, first]).element is second


def test_no_hit(axis_ray):
    off_axis = Sphere(Point(0.0, 5.0, -5.0), 1.0, RED)
    assert nearest_hit(axis_ray, [off_axis]) is None
    assert nearest_hit(axis_ray, []) is None


def test_negative_distance_is_not_a_hit(axis_ray):
    enclosing = Sphere(Point.origin(), 10.0, BLUE)
    inner = Sphere(Point(0.0, 0.0, -5.0), 1.0, RED)
    assert nearest_hit(axis_ray, [enclosing]) is None
    assert nearest_hit(axis_ray, [enclosing, inner]).element is inner


def test_mixed_kinds(axis_ray, green_sphere, floor_plane):
    hit = nearest_hit(axis_ray, [floor_plane, green_sphere])
    assert hit.element is green_sphere


class TestLinearScan:

    def test_matches_nearest_hit(self, axis_ray, green_sphere, floor_plane):
        index = LinearScan([floor_plane, green_sphere])
        assert len(index) == 2
        assert index.nearest(axis_ray) == nearest_hit(axis_ray, [floor_plane, green_sphere])
