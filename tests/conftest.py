"""Pytest configuration and shared fixtures."""

import pytest

from lambert_rtx.color import Color
from lambert_rtx.elements import Plane, Sphere
from lambert_rtx.ray import Ray
from lambert_rtx.scene import Light, Scene
from lambert_rtx.vector import Point, Vector3


@pytest.fixture
def axis_ray():
    """Ray from the origin straight down -z."""
    return Ray(Point.origin(), Vector3(0.0, 0.0, -1.0))


@pytest.fixture
def green_sphere():
    return Sphere(Point(0.0, 0.0, -5.0), 1.0, Color(0.4, 1.0, 0.4), 0.18)


@pytest.fixture
def floor_plane():
    return Plane(Point(0.0, -2.0, 0.0), Vector3(0.0, -1.0, 0.0), Color(0.2, 0.2, 0.2), 0.18)


@pytest.fixture
def front_light():
    """Light travelling away from the camera, lighting faces that look at it."""
    return Light(Vector3(0.0, 0.0, -1.0), Color(1.0, 1.0, 1.0), 50.0)


@pytest.fixture
def make_scene(green_sphere, front_light):
    """Factory for a single-sphere scene of a given size."""
    def _make(width=3, height=3, fov=90.0, **kwargs):
        kwargs.setdefault("elements", [green_sphere])
        kwargs.setdefault("lights", [front_light])
        return Scene(width, height, fov, **kwargs)
    return _make
