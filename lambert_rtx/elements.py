"""Renderable scene elements.

The set of primitive kinds is closed: ``Element`` is the union of
``Sphere`` and ``Plane``. Every kind provides ``intersect``,
``surface_normal``, ``color`` and ``albedo``; the module-level
``intersect`` and ``surface_normal`` functions dispatch over that set and
reject anything else.
"""

import math
from dataclasses import dataclass
from typing import Optional, Union

from lambert_rtx.color import Color
from lambert_rtx.ray import Ray
from lambert_rtx.vector import Point, Vector3

# Rays this close to parallel with a plane are treated as misses.
PLANE_EPSILON = 1e-6


@dataclass(frozen=True)
class Sphere:
    """Sphere primitive.

    Args:
        center: Centre of the sphere.
        radius: Radius of the sphere.
        color: Base (linear) color of the surface.
        albedo: Diffuse reflectance, conventionally in ``[0, 1]``.
    """

    center: Point
    radius: float
    color: Color
    albedo: float = 0.18

    def intersect(self, ray: Ray) -> Optional[float]:
        """Return the distance to the nearer intersection, or ``None``.

        The nearer root is returned even when it is negative, which
        happens when the ray starts inside the sphere.
        """
        to_center = self.center - ray.origin
        adj = to_center.dot(ray.direction)
        d2 = to_center.dot(to_center) - adj * adj
        radius2 = self.radius * self.radius
        if d2 > radius2:
            return None
        half_chord = math.sqrt(radius2 - d2)
        return min(adj - half_chord, adj + half_chord)

    def surface_normal(self, hit_point: Point) -> Vector3:
        """Return the outward unit normal at ``hit_point``."""
        return (hit_point - self.center).normalize()


@dataclass(frozen=True)
class Plane:
    """Infinite plane through ``origin``.

    ``normal`` must be unit length. It points away from the side that is
    visible, so a ray travelling along it hits the plane.
    """

    origin: Point
    normal: Vector3
    color: Color
    albedo: float = 0.18

    def intersect(self, ray: Ray) -> Optional[float]:
        """Return the distance to the plane, or ``None`` on a miss."""
        denom = self.normal.dot(ray.direction)
        if denom <= PLANE_EPSILON:
            return None
        distance = (self.origin - ray.origin).dot(self.normal) / denom
        if distance >= 0.0:
            return distance
        return None

    def surface_normal(self, hit_point: Point) -> Vector3:
        """Return the normal facing the incoming ray."""
        return -self.normal


Element = Union[Sphere, Plane]
ELEMENT_KINDS = (Sphere, Plane)


def _check_kind(element) -> None:
    if not isinstance(element, ELEMENT_KINDS):
        raise TypeError(f"unsupported scene element: {type(element).__name__}")


def intersect(element: Element, ray: Ray) -> Optional[float]:
    """Intersect ``ray`` with any supported element."""
    _check_kind(element)
    return element.intersect(ray)


def surface_normal(element: Element, hit_point: Point) -> Vector3:
    """Return the surface normal of ``element`` at ``hit_point``."""
    _check_kind(element)
    return element.surface_normal(hit_point)
