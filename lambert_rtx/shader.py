"""Lambertian (diffuse-only) shading."""

import math

from lambert_rtx.color import BLACK, Color
from lambert_rtx.elements import surface_normal
from lambert_rtx.ray import Ray
from lambert_rtx.resolver import Intersection
from lambert_rtx.scene import Light, Scene
from lambert_rtx.vector import Point, Vector3


def diffuse(normal: Vector3, light: Light) -> float:
    """Return the light power arriving at a surface with ``normal``."""
    to_light = -light.direction.normalize()
    return max(0.0, normal.dot(to_light)) * light.intensity


def shade(normal: Vector3, albedo: float, color: Color, light: Light, hit_point: Point) -> Color:
    """Return the clamped color reflected towards the camera by one light.

    No shadow test is made; ``hit_point`` is accepted so a future
    occlusion test has it available.
    """
    light_power = diffuse(normal, light)
    light_reflected = albedo / math.pi
    return (color * light.color * light_power * light_reflected).clamp()


def shade_hit(scene: Scene, ray: Ray, hit: Intersection) -> Color:
    """Sum the contribution of every light in ``scene`` at ``hit``."""
    hit_point = ray.at(hit.distance)
    element = hit.element
    normal = surface_normal(element, hit_point)
    total = BLACK
    for light in scene.lights:
        total = total + shade(normal, element.albedo, element.color, light, hit_point)
    return total.clamp()
