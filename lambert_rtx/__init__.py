"""Minimal offline ray tracer with Lambertian shading.

Casts one primary ray per pixel, finds the nearest sphere or plane, shades
it with directional lights and writes the gamma-encoded result into a
Pillow image.
"""

from lambert_rtx.camera import create_primary_ray
from lambert_rtx.color import BLACK, WHITE, Color, to_display
from lambert_rtx.elements import Element, Plane, Sphere
from lambert_rtx.errors import SceneError
from lambert_rtx.ray import Ray
from lambert_rtx.render import render, render_pixel, render_pixels
from lambert_rtx.resolver import Intersection, LinearScan, nearest_hit
from lambert_rtx.scene import Light, Scene
from lambert_rtx.shader import shade, shade_hit
from lambert_rtx.vector import Point, Vector3

__version__ = "0.1.0"

__all__ = [
    "BLACK",
    "WHITE",
    "Color",
    "Element",
    "Intersection",
    "Light",
    "LinearScan",
    "Plane",
    "Point",
    "Ray",
    "Scene",
    "SceneError",
    "Sphere",
    "Vector3",
    "create_primary_ray",
    "nearest_hit",
    "render",
    "render_pixel",
    "render_pixels",
    "shade",
    "shade_hit",
    "to_display",
]
