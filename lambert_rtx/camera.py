"""Primary ray generation for a fixed pin-hole camera.

The camera sits at the world origin looking down -z with the sensor plane
one unit in front of it. There is no camera transform.
"""

import math

from lambert_rtx.ray import Ray
from lambert_rtx.scene import Scene
from lambert_rtx.vector import Point, Vector3


def create_primary_ray(x: int, y: int, scene: Scene) -> Ray:
    """Return the ray through the centre of pixel ``(x, y)``."""
    fov_adjustment = math.tan(math.radians(scene.fov) / 2.0)
    sensor_x = (((x + 0.5) / scene.width) * 2.0 - 1.0) * scene.aspect_ratio * fov_adjustment
    sensor_y = (1.0 - ((y + 0.5) / scene.height) * 2.0) * fov_adjustment
    return Ray(Point.origin(), Vector3(sensor_x, sensor_y, -1.0).normalize())
