"""Rays cast into the scene."""

from dataclasses import dataclass

from lambert_rtx.vector import Point, Vector3


@dataclass(frozen=True)
class Ray:
    """Ray with ``origin`` and normalized ``direction``."""

    origin: Point
    direction: Vector3

    def at(self, t: float) -> Point:
        """Return the point at distance ``t`` along the ray."""
        return self.origin + self.direction * t
