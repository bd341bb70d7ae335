"""Vector and point value types used throughout the renderer.

A ``Point`` is a position in world space and a ``Vector3`` is a direction
or displacement. Subtracting two points gives a vector, and adding a
vector to a point moves it.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector3:
    """3D direction/displacement with basic arithmetic helpers."""

    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> "Vector3":
        """Return the zero vector."""
        return cls(0.0, 0.0, 0.0)

    def dot(self, other: "Vector3") -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def sq_length(self) -> float:
        """Return the squared length of the vector."""
        return self.dot(self)

    def length(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(self.sq_length())

    def normalize(self) -> "Vector3":
        """Return a unit-length copy of the vector.

        Raises:
            ZeroDivisionError: if the vector has zero length.
        """
        inv = 1.0 / self.length()
        return Vector3(self.x * inv, self.y * inv, self.z * inv)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        """Return the difference between this vector and ``other``."""
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector3":
        """Return the negated vector."""
        return Vector3(-self.x, -self.y, -self.z)


@dataclass(frozen=True)
class Point:
    """Position in world space."""

    x: float
    y: float
    z: float

    @classmethod
    def origin(cls) -> "Point":
        """Return the world origin."""
        return cls(0.0, 0.0, 0.0)

    def __sub__(self, other: "Point") -> Vector3:
        """Return the vector from ``other`` to this point."""
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __add__(self, offset: Vector3) -> "Point":
        """Return this point moved by ``offset``."""
        return Point(self.x + offset.x, self.y + offset.y, self.z + offset.z)
