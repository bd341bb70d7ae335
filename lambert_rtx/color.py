"""Linear-light RGB colors and their conversion to display values."""

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

GAMMA = 2.2


def clamp(c: float, low: float = 0.0, high: float = 1.0) -> float:
    """Clamp a single channel value to ``[low, high]``."""
    if c > high:
        return high
    if c < low:
        return low
    return c


@dataclass(frozen=True)
class Color:
    """RGB color in linear light space.

    Channels are unbounded while shading and only clamped to ``[0, 1]``
    right before display conversion.
    """

    r: float
    g: float
    b: float

    @classmethod
    def from_display(cls, rgb: Sequence[int]) -> "Color":
        """Build a linear color from an 8-bit gamma-encoded triple."""
        r, g, b = (max(0, min(255, int(c))) / 255.0 for c in rgb)
        return cls(r ** GAMMA, g ** GAMMA, b ** GAMMA)

    def clamp(self) -> "Color":
        """Return a copy with every channel bounded to ``[0, 1]``."""
        return Color(clamp(self.r), clamp(self.g), clamp(self.b))

    def __mul__(self, other: Union["Color", float]) -> "Color":
        """Tint by another color or scale by a number."""
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        return Color(self.r * other, self.g * other, self.b * other)

    def __rmul__(self, scalar: float) -> "Color":
        return Color(self.r * scalar, self.g * scalar, self.b * scalar)

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)


def gamma_encode(linear: float) -> int:
    """Convert one linear channel to a truncated 8-bit display value."""
    return int(clamp(linear) ** (1.0 / GAMMA) * 255.0)


def to_display(color: Color, alpha: int = 255) -> Tuple[int, int, int, int]:
    """Return the gamma-encoded ``(r, g, b, a)`` pixel for ``color``.

    This is a lossy one-way conversion; it is only applied when writing
    pixels out.
    """
    c = color.clamp()
    return (gamma_encode(c.r), gamma_encode(c.g), gamma_encode(c.b), alpha)
