"""Nearest-hit resolution between a ray and the scene's elements."""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from lambert_rtx.elements import Element, intersect
from lambert_rtx.ray import Ray


@dataclass(frozen=True)
class Intersection:
    """Stores ray intersection information."""

    distance: float
    element: Element


def nearest_hit(ray: Ray, elements: Iterable[Element]) -> Optional[Intersection]:
    """Return the closest non-negative intersection of ``ray``, if any.

    Ties keep the element that comes first in ``elements``.
    """
    nearest = None
    for element in elements:
        distance = intersect(element, ray)
        if distance is None or distance < 0.0:
            continue
        if nearest is None or distance < nearest.distance:
            nearest = Intersection(distance, element)
    return nearest


class LinearScan:
    """Tests every element against every ray.

    Anything exposing ``nearest(ray)`` can stand in for this class, e.g. a
    bounding-volume hierarchy for large scenes.
    """

    def __init__(self, elements: Sequence[Element]) -> None:
        self.elements = tuple(elements)

    def __len__(self) -> int:
        """Return the number of indexed elements."""
        return len(self.elements)

    def nearest(self, ray: Ray) -> Optional[Intersection]:
        """Return the closest hit of ``ray`` among the indexed elements."""
        return nearest_hit(ray, self.elements)
