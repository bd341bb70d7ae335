"""Scene description: image size, camera field of view, elements and lights."""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from lambert_rtx.color import Color
from lambert_rtx.elements import ELEMENT_KINDS, Element
from lambert_rtx.errors import SceneError
from lambert_rtx.vector import Vector3


@dataclass(frozen=True)
class Light:
    """Directional light.

    ``direction`` is the direction the light travels, so the direction
    towards the light is its negation.
    """

    direction: Vector3
    color: Color
    intensity: float


@dataclass(frozen=True)
class Scene:
    """Everything needed to render one frame.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        fov: Field of view in degrees.
        elements: Elements tested against every primary ray.
        lights: Directional lights illuminating the elements.
        background: Color of pixels where no element is hit. ``None``
            leaves them transparent black.
    """

    width: int
    height: int
    fov: float
    elements: Tuple[Element, ...] = ()
    lights: Tuple[Light, ...] = ()
    background: Optional[Color] = None

    def __post_init__(self) -> None:
        # Accept any iterable but store tuples so the scene stays hashable.
        object.__setattr__(self, "elements", tuple(self.elements))
        object.__setattr__(self, "lights", tuple(self.lights))
        if self.width <= 0 or self.height <= 0:
            raise SceneError(f"image size must be positive, got {self.width}x{self.height}")
        if not 0.0 < self.fov < 180.0:
            raise SceneError(f"fov must be between 0 and 180 degrees, got {self.fov}")
        for element in self.elements:
            if not isinstance(element, ELEMENT_KINDS):
                raise SceneError(f"unsupported scene element: {type(element).__name__}")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @classmethod
    def compose(cls, scenes: Iterable["Scene"]) -> "Scene":
        """Merge several scenes into one.

        Width, height, fov and background come from the first scene; the
        elements and lights of all scenes are concatenated in order.

        Raises:
            SceneError: if ``scenes`` is empty or the image settings differ.
        """
        scenes = list(scenes)
        if not scenes:
            raise SceneError("cannot compose an empty list of scenes")
        first = scenes[0]
        elements = []
        lights = []
        for scene in scenes:
            if (scene.width, scene.height, scene.fov) != (first.width, first.height, first.fov):
                raise SceneError(
                    f"inconsistent scene settings: {scene.width}x{scene.height} fov {scene.fov} "
                    f"vs {first.width}x{first.height} fov {first.fov}"
                )
            elements.extend(scene.elements)
            lights.extend(scene.lights)
        return cls(first.width, first.height, first.fov, tuple(elements), tuple(lights), first.background)
