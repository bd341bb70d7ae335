"""Frame compositor.

Every pixel is independent: ``render_pixel`` maps a pixel coordinate to a
display color, and ``render_pixels`` applies it to all coordinates through
any ``map``-compatible callable (the builtin ``map`` or an executor's
``map``). ``render`` writes the result into a Pillow image.
"""

import logging
import time
from functools import partial
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from PIL import Image

from lambert_rtx.camera import create_primary_ray
from lambert_rtx.color import to_display
from lambert_rtx.resolver import LinearScan
from lambert_rtx.scene import Scene
from lambert_rtx.shader import shade_hit

logger = logging.getLogger(__name__)

Pixel = Tuple[int, int, int, int]
Mapper = Callable[..., Iterable[Pixel]]

TRANSPARENT: Pixel = (0, 0, 0, 0)


def background_pixel(scene: Scene) -> Pixel:
    """Return the pixel written where no element is hit."""
    if scene.background is None:
        return TRANSPARENT
    return to_display(scene.background)


def render_pixel(scene: Scene, x: int, y: int, index: Optional[LinearScan] = None) -> Pixel:
    """Trace the primary ray through ``(x, y)`` and return its pixel value."""
    if index is None:
        index = LinearScan(scene.elements)
    ray = create_primary_ray(x, y, scene)
    hit = index.nearest(ray)
    if hit is None:
        return background_pixel(scene)
    return to_display(shade_hit(scene, ray, hit))


def pixel_coordinates(scene: Scene) -> Iterator[Tuple[int, int]]:
    """Yield every ``(x, y)`` of the frame in row-major order."""
    for y in range(scene.height):
        for x in range(scene.width):
            yield x, y


def _render_coordinate(scene: Scene, index: LinearScan, coordinate: Tuple[int, int]) -> Pixel:
    x, y = coordinate
    return render_pixel(scene, x, y, index)


def render_pixels(scene: Scene, mapper: Mapper = map, index: Optional[LinearScan] = None) -> List[Pixel]:
    """Return the pixels of the frame in row-major order."""
    if index is None:
        index = LinearScan(scene.elements)
    return list(mapper(partial(_render_coordinate, scene, index), pixel_coordinates(scene)))


def render(scene: Scene, mapper: Mapper = map) -> Image.Image:
    """Render ``scene`` into a new RGBA image of the scene's size."""
    logger.info(
        f"Rendering {scene.width}x{scene.height} frame with "
        f"{len(scene.elements)} element(s) and {len(scene.lights)} light(s)"
    )
    start = time.perf_counter()

    im = Image.new("RGBA", (scene.width, scene.height))
    im.putdata(render_pixels(scene, mapper))

    logger.info(f"Frame rendered in {time.perf_counter() - start:.3f}s")
    return im
