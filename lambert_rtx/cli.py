"""Command-line entry point: render a scene file (or the demo scene) to an image."""

import argparse
import logging
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from pathlib import Path
from typing import List, Optional

from lambert_rtx import config
from lambert_rtx.color import Color
from lambert_rtx.elements import Plane, Sphere
from lambert_rtx.errors import SceneError
from lambert_rtx.logging_config import setup_logging
from lambert_rtx.render import render
from lambert_rtx.scene import Light, Scene
from lambert_rtx.scene_io import load_scene
from lambert_rtx.vector import Point, Vector3

logger = logging.getLogger(__name__)


def demo_scene(width: int = config.WIDTH, height: int = config.HEIGHT, fov: float = config.FOV) -> Scene:
    """Return a small scene with two spheres on a floor in front of a wall."""
    grey = Color.from_display((100, 100, 100))

    return Scene(
        width=width,
        height=height,
        fov=fov,
        elements=(
            Sphere(Point(-2.0, 2.0, -12.0), 4.0, Color.from_display((120, 120, 120)), 0.5),
            Sphere(Point(-3.0, 1.0, -5.0), 0.5, Color.from_display((50, 200, 100)), 0.5),
            Plane(Point(0.0, -6.0, 0.0), Vector3(0.0, -1.0, 0.0), grey, 0.3),
            Plane(Point(0.0, 0.0, -70.0), Vector3(0.0, 0.0, -1.0), grey, 0.3),
        ),
        lights=(
            Light(Vector3(-0.25, -1.0, -1.0), Color(1.0, 1.0, 1.0), 20.0),
        ),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lambert-rtx", description=__doc__)
    parser.add_argument("--scene", type=Path, help="JSON scene file (default: built-in demo scene)")
    parser.add_argument("--output", type=Path, default=config.OUTPUT_DIR / "render.png",
                        help="image file to write (format from extension)")
    parser.add_argument("--width", type=int, help="override image width")
    parser.add_argument("--height", type=int, help="override image height")
    parser.add_argument("--fov", type=float, help="override field of view in degrees")
    parser.add_argument("--workers", type=int, default=1, help="processes used to evaluate pixels")
    parser.add_argument("--log-level", default=config.LOG_LEVEL)
    parser.add_argument("--log-file", help="also write logs to this file")
    return parser


def build_scene(args: argparse.Namespace) -> Scene:
    """Return the scene described by the parsed command line."""
    overrides = {k: v for k, v in (("width", args.width), ("height", args.height), ("fov", args.fov))
                 if v is not None}
    defaults = {"width": config.WIDTH, "height": config.HEIGHT, "fov": config.FOV}
    defaults.update(overrides)

    if args.scene is None:
        return demo_scene(**defaults)

    scene = load_scene(args.scene, defaults)
    if overrides:
        scene = Scene(
            width=overrides.get("width", scene.width),
            height=overrides.get("height", scene.height),
            fov=overrides.get("fov", scene.fov),
            elements=scene.elements,
            lights=scene.lights,
            background=scene.background,
        )
    return scene


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        scene = build_scene(args)
    except SceneError as e:
        logger.error(f"Invalid scene: {e}")
        return 1

    if args.workers > 1:
        # One row per task keeps the inter-process overhead small.
        with ProcessPoolExecutor(max_workers=args.workers) as pool:
            im = render(scene, partial(pool.map, chunksize=scene.width))
    else:
        im = render(scene)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    im.save(args.output)
    logger.info(f"Saved image to: {args.output}")
    return 0
