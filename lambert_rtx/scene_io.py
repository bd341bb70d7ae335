"""
Scene files
Loads and saves scenes as JSON documents of the form::

    {
        "width": 800, "height": 600, "fov": 90,
        "background": [0.2, 0.2, 0.2],
        "elements": [
            {"type": "sphere", "center": [0, 0, -5], "radius": 1,
             "color": [0.4, 1.0, 0.4], "albedo": 0.18},
            {"type": "plane", "origin": [0, -2, 0], "normal": [0, -1, 0],
             "color": [0.2, 0.2, 0.2], "albedo": 0.18}
        ],
        "lights": [
            {"direction": [-0.25, -1, -1], "color": [1, 1, 1], "intensity": 20}
        ]
    }
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from lambert_rtx.color import Color
from lambert_rtx.elements import Element, Plane, Sphere
from lambert_rtx.errors import SceneError
from lambert_rtx.scene import Light, Scene
from lambert_rtx.vector import Point, Vector3

logger = logging.getLogger(__name__)


def _require(data: Dict[str, Any], key: str, where: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise SceneError(f"{where}: missing key '{key}'") from None


def _number(data: Dict[str, Any], key: str, where: str, cast=float, default: Any = None):
    if default is None or key in data:
        value = _require(data, key, where)
    else:
        value = default
    try:
        return cast(value)
    except (TypeError, ValueError):
        raise SceneError(f"{where}: '{key}' must be a number, got {value!r}") from None


def _mapping(data: Any, where: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise SceneError(f"{where}: expected an object, got {data!r}")
    return data


def _entries(data: Dict[str, Any], key: str) -> list:
    entries = data.get(key, [])
    if not isinstance(entries, list):
        raise SceneError(f"scene: '{key}' must be a list, got {entries!r}")
    return entries


def _triple(value: Any, key: str, where: str):
    try:
        x, y, z = (float(c) for c in value)
    except (TypeError, ValueError):
        raise SceneError(f"{where}: '{key}' must be a list of three numbers, got {value!r}") from None
    return x, y, z


def _point(data, key, where) -> Point:
    return Point(*_triple(_require(data, key, where), key, where))


def _vector(data, key, where) -> Vector3:
    return Vector3(*_triple(_require(data, key, where), key, where))


def _color(data, key, where) -> Color:
    return Color(*_triple(_require(data, key, where), key, where))


def element_from_dict(data: Dict[str, Any], where: str = "element") -> Element:
    data = _mapping(data, where)
    kind = str(_require(data, "type", where)).lower()
    albedo = _number(data, "albedo", where, default=0.18)
    if kind == "sphere":
        return Sphere(
            center=_point(data, "center", where),
            radius=_number(data, "radius", where),
            color=_color(data, "color", where),
            albedo=albedo,
        )
    if kind == "plane":
        try:
            normal = _vector(data, "normal", where).normalize()
        except ZeroDivisionError:
            raise SceneError(f"{where}: plane normal must not be zero") from None
        return Plane(
            origin=_point(data, "origin", where),
            normal=normal,
            color=_color(data, "color", where),
            albedo=albedo,
        )
    raise SceneError(f"{where}: unknown element type '{kind}'")


def light_from_dict(data: Dict[str, Any], where: str = "light") -> Light:
    data = _mapping(data, where)
    return Light(
        direction=_vector(data, "direction", where),
        color=_color(data, "color", where),
        intensity=_number(data, "intensity", where),
    )


def scene_from_dict(data: Dict[str, Any], defaults: Optional[Dict[str, Any]] = None) -> Scene:
    """Build a ``Scene`` from a decoded JSON document.

    Args:
        data: The document.
        defaults: Values for ``width``, ``height`` and ``fov`` used when the
            document does not give them.
    """
    data = _mapping(data, "scene")
    settings = dict(defaults or {})
    settings.update({k: data[k] for k in ("width", "height", "fov") if k in data})

    elements = tuple(
        element_from_dict(e, f"elements[{i}]") for i, e in enumerate(_entries(data, "elements"))
    )
    lights = tuple(light_from_dict(light, f"lights[{i}]") for i, light in enumerate(_entries(data, "lights")))
    background = _color(data, "background", "scene") if "background" in data else None

    scene = Scene(
        width=_number(settings, "width", "scene", cast=int),
        height=_number(settings, "height", "scene", cast=int),
        fov=_number(settings, "fov", "scene"),
        elements=elements,
        lights=lights,
        background=background,
    )
    logger.debug(f"Built scene with {len(elements)} element(s) and {len(lights)} light(s)")
    return scene


def _element_to_dict(element: Element) -> Dict[str, Any]:
    if isinstance(element, Sphere):
        return {
            "type": "sphere",
            "center": [element.center.x, element.center.y, element.center.z],
            "radius": element.radius,
            "color": [element.color.r, element.color.g, element.color.b],
            "albedo": element.albedo,
        }
    if isinstance(element, Plane):
        return {
            "type": "plane",
            "origin": [element.origin.x, element.origin.y, element.origin.z],
            "normal": [element.normal.x, element.normal.y, element.normal.z],
            "color": [element.color.r, element.color.g, element.color.b],
            "albedo": element.albedo,
        }
    raise TypeError(f"unsupported scene element: {type(element).__name__}")


def scene_to_dict(scene: Scene) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "width": scene.width,
        "height": scene.height,
        "fov": scene.fov,
        "elements": [_element_to_dict(e) for e in scene.elements],
        "lights": [
            {
                "direction": [light.direction.x, light.direction.y, light.direction.z],
                "color": [light.color.r, light.color.g, light.color.b],
                "intensity": light.intensity,
            }
            for light in scene.lights
        ],
    }
    if scene.background is not None:
        data["background"] = [scene.background.r, scene.background.g, scene.background.b]
    return data


def load_scene(path: Union[str, Path], defaults: Optional[Dict[str, Any]] = None) -> Scene:
    """Read a scene from a JSON file."""
    logger.debug(f"Loading scene from: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SceneError(f"{path}: invalid JSON ({e})") from e
    if not isinstance(data, dict):
        raise SceneError(f"{path}: expected a JSON object at the top level")
    return scene_from_dict(data, defaults)


def save_scene(scene: Scene, path: Union[str, Path]) -> None:
    """Write ``scene`` to a JSON file."""
    logger.debug(f"Saving scene to: {path}")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(scene_to_dict(scene), f, indent=2)
