# scenes/loader.py
"""
Loads scene descriptions from JSON files.

A scene file declares its materials once, by name, and the objects refer to
them, so a material is shared by every sphere that uses it::

    {
      "camera": {"look_from": [13, 2, 3], "look_at": [0, 0, 0], "vfov": 20,
                 "aperture": 0.1, "focus_dist": 10},
      "materials": {
        "ground": {"type": "lambertian", "albedo": [0.5, 0.5, 0.5]},
        "mirror": {"type": "metal", "albedo": [0.7, 0.6, 0.5], "fuzz": 0.0},
        "glass": {"type": "dielectric", "refractive_index": 1.5}
      },
      "objects": [
        {"type": "sphere", "center": [0, -1000, 0], "radius": 1000, "material": "ground"}
      ]
    }
"""
import json
import logging
from pathlib import Path
from typing import Dict, Union

from core.config import CameraConfig
from core.errors import ConfigurationError
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.dielectric import Dielectric
from materials.lambertian import Lambertian
from materials.material import Material
from materials.metal import Metal
from scenes.scene import Scene

logger = logging.getLogger(__name__)

CAMERA_KEYS = ("look_from", "look_at", "vup", "vfov", "aperture", "focus_dist", "aspect_ratio")


def _vector(value, what: str) -> Vector3:
    if isinstance(value, str):
        raise ConfigurationError(f"{what} must be a list of 3 numbers, got {value!r}")
    try:
        x, y, z = (float(c) for c in value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{what} must be a list of 3 numbers, got {value!r}") from e
    return Vector3(x, y, z)


def _number(params: dict, key: str, what: str, default=None) -> float:
    value = params.get(key, default)
    if value is None:
        raise ConfigurationError(f"{what} is missing '{key}'")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{what}: '{key}' must be a number, got {value!r}") from e


def build_material(name: str, params: dict) -> Material:
    what = f"material {name!r}"
    if not isinstance(params, dict):
        raise ConfigurationError(f"{what} must be an object, got {params!r}")
    kind = params.get("type")
    if kind == "lambertian":
        return Lambertian(_vector(params.get("albedo"), f"{what} albedo"))
    if kind == "metal":
        return Metal(_vector(params.get("albedo"), f"{what} albedo"), _number(params, "fuzz", what, 0.0))
    if kind == "dielectric":
        return Dielectric(_number(params, "refractive_index", what))
    raise ConfigurationError(f"{what} has unknown type {kind!r}")


def build_camera(params: dict) -> CameraConfig:
    if not isinstance(params, dict):
        raise ConfigurationError(f"camera must be an object, got {params!r}")
    unknown = set(params) - set(CAMERA_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown camera keys: {sorted(unknown)}")
    kwargs = {}
    for key in ("look_from", "look_at", "vup"):
        if key in params:
            kwargs[key] = _vector(params[key], f"camera {key}")
    for key in ("vfov", "aperture", "focus_dist", "aspect_ratio"):
        if key in params:
            kwargs[key] = _number(params, key, "camera")
    return CameraConfig(**kwargs).validate()


def scene_from_dict(data: dict, name: str = "scene") -> Scene:
    if not isinstance(data, dict):
        raise ConfigurationError("A scene description must be a JSON object")

    material_specs = data.get("materials", {})
    if not isinstance(material_specs, dict):
        raise ConfigurationError(f"materials must be an object mapping names to materials, got {material_specs!r}")
    objects = data.get("objects", [])
    if not isinstance(objects, list):
        raise ConfigurationError(f"objects must be a list, got {objects!r}")

    materials: Dict[str, Material] = {
        mat_name: build_material(mat_name, mat_params)
        for mat_name, mat_params in material_specs.items()
    }

    world = HittableList()
    for i, obj in enumerate(objects):
        what = f"object #{i}"
        if not isinstance(obj, dict):
            raise ConfigurationError(f"{what} must be an object, got {obj!r}")
        if obj.get("type", "sphere") != "sphere":
            raise ConfigurationError(f"{what} has unsupported type {obj.get('type')!r}")
        mat_name = obj.get("material")
        if not isinstance(mat_name, str) or mat_name not in materials:
            raise ConfigurationError(f"{what} refers to unknown material {mat_name!r}")
        world.add(Sphere(_vector(obj.get("center"), f"{what} center"),
                         _number(obj, "radius", what),
                         materials[mat_name]))

    camera = build_camera(data.get("camera", {}))
    logger.info(f"Loaded scene {name!r}: {len(world)} objects, {len(materials)} materials")
    return Scene(name, world, camera)


def load_scene(path: Union[str, Path]) -> Scene:
    """
    Reads a JSON scene file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigurationError: If the file is not valid JSON or describes an invalid scene
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Scene file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Scene file {path} is not valid JSON: {e}") from e
    return scene_from_dict(data, name=path.stem)
