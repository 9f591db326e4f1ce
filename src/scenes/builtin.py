# scenes/builtin.py
import logging
import random

from core.config import CameraConfig
from core.errors import ConfigurationError
from core.vector import Color, Point3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.dielectric import Dielectric
from materials.lambertian import Lambertian
from materials.metal import Metal
from scenes.scene import Scene

logger = logging.getLogger(__name__)

GLASS_INDEX = 1.5


def default_scene() -> Scene:
    """
    Three spheres on a large ground sphere: diffuse in the middle, fuzzy metal
    on the right and a hollow glass bubble on the left.
    """
    glass = Dielectric(GLASS_INDEX)
    world = HittableList([
        Sphere(Point3(0.0, -100.5, -1.0), 100.0, Lambertian(Color(0.8, 0.8, 0.0))),
        Sphere(Point3(0.0, 0.0, -1.0), 0.5, Lambertian(Color(0.1, 0.2, 0.5))),
        Sphere(Point3(1.0, 0.0, -1.0), 0.5, Metal(Color(0.8, 0.6, 0.2), 0.2)),
        # The inner shell with a negative radius shares the material and makes the sphere hollow.
        Sphere(Point3(-1.0, 0.0, -1.0), 0.5, glass),
        Sphere(Point3(-1.0, 0.0, -1.0), -0.45, glass),
    ])

    look_from = Point3(-2.0, 2.0, 1.0)
    look_at = Point3(0.0, 0.0, -1.0)
    camera = CameraConfig(
        look_from=look_from,
        look_at=look_at,
        vup=Point3(0.0, 1.0, 0.0),
        vfov=20.0,
        aperture=0.1,
        focus_dist=(look_from - look_at).length(),
    )
    return Scene("default", world, camera)


def random_scene(seed: int = 0) -> Scene:
    """
    The classic final scene: a field of small random spheres around three
    large ones. The same seed always builds the same scene.
    """
    rng = random.Random(seed)
    ground = Lambertian(Color(0.5, 0.5, 0.5))
    glass = Dielectric(GLASS_INDEX)

    world = HittableList()
    world.add(Sphere(Point3(0.0, -1000.0, 0.0), 1000.0, ground))

    clearance_point = Point3(4.0, 0.2, 0.0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - clearance_point).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = Color(rng.random() * rng.random(),
                               rng.random() * rng.random(),
                               rng.random() * rng.random())
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                albedo = Color(rng.uniform(0.5, 1.0), rng.uniform(0.5, 1.0), rng.uniform(0.5, 1.0))
                material = Metal(albedo, rng.uniform(0.0, 0.5))
            else:
                material = glass
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Point3(0.0, 1.0, 0.0), 1.0, glass))
    world.add(Sphere(Point3(-4.0, 1.0, 0.0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4.0, 1.0, 0.0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))

    camera = CameraConfig(
        look_from=Point3(13.0, 2.0, 3.0),
        look_at=Point3(0.0, 0.0, 0.0),
        vup=Point3(0.0, 1.0, 0.0),
        vfov=20.0,
        aperture=0.1,
        focus_dist=10.0,
    )
    logger.debug(f"Built random scene with {len(world)} spheres (seed {seed})")
    return Scene("random", world, camera)


BUILTIN_SCENES = {
    "default": default_scene,
    "random": random_scene,
}


def get_builtin_scene(name: str) -> Scene:
    try:
        builder = BUILTIN_SCENES[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown scene {name!r}; built-in scenes are {sorted(BUILTIN_SCENES)}") from None
    return builder()
