# renderer/integrator.py
import math
import random
from core.ray import Ray
from core.vector import Color, Vector3
from geometry.hittable import Hittable

# Hits closer than this to a ray's origin are ignored so a scattered ray does
# not re-hit the surface it just left (shadow acne).
T_MIN = 0.001

SKY_HORIZON = Color(1.0, 1.0, 1.0)
SKY_ZENITH = Color(0.5, 0.7, 1.0)
BLACK = Color(0.0, 0.0, 0.0)


def sky_color(ray: Ray) -> Vector3:
    """
    Background gradient, white at the horizon blending to blue overhead.
    This is the only light source in the scene.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return SKY_HORIZON * (1.0 - t) + SKY_ZENITH * t


def ray_color(ray: Ray, world: Hittable, depth: int, rng=random, background=sky_color) -> Vector3:
    """
    Follows a ray through the scene and returns the light it carries back.

    At every bounce the nearest hit's material either scatters the ray, which
    multiplies the running attenuation by its albedo, or absorbs it. A ray
    that escapes picks up the background color. When the depth budget runs
    out the path is treated as absorbed, so depth <= 0 is always black.
    """
    attenuation = Color(1.0, 1.0, 1.0)
    for _ in range(depth):
        rec = world.hit(ray, T_MIN, math.inf)
        if rec is None:
            return attenuation * background(ray)

        scattered = rec.material.scatter(ray, rec, rng)
        if scattered is None:
            return BLACK

        ray, albedo = scattered
        attenuation = attenuation * albedo
    return BLACK
