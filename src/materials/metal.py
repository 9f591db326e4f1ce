# materials/metal.py
import random
from typing import Optional, Tuple
from core.errors import ConfigurationError
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material

class Metal(Material):
    """
    Reflective material. Fuzz in [0, 1] perturbs the mirror direction;
    0 is a perfect mirror.
    """
    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        if fuzz < 0:
            raise ConfigurationError(f"Metal fuzz must be >= 0, got {fuzz}")
        self.albedo = albedo
        self.fuzz = min(fuzz, 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Optional[Tuple[Ray, Vector3]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        if self.fuzz > 0:
            reflected = reflected + random_in_unit_sphere(rng) * self.fuzz
        scattered = Ray(rec.p, reflected)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.albedo

        return None  # Absorb the ray if it does not scatter forward

    def __repr__(self) -> str:
        return f"Metal(albedo={self.albedo!r}, fuzz={self.fuzz})"
