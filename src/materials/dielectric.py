# src/materials/dielectric.py
import random
from typing import Tuple
from core.errors import ConfigurationError
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, refract, schlick
from geometry.hittable import HitRecord
from materials.material import Material

class Dielectric(Material):
    """
    Clear refractive material such as glass or water.

    Each interaction either reflects or refracts; the choice is random and
    weighted by Schlick's reflectance, except under total internal reflection
    where the ray always reflects.
    """
    def __init__(self, ref_idx: float):
        if ref_idx <= 0:
            raise ConfigurationError(f"Refractive index must be > 0, got {ref_idx}")
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Tuple[Ray, Vector3]:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Entering the material from outside or leaving it
        ni_over_nt = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)

        refracted = refract(unit_direction, rec.normal, ni_over_nt)
        if refracted is None or schlick(cos_theta, ni_over_nt) > rng.random():
            return Ray(rec.p, reflect(unit_direction, rec.normal)), attenuation

        return Ray(rec.p, refracted), attenuation

    def __repr__(self) -> str:
        return f"Dielectric(ref_idx={self.ref_idx})"
