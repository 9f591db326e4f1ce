# geometry/sphere.py
import math
from typing import Optional
from core.errors import ConfigurationError
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    A negative radius keeps the same surface but flips the normals, which
    turns a dielectric sphere into a hollow shell when nested in a positive one.
    """
    def __init__(self, center: Vector3, radius: float, material):
        if radius == 0:
            raise ConfigurationError("Sphere radius must be non-zero")
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        if a == 0:
            return None
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_d = math.sqrt(discriminant)
        # Near root first, the far one only when the near one is outside the window.
        for root in ((-half_b - sqrt_d) / a, (-half_b + sqrt_d) / a):
            if t_min < root < t_max:
                # Dividing by the signed radius flips the normal of a hollow shell inward.
                outward_normal = (ray.at(root) - self.center) / self.radius
                return HitRecord.from_outward(ray, root, outward_normal, self.material)
        return None

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius}, material={self.material!r})"
