# geometry/hittable.py
from abc import ABC, abstractmethod
from typing import Optional
from core.vector import Point3, Vector3
from core.ray import Ray


class HitRecord:
    """
    Where a ray met a surface: the point, the ray parameter, the material and
    a unit normal that always faces the incoming ray. front_face tells which
    side was hit.
    """
    __slots__ = ("p", "normal", "t", "front_face", "material")

    def __init__(self, p: Point3 = None, normal: Vector3 = None,
                 t: float = 0.0, front_face: bool = True, material=None):
        self.p = p
        self.normal = normal
        self.t = t
        self.front_face = front_face
        self.material = material

    @classmethod
    def from_outward(cls, ray: Ray, t: float, outward_normal: Vector3, material) -> "HitRecord":
        rec = cls(p=ray.at(t), t=t, material=material)
        rec.set_face_normal(ray, outward_normal)
        return rec

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        # outward_normal must be unit length
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r}, "
                f"front_face={self.front_face})")


class Hittable(ABC):
    """Anything a ray can intersect."""

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """
        Returns the nearest intersection with t strictly inside (t_min, t_max),
        or None when the ray misses.
        """
