# core/ray.py
from core.vector import Point3, Vector3


class Ray:
    """A half-line P(t) = origin + t * direction. The direction is not normalized."""
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Point3, direction: Vector3):
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Point3:
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin!r}, direction={self.direction!r})"
