# core/vector.py
import math

# Lengths below this are treated as zero by normalize() and near_zero().
NEAR_ZERO = 1e-8


class Vector3:
    """
    An immutable 3D vector used for points, directions and RGB colors.

    All arithmetic returns new instances. Multiplying two vectors is
    component-wise, which is how colors get modulated by an albedo.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Vector3 is immutable")

    def __reduce__(self):
        return (Vector3, (self.x, self.y, self.z))

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> "Vector3":
        """
        Returns the unit vector in the same direction.

        A vector shorter than NEAR_ZERO has no direction; the zero vector is
        returned so no NaN or Inf can leak into the caller.
        """
        l = self.length()
        if l < NEAR_ZERO:
            return Vector3(0, 0, 0)
        return self / l

    def near_zero(self) -> bool:
        return abs(self.x) < NEAR_ZERO and abs(self.y) < NEAR_ZERO and abs(self.z) < NEAR_ZERO

    def isclose(self, other: "Vector3", abs_tol: float = 1e-9) -> bool:
        return (math.isclose(self.x, other.x, abs_tol=abs_tol) and
                math.isclose(self.y, other.y, abs_tol=abs_tol) and
                math.isclose(self.z, other.z, abs_tol=abs_tol))

    @classmethod
    def from_sequence(cls, values) -> "Vector3":
        x, y, z = values
        return cls(x, y, z)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


# The same type doubles as a point and as an RGB color.
Point3 = Vector3
Color = Vector3
