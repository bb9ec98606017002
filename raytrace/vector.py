"""Three-dimensional points and vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

_SCALAR = (int, float)


@dataclass
class Vector3D:
    """A 3D vector with double-precision components."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_point(cls, p: "Point3D") -> "Vector3D":
        """Build the vector from the origin to ``p``."""
        return cls(p.x, p.y, p.z)

    def to_string(self) -> str:
        return f"({self.x:f}, {self.y:f}, {self.z:f})"

    def __str__(self) -> str:
        return self.to_string()

    def __neg__(self) -> "Vector3D":
        return Vector3D(-self.x, -self.y, -self.z)

    def __add__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iadd__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __sub__(self, other: "Vector3D") -> "Vector3D":
        # The renderer's reflection formula relies on this operand order:
        # ``a - b`` yields ``b`` minus ``a``.
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(other.x - self.x, other.y - self.y, other.z - self.z)

    def __isub__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __mul__(self, other):
        """Dot product with a vector, or scaling by a number."""
        if isinstance(other, Vector3D):
            return self.dot(other)
        if isinstance(other, _SCALAR):
            return Vector3D(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, _SCALAR):
            return Vector3D(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, a):
        if not isinstance(a, _SCALAR):
            return NotImplemented
        return Vector3D(self.x / a, self.y / a, self.z / a)

    def __xor__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.cross(other)

    def length(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def len_squared(self) -> float:
        return self.length() ** 2

    def normalize(self) -> None:
        """Scale to unit length in place; a zero vector is left unchanged."""
        magnitude = self.length()
        if magnitude == 0:
            return
        self.x /= magnitude
        self.y /= magnitude
        self.z /= magnitude

    def normalized(self) -> "Vector3D":
        """Return a unit-length copy of this vector."""
        result = Vector3D(self.x, self.y, self.z)
        result.normalize()
        return result

    def dot(self, other: "Vector3D") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3D") -> "Vector3D":
        return Vector3D(
            self.y * other.z - self.z * other.y,
            -(self.x * other.z - self.z * other.x),
            self.x * other.y - self.y * other.x,
        )


@dataclass
class Point3D:
    """A point in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_string(self) -> str:
        return f"({self.x:f}, {self.y:f}, {self.z:f})"

    def __str__(self) -> str:
        return self.to_string()

    def __neg__(self) -> "Point3D":
        return Point3D(-self.x, -self.y, -self.z)

    def __sub__(self, other):
        """Point minus point gives a vector; point minus vector gives a point."""
        if isinstance(other, Point3D):
            return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector3D):
            return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __add__(self, other):
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __mul__(self, s):
        if not isinstance(s, _SCALAR):
            return NotImplemented
        return Point3D(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def distance(self, p: "Point3D") -> float:
        return math.sqrt((p.x - self.x) ** 2 + (p.y - self.y) ** 2 + (p.z - self.z) ** 2)

    def d_squared(self, p: "Point3D") -> float:
        return self.distance(p) ** 2


def point_min(a: Point3D, b: Point3D) -> Point3D:
    """Component-wise minimum of two points."""
    return Point3D(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))


def point_max(a: Point3D, b: Point3D) -> Point3D:
    """Component-wise maximum of two points."""
    return Point3D(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))