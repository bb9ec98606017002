"""Rays: an origin, a unit direction, a weight and a color."""

from __future__ import annotations

from dataclasses import dataclass, field

from raytrace.color import RGBColor
from raytrace.vector import Point3D, Vector3D


@dataclass
class Ray:
    """A ray whose direction is stored normalized."""

    o: Point3D = field(default_factory=Point3D)
    d: Vector3D = field(default_factory=Vector3D)
    color: RGBColor = field(default_factory=lambda: RGBColor(1.0))
    w: float = 1.0

    def __post_init__(self) -> None:
        self.o = Point3D(self.o.x, self.o.y, self.o.z)
        self.d = self.d.normalized()
        self.color = RGBColor(self.color.r, self.color.g, self.color.b)

    def to_string(self) -> str:
        return (
            f"origin: {self.o.to_string()}\n"
            f"direction: {self.d.to_string()}\n"
            f"weightage: {self.w:f}"
        )

    def __str__(self) -> str:
        return self.to_string()