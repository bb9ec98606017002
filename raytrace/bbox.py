"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable

from raytrace.ray import Ray
from raytrace.vector import Point3D, point_max, point_min


def _div(a: float, b: float) -> float:
    """Floating-point division following IEEE rules for a zero divisor."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _slab(lo: float, hi: float, origin: float, direction: float) -> tuple[float, float]:
    if direction >= 0:
        return _div(lo - origin, direction), _div(hi - origin, direction)
    return _div(hi - origin, direction), _div(lo - origin, direction)


@dataclass
class BBox:
    """A box spanned by its minimum and maximum corners."""

    pmin: Point3D = field(default_factory=Point3D)
    pmax: Point3D = field(default_factory=Point3D)
    geometry_child: Any = None
    children: list["BBox"] = field(default_factory=list)

    def to_string(self) -> str:
        return f"pmin: {self.pmin.to_string()}\npmax: {self.pmax.to_string()}"

    def __str__(self) -> str:
        return self.to_string()

    def hit(self, ray: Ray) -> tuple[float, float] | None:
        """Return ``(t_enter, t_exit)`` if the ray's line crosses the box."""
        t_enter, t_exit = _slab(self.pmin.x, self.pmax.x, ray.o.x, ray.d.x)
        tymin, tymax = _slab(self.pmin.y, self.pmax.y, ray.o.y, ray.d.y)

        if t_enter > tymax or tymin > t_exit:
            return None
        if tymin > t_enter:
            t_enter = tymin
        if tymax < t_exit:
            t_exit = tymax

        tzmin, tzmax = _slab(self.pmin.z, self.pmax.z, ray.o.z, ray.d.z)

        if t_enter > tzmax or tzmin > t_exit:
            return None
        if tzmin > t_enter:
            t_enter = tzmin
        if tzmax < t_exit:
            t_exit = tzmax
        return t_enter, t_exit

    def extend(self, geometry) -> None:
        """Grow this box in place to include a geometry's bounding box."""
        other = geometry.bbox()
        self.pmax = point_max(self.pmax, other.pmax)
        self.pmin = point_min(self.pmin, other.pmin)

    def union(self, other: "BBox") -> "BBox":
        """Return a new box enclosing this one and ``other``."""
        return BBox(
            pmin=point_min(self.pmin, other.pmin),
            pmax=point_max(self.pmax, other.pmax),
            children=[other, self],
        )

    @staticmethod
    def enclosing(boxes: Iterable["BBox"]) -> "BBox":
        """Return a box enclosing all ``boxes``, which become its children."""
        boxes = list(boxes)
        if not boxes:
            raise ValueError("cannot enclose an empty collection of boxes")
        minpoint = boxes[0].pmin
        maxpoint = boxes[0].pmax
        for box in boxes:
            minpoint = point_min(box.pmin, minpoint)
            maxpoint = point_max(box.pmax, maxpoint)
        return BBox(pmin=minpoint, pmax=maxpoint, children=boxes)

    def contains(self, p: Point3D) -> bool:
        """True when ``p`` lies inside the box or on its boundary."""
        return (
            self.pmin.x <= p.x <= self.pmax.x
            and self.pmin.y <= p.y <= self.pmax.y
            and self.pmin.z <= p.z <= self.pmax.z
        )

    def overlaps(self, other) -> bool:
        """True when this box touches another box or a geometry's box."""
        b = other if isinstance(other, BBox) else other.bbox()
        return (
            self.pmax.x >= b.pmin.x
            and b.pmax.x >= self.pmin.x
            and self.pmax.y >= b.pmin.y
            and b.pmax.y >= self.pmin.y
            and self.pmax.z >= b.pmin.z
            and b.pmax.z >= self.pmin.z
        )