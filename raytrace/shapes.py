"""Concrete geometric objects: planes, spheres and triangles."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import TYPE_CHECKING

from raytrace.bbox import BBox
from raytrace.geometry import Geometry
from raytrace.shadeinfo import ShadeInfo
from raytrace.vector import Point3D, Vector3D, point_max, point_min

if TYPE_CHECKING:
    from raytrace.materials import Material
    from raytrace.ray import Ray


def _record_hit(
    ray: "Ray", t: float, point: Point3D, normal: Vector3D, material
) -> ShadeInfo:
    return ShadeInfo(
        hit=True,
        material=material,
        hit_point=point,
        normal=normal,
        ray=replace(ray),
        depth=1,
        t=t,
    )


class Plane(Geometry):
    """An infinite plane given by a point on it and its unit normal."""

    def __init__(
        self,
        point: Point3D | None = None,
        normal: Vector3D | None = None,
        material: "Material | None" = None,
    ) -> None:
        super().__init__(material)
        self.a = replace(point) if point is not None else Point3D()
        self.n = normal.normalized() if normal is not None else Vector3D(0.0, 1.0, 0.0)

    def to_string(self) -> str:
        return f"Point: {self.a.to_string()}\nnormal: {self.n.to_string()}\n"

    def hit(self, ray: "Ray") -> ShadeInfo | None:
        denominator = ray.d * self.n
        if denominator == 0:
            return None
        t = ((self.a - ray.o) * self.n) / denominator
        if t < 0:
            return None
        return _record_hit(ray, t, ray.o + t * ray.d, replace(self.n), self.material)

    def bbox(self) -> BBox:
        """A plane is unbounded; its box collapses to the origin."""
        return BBox()


class Sphere(Geometry):
    """A sphere given by its center and radius."""

    def __init__(
        self,
        center: Point3D | None = None,
        radius: float = 0.0,
        material: "Material | None" = None,
    ) -> None:
        super().__init__(material)
        self.c = replace(center) if center is not None else Point3D()
        self.r = radius

    def to_string(self) -> str:
        return f"Center: {self.c.to_string()}\nradius: {self.r:f}\n"

    def bbox(self) -> BBox:
        extent = Vector3D(self.r, self.r, self.r)
        return BBox(pmin=self.c - extent, pmax=self.c + extent, geometry_child=self)

    def hit(self, ray: "Ray") -> ShadeInfo | None:
        offset = ray.o - self.c
        a = 1.0  # the direction is a unit vector
        b = (2 * ray.d) * offset
        c = offset * offset - self.r * self.r
        det = b * b - 4 * a * c

        if det < 0:
            return None
        if det == 0:
            t = -b / (2 * a)
        else:
            root = math.sqrt(det)
            t1 = (-b - root) / (2 * a)
            t2 = (-b + root) / (2 * a)
            if t1 < 0 and t2 < 0:
                return None
            if t1 >= 0 and t2 < 0:
                t = t1
            elif t1 < 0 and t2 >= 0:
                t = t2
            else:
                t = min(t1, t2)

        point = ray.o + t * ray.d
        normal = (point - self.c).normalized()
        return _record_hit(ray, t, point, normal, self.material)


class Triangle(Geometry):
    """A triangle given by three ordered, non-colinear vertices."""

    def __init__(
        self,
        v0: Point3D | None = None,
        v1: Point3D | None = None,
        v2: Point3D | None = None,
        material: "Material | None" = None,
    ) -> None:
        super().__init__(material)
        self.v0 = replace(v0) if v0 is not None else Point3D()
        self.v1 = replace(v1) if v1 is not None else Point3D()
        self.v2 = replace(v2) if v2 is not None else Point3D()

    def to_string(self) -> str:
        return (
            f"Point 1: {self.v0.to_string()}\n"
            f"Point 2: {self.v1.to_string()}\n"
            f"Point 3: {self.v2.to_string()}\n"
        )

    def bbox(self) -> BBox:
        return BBox(
            pmin=point_min(point_min(self.v0, self.v1), self.v2),
            pmax=point_max(point_max(self.v0, self.v1), self.v2),
            geometry_child=self,
        )

    def hit(self, ray: "Ray") -> ShadeInfo | None:
        edge1 = self.v1 - self.v0
        edge2 = self.v2 - self.v1
        edge3 = self.v0 - self.v2

        normal = edge1.cross(edge2).normalized()
        denominator = ray.d * normal
        if denominator == 0:
            return None

        t = (Vector3D.from_point(ray.o) * normal + Vector3D.from_point(self.v0) * normal) / denominator
        if t <= 0:
            return None

        point = ray.o + t * ray.d
        inside = (
            normal * edge1.cross(point - self.v0) > 0
            and normal * edge2.cross(point - self.v1) > 0
            and normal * edge3.cross(point - self.v2) > 0
        )
        if not inside:
            return None
        return _record_hit(ray, t, point, normal, self.material)