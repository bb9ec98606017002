"""Shading information gathered at a ray's intersection with the scene."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from raytrace.ray import Ray
from raytrace.vector import Point3D, Vector3D


@dataclass
class ShadeInfo:
    """Everything needed to shade the point where a ray struck an object."""

    world: Any = None
    hit: bool = False
    material: Any = None
    hit_point: Point3D = field(default_factory=Point3D)
    normal: Vector3D = field(default_factory=Vector3D)
    ray: Ray = field(default_factory=Ray)
    depth: int = 0
    t: float = 0.0

    def copy(self) -> "ShadeInfo":
        """Copy the record; the world and material are shared, not duplicated."""
        return replace(
            self,
            hit_point=replace(self.hit_point),
            normal=replace(self.normal),
            ray=replace(self.ray),
        )