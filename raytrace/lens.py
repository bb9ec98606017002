"""A thin lens that emits primary rays from random points on its disk."""

from __future__ import annotations

import math
import random
from dataclasses import replace

from raytrace.shapes import Plane
from raytrace.vector import Point3D, Vector3D


class Lens:
    """A lens disk with a focal plane.

    With no arguments the lens sits at the origin facing +z, has radius 5 and
    a focal plane at z = -25. Otherwise all four arguments must be given.
    """

    def __init__(
        self,
        origin: Point3D | None = None,
        normal: Vector3D | None = None,
        radius: float | None = None,
        focal_plane: Plane | None = None,
        *,
        seed: int | None = None,
    ) -> None:
        given = [arg is not None for arg in (origin, normal, radius, focal_plane)]
        if not any(given):
            self.origin = Point3D(0.0, 0.0, 0.0)
            self.normal = Vector3D(0.0, 0.0, 1.0)
            self.radius = 5.0
            self.focal_plane = Plane(Point3D(0.0, 0.0, -25.0), Vector3D(0.0, 0.0, 1.0))
            self.radius_range = (0.0, 99.0)
            self.angle_range = (0, 359)
        elif all(given):
            self.origin = replace(origin)
            self.normal = replace(normal)
            self.radius = radius
            self.focal_plane = focal_plane
            self.radius_range = (0.0, radius + 1)
            self.angle_range = (0, 360)
        else:
            raise TypeError("give either no arguments or origin, normal, radius and focal_plane")

        self.radius_generator = random.Random(seed)
        self.angle_generator = random.Random(seed)

    def random_point(self) -> Point3D:
        """A random point on the lens disk around its origin.

        The integer angle is applied as radians, as the sampling has always done.
        """
        low, high = self.radius_range
        r = self.radius_generator.uniform(low, high)
        if r >= high:
            r = low
        theta = self.angle_generator.randint(*self.angle_range)
        return Point3D(
            self.origin.x + r * math.cos(theta),
            self.origin.y + r * math.sin(theta),
            self.origin.z,
        )

    def get_direction(self, p: Point3D) -> Vector3D:
        """Unit direction from the lens origin to ``p``."""
        return (p - self.origin).normalized()