"""Cameras that decide the direction of projection for a point."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace

from raytrace.vector import Point3D, Vector3D

_SCALAR = (int, float)


def _components(args: tuple, kind: type, default: tuple[float, float, float]):
    if not args:
        return default
    if len(args) == 1:
        (value,) = args
        if isinstance(value, kind):
            return value.x, value.y, value.z
        if isinstance(value, _SCALAR):
            return value, value, value
    if len(args) == 3 and all(isinstance(a, _SCALAR) for a in args):
        return tuple(args)
    raise TypeError(
        f"expected no arguments, one number, a {kind.__name__}, or three numbers"
    )


class Camera(ABC):
    """A camera views the world through a view plane."""

    @abstractmethod
    def get_direction(self, p: Point3D) -> Vector3D:
        """Direction of projection for the point ``p``."""


class Parallel(Camera):
    """A camera projecting every point along one fixed unit direction."""

    def __init__(self, *args) -> None:
        x, y, z = _components(args, Vector3D, (0.0, 0.0, -1.0))
        self.dir = Vector3D(x, y, z).normalized()

    def __repr__(self) -> str:
        return f"Parallel({self.dir!r})"

    def get_direction(self, p: Point3D) -> Vector3D:
        return replace(self.dir)


class Perspective(Camera):
    """A camera projecting from a single center of projection."""

    def __init__(self, *args) -> None:
        x, y, z = _components(args, Point3D, (0.0, 0.0, 0.0))
        self.pos = Point3D(x, y, z)

    def __repr__(self) -> str:
        return f"Perspective({self.pos!r})"

    def get_direction(self, p: Point3D) -> Vector3D:
        return (p - self.pos).normalized()