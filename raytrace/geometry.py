"""The abstract base of every object that rays can hit."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from raytrace.bbox import BBox
    from raytrace.materials import Material
    from raytrace.ray import Ray
    from raytrace.shadeinfo import ShadeInfo


class Geometry(ABC):
    """A scene object carrying an optional material."""

    def __init__(self, material: "Material | None" = None) -> None:
        self.material = material

    def __str__(self) -> str:
        return self.to_string()

    @abstractmethod
    def to_string(self) -> str:
        """Human-readable description of the object."""

    @abstractmethod
    def hit(self, ray: "Ray") -> "ShadeInfo | None":
        """Intersect with ``ray``.

        Returns a ShadeInfo describing the nearest valid hit, whose ``t`` is the
        ray parameter at the hit point, or None when the ray misses.
        """

    @abstractmethod
    def bbox(self) -> "BBox":
        """The object's axis-aligned bounding box."""