"""Point lights with a cone of emission."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from raytrace.vector import Point3D, Vector3D

_MAX_FIELD_OF_LIGHT = 89.0


@dataclass
class Light:
    """A light at ``origin`` shining along ``normal``.

    ``fol`` is the half-width of the light cone in degrees, kept in [0, 89].
    """

    origin: Point3D = field(default_factory=Point3D)
    normal: Vector3D = field(default_factory=lambda: Vector3D(0.0, 0.0, -1.0))
    fol: float = 0.0

    def __post_init__(self) -> None:
        self.origin = replace(self.origin)
        self.normal = self.normal.normalized()
        self.fol = min(abs(self.fol), _MAX_FIELD_OF_LIGHT)