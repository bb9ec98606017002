"""Surface materials that decide the color of a hit point."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from raytrace.color import RGBColor

if TYPE_CHECKING:
    from raytrace.shadeinfo import ShadeInfo

_SCALAR = (int, float)


def _color_from(components: tuple) -> RGBColor:
    if not components:
        return RGBColor(0.0)
    if len(components) == 1:
        (value,) = components
        if isinstance(value, RGBColor):
            return RGBColor(value.r, value.g, value.b)
        if isinstance(value, _SCALAR):
            return RGBColor(value)
    if len(components) == 3 and all(isinstance(c, _SCALAR) for c in components):
        return RGBColor(*components)
    raise TypeError("expected no arguments, one number, an RGBColor, or three numbers")


class Material(ABC):
    """Base for materials; ``r_ind`` weighs the color of reflected rays."""

    def __init__(self, r_ind: float) -> None:
        if r_ind < 0 or r_ind > 1:
            raise ValueError("r_ind must be in the range [0,1]")
        self.r_ind = r_ind

    @abstractmethod
    def shade(self, sinfo: "ShadeInfo") -> RGBColor:
        """Return the color seen at the hit point described by ``sinfo``."""

    def r_index(self) -> float:
        """Share of the final color contributed by reflection."""
        return self.r_ind

    def inc_index(self) -> float:
        """Share of the final color contributed by the surface itself."""
        return 1 - self.r_ind


class _ColoredMaterial(Material):
    REFLECTIVE_INDEX = 0.0

    def __init__(self, *components) -> None:
        super().__init__(self.REFLECTIVE_INDEX)
        self.color = _color_from(components)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.color!r})"


class _CosineShaded(_ColoredMaterial):
    def shade(self, sinfo: "ShadeInfo") -> RGBColor:
        """Color scaled by the cosine between the normal and the reversed ray."""
        cos_theta = sinfo.normal * -sinfo.ray.d
        return sinfo.ray.color * self.color * cos_theta


class Cosine(_CosineShaded):
    """A cosine-shaded material that reflects half of the light."""

    REFLECTIVE_INDEX = 0.5


class Glossy(_CosineShaded):
    """A strongly reflective cosine-shaded material."""

    REFLECTIVE_INDEX = 0.75


class Matte(_CosineShaded):
    """A weakly reflective cosine-shaded material."""

    REFLECTIVE_INDEX = 0.1


class Wall(_ColoredMaterial):
    """A flat material whose shade does not depend on the viewing angle."""

    REFLECTIVE_INDEX = 0.1

    def shade(self, sinfo: "ShadeInfo") -> RGBColor:
        return sinfo.ray.color * self.color