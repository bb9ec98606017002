"""RGB colors whose components stay clamped to [0, 1]."""

from __future__ import annotations

_SCALAR = (int, float)


def clip(n: float, lower: float, upper: float) -> float:
    """Clamp ``n`` into ``[lower, upper]``."""
    return max(lower, min(n, upper))


class RGBColor:
    """An RGB color; every operation clamps components to [0, 1]."""

    __slots__ = ("r", "g", "b")

    def __init__(self, r: float = 0.0, g: float | None = None, b: float | None = None):
        if g is None and b is None:
            g = b = r
        elif g is None or b is None:
            raise TypeError("give either one component or all three")
        self.r = clip(r, 0.0, 1.0)
        self.g = clip(g, 0.0, 1.0)
        self.b = clip(b, 0.0, 1.0)

    def __repr__(self) -> str:
        return f"RGBColor({self.r!r}, {self.g!r}, {self.b!r})"

    def to_string(self) -> str:
        return f"({self.r:f}, {self.g:f}, {self.b:f})"

    def __str__(self) -> str:
        return self.to_string()

    def to_ppm_string(self) -> str:
        """Components as 0-255 integers for a P3 PPM file."""
        return f"{int(self.r * 255)} {int(self.g * 255)} {int(self.b * 255)} "

    def __add__(self, other: "RGBColor") -> "RGBColor":
        if not isinstance(other, RGBColor):
            return NotImplemented
        return RGBColor(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other):
        if isinstance(other, RGBColor):
            return RGBColor(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, _SCALAR):
            return RGBColor(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, _SCALAR):
            return RGBColor(other * self.r, other * self.g, other * self.b)
        return NotImplemented

    def __truediv__(self, a):
        if not isinstance(a, _SCALAR):
            return NotImplemented
        return RGBColor(self.r / a, self.g / a, self.b / a)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RGBColor):
            return NotImplemented
        return (self.r, self.g, self.b) == (other.r, other.g, other.b)

    __hash__ = None

    def powc(self, p: float) -> "RGBColor":
        """Raise each component to the power ``p``."""
        return RGBColor(self.r**p, self.g**p, self.b**p)

    def average(self) -> float:
        return (self.r + self.g + self.b) / 3