"""Pixel storage and output in the plain-text PPM format."""

from __future__ import annotations

import os

from raytrace.color import RGBColor


class Image:
    """A grid of colors; x increases to the right and y downward."""

    def __init__(self, hres: int, vres: int) -> None:
        if hres < 0 or vres < 0:
            raise ValueError("image resolution cannot be negative")
        self.hres = hres
        self.vres = vres
        self._colors = [[RGBColor() for _ in range(vres)] for _ in range(hres)]

    @classmethod
    def from_viewplane(cls, vp) -> "Image":
        """A blank image with the view plane's resolution."""
        return cls(vp.hres, vp.vres)

    def set_pixel(self, x: int, y: int, color: RGBColor) -> None:
        if not (0 <= x < self.hres and 0 <= y < self.vres):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.hres}x{self.vres} image")
        self._colors[x][y] = RGBColor(color.r, color.g, color.b)

    def to_ppm(self) -> str:
        """The image as P3 PPM text, rows from top to bottom."""
        header = f"P3\n{self.hres} {self.vres}\n255\n"
        body = "".join(
            color.to_ppm_string() for row in zip(*self._colors) for color in row
        )
        return header + body

    def write_ppm(self, path: str | os.PathLike) -> None:
        with open(path, "w", encoding="ascii", newline="\n") as handle:
            handle.write(self.to_ppm())