"""A uniform grid that speeds up finding what a ray hits."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from raytrace.bbox import BBox
from raytrace.constants import HUGE_VALUE
from raytrace.ray import Ray
from raytrace.shadeinfo import ShadeInfo
from raytrace.vector import Point3D, Vector3D

_MAX_RESOLUTION = 128
# Axis to step next, indexed by (x<y)<<2 | (x<z)<<1 | (y<z) of the next crossings.
_AXIS_FOR_ORDER = (2, 1, 2, 1, 2, 2, 0, 0)


def _div(a: float, b: float) -> float:
    """Floating-point division following IEEE rules for a zero divisor."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _cell_index(value: float, count: int) -> int:
    return int(min(max(math.floor(value), 0), count - 1))


@dataclass
class _Axis:
    cell: int
    step: int
    stop: int
    delta: float
    next_crossing: float


class Accelerator:
    """Buckets non-wall geometry into grid cells and walks rays through them."""

    def __init__(self, geometry=None, walls=None, worldbox: BBox | None = None) -> None:
        self.geometry: list = geometry if geometry is not None else []
        self.walls: list = walls if walls is not None else []
        self.worldbox = worldbox if worldbox is not None else BBox()
        self.resolution: tuple[int, int, int] = (1, 1, 1)
        self.celldim = Vector3D()
        self.grid: list[list] = []
        self.num_rows = 0

    def _is_wall(self, obj) -> bool:
        return any(obj is wall for wall in self.walls)

    def _index(self, x: int, y: int, z: int) -> int:
        rx, ry, _ = self.resolution
        return z * rx * ry + y * rx + x

    def _cell_of(self, p: Point3D) -> tuple[int, int, int]:
        pmin = self.worldbox.pmin
        rx, ry, rz = self.resolution
        return (
            _cell_index((p.x - pmin.x) / self.celldim.x, rx),
            _cell_index((p.y - pmin.y) / self.celldim.y, ry),
            _cell_index((p.z - pmin.z) / self.celldim.z, rz),
        )

    def generate_grid(self) -> None:
        """Size the grid from the world box and fill it with geometry."""
        size = self.worldbox.pmax - self.worldbox.pmin
        volume = size.x * size.y * size.z
        if volume <= 0:
            raise ValueError("the world box must have a positive volume")

        croot = (len(self.geometry) / volume) ** (1.0 / 3.0)
        self.resolution = tuple(
            max(1, min(math.floor(extent * croot), _MAX_RESOLUTION))
            for extent in (size.x, size.y, size.z)
        )
        rx, ry, rz = self.resolution
        self.celldim = Vector3D(size.x / rx, size.y / ry, size.z / rz)
        self.num_rows = rx * ry * rz
        self.grid = [[] for _ in range(self.num_rows)]

        for geo in self.geometry:
            if geo is None or self._is_wall(geo):
                continue
            box = geo.bbox()
            xmin, ymin, zmin = self._cell_of(box.pmin)
            xmax, ymax, zmax = self._cell_of(box.pmax)
            for z in range(zmin, zmax + 1):
                for y in range(ymin, ymax + 1):
                    for x in range(xmin, xmax + 1):
                        self.grid[self._index(x, y, z)].append(geo)

    def describe_grid(self) -> str:
        """Row count followed by one line per object stored in each row."""
        parts = [str(self.num_rows)]
        for row, cell in enumerate(self.grid):
            for geo in cell:
                if geo is not None:
                    parts.append(f"A Shape in row: {row}is {geo.to_string()}\n")
        return "".join(parts)

    def hit_objects(self, ray: Ray, world: Any, hit_walls: bool = True) -> ShadeInfo:
        """Shading information for the nearest object the ray strikes."""
        if not self.grid:
            raise RuntimeError("generate_grid must be called before hit_objects")

        wall_hit = ShadeInfo(world=world)
        t_min_wall = HUGE_VALUE
        if hit_walls:
            # Every wall struck replaces the previous one: the last wall wins.
            for wall in self.walls:
                sinfo = wall.hit(ray)
                if sinfo is not None and sinfo.t < HUGE_VALUE:
                    sinfo.world = world
                    wall_hit = sinfo
                    t_min_wall = sinfo.t

        crossing = self.worldbox.hit(ray)
        if crossing is None or not math.isfinite(crossing[0]):
            return wall_hit
        t_enter = crossing[0]

        pmin = self.worldbox.pmin
        axes = []
        for origin, direction, low, size, count in zip(
            (ray.o.x, ray.o.y, ray.o.z),
            (ray.d.x, ray.d.y, ray.d.z),
            (pmin.x, pmin.y, pmin.z),
            (self.celldim.x, self.celldim.y, self.celldim.z),
            self.resolution,
        ):
            offset = origin + direction * t_enter - low
            cell = _cell_index(offset / size, count)
            if direction < 0:
                axes.append(
                    _Axis(
                        cell=cell,
                        step=-1,
                        stop=-1,
                        delta=-size / direction,
                        next_crossing=t_enter + (cell * size - offset) / direction,
                    )
                )
            else:
                axes.append(
                    _Axis(
                        cell=cell,
                        step=1,
                        stop=count,
                        delta=_div(size, direction),
                        next_crossing=t_enter + _div((cell + 1) * size - offset, direction),
                    )
                )

        x_axis, y_axis, z_axis = axes
        nearest = ShadeInfo(world=world)
        t_min = HUGE_VALUE
        while True:
            for geo in self.grid[self._index(x_axis.cell, y_axis.cell, z_axis.cell)]:
                if geo is None or (not hit_walls and self._is_wall(geo)):
                    continue
                sinfo = geo.hit(ray)
                if sinfo is not None and sinfo.t < t_min:
                    t_min = sinfo.t
                    sinfo.world = world
                    nearest = sinfo

            order = (
                (int(x_axis.next_crossing < y_axis.next_crossing) << 2)
                | (int(x_axis.next_crossing < z_axis.next_crossing) << 1)
                | int(y_axis.next_crossing < z_axis.next_crossing)
            )
            axis = axes[_AXIS_FOR_ORDER[order]]
            if t_min < axis.next_crossing:
                break
            axis.cell += axis.step
            if axis.cell == axis.stop:
                break
            axis.next_crossing += axis.delta

        return nearest if t_min < t_min_wall else wall_hit