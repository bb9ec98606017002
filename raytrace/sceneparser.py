"""Reading scene descriptions of spheres, lights and walls from text files."""

from __future__ import annotations

import sys

from raytrace.light import Light
from raytrace.materials import Cosine, Glossy, Matte, Wall
from raytrace.shapes import Plane, Sphere
from raytrace.utils import get_lines_from_file, split
from raytrace.vector import Point3D, Vector3D

_SPHERE_MATERIALS = {"glossy": Glossy, "matte": Matte, "cosine": Cosine}


def _require(tokens: list[str], count: int, kind: str) -> None:
    if len(tokens) < count:
        raise ValueError(f"a {kind} line needs {count} fields, got {len(tokens)}")


def _floats(tokens: list[str], start: int, stop: int) -> list[float]:
    return [float(token) for token in tokens[start:stop]]


def parse_sphere(tokens: list[str]) -> Sphere:
    """``sphere x y z radius material r g b``."""
    _require(tokens, 9, "sphere")
    x, y, z, radius = _floats(tokens, 1, 5)
    material_name = tokens[5]
    r, g, b = _floats(tokens, 6, 9)

    sphere = Sphere(Point3D(x, y, z), radius)
    material_type = _SPHERE_MATERIALS.get(material_name)
    if material_type is None:
        print(f"Unknown material: {material_name}", file=sys.stderr)
    else:
        sphere.material = material_type(r, g, b)
    return sphere


def parse_light(tokens: list[str]) -> Light:
    """``light x y z nx ny nz fol``."""
    _require(tokens, 8, "light")
    x, y, z, nx, ny, nz, fol = _floats(tokens, 1, 8)
    return Light(Point3D(x, y, z), Vector3D(nx, ny, nz), fol)


def parse_wall(tokens: list[str]) -> Plane:
    """``wall x y z nx ny nz r g b``."""
    _require(tokens, 10, "wall")
    x, y, z, nx, ny, nz, r, g, b = _floats(tokens, 1, 10)
    return Plane(Point3D(x, y, z), Vector3D(nx, ny, nz), Wall(r, g, b))


def build_world_from_file(filename: str, world):
    """Add every object described in ``filename`` to ``world`` and return it.

    Lines starting with ``//`` and empty lines are ignored; unknown object
    kinds are reported on stderr and skipped.
    """
    for line in get_lines_from_file(filename):
        if line.startswith("//") or not line:
            continue
        tokens = split(line, " ")
        kind = tokens[0] if tokens else ""

        if kind == "sphere":
            sphere = parse_sphere(tokens)
            world.add_geometry(sphere)
            world.bboxes.append(sphere.bbox())
        elif kind == "light":
            world.add_light(parse_light(tokens))
        elif kind == "wall":
            world.add_geometry(parse_wall(tokens), is_wall=True)
        else:
            print(f"Unknown object: {kind}", file=sys.stderr)
    return world