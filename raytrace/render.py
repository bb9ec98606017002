"""Rendering a world into an image, and the command that does it."""

from __future__ import annotations

import argparse
import logging
import sys
import time

from raytrace.color import RGBColor
from raytrace.constants import (
    BLUR,
    BRIGHTNESS_ADJUSTMENT,
    EPSILON,
    LIGHTING,
    NPR,
    RECURSIVE_CASTING_DEPTH,
    SECONDARY_RAYS,
)
from raytrace.image import Image
from raytrace.lens import Lens
from raytrace.ray import Ray
from raytrace.samplers import Simple
from raytrace.sceneparser import build_world_from_file
from raytrace.utils import generate_file_name
from raytrace.vector import Point3D
from raytrace.world import World

logger = logging.getLogger(__name__)

DEFAULT_DEBUG_PIXEL = (250, 230)


def _debug(message: str) -> None:
    print(message, file=sys.stderr)


def lighting_intensity(sinfo, world, debug: bool = False) -> float:
    """Light reaching a hit point, or 1 when lighting is switched off."""
    if not LIGHTING:
        return 1.0
    value = world.light_value(sinfo.hit_point, sinfo.normal, debug)
    if debug:
        _debug(f"Lighting value: {value}")
    return value


def recursive_cast(ray, sinfo, world, weight: float, depth: int, debug: bool = False) -> RGBColor:
    """Color seen along the mirror reflection of ``ray`` at its hit point."""
    if debug:
        _debug(f"Debug Depth: {depth}")
    if depth >= RECURSIVE_CASTING_DEPTH:
        return world.bg_color

    sinfo.normal.normalize()
    scaled_normal = (2 * (ray.d * sinfo.normal)) * sinfo.normal
    # Vector subtraction yields the right operand minus the left: d - 2(d.n)n.
    sec_dir = scaled_normal - ray.d
    sec_dir.normalize()

    sec_ray = Ray(sinfo.hit_point + sinfo.normal * EPSILON, sec_dir)
    if debug:
        _debug(f"Casting a secondary ray \n{sec_ray.to_string()}")

    sec_sinfo = world.hit_objects(sec_ray)
    if not sec_sinfo.hit:
        return world.bg_color

    material = sec_sinfo.material
    intensity = lighting_intensity(sec_sinfo, world)
    color = material.shade(sec_sinfo) * intensity * material.inc_index()
    if debug:
        _debug(f"Secondary ray hit something at {sec_sinfo.hit_point.to_string()}")
        _debug(f"The attenuated color at this secondary hit point is {color.to_string()}")

    reflective_index = material.r_index()
    if reflective_index > 0:
        if debug:
            _debug(f"The reflective index of the hit material is {reflective_index}")
        color = color + reflective_index * recursive_cast(
            sec_ray, sec_sinfo, world, weight, depth + 1
        )
    return color


def cast_secondary_rays(ray, sinfo, world, weight: float, debug: bool = False) -> RGBColor:
    """The reflected contribution to a pixel from a primary hit."""
    reflected = recursive_cast(ray, sinfo, world, weight, 0, debug)
    return weight * BRIGHTNESS_ADJUSTMENT * sinfo.material.r_index() * reflected


def generate_primary_rays(
    x: int, y: int, sampler, world, focal_plane, npr: int, lens, debug: bool = False
) -> list[Ray]:
    """Rays from the lens towards the focal point of pixel (x, y)."""
    center_ray = sampler.get_center_ray(x, y)
    focal_hit = focal_plane.hit(center_ray)
    focal_point = focal_hit.hit_point if focal_hit is not None else Point3D()

    rays = []
    for _ in range(npr):
        origin = lens.random_point() if BLUR else Point3D(lens.origin.x, lens.origin.y, lens.origin.z)
        ray = Ray(origin, focal_point - origin, w=1.0 / npr)
        if debug:
            _debug(f"Primary ray for ({x}, {y})\n{ray.to_string()}")
        rays.append(ray)
    return rays


def cast_primary_rays(primary_rays, world, debug: bool = False) -> RGBColor:
    """Accumulated color of a pixel from its primary rays."""
    pixel = RGBColor(0.0)
    for ray in primary_rays:
        sinfo = world.hit_objects(ray)
        if not sinfo.hit:
            pixel = pixel + ray.w * world.bg_color
            continue

        material = sinfo.material
        color = material.shade(sinfo)
        intensity = lighting_intensity(sinfo, world, debug)
        if debug:
            _debug(f"Primary ray hit something at {sinfo.hit_point.to_string()}")
            _debug(f"Hit point color is {color.to_string()}")
            _debug(f"Lighting intensity is {intensity}")
            _debug(f"Primary Ray Weight is {ray.w}")
            _debug(f"Brightness Adjustment is {BRIGHTNESS_ADJUSTMENT}")
            _debug(f"Primary Ray Incidence Index is {material.inc_index()}")

        pixel = pixel + ray.w * BRIGHTNESS_ADJUSTMENT * color * intensity * material.inc_index()
        if SECONDARY_RAYS:
            pixel = pixel + cast_secondary_rays(ray, sinfo, world, ray.w, debug)
    return pixel


def render(world, debug_pixel: tuple[int, int] | None = None) -> Image:
    """Trace every pixel of the world's view plane into an image."""
    if world.sampler is None:
        raise ValueError("the world has no sampler")
    if world.lens is None:
        raise ValueError("the world has no lens")

    lens = world.lens
    npr = NPR if BLUR else 1
    vplane = world.vplane
    image = Image.from_viewplane(vplane)
    target = tuple(debug_pixel) if debug_pixel is not None else None

    for x in range(vplane.hres):
        for y in range(vplane.vres):
            debug = (x, y) == target
            rays = generate_primary_rays(
                x, y, world.sampler, world, lens.focal_plane, npr, lens, debug
            )
            image.set_pixel(x, y, cast_primary_rays(rays, world, debug))
        logger.info("Total processed columns: %d", x + 1)
    return image


def main(argv=None) -> int:
    """Render a scene file to a PPM image."""
    parser = argparse.ArgumentParser(prog="raytrace", description="Render a scene file to a PPM image.")
    parser.add_argument("scene", help="scene description file")
    parser.add_argument("-o", "--output", help="output PPM path (default: named after the settings)")
    parser.add_argument("--hres", type=int, default=640, help="horizontal resolution")
    parser.add_argument("--vres", type=int, default=480, help="vertical resolution")
    parser.add_argument("--plane-z", type=float, default=0.0, help="z coordinate of the view plane")
    parser.add_argument(
        "--debug-pixel", type=int, nargs=2, metavar=("X", "Y"), default=list(DEFAULT_DEBUG_PIXEL),
        help="pixel whose tracing is reported on stderr",
    )
    args = parser.parse_args(argv)
    if args.hres <= 0 or args.vres <= 0:
        parser.error("resolution must be positive")

    start = time.perf_counter()
    world = World()
    vplane = world.vplane
    vplane.hres = args.hres
    vplane.vres = args.vres
    vplane.top_left.z = args.plane_z
    vplane.bottom_right.z = args.plane_z
    world.lens = Lens()
    world.sampler = Simple(viewplane=vplane, lens=world.lens)
    build_world_from_file(args.scene, world)
    print("World built.")

    image = render(world, debug_pixel=tuple(args.debug_pixel))
    print("Raytracing complete.")

    lens = world.lens
    npr = NPR if BLUR else 1
    output = args.output or generate_file_name(
        vplane.hres, vplane.vres, BLUR, npr, SECONDARY_RAYS,
        lens.radius, lens.origin.z - vplane.top_left.z,
    )
    image.write_ppm(output)
    print("Wrote image.")

    elapsed_ms = int((time.perf_counter() - start) * 1000)
    print(f"Execution time: {elapsed_ms} milliseconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())