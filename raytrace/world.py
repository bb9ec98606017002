"""The scene: geometry, lights, view plane, lens, sampler and ray queries."""

from __future__ import annotations

import math
import sys

from raytrace.accelerator import Accelerator
from raytrace.bbox import BBox
from raytrace.color import RGBColor
from raytrace.constants import EPSILON, HUGE_VALUE, PI, TO_ACCELERATE
from raytrace.ray import Ray
from raytrace.samplers import ViewPlane
from raytrace.shadeinfo import ShadeInfo
from raytrace.vector import Point3D, Vector3D

_LIGHT_POWER = 50000.0


class World:
    """Everything in a scene, and the queries that trace rays through it."""

    def __init__(self) -> None:
        self.vplane = ViewPlane()
        self.bg_color = RGBColor(0.0, 0.0, 0.0)
        self.geometry: list = []
        self.walls: list = []
        self.lights: list = []
        self.camera = None
        self.sampler = None
        self.lens = None
        self.worldbox = BBox()
        self.bboxes: list[BBox] = []
        self.acceleration = Accelerator(self.geometry, self.walls, self.worldbox)
        self.accelerate = TO_ACCELERATE

    def add_geometry(self, geometry, is_wall: bool = False) -> None:
        """Add an object to the scene; walls are also remembered as walls."""
        if is_wall:
            self.walls.append(geometry)
        self.geometry.append(geometry)

    def add_light(self, light) -> None:
        self.lights.append(light)

    def _is_wall(self, obj) -> bool:
        return any(obj is wall for wall in self.walls)

    def hit_objects(self, ray: Ray, hit_walls: bool = True) -> ShadeInfo:
        """Shading information for the nearest object the ray strikes."""
        if self.accelerate:
            return self.acceleration.hit_objects(ray, self, hit_walls)
        return self.unaccel_hit_objects(ray, hit_walls)

    def unaccel_hit_objects(self, ray: Ray, hit_walls: bool = True) -> ShadeInfo:
        """Test every object; on equal distances the later object wins."""
        nearest = ShadeInfo(world=self)
        t_min = HUGE_VALUE
        for geo in self.geometry:
            if not hit_walls and self._is_wall(geo):
                continue
            sinfo = geo.hit(ray)
            if sinfo is not None and sinfo.t <= t_min:
                t_min = sinfo.t
                sinfo.world = self
                nearest = sinfo
        return nearest

    def light_value(self, hit_point: Point3D, normal: Vector3D, debug: bool = False) -> float:
        """Total light reaching ``hit_point`` from every unobstructed light."""
        total_lights = len(self.lights)
        light_val = 0.0

        if debug:
            weight = 1.0 / total_lights if total_lights else math.inf
            print(f"Computing lighting values for point {hit_point.to_string()}", file=sys.stderr)
            print(f"Total lights: {total_lights}", file=sys.stderr)
            print(f"Individual light weight: {weight}", file=sys.stderr)

        for light in self.lights:
            shadow_dir = light.origin - hit_point
            distance = shadow_dir.length()
            shadow_dir.normalize()

            shadow_ray = Ray(hit_point + normal * EPSILON, shadow_dir)
            if debug:
                print(f"Shadow ray:\n{shadow_ray.to_string()}", file=sys.stderr)

            if self.hit_objects(shadow_ray).hit:
                continue

            cosine = max(-1.0, min(1.0, -shadow_dir * light.normal))
            angle = abs(math.acos(cosine) * 180 / PI)
            intensity = _LIGHT_POWER / distance**2 if distance else math.inf
            diffuse = max(0.0, normal * shadow_dir)
            light_val += intensity * diffuse

            if debug:
                print(f"Shadow ray reached the light at an angle of {angle}", file=sys.stderr)
                print(f"Intensity: {intensity}", file=sys.stderr)
                print(f"Diffuse: {diffuse}", file=sys.stderr)
                print(f"Light Value: {light_val}", file=sys.stderr)
        return light_val