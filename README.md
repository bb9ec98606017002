# raytrace

A compact ray tracer in pure Python. It renders spheres, triangles and planar
walls lit by point lights, and writes the result as a plain-text PPM (P3) image.
It has no dependencies outside the standard library.

What it does:

- Shoots primary rays from a thin `Lens` through the pixels of a `ViewPlane`,
  aimed at the lens's focal plane. When blur is switched on, each pixel gets
  several rays from random points on the lens.
- Provides `Cosine`, `Glossy`, `Matte` and `Wall` materials. Each material
  splits its colour between direct shading and reflection through a
  reflective index (0.5, 0.75, 0.1 and 0.1 respectively).
- Casts a shadow ray toward every light. An unobstructed light contributes
  `50000 / distance**2` multiplied by the diffuse term `max(0, normal · direction)`.
- Follows mirror reflections recursively, up to a fixed depth.
- Offers an optional uniform-grid `Accelerator` for intersection queries.
- Reads scene files that list spheres, lights and walls, one per line.

Colours are clamped to [0, 1] after every operation.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Rendering from the command line

```
raytrace scene.txt --plane-z -10 -o out.ppm
```

The command works through these steps:

1. It sets up a view plane of `--hres` × `--vres` pixels (640 × 480 by default).
   The plane spans x from -320 to 320 and y from 240 to -240, and sits at
   z = `--plane-z` (0 by default).
2. It creates a default `Lens` at the origin facing +z, with radius 5 and its
   focal plane at z = -25.
3. It loads the scene file, traces every pixel and writes the PPM image.

Because the lens sits at the origin, the view plane should go in front of it
with a negative `--plane-z`. Otherwise the centre rays lie within the plane of
the lens.

Options:

- `-o`, `--output PATH` names the output file. Without it, the file is named
  after the date and time, the resolution, and the blur, rays-per-pixel,
  secondary-ray and lens settings, and it ends in `.ppm`.
- `--hres N` and `--vres N` set the resolution. Both must be positive.
- `--plane-z Z` sets the z coordinate of the view plane.
- `--debug-pixel X Y` picks the pixel whose tracing is reported in detail on
  standard error. The default is `250 230`.

While it runs, the command prints `World built.`, `Raytracing complete.`,
`Wrote image.` and the execution time in milliseconds. Progress per column is
sent to the `raytrace.render` logger at INFO level.

Render settings are module constants in `raytrace.constants`:

| Constant | Default | Meaning |
| --- | --- | --- |
| `BLUR` | `False` | Enables lens blur |
| `NPR` | 100 | Primary rays per pixel when blurring |
| `BRIGHTNESS_ADJUSTMENT` | 8 | Brightness scale |
| `LIGHTING` | `True` | Enables lighting |
| `SECONDARY_RAYS` | `True` | Enables reflection rays |
| `RECURSIVE_CASTING_DEPTH` | 5 | Maximum reflection depth |
| `TO_ACCELERATE` | `False` | Initial value of `World.accelerate` |

## Scene files

`raytrace.sceneparser.build_world_from_file(filename, world)` reads a text file
and adds its objects to `world`, then returns `world`. Lines that start with
`//` and empty lines are skipped. Fields are separated by single spaces.

```
// sphere  cx cy cz radius material r g b       (material: glossy, matte, cosine)
sphere 0 0 -100 30 glossy 1 0 0
// light   ox oy oz nx ny nz field_of_light
light 0 100 -50 0 -1 0 45
// wall    px py pz nx ny nz r g b
wall 0 -50 0 0 1 0 0.8 0.8 0.8
```

- A wall becomes a `Plane` with a `Wall` material and is registered as a wall.
- A light's field of light is stored, clamped to [0, 89] degrees, but it does
  not limit the illumination.
- A line with too few fields raises `ValueError`.
- An unknown object kind is reported on standard error and the line is skipped.
- An unknown material name is reported on standard error, and the sphere is
  added without a material.
- A file that cannot be opened yields no lines, so nothing is added.

The helpers `parse_sphere`, `parse_light` and `parse_wall` turn a list of
tokens into a single object.

## Using the library

```python
from raytrace.vector import Point3D, Vector3D
from raytrace.ray import Ray
from raytrace.shapes import Sphere
from raytrace.materials import Matte

sphere = Sphere(Point3D(0, 0, -10), 2, Matte(1, 0, 0))
info = sphere.hit(Ray(Point3D(0, 0, 0), Vector3D(0, 0, -1)))
# info is a ShadeInfo with t, hit_point, normal and material, or None on a miss
```

This example renders a whole world in code:

```python
from raytrace.world import World
from raytrace.lens import Lens
from raytrace.samplers import Simple
from raytrace.render import render

world = World()
world.vplane.top_left.z = world.vplane.bottom_right.z = -10
world.lens = Lens()
world.sampler = Simple(viewplane=world.vplane, lens=world.lens)
world.add_geometry(sphere)
image = render(world)
image.write_ppm("out.ppm")
```

To use the grid accelerator, follow these steps:

1. Give `world.acceleration.worldbox` a `BBox` with a positive volume.
2. Call `world.acceleration.generate_grid()` once the geometry has been added.
3. Set `world.accelerate = True`.

The modules:

- `raytrace.vector`: `Vector3D`, `Point3D`, `point_min` and `point_max`. For
  `Vector3D`, `*` is the dot product (or scaling by a number) and `^` is the
  cross product. Vector subtraction `a - b` yields `b` minus `a`.
- `raytrace.color`: `RGBColor` and `clip`.
- `raytrace.ray`: `Ray`, whose direction is stored normalized.
- `raytrace.shadeinfo`: `ShadeInfo`, the hit record.
- `raytrace.geometry`: the abstract `Geometry` base class.
- `raytrace.shapes`: `Plane`, `Sphere` and `Triangle`.
- `raytrace.materials`: `Material`, `Cosine`, `Glossy`, `Matte` and `Wall`.
- `raytrace.bbox`: `BBox`, with `hit`, `extend`, `union`, `enclosing`,
  `contains` and `overlaps`.
- `raytrace.accelerator`: `Accelerator`, the uniform grid.
- `raytrace.cameras`: `Camera`, `Parallel` and `Perspective`.
- `raytrace.lens`: `Lens`. It accepts an optional `seed` for its random points.
- `raytrace.samplers`: `ViewPlane`, `Sampler` and `Simple`.
- `raytrace.light`: `Light`.
- `raytrace.world`: `World`, which holds the scene and answers `hit_objects`
  and `light_value` queries.
- `raytrace.image`: `Image`, with `set_pixel`, `to_ppm` and `write_ppm`.
- `raytrace.utils`: `stringify`, `split`, `generate_file_name`,
  `current_date_time` and `get_lines_from_file`.
- `raytrace.render`: `lighting_intensity`, `recursive_cast`,
  `cast_secondary_rays`, `generate_primary_rays`, `cast_primary_rays`,
  `render` and `main`.

## What it does not do

- It renders on a single thread and has no preview window.
- It writes only P3 PPM images.
- Scene files cannot describe triangles, and there is no mesh file loader.
  Triangles can only be added in code.