import pytest

from raytrace.color import RGBColor
from raytrace.constants import RECURSIVE_CASTING_DEPTH, WHITE
from raytrace.lens import Lens
from raytrace.light import Light
from raytrace.materials import Matte
from raytrace.ray import Ray
from raytrace.render import (
    cast_primary_rays,
    cast_secondary_rays,
    generate_primary_rays,
    lighting_intensity,
    main,
    recursive_cast,
    render,
)
from raytrace.samplers import Simple, ViewPlane
from raytrace.shadeinfo import ShadeInfo
from raytrace.shapes import Sphere
from raytrace.vector import Point3D, Vector3D
from raytrace.world import World


def _surface_hit(material=None):
    return ShadeInfo(
        hit=True,
        material=material if material is not None else Matte(1.0),
        hit_point=Point3D(0.0, 0.0, 0.0),
        normal=Vector3D(0.0, 0.0, 1.0),
    )


def _down_ray():
    return Ray(Point3D(0.0, 0.0, 5.0), Vector3D(0.0, 0.0, -1.0))


def _small_world():
    world = World()
    world.vplane = ViewPlane(
        top_left=Point3D(-2.0, 2.0, -10.0),
        bottom_right=Point3D(2.0, -2.0, -10.0),
        hres=4,
        vres=4,
    )
    world.lens = Lens()
    world.sampler = Simple(viewplane=world.vplane, lens=world.lens)
    return world


def test_lighting_intensity_uses_world_lights():
    world = World()
    world.add_light(Light(Point3D(0.0, 0.0, 10.0), Vector3D(0.0, 0.0, -1.0)))
    sinfo = _surface_hit()
    expected = world.light_value(sinfo.hit_point, sinfo.normal)
    assert lighting_intensity(sinfo, world) == pytest.approx(expected)
    assert expected > 0


def test_recursion_stops_at_max_depth():
    world = World()
    world.bg_color = RGBColor(0.3, 0.2, 0.1)
    result = recursive_cast(_down_ray(), _surface_hit(), world, 1.0, RECURSIVE_CASTING_DEPTH)
    assert result == world.bg_color


def test_reflection_into_empty_space_gives_background():
    world = World()
    world.bg_color = WHITE
    world.add_geometry(Sphere(Point3D(0.0, 0.0, -10.0), 1.0, Matte(1.0)))
    assert recursive_cast(_down_ray(), _surface_hit(), world, 1.0, 0) == WHITE


def test_reflection_travels_along_mirrored_direction():
    world = World()
    world.bg_color = WHITE
    matte = Matte(1.0)
    world.add_geometry(Sphere(Point3D(0.0, 0.0, 10.0), 1.0, matte))
    result = recursive_cast(_down_ray(), _surface_hit(), world, 1.0, 0)
    # Unlit sphere adds nothing itself; its reflection back into space adds
    # the background weighted by its reflective index.
    assert result.r == pytest.approx(matte.r_index())
    assert result.g == pytest.approx(matte.r_index())


def test_generate_primary_rays_aim_at_focal_point():
    world = _small_world()
    lens = world.lens
    rays = generate_primary_rays(1, 2, world.sampler, world, lens.focal_plane, 3, lens)
    assert len(rays) == 3
    focal = lens.focal_plane.hit(world.sampler.get_center_ray(1, 2)).hit_point
    for ray in rays:
        assert ray.w == pytest.approx(1.0 / 3)
        assert ray.o == lens.origin
        assert ray.d.length() == pytest.approx(1.0)
        reached = lens.focal_plane.hit(ray).hit_point
        assert reached.x == pytest.approx(focal.x)
        assert reached.y == pytest.approx(focal.y)


def test_missing_primary_ray_takes_background():
    world = World()
    world.bg_color = RGBColor(0.2, 0.4, 0.6)
    assert cast_primary_rays([_down_ray()], world) == world.bg_color


def test_render_empty_world_is_background():
    world = _small_world()
    image = render(world)
    assert image.to_ppm() == "P3\n4 4\n255\n" + "0 0 0 " * 16


def test_render_needs_sampler():
    world = World()
    world.lens = Lens()
    with pytest.raises(ValueError):
        render(world)


def test_main_writes_image(tmp_path):
    scene = tmp_path / "scene.txt"
    scene.write_text("sphere 0 0 -40 5 matte 1 0 0\nlight 0 20 0 0 -1 0 45\n")
    out = tmp_path / "out.ppm"
    status = main([str(scene), "--hres", "4", "--vres", "3", "--plane-z", "-10", "-o", str(out)])
    assert status == 0
    text = out.read_text()
    assert text.startswith("P3\n4 3\n255\n")
    assert len(text.split("\n", 3)[3].split()) == 4 * 3 * 3