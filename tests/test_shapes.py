import math

import pytest

from raytrace.materials import Matte
from raytrace.ray import Ray
from raytrace.shapes import Plane, Sphere, Triangle
from raytrace.vector import Point3D, Vector3D


def _on_plane(plane, p):
    return (p - plane.a) * plane.n


def test_default_plane_hit_lies_on_plane():
    plane = Plane()
    ray = Ray(Point3D(1, 5, 2), Vector3D(0.3, -1, 0.2))
    hit = plane.hit(ray)
    assert hit is not None
    assert hit.hit
    assert _on_plane(plane, hit.hit_point) == pytest.approx(0, abs=1e-9)
    assert hit.t == pytest.approx(ray.o.distance(hit.hit_point))


def test_plane_normal_is_normalized_and_reported():
    plane = Plane(Point3D(0, 0, -10), Vector3D(0, 0, 7))
    assert plane.n.length() == pytest.approx(1.0)
    hit = plane.hit(Ray(Point3D(), Vector3D(0, 0, -1)))
    assert hit.normal == plane.n
    assert hit.hit_point.z == pytest.approx(plane.a.z)


def test_plane_parallel_ray_misses():
    plane = Plane()
    assert plane.hit(Ray(Point3D(0, 1, 0), Vector3D(1, 0, 0))) is None


def test_plane_behind_ray_misses():
    plane = Plane()
    assert plane.hit(Ray(Point3D(0, 1, 0), Vector3D(0, 1, 0))) is None


def test_plane_hit_carries_material():
    material = Matte(0.5)
    plane = Plane(material=material)
    hit = plane.hit(Ray(Point3D(0, 3, 0), Vector3D(0, -1, 0)))
    assert hit.material is material


def test_plane_bbox_is_degenerate_at_origin():
    box = Plane(Point3D(4, 4, 4), Vector3D(1, 0, 0)).bbox()
    assert box.pmin == Point3D()
    assert box.pmax == Point3D()


def test_plane_to_string_mentions_point_and_normal():
    plane = Plane(Point3D(1, 2, 3), Vector3D(0, 0, 1))
    text = plane.to_string()
    assert text.startswith("Point: " + Point3D(1, 2, 3).to_string())
    assert "normal: " + plane.n.to_string() in text


def test_sphere_hit_from_outside_is_nearest_surface():
    sphere = Sphere(Point3D(0, 0, -10), 2)
    ray = Ray(Point3D(), Vector3D(0, 0, -1))
    hit = sphere.hit(ray)
    assert hit is not None
    assert hit.hit_point.distance(sphere.c) == pytest.approx(sphere.r)
    assert hit.t == pytest.approx(ray.o.distance(hit.hit_point))
    assert hit.t < ray.o.distance(sphere.c)
    assert hit.normal.length() == pytest.approx(1.0)
    assert hit.normal * ray.d < 0


def test_sphere_hit_from_inside_uses_positive_root():
    sphere = Sphere(Point3D(0, 0, 0), 3)
    ray = Ray(Point3D(), Vector3D(1, 1, 0))
    hit = sphere.hit(ray)
    assert hit.t == pytest.approx(sphere.r)
    assert hit.normal * ray.d == pytest.approx(1.0)


def test_sphere_tangent_ray_hits_once():
    sphere = Sphere(Point3D(0, 0, -5), 1)
    hit = sphere.hit(Ray(Point3D(1, 0, 0), Vector3D(0, 0, -1)))
    assert hit is not None
    assert hit.hit_point.x == pytest.approx(sphere.r)
    assert hit.hit_point.z == pytest.approx(sphere.c.z)


def test_sphere_miss_and_behind():
    sphere = Sphere(Point3D(0, 0, -5), 1)
    assert sphere.hit(Ray(Point3D(5, 0, 0), Vector3D(0, 0, -1))) is None
    assert sphere.hit(Ray(Point3D(), Vector3D(0, 0, 1))) is None


def test_sphere_bbox_spans_radius():
    sphere = Sphere(Point3D(1, 2, 3), 2)
    box = sphere.bbox()
    assert box.pmin == Point3D(1 - 2, 2 - 2, 3 - 2)
    assert box.pmax == Point3D(1 + 2, 2 + 2, 3 + 2)
    assert box.geometry_child is sphere


def test_sphere_to_string():
    sphere = Sphere(Point3D(1, 2, 3), 4)
    assert sphere.to_string() == "Center: (1.000000, 2.000000, 3.000000)\nradius: 4.000000\n"


@pytest.fixture
def triangle():
    return Triangle(Point3D(-1, -1, -5), Point3D(1, -1, -5), Point3D(0, 1, -5), Matte(0.2))


def test_triangle_hit_inside(triangle):
    ray = Ray(Point3D(), Vector3D(0, 0, -1))
    hit = triangle.hit(ray)
    assert hit is not None
    assert hit.hit_point.z == pytest.approx(triangle.v0.z)
    assert hit.t == pytest.approx(ray.o.distance(hit.hit_point))
    assert hit.normal.length() == pytest.approx(1.0)
    assert hit.material is triangle.material


def test_triangle_miss_outside(triangle):
    assert triangle.hit(Ray(Point3D(), Vector3D(3, 3, -5))) is None


def test_triangle_parallel_ray_misses(triangle):
    assert triangle.hit(Ray(Point3D(), Vector3D(1, 0, 0))) is None


def test_triangle_behind_ray_misses(triangle):
    assert triangle.hit(Ray(Point3D(), Vector3D(0, 0, 1))) is None


def test_triangle_bbox_is_componentwise_extent(triangle):
    box = triangle.bbox()
    assert box.pmin == Point3D(-1, -1, -5)
    assert box.pmax == Point3D(1, 1, -5)
    assert box.geometry_child is triangle
    for v in (triangle.v0, triangle.v1, triangle.v2):
        assert box.contains(v)


def test_triangle_to_string(triangle):
    lines = triangle.to_string().splitlines()
    assert lines == [
        "Point 1: " + triangle.v0.to_string(),
        "Point 2: " + triangle.v1.to_string(),
        "Point 3: " + triangle.v2.to_string(),
    ]


def test_hit_does_not_share_ray_with_caller():
    plane = Plane()
    ray = Ray(Point3D(0, 2, 0), Vector3D(0, -1, 0))
    hit = plane.hit(ray)
    assert hit.ray == ray
    ray.o.x = 100
    assert not math.isclose(hit.ray.o.x, ray.o.x)