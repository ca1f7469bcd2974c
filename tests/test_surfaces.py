import math

import pytest

from pathtracer.materials import Lambertian
from pathtracer.ray import make_ray
from pathtracer.surfaces import Sphere, Surface, SurfaceList
from pathtracer.vec import Vec, dot, zero

WHITE = Lambertian(Vec(1.0, 1.0, 1.0))
RED = Lambertian(Vec(1.0, 0.0, 0.0))


def test_surface_is_abstract():
    with pytest.raises(TypeError):
        Surface()


def test_sphere_hit_from_outside():
    sphere = Sphere(zero(), 1.0, WHITE)
    r = make_ray(Vec(0.0, 0.0, -5.0), Vec(0.0, 0.0, 1.0))
    isect = sphere.intersect(r, 0.0, math.inf)
    assert isect.t == pytest.approx(4.0)
    assert isect.front_face is True
    assert isect.p.sub(sphere.center).length() == pytest.approx(sphere.radius)
    assert tuple(r.at(isect.t)) == pytest.approx(tuple(isect.p))
    assert dot(isect.normal, r.direction) < 0
    assert isect.material is WHITE


def test_sphere_hit_from_inside():
    sphere = Sphere(zero(), 2.0, WHITE)
    r = make_ray(zero(), Vec(1.0, 1.0, 0.0))
    isect = sphere.intersect(r, 0.0, math.inf)
    assert isect.t == pytest.approx(sphere.radius)
    assert isect.front_face is False
    assert dot(isect.normal, r.direction) < 0


def test_sphere_miss():
    sphere = Sphere(zero(), 1.0, WHITE)
    r = make_ray(Vec(0.0, 2.0, -5.0), Vec(0.0, 0.0, 1.0))
    assert sphere.intersect(r, 0.0, math.inf) is None


def test_sphere_beyond_t_max():
    sphere = Sphere(zero(), 1.0, WHITE)
    r = make_ray(Vec(0.0, 0.0, -5.0), Vec(0.0, 0.0, 1.0))
    assert sphere.intersect(r, 0.0, 3.0) is None


def test_sphere_behind_ray():
    sphere = Sphere(zero(), 1.0, WHITE)
    r = make_ray(Vec(0.0, 0.0, 5.0), Vec(0.0, 0.0, 1.0))
    assert sphere.intersect(r, 0.0, math.inf) is None


def test_list_returns_closest_hit():
    near = Sphere(Vec(0.0, 0.0, 0.0), 1.0, RED)
    far = Sphere(Vec(0.0, 0.0, 10.0), 1.0, WHITE)
    r = make_ray(Vec(0.0, 0.0, -5.0), Vec(0.0, 0.0, 1.0))
    for world in (SurfaceList(near, far), SurfaceList(far, near)):
        isect = world.intersect(r, 0.0, math.inf)
        assert isect.material is RED
        assert isect.t == near.intersect(r, 0.0, math.inf).t


def test_empty_list_misses():
    r = make_ray(zero(), Vec(0.0, 0.0, 1.0))
    world = SurfaceList()
    assert len(world) == 0
    assert world.intersect(r, 0.0, math.inf) is None


def test_list_iterates_in_order():
    a = Sphere(zero(), 1.0, RED)
    b = Sphere(zero(), 2.0, WHITE)
    assert list(SurfaceList(a, b)) == [a, b]