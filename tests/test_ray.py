import pytest

from pathtracer.materials import Lambertian
from pathtracer.ray import Ray, make_intersection, make_ray
from pathtracer.vec import Vec, dot, zero


def test_make_ray_normalizes_direction():
    r = make_ray(Vec(1.0, 2.0, 3.0), Vec(3.0, -4.0, 12.0))
    assert r.direction.length() == pytest.approx(1.0)
    assert r.origin == Vec(1.0, 2.0, 3.0)


def test_make_ray_zero_direction_raises():
    with pytest.raises(ZeroDivisionError):
        make_ray(zero(), zero())


def test_at_zero_is_origin():
    r = Ray(Vec(1.0, 1.0, 1.0), Vec(0.0, 0.0, 1.0))
    assert r.at(0) == r.origin


def test_at_moves_along_direction():
    r = make_ray(Vec(0.0, 0.0, 0.0), Vec(1.0, 1.0, 0.0))
    p = r.at(5.0)
    assert p.sub(r.origin).length() == pytest.approx(5.0)
    assert dot(p.normalized(), r.direction) == pytest.approx(1.0)


def test_intersection_front_face_keeps_normal():
    mat = Lambertian(Vec(0.5, 0.5, 0.5))
    r = make_ray(Vec(0.0, 0.0, -5.0), Vec(0.0, 0.0, 1.0))
    outward = Vec(0.0, 0.0, -1.0)
    isect = make_intersection(r, 4.0, r.at(4.0), outward, mat)
    assert isect.front_face is True
    assert isect.normal == outward
    assert isect.material is mat
    assert isect.t == 4.0


def test_intersection_back_face_flips_normal():
    mat = Lambertian(Vec(0.5, 0.5, 0.5))
    r = make_ray(zero(), Vec(0.0, 0.0, 1.0))
    outward = Vec(0.0, 0.0, 1.0)
    isect = make_intersection(r, 1.0, r.at(1.0), outward, mat)
    assert isect.front_face is False
    assert isect.normal == -outward
    assert dot(isect.normal, r.direction) < 0