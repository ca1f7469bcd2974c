import math
import random

import pytest

from pathtracer.camera import Camera, deg_to_rad
from pathtracer.vec import Vec, dot


def pinhole():
    return Camera(
        Vec(0.0, 0.0, -5.0),
        Vec(0.0, 0.0, 0.0),
        Vec(0.0, -1.0, 0.0),
        60,
        2.0,
        0.0,
        5.0,
    )


def test_deg_to_rad():
    assert deg_to_rad(180) == pytest.approx(math.pi)
    assert deg_to_rad(0) == 0


def test_center_ray_points_at_target():
    cam = pinhole()
    r = cam.ray(0.5, 0.5, random.Random(0))
    assert tuple(r.origin) == pytest.approx((0.0, 0.0, -5.0))
    assert dot(r.direction, Vec(0.0, 0.0, 1.0)) == pytest.approx(1.0)


def test_top_left_is_up_and_left():
    cam = pinhole()
    rng = random.Random(0)
    top_left = cam.ray(0.0, 0.0, rng)
    bottom_right = cam.ray(1.0, 1.0, rng)
    assert top_left.direction.y > 0
    assert top_left.direction.x < 0
    assert bottom_right.direction.y < 0
    assert bottom_right.direction.x > 0


def test_corner_rays_symmetric():
    cam = pinhole()
    rng = random.Random(0)
    a = cam.ray(0.0, 0.0, rng).direction
    b = cam.ray(1.0, 1.0, rng).direction
    assert a.x == pytest.approx(-b.x)
    assert a.y == pytest.approx(-b.y)
    assert a.z == pytest.approx(b.z)


def test_aspect_ratio_wider_than_tall():
    cam = pinhole()
    assert cam.horizontal.length() == pytest.approx(2.0 * cam.vertical.length())


def test_lens_rays_pass_through_focus_point():
    look_from = Vec(8.0, 2.0, -4.0)
    look_at = Vec(0.0, 0.5, 0.0)
    focus = look_at.sub(look_from).length()
    cam = Camera(look_from, look_at, Vec(0.0, -1.0, 0.0), 55, 1.6, 2.0, focus)
    rng = random.Random(5)
    for _ in range(20):
        r = cam.ray(0.5, 0.5, rng)
        assert r.origin.sub(look_from).length() <= 1.0 + 1e-9
        t = dot(look_at.sub(r.origin), r.direction)
        assert tuple(r.at(t)) == pytest.approx(tuple(look_at), abs=1e-9)