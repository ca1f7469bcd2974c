"""Ready-made demo scenes."""

from __future__ import annotations

import random

from pathtracer.background import LinearGradientBackground
from pathtracer.camera import Camera
from pathtracer.materials import Dielectric, Lambertian, Material, Metal
from pathtracer.renderer import Scene
from pathtracer.surfaces import Sphere, Surface, SurfaceList
from pathtracer.vec import Vec, random_in_unit_disk, random_uniform

_SKY = LinearGradientBackground(Vec(0.82, 0.55, 0.24), Vec(0.24, 0.45, 0.72))


def many_spheres(aspect_ratio: float) -> Scene:
    """Three large spheres surrounded by small random ones (fixed seed)."""
    rng = random.Random(42)

    look_from = Vec(8, 2, -4)
    look_at = Vec(0, 0.5, 0)
    focus_dist = look_at.sub(look_from).length()

    white = Lambertian(Vec(1, 1, 1))
    brown = Lambertian(Vec(0.4, 0.2, 0.1))
    glass = Dielectric(Vec(0.95, 0.95, 1), 1.5)
    metal = Metal(Vec(0.2, 0.9, 0.2), 0.05)

    surfaces: list[Surface] = [
        Sphere(Vec(0, -999, 0), 999, white),
        Sphere(Vec(-2, 1, 0), 1, brown),
        Sphere(Vec(0, 1, 0), 1, glass),
        Sphere(Vec(2, 1, 0), 1, metal),
    ]

    for _ in range(128):
        radius = 0.2 + 0.2 * rng.random()
        disk = random_in_unit_disk(rng).scaled(16)
        pos = Vec(disk.x, radius, disk.y)

        # Skip spheres that would sit inside the big ones.
        if pos.length() < 3:
            continue

        choice = rng.random()
        material: Material
        if choice < 0.5:
            color = random_uniform(0, 1, rng)
            material = Lambertian(color.mult(color))
        elif choice < 0.75:
            color = random_uniform(0.5, 1, rng)
            material = Metal(color, 0.25 * rng.random())
        else:
            color = random_uniform(0.9, 1, rng)
            material = Dielectric(color, 1.5)

        surfaces.append(Sphere(pos, radius, material))

    camera = Camera(look_from, look_at, Vec(0, -1, 0), 55, aspect_ratio, 0.05, focus_dist)
    return Scene(camera=camera, world=SurfaceList(*surfaces), background=_SKY)


def spheres(aspect_ratio: float) -> Scene:
    """Three spheres on a large white ground sphere."""
    look_from = Vec(0, 2, -6)
    look_at = Vec(0, 0.5, 0)
    focus_dist = look_at.sub(look_from).length()

    white = Lambertian(Vec(1, 1, 1))
    red = Metal(Vec(1, 0, 0), 0.05)
    green = Lambertian(Vec(0, 1, 0))
    glass = Dielectric(Vec(0.95, 0.95, 1), 1.5)

    camera = Camera(look_from, look_at, Vec(0, -1, 0), 60, aspect_ratio, 0.05, focus_dist)
    world = SurfaceList(
        Sphere(Vec(0, -999, 0), 999, white),
        Sphere(Vec(-2, 1, 0), 1, red),
        Sphere(Vec(0, 1, 0), 1, green),
        Sphere(Vec(2, 1, 0), 1, glass),
    )
    return Scene(camera=camera, world=world, background=_SKY)