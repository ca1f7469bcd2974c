"""Single-pass path tracing renderer."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from pathtracer.background import LinearGradientBackground
from pathtracer.camera import Camera
from pathtracer.film import Film
from pathtracer.ray import Ray
from pathtracer.surfaces import Surface
from pathtracer.vec import Vec, one, zero

# Smallest positive single-precision float, used to avoid self-intersection.
_T_MIN = 1.401298464324817e-45
_RUSSIAN_ROULETTE_STOP = 0.1


@dataclass(frozen=True)
class RenderOptions:
    width: int
    height: int
    samples_per_pixel: int
    min_depth: int


@dataclass(frozen=True)
class RenderStats:
    rays: int

    def __str__(self) -> str:
        return f"rays: {self.rays}"


@dataclass(frozen=True)
class Scene:
    camera: Camera
    world: Surface
    background: LinearGradientBackground


class Renderer:
    """Renders one pass of a scene into a film."""

    def __init__(self, options: RenderOptions) -> None:
        self.options = options
        self.rays = 0

    def render(self, scene: Scene, seed: int) -> Film:
        opts = self.options
        film = Film(opts.width, opts.height)
        rng = random.Random(seed)

        for y in range(opts.height):
            for x in range(opts.width):
                total = zero()
                for _ in range(opts.samples_per_pixel):
                    u = (x + rng.random()) / opts.width
                    v = (y + rng.random()) / opts.height
                    ray = scene.camera.ray(u, v, rng)
                    self.rays += 1
                    total = total.add(self.ray_color(ray, scene, 0, rng))
                film.set(x, y, total.scaled(1.0 / opts.samples_per_pixel))

        return film

    def ray_color(self, ray: Ray, scene: Scene, depth: int, rng: random.Random) -> Vec:
        """Colour carried back along ``ray`` after bouncing through the scene."""
        throughput = one()
        while True:
            if depth > self.options.min_depth and rng.random() < _RUSSIAN_ROULETTE_STOP:
                return zero()

            isect = scene.world.intersect(ray, _T_MIN, math.inf)
            if isect is None:
                return throughput.mult(scene.background.ray_color(ray))

            scatter = isect.material.scatter(ray, isect, rng)
            if scatter is None:
                return zero()

            throughput = throughput.mult(scatter.attenuation)
            ray = scatter.scattered
            depth += 1

    def stats(self) -> RenderStats:
        return RenderStats(rays=self.rays)