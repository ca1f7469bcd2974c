"""Surface materials describing how light scatters."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass

from pathtracer.ray import Intersection, Ray, make_ray
from pathtracer.vec import (
    Vec,
    dot,
    random_in_hemisphere,
    random_in_unit_sphere,
    reflect,
    refract,
)


@dataclass(frozen=True, slots=True)
class Scatter:
    """Outcome of a scattering event: colour filter and outgoing ray."""

    attenuation: Vec
    scattered: Ray


class Material(ABC):
    """How a surface reflects or transmits incoming rays."""

    @abstractmethod
    def scatter(self, ray: Ray, isect: Intersection, rng: random.Random) -> Scatter | None:
        """Scatter ``ray`` at ``isect``; None when the light is absorbed."""


@dataclass(frozen=True)
class Lambertian(Material):
    """Ideal diffuse surface."""

    albedo: Vec

    def scatter(self, ray: Ray, isect: Intersection, rng: random.Random) -> Scatter | None:
        direction = random_in_hemisphere(isect.normal, rng)
        return Scatter(self.albedo, make_ray(isect.p, direction))


@dataclass(frozen=True)
class Metal(Material):
    """Mirror-like surface; ``fuzz`` blurs the reflection."""

    albedo: Vec
    fuzz: float

    def scatter(self, ray: Ray, isect: Intersection, rng: random.Random) -> Scatter | None:
        reflected = reflect(ray.direction, isect.normal)
        direction = reflected.add(random_in_unit_sphere(rng).scaled(self.fuzz))
        scattered = make_ray(isect.p, direction)
        if dot(scattered.direction, isect.normal) > 0:
            return Scatter(self.albedo, scattered)
        return None


@dataclass(frozen=True)
class Dielectric(Material):
    """Transparent material such as glass."""

    albedo: Vec
    index_of_refraction: float

    def scatter(self, ray: Ray, isect: Intersection, rng: random.Random) -> Scatter | None:
        if isect.front_face:
            refraction_ratio = 1.0 / self.index_of_refraction
        else:
            refraction_ratio = self.index_of_refraction

        cos_theta = min(1.0, dot(ray.direction.scaled(-1), isect.normal))
        sin_theta = math.sqrt(max(0.0, 1 - cos_theta * cos_theta))

        cannot_refract = refraction_ratio * sin_theta > 1
        if cannot_refract or reflectance(cos_theta, refraction_ratio) > rng.random():
            direction = reflect(ray.direction, isect.normal)
        else:
            direction = refract(ray.direction, isect.normal, refraction_ratio)

        return Scatter(self.albedo, make_ray(isect.p, direction))


def reflectance(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of Fresnel reflectance."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 *= r0
    return r0 + (1.0 - r0) * (1 - cosine) ** 5