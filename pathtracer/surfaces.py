"""Geometry that rays can hit."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator

from pathtracer.materials import Material
from pathtracer.ray import Intersection, Ray, make_intersection
from pathtracer.vec import Vec, dot


class Surface(ABC):
    """Anything a ray can intersect."""

    @abstractmethod
    def intersect(self, ray: Ray, t_min: float, t_max: float) -> Intersection | None:
        """Nearest hit with t in [t_min, t_max], or None."""


@dataclass(frozen=True)
class Sphere(Surface):
    center: Vec
    radius: float
    material: Material

    def intersect(self, ray: Ray, t_min: float, t_max: float) -> Intersection | None:
        oc = ray.origin.sub(self.center)
        a = ray.direction.len_sqr()
        half_b = dot(oc, ray.direction)
        c = oc.len_sqr() - self.radius * self.radius

        discriminant = half_b * half_b - a * c
        if discriminant < 0:
            return None
        sqrt_d = math.sqrt(discriminant)

        root = (-half_b - sqrt_d) / a
        if root < t_min or root > t_max:
            root = (-half_b + sqrt_d) / a
            if root < t_min or root > t_max:
                return None

        p = ray.at(root)
        outward_normal = p.sub(self.center).scaled(1 / self.radius)
        return make_intersection(ray, root, p, outward_normal, self.material)


class SurfaceList(Surface):
    """A group of surfaces; reports the closest hit among them."""

    def __init__(self, *surfaces: Surface) -> None:
        self.surfaces = tuple(surfaces)

    def __iter__(self) -> Iterator[Surface]:
        return iter(self.surfaces)

    def __len__(self) -> int:
        return len(self.surfaces)

    def intersect(self, ray: Ray, t_min: float, t_max: float) -> Intersection | None:
        closest: Intersection | None = None
        closest_t = t_max
        for surface in self.surfaces:
            isect = surface.intersect(ray, t_min, closest_t)
            if isect is not None:
                closest = isect
                closest_t = isect.t
        return closest