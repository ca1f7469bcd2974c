"""Rays and ray/surface intersection records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pathtracer.vec import Vec, dot

if TYPE_CHECKING:
    from pathtracer.materials import Material


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line starting at ``origin``."""

    origin: Vec
    direction: Vec

    def at(self, t: float) -> Vec:
        return self.origin.add(self.direction.scaled(t))


def make_ray(origin: Vec, direction: Vec) -> Ray:
    """Build a ray with a normalised direction."""
    return Ray(origin, direction.normalized())


@dataclass(frozen=True, slots=True)
class Intersection:
    """Where a ray hit a surface; ``normal`` always faces against the ray."""

    t: float
    p: Vec
    normal: Vec
    front_face: bool
    material: Material


def make_intersection(
    ray: Ray, t: float, p: Vec, outward_normal: Vec, material: Material
) -> Intersection:
    front_face = dot(ray.direction, outward_normal) < 0
    normal = outward_normal if front_face else outward_normal.scaled(-1)
    return Intersection(t=t, p=p, normal=normal, front_face=front_face, material=material)