"""Three-component vectors and random sampling helpers."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Vec:
    """A 3D vector, also used for RGB colours."""

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def add(self, other: Vec) -> Vec:
        return Vec(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: Vec) -> Vec:
        return Vec(self.x - other.x, self.y - other.y, self.z - other.z)

    def scaled(self, factor: float) -> Vec:
        return Vec(self.x * factor, self.y * factor, self.z * factor)

    def mult(self, other: Vec) -> Vec:
        """Component-wise product."""
        return Vec(self.x * other.x, self.y * other.y, self.z * other.z)

    def len_sqr(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.len_sqr())

    def normalized(self) -> Vec:
        """Unit vector in the same direction; raises ZeroDivisionError for zero."""
        return self.scaled(1 / self.length())

    def __add__(self, other: Vec) -> Vec:
        return self.add(other)

    def __sub__(self, other: Vec) -> Vec:
        return self.sub(other)

    def __mul__(self, factor: float) -> Vec:
        return self.scaled(factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec:
        return self.scaled(-1)


def dot(u: Vec, v: Vec) -> float:
    return u.x * v.x + u.y * v.y + u.z * v.z


def cross(u: Vec, v: Vec) -> Vec:
    return Vec(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )


def reflect(v: Vec, n: Vec) -> Vec:
    """Mirror ``v`` about the plane with normal ``n``."""
    return v.sub(n.scaled(2 * dot(v, n)))


def refract(uv: Vec, n: Vec, etai_over_etat: float) -> Vec:
    """Bend the unit vector ``uv`` through a surface with normal ``n``."""
    cos_theta = min(1.0, dot(uv.scaled(-1), n))
    r_out_perp = uv.add(n.scaled(cos_theta)).scaled(etai_over_etat)
    r_out_parallel = n.scaled(-math.sqrt(abs(1 - r_out_perp.len_sqr())))
    return r_out_perp.add(r_out_parallel)


def zero() -> Vec:
    return Vec(0.0, 0.0, 0.0)


def one() -> Vec:
    return Vec(1.0, 1.0, 1.0)


def _uniform(low: float, high: float, rng: random.Random) -> float:
    return low + (high - low) * rng.random()


def random_uniform(low: float, high: float, rng: random.Random) -> Vec:
    """Vector with each component drawn uniformly from [low, high)."""
    return Vec(_uniform(low, high, rng), _uniform(low, high, rng), _uniform(low, high, rng))


def random_in_unit_disk(rng: random.Random) -> Vec:
    """Random point strictly inside the unit disk in the XY plane."""
    while True:
        p = Vec(_uniform(-1, 1, rng), _uniform(-1, 1, rng), 0.0)
        if p.len_sqr() < 1:
            return p


def random_in_unit_sphere(rng: random.Random) -> Vec:
    """Random point strictly inside the unit sphere."""
    while True:
        p = random_uniform(-1, 1, rng)
        if p.len_sqr() < 1:
            return p


def random_in_hemisphere(normal: Vec, rng: random.Random) -> Vec:
    """Random point in the unit ball on the side that ``normal`` points to."""
    in_unit_sphere = random_in_unit_sphere(rng)
    if dot(in_unit_sphere, normal) > 0:
        return in_unit_sphere
    return in_unit_sphere.scaled(-1)