"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass

from pathtracer.ray import Ray
from pathtracer.vec import Vec


def _div(a: float, b: float) -> float:
    """IEEE division: infinities and NaN instead of ZeroDivisionError."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _fmin(a: float, b: float) -> float:
    if a == -math.inf or b == -math.inf:
        return -math.inf
    if math.isnan(a) or math.isnan(b):
        return math.nan
    return a if a < b else b


def _fmax(a: float, b: float) -> float:
    if a == math.inf or b == math.inf:
        return math.inf
    if math.isnan(a) or math.isnan(b):
        return math.nan
    return a if a > b else b


@dataclass(frozen=True, slots=True)
class AABB:
    """Box spanned by the corners ``minimum`` and ``maximum``."""

    minimum: Vec
    maximum: Vec

    def intersects(self, ray: Ray, t_min: float, t_max: float) -> bool:
        """Whether the ray passes through the box within (t_min, t_max)."""
        for lo, hi, origin, direction in zip(self.minimum, self.maximum, ray.origin, ray.direction):
            a = _div(lo - origin, direction)
            b = _div(hi - origin, direction)
            t_min = _fmax(_fmin(a, b), t_min)
            t_max = _fmin(_fmax(a, b), t_max)
            if t_max <= t_min:
                return False
        return True

    def area(self) -> float:
        a = self.maximum.x - self.minimum.x
        b = self.maximum.y - self.minimum.z
        c = self.maximum.z - self.minimum.z
        return 2 * (a * b + b * c + c * a)


def surrounding_box(a: AABB, b: AABB) -> AABB:
    """Smallest box containing both boxes."""
    small = Vec(
        min(a.minimum.x, b.minimum.x),
        min(a.minimum.y, b.minimum.y),
        min(a.minimum.z, b.minimum.z),
    )
    big = Vec(
        max(a.maximum.x, b.maximum.x),
        max(a.maximum.y, b.maximum.y),
        max(a.maximum.z, b.maximum.z),
    )
    return AABB(small, big)