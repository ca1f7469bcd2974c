"""Sky backgrounds for rays that hit nothing."""

from __future__ import annotations

from dataclasses import dataclass

from pathtracer.ray import Ray
from pathtracer.vec import Vec


@dataclass(frozen=True, slots=True)
class LinearGradientBackground:
    """Blend from ``bottom`` to ``top`` by the ray's vertical direction."""

    bottom: Vec
    top: Vec

    def ray_color(self, ray: Ray) -> Vec:
        unit_direction = ray.direction.normalized()
        t = (unit_direction.y + 1) / 2
        return self.bottom.scaled(1 - t).add(self.top.scaled(t))