"""Thin-lens camera."""

from __future__ import annotations

import math
import random

from pathtracer.ray import Ray, make_ray
from pathtracer.vec import Vec, cross, random_in_unit_disk


def deg_to_rad(deg: float) -> float:
    return deg * math.pi / 180


class Camera:
    """Camera with depth of field; (s, t) = (0, 0) is the top-left corner."""

    __slots__ = (
        "origin",
        "top_left_corner",
        "horizontal",
        "vertical",
        "u",
        "v",
        "w",
        "lens_radius",
    )

    def __init__(
        self,
        look_from: Vec,
        look_at: Vec,
        v_down: Vec,
        fov: float,
        aspect_ratio: float,
        aperture: float,
        focus_dist: float,
    ) -> None:
        theta = deg_to_rad(fov)
        viewport_width = 2 * math.tan(theta / 2)
        viewport_height = viewport_width / aspect_ratio

        w = look_from.sub(look_at).normalized()
        u = cross(v_down, w).normalized()
        v = cross(w, u)

        self.origin = look_from
        self.horizontal = u.scaled(focus_dist * viewport_width)
        self.vertical = v.scaled(focus_dist * viewport_height)
        self.top_left_corner = (
            self.origin.sub(self.horizontal.scaled(0.5))
            .sub(self.vertical.scaled(0.5))
            .sub(w.scaled(focus_dist))
        )
        self.u = u
        self.v = v
        self.w = w
        self.lens_radius = aperture / 2

    def ray(self, s: float, t: float, rng: random.Random) -> Ray:
        """Ray through viewport coordinates (s, t), both in [0, 1]."""
        rd = random_in_unit_disk(rng).scaled(self.lens_radius)
        offset = self.u.scaled(rd.x).add(self.v.scaled(rd.y))
        target = self.top_left_corner.add(self.horizontal.scaled(s)).add(self.vertical.scaled(t))
        return make_ray(self.origin.add(offset), target.sub(self.origin).sub(offset))