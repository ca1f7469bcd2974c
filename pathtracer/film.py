"""Accumulation buffer for rendered pixel colours."""

from __future__ import annotations

import math
from collections.abc import Iterator

from PIL import Image

from pathtracer.vec import Vec, zero


def clamp(value: float, low: float, high: float) -> float:
    """Limit ``value`` to the closed range [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def _to_byte(component: float) -> int:
    # Gamma 2 correction, then truncate to 0..255.
    return int(255 * clamp(math.sqrt(max(0.0, component)), 0, 1))


class Film:
    """A width x height grid of linear RGB colours, row-major from the top left."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid film size {width}x{height}")
        self.width = width
        self.height = height
        self.pixels: list[Vec] = [zero()] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} film")
        return y * self.width + x

    def set(self, x: int, y: int, color: Vec) -> None:
        self.pixels[self._index(x, y)] = color

    def get(self, x: int, y: int) -> Vec:
        return self.pixels[self._index(x, y)]

    def __iter__(self) -> Iterator[Vec]:
        return iter(self.pixels)

    def to_image(self) -> Image.Image:
        """Gamma-corrected, opaque RGBA image of the film."""
        image = Image.new("RGBA", (self.width, self.height))
        image.putdata(
            [(_to_byte(p.x), _to_byte(p.y), _to_byte(p.z), 255) for p in self.pixels]
        )
        return image

    def add(self, other: Film, n: int) -> Film:
        """Add ``other`` into this film and return the sum divided by ``n``."""
        if (other.width, other.height) != (self.width, self.height):
            raise ValueError("films differ in size")
        self.pixels = [a.add(b) for a, b in zip(self.pixels, other.pixels)]
        average = Film(self.width, self.height)
        average.pixels = [p.scaled(1.0 / n) for p in self.pixels]
        return average