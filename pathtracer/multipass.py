"""Progressive renderer that averages many independent passes."""

from __future__ import annotations

import os
from collections.abc import Iterator
from concurrent.futures import ProcessPoolExecutor, as_completed

from pathtracer.film import Film
from pathtracer.renderer import Renderer, RenderOptions, RenderStats, Scene


def _render_pass(options: RenderOptions, scene: Scene, seed: int) -> tuple[Film, int]:
    renderer = Renderer(options)
    film = renderer.render(scene, seed)
    return film, renderer.stats().rays


class MultipassRenderer:
    """Renders passes with seeds 0..n-1 in parallel and yields running averages."""

    def __init__(self, options: RenderOptions, workers: int | None = None) -> None:
        self.options = options
        self.workers = workers
        self.rays = 0

    def _passes(self, scene: Scene, num_passes: int) -> Iterator[tuple[Film, int]]:
        workers = self.workers or os.cpu_count() or 1
        if workers == 1:
            for seed in range(num_passes):
                yield _render_pass(self.options, scene, seed)
            return

        executor = ProcessPoolExecutor(max_workers=workers)
        try:
            futures = [
                executor.submit(_render_pass, self.options, scene, seed)
                for seed in range(num_passes)
            ]
            for future in as_completed(futures):
                yield future.result()
        finally:
            executor.shutdown(wait=True, cancel_futures=True)

    def render(self, scene: Scene, num_passes: int) -> Iterator[Film]:
        """Yield the average of all passes finished so far, once per pass."""
        total = Film(self.options.width, self.options.height)
        for n, (film, rays) in enumerate(self._passes(scene, num_passes), start=1):
            self.rays += rays
            yield total.add(film, n)

    def stats(self) -> RenderStats:
        return RenderStats(rays=self.rays)