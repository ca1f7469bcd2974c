"""Command line entry point: render the demo scene to a JPEG file."""

from __future__ import annotations

import argparse
import gc
import logging
import os
import time
import tracemalloc
from collections.abc import Sequence

from PIL import Image

from pathtracer.multipass import MultipassRenderer
from pathtracer.renderer import RenderOptions, RenderStats
from pathtracer.scenes import many_spheres

log = logging.getLogger(__name__)


def write_image(image: Image.Image, filename: str) -> None:
    """Save ``image`` as a maximum-quality JPEG."""
    image.convert("RGB").save(filename, format="JPEG", quality=100)


def start(options: RenderOptions, output: str | None, num_passes: int) -> RenderStats:
    """Render the demo scene, periodically writing the running average to ``output``."""
    aspect_ratio = options.width / options.height
    cpus = os.cpu_count() or 1

    log.info("loading scene")
    scene = many_spheres(aspect_ratio)
    renderer = MultipassRenderer(options)

    log.info("starting render")
    t0 = time.perf_counter()
    for n, film in enumerate(renderer.render(scene, num_passes), start=1):
        if n % cpus == 0 and output:
            percent = 100 * n / num_passes
            log.info(
                "finished pass %d (%.1f%%), writing film to file '%s'", n, percent, output
            )
            write_image(film.to_image(), output)
    elapsed = time.perf_counter() - t0

    log.info("finished %d passes in %.3fs", num_passes, elapsed)
    if num_passes:
        log.info("%.3fs / pass", elapsed / num_passes)
    stats = renderer.stats()
    log.info("%s", stats)
    return stats


def _parser() -> argparse.ArgumentParser:
    cpus = os.cpu_count() or 1
    parser = argparse.ArgumentParser(prog="pathtracer", description="Render a demo scene.")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=500)
    parser.add_argument("--samples", type=int, default=4, help="samples per pixel")
    parser.add_argument("--min-depth", type=int, default=8)
    parser.add_argument("--passes", type=int, default=4 * cpus)
    parser.add_argument("--output", default="./output.jpg")
    parser.add_argument("--mem-profile", default=None, help="write a tracemalloc snapshot here")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    if args.width <= 0 or args.height <= 0 or args.samples <= 0:
        _parser().error("width, height and samples must be positive")

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    options = RenderOptions(
        width=args.width,
        height=args.height,
        samples_per_pixel=args.samples,
        min_depth=args.min_depth,
    )

    if args.mem_profile:
        tracemalloc.start()

    start(options, args.output, args.passes)

    if args.mem_profile:
        gc.collect()
        tracemalloc.take_snapshot().dump(args.mem_profile)
        tracemalloc.stop()
    return 0