# pathtracer

A small physically based path tracer. Scenes are built from spheres with
diffuse (Lambertian), metal and glass (dielectric) materials under a
gradient sky, seen through a thin-lens camera with depth of field. Several
independent passes are rendered in parallel and averaged, and the running
average is written to a JPEG file as the render goes on.

## Installation

```
pip install .
```

Install with the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
pathtracer
```

This renders the built-in scene of many spheres and, every time a number of
passes equal to the CPU count has finished, writes the averaged image to
`./output.jpg`. When the render is done it logs the total time, the time per
pass and the number of rays traced.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--width` | 800 | image width in pixels |
| `--height` | 500 | image height in pixels |
| `--samples` | 4 | samples per pixel |
| `--min-depth` | 8 | bounces before Russian roulette may stop a path |
| `--passes` | 4 × CPU count | number of passes to render and average |
| `--output` | `./output.jpg` | JPEG file the running average is written to |
| `--mem-profile` | none | write a `tracemalloc` snapshot to this file after rendering |

Width, height and samples must be positive. For example:

```
pathtracer --width 320 --height 200 --passes 8 --output preview.jpg
```

## Library use

```python
from pathtracer.cli import write_image
from pathtracer.multipass import MultipassRenderer
from pathtracer.renderer import RenderOptions, Renderer
from pathtracer.scenes import spheres

if __name__ == "__main__":
    options = RenderOptions(width=200, height=125, samples_per_pixel=4, min_depth=8)
    scene = spheres(options.width / options.height)

    # One pass with a fixed seed
    renderer = Renderer(options)
    film = renderer.render(scene, seed=0)
    write_image(film.to_image(), "single.jpg")
    print(renderer.stats())  # "rays: ..."

    # Several passes, averaged as they arrive
    multipass = MultipassRenderer(options)
    for averaged in multipass.render(scene, 8):
        pass
    write_image(averaged.to_image(), "averaged.jpg")
    print(multipass.stats())
```

`MultipassRenderer` renders passes with seeds `0` to `n - 1` in a process
pool (one worker per CPU unless `workers=` is given; `workers=1` renders in
the calling process). `render` is a generator that yields, after each pass
finishes, the average of all passes finished so far. Passes are taken in the
order they complete, so keep the `if __name__ == "__main__":` guard when
using the pool.

`Film.to_image()` returns a gamma-corrected RGBA Pillow image;
`write_image` converts it to RGB and saves it as a quality-100 JPEG.

Building blocks live in their own modules:

- `pathtracer.vec` – the `Vec` type and vector helpers (`dot`, `cross`,
  `reflect`, `refract`, `zero`, `one`, and random sampling helpers).
- `pathtracer.ray` – `Ray`, `Intersection`, `make_ray`, `make_intersection`.
- `pathtracer.aabb` – `AABB` boxes and `surrounding_box`.
- `pathtracer.camera` – `Camera`.
- `pathtracer.materials` – `Lambertian`, `Metal`, `Dielectric`, and the
  `Scatter` result returned by `Material.scatter`.
- `pathtracer.surfaces` – `Sphere` and `SurfaceList`.
- `pathtracer.background` – `LinearGradientBackground`.
- `pathtracer.film` – `Film`, the pixel buffer.
- `pathtracer.renderer` – `RenderOptions`, `Scene`, `Renderer`, `RenderStats`.
- `pathtracer.multipass` – `MultipassRenderer`.
- `pathtracer.scenes` – the ready-made `spheres` and `many_spheres` scenes.

Each pass is deterministic for a given seed, since it draws from its own
seeded random generator.

## Limitations

- Spheres are the only geometry; `AABB` boxes exist but are not used to
  speed up intersection, so every ray is tested against every sphere.
- The command always renders the `many_spheres` scene; other scenes are
  available only through the library.
- Output is JPEG only, and there is no CPU profiling option.