# weekendtracer

A small, pure-Python path tracer. It renders scenes of spheres with diffuse
(Lambertian), metal and glass (dielectric) materials through a thin-lens
camera with adjustable field of view and depth of field, and writes the result
as a plain-text PPM (`P3`) image. It has no dependencies beyond the standard
library.

## Installing

```
pip install .
```

## Commands

`weekendtracer` renders the demonstration scene: a large grey ground sphere,
a grid of small randomly placed spheres in random materials (about 80 %
diffuse, 15 % metal, 5 % glass), and three large spheres in glass, diffuse and
metal. The image goes to standard output; progress messages (the sample scale,
a countdown of remaining scanlines and "Done.") go to standard error:

```
weekendtracer > scene.ppm
```

The scene is built afresh from Python's `random` module on every run, so each
render differs. The camera settings (1200 pixels wide at 16:9, 500 samples per
pixel, up to 50 bounces, 20° field of view, 0.6° defocus angle) give a good
image but take a very long time in pure Python.

`weekendtracer-gradient` writes a 256×256 test image whose red channel rises
from left to right and green channel from top to bottom. It is a quick way to
check that your image viewer opens the output:

```
weekendtracer-gradient > gradient.ppm
```

Neither command takes options other than `--help`.

## Using it as a library

```python
import sys

from weekendtracer.camera import Camera
from weekendtracer.hittable_list import HittableList
from weekendtracer.material import Dielectric, Lambertian, Metal
from weekendtracer.sphere import Sphere
from weekendtracer.vec3 import Vec3

world = HittableList()
world.add(Sphere(Vec3(0.0, -100.5, -1.0), 100.0, Lambertian(Vec3(0.8, 0.8, 0.0))))
world.add(Sphere(Vec3(0.0, 0.0, -1.0), 0.5, Metal(Vec3(0.8, 0.6, 0.2), 0.1)))
world.add(Sphere(Vec3(-1.0, 0.0, -1.0), 0.5, Dielectric(1.5)))

camera = Camera(image_width=200, aspect_ratio=16.0 / 9.0, samples_per_pixel=20)

with open("small.ppm", "w") as out:
    camera.render(world, out, sys.stderr)
```

The pieces:

- `weekendtracer.vec3` — the immutable `Vec3` (also `Point3`) with arithmetic
  operators, `dot`, `cross`, `length`, `unit_vector` and `near_zero`, plus
  `reflect`, `refract` and random-vector helpers.
- `weekendtracer.ray` — `Ray(origin, direction)` and `Ray.at(t)`.
- `weekendtracer.interval` — `Interval(min, max)` with `contains`,
  `surrounds`, `clamp`, `size`, and `Interval.EMPTY` / `Interval.UNIVERSE`.
- `weekendtracer.hittable` — the `Hittable` interface, whose `hit(ray,
  interval)` returns a `HitRecord` or `None`.
- `weekendtracer.sphere` and `weekendtracer.hittable_list` — `Sphere` and
  `HittableList`, which returns the nearest hit among its objects.
- `weekendtracer.material` — `Lambertian`, `Metal` (fuzz capped at 1) and
  `Dielectric`; `scatter` returns a `Scatter` (attenuation and ray) or `None`
  when the ray is absorbed.
- `weekendtracer.color` — gamma correction and conversion of a linear colour
  to PPM byte values (`color_to_bytes`, `write_color`).
- `weekendtracer.camera` — `Camera`; `render(world, out=None, log=None)`
  writes to standard output and standard error when no streams are given.
- `weekendtracer.scene` — `build_world()` and `build_camera()` return the
  demonstration scene and its camera, so you can render them with your own
  settings.
- `weekendtracer.ppm` — `gradient_pixels(width, height)` and
  `write_gradient(out, width, height, log)` for the test gradient.

## Limitations

Spheres are the only shape, output is plain-text PPM only, and rendering runs
on a single core with no acceleration structure, so large images are slow.
There is no way to load a scene from a file; scenes are built in Python.

## Running the tests

```
pip install .[test]
pytest
```