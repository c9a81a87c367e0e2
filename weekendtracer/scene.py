"""The final showcase scene of many random spheres."""

from __future__ import annotations

import argparse
from typing import Sequence

from .camera import Camera
from .color import Color
from .hittable_list import HittableList
from .material import Dielectric, Lambertian, Metal
from .rtweekend import random_double, random_double_range
from .sphere import Sphere
from .vec3 import Point3, Vec3, random_vec, random_vec_range


def build_world() -> HittableList:
    """A ground plane, a grid of random small spheres and three large ones."""
    world = HittableList()
    world.add(Sphere(Point3(0.0, -1000.0, 0.0), 1000.0, Lambertian(Color(0.5, 0.5, 0.5))))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random_double()
            center = Point3(a + 0.9 * random_double(), 0.2, b + 0.9 * random_double())
            if (center - Point3(4.0, 0.2, 0.0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                material = Lambertian(random_vec() * random_vec())
            elif choose_mat < 0.95:
                material = Metal(random_vec_range(0.5, 1.0), random_double_range(0.0, 0.5))
            else:
                material = Dielectric(1.5)
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Point3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Point3(-4.0, 1.0, 0.0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4.0, 1.0, 0.0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))
    return world


def build_camera() -> Camera:
    """The camera set up for the showcase scene."""
    return Camera(
        aspect_ratio=16.0 / 9.0,
        image_width=1200,
        samples_per_pixel=500,
        max_depth=50,
        vfov=20.0,
        lookfrom=Point3(13.0, 2.0, 3.0),
        lookat=Point3(0.0, 0.0, 0.0),
        vup=Vec3(0.0, 1.0, 0.0),
        defocus_angle=0.6,
        focus_dist=10.0,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Render the showcase scene as PPM to standard output."""
    parser = argparse.ArgumentParser(
        description="Render the random-spheres scene as a PPM image on standard output."
    )
    parser.parse_args(argv)
    build_camera().render(build_world())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())