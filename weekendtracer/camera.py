"""A positionable thin-lens camera that renders a world as PPM text."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import TextIO

from .color import Color, write_color
from .hittable import Hittable
from .interval import Interval
from .ray import Ray
from .rtweekend import INFINITY, degrees_to_radians, random_double
from .vec3 import Point3, Vec3, random_in_unit_disk

_BLACK = Color(0.0, 0.0, 0.0)
_WHITE = Color(1.0, 1.0, 1.0)
_SKY_BLUE = Color(0.5, 0.7, 1.0)


def _fmt(value: float) -> str:
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(value)


def _zero() -> Vec3:
    return Vec3(0.0, 0.0, 0.0)


@dataclass
class Camera:
    """Camera settings plus the geometry derived from them by ``initialize``."""

    aspect_ratio: float = 1.0
    image_width: int = 100
    samples_per_pixel: int = 10
    max_depth: int = 10
    vfov: float = 90.0
    lookfrom: Point3 = field(default_factory=_zero)
    lookat: Point3 = field(default_factory=lambda: Point3(0.0, 0.0, -1.0))
    vup: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))
    defocus_angle: float = 0.0
    focus_dist: float = 10.0

    pixel_samples_scale: float = field(default=1.0, init=False)
    image_height: int = field(default=0, init=False)
    center: Point3 = field(default_factory=_zero, init=False)
    pixel00_loc: Point3 = field(default_factory=_zero, init=False)
    pixel_delta_u: Vec3 = field(default_factory=_zero, init=False)
    pixel_delta_v: Vec3 = field(default_factory=_zero, init=False)
    u: Vec3 = field(default_factory=_zero, init=False)
    v: Vec3 = field(default_factory=_zero, init=False)
    w: Vec3 = field(default_factory=_zero, init=False)
    defocus_disk_u: Vec3 = field(default_factory=_zero, init=False)
    defocus_disk_v: Vec3 = field(default_factory=_zero, init=False)

    def initialize(self) -> None:
        """Derive the viewport geometry from the settings."""
        self.image_height = max(1, int(self.image_width / self.aspect_ratio))
        self.pixel_samples_scale = 1.0 / self.samples_per_pixel
        self.center = self.lookfrom

        theta = degrees_to_radians(self.vfov)
        h = math.tan(theta / 2.0)
        viewport_height = 2.0 * h * self.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        self.w = (self.lookfrom - self.lookat).unit_vector()
        self.u = self.vup.cross(self.w).unit_vector()
        self.v = self.w.cross(self.u)

        viewport_u = viewport_width * self.u
        viewport_v = -viewport_height * self.v

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (
            self.center - self.focus_dist * self.w - viewport_u / 2.0 - viewport_v / 2.0
        )
        self.pixel00_loc = viewport_upper_left + 0.5 * (self.pixel_delta_u + self.pixel_delta_v)

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2.0))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    def ray_color(self, r: Ray, depth: int, world: Hittable) -> Color:
        """The colour seen along ``r``, following at most ``depth`` bounces."""
        throughput = _WHITE
        for _ in range(depth):
            rec = world.hit(r, Interval(0.001, INFINITY))
            if rec is None:
                unit_direction = r.direction.unit_vector()
                a = 0.5 * (unit_direction.y + 1.0)
                return throughput * (_WHITE * (1.0 - a) + _SKY_BLUE * a)
            if rec.mat is None:
                return _BLACK
            scatter = rec.mat.scatter(r, rec)
            if scatter is None:
                return _BLACK
            throughput = throughput * scatter.attenuation
            r = scatter.scattered
        return _BLACK

    def sample_square(self) -> Vec3:
        """A random offset in the unit square centred on the origin."""
        return Vec3(-0.5 + random_double(), -0.5 + random_double(), 0.0)

    def defocus_disk_sample(self) -> Point3:
        """A random point on the camera's defocus disk."""
        p = random_in_unit_disk()
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y

    def get_ray(self, i: int, j: int) -> Ray:
        """A ray towards a random point around pixel (i, j)."""
        offset = self.sample_square()
        pixel_sample = (
            self.pixel00_loc
            + (i + offset.x) * self.pixel_delta_u
            + (j + offset.y) * self.pixel_delta_v
        )
        origin = self.center if self.defocus_angle <= 0.0 else self.defocus_disk_sample()
        return Ray(origin, pixel_sample - origin)

    def render(self, world: Hittable, out: TextIO | None = None, log: TextIO | None = None) -> None:
        """Render ``world`` as a PPM image to ``out``, reporting progress to ``log``."""
        out = sys.stdout if out is None else out
        log = sys.stderr if log is None else log
        self.initialize()
        log.write(f"pixel_samples_scale: {_fmt(self.pixel_samples_scale)}\n")

        out.write(f"P3\n{self.image_width} {self.image_height}\n255\n")
        for j in range(self.image_height):
            log.write(f"\rScanlines remaining: {self.image_height - j}\n")
            for i in range(self.image_width):
                pixel_color = _BLACK
                for _ in range(self.samples_per_pixel):
                    pixel_color = pixel_color + self.ray_color(
                        self.get_ray(i, j), self.max_depth, world
                    )
                write_color(out, self.pixel_samples_scale * pixel_color)
        log.write("Done.\n")