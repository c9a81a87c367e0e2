import io
import math
import random

import pytest

from weekendtracer.camera import Camera
from weekendtracer.color import Color
from weekendtracer.hittable_list import HittableList
from weekendtracer.material import Lambertian
from weekendtracer.ray import Ray
from weekendtracer.sphere import Sphere
from weekendtracer.vec3 import Vec3


def _approx_vec(v, expected):
    assert (v.x, v.y, v.z) == pytest.approx(expected)


def test_initialize_default_geometry():
    cam = Camera()
    cam.initialize()
    assert cam.image_height == 100
    assert cam.pixel_samples_scale == pytest.approx(1.0 / cam.samples_per_pixel)
    _approx_vec(cam.w, (0.0, 0.0, 1.0))
    _approx_vec(cam.u, (1.0, 0.0, 0.0))
    _approx_vec(cam.v, (0.0, 1.0, 0.0))
    assert cam.center == cam.lookfrom


def test_image_height_is_at_least_one():
    cam = Camera(aspect_ratio=1000.0, image_width=10)
    cam.initialize()
    assert cam.image_height == 1


def test_image_height_follows_aspect_ratio():
    cam = Camera(aspect_ratio=2.0, image_width=40)
    cam.initialize()
    assert cam.image_height == 20


def test_basis_is_orthonormal():
    cam = Camera(lookfrom=Vec3(13.0, 2.0, 3.0), lookat=Vec3(0.0, 0.0, 0.0))
    cam.initialize()
    for a in (cam.u, cam.v, cam.w):
        assert a.length() == pytest.approx(1.0)
    assert cam.u.dot(cam.v) == pytest.approx(0.0, abs=1e-12)
    assert cam.u.dot(cam.w) == pytest.approx(0.0, abs=1e-12)
    assert cam.v.dot(cam.w) == pytest.approx(0.0, abs=1e-12)


def test_ray_color_zero_depth_is_black():
    cam = Camera()
    assert cam.ray_color(Ray(Vec3(), Vec3(0, 1, 0)), 0, HittableList()) == Color(0.0, 0.0, 0.0)


def test_ray_color_sky_gradient_endpoints():
    cam = Camera()
    world = HittableList()
    _approx_vec(cam.ray_color(Ray(Vec3(), Vec3(0, 1, 0)), 5, world), (0.5, 0.7, 1.0))
    _approx_vec(cam.ray_color(Ray(Vec3(), Vec3(0, -1, 0)), 5, world), (1.0, 1.0, 1.0))


def test_ray_color_material_less_hit_is_black():
    cam = Camera()
    world = HittableList([Sphere(Vec3(0, 0, -2), 0.5)])
    assert cam.ray_color(Ray(Vec3(), Vec3(0, 0, -1)), 5, world) == Color(0.0, 0.0, 0.0)


def test_ray_color_black_albedo_absorbs():
    random.seed(7)
    cam = Camera()
    world = HittableList([Sphere(Vec3(0, 0, -2), 0.5, Lambertian(Color(0.0, 0.0, 0.0)))])
    assert cam.ray_color(Ray(Vec3(), Vec3(0, 0, -1)), 10, world) == Color(0.0, 0.0, 0.0)


def test_sample_square_bounds():
    random.seed(8)
    cam = Camera()
    for _ in range(200):
        s = cam.sample_square()
        assert -0.5 <= s.x < 0.5
        assert -0.5 <= s.y < 0.5
        assert s.z == 0.0


def test_get_ray_hits_focus_plane():
    random.seed(9)
    cam = Camera()
    cam.initialize()
    for i, j in [(0, 0), (50, 50), (99, 99)]:
        r = cam.get_ray(i, j)
        assert r.origin == cam.center
        assert r.direction.z == pytest.approx(-cam.focus_dist)


def test_defocus_disk_sample_within_radius():
    random.seed(10)
    cam = Camera(defocus_angle=10.0, focus_dist=10.0)
    cam.initialize()
    radius = cam.focus_dist * math.tan(math.radians(cam.defocus_angle / 2.0))
    for _ in range(100):
        p = cam.defocus_disk_sample()
        offset = p - cam.center
        assert offset.length() <= radius + 1e-12
        assert offset.dot(cam.w) == pytest.approx(0.0, abs=1e-12)


def test_render_writes_ppm():
    random.seed(11)
    cam = Camera(aspect_ratio=2.0, image_width=4, samples_per_pixel=2, max_depth=3)
    out, log = io.StringIO(), io.StringIO()
    cam.render(HittableList(), out, log)
    lines = out.getvalue().splitlines()
    assert lines[:3] == ["P3", "4 2", "255"]
    pixels = lines[3:]
    assert len(pixels) == 8
    for line in pixels:
        values = [int(v) for v in line.split()]
        assert len(values) == 3
        assert all(0 <= v <= 255 for v in values)
    assert log.getvalue().endswith("Done.\n")
    assert "Scanlines remaining: 2" in log.getvalue()