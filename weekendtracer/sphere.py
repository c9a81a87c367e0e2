"""Spheres."""

from __future__ import annotations

import math
from typing import Any

from .hittable import HitRecord, Hittable
from .interval import Interval
from .ray import Ray
from .vec3 import Point3


class Sphere(Hittable):
    """A sphere with an optional material; negative radii are treated as zero."""

    def __init__(self, center: Point3, radius: float, mat: Any = None) -> None:
        self.center = center
        self.radius = max(0.0, radius)
        self.mat = mat

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius!r}, mat={self.mat!r})"

    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        oc = self.center - r.origin
        a = r.direction.length_squared()
        half_b = oc.dot(r.direction)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = half_b * half_b - a * c
        if discriminant < 0.0:
            return None
        sqrtd = math.sqrt(discriminant)

        root = (half_b - sqrtd) / a
        if not ray_t.surrounds(root):
            root = (half_b + sqrtd) / a
            if not ray_t.surrounds(root):
                return None

        p = r.at(root)
        outward_normal = (p - self.center) / self.radius
        rec = HitRecord(p=p, normal=outward_normal, t=root, mat=self.mat)
        rec.set_face_normal(r, outward_normal)
        return rec