"""Ray intersection records and the interface of hittable objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from .interval import Interval
from .ray import Ray
from .vec3 import Point3, Vec3


@dataclass
class HitRecord:
    """Details of a ray striking a surface."""

    p: Point3
    normal: Vec3
    t: float
    front_face: bool = False
    mat: Any = None

    def set_face_normal(self, r: Ray, outward_normal: Vec3) -> None:
        """Orient the normal against the ray; ``outward_normal`` must be unit length."""
        self.front_face = r.direction.dot(outward_normal) < 0.0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Something a ray can hit."""

    @abstractmethod
    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        """Return the nearest hit with t strictly inside ``ray_t``, or None."""