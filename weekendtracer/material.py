"""Surface materials that decide how rays scatter."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .color import Color
from .hittable import HitRecord
from .ray import Ray
from .rtweekend import random_double
from .vec3 import random_unit_vector, reflect, refract


@dataclass(frozen=True)
class Scatter:
    """A scattered ray and the colour it is attenuated by."""

    attenuation: Color
    scattered: Ray


class Material(ABC):
    """How light interacts with a surface."""

    @abstractmethod
    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter | None:
        """Return the scattered ray, or None if the ray is absorbed."""


@dataclass
class Lambertian(Material):
    """An ideal diffuse surface."""

    albedo: Color

    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter | None:
        direction = rec.normal + random_unit_vector()
        if direction.near_zero():
            direction = rec.normal
        return Scatter(self.albedo, Ray(rec.p, direction))


@dataclass
class Metal(Material):
    """A reflective surface; ``fuzz`` is capped at 1."""

    albedo: Color
    fuzz: float = 0.0

    def __post_init__(self) -> None:
        self.fuzz = self.fuzz if self.fuzz < 1.0 else 1.0

    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter | None:
        reflected = reflect(r_in.direction, rec.normal)
        reflected = reflected.unit_vector() + self.fuzz * random_unit_vector()
        scattered = Ray(rec.p, reflected)
        if scattered.direction.dot(rec.normal) > 0.0:
            return Scatter(self.albedo, scattered)
        return None


def reflectance(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of reflectance."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * (1.0 - cosine) ** 5


@dataclass
class Dielectric(Material):
    """A clear refracting material such as glass."""

    refraction_index: float

    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter | None:
        attenuation = Color(1.0, 1.0, 1.0)
        ri = 1.0 / self.refraction_index if rec.front_face else self.refraction_index
        unit_direction = r_in.direction.unit_vector()
        cos_theta = min((-unit_direction).dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))
        cannot_refract = ri * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, ri) > random_double():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ri)
        return Scatter(attenuation, Ray(rec.p, direction))