"""Three-component vectors and the random and optical helpers built on them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from .rtweekend import random_double_range


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector, also used for points and colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vec3 | float) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, other: float) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.dot(self)

    def near_zero(self) -> bool:
        """True if every component is very close to zero."""
        s = 1e-8
        return abs(self.x) < s and abs(self.y) < s and abs(self.z) < s

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def unit_vector(self) -> Vec3:
        return self / self.length()


Point3 = Vec3


def random_vec_range(min_value: float, max_value: float) -> Vec3:
    """A vector whose components are each random in [min_value, max_value)."""
    return Vec3(
        random_double_range(min_value, max_value),
        random_double_range(min_value, max_value),
        random_double_range(min_value, max_value),
    )


def random_vec() -> Vec3:
    """A vector whose components are each random in [0, 1)."""
    return random_vec_range(0.0, 1.0)


def random_unit_vector() -> Vec3:
    """A uniformly distributed random unit vector."""
    while True:
        p = random_vec_range(-1.0, 1.0)
        lensq = p.length_squared()
        if 1e-160 < lensq <= 1.0:
            return p / math.sqrt(lensq)


def random_on_hemisphere(normal: Vec3) -> Vec3:
    """A random unit vector in the hemisphere around ``normal``."""
    on_unit_sphere = random_unit_vector()
    return on_unit_sphere if on_unit_sphere.dot(normal) > 0.0 else -on_unit_sphere


def random_in_unit_disk() -> Vec3:
    """A random point strictly inside the unit disk in the z=0 plane."""
    while True:
        p = Vec3(random_double_range(-1.0, 1.0), random_double_range(-1.0, 1.0), 0.0)
        if p.length_squared() < 1.0:
            return p


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Mirror ``v`` about the surface with normal ``n``."""
    return v - 2.0 * v.dot(n) * n


def refract(uv: Vec3, n: Vec3, etai_over_etat: float) -> Vec3:
    """Refract unit vector ``uv`` through a surface with normal ``n``."""
    cos_theta = min((-uv).dot(n), 1.0)
    r_out_perp = etai_over_etat * (uv + cos_theta * n)
    r_out_parallel = -math.sqrt(abs(1.0 - r_out_perp.length_squared())) * n
    return r_out_perp + r_out_parallel