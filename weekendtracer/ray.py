"""Rays with an origin and a direction."""

from __future__ import annotations

from dataclasses import dataclass

from .vec3 import Point3, Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line starting at ``origin`` along ``direction``."""

    origin: Point3
    direction: Vec3

    def at(self, t: float) -> Point3:
        """The point at parameter ``t`` along the ray."""
        return self.origin + self.direction * t