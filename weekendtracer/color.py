"""Colour conversion and PPM pixel output."""

from __future__ import annotations

import math
from typing import TextIO

from .interval import Interval
from .vec3 import Vec3

Color = Vec3

_INTENSITY = Interval(0.0, 0.999)


def linear_to_gamma(linear_component: float) -> float:
    """Apply gamma 2 correction; non-positive values map to zero."""
    if linear_component <= 0.0:
        return 0.0
    return math.sqrt(linear_component)


def _to_byte(component: float) -> int:
    scaled = 255.999 * _INTENSITY.clamp(linear_to_gamma(component))
    return 0 if math.isnan(scaled) else int(scaled)


def color_to_bytes(pixel_color: Color) -> tuple[int, int, int]:
    """Gamma-correct a linear colour and scale it to the 0..255 byte range."""
    return (
        _to_byte(pixel_color.x),
        _to_byte(pixel_color.y),
        _to_byte(pixel_color.z),
    )


def write_color(out: TextIO, pixel_color: Color) -> None:
    """Write one pixel as a PPM text line."""
    r, g, b = color_to_bytes(pixel_color)
    out.write(f"{r} {g} {b}\n")