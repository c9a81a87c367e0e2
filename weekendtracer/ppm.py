"""A red-green gradient test image in PPM text format."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Iterator, Sequence, TextIO


def _channel(index: int, size: int) -> int:
    value = index / (size - 1) if size > 1 else math.nan
    scaled = 255.999 * value
    return 0 if math.isnan(scaled) else int(scaled)


def gradient_pixels(width: int = 256, height: int = 256) -> Iterator[tuple[int, int, int]]:
    """Yield pixels row by row, red rising left to right and green top to bottom."""
    for j in range(height):
        for i in range(width):
            yield _channel(i, width), _channel(j, height), 0


def write_gradient(
    out: TextIO | None = None,
    width: int = 256,
    height: int = 256,
    log: TextIO | None = None,
) -> None:
    """Write the gradient image to ``out``, reporting progress to ``log``."""
    out = sys.stdout if out is None else out
    log = sys.stderr if log is None else log
    out.write(f"P3\n{width} {height}\n255\n")
    pixels = gradient_pixels(width, height)
    for j in range(height):
        log.write(f"\rScanlines remaining: {height - j}\n")
        for _ in range(width):
            r, g, b = next(pixels)
            out.write(f"{r} {g} {b}\n")
    log.write("Done.\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Write a 256x256 gradient image to standard output."""
    parser = argparse.ArgumentParser(
        description="Write a 256x256 gradient PPM image to standard output."
    )
    parser.parse_args(argv)
    write_gradient()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())