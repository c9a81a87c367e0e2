"""A small path tracer that renders spheres to PPM images."""

__version__ = "0.1.0"