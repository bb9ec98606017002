"""A small ray tracer: spheres, triangles and walls lit by point lights, rendered to PPM images."""

__version__ = "0.1.0"