from __future__ import annotations

from .coords import CubeCoord


def cube_magnitude(c: CubeCoord) -> int:
    return c.magnitude()


def hex_distance_cube(a: CubeCoord, b: CubeCoord) -> int:
    return a.distance_to(b)
