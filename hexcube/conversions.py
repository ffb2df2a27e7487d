from __future__ import annotations

from .cube.coords import CubeCoord
from .hex import Hex


def hex_to_cube(h: Hex) -> CubeCoord:
    return h.to_cube()


def cube_to_hex(c: CubeCoord) -> Hex:
    return Hex.from_cube(c)
