"""Cube-coordinate geometry for hexagonal grids."""

from .config import HexConfig, NegativeRadiusPolicy
from .conversions import cube_to_hex, hex_to_cube
from .cube import CubeCoord, FloatCubeCoord
from .errors import CoordinateOverflowError, HexError, HexParseError, InvalidRadiusError
from .functions import (
    HexFunctions,
    diagonals,
    hex_add,
    hex_distance,
    hex_eq,
    hex_sub,
    hexes_in_range,
    linedraw,
    neighbors,
    ring_path,
    spiral_path,
)
from .hex import Hex

__version__ = "0.1.0"

__all__ = [
    "Hex",
    "CubeCoord",
    "FloatCubeCoord",
    "HexConfig",
    "NegativeRadiusPolicy",
    "HexFunctions",
    "HexError",
    "InvalidRadiusError",
    "CoordinateOverflowError",
    "HexParseError",
    "hex_to_cube",
    "cube_to_hex",
    "hex_eq",
    "hex_add",
    "hex_sub",
    "neighbors",
    "diagonals",
    "hex_distance",
    "linedraw",
    "hexes_in_range",
    "ring_path",
    "spiral_path",
]
