from .coords import DIAGONAL_DIRS, NEIGHBOR_DIRS, ORIGIN, CubeCoord, FloatCubeCoord
from .heuristics import cube_magnitude, hex_distance_cube
from .neighbors import diagonal_cube, diagonals_cube, neighbor_cube, neighbors_cube
from .rounding import EPSILON_HEX, cube_lerp, cube_round, lerp
from .traversal import CubeSequence, hex_range, linedraw, ring, spiral

__all__ = [
    "CubeCoord",
    "FloatCubeCoord",
    "CubeSequence",
    "ORIGIN",
    "NEIGHBOR_DIRS",
    "DIAGONAL_DIRS",
    "EPSILON_HEX",
    "cube_magnitude",
    "hex_distance_cube",
    "neighbors_cube",
    "diagonals_cube",
    "neighbor_cube",
    "diagonal_cube",
    "lerp",
    "cube_lerp",
    "cube_round",
    "linedraw",
    "hex_range",
    "ring",
    "spiral",
]
