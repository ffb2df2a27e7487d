from __future__ import annotations

from typing import Iterable

from .coords import DIAGONAL_DIRS, NEIGHBOR_DIRS, CubeCoord


def neighbors_cube(c: CubeCoord) -> Iterable[CubeCoord]:
    for d in NEIGHBOR_DIRS:
        yield c + d


def diagonals_cube(c: CubeCoord) -> Iterable[CubeCoord]:
    for d in DIAGONAL_DIRS:
        yield c + d


def neighbor_cube(c: CubeCoord, direction: int) -> CubeCoord:
    return c + NEIGHBOR_DIRS[direction % 6]


def diagonal_cube(c: CubeCoord, direction: int) -> CubeCoord:
    return c + DIAGONAL_DIRS[direction % 6]
