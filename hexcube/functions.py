"""Public hex operations, named the way a host query engine exposes them.

Every operation takes and returns :class:`~hexcube.hex.Hex`; the cube
representation stays internal. Set-returning operations return lazy
iterators that can be consumed partially.

Usage:
    from hexcube.functions import ring_path
    for h in ring_path(Hex(-3, 1), 2):
        ...

    strict = HexFunctions(HexConfig(max_radius=64))
    strict.hexes_in_range(Hex(0, 0), 65)  # raises InvalidRadiusError
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Iterable, Iterator

from .config import HexConfig, NegativeRadiusPolicy
from .conversions import cube_to_hex, hex_to_cube
from .cube import (
    CubeCoord,
    diagonals_cube,
    hex_distance_cube,
    hex_range,
    linedraw as cube_linedraw,
    neighbors_cube,
    ring,
    spiral,
)
from .errors import CoordinateOverflowError, InvalidRadiusError
from .hex import Hex

logger = logging.getLogger(__name__)


def _to_hexes(cubes: Iterable[CubeCoord]) -> Iterator[Hex]:
    for cube in cubes:
        yield cube_to_hex(cube)


@dataclass(frozen=True)
class HexFunctions:
    """Hex operations bound to a :class:`HexConfig`."""

    config: HexConfig = field(default_factory=HexConfig)

    # --- Validation -------------------------------------------------------

    def _check_hex(self, h: Hex, *, role: str) -> CubeCoord:
        cube = hex_to_cube(h)
        limit = self.config.coordinate_limit
        if not all(self.config.within_limit(axis) for axis in cube):
            raise CoordinateOverflowError(
                f"{role} {h} exceeds the coordinate limit of {limit}"
            )
        return cube

    def _check_envelope(self, center: CubeCoord, radius: int) -> None:
        limit = self.config.coordinate_limit
        reach = max(abs(axis) for axis in center) + radius
        if reach > limit:
            raise CoordinateOverflowError(
                f"radius {radius} around {cube_to_hex(center)} reaches {reach}, "
                f"beyond the coordinate limit of {limit}"
            )

    def _resolve_radius(self, name: str, value: int) -> int:
        if value < 0:
            if self.config.negative_radius is NegativeRadiusPolicy.REJECT:
                raise InvalidRadiusError(f"{name} must be non-negative, got {value}")
            logger.warning("%s %d is negative; treating it as 0", name, value)
            value = 0
        max_radius = self.config.max_radius
        if max_radius is not None and value > max_radius:
            raise InvalidRadiusError(
                f"{name} {value} exceeds the configured maximum of {max_radius}"
            )
        return value

    # --- Operators --------------------------------------------------------

    def hex_eq(self, left: Hex, right: Hex) -> bool:
        return left == right

    def hex_add(self, left: Hex, right: Hex) -> Hex:
        cube = self._check_hex(left, role="left") + self._check_hex(right, role="right")
        return self._checked_result(cube)

    def hex_sub(self, left: Hex, right: Hex) -> Hex:
        cube = self._check_hex(left, role="left") - self._check_hex(right, role="right")
        return self._checked_result(cube)

    def _checked_result(self, cube: CubeCoord) -> Hex:
        result = cube_to_hex(cube)
        self._check_hex(result, role="result")
        return result

    # --- Functions --------------------------------------------------------

    def neighbors(self, coord: Hex) -> Iterator[Hex]:
        cube = self._check_hex(coord, role="coord")
        self._check_envelope(cube, 1)
        return _to_hexes(neighbors_cube(cube))

    def diagonals(self, coord: Hex) -> Iterator[Hex]:
        cube = self._check_hex(coord, role="coord")
        self._check_envelope(cube, 2)
        return _to_hexes(diagonals_cube(cube))

    def hex_distance(self, coord: Hex, other: Hex) -> int:
        a = self._check_hex(coord, role="coord")
        b = self._check_hex(other, role="other")
        return hex_distance_cube(a, b)

    def linedraw(self, coord: Hex, other: Hex) -> Iterator[Hex]:
        start = self._check_hex(coord, role="coord")
        end = self._check_hex(other, role="other")
        logger.debug("linedraw %s -> %s (%d steps)", coord, other, start.distance_to(end))
        return _to_hexes(cube_linedraw(start, end))

    def hexes_in_range(self, coord: Hex, dist: int) -> Iterator[Hex]:
        center = self._check_hex(coord, role="coord")
        dist = self._resolve_radius("dist", dist)
        self._check_envelope(center, dist)
        logger.debug("hexes_in_range %s dist=%d", coord, dist)
        return _to_hexes(hex_range(center, dist))

    def ring_path(self, coord: Hex, radius: int) -> Iterator[Hex]:
        center = self._check_hex(coord, role="coord")
        radius = self._resolve_radius("radius", radius)
        self._check_envelope(center, radius)
        logger.debug("ring_path %s radius=%d", coord, radius)
        return _to_hexes(ring(center, radius))

    def spiral_path(self, coord: Hex, radius: int) -> Iterator[Hex]:
        center = self._check_hex(coord, role="coord")
        radius = self._resolve_radius("radius", radius)
        self._check_envelope(center, radius)
        logger.debug("spiral_path %s radius=%d", coord, radius)
        return _to_hexes(spiral(center, radius))


DEFAULT_FUNCTIONS = HexFunctions()

hex_eq = DEFAULT_FUNCTIONS.hex_eq
hex_add = DEFAULT_FUNCTIONS.hex_add
hex_sub = DEFAULT_FUNCTIONS.hex_sub
neighbors = DEFAULT_FUNCTIONS.neighbors
diagonals = DEFAULT_FUNCTIONS.diagonals
hex_distance = DEFAULT_FUNCTIONS.hex_distance
linedraw = DEFAULT_FUNCTIONS.linedraw
hexes_in_range = DEFAULT_FUNCTIONS.hexes_in_range
ring_path = DEFAULT_FUNCTIONS.ring_path
spiral_path = DEFAULT_FUNCTIONS.spiral_path

__all__ = [
    "HexFunctions",
    "DEFAULT_FUNCTIONS",
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
