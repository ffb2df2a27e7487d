"""Lazy traversals over cube coordinates: line draw, range, ring and spiral.

Every public function checks its arguments immediately and returns a fresh
generator, so a bad radius fails at the call site rather than on the first
``next()``. Calling the function again restarts the traversal.
"""

from __future__ import annotations

from typing import Iterator, TypeAlias

from ..errors import InvalidRadiusError
from .coords import NEIGHBOR_DIRS, CubeCoord, FloatCubeCoord
from .rounding import EPSILON_HEX, cube_lerp, cube_round

CubeSequence: TypeAlias = Iterator[CubeCoord]

# Ring walks start at this corner of the ring.
RING_START_DIRECTION = 4


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise InvalidRadiusError(f"{name} must be non-negative, got {value}")


def linedraw(start: CubeCoord, end: CubeCoord) -> CubeSequence:
    """Return the ``distance + 1`` coordinates on the line from ``start`` to ``end``."""

    return _linedraw(start, end)


def _linedraw(start: CubeCoord, end: CubeCoord) -> CubeSequence:
    steps = start.distance_to(end)
    if steps == 0:
        yield start
        return

    origin = FloatCubeCoord.from_cube(start)
    target = FloatCubeCoord.from_cube(end) + EPSILON_HEX
    for i in range(steps + 1):
        yield cube_round(cube_lerp(origin, target, i / steps))


def hex_range(center: CubeCoord, dist: int) -> CubeSequence:
    """Return every coordinate within ``dist`` of ``center``.

    Emission is row-major by ``q`` then ``r``; only membership and the count
    ``3 * dist * (dist + 1) + 1`` are guaranteed.
    """

    _require_non_negative("dist", dist)
    return _hex_range(center, dist)


def _hex_range(center: CubeCoord, dist: int) -> CubeSequence:
    for q in range(-dist, dist + 1):
        r_min = max(-dist, -q - dist)
        r_max = min(dist, -q + dist)
        for r in range(r_min, r_max + 1):
            yield center + CubeCoord(q, r, -q - r)


def ring(center: CubeCoord, radius: int) -> CubeSequence:
    """Return the coordinates exactly ``radius`` from ``center`` in perimeter order.

    Consecutive coordinates, including last to first, are neighbors. A zero
    radius yields ``center`` once.
    """

    _require_non_negative("radius", radius)
    return _ring(center, radius)


def _ring(center: CubeCoord, radius: int) -> CubeSequence:
    if radius == 0:
        yield center
        return

    position = center + NEIGHBOR_DIRS[RING_START_DIRECTION] * radius
    for direction in NEIGHBOR_DIRS:
        for _ in range(radius):
            yield position
            position += direction


def spiral(center: CubeCoord, radius: int) -> CubeSequence:
    """Return rings ``0..radius`` around ``center`` concatenated in order."""

    _require_non_negative("radius", radius)
    return _spiral(center, radius)


def _spiral(center: CubeCoord, radius: int) -> CubeSequence:
    for current in range(radius + 1):
        yield from _ring(center, current)
