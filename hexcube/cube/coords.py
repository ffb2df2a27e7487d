"""Cube-coordinate value types for hexagonal grids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .traversal import CubeSequence


@dataclass(frozen=True, slots=True)
class CubeCoord:
    """Integer cube coordinate; ``q + r + s`` is always zero."""

    q: int
    r: int
    s: int

    def __post_init__(self) -> None:
        if self.q + self.r + self.s != 0:
            raise ValueError("For cube coords, q + r + s must be 0")

    def __add__(self, other: CubeCoord) -> CubeCoord:
        if not isinstance(other, CubeCoord):
            return NotImplemented
        return CubeCoord(self.q + other.q, self.r + other.r, self.s + other.s)

    def __sub__(self, other: CubeCoord) -> CubeCoord:
        if not isinstance(other, CubeCoord):
            return NotImplemented
        return CubeCoord(self.q - other.q, self.r - other.r, self.s - other.s)

    def __mul__(self, factor: int) -> CubeCoord:
        if not isinstance(factor, int) or isinstance(factor, bool):
            return NotImplemented
        return CubeCoord(self.q * factor, self.r * factor, self.s * factor)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[int]:
        yield self.q
        yield self.r
        yield self.s

    def magnitude(self) -> int:
        """Hex distance from the origin."""

        return max(abs(self.q), abs(self.r), abs(self.s))

    def distance_to(self, other: CubeCoord) -> int:
        return (self - other).magnitude()

    def neighbors(self) -> list[CubeCoord]:
        """The six edge-adjacent coordinates in canonical direction order."""

        return [self + d for d in NEIGHBOR_DIRS]

    def diagonals(self) -> list[CubeCoord]:
        """The six vertex-adjacent coordinates, ordered like :meth:`neighbors`."""

        return [self + d for d in DIAGONAL_DIRS]

    def linedraw(self, other: CubeCoord) -> CubeSequence:
        from .traversal import linedraw

        return linedraw(self, other)

    def range(self, dist: int) -> CubeSequence:
        from .traversal import hex_range

        return hex_range(self, dist)

    def ring(self, radius: int) -> CubeSequence:
        from .traversal import ring

        return ring(self, radius)

    def spiral(self, radius: int) -> CubeSequence:
        from .traversal import spiral

        return spiral(self, radius)


@dataclass(frozen=True, slots=True)
class FloatCubeCoord:
    """Continuous cube coordinate used as scratch space for interpolation.

    The zero-sum constraint is only approximate here and is not checked.
    """

    q: float
    r: float
    s: float

    @classmethod
    def from_cube(cls, cube: CubeCoord) -> FloatCubeCoord:
        return cls(float(cube.q), float(cube.r), float(cube.s))

    def __add__(self, other: FloatCubeCoord) -> FloatCubeCoord:
        if not isinstance(other, FloatCubeCoord):
            return NotImplemented
        return FloatCubeCoord(self.q + other.q, self.r + other.r, self.s + other.s)

    def __sub__(self, other: FloatCubeCoord) -> FloatCubeCoord:
        if not isinstance(other, FloatCubeCoord):
            return NotImplemented
        return FloatCubeCoord(self.q - other.q, self.r - other.r, self.s - other.s)

    def lerp(self, other: FloatCubeCoord, t: float) -> FloatCubeCoord:
        from .rounding import cube_lerp

        return cube_lerp(self, other, t)

    def rounded(self) -> CubeCoord:
        """Return the nearest valid :class:`CubeCoord`."""

        from .rounding import cube_round

        return cube_round(self)


ORIGIN = CubeCoord(0, 0, 0)

# Canonical compass order 0..5; ring traversal depends on it.
NEIGHBOR_DIRS: tuple[CubeCoord, ...] = (
    CubeCoord(+1, 0, -1),
    CubeCoord(+1, -1, 0),
    CubeCoord(0, -1, +1),
    CubeCoord(-1, 0, +1),
    CubeCoord(-1, +1, 0),
    CubeCoord(0, +1, -1),
)

DIAGONAL_DIRS: tuple[CubeCoord, ...] = (
    CubeCoord(+2, -1, -1),
    CubeCoord(+1, -2, +1),
    CubeCoord(-1, -1, +2),
    CubeCoord(-2, +1, +1),
    CubeCoord(-1, +2, -1),
    CubeCoord(+1, +1, -2),
)
