"""Interpolation and rounding between float and integer cube coordinates."""

from __future__ import annotations

from .coords import CubeCoord, FloatCubeCoord

# Added to a line's endpoint so interpolated points never land exactly on a
# rounding boundary. Each axis gets a distinct value.
EPSILON_HEX = FloatCubeCoord(1e-6, 2e-6, -3e-6)


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def cube_lerp(a: FloatCubeCoord, b: FloatCubeCoord, t: float) -> FloatCubeCoord:
    return FloatCubeCoord(lerp(a.q, b.q, t), lerp(a.r, b.r, t), lerp(a.s, b.s, t))


def cube_round(value: FloatCubeCoord) -> CubeCoord:
    """Round ``value`` to the nearest cube coordinate, keeping ``q + r + s == 0``.

    Each axis is rounded half-to-even, then the axis with the largest rounding
    error is rebuilt from the other two. Comparison order matters on ties:
    ``q`` is rebuilt only if its error is strictly the largest, otherwise ``r``
    if its error strictly exceeds that of ``s``, otherwise ``s``.
    """

    # round() on a float is half-to-even and returns an int.
    q = round(value.q)
    r = round(value.r)
    s = round(value.s)

    q_diff = abs(q - value.q)
    r_diff = abs(r - value.r)
    s_diff = abs(s - value.s)

    if q_diff > r_diff and q_diff > s_diff:
        q = -r - s
    elif r_diff > s_diff:
        r = -q - s
    else:
        s = -q - r

    return CubeCoord(q, r, s)
