import pytest

from hexcube.cube import ORIGIN, CubeCoord, FloatCubeCoord
from hexcube.cube import cube_magnitude, hex_distance_cube


def test_cube_invariant():
    c = CubeCoord(1, -2, 1)
    assert c.q + c.r + c.s == 0


def test_cube_rejects_nonzero_sum():
    with pytest.raises(ValueError):
        CubeCoord(1, 1, 1)


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        (CubeCoord(1, 2, -3), CubeCoord(1, 2, -3), CubeCoord(2, 4, -6)),
        (CubeCoord(0, 0, 0), CubeCoord(0, 0, 0), CubeCoord(0, 0, 0)),
        (CubeCoord(1, 2, -3), CubeCoord(-1, -2, 3), CubeCoord(0, 0, 0)),
    ],
)
def test_add(left: CubeCoord, right: CubeCoord, expected: CubeCoord):
    assert left + right == expected
    result = left
    result += right
    assert result == expected


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        (CubeCoord(1, 2, -3), CubeCoord(1, 2, -3), CubeCoord(0, 0, 0)),
        (CubeCoord(0, 0, 0), CubeCoord(0, 0, 0), CubeCoord(0, 0, 0)),
        (CubeCoord(1, 2, -3), CubeCoord(-1, -2, 3), CubeCoord(2, 4, -6)),
    ],
)
def test_subtract(left: CubeCoord, right: CubeCoord, expected: CubeCoord):
    assert left - right == expected
    assert (left - right) + right == left


@pytest.mark.parametrize(
    ("coord", "factor", "expected"),
    [
        (CubeCoord(1, 2, -3), 0, ORIGIN),
        (CubeCoord(0, 0, 0), 100, ORIGIN),
        (CubeCoord(1, 2, -3), 2, CubeCoord(2, 4, -6)),
        (CubeCoord(1, 2, -3), -1, CubeCoord(-1, -2, 3)),
    ],
)
def test_multiply(coord: CubeCoord, factor: int, expected: CubeCoord):
    assert coord * factor == expected
    assert factor * coord == expected


def test_multiply_rejects_float():
    with pytest.raises(TypeError):
        CubeCoord(1, -1, 0) * 1.5  # type: ignore[operator]


@pytest.mark.parametrize(
    ("coord", "expected"),
    [
        (CubeCoord(0, 0, 0), 0),
        (CubeCoord(1, -1, 0), 1),
        (CubeCoord(1, -3, 2), 3),
    ],
)
def test_magnitude(coord: CubeCoord, expected: int):
    assert coord.magnitude() == expected
    assert cube_magnitude(coord) == expected


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        (CubeCoord(0, 0, 0), CubeCoord(0, 0, 0), 0),
        (CubeCoord(1, -1, 0), CubeCoord(2, -1, -1), 1),
        (CubeCoord(1, -3, 2), CubeCoord(2, 2, -4), 6),
    ],
)
def test_distance_is_symmetric(left: CubeCoord, right: CubeCoord, expected: int):
    assert left.distance_to(right) == expected
    assert right.distance_to(left) == expected
    assert hex_distance_cube(left, right) == expected


def test_distance_to_self_is_zero():
    c = CubeCoord(100, -5, -95)
    assert c.distance_to(c) == 0


def test_cube_is_hashable_value():
    assert {CubeCoord(1, -1, 0), CubeCoord(1, -1, 0)} == {CubeCoord(1, -1, 0)}
    assert tuple(CubeCoord(3, -1, -2)) == (3, -1, -2)


def test_float_cube_arithmetic():
    a = FloatCubeCoord(1.0, -0.5, -0.5)
    b = FloatCubeCoord(0.5, 0.25, -0.75)
    assert a + b == FloatCubeCoord(1.5, -0.25, -1.25)
    assert a - b == FloatCubeCoord(0.5, -0.75, 0.25)
    assert FloatCubeCoord.from_cube(CubeCoord(2, -3, 1)) == FloatCubeCoord(2.0, -3.0, 1.0)
