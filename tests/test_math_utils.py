import pytest

from fracnoise.math_utils import (
    add2, add3, add4, clamp, dot2, dot3, dot4, floor2, floor3, floor4, lerp, mul2, mul3,
    mul4, s_curve5, sub2, sub3, sub4, to_int2, to_int3, to_int4,
)


def test_s_curve5_fixes_endpoints_and_midpoint() -> None:
    assert s_curve5(0.0) == 0.0
    assert s_curve5(1.0) == 1.0
    assert s_curve5(0.5) == 0.5


def test_s_curve5_is_monotonic_on_unit_interval() -> None:
    values = [s_curve5(i / 50.0) for i in range(51)]
    assert values == sorted(values)


def test_lerp() -> None:
    assert lerp(2.0, 4.0, 0.0) == 2.0
    assert lerp(2.0, 4.0, 1.0) == 4.0
    assert lerp(2.0, 4.0, 0.5) == 3.0


def test_clamp() -> None:
    assert clamp(1.5, -1.0, 1.0) == 1.0
    assert clamp(-3.0, -1.0, 1.0) == -1.0
    assert clamp(0.25, -1.0, 1.0) == 0.25


def test_vector_arithmetic() -> None:
    assert add2((1.0, 2.0), (3.0, 4.0)) == (4.0, 6.0)
    assert sub3((1.0, 2.0, 3.0), (1.0, 1.0, 1.0)) == (0.0, 1.0, 2.0)
    assert mul4((1.0, -2.0, 0.5, 0.0), 2.0) == (2.0, -4.0, 1.0, 0.0)
    assert add3((1, 1, 1), (1, 2, 3)) == (2, 3, 4)
    assert add4((0.0, 0.0, 0.0, 0.0), (1.0, 1.0, 1.0, 1.0)) == (1.0, 1.0, 1.0, 1.0)
    assert sub2((0.5, 0.5), (1.0, 1.0)) == (-0.5, -0.5)
    assert sub4((4.0, 3.0, 2.0, 1.0), (1.0, 1.0, 1.0, 1.0)) == (3.0, 2.0, 1.0, 0.0)
    assert mul2((1.5, 2.0), 2.0) == (3.0, 4.0)
    assert mul3((1.0, 2.0, 3.0), -1.0) == (-1.0, -2.0, -3.0)


def test_floor_rounds_towards_negative_infinity() -> None:
    assert floor2((-0.5, 1.5)) == (-1.0, 1.0)
    assert floor3((-2.0, 2.999, -0.001)) == (-2.0, 2.0, -1.0)
    assert floor4((0.0, -1.5, 7.25, -7.25)) == (0.0, -2.0, 7.0, -8.0)


def test_to_int() -> None:
    assert to_int2((-1.0, 2.0)) == (-1, 2)
    assert to_int3((3.0, -4.0, 0.0)) == (3, -4, 0)
    assert to_int4((1.0, 2.0, 3.0, -5.0)) == (1, 2, 3, -5)


def test_dot_products() -> None:
    assert dot2((1.0, 2.0), (3.0, 4.0)) == 11.0
    assert dot3((1.0, 0.0, -1.0), (2.0, 5.0, 2.0)) == 0.0
    assert dot4((1.0, 1.0, 1.0, 1.0), (0.5, 0.5, 0.5, 0.5)) == pytest.approx(2.0)
