from __future__ import annotations

import math

import pytest

from _helpers import assert_vec
from wireframe_collision.math_utils import Vec3, cross, dot, normalize, perpendicular


def test_dot_and_cross_basics() -> None:
    assert dot(Vec3(1, 2, 3), Vec3(4, -5, 6)) == 12.0
    assert cross(Vec3(1, 0, 0), Vec3(0, 1, 0)) == Vec3(0, 0, 1)
    assert cross(Vec3(0, 1, 0), Vec3(1, 0, 0)) == Vec3(0, 0, -1)
    # parallel / zero inputs
    assert cross(Vec3(1, 2, 3), Vec3(2, 4, 6)) == Vec3(0, 0, 0)
    assert cross(Vec3(0, 0, 0), Vec3(1, 2, 3)) == Vec3(0, 0, 0)


def test_normalize_zero_vector_stays_zero() -> None:
    n = normalize(Vec3(0, 0, 0))
    assert n == Vec3(0, 0, 0)
    assert not any(math.isnan(c) for c in n)


def test_normalize_nonzero_is_unit_and_same_direction() -> None:
    for v in (Vec3(3, 0, 4), Vec3(-1, 2, -7), Vec3(1e-3, 0, 0)):
        n = normalize(v)
        assert n.length() == pytest.approx(1.0, abs=1e-6)
        # same direction: parallel and positive projection
        assert_vec(n.cross(v), (0, 0, 0))
        assert n.dot(v) > 0
    assert_vec(normalize(Vec3(3, 0, 4)), (0.6, 0.0, 0.8))


def test_perpendicular_branches() -> None:
    v = Vec3(1, 2, 3)
    p = perpendicular(v)
    assert p == Vec3(-2, 1, 0)
    assert p.dot(v) == 0.0
    # x and y zero: (0, z, y)
    assert perpendicular(Vec3(0, 0, 5)) == Vec3(0, 5, 0)
    assert perpendicular(Vec3(0, 0, 0)) == Vec3(0, 0, 0)


def test_operators_and_indexing() -> None:
    a = Vec3(1, 2, 3)
    b = Vec3(0.5, -1, 2)
    assert a + b == Vec3(1.5, 1, 5)
    assert a - b == Vec3(0.5, 3, 1)
    assert -a == Vec3(-1, -2, -3)
    assert a * 2 == 2 * a == Vec3(2, 4, 6)
    assert a / 2 == Vec3(0.5, 1, 1.5)
    assert list(a) == [1.0, 2.0, 3.0]
    assert (a[0], a[1], a[2]) == (1.0, 2.0, 3.0)
    with pytest.raises(IndexError):
        a[3]
    assert repr(a) == "Vec3(1.00, 2.00, 3.00)"


def test_vectors_are_immutable() -> None:
    v = Vec3(1, 2, 3)
    bucket = {v}
    with pytest.raises(AttributeError):
        v.x = 9.0
    with pytest.raises(AttributeError):
        del v.y
    assert v in bucket
    assert v == Vec3(1, 2, 3)
