from __future__ import annotations

import pytest

from _helpers import assert_vec
from wireframe_collision.collision import intersection_point, is_collision
from wireframe_collision.frame import SceneState
from wireframe_collision.geometry import LineSegment, Plane, Triangle
from wireframe_collision.math_utils import Vec3


def seg(a, b) -> LineSegment:
    return LineSegment(Vec3(*a), Vec3(*b))


def test_default_scene_does_not_collide(default_state: SceneState) -> None:
    # By hand: plane y + z = 1, t = 0.5, hit (-1, 1, 0), u = 1, v = -0.5.
    s, tri = default_state.segment, default_state.triangle
    plane = Plane.from_triangle(tri)
    hit = s.point_at(0.5)
    assert_vec(hit, (-1, 1, 0))
    assert plane.signed_distance(hit) == pytest.approx(0.0, abs=1e-9)
    assert is_collision(s, tri) is False
    assert intersection_point(s, tri) is None


def test_segment_through_default_triangle(default_state: SceneState) -> None:
    # hits (0, 0.5, 0.5): u = 0.5, v = 0.25
    s = seg((0, 2, 0.5), (0, -1, 0.5))
    hit = intersection_point(s, default_state.triangle)
    assert hit is not None
    assert_vec(hit, (0, 0.5, 0.5))
    assert is_collision(s, default_state.triangle)


def test_segment_through_interior(flat_triangle: Triangle) -> None:
    s = seg((0.25, 1, 0.25), (0.25, -1, 0.25))
    assert_vec(intersection_point(s, flat_triangle), (0.25, 0, 0.25))
    assert is_collision(s, flat_triangle)


def test_direction_and_winding_do_not_matter(flat_triangle: Triangle) -> None:
    s = seg((0.25, 1, 0.25), (0.25, -1, 0.25))
    reversed_seg = seg((0.25, -1, 0.25), (0.25, 1, 0.25))
    flipped = Triangle(flat_triangle.p1, flat_triangle.p3, flat_triangle.p2)
    assert is_collision(reversed_seg, flat_triangle)
    assert is_collision(s, flipped)
    assert is_collision(reversed_seg, flipped)


def test_boundary_counts_as_collision(flat_triangle: Triangle) -> None:
    # vertex p1
    assert is_collision(seg((0, 1, 0), (0, -1, 0)), flat_triangle)
    # hypotenuse midpoint: u + v == 1
    assert is_collision(seg((0.5, 1, 0.5), (0.5, -1, 0.5)), flat_triangle)
    # segment ends exactly on the plane: t == 1
    assert is_collision(seg((0.25, 1, 0.25), (0.25, 0, 0.25)), flat_triangle)
    # and starts on it: t == 0
    assert is_collision(seg((0.25, 0, 0.25), (0.25, 1, 0.25)), flat_triangle)


def test_miss_outside_triangle(flat_triangle: Triangle) -> None:
    assert not is_collision(seg((2, 1, 2), (2, -1, 2)), flat_triangle)
    assert not is_collision(seg((-0.1, 1, 0.5), (-0.1, -1, 0.5)), flat_triangle)
    assert not is_collision(seg((0.6, 1, 0.6), (0.6, -1, 0.6)), flat_triangle)


def test_parallel_offset_segment(flat_triangle: Triangle) -> None:
    assert not is_collision(seg((0, 5, 0), (1, 5, 1)), flat_triangle)
    assert intersection_point(seg((0, 5, 0), (1, 5, 1)), flat_triangle) is None


def test_coplanar_segment_is_never_a_collision(flat_triangle: Triangle) -> None:
    # lies in the triangle's plane and crosses its interior
    assert not is_collision(seg((-1, 0, 0.2), (2, 0, 0.2)), flat_triangle)
    assert not is_collision(seg((0.1, 0, 0.1), (0.2, 0, 0.2)), flat_triangle)


def test_plane_hit_outside_segment_range(flat_triangle: Triangle) -> None:
    # the infinite line crosses the interior, the segment stops short
    assert not is_collision(seg((0.25, 3, 0.25), (0.25, 1, 0.25)), flat_triangle)
    assert not is_collision(seg((0.25, -1, 0.25), (0.25, -3, 0.25)), flat_triangle)


def test_degenerate_triangle_never_collides() -> None:
    line = Triangle(Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(2, 0, 0))
    for s in (seg((0.5, 1, 0), (0.5, -1, 0)),
              seg((1, 0, 1), (1, 0, -1)),
              seg((0, 0, 0), (2, 0, 0))):
        assert not is_collision(s, line)

    point = Triangle(Vec3(1, 1, 1), Vec3(1, 1, 1), Vec3(1, 1, 1))
    assert not is_collision(seg((1, 0, 1), (1, 2, 1)), point)


def test_plane_from_triangle(flat_triangle: Triangle) -> None:
    plane = Plane.from_triangle(flat_triangle)
    assert plane.normal == Vec3(0, -1, 0)
    assert plane.distance == 0.0
    assert plane.signed_distance(Vec3(3, -2, 7)) == 2.0


def test_segment_and_triangle_cannot_be_changed_through_points(flat_triangle: Triangle) -> None:
    s = seg((0.25, 1, 0.25), (0.25, -1, 0.25))
    with pytest.raises(AttributeError):
        s.start.x = 5.0
    with pytest.raises(AttributeError):
        flat_triangle.p2.y = 1.0
    assert s.start == Vec3(0.25, 1, 0.25)
    assert is_collision(s, flat_triangle)
