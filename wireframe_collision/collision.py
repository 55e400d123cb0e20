#
# PROJECT: wireframe-collision
# MODULE: wireframe_collision/collision.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
from typing import Optional

from .geometry import LineSegment, Plane, Triangle
from .math_utils import EPSILON, Vec3

logger = logging.getLogger(__name__)


def intersection_point(segment: LineSegment, triangle: Triangle) -> Optional[Vec3]:
    """
    Point where the segment crosses the triangle, or None.

    Steps:
      1. Plane of the triangle (unit normal + offset).
      2. Reject segments parallel to the plane. Coplanar segments are
         rejected too, even when they overlap the triangle.
      3. Solve for t along the segment, reject t outside [0, 1].
      4. Barycentric (u, v) of the hit point; edges and vertices count
         as inside. Zero-area triangles never collide.
    """
    plane = Plane.from_triangle(triangle)
    direction = segment.direction

    dot_n_d = plane.normal.dot(direction)
    if abs(dot_n_d) < EPSILON:
        logger.debug("segment parallel to triangle plane (coplanar=%s)",
                     abs(plane.signed_distance(segment.start)) < EPSILON)
        return None

    t = (plane.distance - plane.normal.dot(segment.start)) / dot_n_d
    if t < 0.0 or t > 1.0:
        logger.debug("plane hit outside segment: t=%.6f", t)
        return None

    p = segment.point_at(t)

    a = triangle.p1
    ab = triangle.p2 - a
    ac = triangle.p3 - a
    ap = p - a

    dot_ab_ab = ab.dot(ab)
    dot_ab_ac = ab.dot(ac)
    dot_ac_ac = ac.dot(ac)
    dot_ap_ab = ap.dot(ab)
    dot_ap_ac = ap.dot(ac)

    denominator = dot_ab_ab * dot_ac_ac - dot_ab_ac * dot_ab_ac
    if abs(denominator) < EPSILON:
        logger.debug("degenerate triangle: denominator=%g", denominator)
        return None

    u = (dot_ac_ac * dot_ap_ab - dot_ab_ac * dot_ap_ac) / denominator
    v = (dot_ab_ab * dot_ap_ac - dot_ab_ac * dot_ap_ab) / denominator

    if u >= 0.0 and v >= 0.0 and u + v <= 1.0:
        return p
    logger.debug("hit point outside triangle: u=%.6f v=%.6f", u, v)
    return None


def is_collision(segment: LineSegment, triangle: Triangle) -> bool:
    """True if the segment touches or crosses the triangle."""
    return intersection_point(segment, triangle) is not None
