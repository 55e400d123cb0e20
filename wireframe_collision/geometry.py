#
# PROJECT: wireframe-collision
# MODULE: wireframe_collision/geometry.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from dataclasses import dataclass

from .math_utils import Vec3


@dataclass(frozen=True)
class LineSegment:
    """Finite segment from start to end (not an infinite line)."""
    start: Vec3
    end: Vec3

    @property
    def direction(self) -> Vec3:
        return self.end - self.start

    def point_at(self, t: float) -> Vec3:
        return self.start + self.direction * t


@dataclass(frozen=True)
class Triangle:
    """
    Three world-space vertices.

    Winding only fixes the sign of normal(); the collision test does not
    care which side the normal points to.
    """
    p1: Vec3
    p2: Vec3
    p3: Vec3

    def normal(self) -> Vec3:
        return (self.p2 - self.p1).cross(self.p3 - self.p1).normalize()

    def vertices(self):
        return (self.p1, self.p2, self.p3)

    def edges(self):
        """The closed outline p1->p2, p2->p3, p3->p1."""
        return ((self.p1, self.p2), (self.p2, self.p3), (self.p3, self.p1))


@dataclass(frozen=True)
class Plane:
    normal: Vec3
    distance: float

    @classmethod
    def from_triangle(cls, triangle: Triangle) -> 'Plane':
        # A degenerate triangle gives a zero normal and distance 0.
        normal = triangle.normal()
        return cls(normal, normal.dot(triangle.p1))

    def signed_distance(self, point: Vec3) -> float:
        return self.normal.dot(point) - self.distance
