#
# PROJECT: wireframe-collision
# MODULE: wireframe_collision/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from dataclasses import dataclass, field

from .math_utils import Mat4, Vec3, transform


@dataclass
class Camera:
    """
    Camera parameters for one update.

    translate/rotate place the camera in the world (rotation in radians,
    applied X, then Y, then Z). The matrices are rebuilt from these values on
    every call; nothing is cached.
    """
    translate: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.9, -6.49))
    rotate: Vec3 = field(default_factory=lambda: Vec3(0.26, 0.0, 0.0))
    fov_y: float = 0.45
    aspect_ratio: float = 1280.0 / 720.0
    near_clip: float = 0.1
    far_clip: float = 100.0

    def rotation_matrix(self) -> Mat4:
        # Rx @ (Ry @ Rz): not the same order as Mat4.affine().
        r = self.rotate
        return Mat4.rotate_x(r.x) @ (Mat4.rotate_y(r.y) @ Mat4.rotate_z(r.z))

    def world_matrix(self) -> Mat4:
        return self.rotation_matrix() @ Mat4.translate(self.translate)

    def view_matrix(self) -> Mat4:
        return self.world_matrix().rigid_inverse()

    def projection_matrix(self) -> Mat4:
        return Mat4.perspective_fov(self.fov_y, self.aspect_ratio,
                                    self.near_clip, self.far_clip)

    def view_projection_matrix(self) -> Mat4:
        return self.view_matrix() @ self.projection_matrix()


@dataclass(frozen=True)
class Viewport:
    """Screen rectangle and depth range; origin at the top-left."""
    left: float = 0.0
    top: float = 0.0
    width: float = 1280.0
    height: float = 720.0
    min_depth: float = 0.0
    max_depth: float = 1.0

    def matrix(self) -> Mat4:
        return Mat4.viewport(self.left, self.top, self.width, self.height,
                             self.min_depth, self.max_depth)


def to_screen(point: Vec3, view_projection: Mat4, viewport: Mat4) -> Vec3:
    """
    World point to screen pixels (z is depth in [min_depth, max_depth]).

    Two separate transforms: the perspective divide has to happen before the
    viewport matrix is applied.
    """
    return transform(transform(point, view_projection), viewport)
