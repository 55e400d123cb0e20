#
# PROJECT: wireframe-collision
# MODULE: wireframe_collision/frame.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional

from .camera import Camera, to_screen
from .collision import is_collision
from .config import SceneConfig
from .geometry import LineSegment, Triangle
from .grid import grid_lines
from .math_utils import Mat4, Vec3

logger = logging.getLogger(__name__)

# RGBA, as handed to the external line drawer
GRID_COLOR = 0xAAAAAAFF
HIT_COLOR = 0xFF0000FF
SEGMENT_COLOR = 0xFFFFFFFF
TRIANGLE_COLOR = 0x00FF00FF


@dataclass
class SceneState:
    """Everything an editor may change between two updates."""
    camera_translate: Vec3
    camera_rotate: Vec3
    segment: LineSegment
    triangle: Triangle

    @classmethod
    def default(cls) -> 'SceneState':
        return cls(
            camera_translate=Vec3(0.0, 1.9, -6.49),
            camera_rotate=Vec3(0.26, 0.0, 0.0),
            segment=LineSegment(Vec3(-2.0, 1.0, -1.0), Vec3(0.0, 1.0, 1.0)),
            triangle=Triangle(
                Vec3(-1.0, 0.0, 1.0),
                Vec3(0.0, 1.0, 0.0),
                Vec3(1.0, 0.0, 1.0),
            ),
        )

    def camera(self, config: SceneConfig) -> Camera:
        return Camera(
            translate=self.camera_translate,
            rotate=self.camera_rotate,
            fov_y=config.fov_y,
            aspect_ratio=config.aspect_ratio,
            near_clip=config.near_clip,
            far_clip=config.far_clip,
        )


@dataclass(frozen=True)
class LineCommand:
    x1: int
    y1: int
    x2: int
    y2: int
    color: int


@dataclass
class Frame:
    """Result of one update: matrices, collision flag and lines to draw."""
    view_projection: Mat4
    viewport: Mat4
    is_colliding: bool
    lines: List[LineCommand] = field(default_factory=list)

    def screen(self, point: Vec3) -> Vec3:
        return to_screen(point, self.view_projection, self.viewport)


def _line_command(a: Vec3, b: Vec3, color: int) -> Optional[LineCommand]:
    if not all(math.isfinite(c) for c in (a.x, a.y, b.x, b.y)):
        logger.debug("skipping line with non-finite endpoint: %r -> %r", a, b)
        return None
    # int() truncates toward zero
    return LineCommand(int(a.x), int(a.y), int(b.x), int(b.y), color)


def build_frame(state: SceneState, config: Optional[SceneConfig] = None) -> Frame:
    """
    Run one update for the given state.

    Draw order: grid, segment (red when it hits the triangle), triangle
    outline.
    """
    if config is None:
        config = SceneConfig()

    camera = state.camera(config)
    view_projection = camera.view_projection_matrix()
    viewport = config.viewport().matrix()
    colliding = is_collision(state.segment, state.triangle)

    frame = Frame(view_projection, viewport, colliding)

    def emit(a: Vec3, b: Vec3, color: int):
        cmd = _line_command(frame.screen(a), frame.screen(b), color)
        if cmd is not None:
            frame.lines.append(cmd)

    # Grid has an identity world matrix, so world @ view_projection is view_projection.
    for start, end in grid_lines(config.grid_half_width, config.grid_subdivision):
        emit(start, end, GRID_COLOR)

    emit(state.segment.start, state.segment.end,
         HIT_COLOR if colliding else SEGMENT_COLOR)

    for a, b in state.triangle.edges():
        emit(a, b, TRIANGLE_COLOR)

    logger.debug("frame built: colliding=%s lines=%d", colliding, len(frame.lines))
    return frame
