#
# PROJECT: wireframe-collision
# MODULE: wireframe_collision/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import (Vec3, Vec4, Mat4, dot, cross, normalize, perpendicular,
                         multiply, transform)
from .geometry import LineSegment, Triangle, Plane
from .collision import is_collision, intersection_point
from .camera import Camera, Viewport, to_screen
from .config import SceneConfig
from .grid import grid_lines
from .frame import SceneState, LineCommand, Frame, build_frame
