#
# PROJECT: wireframe-collision
# MODULE: wireframe_collision/grid.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3


def grid_lines(half_width: float = 2.0, subdivision: int = 10):
    """
    Reference floor grid in the y=0 plane.

    Returns a list of (start, end) world points: first the subdivision+1
    lines running along Z (back to front), then the subdivision+1 lines
    running along X.
    """
    if subdivision <= 0:
        raise ValueError("subdivision must be positive")
    every = (half_width * 2.0) / subdivision

    lines = []
    for x_index in range(subdivision + 1):
        x = -half_width + every * x_index
        lines.append((Vec3(x, 0.0, -half_width), Vec3(x, 0.0, half_width)))
    for z_index in range(subdivision + 1):
        z = -half_width + every * z_index
        lines.append((Vec3(-half_width, 0.0, z), Vec3(half_width, 0.0, z)))
    return lines
