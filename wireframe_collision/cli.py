#
# PROJECT: wireframe-collision
# MODULE: wireframe_collision/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import logging
import sys
from dataclasses import replace

from .config import SceneConfig
from .frame import SceneState, build_frame
from .geometry import LineSegment, Triangle
from .logging import setup_default_logging
from .math_utils import Vec3

logger = logging.getLogger(__name__)


def _vec(values):
    return Vec3(*values) if values is not None else None


def build_parser():
    defaults = SceneState.default()
    epilog = """\
examples:
  %(prog)s                                           Default scene
  %(prog)s --start 0 2 0.7 --end 0 -1 0.7            Segment through the triangle
  %(prog)s --camera-rotate 0.5 0 0 --lines           Dump every line command
  %(prog)s --width 800 --height 600 --log-level DEBUG
"""
    parser = argparse.ArgumentParser(
        prog="wireframe-collision",
        description="Segment/triangle collision and screen projection for one frame",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    vec = dict(nargs=3, type=float, metavar=("X", "Y", "Z"))
    parser.add_argument("--camera-translate", **vec,
                        help=f"Camera position (default: {tuple(defaults.camera_translate)})")
    parser.add_argument("--camera-rotate", **vec,
                        help=f"Camera rotation in radians (default: {tuple(defaults.camera_rotate)})")
    parser.add_argument("--start", **vec, help="Segment start point")
    parser.add_argument("--end", **vec, help="Segment end point")
    parser.add_argument("--p1", **vec, help="Triangle vertex 1")
    parser.add_argument("--p2", **vec, help="Triangle vertex 2")
    parser.add_argument("--p3", **vec, help="Triangle vertex 3")
    parser.add_argument("--width", type=float, default=None,
                        help="Window width in pixels (default: 1280)")
    parser.add_argument("--height", type=float, default=None,
                        help="Window height in pixels (default: 720)")
    parser.add_argument("--lines", action="store_true",
                        help="Print every screen-space line command")
    parser.add_argument("--log-level", default="WARNING",
                        help="Logging level (default: WARNING)")
    return parser


def state_from_args(args) -> SceneState:
    state = SceneState.default()
    seg = state.segment
    tri = state.triangle
    return SceneState(
        camera_translate=_vec(args.camera_translate) or state.camera_translate,
        camera_rotate=_vec(args.camera_rotate) or state.camera_rotate,
        segment=LineSegment(_vec(args.start) or seg.start, _vec(args.end) or seg.end),
        triangle=Triangle(_vec(args.p1) or tri.p1,
                          _vec(args.p2) or tri.p2,
                          _vec(args.p3) or tri.p3),
    )


def config_from_args(args) -> SceneConfig:
    config = SceneConfig.from_env()
    if args.width is None and args.height is None:
        return config
    return replace(
        config,
        window_width=args.width if args.width is not None else config.window_width,
        window_height=args.height if args.height is not None else config.window_height,
    )


def _fmt(v: Vec3) -> str:
    return f"({v.x:.3f}, {v.y:.3f}, {v.z:.3f})"


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_default_logging(args.log_level)

    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    state = state_from_args(args)
    logger.debug("config=%r state=%r", config, state)
    frame = build_frame(state, config)

    out = sys.stdout
    print(f"collision: {'yes' if frame.is_colliding else 'no'}", file=out)
    print(f"segment:   {_fmt(frame.screen(state.segment.start))} -> "
          f"{_fmt(frame.screen(state.segment.end))}", file=out)
    for name, p in zip(("p1", "p2", "p3"), state.triangle.vertices()):
        print(f"{name}:        {_fmt(frame.screen(p))}", file=out)

    if args.lines:
        for cmd in frame.lines:
            print(f"line {cmd.x1} {cmd.y1} {cmd.x2} {cmd.y2} 0x{cmd.color:08X}", file=out)
    return 0
