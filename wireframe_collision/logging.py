#
# PROJECT: wireframe-collision
# MODULE: wireframe_collision/logging.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Logging setup for the command line.

Library modules only call ``logging.getLogger(__name__)``; configuring
handlers is left to the entry point.
"""

from __future__ import annotations

import logging


def setup_default_logging(level: int | str = "WARNING") -> None:
    """Configure a basic stderr handler once.

    - No-op if the root logger already has handlers
    - Unknown level names fall back to INFO
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
        if not isinstance(lvl, int):
            lvl = logging.INFO
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
