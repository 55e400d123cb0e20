#
# PROJECT: wireframe-collision
# MODULE: wireframe_collision/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import os
from dataclasses import dataclass

from .camera import Viewport

ENV_PREFIX = "WIREFRAME_COLLISION_"


@dataclass
class SceneConfig:
    """Window, projection and grid settings shared by every frame."""
    window_width: float = 1280.0
    window_height: float = 720.0
    fov_y: float = 0.45
    near_clip: float = 0.1
    far_clip: float = 100.0
    min_depth: float = 0.0
    max_depth: float = 1.0
    grid_half_width: float = 2.0
    grid_subdivision: int = 10

    def __post_init__(self):
        if self.window_width <= 0 or self.window_height <= 0:
            raise ValueError(
                f"window size must be positive, got {self.window_width}x{self.window_height}")
        if self.fov_y <= 0:
            raise ValueError(f"fov_y must be positive, got {self.fov_y}")
        if self.near_clip <= 0 or self.near_clip >= self.far_clip:
            raise ValueError(
                f"clip planes must satisfy 0 < near < far, got {self.near_clip}, {self.far_clip}")
        if self.grid_subdivision <= 0:
            raise ValueError(f"grid_subdivision must be positive, got {self.grid_subdivision}")

    @property
    def aspect_ratio(self) -> float:
        return self.window_width / self.window_height

    def viewport(self) -> Viewport:
        return Viewport(0.0, 0.0, self.window_width, self.window_height,
                        self.min_depth, self.max_depth)

    @classmethod
    def from_env(cls, environ=None) -> 'SceneConfig':
        """
        Default config with overrides from WIREFRAME_COLLISION_* variables.

        Recognised: WIDTH, HEIGHT, FOV_Y, NEAR, FAR. Unparseable values
        raise ValueError.
        """
        env = os.environ if environ is None else environ
        names = {
            'WIDTH': 'window_width',
            'HEIGHT': 'window_height',
            'FOV_Y': 'fov_y',
            'NEAR': 'near_clip',
            'FAR': 'far_clip',
        }
        overrides = {}
        for suffix, attr in names.items():
            raw = env.get(ENV_PREFIX + suffix)
            if raw is None or raw.strip() == '':
                continue
            try:
                overrides[attr] = float(raw)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}{suffix}: not a number: {raw!r}") from None
        return cls(**overrides)
