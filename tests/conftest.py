"""Shared fixtures: a flat triangle in the y=0 plane and the default scene."""

from __future__ import annotations

import pytest

from wireframe_collision.config import SceneConfig
from wireframe_collision.frame import SceneState
from wireframe_collision.geometry import Triangle
from wireframe_collision.math_utils import Mat4, Vec3


@pytest.fixture()
def flat_triangle() -> Triangle:
    # normal (0, -1, 0), plane y = 0
    return Triangle(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0), Vec3(0.0, 0.0, 1.0))


@pytest.fixture()
def default_state() -> SceneState:
    return SceneState.default()


@pytest.fixture()
def config() -> SceneConfig:
    return SceneConfig()


@pytest.fixture()
def rigid() -> Mat4:
    rot = Mat4.rotate_x(0.3) @ Mat4.rotate_y(-1.1) @ Mat4.rotate_z(2.4)
    return rot @ Mat4.translate(Vec3(1.5, -2.0, 3.25))
