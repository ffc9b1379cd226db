"""Renderer-facing scene records."""

from .scene import (
    SceneIndex,
    WallFrame,
    build_scene,
    mass_scene,
    opening_holes,
    tree_scene,
    wall_frames,
)

__all__ = [
    "SceneIndex",
    "WallFrame",
    "build_scene",
    "mass_scene",
    "opening_holes",
    "tree_scene",
    "wall_frames",
]
