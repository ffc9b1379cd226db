"""
Geometry Module - grid snapping and wall-local placement.

- Snap drawn coordinates to the grid module
- Build parametric grid footprints
- Project wall hits into wall-local coordinates
- Place openings fully inside their wall
"""

from .grid import generate_grid_model, grid_footprint, snap, snap_point
from .walls import (
    DOOR_SPEC,
    WALL_ORIENTATION_DEG,
    WINDOW_SPEC,
    OpeningSpec,
    opening_fits,
    place_opening,
    to_wall_local,
    facade_area,
    wall_width,
)

__all__ = [
    'generate_grid_model',
    'grid_footprint',
    'snap',
    'snap_point',
    'DOOR_SPEC',
    'WALL_ORIENTATION_DEG',
    'WINDOW_SPEC',
    'OpeningSpec',
    'opening_fits',
    'place_opening',
    'to_wall_local',
    'facade_area',
    'wall_width',
]
