"""
Grid snapping and parametric grid footprints.

Snapping quantizes drawn corner coordinates to the grid module. It is
applied while drawing only; masses keep their coordinates if the module
changes later.
"""

from __future__ import annotations

import math
from typing import Optional

from ..core.models import Mass, Model


def snap(value: float, module: float) -> float:
    """Snap `value` to the nearest multiple of `module`."""
    if module <= 0:
        raise ValueError(f"Grid module must be positive, got {module}")
    # Halves go toward +infinity so the grid is translation-invariant
    return math.floor(value / module + 0.5) * module


def snap_point(x: float, y: float, module: float) -> tuple[float, float]:
    return snap(x, module), snap(y, module)


def grid_footprint(cols: int, rows: int, module: float) -> float:
    """Total footprint area (m²) of a cols × rows grid of square modules."""
    return cols * rows * module * module


def generate_grid_model(
    cols: int,
    rows: int,
    module: float,
    storeys: int = 1,
    wall_material_id: str = "wood-insul",
    roof_material_id: str = "roof-insul",
    storey_height: float = 3.0,
    origin: tuple[float, float] = (0.0, 0.0),
    mass_id: Optional[str] = None,
) -> Model:
    """
    Build a model holding one mass that covers a parametric grid.

    Args:
        cols: Number of grid columns (along x)
        rows: Number of grid rows (along y)
        module: Module size in meters, also used as the model grid module
        storeys: Number of storeys
        storey_height: Floor-to-floor height in meters

    Returns:
        Model with a single mass of footprint (cols·module) × (rows·module)
    """
    if cols < 1 or rows < 1 or storeys < 1:
        raise ValueError("Grid needs at least one column, row and storey")

    fields = dict(
        x=origin[0],
        y=origin[1],
        w=cols * module,
        d=rows * module,
        h=storeys * storey_height,
        wall_material_id=wall_material_id,
        roof_material_id=roof_material_id,
    )
    if mass_id is not None:
        fields["id"] = mass_id

    return Model(grid_module=module).add_mass(Mass(**fields))
