"""
Wall-local coordinates and opening placement.

Each mass has four walls. North and South walls run along world X
(local x = world x - mass.x); East and West walls run along world Z, which
carries the footprint y (local x = world z - mass.y). Local z is height
above the wall base.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.models import Mass, Opening, OpeningKind, WallKey
from ..core.units import feet_to_meters
from ..utils.rounding import clamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpeningSpec:
    """Default size and vertical placement of a new opening."""
    kind: OpeningKind
    width: float
    height: float
    sill_at_base: bool


DOOR_SPEC = OpeningSpec(
    kind=OpeningKind.DOOR,
    width=feet_to_meters(3),
    height=feet_to_meters(7),
    sill_at_base=True,
)

WINDOW_SPEC = OpeningSpec(
    kind=OpeningKind.WINDOW,
    width=feet_to_meters(4),
    height=feet_to_meters(4),
    sill_at_base=False,
)

# Facade azimuths, 0 = north, clockwise
WALL_ORIENTATION_DEG = {
    WallKey.NORTH: 0.0,
    WallKey.EAST: 90.0,
    WallKey.SOUTH: 180.0,
    WallKey.WEST: 270.0,
}


def wall_width(wall_key: WallKey, mass: Mass) -> float:
    """Length of a wall: w for North/South, d for East/West."""
    if wall_key in (WallKey.NORTH, WallKey.SOUTH):
        return mass.w
    return mass.d


def facade_area(wall_key: WallKey, mass: Mass) -> float:
    """Gross area of one wall (m²)."""
    return wall_width(wall_key, mass) * mass.h


def to_wall_local(wall_key: WallKey, mass: Mass, world_x: float, world_z: float) -> float:
    """Project a world hit point onto the wall's local x axis."""
    if wall_key in (WallKey.NORTH, WallKey.SOUTH):
        return world_x - mass.x
    return world_z - mass.y


def place_opening(
    mass: Mass,
    wall_key: WallKey,
    local_x: float,
    spec: OpeningSpec,
    material_id: str = "glass-loE",
) -> Opening:
    """
    Create an opening on a wall, fully contained in it.

    The opening's left edge goes at `local_x`. Windows are centred at
    mid-height, doors sit on the wall base. Offsets are clamped into
    [0, wall_width - w] and [0, h - opening_h]; an opening larger than the
    wall is first shrunk to the wall.
    """
    width = wall_width(wall_key, mass)
    w = min(spec.width, width)
    h = min(spec.height, mass.h)
    if (w, h) != (spec.width, spec.height):
        logger.debug(
            f"Shrunk {spec.kind.value} to {w:.2f} x {h:.2f} m to fit wall",
            extra={"mass_id": mass.id, "wall_key": wall_key.value},
        )

    target_z = 0.0 if spec.sill_at_base else mass.h * 0.5 - h / 2
    x = clamp(local_x, 0.0, width - w)
    z = clamp(target_z, 0.0, mass.h - h)

    return Opening(
        wall_key=wall_key,
        x=x,
        z=z,
        w=w,
        h=h,
        material_id=material_id,
        kind=spec.kind,
    )


def opening_fits(opening: Opening, mass: Mass, tolerance: float = 1e-9) -> bool:
    """True when the opening lies inside its wall."""
    width = wall_width(opening.wall_key, mass)
    return (
        opening.x >= -tolerance
        and opening.x + opening.w <= width + tolerance
        and opening.z >= -tolerance
        and opening.z + opening.h <= mass.h + tolerance
    )
