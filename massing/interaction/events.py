"""
Gesture events and transition outcomes.

Hit resolution (ray casting) belongs to the renderer; the studio only sees
its results. World coordinates are y-up: a ground hit has y == 0 and its
z carries the footprint y.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..core.models import WallKey


@dataclass(frozen=True)
class Point3:
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class WallHit:
    """A ray hit on a wall surface."""
    mass_id: str
    wall_key: WallKey
    point: Point3


@dataclass(frozen=True)
class RoofHit:
    """A ray hit on a roof surface."""
    mass_id: str
    point: Point3


SurfaceHit = Union[WallHit, RoofHit]


@dataclass(frozen=True)
class GestureEvent:
    """
    One pointer event.

    Args:
        ground: Hit on the ground plane, if the ray reached it
        surface: First wall/roof hit, if any
    """
    ground: Optional[Point3] = None
    surface: Optional[SurfaceHit] = None

    @property
    def point(self) -> Optional[Point3]:
        """The world point under the pointer, surface first."""
        if self.surface is not None:
            return self.surface.point
        return self.ground


class GestureOutcome(str, Enum):
    APPLIED = "applied"        # Model or session changed
    NO_TARGET = "no_target"    # Window/door/roof gesture that hit nothing usable
    DISCARDED = "discarded"    # Draw released below the minimum size
    IGNORED = "ignored"        # Event has no meaning for the current tool/session
