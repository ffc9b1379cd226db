"""
Pydantic models for the massing model.

All entities are immutable. A change to the model produces a new `Model`
whose untouched masses and trees are shared with the previous value, so a
reader holding the old value never sees a half-updated mass.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def new_id() -> str:
    return uuid4().hex


# =============================================================================
# ENUMS
# =============================================================================


class WallKey(str, Enum):
    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"


class OpeningKind(str, Enum):
    WINDOW = "window"
    DOOR = "door"


# =============================================================================
# CATALOG
# =============================================================================


class Material(BaseModel):
    """Static catalog entry for an envelope or glazing assembly."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    U: float = Field(gt=0, description="Thermal transmittance (W/m²K)")
    EC: float = Field(ge=0, description="Embodied carbon intensity (kgCO₂e/m²)")

    @property
    def r_value(self) -> float:
        """Thermal resistance R = 1/U (m²K/W)."""
        return 1.0 / self.U


# =============================================================================
# GEOMETRY
# =============================================================================


class Opening(BaseModel):
    """
    A window or door cut into one wall of a mass.

    `x` runs along the wall from its start corner, `z` up from the wall base,
    both in meters. Containment in the wall is guaranteed by placement, not
    checked here, so restored data is taken as-is.
    """

    model_config = ConfigDict(frozen=True)

    wall_key: WallKey
    x: float
    z: float
    w: float
    h: float
    material_id: str = "glass-loE"
    kind: OpeningKind = OpeningKind.WINDOW

    @property
    def area(self) -> float:
        return self.w * self.h


class Mass(BaseModel):
    """A rectangular-footprint building volume with a flat roof."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    x: float
    y: float
    w: float = Field(gt=0)
    d: float = Field(gt=0)
    h: float = Field(gt=0)
    wall_material_id: str
    roof_material_id: str
    openings: tuple[Opening, ...] = ()

    @property
    def footprint_area(self) -> float:
        return self.w * self.d

    def with_height(self, h: float) -> Mass:
        return self.model_copy(update={"h": h})

    def with_opening(self, opening: Opening) -> Mass:
        return self.model_copy(update={"openings": self.openings + (opening,)})


class Tree(BaseModel):
    """Site context tree. Ignored by every proxy."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    x: float
    y: float
    h: float = Field(default=2.4, gt=0)


class TemporaryRect(BaseModel):
    """Rectangle of a draw gesture in progress. Never stored in a Model."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    w: float = 0.0
    d: float = 0.0


class Model(BaseModel):
    """Root aggregate: grid module, masses and trees."""

    model_config = ConfigDict(frozen=True)

    grid_module: float = Field(default=1.2192, gt=0)
    masses: tuple[Mass, ...] = ()
    trees: tuple[Tree, ...] = ()

    def get_mass(self, mass_id: str) -> Optional[Mass]:
        for mass in self.masses:
            if mass.id == mass_id:
                return mass
        return None

    def all_openings(self) -> list[Opening]:
        return [opening for mass in self.masses for opening in mass.openings]

    def material_ids(self) -> list[str]:
        """Every material id referenced by masses and openings."""
        ids: list[str] = []
        for mass in self.masses:
            ids.extend([mass.wall_material_id, mass.roof_material_id])
            ids.extend(opening.material_id for opening in mass.openings)
        return ids

    # Copy-on-write updates -------------------------------------------------

    def add_mass(self, mass: Mass) -> Model:
        return self.model_copy(update={"masses": self.masses + (mass,)})

    def replace_mass(self, mass: Mass) -> Model:
        masses = tuple(mass if m.id == mass.id else m for m in self.masses)
        return self.model_copy(update={"masses": masses})

    def remove_mass(self, mass_id: str) -> Model:
        """Delete a mass together with its openings."""
        masses = tuple(m for m in self.masses if m.id != mass_id)
        return self.model_copy(update={"masses": masses})

    def add_tree(self, tree: Tree) -> Model:
        return self.model_copy(update={"trees": self.trees + (tree,)})

    def with_grid_module(self, grid_module: float) -> Model:
        """Change the snapping quantum. Existing masses keep their coordinates."""
        return self.model_copy(update={"grid_module": grid_module})
