"""Core models, catalog and configuration."""

from .models import (
    Mass,
    Material,
    Model,
    Opening,
    OpeningKind,
    TemporaryRect,
    Tree,
    WallKey,
)
from .materials import MATERIAL_CATALOG, get_material, list_materials, materials_for_ids
from .config import Settings, settings
from .units import feet_to_meters, format_feet_inches, meters_to_feet_inches

__all__ = [
    "Mass",
    "Material",
    "Model",
    "Opening",
    "OpeningKind",
    "TemporaryRect",
    "Tree",
    "WallKey",
    "MATERIAL_CATALOG",
    "get_material",
    "list_materials",
    "materials_for_ids",
    "Settings",
    "settings",
    "feet_to_meters",
    "format_feet_inches",
    "meters_to_feet_inches",
]
