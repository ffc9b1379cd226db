"""
Input validation utilities for Massing Studio.

Validates the arguments of UI commands (grid module, heights, site
coordinates, material ids). Pointer gestures never go through here: they
produce outcomes, not errors.

Usage:
    from massing.utils.validation import (
        validate_coordinates,
        validate_grid_module,
        ValidationError,
    )

    lat, lon = validate_coordinates(40.7, -74.0)
    module = validate_grid_module(1.2192)
"""

import logging
from typing import Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: str = "", suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field = field
        self.suggestions = suggestions or []


# Grid modules the studio offers (2 ft to 30 ft)
MIN_GRID_MODULE_M = 0.6096
MAX_GRID_MODULE_M = 9.144


def validate_coordinates(lat: float, lon: float) -> Tuple[float, float]:
    """
    Validate site coordinates.

    Args:
        lat: Latitude in degrees (-90 to 90)
        lon: Longitude in degrees (-180 to 180)

    Returns:
        Tuple of (lat, lon) as floats

    Raises:
        ValidationError: If coordinates are out of range
    """
    try:
        lat = float(lat)
        lon = float(lon)
    except (TypeError, ValueError):
        raise ValidationError(
            f"Coordinates must be numbers, got lat={lat!r}, lon={lon!r}",
            field="coordinates",
        )

    if not -90 <= lat <= 90:
        raise ValidationError(
            f"Latitude {lat} out of range",
            field="latitude",
            suggestions=["Latitude must be between -90 and 90 degrees"],
        )

    if not -180 <= lon <= 180:
        raise ValidationError(
            f"Longitude {lon} out of range",
            field="longitude",
            suggestions=["Longitude must be between -180 and 180 degrees"],
        )

    return lat, lon


def validate_grid_module(module_m: float, strict: bool = False) -> float:
    """
    Validate a grid module in meters.

    Args:
        module_m: Snapping quantum
        strict: If True, also require the module to lie in the 2-30 ft range

    Raises:
        ValidationError: If the module is not positive (or outside the range)
    """
    if module_m is None or module_m <= 0:
        raise ValidationError(
            f"Grid module must be positive, got {module_m}",
            field="grid_module",
            suggestions=["Use 1.2192 m (4 ft) for a typical planning grid"],
        )

    if strict and not MIN_GRID_MODULE_M <= module_m <= MAX_GRID_MODULE_M:
        raise ValidationError(
            f"Grid module {module_m:.3f} m outside {MIN_GRID_MODULE_M}-{MAX_GRID_MODULE_M} m",
            field="grid_module",
            suggestions=["Grid modules between 2 ft and 30 ft are supported"],
        )

    return float(module_m)


def validate_height(height_m: float, field: str = "height") -> float:
    """Validate a positive height in meters."""
    if height_m is None or height_m <= 0:
        raise ValidationError(
            f"{field.replace('_', ' ').capitalize()} must be positive, got {height_m}",
            field=field,
            suggestions=["Typical storey heights are 2.4-4.0 m"],
        )
    return float(height_m)


def validate_material_id(material_id: str, known_ids: Iterable[str]) -> str:
    """
    Validate a material id against the catalog.

    Raises:
        ValidationError: If the id is not in the catalog
    """
    known = list(known_ids)
    if material_id not in known:
        raise ValidationError(
            f"Unknown material: '{material_id}'",
            field="material_id",
            suggestions=[f"Valid options: {', '.join(known)}"],
        )
    return material_id
