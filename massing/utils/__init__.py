"""Utility modules."""

from .logging_config import (
    get_logger,
    setup_logging,
    ensure_logging,
    MassingFormatter,
    FileFormatter,
)
from .rounding import clamp, round2, round_half_away, round_int
from .validation import (
    validate_coordinates,
    validate_grid_module,
    validate_height,
    validate_material_id,
    ValidationError,
)

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    "ensure_logging",
    "MassingFormatter",
    "FileFormatter",
    # Rounding
    "clamp",
    "round2",
    "round_half_away",
    "round_int",
    # Validation
    "validate_coordinates",
    "validate_grid_module",
    "validate_height",
    "validate_material_id",
    "ValidationError",
]
