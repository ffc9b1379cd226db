"""
Analysis - solar position and environmental proxies.

All functions are pure: they read a model value and return numbers.
"""

from .solar import SunPosition, day_of_year, light_position, sun_direction, sun_position
from .proxies import (
    GlazingTotals,
    HvacProxy,
    LightingLoad,
    cooling_proxy,
    daylight_factor_proxy,
    embodied_carbon,
    embodied_carbon_for_mass,
    floor_area,
    glazing_area,
    glazing_ua,
    heating_proxy,
    hvac_proxy,
    lighting_load,
    operational_proxy,
    orientation_factor,
    recommended_wwr,
    roof_area,
    solar_index,
    ua_for_mass,
    ua_total,
    wall_area,
)
from .performance import PerformanceSummary, compute_performance, summary_rows

__all__ = [
    # Solar
    "SunPosition",
    "day_of_year",
    "light_position",
    "sun_direction",
    "sun_position",
    # Proxies
    "GlazingTotals",
    "HvacProxy",
    "LightingLoad",
    "cooling_proxy",
    "daylight_factor_proxy",
    "embodied_carbon",
    "embodied_carbon_for_mass",
    "floor_area",
    "glazing_area",
    "glazing_ua",
    "heating_proxy",
    "hvac_proxy",
    "lighting_load",
    "operational_proxy",
    "orientation_factor",
    "recommended_wwr",
    "roof_area",
    "solar_index",
    "ua_for_mass",
    "ua_total",
    "wall_area",
    # Summary
    "PerformanceSummary",
    "compute_performance",
    "summary_rows",
]
