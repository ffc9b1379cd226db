"""
Environmental proxy formulas.

Coarse, deterministic estimates computed from geometry and catalog
properties. Nothing here is cached on the model; every number is derived on
demand from the current value.

Conventions kept on purpose:
- Glazing UA is added on top of the gross wall UA (the wall area behind an
  opening is not subtracted).
- Embodied carbon uses the wall material intensity times the footprint
  area; roof and glazing materials do not contribute.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from ..core.materials import get_material
from ..core.models import Mass, Model, Opening
from ..utils.rounding import clamp, round2, round_half_away, round_int

# Climate defaults (°C-days/year)
DEFAULT_HDD = 3000
DEFAULT_CDD = 800

# Hours factors of the heating/cooling proxies
HEATING_HOURS_PER_DAY = 24
COOLING_HOURS_PER_DAY = 12

# Lighting proxy
DEFAULT_LPD_W_PER_SQM = 8.0
LIGHTING_HOURS_PER_DAY = 12
LIGHTING_DAYS_PER_YEAR = 300
MAX_DAYLIGHT_SAVINGS = 0.6

# Window-to-wall ratio advice
BASE_WWR = 0.25
MIN_WWR = 0.15
MAX_WWR = 0.45


@dataclass(frozen=True)
class GlazingTotals:
    area: float  # m²
    ua: float  # W/K


@dataclass(frozen=True)
class HvacProxy:
    heating_kwh: int
    cooling_kwh: int

    @property
    def total_kwh(self) -> int:
        return self.heating_kwh + self.cooling_kwh


@dataclass(frozen=True)
class LightingLoad:
    avg_power_w: int
    annual_kwh: int


# =============================================================================
# ENVELOPE
# =============================================================================


def wall_area(mass: Mass) -> float:
    """Gross wall area: perimeter × height (m²)."""
    return 2 * (mass.w + mass.d) * mass.h


def roof_area(mass: Mass) -> float:
    return mass.w * mass.d


def ua_for_mass(mass: Mass) -> float:
    """Opaque envelope conductance of one mass (W/K)."""
    wall = get_material(mass.wall_material_id)
    roof = get_material(mass.roof_material_id)
    return wall.U * wall_area(mass) + roof.U * roof_area(mass)


def glazing_ua(openings: Iterable[Opening]) -> GlazingTotals:
    """Total glazing area and conductance of a set of openings."""
    area = 0.0
    ua = 0.0
    for opening in openings:
        a = opening.w * opening.h
        area += a
        ua += get_material(opening.material_id).U * a
    return GlazingTotals(area=area, ua=ua)


def ua_total(model: Model) -> float:
    """Opaque UA of every mass plus the UA of every opening (W/K)."""
    opaque = sum(ua_for_mass(mass) for mass in model.masses)
    return opaque + glazing_ua(model.all_openings()).ua


# =============================================================================
# OPERATIONAL ENERGY
# =============================================================================


def heating_proxy(ua: float, hdd: float = DEFAULT_HDD) -> int:
    """Annual heating (kWh/yr) = UA·HDD·24/1000."""
    return round_int(ua * hdd * HEATING_HOURS_PER_DAY / 1000)


def cooling_proxy(ua: float, cdd: float = DEFAULT_CDD) -> int:
    """Annual cooling (kWh/yr) = UA·CDD·12/1000."""
    return round_int(ua * cdd * COOLING_HOURS_PER_DAY / 1000)


def hvac_proxy(ua: float, hdd: float = DEFAULT_HDD, cdd: float = DEFAULT_CDD) -> HvacProxy:
    return HvacProxy(heating_kwh=heating_proxy(ua, hdd), cooling_kwh=cooling_proxy(ua, cdd))


def operational_proxy(
    u_value: float,
    area_per_floor: float,
    storeys: int,
    hdd: float = DEFAULT_HDD,
    cdd: float = DEFAULT_CDD,
) -> float:
    """
    Single-material operational proxy of the grid builder (kWh/yr).

    Treats the gross floor area as the exposed area:
    U·A·HDD·0.024 + U·A·CDD·0.012, rounded to 1 decimal.
    """
    area = area_per_floor * storeys
    heating = u_value * area * hdd * 0.024
    cooling = u_value * area * cdd * 0.012
    return round_half_away(heating + cooling, 1)


# =============================================================================
# CARBON, AREAS, DAYLIGHT
# =============================================================================


def embodied_carbon_for_mass(mass: Mass) -> float:
    """Wall material intensity × footprint area (kgCO₂e)."""
    return get_material(mass.wall_material_id).EC * mass.footprint_area


def embodied_carbon(model: Model) -> float:
    return sum(embodied_carbon_for_mass(mass) for mass in model.masses)


def glazing_area(model: Model) -> float:
    return sum(opening.w * opening.h for opening in model.all_openings())


def floor_area(model: Model) -> float:
    return sum(mass.w * mass.d for mass in model.masses)


def daylight_factor_proxy(glazing_area: float, floor_area: float) -> float:
    """
    Daylight factor (%) saturating at 3% as glazing grows.

    3·(1 − e^(−4·glazing/floor)), rounded to 2 decimals; 0 without floor area.
    """
    if floor_area <= 0:
        return 0.0
    return round2(3 * (1 - math.exp(-4 * (glazing_area / floor_area))))


def lighting_load(
    floor_area: float,
    lpd: float = DEFAULT_LPD_W_PER_SQM,
    daylight_factor: float = 2.0,
) -> LightingLoad:
    """
    Lighting power and annual energy with daylight savings.

    Savings are daylight_factor/10, capped at 60%. Energy assumes 12 h/day
    over 300 days/year.
    """
    base = floor_area * lpd
    savings = min(MAX_DAYLIGHT_SAVINGS, daylight_factor / 10)
    avg_w = base * (1 - savings)
    annual_kwh = avg_w * LIGHTING_HOURS_PER_DAY * LIGHTING_DAYS_PER_YEAR / 1000
    return LightingLoad(avg_power_w=round_int(avg_w), annual_kwh=round_int(annual_kwh))


# =============================================================================
# ORIENTATION
# =============================================================================


def orientation_factor(orientation_deg: float) -> float:
    """1 for due south (180°), falling linearly to 0 for due north."""
    normalized = ((orientation_deg % 360) + 360) % 360
    diff = min(180.0, abs(180 - normalized))
    return 1 - diff / 180


def solar_index(latitude: float, orientation_deg: float) -> float:
    """
    Relative solar exposure score in [0, 1].

    Highest for a south-facing facade at the equator.
    """
    lat_factor = max(0.0, 1 - abs(latitude) / 90)
    score = max(0.0, lat_factor * (0.5 + 0.5 * orientation_factor(orientation_deg)))
    return round2(score)


def recommended_wwr(latitude: float, orientation_deg: float) -> float:
    """
    Advisory window-to-wall ratio for a facade orientation.

    0.25 for south, rising toward north, limited to 0.15-0.45. Latitude is
    accepted for future climate tuning but does not change the result.
    """
    wwr = BASE_WWR + 0.2 * (1 - orientation_factor(orientation_deg))
    return clamp(round2(wwr), MIN_WWR, MAX_WWR)
