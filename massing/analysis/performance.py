"""
Performance summary.

Collects every proxy for the current model into one record for the
dashboard, CLI and API.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from ..core.config import Settings, settings as default_settings
from ..core.models import Model, WallKey
from ..geometry.walls import WALL_ORIENTATION_DEG
from ..utils.rounding import round_half_away, round_int
from . import proxies


class PerformanceSummary(BaseModel):
    """Proxy performance of a model."""

    floor_area_m2: float
    glazing_area_m2: float
    daylight_factor_pct: float
    lighting_avg_w: int
    lighting_kwh_yr: int
    ua_total_w_k: float
    heating_kwh_yr: int
    cooling_kwh_yr: int
    embodied_carbon_kgco2e: float = Field(description="Rounded to 1 decimal")
    latitude: float
    solar_index_south: float
    recommended_wwr_south: float
    recommended_wwr_by_wall: dict[WallKey, float]
    mass_count: int
    opening_count: int

    @property
    def operational_kwh_yr(self) -> int:
        return self.heating_kwh_yr + self.cooling_kwh_yr + self.lighting_kwh_yr


def compute_performance(
    model: Model,
    latitude: Optional[float] = None,
    hdd: Optional[float] = None,
    cdd: Optional[float] = None,
    lpd: Optional[float] = None,
    config: Optional[Settings] = None,
) -> PerformanceSummary:
    """
    Compute every proxy for a model.

    Arguments left as None come from settings.
    """
    config = config or default_settings
    latitude = config.latitude if latitude is None else latitude
    hdd = config.heating_degree_days if hdd is None else hdd
    cdd = config.cooling_degree_days if cdd is None else cdd
    lpd = config.lighting_power_density if lpd is None else lpd

    floor = proxies.floor_area(model)
    glazing = proxies.glazing_ua(model.all_openings())
    daylight = proxies.daylight_factor_proxy(glazing.area, floor)
    lighting = proxies.lighting_load(floor, lpd, daylight)
    ua = proxies.ua_total(model)
    hvac = proxies.hvac_proxy(ua, hdd, cdd)

    return PerformanceSummary(
        floor_area_m2=floor,
        glazing_area_m2=glazing.area,
        daylight_factor_pct=daylight,
        lighting_avg_w=lighting.avg_power_w,
        lighting_kwh_yr=lighting.annual_kwh,
        ua_total_w_k=ua,
        heating_kwh_yr=hvac.heating_kwh,
        cooling_kwh_yr=hvac.cooling_kwh,
        embodied_carbon_kgco2e=round_half_away(proxies.embodied_carbon(model), 1),
        latitude=latitude,
        solar_index_south=proxies.solar_index(latitude, 180),
        recommended_wwr_south=proxies.recommended_wwr(latitude, 180),
        recommended_wwr_by_wall={
            key: proxies.recommended_wwr(latitude, deg)
            for key, deg in WALL_ORIENTATION_DEG.items()
        },
        mass_count=len(model.masses),
        opening_count=len(model.all_openings()),
    )


def summary_rows(summary: PerformanceSummary) -> list[tuple[str, str]]:
    """Label/value pairs for dashboards, in display order."""
    return [
        ("Floor area", f"{summary.floor_area_m2:.1f} m²"),
        ("Glazing area", f"{summary.glazing_area_m2:.1f} m²"),
        ("Daylight factor", f"{summary.daylight_factor_pct}%"),
        ("Lighting", f"{summary.lighting_avg_w} W • {summary.lighting_kwh_yr} kWh/yr"),
        ("UA total", f"{round_int(summary.ua_total_w_k)} W/K"),
        ("Heating/Cooling", f"{summary.heating_kwh_yr} / {summary.cooling_kwh_yr} kWh/yr"),
        ("Embodied carbon", f"{summary.embodied_carbon_kgco2e} kgCO₂e"),
        ("Solar index (south)", f"{summary.solar_index_south}"),
        ("Suggested WWR (south)", f"~{round_int(summary.recommended_wwr_south * 100)}%"),
    ]
