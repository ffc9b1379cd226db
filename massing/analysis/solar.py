"""
Approximate solar position.

Gives the sun direction used to orient the scene's directional light.
This is a proxy, not an ephemeris:
- Declination from the Cooper equation
- Hour angle from local clock time (15° per hour from noon); longitude is
  accepted but no solar-time correction is applied
- Azimuth from atan2, 0 along +Z of the scene frame

Scene frame: y up, direction = (sin(az)·cos(alt), sin(alt), cos(az)·cos(alt)).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

import numpy as np

Vector3 = tuple[float, float, float]


@dataclass(frozen=True)
class SunPosition:
    """Sun angles and direction for one moment."""
    altitude_deg: float
    azimuth_deg: float
    declination_deg: float
    hour_angle_deg: float
    direction: Vector3

    @property
    def above_horizon(self) -> bool:
        return self.altitude_deg > 0


def day_of_year(timestamp: datetime) -> int:
    """1-based day index within the calendar year."""
    return timestamp.timetuple().tm_yday


def declination_deg(doy: int) -> float:
    return 23.45 * math.sin(math.radians(360.0 * (284 + doy) / 365))


def hour_angle_deg(timestamp: datetime) -> float:
    local_hour = timestamp.hour + timestamp.minute / 60
    return 15.0 * (local_hour - 12)


def sun_position(latitude: float, longitude: float, timestamp: datetime) -> SunPosition:
    """
    Compute sun altitude, azimuth and direction.

    Args:
        latitude: Site latitude in degrees (positive north)
        longitude: Site longitude in degrees; not used by this proxy
        timestamp: Local date and time

    Returns:
        SunPosition with a unit direction vector
    """
    lat = math.radians(latitude)
    decl_deg = declination_deg(day_of_year(timestamp))
    decl = math.radians(decl_deg)
    h_deg = hour_angle_deg(timestamp)
    h = math.radians(h_deg)

    sin_alt = math.sin(lat) * math.sin(decl) + math.cos(lat) * math.cos(decl) * math.cos(h)
    altitude = math.asin(max(-1.0, min(1.0, sin_alt)))
    azimuth = math.atan2(
        -math.sin(h),
        math.tan(decl) * math.cos(lat) - math.sin(lat) * math.cos(h),
    )

    vector = np.array([
        math.sin(azimuth) * math.cos(altitude),
        math.sin(altitude),
        math.cos(azimuth) * math.cos(altitude),
    ])
    norm = np.linalg.norm(vector)
    if norm > 0:
        vector = vector / norm

    return SunPosition(
        altitude_deg=math.degrees(altitude),
        azimuth_deg=math.degrees(azimuth),
        declination_deg=decl_deg,
        hour_angle_deg=h_deg,
        direction=tuple(float(c) for c in vector),
    )


def sun_direction(latitude: float, longitude: float, timestamp: datetime) -> Vector3:
    """Unit vector pointing from the scene toward the sun."""
    return sun_position(latitude, longitude, timestamp).direction


def light_position(direction: Vector3, distance: float = 60.0) -> Vector3:
    """Place a directional light `distance` meters along the sun direction."""
    scaled = np.asarray(direction, dtype=float) * distance
    return tuple(float(c) for c in scaled)
