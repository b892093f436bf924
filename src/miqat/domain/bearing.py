# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Bearings and horizontal azimuths.

Closed-form spherical trigonometry; nothing here iterates. All results
are degrees clockwise from true north in [0, 360).
"""
import math

from miqat.domain.julian import julian_centuries
from miqat.domain.location import KAABA_LOCATION, Location
from miqat.domain.lunar import DEFAULT_ACCURACY_TIER, moon_position
from miqat.domain.solar import declination, mean_sidereal_time, right_ascension


def normalize_degrees(angle_deg: float) -> float:
    """Bring an atan2 result from (-180, 180] into [0, 360)."""
    if angle_deg < 0:
        angle_deg += 360.0
    # -1e-14 + 360 rounds to 360.0
    if angle_deg >= 360.0:
        angle_deg -= 360.0
    return angle_deg


def _cot(rad: float) -> float:
    return math.tan(math.pi / 2 - rad)


def great_circle_bearing(target: Location, location: Location) -> float:
    """
    Initial great-circle bearing from location towards target.

    Cotangent four-part formula on the spherical triangle pole/location/
    target: A is the longitude difference, b and c the colatitudes.
    """
    A = math.radians(target.longitude - location.longitude)
    b = math.radians(90 - location.latitude)
    c = math.radians(90 - target.latitude)
    C = math.degrees(math.atan2(math.sin(A), math.sin(b) * _cot(c) - math.cos(b) * math.cos(A)))
    return normalize_degrees(C)


def qibla_bearing(location: Location) -> float:
    """Bearing from location to the Ka'aba (degrees)."""
    return great_circle_bearing(KAABA_LOCATION, location)


def celestial_azimuth(
    right_ascension_rad: float,
    declination_rad: float,
    sidereal_hours: float,
    latitude_deg: float,
) -> float:
    """
    Horizontal azimuth of a body from its equatorial coordinates.

    Args:
        right_ascension_rad: Right ascension.
        declination_rad: Declination.
        sidereal_hours: Local sidereal time at the observer.
        latitude_deg: Observer latitude.

    Returns:
        Azimuth in degrees, [0, 360).
    """
    H = math.radians(sidereal_hours * 15) - right_ascension_rad
    B = math.radians(latitude_deg)
    A = math.degrees(math.atan2(
        -math.sin(H),
        math.tan(declination_rad) * math.cos(B) - math.sin(B) * math.cos(H),
    ))
    return normalize_degrees(A)


def sun_azimuth(instant: float, location: Location) -> float:
    """Azimuth of the Sun at an instant (degrees)."""
    T = julian_centuries(instant)
    return celestial_azimuth(
        right_ascension(T),
        declination(instant),
        mean_sidereal_time(instant, location.longitude),
        location.latitude,
    )


def moon_azimuth(
    instant: float,
    location: Location,
    accuracy_tier: object = DEFAULT_ACCURACY_TIER,
) -> float:
    """Geocentric azimuth of the Moon at an instant (degrees)."""
    moon = moon_position(instant, accuracy_tier)
    return celestial_azimuth(
        moon.right_ascension_rad,
        moon.declination_rad,
        mean_sidereal_time(instant, location.longitude),
        location.latitude,
    )
