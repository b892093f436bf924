# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Analytical lunar ephemeris with selectable accuracy.

Mean orbital elements after P. Schlyter, "How to compute planetary
positions", with the element epoch at 1999-12-31 0h UT. Accuracy tiers
are cumulative:

    0  mean elements, one closed-form eccentric anomaly correction
    1  + Newton solution of Kepler's equation
    2  + evection, variation and yearly equation (~0.25 deg)
    3  + the remaining longitude and latitude terms (~2 arcmin)

Positions are geocentric; topocentric parallax is not applied.
"""
import math
from dataclasses import dataclass

import numpy as np

from miqat.domain.julian import DAYS_PER_JULIAN_CENTURY, julian_centuries
from miqat.domain.solar import obliquity, sun_mean_anomaly, sun_true_longitude

MIN_ACCURACY_TIER: int = 0
MAX_ACCURACY_TIER: int = 3
DEFAULT_ACCURACY_TIER: int = 3

KEPLER_MAX_ITERATIONS: int = 9
KEPLER_TOLERANCE: float = 1e-6  # radians

# Element epoch 1999-12-31 0h lies 1.5 days before J2000.0
ELEMENT_EPOCH_OFFSET_DAYS: float = 1.5


@dataclass(frozen=True)
class _LunarElements:
    """Schlyter mean elements: value at epoch and daily rate (degrees)."""
    NODE_0: float = 125.1228
    NODE_RATE: float = -0.0529538083
    INCLINATION: float = 5.1454
    PERIGEE_0: float = 318.0634
    PERIGEE_RATE: float = 0.1643573223
    SEMI_MAJOR_AXIS: float = 60.2666       # Earth radii
    ECCENTRICITY: float = 0.054900
    ANOMALY_0: float = 115.3654
    ANOMALY_RATE: float = 13.0649929509


LunarElements: _LunarElements = _LunarElements()


@dataclass(frozen=True)
class MoonPosition:
    """Geocentric Moon position at a given instant."""
    ecliptic_longitude_rad: float   # [0, 2pi)
    ecliptic_latitude_rad: float
    distance_earth_radii: float
    right_ascension_rad: float      # [0, 2pi)
    declination_rad: float
    accuracy_tier: int


def resolve_accuracy_tier(tier: object) -> int:
    """Tier 0-3 as given; anything else falls back to the default tier."""
    if (isinstance(tier, int) and not isinstance(tier, bool)
            and MIN_ACCURACY_TIER <= tier <= MAX_ACCURACY_TIER):
        return tier
    return DEFAULT_ACCURACY_TIER


def _wrap_two_pi(angle: float) -> float:
    return angle - math.floor(angle / (2 * math.pi)) * 2 * math.pi


def eccentric_anomaly(mean_anomaly: float, e: float, refine: bool) -> float:
    """
    Eccentric anomaly for a mean anomaly (radians).

    Starts from the second-order series E = M + e sin M (1 + e cos M);
    with refine, applies Newton steps until the correction drops below
    KEPLER_TOLERANCE or KEPLER_MAX_ITERATIONS is reached.
    """
    E = mean_anomaly + e * math.sin(mean_anomaly) * (1 + e * math.cos(mean_anomaly))
    if refine:
        for _ in range(KEPLER_MAX_ITERATIONS):
            step = (E - e * math.sin(E) - mean_anomaly) / (1 - e * math.cos(E))
            E -= step
            if abs(step) < KEPLER_TOLERANCE:
                break
    return E


def _ecliptic_to_equatorial(
    position: np.ndarray, obliquity_rad: float,
) -> np.ndarray:
    """Rotate an ecliptic rectangular vector about the x-axis by the obliquity."""
    cos_k = math.cos(obliquity_rad)
    sin_k = math.sin(obliquity_rad)
    rot = np.array([
        [1.0, 0.0, 0.0],
        [0.0, cos_k, -sin_k],
        [0.0, sin_k, cos_k],
    ])
    return rot @ position


def moon_position(instant: float, accuracy_tier: object = DEFAULT_ACCURACY_TIER) -> MoonPosition:
    """
    Geocentric ecliptic and equatorial coordinates of the Moon.

    Args:
        instant: Unix instant (UTC).
        accuracy_tier: 0-3; invalid values use DEFAULT_ACCURACY_TIER.

    Returns:
        MoonPosition.
    """
    tier = resolve_accuracy_tier(accuracy_tier)
    T = julian_centuries(instant)
    d = DAYS_PER_JULIAN_CENTURY * T + ELEMENT_EPOCH_OFFSET_DAYS

    N = math.radians(LunarElements.NODE_0 + LunarElements.NODE_RATE * d)
    i = math.radians(LunarElements.INCLINATION)
    w = math.radians(LunarElements.PERIGEE_0 + LunarElements.PERIGEE_RATE * d)
    a = LunarElements.SEMI_MAJOR_AXIS
    e = LunarElements.ECCENTRICITY
    M = _wrap_two_pi(math.radians(LunarElements.ANOMALY_0 + LunarElements.ANOMALY_RATE * d))

    E = eccentric_anomaly(M, e, refine=tier >= 1)

    # Position in the orbital plane
    xv = a * (math.cos(E) - e)
    yv = a * math.sqrt(1 - e * e) * math.sin(E)
    v = math.atan2(yv, xv)
    r = math.sqrt(xv * xv + yv * yv)

    # Ecliptic coordinates
    vw = v + w
    xh = r * (math.cos(N) * math.cos(vw) - math.sin(N) * math.sin(vw) * math.cos(i))
    yh = r * (math.sin(N) * math.cos(vw) + math.cos(N) * math.sin(vw) * math.cos(i))
    zh = r * math.sin(vw) * math.sin(i)
    lon = math.atan2(yh, xh)
    lat = math.atan2(zh, math.sqrt(xh * xh + yh * yh))

    if tier >= 2:
        Ms = sun_mean_anomaly(T)
        Ls = sun_true_longitude(T)
        Lm = N + w + M   # Moon mean longitude
        D = Lm - Ls      # mean elongation
        F = Lm - N       # argument of latitude

        lon += math.radians(
            -1.274 * math.sin(M - 2 * D)    # evection
            + 0.658 * math.sin(2 * D)       # variation
            - 0.186 * math.sin(Ms)          # yearly equation
        )
        lat += math.radians(-0.173 * math.sin(F - 2 * D))
        r += -0.58 * math.cos(M - 2 * D) - 0.46 * math.cos(2 * D)

        if tier >= 3:
            lon += math.radians(
                -0.059 * math.sin(2 * M - 2 * D)
                - 0.057 * math.sin(M - 2 * D + Ms)
                + 0.053 * math.sin(M + 2 * D)
                + 0.046 * math.sin(2 * D - Ms)
                + 0.041 * math.sin(M - Ms)
                - 0.035 * math.sin(D)           # parallactic equation
                - 0.031 * math.sin(M + Ms)
                - 0.015 * math.sin(2 * F - 2 * D)
                + 0.011 * math.sin(M - 4 * D)
            )
            lat += math.radians(
                -0.055 * math.sin(M - F - 2 * D)
                - 0.046 * math.sin(M + F - 2 * D)
                + 0.033 * math.sin(F + 2 * D)
                + 0.017 * math.sin(2 * M + F)
            )

    ecliptic = np.array([
        r * math.cos(lon) * math.cos(lat),
        r * math.sin(lon) * math.cos(lat),
        r * math.sin(lat),
    ])
    xe, ye, ze = (float(c) for c in _ecliptic_to_equatorial(ecliptic, obliquity(T)))

    return MoonPosition(
        ecliptic_longitude_rad=_wrap_two_pi(lon),
        ecliptic_latitude_rad=lat,
        distance_earth_radii=r,
        right_ascension_rad=_wrap_two_pi(math.atan2(ye, xe)),
        declination_rad=math.atan2(ze, math.sqrt(xe * xe + ye * ye)),
        accuracy_tier=tier,
    )
