# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Low-precision solar ephemeris.

Mean longitude, mean anomaly and equation of centre follow the Astronomical
Almanac low-precision formulae for the Sun, restated in radians and radians
per Julian century. Sidereal time uses the USNO approximation for GMST
with the date split at 0h UT. Accuracy is about one arcminute over
1950-2050, which is ample for prayer time work.

No external dependencies beyond stdlib math and dataclasses.
"""
import math
from dataclasses import dataclass

from miqat.domain.julian import J2000_JD, instant_to_julian_date, julian_centuries
from miqat.domain.location import Location


@dataclass(frozen=True)
class _SolarConstants:
    """Fit coefficients of the solar ephemeris (radians, per Julian century)."""
    MEAN_LONGITUDE_0: float = 4.89506
    MEAN_LONGITUDE_RATE: float = 628.33197
    MEAN_ANOMALY_0: float = 6.24006
    MEAN_ANOMALY_RATE: float = 628.30195
    CENTER_1: float = 0.03342        # sin(M) term of the equation of centre
    CENTER_1_RATE: float = -0.0000873
    CENTER_2: float = 0.000349       # sin(2M) term
    OBLIQUITY_0: float = 0.40909
    OBLIQUITY_RATE: float = -0.0002295
    # GMST in hours: S0 + S1 * D0 + S2 * UT + S3 * T^2
    SIDEREAL_0: float = 6.697374558
    SIDEREAL_1: float = 0.06570982441908
    SIDEREAL_2: float = 1.002737909350795
    SIDEREAL_3: float = 0.000026


SolarConstants: _SolarConstants = _SolarConstants()

# Radians of hour angle to seconds of time
SECONDS_PER_RADIAN: float = 43200 / math.pi


def sun_mean_longitude(T: float) -> float:
    """Geometric mean longitude of the Sun (radians)."""
    return SolarConstants.MEAN_LONGITUDE_0 + SolarConstants.MEAN_LONGITUDE_RATE * T


def sun_mean_anomaly(T: float) -> float:
    """Mean anomaly of the Sun (radians)."""
    return SolarConstants.MEAN_ANOMALY_0 + SolarConstants.MEAN_ANOMALY_RATE * T


def sun_true_longitude(T: float) -> float:
    """
    True ecliptic longitude of the Sun.

    Args:
        T: Julian centuries since J2000.0.

    Returns:
        Longitude in radians (not wrapped).
    """
    Lo = sun_mean_longitude(T)
    Mo = sun_mean_anomaly(T)
    C = ((SolarConstants.CENTER_1 + SolarConstants.CENTER_1_RATE * T) * math.sin(Mo)
         + SolarConstants.CENTER_2 * math.sin(2 * Mo))
    return Lo + C


def obliquity(T: float) -> float:
    """Obliquity of the ecliptic (radians)."""
    return SolarConstants.OBLIQUITY_0 + SolarConstants.OBLIQUITY_RATE * T


def declination(instant: float) -> float:
    """Solar declination at a Unix instant (radians)."""
    T = julian_centuries(instant)
    Ls = sun_true_longitude(T)
    K = obliquity(T)
    return math.asin(math.sin(Ls) * math.sin(K))


def right_ascension(T: float) -> float:
    """Solar right ascension (radians, quadrant-correct, in (-pi, pi])."""
    Ls = sun_true_longitude(T)
    K = obliquity(T)
    return math.atan2(math.sin(Ls) * math.cos(K), math.cos(Ls))


def equation_of_time(instant: float) -> float:
    """
    Equation of time at a Unix instant.

    Positive when the apparent Sun is ahead of the mean Sun.

    Returns:
        Seconds of time.
    """
    T = julian_centuries(instant)
    delta = sun_mean_longitude(T) - right_ascension(T)
    # -pi <= delta < pi
    delta -= math.floor((delta + math.pi) / (2 * math.pi)) * 2 * math.pi
    return delta * SECONDS_PER_RADIAN


def mean_sidereal_time(instant: float, longitude_deg: float) -> float:
    """
    Local mean sidereal time.

    Args:
        instant: Unix instant.
        longitude_deg: Observer longitude, east positive.

    Returns:
        Sidereal time in hours (not wrapped to [0, 24)).
    """
    D = instant_to_julian_date(instant) - J2000_JD
    frac = D - math.floor(D)
    D0 = math.floor(D) - 0.5 + (frac >= 0.5)  # days to the preceding 0h UT
    ut_hours = 24 * (D - D0)
    T = D / 36525
    return (SolarConstants.SIDEREAL_0
            + SolarConstants.SIDEREAL_1 * D0
            + SolarConstants.SIDEREAL_2 * ut_hours
            + SolarConstants.SIDEREAL_3 * T**2
            + longitude_deg / 15)


def sun_altitude(instant: float, location: Location) -> float:
    """Geometric altitude of the Sun's centre above the horizon (degrees)."""
    T = julian_centuries(instant)
    H = math.radians(mean_sidereal_time(instant, location.longitude) * 15) - right_ascension(T)
    Ds = declination(instant)
    B = math.radians(location.latitude)
    sin_h = math.sin(B) * math.sin(Ds) + math.cos(B) * math.cos(Ds) * math.cos(H)
    return math.degrees(math.asin(max(-1.0, min(1.0, sin_h))))
