# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Solar altitude-to-time solver.

Finds the hour angle, in seconds of time from solar noon, at which the
Sun's centre reaches a given altitude. The declination is re-evaluated
at the previous estimate a fixed number of times; this is a deliberate
two-step refinement, not a convergence loop.

At high latitudes near the solstices the Sun may never reach the target
altitude. That day has no such instant, and the solver says so with an
UnreachableAltitude value instead of a NaN.
"""
import math
from dataclasses import dataclass

from miqat.domain.solar import SECONDS_PER_RADIAN, declination

SOLVER_ITERATIONS: int = 2


@dataclass(frozen=True)
class UnreachableAltitude:
    """The Sun does not cross the target altitude on this day at this latitude."""
    target_altitude_deg: float
    instant: float          # instant the declination was evaluated at
    cos_hour_angle: float   # outside [-1, 1]


def sun_time(
    target_altitude_rad: float,
    around: float,
    latitude_deg: float,
) -> float | UnreachableAltitude:
    """
    Seconds between solar noon and the Sun crossing an altitude.

    Args:
        target_altitude_rad: Altitude of the Sun's centre (negative below
            the horizon).
        around: Reference Unix instant, normally the day's mean noon.
        latitude_deg: Observer latitude.

    Returns:
        Non-negative offset in seconds, or UnreachableAltitude when the
        cosine of the hour angle falls outside [-1, 1].
    """
    B = math.radians(latitude_deg)
    estimate = 0.0
    for _ in range(SOLVER_ITERATIONS):
        instant = around + estimate
        D = declination(instant)
        cos_h = ((math.sin(target_altitude_rad) - math.sin(D) * math.sin(B))
                 / (math.cos(D) * math.cos(B)))
        if not -1.0 <= cos_h <= 1.0:
            return UnreachableAltitude(
                target_altitude_deg=math.degrees(target_altitude_rad),
                instant=instant,
                cos_hour_angle=cos_h,
            )
        estimate = math.acos(cos_h) * SECONDS_PER_RADIAN
    return estimate


def is_reachable(value: object) -> bool:
    """True for a solved time, False for an UnreachableAltitude."""
    return not isinstance(value, UnreachableAltitude)
