# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Solar day framing.

Anchors a computation to the solar day containing an instant: the span
between two apparent midnights at the observer's longitude, labelled by
the local civil midnight of that day.
"""
import math
from dataclasses import dataclass

from miqat.domain.julian import SECONDS_PER_DAY
from miqat.domain.location import Location
from miqat.domain.solar import equation_of_time

# Seconds of time per degree of longitude (15 degrees per hour)
SECONDS_PER_DEGREE: int = 240


@dataclass(frozen=True)
class DayFrame:
    """Reference instants of one solar day (Unix seconds, float)."""
    base: float           # local civil midnight labelling the day
    midday: float         # mean solar noon
    midnight: float       # apparent midnight opening the day
    next_midnight: float  # apparent midnight closing the day


def civil_day_start(instant: float, utc_offset: float) -> float:
    """Local midnight of the UTC calendar date containing the instant."""
    return math.floor(instant / SECONDS_PER_DAY) * SECONDS_PER_DAY - utc_offset * 3600


def midday(base: float, location: Location, utc_offset: float) -> float:
    """Mean solar noon at the location for the day labelled by base."""
    return base + (180 + utc_offset * 15 - location.longitude) * SECONDS_PER_DEGREE


def midnight(base: float, location: Location, utc_offset: float) -> float:
    """Apparent solar midnight at the start of the day labelled by base."""
    mean_midnight = base + (utc_offset * 15 - location.longitude) * SECONDS_PER_DEGREE
    return mean_midnight - equation_of_time(mean_midnight)


def basetime(instant: float, location: Location, utc_offset: float) -> float:
    """
    Civil midnight labelling the solar day that contains the instant.

    Starts from the clock day and shifts by one day when the instant lies
    before the opening or after the closing apparent midnight.
    """
    day_begin = civil_day_start(instant, utc_offset)
    opening = midnight(day_begin, location, utc_offset)
    closing = midnight(day_begin + SECONDS_PER_DAY, location, utc_offset)
    return day_begin + SECONDS_PER_DAY * ((instant > closing) - (instant < opening))


def resolve_day_frame(instant: float, location: Location, utc_offset: float) -> DayFrame:
    """Full solar day frame for the instant."""
    base = basetime(instant, location, utc_offset)
    return DayFrame(
        base=base,
        midday=midday(base, location, utc_offset),
        midnight=midnight(base, location, utc_offset),
        next_midnight=midnight(base + SECONDS_PER_DAY, location, utc_offset),
    )
