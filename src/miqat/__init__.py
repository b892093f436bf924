# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Miqat

Deterministic prayer times, qibla bearing and sun/moon azimuths from a
location, a numeric UTC offset and a calculation convention. Includes a
low-precision solar ephemeris, a fixed-step altitude-to-time solver,
solar day framing, a tiered analytical lunar ephemeris and multi-day
timetables. No network, clock or database access.
"""

from miqat.domain.julian import (
    instant_to_julian_date,
    julian_date_to_instant,
    julian_centuries,
)
from miqat.domain.location import (
    Location,
    DEFAULT_LOCATION,
    KAABA_LOCATION,
)
from miqat.domain.calculation_method import (
    CalculationMethod,
    AsrMethod,
    CalculationSettings,
    SUNSET_ALTITUDE_DEG,
    configure,
)
from miqat.domain.altitude import (
    UnreachableAltitude,
    sun_time,
)
from miqat.domain.day_frame import (
    DayFrame,
    resolve_day_frame,
)
from miqat.domain.prayer_times import (
    PrayerTimeSet,
    compute_prayer_times,
)
from miqat.domain.lunar import (
    MoonPosition,
    moon_position,
)
from miqat.domain.bearing import (
    qibla_bearing,
    sun_azimuth,
    moon_azimuth,
)
from miqat.domain.timetable import (
    TimetableDay,
    compute_timetable,
)
from miqat.domain.calculator import PrayerCalculator

__all__ = [
    'instant_to_julian_date',
    'julian_date_to_instant',
    'julian_centuries',
    'Location',
    'DEFAULT_LOCATION',
    'KAABA_LOCATION',
    'CalculationMethod',
    'AsrMethod',
    'CalculationSettings',
    'SUNSET_ALTITUDE_DEG',
    'configure',
    'UnreachableAltitude',
    'sun_time',
    'DayFrame',
    'resolve_day_frame',
    'PrayerTimeSet',
    'compute_prayer_times',
    'MoonPosition',
    'moon_position',
    'qibla_bearing',
    'sun_azimuth',
    'moon_azimuth',
    'TimetableDay',
    'compute_timetable',
    'PrayerCalculator',
]
