# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Julian date conversions.

Instants are integer Unix seconds (UTC). The Unix epoch is expressed in
Julian days with the TT-UTC difference folded in and assumed constant.
"""
from datetime import datetime, timezone

UNIX_EPOCH_JD: float = 2440587.500761306  # 1970-01-01 0:00 UTC, as TT
J2000_JD: float = 2451545.0               # 2000-01-01 12:00 TT

SECONDS_PER_DAY: int = 86400
DAYS_PER_JULIAN_CENTURY: float = 36525.0


def instant_to_julian_date(instant: float) -> float:
    """Julian date for a Unix instant."""
    return UNIX_EPOCH_JD + instant / SECONDS_PER_DAY


def julian_date_to_instant(julian_date: float) -> int:
    """
    Unix instant for a Julian date, rounded to the whole second.

    Rounding absorbs the float error of the forward conversion, so
    integer instants survive a round trip unchanged.
    """
    return round(SECONDS_PER_DAY * (julian_date - UNIX_EPOCH_JD))


def julian_centuries(instant: float) -> float:
    """Julian centuries since J2000.0 for a Unix instant."""
    return (instant_to_julian_date(instant) - J2000_JD) / DAYS_PER_JULIAN_CENTURY


def instant_from_datetime(dt: datetime) -> int:
    """Unix instant for a datetime. Naive datetimes are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp())


def datetime_from_instant(instant: int) -> datetime:
    """Timezone-aware UTC datetime for a Unix instant."""
    return datetime.fromtimestamp(instant, tz=timezone.utc)
