# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Daily prayer time scheduler.

Every event is placed relative to the day's mean solar noon: the altitude
solver gives the hour angle in seconds, which is subtracted (morning) or
added (afternoon), then the equation of time at that instant converts
mean to apparent solar time.
"""
import math
from collections.abc import Iterator
from dataclasses import dataclass

from miqat.domain.altitude import UnreachableAltitude, sun_time
from miqat.domain.calculation_method import (
    PRAYER_EVENTS,
    SUNSET_ALTITUDE_DEG,
    CalculationSettings,
)
from miqat.domain.day_frame import basetime, midday, midnight
from miqat.domain.julian import SECONDS_PER_DAY
from miqat.domain.solar import declination, equation_of_time

EventTime = int | UnreachableAltitude


@dataclass(frozen=True)
class PrayerTimeSet:
    """One solar day's timetable, in Unix seconds (UTC)."""
    day_base: int
    fajr: EventTime
    sunrise: EventTime
    noon: int
    asr: EventTime
    sunset: EventTime
    isha: EventTime
    next_midnight: int

    def as_tuple(self) -> tuple[EventTime, ...]:
        """(day_base, fajr, sunrise, noon, asr, sunset, isha, next_midnight)."""
        return (
            self.day_base, self.fajr, self.sunrise, self.noon,
            self.asr, self.sunset, self.isha, self.next_midnight,
        )

    def __iter__(self) -> Iterator[EventTime]:
        return iter(self.as_tuple())

    def events(self) -> dict[str, EventTime]:
        """The six prayer events keyed by name."""
        return {name: getattr(self, name) for name in PRAYER_EVENTS}

    def undefined_events(self) -> tuple[str, ...]:
        """Names of events the Sun does not reach on this day."""
        return tuple(
            name for name, value in self.events().items()
            if isinstance(value, UnreachableAltitude)
        )

    @property
    def is_complete(self) -> bool:
        return not self.undefined_events()


def _morning_event(
    altitude_rad: float, mid: float, latitude_deg: float,
) -> float | UnreachableAltitude:
    offset = sun_time(altitude_rad, mid, latitude_deg)
    if isinstance(offset, UnreachableAltitude):
        return offset
    event = mid - offset
    return event - equation_of_time(event)


def _afternoon_event(
    altitude_rad: float, mid: float, latitude_deg: float,
) -> float | UnreachableAltitude:
    offset = sun_time(altitude_rad, mid, latitude_deg)
    if isinstance(offset, UnreachableAltitude):
        return offset
    event = mid + offset
    return event - equation_of_time(event)


def asr_altitude(shadow_factor: int, latitude_deg: float, declination_rad: float) -> float:
    """
    Solar altitude at which a gnomon's shadow reaches the Asr length.

    The shadow equals the noon shadow plus (shadow_factor + 1) times the
    gnomon height.

    Returns:
        Altitude in radians.
    """
    zenith_at_noon = abs(math.radians(latitude_deg) - declination_rad)
    return math.atan2(1, shadow_factor + 1 + math.tan(zenith_at_noon))


def _finalize(value: float | UnreachableAltitude, adjust_minutes: int) -> EventTime:
    if isinstance(value, UnreachableAltitude):
        return value
    return round(value + adjust_minutes * 60)


def compute_prayer_times(instant: int, settings: CalculationSettings) -> PrayerTimeSet:
    """
    Prayer times for the solar day containing an instant.

    Args:
        instant: Unix instant (UTC) inside the wanted day.
        settings: Validated settings from configure().

    Returns:
        PrayerTimeSet. Events whose altitude is never reached are
        UnreachableAltitude; day_base, noon and next_midnight are always
        defined.
    """
    location = settings.location
    latitude = location.latitude
    offset = settings.utc_offset

    base = basetime(instant, location, offset)
    mid = midday(base, location, offset)

    noon = mid - equation_of_time(mid)
    fajr = _morning_event(math.radians(settings.fajr_angle_deg), mid, latitude)
    sunrise = _morning_event(math.radians(SUNSET_ALTITUDE_DEG), mid, latitude)

    asr_alt = asr_altitude(settings.asr_shadow_factor, latitude, declination(mid))
    asr = _afternoon_event(asr_alt, mid, latitude)
    sunset = _afternoon_event(math.radians(SUNSET_ALTITUDE_DEG), mid, latitude)

    if settings.uses_fixed_isha_interval:
        if isinstance(sunset, UnreachableAltitude):
            isha = sunset
        else:
            isha = sunset + settings.isha_minutes * 60
    else:
        isha = _afternoon_event(math.radians(settings.isha_angle_deg), mid, latitude)

    next_midnight = midnight(base + SECONDS_PER_DAY, location, offset)

    adjust = dict(zip(PRAYER_EVENTS, settings.adjust_minutes))
    return PrayerTimeSet(
        day_base=round(base),
        fajr=_finalize(fajr, adjust['fajr']),
        sunrise=_finalize(sunrise, adjust['sunrise']),
        noon=round(noon + adjust['noon'] * 60),
        asr=_finalize(asr, adjust['asr']),
        sunset=_finalize(sunset, adjust['sunset']),
        isha=_finalize(isha, adjust['isha']),
        next_midnight=round(next_midnight),
    )
