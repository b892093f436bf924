# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Calculation facade.

Binds one validated CalculationSettings value to the four public queries.
The settings are frozen, so a calculator can be shared between threads.
An optional observer callable receives each computed timetable entry;
it is invoked here, never from inside the domain functions.
"""
import logging
from collections.abc import Callable
from typing import Any

from miqat.domain.altitude import UnreachableAltitude
from miqat.domain.bearing import moon_azimuth, qibla_bearing, sun_azimuth
from miqat.domain.calculation_method import CalculationSettings, configure
from miqat.domain.julian import SECONDS_PER_DAY
from miqat.domain.lunar import DEFAULT_ACCURACY_TIER
from miqat.domain.prayer_times import EventTime, PrayerTimeSet, compute_prayer_times
from miqat.domain.timetable import TimetableDay

logger = logging.getLogger(__name__)

Observer = Callable[[str, EventTime], None]

_TIMETABLE_FIELDS = (
    'day_base', 'fajr', 'sunrise', 'noon', 'asr', 'sunset', 'isha', 'next_midnight',
)


class PrayerCalculator:
    """Prayer times, qibla and sun/moon azimuths for fixed settings."""

    def __init__(self, settings: CalculationSettings, observer: Observer | None = None):
        self._settings = settings
        self._observer = observer

    @classmethod
    def from_config(cls, observer: Observer | None = None, **kwargs: Any) -> 'PrayerCalculator':
        """Validate raw configuration with configure() and bind it."""
        return cls(configure(**kwargs), observer=observer)

    @property
    def settings(self) -> CalculationSettings:
        return self._settings

    def qibla_bearing(self) -> float:
        """Bearing to the Ka'aba, degrees in [0, 360)."""
        return qibla_bearing(self._settings.location)

    def sun_azimuth(self, instant: int) -> float:
        """Sun azimuth, degrees in [0, 360)."""
        return sun_azimuth(instant, self._settings.location)

    def moon_azimuth(self, instant: int, accuracy_tier: object = DEFAULT_ACCURACY_TIER) -> float:
        """Moon azimuth, degrees in [0, 360)."""
        return moon_azimuth(instant, self._settings.location, accuracy_tier)

    def prayer_times(self, instant: int) -> PrayerTimeSet:
        """Prayer times for the solar day containing the instant."""
        times = compute_prayer_times(instant, self._settings)

        for name in times.undefined_events():
            unreachable: UnreachableAltitude = getattr(times, name)
            logger.debug(
                "%s undefined: sun does not reach %.4f deg (cos H = %.6f)",
                name, unreachable.target_altitude_deg, unreachable.cos_hour_angle,
            )

        if self._observer is not None:
            for name, value in zip(_TIMETABLE_FIELDS, times.as_tuple()):
                self._observer(name, value)

        return times

    def timetable(self, start_instant: int, days: int) -> list[TimetableDay]:
        """
        Prayer times for consecutive days, each passed through prayer_times().

        Args:
            start_instant: Unix instant inside the first day.
            days: Number of days (0 gives an empty list).

        Returns:
            List of TimetableDay in chronological order.
        """
        if days < 0:
            raise ValueError(f"days must be non-negative, got {days}")

        return [
            TimetableDay(day_index=k, times=self.prayer_times(start_instant + k * SECONDS_PER_DAY))
            for k in range(days)
        ]
