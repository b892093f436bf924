# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Multi-day timetables.

Runs the scheduler once per day over consecutive days.
"""
from dataclasses import dataclass

from miqat.domain.calculation_method import CalculationSettings
from miqat.domain.julian import SECONDS_PER_DAY
from miqat.domain.prayer_times import PrayerTimeSet, compute_prayer_times


@dataclass(frozen=True)
class TimetableDay:
    """A single day of a timetable."""
    day_index: int
    times: PrayerTimeSet


def compute_timetable(
    settings: CalculationSettings,
    start_instant: int,
    days: int,
) -> list[TimetableDay]:
    """
    Prayer times for consecutive days.

    Args:
        settings: Validated settings from configure().
        start_instant: Unix instant inside the first day; local noon
            keeps every step well inside its solar day.
        days: Number of days (0 gives an empty list).

    Returns:
        List of TimetableDay in chronological order.
    """
    if days < 0:
        raise ValueError(f"days must be non-negative, got {days}")

    return [
        TimetableDay(
            day_index=k,
            times=compute_prayer_times(start_instant + k * SECONDS_PER_DAY, settings),
        )
        for k in range(days)
    ]
