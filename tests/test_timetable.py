# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for multi-day timetables."""
import pytest

from miqat.domain.calculation_method import configure
from miqat.domain.prayer_times import compute_prayer_times
from miqat.domain.timetable import TimetableDay, compute_timetable

LOCAL_NOON = 1773997200  # 2026-03-20 12:00 at UTC+3


@pytest.fixture
def settings():
    return configure(location=(21.3891, 39.8579), utc_offset=3)


class TestTimetableDay:

    def test_frozen(self, settings):
        day = compute_timetable(settings, LOCAL_NOON, 1)[0]
        with pytest.raises(AttributeError):
            day.day_index = 4


class TestComputeTimetable:

    def test_length_and_indices(self, settings):
        days = compute_timetable(settings, LOCAL_NOON, 7)
        assert len(days) == 7
        assert [d.day_index for d in days] == list(range(7))
        assert all(isinstance(d, TimetableDay) for d in days)

    def test_first_day_matches_scheduler(self, settings):
        days = compute_timetable(settings, LOCAL_NOON, 1)
        assert days[0].times == compute_prayer_times(LOCAL_NOON, settings)
        assert days[0].times.day_base == 1773954000

    def test_consecutive_bases(self, settings):
        days = compute_timetable(settings, LOCAL_NOON, 31)
        bases = [d.times.day_base for d in days]
        assert all(b - a == 86400 for a, b in zip(bases, bases[1:]))

    def test_days_chain(self, settings):
        """Each day's closing midnight is close to the next day's fajr side."""
        days = compute_timetable(settings, LOCAL_NOON, 10)
        for today, tomorrow in zip(days, days[1:]):
            assert today.times.next_midnight < tomorrow.times.fajr

    def test_zero_days(self, settings):
        assert compute_timetable(settings, LOCAL_NOON, 0) == []

    def test_negative_days_rejected(self, settings):
        with pytest.raises(ValueError, match="non-negative"):
            compute_timetable(settings, LOCAL_NOON, -1)
