# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the CSV timetable exporter."""
import csv
import logging

import pytest

from miqat.adapters.csv_exporter import CsvTimetableExporter
from miqat.domain.calculation_method import configure
from miqat.domain.timetable import compute_timetable
from miqat.ports import TimetableExporter

LOCAL_NOON = 1773997200  # 2026-03-20 12:00 at UTC+3


def _read(path):
    with open(path, newline='', encoding='utf-8') as f:
        return list(csv.reader(f))


@pytest.fixture
def mecca():
    return configure(location=(21.3891, 39.8579), utc_offset=3)


class TestCsvTimetableExporter:

    def test_implements_port(self):
        assert isinstance(CsvTimetableExporter(), TimetableExporter)

    def test_header(self, tmp_path, mecca):
        path = str(tmp_path / "out.csv")
        CsvTimetableExporter().export(compute_timetable(mecca, LOCAL_NOON, 1), path, mecca)
        assert _read(path)[0] == [
            'date', 'fajr', 'sunrise', 'noon', 'asr', 'sunset', 'isha', 'next_midnight',
        ]

    def test_local_times(self, tmp_path, mecca):
        path = str(tmp_path / "out.csv")
        CsvTimetableExporter().export(compute_timetable(mecca, LOCAL_NOON, 1), path, mecca)
        assert _read(path)[1] == [
            '2026-03-20', '05:10:34', '06:24:32', '12:28:03',
            '15:52:53', '18:31:35', '19:45:33', '00:27:55',
        ]

    def test_returns_day_count(self, tmp_path, mecca):
        path = str(tmp_path / "out.csv")
        n = CsvTimetableExporter().export(compute_timetable(mecca, LOCAL_NOON, 5), path, mecca)
        assert n == 5
        assert len(_read(path)) == 6

    def test_empty_timetable(self, tmp_path, mecca):
        path = str(tmp_path / "out.csv")
        assert CsvTimetableExporter().export([], path, mecca) == 0
        assert len(_read(path)) == 1

    def test_undefined_events_empty_with_single_warning(self, tmp_path, caplog):
        polar = configure(location=(70.0, 25.0), utc_offset=2)
        days = compute_timetable(polar, 1782036000, 3)
        path = str(tmp_path / "polar.csv")
        with caplog.at_level(logging.WARNING, logger='miqat.adapters.csv_exporter'):
            CsvTimetableExporter().export(days, path, polar)

        rows = _read(path)
        for row in rows[1:]:
            assert row[1] == ''    # fajr
            assert row[2] == ''    # sunrise
            assert row[4] != ''    # asr
            assert row[5] == ''    # sunset
            assert row[6] == ''    # isha
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
