# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV timetable exporter.

Writes one row per day with local clock times at the configured UTC
offset. External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging
from datetime import datetime, timedelta, timezone

logger = logging.getLogger(__name__)

from miqat.ports.export import TimetableExporter
from miqat.domain.altitude import is_reachable
from miqat.domain.calculation_method import CalculationSettings
from miqat.domain.julian import datetime_from_instant
from miqat.domain.timetable import TimetableDay


_HEADER = [
    'date', 'fajr', 'sunrise', 'noon', 'asr', 'sunset', 'isha', 'next_midnight',
]


def _local_time(instant: int, tz: timezone) -> datetime:
    return datetime_from_instant(instant).astimezone(tz)


class CsvTimetableExporter(TimetableExporter):
    """Exports a timetable to CSV with local HH:MM:SS times."""

    def export(
        self,
        days: list[TimetableDay],
        path: str,
        settings: CalculationSettings,
    ) -> int:
        tz = timezone(timedelta(hours=settings.utc_offset))

        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)

            _warned_undefined = False
            for day in days:
                times = day.times
                row = [_local_time(times.day_base, tz).date().isoformat()]
                for value in times.as_tuple()[1:]:
                    if not is_reachable(value):
                        if not _warned_undefined:
                            logger.warning(
                                "Timetable has events the sun never reaches at latitude %.4f; "
                                "leaving them empty",
                                settings.location.latitude,
                            )
                            _warned_undefined = True
                        row.append('')
                    else:
                        row.append(_local_time(value, tz).strftime('%H:%M:%S'))
                writer.writerow(row)

        return len(days)
