# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for timetable export.

Adapters implement this to write timetables in various formats.
"""
from typing import Protocol, runtime_checkable

from miqat.domain.calculation_method import CalculationSettings
from miqat.domain.timetable import TimetableDay


@runtime_checkable
class TimetableExporter(Protocol):
    """Port for exporting a timetable to file."""

    def export(
        self,
        days: list[TimetableDay],
        path: str,
        settings: CalculationSettings,
    ) -> int:
        """
        Export a timetable to a file.

        Times are rendered in local clock time at settings.utc_offset.

        Args:
            days: Timetable rows from compute_timetable().
            path: Output file path.
            settings: Settings the timetable was computed with.

        Returns:
            Number of days exported.
        """
        ...
