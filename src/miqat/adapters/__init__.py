# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for settings intake and timetable export.

External dependencies (json, csv, file I/O) are confined to this layer.
"""
from miqat.adapters.json_io import JsonSettingsReader, load_settings
from miqat.adapters.csv_exporter import CsvTimetableExporter

__all__ = ['JsonSettingsReader', 'load_settings', 'CsvTimetableExporter']
