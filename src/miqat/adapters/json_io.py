# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON settings file adapter.

Reads calculation settings from a JSON object such as:

    {
        "location": {"latitude": 51.5074, "longitude": -0.1278},
        "utc_offset": 0,
        "method": "MWL",
        "asr_method": "Shafii",
        "adjust_minutes": [0, 0, 0, 0, 0, 0]
    }

A flat "latitude"/"longitude" pair is accepted in place of "location".
Validation and defaulting are left to configure().
"""
import json
from typing import Any

from miqat.domain.calculation_method import CalculationSettings, configure
from miqat.ports import SettingsReader

_SETTINGS_KEYS = ('location', 'utc_offset', 'method', 'asr_method', 'adjust_minutes')


class JsonSettingsReader(SettingsReader):
    """Reads calculation settings from JSON files."""

    def read_settings(self, path: str) -> dict[str, Any]:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Settings file {path} must contain a JSON object")

        settings = {key: data[key] for key in _SETTINGS_KEYS if key in data}
        if 'location' not in settings and ('latitude' in data or 'longitude' in data):
            settings['location'] = (data.get('latitude'), data.get('longitude'))
        return settings


def load_settings(path: str, reader: SettingsReader | None = None) -> CalculationSettings:
    """Read a settings file and validate it with configure()."""
    reader = reader or JsonSettingsReader()
    return configure(**reader.read_settings(path))
