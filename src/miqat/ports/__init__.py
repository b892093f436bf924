# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for settings and timetable I/O.

Adapters implement these to handle different file formats.
"""
from typing import Any, Protocol, runtime_checkable

from miqat.ports.export import TimetableExporter


@runtime_checkable
class SettingsReader(Protocol):
    """Port for reading raw calculation settings."""

    def read_settings(self, path: str) -> dict[str, Any]:
        """Read a settings file into keyword arguments for configure()."""
        ...


__all__ = ['SettingsReader', 'TimetableExporter']
