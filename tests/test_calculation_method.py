# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for calculation conventions and configure()."""
import ast
import logging

import pytest

from miqat.domain.calculation_method import (
    NO_ADJUSTMENT,
    PRAYER_EVENTS,
    SUNSET_ALTITUDE_DEG,
    AsrMethod,
    CalculationMethod,
    CalculationSettings,
    configure,
    validate_adjust_minutes,
)
from miqat.domain.location import DEFAULT_LOCATION, Location


# ── Method table ──────────────────────────────────────────────────

class TestCalculationMethod:

    @pytest.mark.parametrize("method, method_id, fajr, isha, minutes", [
        (CalculationMethod.KARACHI, 0, -18.0, -18.0, 0),
        (CalculationMethod.ISNA, 1, -15.0, -15.0, 0),
        (CalculationMethod.MWL, 2, -18.0, -17.0, 0),
        (CalculationMethod.MAKKAH, 3, -19.0, SUNSET_ALTITUDE_DEG, 90),
        (CalculationMethod.EGYPT, 4, -19.5, -17.5, 0),
    ])
    def test_table(self, method, method_id, fajr, isha, minutes):
        assert method.method_id == method_id
        assert method.fajr_angle_deg == fajr
        assert method.isha_angle_deg == isha
        assert method.isha_minutes == minutes

    def test_five_methods(self):
        assert len(CalculationMethod) == 5

    def test_resolve_by_name_case_insensitive(self):
        assert CalculationMethod.resolve('isna') is CalculationMethod.ISNA
        assert CalculationMethod.resolve('MAKKAH') is CalculationMethod.MAKKAH

    def test_resolve_by_id(self):
        assert CalculationMethod.resolve(4) is CalculationMethod.EGYPT

    def test_resolve_member(self):
        assert CalculationMethod.resolve(CalculationMethod.MWL) is CalculationMethod.MWL

    @pytest.mark.parametrize("bad", [None, 'Tehran', 7, -1, True, 2.0])
    def test_resolve_fallback_karachi(self, bad):
        assert CalculationMethod.resolve(bad) is CalculationMethod.KARACHI


class TestAsrMethod:

    def test_shadow_factors(self):
        assert AsrMethod.SHAFII.shadow_factor == 0
        assert AsrMethod.HANAFI.shadow_factor == 1

    def test_resolve(self):
        assert AsrMethod.resolve('hanafi') is AsrMethod.HANAFI
        assert AsrMethod.resolve(1) is AsrMethod.HANAFI
        assert AsrMethod.resolve('Maliki') is AsrMethod.SHAFII
        assert AsrMethod.resolve(None) is AsrMethod.SHAFII


# ── Adjustments ───────────────────────────────────────────────────

class TestValidateAdjustMinutes:

    def test_valid(self):
        assert validate_adjust_minutes([1, -2, 0, 3, 0, 5]) == (1, -2, 0, 3, 0, 5)

    def test_integral_floats_accepted(self):
        assert validate_adjust_minutes((1.0, 0, 0, 0, 0, 2.0)) == (1, 0, 0, 0, 0, 2)

    @pytest.mark.parametrize("bad", [
        None,
        [1, 2, 3],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 1.5, 0, 0, 0],
        [0, 0, 'x', 0, 0, 0],
        [0, True, 0, 0, 0, 0],
        [0, 0, 0, float('inf'), 0, 0],
        '123456',
    ])
    def test_any_bad_slot_resets_all(self, bad):
        assert validate_adjust_minutes(bad) == NO_ADJUSTMENT

    def test_six_events(self):
        assert PRAYER_EVENTS == ('fajr', 'sunrise', 'noon', 'asr', 'sunset', 'isha')


# ── configure() ───────────────────────────────────────────────────

class TestConfigure:

    def test_defaults(self):
        s = configure()
        assert s.location == DEFAULT_LOCATION
        assert s.utc_offset == 3.0
        assert s.method is CalculationMethod.KARACHI
        assert s.asr_method is AsrMethod.SHAFII
        assert s.adjust_minutes == NO_ADJUSTMENT

    def test_frozen(self):
        s = configure()
        with pytest.raises(AttributeError):
            s.utc_offset = 5.0

    def test_angles_copied_from_method(self):
        s = configure(method='Egypt', asr_method='Hanafi')
        assert s.fajr_angle_deg == -19.5
        assert s.isha_angle_deg == -17.5
        assert s.isha_minutes == 0
        assert s.asr_shadow_factor == 1

    def test_name_and_id_equivalent(self):
        assert configure(method='isna') == configure(method=1)

    def test_names_and_ids(self):
        s = configure(method=3, asr_method='hanafi')
        assert s.method_name == 'Makkah'
        assert s.method_id == 3
        assert s.asr_method_name == 'Hanafi'
        assert s.asr_method_id == 1

    def test_fixed_isha_only_for_makkah(self):
        assert configure(method='Makkah').uses_fixed_isha_interval
        for method in ('Karachi', 'ISNA', 'MWL', 'Egypt'):
            assert not configure(method=method).uses_fixed_isha_interval

    def test_invalid_location_default(self):
        assert configure(location=(200, 50)).location == DEFAULT_LOCATION

    def test_each_field_independent(self):
        """A bad location does not disturb the other settings."""
        s = configure(location=(200, 50), utc_offset=0, method='MWL')
        assert s.utc_offset == 0.0
        assert s.method is CalculationMethod.MWL

    def test_never_raises(self):
        s = configure(location='x', utc_offset='y', method=object(), asr_method=[], adjust_minutes=5)
        assert isinstance(s, CalculationSettings)

    def test_valid_location_kept(self):
        assert configure(location=(21.3891, 39.8579)).location == Location(21.3891, 39.8579)

    def test_unknown_method_logs(self, caplog):
        with caplog.at_level(logging.DEBUG, logger='miqat.domain.calculation_method'):
            configure(method='Tehran')
        assert "Tehran" in caplog.text


# ── Domain purity ─────────────────────────────────────────────────

class TestCalculationMethodPurity:

    @pytest.mark.parametrize("module_name", [
        'miqat.domain.calculation_method',
        'miqat.domain.location',
        'miqat.domain.altitude',
        'miqat.domain.day_frame',
        'miqat.domain.prayer_times',
        'miqat.domain.bearing',
        'miqat.domain.timetable',
    ])
    def test_module_pure(self, module_name):
        """Configuration and scheduling modules only import stdlib modules."""
        import importlib
        mod = importlib.import_module(module_name)

        allowed = {
            'math', 'dataclasses', 'typing', 'abc', 'enum', '__future__',
            'datetime', 'logging', 'numbers', 'collections',
        }
        with open(mod.__file__) as f:
            tree = ast.parse(f.read())

        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    root = alias.name.split('.')[0]
                    if root not in allowed and root != 'miqat':
                        assert False, f"Disallowed import '{alias.name}'"
            if isinstance(node, ast.ImportFrom):
                if node.module and node.level == 0:
                    root = node.module.split('.')[0]
                    if root not in allowed and root != 'miqat':
                        assert False, f"Disallowed import from '{node.module}'"
