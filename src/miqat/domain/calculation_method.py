# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Calculation conventions and validated settings.

Each convention carries its twilight angles as enum data. Settings are an
immutable value built once by configure(); invalid input is replaced by
documented defaults and never raises.
"""
import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any

from miqat.domain.location import (
    Location,
    validate_location,
    validate_utc_offset,
)

logger = logging.getLogger(__name__)

# Altitude of the Sun's centre at sunrise/sunset: refraction plus semi-diameter
SUNSET_ALTITUDE_DEG: float = -0.8333

PRAYER_EVENTS: tuple[str, ...] = ('fajr', 'sunrise', 'noon', 'asr', 'sunset', 'isha')

NO_ADJUSTMENT: tuple[int, ...] = (0, 0, 0, 0, 0, 0)


class CalculationMethod(Enum):
    """Twilight convention: (id, name, fajr angle, isha angle, isha minutes)."""
    KARACHI = (0, 'Karachi', -18.0, -18.0, 0)
    ISNA = (1, 'ISNA', -15.0, -15.0, 0)
    MWL = (2, 'MWL', -18.0, -17.0, 0)
    MAKKAH = (3, 'Makkah', -19.0, SUNSET_ALTITUDE_DEG, 90)  # isha 90 min after sunset
    EGYPT = (4, 'Egypt', -19.5, -17.5, 0)

    def __init__(self, method_id, label, fajr_angle_deg, isha_angle_deg, isha_minutes):
        self.method_id = method_id
        self.label = label
        self.fajr_angle_deg = fajr_angle_deg
        self.isha_angle_deg = isha_angle_deg
        self.isha_minutes = isha_minutes

    @classmethod
    def resolve(cls, value: Any) -> 'CalculationMethod':
        """Method by member, case-insensitive name or id; Karachi otherwise."""
        return _resolve(cls, value, cls.KARACHI)


class AsrMethod(Enum):
    """Afternoon shadow convention: (id, name, shadow factor)."""
    SHAFII = (0, 'Shafii', 0)
    HANAFI = (1, 'Hanafi', 1)

    def __init__(self, method_id, label, shadow_factor):
        self.method_id = method_id
        self.label = label
        self.shadow_factor = shadow_factor

    @classmethod
    def resolve(cls, value: Any) -> 'AsrMethod':
        """Asr method by member, case-insensitive name or id; Shafii otherwise."""
        return _resolve(cls, value, cls.SHAFII)


def _resolve(enum_cls, value, default):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        for member in enum_cls:
            if member.label.lower() == value.lower():
                return member
    elif isinstance(value, int) and not isinstance(value, bool):
        for member in enum_cls:
            if member.method_id == value:
                return member

    if value is not None:
        logger.debug("Unknown %s %r, using %s", enum_cls.__name__, value, default.label)
    return default


def validate_adjust_minutes(adjust_minutes: Any) -> tuple[int, ...]:
    """
    Per-event minute adjustments for (fajr, sunrise, noon, asr, sunset, isha).

    All six must be integral numbers; anything else resets every slot to 0.
    """
    if (isinstance(adjust_minutes, Sequence) and not isinstance(adjust_minutes, str)
            and len(adjust_minutes) == len(PRAYER_EVENTS)):
        values = []
        for minutes in adjust_minutes:
            if (not isinstance(minutes, Real) or isinstance(minutes, bool)
                    or not math.isfinite(minutes) or minutes != int(minutes)):
                break
            values.append(int(minutes))
        else:
            return tuple(values)

    if adjust_minutes is not None:
        logger.debug("Invalid adjustments %r, using no adjustment", adjust_minutes)
    return NO_ADJUSTMENT


@dataclass(frozen=True)
class CalculationSettings:
    """Validated, immutable input to every prayer time computation."""
    location: Location
    utc_offset: float
    method: CalculationMethod
    asr_method: AsrMethod
    fajr_angle_deg: float
    isha_angle_deg: float
    isha_minutes: int
    asr_shadow_factor: int
    adjust_minutes: tuple[int, ...]

    @property
    def method_name(self) -> str:
        return self.method.label

    @property
    def method_id(self) -> int:
        return self.method.method_id

    @property
    def asr_method_name(self) -> str:
        return self.asr_method.label

    @property
    def asr_method_id(self) -> int:
        return self.asr_method.method_id

    @property
    def uses_fixed_isha_interval(self) -> bool:
        """Isha is a fixed number of minutes after sunset."""
        return self.isha_minutes > 0 and self.isha_angle_deg == SUNSET_ALTITUDE_DEG


def configure(
    location: Any = None,
    utc_offset: Any = None,
    method: Any = None,
    asr_method: Any = None,
    adjust_minutes: Any = None,
) -> CalculationSettings:
    """
    Build validated calculation settings.

    Never raises: each invalid argument is replaced by its default
    (Masjid an-Nabawi, UTC+3, Karachi, Shafii, no adjustments).

    Args:
        location: Location, (lat, lng) pair or mapping.
        utc_offset: Hours east of UTC, within [-13, 15].
        method: CalculationMethod, name or id 0-4.
        asr_method: AsrMethod, name or id 0-1.
        adjust_minutes: Six integral minute offsets.

    Returns:
        CalculationSettings.
    """
    calc_method = CalculationMethod.resolve(method)
    asr = AsrMethod.resolve(asr_method)
    return CalculationSettings(
        location=validate_location(location),
        utc_offset=validate_utc_offset(utc_offset),
        method=calc_method,
        asr_method=asr,
        fajr_angle_deg=calc_method.fajr_angle_deg,
        isha_angle_deg=calc_method.isha_angle_deg,
        isha_minutes=calc_method.isha_minutes,
        asr_shadow_factor=asr.shadow_factor,
        adjust_minutes=validate_adjust_minutes(adjust_minutes),
    )
