# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Observer location and UTC offset validation.

Invalid input is never rejected: it is replaced wholesale by a fixed
default (Masjid an-Nabawi, UTC+3). Values are not clamped individually.
"""
import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Real
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Location:
    """Geographic position in degrees; latitude north, longitude east."""
    latitude: float
    longitude: float


DEFAULT_LOCATION = Location(latitude=24.494647, longitude=39.770508)
KAABA_LOCATION = Location(latitude=21.422517, longitude=39.826166)

DEFAULT_UTC_OFFSET: float = 3.0
MIN_UTC_OFFSET: float = -13.0
MAX_UTC_OFFSET: float = 15.0


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and not math.isnan(value)


def split_location(location: Any) -> tuple[Any, Any]:
    """Raw (lat, lng) from any accepted location form; (None, None) otherwise."""
    if isinstance(location, Location):
        return location.latitude, location.longitude
    if isinstance(location, Mapping):
        lat = location.get('latitude', location.get('lat'))
        lng = location.get('longitude', location.get('lng'))
        return lat, lng
    if isinstance(location, (tuple, list)) and len(location) == 2:
        return location[0], location[1]
    return None, None


def validate_location(location: Any) -> Location:
    """
    Validate a location, substituting the default when it is out of range.

    Accepts a Location, a (lat, lng) pair or a mapping with
    latitude/longitude (or lat/lng) keys.

    Returns:
        A Location with -90 < latitude < 90 and -180 <= longitude < 180.
    """
    lat, lng = split_location(location)
    if (_is_number(lat) and _is_number(lng)
            and -90 < lat < 90 and -180 <= lng < 180):
        return Location(latitude=float(lat), longitude=float(lng))

    if location is not None:
        logger.debug("Invalid location %r, using default %s", location, DEFAULT_LOCATION)
    return DEFAULT_LOCATION


def validate_utc_offset(utc_offset: Any) -> float:
    """Validate a UTC offset in hours; out-of-range values give the default."""
    if _is_number(utc_offset) and MIN_UTC_OFFSET <= utc_offset <= MAX_UTC_OFFSET:
        return float(utc_offset)

    if utc_offset is not None:
        logger.debug("Invalid UTC offset %r, using default %s", utc_offset, DEFAULT_UTC_OFFSET)
    return DEFAULT_UTC_OFFSET
