# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for prayer time calculation.

Usage:
    # One day at a location
    miqat --date 2026-03-20 --lat 21.3891 --lng 39.8579 --offset 3

    # A month with another convention, exported to CSV
    miqat --date 2026-03-01 --days 31 --lat 51.5074 --lng -0.1278 --offset 0 \
        --method MWL --asr Hanafi --export-csv london.csv

    # Settings from a JSON file, flags override individual values
    miqat --date 2026-03-20 --config settings.json --qibla --sun --moon-tier 3
"""
import argparse
import logging
import sys
from datetime import datetime, timedelta, timezone

from miqat.adapters.csv_exporter import CsvTimetableExporter
from miqat.adapters.json_io import JsonSettingsReader
from miqat.domain.altitude import UnreachableAltitude, is_reachable
from miqat.domain.calculation_method import CalculationSettings, configure
from miqat.domain.calculator import PrayerCalculator
from miqat.domain.julian import datetime_from_instant, instant_from_datetime
from miqat.domain.location import split_location
from miqat.domain.timetable import TimetableDay


def _parse_local_instant(date_text: str, time_text: str, utc_offset: float) -> int:
    """Unix instant of a local date and HH:MM at a UTC offset."""
    local = datetime.strptime(f"{date_text} {time_text}", "%Y-%m-%d %H:%M")
    tz = timezone(timedelta(hours=utc_offset))
    return instant_from_datetime(local.replace(tzinfo=tz))


def build_settings(args: argparse.Namespace) -> CalculationSettings:
    """Merge a settings file with command-line overrides and validate."""
    raw = JsonSettingsReader().read_settings(args.config) if args.config else {}

    if args.lat is not None or args.lng is not None:
        lat, lng = split_location(raw.get('location'))
        raw['location'] = (
            args.lat if args.lat is not None else lat,
            args.lng if args.lng is not None else lng,
        )
    if args.offset is not None:
        raw['utc_offset'] = args.offset
    if args.method is not None:
        raw['method'] = int(args.method) if args.method.isdigit() else args.method
    if args.asr is not None:
        raw['asr_method'] = int(args.asr) if args.asr.isdigit() else args.asr
    if args.adjust is not None:
        raw['adjust_minutes'] = args.adjust

    return configure(**raw)


def _format_event(value: int | UnreachableAltitude, tz: timezone) -> str:
    if not is_reachable(value):
        return '--:--:--'
    return datetime_from_instant(value).astimezone(tz).strftime('%H:%M:%S')


def format_timetable(days: list[TimetableDay], settings: CalculationSettings) -> str:
    """Plain-text timetable, one line per day."""
    tz = timezone(timedelta(hours=settings.utc_offset))
    lines = [
        f"{'date':<10}  {'fajr':>8}  {'sunrise':>8}  {'noon':>8}  "
        f"{'asr':>8}  {'sunset':>8}  {'isha':>8}"
    ]
    for day in days:
        times = day.times
        date_text = datetime_from_instant(times.day_base).astimezone(tz).date().isoformat()
        cells = [_format_event(value, tz) for value in times.as_tuple()[1:7]]
        lines.append(f"{date_text:<10}  " + "  ".join(f"{c:>8}" for c in cells))
    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(
        description="Compute prayer times, qibla bearing and sun/moon azimuths"
    )
    parser.add_argument(
        '--date', required=True,
        help="Local calendar date of the first day (YYYY-MM-DD)"
    )
    parser.add_argument(
        '--time', default='12:00',
        help="Local time for azimuth queries and timetable steps (default: 12:00)"
    )
    parser.add_argument(
        '--days', type=int, default=1,
        help="Number of consecutive days (default: 1)"
    )
    parser.add_argument(
        '--config',
        help="Path to JSON settings file; command-line flags override its values"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Log default substitutions and undefined events"
    )

    settings_group = parser.add_argument_group('settings')
    settings_group.add_argument('--lat', type=float, help="Latitude in degrees, north positive")
    settings_group.add_argument('--lng', type=float, help="Longitude in degrees, east positive")
    settings_group.add_argument(
        '--offset', type=float,
        help="UTC offset in hours, -13 to 15 (default: 3)"
    )
    settings_group.add_argument(
        '--method',
        help="Karachi, ISNA, MWL, Makkah, Egypt or id 0-4 (default: Karachi)"
    )
    settings_group.add_argument(
        '--asr',
        help="Shafii, Hanafi or id 0-1 (default: Shafii)"
    )
    settings_group.add_argument(
        '--adjust', type=int, nargs=6, metavar='MIN',
        help="Minute adjustments for fajr, sunrise, noon, asr, sunset, isha"
    )

    query_group = parser.add_argument_group('queries')
    query_group.add_argument(
        '--qibla', action='store_true', default=False,
        help="Print the bearing to the Ka'aba"
    )
    query_group.add_argument(
        '--sun', action='store_true', default=False,
        help="Print the sun azimuth at --time on --date"
    )
    query_group.add_argument(
        '--moon-tier', type=int,
        help="Print the moon azimuth at --time on --date with accuracy tier 0-3"
    )

    export_group = parser.add_argument_group('export')
    export_group.add_argument(
        '--export-csv',
        help="Export the timetable to CSV (local times)"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.days < 0:
        parser.error("--days must be non-negative")

    try:
        settings = build_settings(args)
        start = _parse_local_instant(args.date, args.time, settings.utc_offset)
    except FileNotFoundError:
        print(
            f"Error: Settings file not found: {args.config}\n"
            f"Expected a JSON object with location, utc_offset and method keys.",
            file=sys.stderr,
        )
        sys.exit(1)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    calculator = PrayerCalculator(settings)
    location = settings.location
    print(
        f"Location {location.latitude:.4f}, {location.longitude:.4f} "
        f"(UTC{settings.utc_offset:+g}), method {settings.method_name}, "
        f"asr {settings.asr_method_name}"
    )

    days = calculator.timetable(start, args.days)
    print(format_timetable(days, settings))

    if args.qibla:
        print(f"Qibla: {calculator.qibla_bearing():.2f} deg")
    if args.sun:
        print(f"Sun azimuth: {calculator.sun_azimuth(start):.2f} deg")
    if args.moon_tier is not None:
        print(f"Moon azimuth: {calculator.moon_azimuth(start, args.moon_tier):.2f} deg")

    if args.export_csv:
        n = CsvTimetableExporter().export(days, args.export_csv, settings)
        print(f"Exported {n} days to {args.export_csv}")


if __name__ == '__main__':
    main()
