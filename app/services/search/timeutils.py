"""
Flight timestamp handling for the itinerary search.

Every timestamp published by the reservation system has the form
'yyyy MMM d HH:mm z', e.g. '2016 May 10 21:15 GMT'. This module owns the
single strict parser for that format and all arithmetic over the parsed
values; nothing else in the search formats or parses dates.
"""
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Union

import pytz

from app.core.exceptions import TimestampParseError

DEFAULT_CANONICAL_ZONE = "GMT"

_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_MONTH_NUMBERS = {name.lower(): number for number, name in enumerate(_MONTHS, 1)}

_TIMESTAMP_RE = re.compile(
    r"^(?P<year>\d{4}) (?P<month>[A-Za-z]{3}) (?P<day>\d{1,2}) "
    r"(?P<hour>\d{2}):(?P<minute>\d{2}) (?P<zone>[A-Za-z][A-Za-z0-9_/+\-]*)$"
)


@lru_cache(maxsize=None)
def _zone(name: str):
    return pytz.timezone(name)


@dataclass(frozen=True, order=True)
class FlightTime:
    """An absolute instant plus the zone it was published in."""
    instant: datetime  # aware, UTC
    zone: str = field(compare=False)

    def local(self) -> datetime:
        return self.instant.astimezone(_zone(self.zone))

    def in_zone(self, zone_name: str) -> datetime:
        return self.instant.astimezone(_zone(zone_name))

    def __str__(self):
        return format_flight_time(self)


Timestamp = Union[str, FlightTime]


def parse_flight_time(text: str) -> FlightTime:
    """
    Parse a 'yyyy MMM d HH:mm z' timestamp.

    Raises:
        TimestampParseError: if the text does not match the format, names an
            unknown month or zone, or describes an impossible date
    """
    if not isinstance(text, str):
        raise TimestampParseError(text, "not a string")

    match = _TIMESTAMP_RE.match(text.strip())
    if match is None:
        raise TimestampParseError(text, "expected 'yyyy MMM d HH:mm z'")

    month = _MONTH_NUMBERS.get(match.group('month').lower())
    if month is None:
        raise TimestampParseError(text, f"unknown month {match.group('month')!r}")

    zone_name = match.group('zone')
    try:
        tz = _zone(zone_name)
    except pytz.UnknownTimeZoneError:
        raise TimestampParseError(text, f"unknown time zone {zone_name!r}") from None

    try:
        naive = datetime(
            int(match.group('year')), month, int(match.group('day')),
            int(match.group('hour')), int(match.group('minute')),
        )
    except ValueError as e:
        raise TimestampParseError(text, str(e)) from None

    return FlightTime(instant=tz.localize(naive).astimezone(timezone.utc), zone=zone_name)


def format_flight_time(value: FlightTime) -> str:
    """Render a FlightTime back into the published format, in its own zone."""
    local = value.local()
    return (
        f"{local.year:04d} {_MONTHS[local.month - 1]} {local.day} "
        f"{local.hour:02d}:{local.minute:02d} {value.zone}"
    )


def as_flight_time(value: Timestamp) -> FlightTime:
    if isinstance(value, FlightTime):
        return value
    return parse_flight_time(value)


def day_bucket(value: Timestamp, canonical_zone: str = DEFAULT_CANONICAL_ZONE) -> str:
    """
    Calendar-day key ('yyyy_MM_dd') used to request a day of flights.
    Always computed in the canonical zone, never the process-local one.
    """
    return as_flight_time(value).in_zone(canonical_zone).strftime('%Y_%m_%d')


def is_late_enough_to_spill_to_next_day(
    value: Timestamp,
    cutoff_hour: int,
    canonical_zone: str = DEFAULT_CANONICAL_ZONE
) -> bool:
    """
    True when an arrival is past the cutoff hour, so connections may only
    exist among the next day's departures. Exactly HH:00 does not spill.
    """
    local = as_flight_time(value).in_zone(canonical_zone)
    if local.hour == cutoff_hour:
        return local.minute > 0
    return local.hour > cutoff_hour


def add_one_day(value: Timestamp) -> FlightTime:
    """Same wall-clock time one calendar day later, same zone."""
    parsed = as_flight_time(value)
    tz = _zone(parsed.zone)
    next_day = parsed.local().replace(tzinfo=None) + timedelta(days=1)
    return FlightTime(instant=tz.localize(next_day).astimezone(timezone.utc), zone=parsed.zone)


def connection_gap_millis(arrival: Timestamp, departure: Timestamp) -> int:
    """
    Milliseconds from arrival to the next departure.
    Negative when the departure precedes the arrival.
    """
    gap = as_flight_time(departure).instant - as_flight_time(arrival).instant
    return gap // timedelta(milliseconds=1)
