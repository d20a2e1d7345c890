"""
Time formatting and parsing helpers.
Converts points in time to display labels and per-day index keys, and turns
form input (dates, datetimes, text) into local wall-clock datetimes.
"""

from datetime import date, datetime, time, tzinfo
from typing import Optional, Tuple, Union

import tzlocal
from dateutil import parser as dateutil_parser
from dateutil import tz as dateutil_tz

ALL_DAY_LABEL = "All day"


def local_timezone(name: Optional[str] = None) -> tzinfo:
    """
    Resolve the timezone that defines local calendar days.

    Args:
        name: IANA timezone name, or None for the system timezone

    Returns:
        tzinfo for the named zone or the system zone
    """
    if name:
        zone = dateutil_tz.gettz(name)
        if zone is None:
            raise ValueError(f"Unknown timezone: {name}")
        return zone
    return tzlocal.get_localzone()


def to_local(dt: datetime, zone: Optional[tzinfo] = None) -> datetime:
    """
    Convert a datetime to naive local wall-clock time.
    Naive datetimes are assumed to already be local and are returned unchanged.
    """
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(zone or local_timezone()).replace(tzinfo=None)


def now_local(zone: Optional[tzinfo] = None) -> datetime:
    return datetime.now(zone or local_timezone()).replace(tzinfo=None, microsecond=0)


def date_key(point: Union[date, datetime], zone: Optional[tzinfo] = None) -> str:
    """
    Calendar-day key in YYYY-MM-DD form using local-calendar semantics.
    Two points on the same local day always produce the same key.
    """
    if isinstance(point, datetime):
        point = to_local(point, zone).date()
    return f"{point.year:04d}-{point.month:02d}-{point.day:02d}"


def format_clock(dt: datetime) -> str:
    """12-hour clock label without a leading zero, e.g. '9:30 AM'."""
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.minute:02d} {suffix}"


def time_label(start: datetime, end: Optional[datetime] = None, all_day: bool = False) -> str:
    """
    Display label for an event's time.

    Args:
        start: Event start
        end: Optional event end; only shown when the start has a clock time
        all_day: True when the start carries no clock time

    Returns:
        'All day', '9:30 AM' or '9:00 AM - 9:30 AM'
    """
    if all_day:
        return ALL_DAY_LABEL
    if end is None:
        return format_clock(start)
    return f"{format_clock(start)} - {format_clock(end)}"


def parse_point(
    value: Union[date, datetime, str],
    default_day: Optional[date] = None,
    zone: Optional[tzinfo] = None,
) -> Tuple[datetime, bool]:
    """
    Parse a start/end input into a local datetime.

    Args:
        value: date (all-day), datetime, or text understood by dateutil
        default_day: Day used for text that carries only a clock time
        zone: Zone that aware input is converted into; None for the system zone

    Returns:
        (datetime, has_time); has_time is False for date-only input,
        in which case the datetime is midnight of that day

    Raises:
        ValueError: If the text cannot be parsed
    """
    if isinstance(value, datetime):
        return to_local(value, zone), True
    if isinstance(value, date):
        return datetime.combine(value, time()), False
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Cannot parse date/time from {value!r}")

    base = datetime.combine(default_day or date.today(), time())
    # `shifted` differs from base only in the hour: if both parses agree,
    # the text supplied its own clock time.
    shifted = base.replace(hour=1)
    parsed = dateutil_parser.parse(value, default=base)
    has_time = parsed == dateutil_parser.parse(value, default=shifted)
    return to_local(parsed, zone).replace(microsecond=0), has_time


def resolve_end(
    value: Union[datetime, str, None],
    start: datetime,
    zone: Optional[tzinfo] = None,
) -> Optional[datetime]:
    """
    Resolve an end input against the event start.
    A bare clock time such as '09:30' lands on the start's day.
    """
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    end, _ = parse_point(value, default_day=start.date(), zone=zone)
    return end
