"""
Calendar decomposition helpers for WristWatch.

Converts between integer millisecond timestamps and wall-clock datetimes
in a given zone. All arithmetic goes through exact integer milliseconds;
float seconds are never involved.

``datetime`` only spans the years 1..9999. ``wall_clock`` covers every
integer timestamp by moving instants outside that span a whole number of
400-year Gregorian cycles inside it, decomposing there and shifting the
year back. A cycle is exactly 146097 days, a whole number of weeks, so
month, day and weekday are unchanged by the shift.
"""

from datetime import datetime, timedelta, timezone, tzinfo
from typing import NamedTuple

from dateutil.relativedelta import relativedelta

from .timezone import resolve_timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MILLISECOND = timedelta(milliseconds=1)

CYCLE_YEARS = 400
CYCLE_MS = 146_097 * 86_400_000


class WallClock(NamedTuple):
    """Wall-clock fields of a timestamp in one zone. Weekday 0 is Sunday."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int
    weekday: int


def datetime_to_timestamp(dt: datetime) -> int:
    """
    Convert an aware datetime to epoch milliseconds.

    Sub-millisecond precision is floored.

    Examples:
        >>> datetime_to_timestamp(datetime(2025, 12, 5, 10, tzinfo=timezone.utc))
        1764928800000
    """
    return (dt - EPOCH) // ONE_MILLISECOND


# One day of margin on each side keeps every UTC offset inside datetime's range
MIN_DATETIME_TIMESTAMP = datetime_to_timestamp(datetime(1, 1, 2, tzinfo=timezone.utc))
MAX_DATETIME_TIMESTAMP = datetime_to_timestamp(datetime(9999, 12, 31, tzinfo=timezone.utc))


def to_zoned_datetime(timestamp: int, zone: tzinfo) -> datetime:
    """
    Decompose a timestamp into an aware datetime on ``zone``'s wall clock.

    Raises:
        OverflowError: If the timestamp is outside the years 1..9999
    """
    return (EPOCH + timedelta(milliseconds=timestamp)).astimezone(zone)


def wall_clock(timestamp: int, zone: tzinfo) -> WallClock:
    """
    Decompose any timestamp into wall-clock fields on ``zone``'s clock.

    Years outside 1..9999 use the proleptic Gregorian calendar with
    astronomical numbering (year 0 precedes year 1). Such instants take the
    zone's offset at the matching point of the shifted cycle.

    Examples:
        >>> from zoneinfo import ZoneInfo
        >>> wall_clock(10**15, ZoneInfo("UTC"))[:3]
        (33658, 9, 27)
    """
    if timestamp > MAX_DATETIME_TIMESTAMP:
        cycles = -((MAX_DATETIME_TIMESTAMP - timestamp) // CYCLE_MS)
    elif timestamp < MIN_DATETIME_TIMESTAMP:
        cycles = (timestamp - MIN_DATETIME_TIMESTAMP) // CYCLE_MS
    else:
        cycles = 0

    dt = to_zoned_datetime(timestamp - cycles * CYCLE_MS, zone)
    return WallClock(
        year=dt.year + cycles * CYCLE_YEARS,
        month=dt.month,
        day=dt.day,
        hour=dt.hour,
        minute=dt.minute,
        second=dt.second,
        millisecond=dt.microsecond // 1000,
        weekday=dt.isoweekday() % 7,
    )


def local_datetime(timestamp: int, tz_id: str | None = None) -> datetime:
    """
    Decompose a timestamp in the named zone (host local zone by default).

    Examples:
        >>> local_datetime(0, "UTC").isoformat()
        '1970-01-01T00:00:00+00:00'
    """
    return to_zoned_datetime(timestamp, resolve_timezone(tz_id))


def local_wall_clock(timestamp: int, tz_id: str | None = None) -> WallClock:
    """Wall-clock fields in the named zone (host local zone by default)."""
    return wall_clock(timestamp, resolve_timezone(tz_id))


def from_wall_clock(naive: datetime, zone: tzinfo) -> int:
    """
    Convert a naive wall-clock datetime in ``zone`` to epoch milliseconds.

    Nonexistent wall times (inside a DST gap) resolve with the offset in
    force before the transition, which moves them forward; ambiguous ones
    take the earlier occurrence.
    """
    return datetime_to_timestamp(naive.replace(tzinfo=zone, fold=0))


def from_local_fields(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
    zone: tzinfo | None = None,
) -> int:
    """
    Build a timestamp from local calendar fields.

    Out-of-range fields normalize forward instead of failing: month 13 is
    January of the next year, February 31 is early March, hour 24 is
    midnight of the next day.

    Args:
        year: Calendar year (1..9999)
        month: 1-based month, may overflow
        day: 1-based day of month, may overflow
        hour: Hour, may overflow
        minute: Minute, may overflow
        second: Second, may overflow
        millisecond: Millisecond, may overflow
        zone: Wall-clock zone (host local zone by default)

    Returns:
        Milliseconds since the epoch

    Raises:
        ValueError: If the year is outside the supported range
        OverflowError: If normalization leaves the supported range

    Examples:
        >>> from zoneinfo import ZoneInfo
        >>> from_local_fields(2025, 2, 31, zone=ZoneInfo("UTC")) == from_local_fields(
        ...     2025, 3, 3, zone=ZoneInfo("UTC"))
        True
    """
    if zone is None:
        zone = resolve_timezone(None)

    naive = datetime(year, 1, 1) + relativedelta(months=month - 1)
    naive += timedelta(
        days=day - 1,
        hours=hour,
        minutes=minute,
        seconds=second,
        milliseconds=millisecond,
    )
    return from_wall_clock(naive, zone)
