"""
Date arithmetic for WristWatch.

Fixed-duration units (millisecond through week) work on the raw
timestamp and are therefore exact and DST-transparent. Months and years
work on the wall clock, clamping the day of month when the target month
is shorter.
"""

from __future__ import annotations

from dataclasses import replace

from dateutil.relativedelta import relativedelta

from ..core.instant import Instant
from ..core.types import TimeUnit
from ..utils.time.calendar import from_wall_clock
from ..utils.time.timezone import resolve_timezone


def add(instant: Instant, amount: int | float, unit: TimeUnit | str, *, tz: str | None = None) -> Instant:
    """
    Add an amount of time to an instant.

    Args:
        instant: Base instant (unchanged)
        amount: Amount to add, negative to go back in time
        unit: Time unit
        tz: Zone for calendar units (defaults to the display zone)

    Returns:
        New instant with the same display zone

    Raises:
        ValueError: If the unit is unknown, a calendar amount is fractional,
            or a calendar step leaves the years 1..9999
        OverflowError: If a calendar unit is applied to an instant outside
            the years 1..9999

    Examples:
        >>> jan31 = Instant(1738281600000, zone="UTC")  # 2025-01-31
        >>> add(jan31, 1, "month").isoformat()
        '2025-02-28T00:00:00.000Z'
        >>> add(jan31, 36, "hour").isoformat()
        '2025-02-01T12:00:00.000Z'
    """
    unit = TimeUnit.coerce(unit)

    if unit.is_fixed:
        offset = amount * unit.milliseconds
        if not isinstance(offset, int):
            offset = round(offset)
        return replace(instant, timestamp=instant.timestamp + offset)

    if isinstance(amount, float):
        if not amount.is_integer():
            raise ValueError(f"Cannot add a fractional number of {unit.value}s: {amount}")
        amount = int(amount)

    local = instant.to_datetime(tz)
    if unit is TimeUnit.MONTH:
        shifted = local.replace(tzinfo=None) + relativedelta(months=amount)
    else:
        shifted = local.replace(tzinfo=None) + relativedelta(years=amount)

    zone = resolve_timezone(tz if tz is not None else instant.zone)
    return replace(instant, timestamp=from_wall_clock(shifted, zone))


def subtract(instant: Instant, amount: int | float, unit: TimeUnit | str, *, tz: str | None = None) -> Instant:
    """
    Subtract an amount of time from an instant.

    Equivalent to ``add(instant, -amount, unit)``.
    """
    return add(instant, -amount, unit, tz=tz)


def diff(a: Instant, b: Instant, unit: TimeUnit | str = TimeUnit.DAY, *, tz: str | None = None) -> float:
    """
    Difference ``a - b`` expressed in a unit.

    Fixed units give a possibly fractional number (milliseconds are exact
    integers). Months and years count complete calendar periods: a partial
    final month or year is not counted.

    Args:
        a: First instant
        b: Second instant
        unit: Time unit (default: day)
        tz: Zone for calendar units (defaults to the display zone of ``a``)

    Returns:
        The difference, positive when ``a`` is later than ``b``

    Examples:
        >>> diff(Instant(864_000_000), Instant(432_000_000))
        5.0
        >>> diff(Instant(864_000_000), Instant(432_000_000), "hour")
        120.0
    """
    unit = TimeUnit.coerce(unit)
    delta = a.timestamp - b.timestamp

    if unit is TimeUnit.MILLISECOND:
        return delta
    if unit.is_fixed:
        return delta / unit.milliseconds

    zone_id = tz if tz is not None else a.zone
    first = a.components(zone_id)
    second = b.components(zone_id)

    if unit is TimeUnit.MONTH:
        months = (first.year - second.year) * 12 + (first.month - second.month)
        if first.day < second.day:
            months -= 1
        return months

    years = first.year - second.year
    if (first.month, first.day) < (second.month, second.day):
        years -= 1
    return years
