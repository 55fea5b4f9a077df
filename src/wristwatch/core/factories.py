"""Factory functions for creating instants."""

from __future__ import annotations

from ..utils.core.exceptions import TimezoneError
from ..utils.time.clock import Clock, system_clock
from ..utils.time.timezone import UTC_ZONE, is_valid_timezone
from .instant import Instant


def now(zone: str | bool | None = None, *, clock: Clock = system_clock) -> Instant:
    """
    Create an instant for the current time.

    Args:
        zone: None for the host local zone, True for UTC, or an IANA
            identifier to display the instant in
        clock: Source of the current time

    Returns:
        Instant for the clock's current reading

    Raises:
        TimezoneError: If ``zone`` is a string naming an unknown zone

    Examples:
        >>> from wristwatch.utils.time.clock import fixed_clock
        >>> now(True, clock=fixed_clock(0)).isoformat()
        '1970-01-01T00:00:00.000Z'
    """
    if zone is True:
        return Instant.now(UTC_ZONE, clock=clock)
    if zone is None or zone is False:
        return Instant.now(clock=clock)
    if not is_valid_timezone(zone):
        raise TimezoneError(f"Unknown timezone: {zone}", context=zone)
    return Instant.now(zone, clock=clock)
