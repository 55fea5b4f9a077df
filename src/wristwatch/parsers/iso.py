"""ISO 8601 parsing for WristWatch."""

from __future__ import annotations

import logging

from dateutil.parser import isoparse

from ..core.instant import Instant
from ..core.types import ParseFailure, ParseResult, ParseSuccess
from ..utils.core.exceptions import TimezoneError
from ..utils.time.calendar import datetime_to_timestamp
from ..utils.time.timezone import ensure_timezone_aware, resolve_timezone

logger = logging.getLogger(__name__)


def parse_iso(input: object, *, tz: str | None = None) -> ParseResult[Instant]:
    """
    Parse an ISO 8601 date or date-time string.

    Values without an offset, including date-only forms, are wall-clock
    time in ``tz`` (the host local zone by default).

    Args:
        input: ISO 8601 string such as "2025-12-05T10:30:00Z"
        tz: Zone for values without an offset, and the display zone of the
            result. An unknown zone is a failure even when the string has
            an offset.

    Returns:
        ParseSuccess with the instant, or ParseFailure with the reason

    Examples:
        >>> parse_iso("2025-12-05T10:00:00Z").value.timestamp
        1764928800000
        >>> parse_iso("2025-13-01T00:00:00Z").success
        False
    """
    if not isinstance(input, str):
        return ParseFailure("Input must be a string")

    text = input.strip()
    if not text:
        return ParseFailure("Input string cannot be empty")

    try:
        _ = resolve_timezone(tz)
    except TimezoneError as e:
        return ParseFailure(str(e))

    try:
        parsed = isoparse(text)
    except (ValueError, OverflowError) as e:
        logger.debug(f"isoparse rejected {text!r}: {e}")
        return ParseFailure(f"Invalid ISO 8601 date string: {input}")

    try:
        timestamp = datetime_to_timestamp(ensure_timezone_aware(parsed, tz))
    except (ValueError, OverflowError) as e:
        return ParseFailure(f"Failed to parse ISO date: {e}")

    return ParseSuccess(Instant(timestamp, zone=tz))
