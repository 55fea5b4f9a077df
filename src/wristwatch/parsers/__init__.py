"""
Parsing entry points for WristWatch.

Every parser except ``parse_timestamp`` returns a ParseResult instead of
raising on malformed input.
"""

from __future__ import annotations

import logging
from datetime import datetime

from dateutil.parser import ParserError
from dateutil.parser import parse as parse_date_string

from ..core.instant import Instant
from ..core.types import ParseFailure, ParseResult, ParseSuccess
from ..utils.core.exceptions import TimezoneError
from ..utils.time.calendar import datetime_to_timestamp, to_zoned_datetime
from ..utils.time.clock import Clock, system_clock
from ..utils.time.timezone import ensure_timezone_aware, resolve_timezone
from .custom import parse_custom
from .iso import parse_iso
from .timestamp import parse_timestamp

logger = logging.getLogger(__name__)


def parse(
    input: object,
    *,
    tz: str | None = None,
    clock: Clock = system_clock,
) -> ParseResult[Instant]:
    """
    Parse a timestamp or a date string.

    Numbers are millisecond timestamps. Strings are tried as ISO 8601
    first and then with a general date-string parser, whose missing
    fields come from the clock's current date at midnight.

    Args:
        input: Millisecond timestamp or date string
        tz: Zone for strings without an offset (defaults to the host local zone)
        clock: Source of the current date for partial date strings

    Returns:
        ParseSuccess with the instant, or ParseFailure with the reason

    Examples:
        >>> parse(0).value.isoformat()
        '1970-01-01T00:00:00.000Z'
        >>> parse("December 5, 2025 10:00", tz="UTC").value.isoformat()
        '2025-12-05T10:00:00.000Z'
        >>> parse("not-a-date").success
        False
    """
    if isinstance(input, (int, float)) and not isinstance(input, bool):
        try:
            return ParseSuccess(parse_timestamp(input))
        except (TypeError, ValueError) as e:
            return ParseFailure(f"Invalid timestamp: {e}")

    if not isinstance(input, str):
        return ParseFailure("Input must be a string or number")

    iso_result = parse_iso(input, tz=tz)
    if iso_result.success:
        return iso_result

    try:
        zone = resolve_timezone(tz)
    except TimezoneError as e:
        return ParseFailure(str(e))

    today = to_zoned_datetime(clock(), zone)
    default = datetime(today.year, today.month, today.day)

    try:
        parsed = parse_date_string(input, default=default)
        timestamp = datetime_to_timestamp(ensure_timezone_aware(parsed, tz))
    except (ParserError, ValueError, OverflowError) as e:
        logger.debug(f"General date parsing rejected {input!r}: {e}")
        return ParseFailure(f"Unable to parse date string: {input}")

    return ParseSuccess(Instant(timestamp, zone=tz))


__all__ = ["parse", "parse_custom", "parse_iso", "parse_timestamp"]
