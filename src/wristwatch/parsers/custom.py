"""
Custom format parsing for WristWatch.

Parses strings produced by ``format`` back into instants. The pattern is
segmented with the same token table the formatter uses, compiled into a
single anchored regular expression, and the captured fields are combined
on the wall clock of the target zone.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ..core.instant import Instant
from ..core.tokens import (
    DAY_NAMES,
    DAY_NAMES_SHORT,
    MONTH_NAMES,
    MONTH_NAMES_SHORT,
    Segment,
    segment_pattern,
)
from ..core.types import ParseFailure, ParseResult, ParseSuccess
from ..utils.core.exceptions import PatternError, TimezoneError
from ..utils.time.calendar import from_local_fields, wall_clock
from ..utils.time.clock import Clock, system_clock
from ..utils.time.timezone import resolve_timezone

logger = logging.getLogger(__name__)

TWO_DIGIT_YEAR_BASE = 2000

_MONTH_LOOKUP: dict[str, int] = {
    **{name.lower(): index for index, name in enumerate(MONTH_NAMES, start=1)},
    **{name.lower(): index for index, name in enumerate(MONTH_NAMES_SHORT, start=1)},
}

_WEEKDAY_LOOKUP: frozenset[str] = frozenset(
    name.lower() for name in (*DAY_NAMES, *DAY_NAMES_SHORT)
)


@dataclass
class _Fields:
    """Calendar fields collected from a match, before defaults are applied."""

    year: int | None = None
    month: int = 1
    day: int = 1
    hour: int | None = None
    hour12: int | None = None
    meridiem: str | None = None
    minute: int = 0
    second: int = 0
    millisecond: int = 0


def compile_pattern(segments: list[Segment]) -> re.Pattern[str]:
    """
    Build the regular expression for a segmented pattern.

    Tokens contribute one capture group each, literals are escaped.
    """
    parts = [
        segment.token.capture if segment.token is not None else re.escape(segment.text)
        for segment in segments
    ]
    return re.compile("".join(parts))


def _collect(segments: list[Segment], groups: tuple[str, ...]) -> _Fields | str:
    """Fold captured groups into fields, or return an error message."""
    fields = _Fields()
    tokens = [segment.token for segment in segments if segment.token is not None]

    for token, raw in zip(tokens, groups, strict=True):
        match token.field:
            case "year":
                fields.year = int(raw)
            case "year2":
                fields.year = TWO_DIGIT_YEAR_BASE + int(raw)
            case "month_name":
                month = _MONTH_LOOKUP.get(raw.lower())
                if month is None:
                    return f"Unknown month name {raw!r}"
                fields.month = month
            case "month":
                fields.month = int(raw)
            case "day":
                fields.day = int(raw)
            case "weekday_name":
                if raw.lower() not in _WEEKDAY_LOOKUP:
                    return f"Unknown day name {raw!r}"
            case "hour":
                fields.hour = int(raw)
            case "hour12":
                fields.hour12 = int(raw)
            case "meridiem":
                fields.meridiem = raw.upper()
            case "minute":
                fields.minute = int(raw)
            case "second":
                fields.second = int(raw)
            case "millisecond":
                fields.millisecond = int(raw)
            case _:
                return f"Unsupported token {token.symbol!r}"

    return fields


def _resolve_hour(fields: _Fields) -> int:
    """
    Pick the 24-hour clock hour.

    A 24-hour token wins. A 12-hour token is adjusted by the meridiem when
    there is one, and otherwise taken as the clock hour as written.
    """
    if fields.hour is not None:
        return fields.hour
    if fields.hour12 is None:
        return 0

    hour = fields.hour12
    if fields.meridiem == "PM" and hour != 12:
        hour += 12
    elif fields.meridiem == "AM" and hour == 12:
        hour = 0
    return hour


def parse_custom(
    input: object,
    pattern: object,
    *,
    tz: str | None = None,
    clock: Clock = system_clock,
) -> ParseResult[Instant]:
    """
    Parse a string written in a custom token pattern.

    Args:
        input: String to parse
        pattern: Token pattern, e.g. "MM/DD/YYYY h:mm A"
        tz: Zone of the wall-clock fields (defaults to the host local zone)
        clock: Source of the current year when the pattern has no year

    Returns:
        ParseSuccess with the instant, or ParseFailure with the reason

    Examples:
        >>> result = parse_custom("12/05/2025 2:30 PM", "MM/DD/YYYY h:mm A", tz="UTC")
        >>> result.success, result.value.components().hour
        (True, 14)
        >>> parse_custom("2025/12/05", "YYYY-MM-DD").success
        False
    """
    if not isinstance(input, str) or not isinstance(pattern, str):
        return ParseFailure("Input and format must be strings")

    if not input.strip() or not pattern.strip():
        return ParseFailure("Input and format cannot be empty")

    try:
        zone = resolve_timezone(tz)
    except TimezoneError as e:
        return ParseFailure(str(e))

    try:
        segments = segment_pattern(pattern)
    except PatternError as e:
        logger.debug(f"Pattern segmentation failed: {e}")
        return ParseFailure(str(e))

    try:
        regex = compile_pattern(segments)
    except re.error as e:
        return ParseFailure(f"Failed to parse custom format: {e}")

    match = regex.fullmatch(input)
    if match is None:
        return ParseFailure(f'Input "{input}" does not match format "{pattern}"')

    fields = _collect(segments, match.groups())
    if isinstance(fields, str):
        return ParseFailure(f'{fields} in "{input}"')

    year = fields.year
    if year is None:
        year = wall_clock(clock(), zone).year

    try:
        timestamp = from_local_fields(
            year,
            fields.month,
            fields.day,
            _resolve_hour(fields),
            fields.minute,
            fields.second,
            fields.millisecond,
            zone=zone,
        )
    except (ValueError, OverflowError) as e:
        logger.debug(f"Rejected date components from {input!r}: {e}")
        return ParseFailure(f'Invalid date components parsed from "{input}"')

    return ParseSuccess(Instant(timestamp, zone=tz))
