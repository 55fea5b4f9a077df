"""
WristWatch - immutable date/time values with token formatting and parsing.

Usage Examples:
    Formatting and arithmetic:
        >>> from wristwatch import Instant, add, format
        >>> jan31 = Instant(1738281600000, zone="UTC")
        >>> format(add(jan31, 1, "month"), "YYYY-MM-DD")
        '2025-02-28'

    Parsing:
        >>> from wristwatch import parse_custom
        >>> result = parse_custom("12/05/2025 2:30 PM", "MM/DD/YYYY h:mm A", tz="UTC")
        >>> result.success
        True
"""

from .core import (
    DEFAULT_LOCALE,
    DEFAULT_PATTERN,
    DateComponents,
    Instant,
    ParseFailure,
    ParseResult,
    ParseSuccess,
    TimeUnit,
    now,
)
from .operations import (
    add,
    diff,
    equals,
    format,
    format_with_locale,
    is_after,
    is_before,
    is_between,
    subtract,
    to_iso,
    to_long_date,
    to_relative,
    to_short_date,
)
from .parsers import parse, parse_custom, parse_iso, parse_timestamp
from .utils.core.exceptions import (
    ConfigurationError,
    LocaleError,
    ParseError,
    PatternError,
    TimezoneError,
    WristWatchError,
)
from .utils.time import (
    Clock,
    fixed_clock,
    get_local_timezone,
    system_clock,
    to_local,
    to_timezone,
    to_utc,
)

__all__ = [
    # Core
    "Instant",
    "TimeUnit",
    "DateComponents",
    "ParseSuccess",
    "ParseFailure",
    "ParseResult",
    "DEFAULT_PATTERN",
    "DEFAULT_LOCALE",
    "now",
    # Parsing
    "parse",
    "parse_custom",
    "parse_iso",
    "parse_timestamp",
    # Formatting
    "format",
    "format_with_locale",
    "to_iso",
    "to_long_date",
    "to_relative",
    "to_short_date",
    # Arithmetic
    "add",
    "subtract",
    "diff",
    # Comparison
    "equals",
    "is_before",
    "is_after",
    "is_between",
    # Timezones and clocks
    "to_timezone",
    "to_utc",
    "to_local",
    "get_local_timezone",
    "Clock",
    "system_clock",
    "fixed_clock",
    # Errors
    "WristWatchError",
    "ParseError",
    "PatternError",
    "TimezoneError",
    "LocaleError",
    "ConfigurationError",
]
