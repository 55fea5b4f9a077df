"""
Formatting operations for WristWatch.

``format`` expands token patterns with fixed English names. The locale
aware functions delegate to Babel's CLDR data instead.
"""

from __future__ import annotations

import logging

from babel import Locale, UnknownLocaleError
from babel.dates import format_date, format_skeleton, format_time, get_datetime_format

from ..core.instant import Instant
from ..core.tokens import segment_pattern
from ..core.types import (
    DAY_MS,
    DEFAULT_LOCALE,
    DEFAULT_PATTERN,
    HOUR_MS,
    MINUTE_MS,
    SECOND_MS,
    WEEK_MS,
)
from ..utils.core.exceptions import LocaleError
from ..utils.time.clock import Clock, system_clock

logger = logging.getLogger(__name__)

# Approximate lengths used only for relative descriptions
RELATIVE_MONTH_MS = DAY_MS * 30
RELATIVE_YEAR_MS = DAY_MS * 365
JUST_NOW_MS = SECOND_MS * 10

DATE_STYLES = ("short", "medium", "long", "full")

SHORT_DATE_SKELETON = "yMd"


def format(instant: Instant, pattern: str = DEFAULT_PATTERN, *, tz: str | None = None) -> str:
    """
    Format an instant according to a token pattern.

    Args:
        instant: Instant to format
        pattern: Token pattern, text inside ``[...]`` is copied verbatim
        tz: Zone whose wall clock is used (defaults to the display zone)

    Returns:
        Formatted string

    Examples:
        >>> ts = Instant(1765031445000, zone="UTC")
        >>> format(ts, "h:mm A")
        '2:30 PM'
        >>> format(ts, "MMMM D, YYYY [at] HH:mm")
        'December 6, 2025 at 14:30'
    """
    fields = instant.wall_clock(tz)
    return "".join(
        segment.token.render(fields) if segment.token is not None else segment.text
        for segment in segment_pattern(pattern)
    )


def to_iso(instant: Instant) -> str:
    """
    ISO 8601 string in UTC, e.g. ``2025-12-05T10:00:00.000Z``.

    Examples:
        >>> to_iso(Instant(0))
        '1970-01-01T00:00:00.000Z'
    """
    return instant.isoformat()


def to_relative(
    instant: Instant, reference: Instant | None = None, *, clock: Clock = system_clock
) -> str:
    """
    Describe an instant relative to a reference time.

    Args:
        instant: Instant to describe
        reference: Reference instant (defaults to the clock's current time)
        clock: Source of the current time when no reference is given

    Returns:
        Description such as "just now", "2 hours ago" or "in 1 week"

    Examples:
        >>> to_relative(Instant(0), Instant(7_200_000))
        '2 hours ago'
        >>> to_relative(Instant(604_800_000), Instant(0))
        'in 1 week'
    """
    if reference is None:
        reference = Instant.now(clock=clock)

    delta = instant.timestamp - reference.timestamp
    magnitude = abs(delta)

    if magnitude < JUST_NOW_MS:
        return "just now"

    if magnitude < MINUTE_MS:
        value, unit = magnitude // SECOND_MS, "second"
    elif magnitude < HOUR_MS:
        value, unit = magnitude // MINUTE_MS, "minute"
    elif magnitude < DAY_MS:
        value, unit = magnitude // HOUR_MS, "hour"
    elif magnitude < WEEK_MS:
        value, unit = magnitude // DAY_MS, "day"
    elif magnitude < RELATIVE_MONTH_MS:
        value, unit = magnitude // WEEK_MS, "week"
    elif magnitude < RELATIVE_YEAR_MS:
        value, unit = magnitude // RELATIVE_MONTH_MS, "month"
    else:
        value, unit = magnitude // RELATIVE_YEAR_MS, "year"

    label = unit if value == 1 else f"{unit}s"
    if delta < 0:
        return f"{value} {label} ago"
    return f"in {value} {label}"


def resolve_locale(locale: str | None = None) -> Locale:
    """
    Resolve a locale identifier such as ``en-US`` or ``fr_FR``.

    Well-formed identifiers missing from the CLDR data fall back to the
    default locale with a warning.

    Raises:
        LocaleError: If the identifier is malformed
    """
    identifier = DEFAULT_LOCALE if locale is None else locale
    if not isinstance(identifier, str) or not identifier.strip():
        raise LocaleError(f"Invalid locale identifier: {identifier!r}", context=identifier)

    sep = "-" if "-" in identifier else "_"
    try:
        return Locale.parse(identifier.strip(), sep=sep)
    except UnknownLocaleError:
        logger.warning(f"Unknown locale {identifier!r}, falling back to {DEFAULT_LOCALE}")
        return Locale.parse(DEFAULT_LOCALE, sep="-")
    except (ValueError, TypeError) as e:
        raise LocaleError(f"Invalid locale identifier: {identifier!r}", context=identifier) from e


def to_short_date(
    instant: Instant, locale: str | None = None, *, tz: str | None = None
) -> str:
    """
    Numeric date in the locale's order, e.g. ``12/5/2025`` for en-US.

    Examples:
        >>> to_short_date(Instant(1764928800000, zone="UTC"), "fr-FR")
        '05/12/2025'
    """
    dt = instant.to_datetime(tz)
    return format_skeleton(SHORT_DATE_SKELETON, dt, tzinfo=dt.tzinfo, locale=resolve_locale(locale))


def to_long_date(
    instant: Instant, locale: str | None = None, *, tz: str | None = None
) -> str:
    """
    Full date with weekday, e.g. ``Friday, December 5, 2025`` for en-US.

    Examples:
        >>> to_long_date(Instant(1764928800000, zone="UTC"))
        'Friday, December 5, 2025'
    """
    dt = instant.to_datetime(tz)
    return format_date(dt.date(), format="full", locale=resolve_locale(locale))


def format_with_locale(
    instant: Instant,
    locale: str | None = None,
    *,
    date_style: str | None = None,
    time_style: str | None = None,
    skeleton: str | None = None,
    tz: str | None = None,
) -> str:
    """
    Format an instant with locale-specific conventions.

    A CLDR skeleton (e.g. ``"yMMMd"``) takes precedence over styles. With
    only one style given, only that part is rendered. With nothing given,
    the numeric date and the medium time are joined with the locale's
    date-time pattern (``12/5/2025, 2:30:45 PM`` for en-US).

    Args:
        instant: Instant to format
        locale: Locale identifier (defaults to en-US)
        date_style: One of short, medium, long, full
        time_style: One of short, medium, long, full
        skeleton: CLDR skeleton
        tz: Zone whose wall clock is used (defaults to the display zone)

    Returns:
        Localized string

    Raises:
        LocaleError: If the locale identifier is malformed
        ValueError: If a style is not recognized
    """
    resolved = resolve_locale(locale)
    dt = instant.to_datetime(tz)

    if skeleton is not None:
        return format_skeleton(skeleton, dt, tzinfo=dt.tzinfo, locale=resolved)

    for style in (date_style, time_style):
        if style is not None and style not in DATE_STYLES:
            raise ValueError(f"Unknown style {style!r}; expected one of: {', '.join(DATE_STYLES)}")

    if date_style is None and time_style is None:
        date_part = format_skeleton(SHORT_DATE_SKELETON, dt, tzinfo=dt.tzinfo, locale=resolved)
        time_part = format_time(dt, format="medium", tzinfo=dt.tzinfo, locale=resolved)
        return _join_date_time(date_part, time_part, "medium", resolved)

    if time_style is None:
        return format_date(dt.date(), format=date_style or "medium", locale=resolved)

    time_part = format_time(dt, format=time_style, tzinfo=dt.tzinfo, locale=resolved)
    if date_style is None:
        return time_part

    date_part = format_date(dt.date(), format=date_style, locale=resolved)
    return _join_date_time(date_part, time_part, date_style, resolved)


def _join_date_time(date_part: str, time_part: str, style: str, locale: Locale) -> str:
    """Combine date and time with the locale's date-time pattern."""
    pattern = str(get_datetime_format(style, locale=locale))
    return pattern.replace("'", "").replace("{0}", time_part).replace("{1}", date_part)
