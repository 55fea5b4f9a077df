"""
Format pattern tokens for WristWatch.

The formatter and the custom parser share this table and the segmenter
below, which is what makes ``parse_custom(format(x, p), p)`` round-trip.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Callable

from ..utils.core.exceptions import PatternError
from ..utils.time.calendar import WallClock

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)  # fmt: skip

MONTH_NAMES_SHORT = tuple(name[:3] for name in MONTH_NAMES)

# Sunday first, matching weekday numbering 0 = Sunday
DAY_NAMES = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)  # fmt: skip

DAY_NAMES_SHORT = tuple(name[:3] for name in DAY_NAMES)

LITERAL_OPEN = "["
LITERAL_CLOSE = "]"


def _hour12(wc: WallClock) -> int:
    return wc.hour % 12 or 12


@dataclass(frozen=True)
class Token:
    """A pattern token: its symbol, the field it maps to, and both directions."""

    symbol: str
    field: str
    capture: str
    render: Callable[[WallClock], str]


TOKENS: tuple[Token, ...] = (
    # Year
    Token("YYYY", "year", r"(\d{4})", lambda wc: f"{wc.year:04d}"),
    Token("YY", "year2", r"(\d{2})", lambda wc: f"{wc.year % 100:02d}"),
    # Month
    Token("MMMM", "month_name", r"([A-Za-z]+)", lambda wc: MONTH_NAMES[wc.month - 1]),
    Token("MMM", "month_name", r"([A-Za-z]+)", lambda wc: MONTH_NAMES_SHORT[wc.month - 1]),
    Token("MM", "month", r"(\d{2})", lambda wc: f"{wc.month:02d}"),
    Token("M", "month", r"(\d{1,2})", lambda wc: str(wc.month)),
    # Day of month
    Token("DD", "day", r"(\d{2})", lambda wc: f"{wc.day:02d}"),
    Token("D", "day", r"(\d{1,2})", lambda wc: str(wc.day)),
    # Day of week
    Token("dddd", "weekday_name", r"([A-Za-z]+)", lambda wc: DAY_NAMES[wc.weekday]),
    Token("ddd", "weekday_name", r"([A-Za-z]+)", lambda wc: DAY_NAMES_SHORT[wc.weekday]),
    # Hours (24-hour clock)
    Token("HH", "hour", r"(\d{2})", lambda wc: f"{wc.hour:02d}"),
    Token("H", "hour", r"(\d{1,2})", lambda wc: str(wc.hour)),
    # Hours (12-hour clock)
    Token("hh", "hour12", r"(\d{2})", lambda wc: f"{_hour12(wc):02d}"),
    Token("h", "hour12", r"(\d{1,2})", lambda wc: str(_hour12(wc))),
    # Minutes
    Token("mm", "minute", r"(\d{2})", lambda wc: f"{wc.minute:02d}"),
    Token("m", "minute", r"(\d{1,2})", lambda wc: str(wc.minute)),
    # Seconds
    Token("ss", "second", r"(\d{2})", lambda wc: f"{wc.second:02d}"),
    Token("s", "second", r"(\d{1,2})", lambda wc: str(wc.second)),
    # Milliseconds
    Token("SSS", "millisecond", r"(\d{3})", lambda wc: f"{wc.millisecond:03d}"),
    # Meridiem
    Token("A", "meridiem", r"((?i:am|pm))", lambda wc: "AM" if wc.hour < 12 else "PM"),
    Token("a", "meridiem", r"((?i:am|pm))", lambda wc: "am" if wc.hour < 12 else "pm"),
)

# Longest first; sorted() is stable so equal lengths keep table order
TOKENS_BY_LENGTH: tuple[Token, ...] = tuple(
    sorted(TOKENS, key=lambda token: len(token.symbol), reverse=True)
)


@dataclass(frozen=True)
class Segment:
    """One piece of a segmented pattern: a token or a literal character."""

    text: str
    token: Token | None = None

    @property
    def is_token(self) -> bool:
        return self.token is not None


def match_token(
    pattern: str, index: int, tokens: Sequence[Token] = TOKENS_BY_LENGTH
) -> Token | None:
    """Return the first token in ``tokens`` that starts at ``index``."""
    for token in tokens:
        if pattern.startswith(token.symbol, index):
            return token
    return None


def segment_pattern(
    pattern: str,
    tokens: Sequence[Token] = TOKENS_BY_LENGTH,
    max_iterations: int | None = None,
) -> list[Segment]:
    """
    Split a format pattern into token and literal segments.

    Characters between ``[`` and ``]`` are always literal (the brackets are
    dropped); an unterminated ``[`` makes the rest of the pattern literal
    and a stray ``]`` is dropped.

    Args:
        pattern: Format pattern
        tokens: Token table, tried in order at each position
        max_iterations: Bound on scanning steps (default ``2 * len(pattern) + 1``)

    Returns:
        Segments in pattern order

    Raises:
        PatternError: If scanning exceeds the iteration bound

    Examples:
        >>> [s.text for s in segment_pattern("YYYY-MM")]
        ['YYYY', '-', 'MM']
        >>> [s.is_token for s in segment_pattern("[at] h")]
        [False, False, False, True]
    """
    limit = max_iterations if max_iterations is not None else 2 * len(pattern) + 1
    segments: list[Segment] = []
    in_literal = False
    iterations = 0
    i = 0

    while i < len(pattern):
        iterations += 1
        if iterations > limit:
            raise PatternError(
                f"Format parsing exceeded maximum iterations ({limit}) for pattern {pattern!r}",
                context=pattern,
            )

        char = pattern[i]

        if in_literal:
            if char == LITERAL_CLOSE:
                in_literal = False
            else:
                segments.append(Segment(char))
            i += 1
            continue

        if char == LITERAL_OPEN:
            in_literal = True
            i += 1
            continue

        if char == LITERAL_CLOSE:
            i += 1
            continue

        token = match_token(pattern, i, tokens)
        if token is None:
            segments.append(Segment(char))
            i += 1
        else:
            segments.append(Segment(token.symbol, token))
            i += len(token.symbol)

    return segments
