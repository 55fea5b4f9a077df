"""Core value types shared across WristWatch."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Literal, NamedTuple, NoReturn, TypeAlias, TypeVar

from ..utils.core.exceptions import ParseError

T = TypeVar("T")

SECOND_MS = 1000
MINUTE_MS = SECOND_MS * 60
HOUR_MS = MINUTE_MS * 60
DAY_MS = HOUR_MS * 24
WEEK_MS = DAY_MS * 7

DEFAULT_PATTERN = "YYYY-MM-DD HH:mm:ss"
DEFAULT_LOCALE = "en-US"


class TimeUnit(Enum):
    """Time units supported by date arithmetic."""

    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def coerce(cls, unit: TimeUnit | str) -> TimeUnit:
        """
        Accept a TimeUnit or its string value.

        Raises:
            ValueError: If the unit is unknown

        Examples:
            >>> TimeUnit.coerce("day") is TimeUnit.DAY
            True
        """
        if isinstance(unit, cls):
            return unit
        try:
            return cls(unit)
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown time unit {unit!r}; expected one of: {valid}") from None

    @property
    def is_fixed(self) -> bool:
        """True for units with a constant length in milliseconds."""
        return self not in (TimeUnit.MONTH, TimeUnit.YEAR)

    @property
    def milliseconds(self) -> int:
        """
        Length of a fixed-duration unit.

        Raises:
            ValueError: For calendar units, whose length varies
        """
        match self:
            case TimeUnit.MILLISECOND:
                return 1
            case TimeUnit.SECOND:
                return SECOND_MS
            case TimeUnit.MINUTE:
                return MINUTE_MS
            case TimeUnit.HOUR:
                return HOUR_MS
            case TimeUnit.DAY:
                return DAY_MS
            case TimeUnit.WEEK:
                return WEEK_MS
            case _:
                raise ValueError(f"{self.value} has no fixed length in milliseconds")


class DateComponents(NamedTuple):
    """Wall-clock fields of an instant. Month is 1-based."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int


@dataclass(frozen=True)
class ParseSuccess(Generic[T]):
    """Successful parse carrying the parsed value."""

    value: T
    success: Literal[True] = True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class ParseFailure:
    """Failed parse carrying a human-readable reason."""

    error: str
    success: Literal[False] = False

    def unwrap(self) -> NoReturn:
        """Raise the failure as a ParseError."""
        raise ParseError(self.error)


ParseResult: TypeAlias = ParseSuccess[T] | ParseFailure
