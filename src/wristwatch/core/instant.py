"""
Immutable instant value for WristWatch.

An Instant is a count of milliseconds since the Unix epoch. Every calendar
view (year, month, ...) is derived on demand from the wall clock of its
display zone; nothing else is stored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ..utils.core.exceptions import TimezoneError
from ..utils.time.calendar import WallClock, datetime_to_timestamp, local_datetime, local_wall_clock
from ..utils.time.clock import Clock, system_clock
from ..utils.time.timezone import UTC_ZONE, ensure_timezone_aware, is_valid_timezone
from .types import DateComponents


@dataclass(frozen=True, order=True)
class Instant:
    """
    A point in time with millisecond precision.

    Equality, hashing and ordering use ``timestamp`` only. ``zone`` is the
    optional IANA identifier used to display the instant; None means the
    host local zone. An unknown zone is rejected at construction. Any
    integer timestamp is valid, including ones outside the years 1..9999.

    Examples:
        >>> a = Instant(1764928800000)
        >>> a == Instant(1764928800000, zone="Asia/Tokyo")
        True
        >>> a.components("UTC").hour
        10
    """

    timestamp: int
    zone: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.timestamp, bool) or not isinstance(self.timestamp, int):
            raise TypeError(
                f"Instant timestamp must be an integer, got {type(self.timestamp).__name__}"
            )
        if self.zone is not None and not is_valid_timezone(self.zone):
            raise TimezoneError(f"Unknown timezone: {self.zone}", context=self.zone)

    @classmethod
    def now(cls, zone: str | None = None, clock: Clock = system_clock) -> Instant:
        """
        Create an instant for the current time.

        Args:
            zone: Optional display zone
            clock: Source of the current time

        Returns:
            Instant for the clock's current reading
        """
        return cls(clock(), zone=zone)

    @classmethod
    def from_datetime(cls, dt: datetime, zone: str | None = None) -> Instant:
        """
        Create an instant from a datetime.

        Naive datetimes are wall-clock time in ``zone`` (host local zone by
        default). Microseconds are floored to milliseconds.
        """
        return cls(datetime_to_timestamp(ensure_timezone_aware(dt, zone)), zone=zone)

    def to_datetime(self, tz: str | None = None) -> datetime:
        """
        Aware datetime on the wall clock of ``tz``, else the display zone.

        Raises:
            TimezoneError: If the zone is unknown
            OverflowError: If the instant is outside the years 1..9999
        """
        return local_datetime(self.timestamp, tz if tz is not None else self.zone)

    def wall_clock(self, tz: str | None = None) -> WallClock:
        """Wall-clock fields and weekday in ``tz``, else the display zone."""
        return local_wall_clock(self.timestamp, tz if tz is not None else self.zone)

    def components(self, tz: str | None = None) -> DateComponents:
        """Wall-clock fields in ``tz``, else the display zone."""
        return DateComponents(*self.wall_clock(tz)[:7])

    def with_zone(self, zone: str | None) -> Instant:
        """
        Same instant with another display zone.

        Raises:
            TimezoneError: If ``zone`` is not a known zone
        """
        return Instant(self.timestamp, zone=zone)

    def isoformat(self) -> str:
        """ISO 8601 representation in UTC with millisecond precision."""
        fields = self.wall_clock(UTC_ZONE)
        return (
            f"{fields.year:04d}-{fields.month:02d}-{fields.day:02d}"
            f"T{fields.hour:02d}:{fields.minute:02d}:{fields.second:02d}"
            f".{fields.millisecond:03d}Z"
        )

    @property
    def year(self) -> int:
        return self.wall_clock().year

    @property
    def month(self) -> int:
        return self.wall_clock().month

    @property
    def day(self) -> int:
        return self.wall_clock().day

    @property
    def hour(self) -> int:
        return self.wall_clock().hour

    @property
    def minute(self) -> int:
        return self.wall_clock().minute

    @property
    def second(self) -> int:
        return self.wall_clock().second

    @property
    def millisecond(self) -> int:
        return self.wall_clock().millisecond

    @property
    def weekday(self) -> int:
        """Day of week, 0 = Sunday through 6 = Saturday."""
        return self.wall_clock().weekday

    def __str__(self) -> str:
        return self.isoformat()
