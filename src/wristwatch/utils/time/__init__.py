"""
Unified time management utilities for WristWatch.

This package provides the clock, timezone and calendar decomposition
helpers shared by the parsers and operations.
"""

from .calendar import (
    WallClock,
    datetime_to_timestamp,
    from_local_fields,
    from_wall_clock,
    local_datetime,
    local_wall_clock,
    to_zoned_datetime,
    wall_clock,
)
from .clock import Clock, fixed_clock, system_clock
from .timezone import (
    ensure_timezone_aware,
    get_local_timezone,
    get_system_timezone,
    is_valid_timezone,
    resolve_timezone,
    to_local,
    to_timezone,
    to_utc,
)

__all__ = [
    "WallClock",
    "datetime_to_timestamp",
    "from_local_fields",
    "from_wall_clock",
    "local_datetime",
    "local_wall_clock",
    "to_zoned_datetime",
    "wall_clock",
    "Clock",
    "fixed_clock",
    "system_clock",
    "ensure_timezone_aware",
    "get_local_timezone",
    "get_system_timezone",
    "is_valid_timezone",
    "resolve_timezone",
    "to_local",
    "to_timezone",
    "to_utc",
]
