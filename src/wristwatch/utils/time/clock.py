"""
Current time providers for WristWatch.

Every operation that needs "now" takes a clock argument defaulting to
``system_clock`` so callers and tests can substitute a fixed clock.
"""

import time
from typing import Callable

# A clock returns the current time as integer milliseconds since the epoch.
Clock = Callable[[], int]


def system_clock() -> int:
    """
    Read the host clock.

    Returns:
        Milliseconds since the Unix epoch (UTC)

    Examples:
        >>> system_clock() > 1_600_000_000_000
        True
    """
    return time.time_ns() // 1_000_000


def fixed_clock(timestamp: int) -> Clock:
    """
    Create a clock that always reports the same instant.

    Args:
        timestamp: Milliseconds since the Unix epoch

    Returns:
        Clock returning ``timestamp`` on every call

    Examples:
        >>> clock = fixed_clock(1764945000000)
        >>> clock()
        1764945000000
    """

    def _clock() -> int:
        return timestamp

    return _clock
