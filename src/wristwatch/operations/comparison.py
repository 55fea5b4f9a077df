"""
Comparison operations for WristWatch.

All comparisons use raw timestamps, so they are independent of the
display zone of either instant.
"""

from ..core.instant import Instant


def equals(a: Instant, b: Instant) -> bool:
    """True if both instants are the same moment in time."""
    return a.timestamp == b.timestamp


def is_before(a: Instant, b: Instant) -> bool:
    """True if ``a`` is strictly earlier than ``b``."""
    return a.timestamp < b.timestamp


def is_after(a: Instant, b: Instant) -> bool:
    """True if ``a`` is strictly later than ``b``."""
    return a.timestamp > b.timestamp


def is_between(instant: Instant, start: Instant, end: Instant) -> bool:
    """
    True if ``instant`` lies within ``[start, end]``, both ends inclusive.

    Examples:
        >>> is_between(Instant(5), Instant(5), Instant(10))
        True
        >>> is_between(Instant(11), Instant(5), Instant(10))
        False
    """
    return not is_before(instant, start) and not is_after(instant, end)
