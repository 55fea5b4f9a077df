"""Timestamp parsing for WristWatch."""

import math

from ..core.instant import Instant


def parse_timestamp(input: int | float) -> Instant:
    """
    Create an instant from milliseconds since the Unix epoch.

    Floats are truncated toward zero to whole milliseconds.

    Args:
        input: Milliseconds since the epoch

    Returns:
        Instant for the timestamp

    Raises:
        TypeError: If the input is not a number
        ValueError: If the input is NaN or infinite

    Examples:
        >>> parse_timestamp(1764928800000).isoformat()
        '2025-12-05T10:00:00.000Z'
    """
    if isinstance(input, bool) or not isinstance(input, (int, float)):
        raise TypeError(f"Timestamp must be a number, got {type(input).__name__}")

    if isinstance(input, float):
        if not math.isfinite(input):
            raise ValueError(f"Timestamp must be finite, got {input}")
        input = math.trunc(input)

    return Instant(input)
