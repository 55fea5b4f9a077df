"""
Operations on instants: formatting, arithmetic and comparison.

All functions are pure and return new values.
"""

from .arithmetic import add, diff, subtract
from .comparison import equals, is_after, is_before, is_between
from .formatting import (
    format,
    format_with_locale,
    to_iso,
    to_long_date,
    to_relative,
    to_short_date,
)

__all__ = [
    "add",
    "subtract",
    "diff",
    "equals",
    "is_before",
    "is_after",
    "is_between",
    "format",
    "format_with_locale",
    "to_iso",
    "to_long_date",
    "to_relative",
    "to_short_date",
]
