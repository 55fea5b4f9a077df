"""
Core value types for WristWatch.

This package holds the Instant value, the shared token table and the
small types (units, parse results, components) used by every operation.
"""

from .factories import now
from .instant import Instant
from .types import (
    DEFAULT_LOCALE,
    DEFAULT_PATTERN,
    DateComponents,
    ParseFailure,
    ParseResult,
    ParseSuccess,
    TimeUnit,
)

__all__ = [
    "Instant",
    "now",
    "TimeUnit",
    "DateComponents",
    "ParseSuccess",
    "ParseFailure",
    "ParseResult",
    "DEFAULT_PATTERN",
    "DEFAULT_LOCALE",
]
