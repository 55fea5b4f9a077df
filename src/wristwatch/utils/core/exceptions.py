"""
Basic exception classes for WristWatch.

This module contains the exception classes shared by the parsers, the
timezone and locale adapters and the configuration layer, kept free of
imports so every module can use them without creating import cycles.

Parsing never raises for malformed data: parsers return a ``ParseFailure``
instead, and ``ParseError`` only appears when a caller explicitly unwraps
such a failure.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar


class ErrorSeverity(Enum):
    """How serious an error is for the caller."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ErrorCategory(Enum):
    """Which layer an error comes from."""

    PARSE = "parse"
    PATTERN = "pattern"
    TIMEZONE = "timezone"
    LOCALE = "locale"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


class WristWatchError(Exception):
    """
    Base class for WristWatch errors.

    Subclasses set ``default_category`` and ``default_severity``; both can
    still be overridden per instance. ``context`` carries the offending
    value (a zone id, a pattern, a path) for callers that want it.
    """

    default_category: ClassVar[ErrorCategory] = ErrorCategory.UNKNOWN
    default_severity: ClassVar[ErrorSeverity] = ErrorSeverity.MEDIUM

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        severity: ErrorSeverity | None = None,
        context: object | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.category: ErrorCategory = category or self.default_category
        self.severity: ErrorSeverity = severity or self.default_severity
        self.context: object | None = context


class ParseError(WristWatchError, ValueError):
    """Raised when a failed parse result is unwrapped."""

    default_category = ErrorCategory.PARSE
    default_severity = ErrorSeverity.LOW


class PatternError(WristWatchError, ValueError):
    """Raised when a format pattern cannot be segmented into tokens."""

    default_category = ErrorCategory.PATTERN
    default_severity = ErrorSeverity.LOW


class TimezoneError(WristWatchError, ValueError):
    """Unknown or malformed timezone identifiers."""

    default_category = ErrorCategory.TIMEZONE


class LocaleError(WristWatchError, ValueError):
    """Malformed locale identifiers."""

    default_category = ErrorCategory.LOCALE


class ConfigurationError(WristWatchError):
    """Invalid or unreadable configuration files."""

    default_category = ErrorCategory.CONFIGURATION
    default_severity = ErrorSeverity.HIGH
