"""
Command-line argument parsing for WristWatch.

This module builds the argparse parser for the ``wristwatch`` command and
validates the optional configuration file path.
"""

import argparse
from pathlib import Path

from ...core.types import TimeUnit
from ...operations.formatting import DATE_STYLES
from ..core.version import get_version

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class PathValidationError(Exception):
    """Raised when a path validation fails."""

    pass


def validate_config_file_path(config_file_str: str) -> Path:
    """
    Validate configuration file path.

    Args:
        config_file_str: String path to configuration file

    Returns:
        Resolved Path object for the configuration file

    Raises:
        PathValidationError: If the configuration file path is invalid
    """
    try:
        config_file = Path(config_file_str).expanduser().resolve()
    except (OSError, ValueError) as e:
        raise PathValidationError(f"Invalid config file path: {e}") from e

    if config_file.exists() and config_file.is_dir():
        raise PathValidationError(
            f"Config file path exists but is not a file: {config_file}"
        )

    if not config_file.exists():
        raise PathValidationError(f"Config file does not exist: {config_file}")

    return config_file


def _unit_choices() -> list[str]:
    return [unit.value for unit in TimeUnit]


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for WristWatch.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="wristwatch",
        description="WristWatch - format, parse and do arithmetic on dates and times",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  wristwatch now --pattern "YYYY-MM-DD HH:mm"
    Print the current time

  wristwatch --tz America/New_York format 2025-12-05T14:30:45Z
    Format an ISO value in another zone

  wristwatch parse "12/05/2025 2:30 PM" --pattern "MM/DD/YYYY h:mm A"
    Parse with a custom pattern and print ISO 8601

  wristwatch add 2025-01-31 1 month --pattern YYYY-MM-DD
    Calendar arithmetic with clamping

  wristwatch diff 2025-03-01 2025-01-15 --unit week
    Difference between two values
""",
    )

    _ = parser.add_argument(
        "--config-file",
        type=str,
        default=None,
        help="Path to a YAML configuration file with default pattern, locale, unit and zone.",
        metavar="PATH",
    )

    _ = parser.add_argument(
        "--tz",
        type=str,
        default=None,
        help="IANA timezone used for wall-clock fields (default: configured or host zone).",
        metavar="ZONE",
    )

    _ = parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Console log level (default: configured level, WARNING).",
        metavar="LEVEL",
    )

    _ = parser.add_argument(
        "--version", action="version", version=f"%(prog)s {get_version()}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    now_parser = subparsers.add_parser("now", help="Print the current time")
    _ = now_parser.add_argument("--pattern", type=str, default=None, help="Format pattern")

    format_parser = subparsers.add_parser("format", help="Format a date value")
    _ = format_parser.add_argument("value", help="Timestamp in milliseconds or a date string")
    _ = format_parser.add_argument("--pattern", type=str, default=None, help="Format pattern")

    parse_parser = subparsers.add_parser("parse", help="Parse a date value and print ISO 8601")
    _ = parse_parser.add_argument("value", help="Date string to parse")
    _ = parse_parser.add_argument(
        "--pattern",
        type=str,
        default=None,
        help="Custom token pattern; without it ISO and common formats are tried",
    )

    add_parser = subparsers.add_parser("add", help="Add an amount of a unit to a date value")
    _ = add_parser.add_argument("value", help="Timestamp in milliseconds or a date string")
    _ = add_parser.add_argument("amount", type=int, help="Amount to add (may be negative)")
    _ = add_parser.add_argument("unit", choices=_unit_choices(), help="Time unit")
    _ = add_parser.add_argument("--pattern", type=str, default=None, help="Format pattern")

    diff_parser = subparsers.add_parser("diff", help="Difference A - B in a unit")
    _ = diff_parser.add_argument("a", help="First date value")
    _ = diff_parser.add_argument("b", help="Second date value")
    _ = diff_parser.add_argument("--unit", choices=_unit_choices(), default=None, help="Time unit")

    relative_parser = subparsers.add_parser("relative", help="Describe a date relative to now")
    _ = relative_parser.add_argument("value", help="Date value")
    _ = relative_parser.add_argument(
        "--reference", type=str, default=None, help="Reference date value (default: now)"
    )

    locale_parser = subparsers.add_parser("locale", help="Locale-aware formatting")
    _ = locale_parser.add_argument("value", help="Date value")
    _ = locale_parser.add_argument("--locale", type=str, default=None, help="Locale identifier")
    _ = locale_parser.add_argument(
        "--style",
        choices=DATE_STYLES,
        default=None,
        help="Date style; short and full map to the short and long date forms",
    )

    return parser
