"""
Command-line entry point for WristWatch.

This module configures logging, loads the optional configuration file and
dispatches the ``wristwatch`` sub-commands to the library functions.
"""

import argparse
import logging
import logging.handlers
import re
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

import yaml
from pydantic import ValidationError

from .config.manager import ConfigManager
from .config.schema import WristWatchConfig
from .core.factories import now
from .core.instant import Instant
from .operations.arithmetic import add, diff
from .operations.formatting import (
    format,
    format_with_locale,
    to_iso,
    to_long_date,
    to_relative,
    to_short_date,
)
from .parsers import parse, parse_custom
from .utils.cli.args import PathValidationError, create_argument_parser, validate_config_file_path
from .utils.core.exceptions import ConfigurationError, WristWatchError
from .utils.time.clock import Clock, system_clock
from .utils.time.timezone import resolve_timezone

logger = logging.getLogger(__name__)

CONSOLE_HANDLER_NAME = "wristwatch-console"
FILE_HANDLER_NAME = "wristwatch-file"

TIMESTAMP_PATTERN = re.compile(r"-?\d+")


def setup_logging(level: str = "WARNING", log_file: Path | None = None) -> None:
    """
    Configure logging for the command-line interface.

    Console messages go to stderr so they never mix with command output.
    When a log file is given, a rotating file handler records everything
    from DEBUG up with the detailed formatter.

    Args:
        level: Console log level name
        log_file: Optional path of the rotating log file
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Replace handlers from a previous call only
    for handler in list(root_logger.handlers):
        if handler.name in (CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME):
            root_logger.removeHandler(handler)
            handler.close()

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
    )
    simple_formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setLevel(level.upper())
    console_handler.setFormatter(simple_formatter)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)


def load_configuration(config_file: str | None) -> WristWatchConfig:
    """
    Load the configuration named on the command line, or the defaults.

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    if config_file is None:
        return ConfigManager.load_or_default(None)

    try:
        config_path = validate_config_file_path(config_file)
        return ConfigManager.load_config(config_path)
    except ConfigurationError:
        raise
    except (PathValidationError, FileNotFoundError, yaml.YAMLError, ValidationError) as e:
        raise ConfigurationError(f"Failed to load configuration: {e}", context=config_file) from e


def read_value(value: str, tz: str | None, clock: Clock) -> Instant:
    """
    Turn a command-line value into an instant.

    Integer strings are millisecond timestamps; anything else goes through
    the general parser.

    Raises:
        ParseError: If the value cannot be parsed
    """
    if TIMESTAMP_PATTERN.fullmatch(value):
        return parse(int(value)).unwrap().with_zone(tz)
    return parse(value, tz=tz, clock=clock).unwrap()


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class CommandRunner:
    """Runs one parsed sub-command against the loaded configuration."""

    def __init__(self, config: WristWatchConfig, tz: str | None, clock: Clock) -> None:
        self.config: WristWatchConfig = config
        self.tz: str | None = tz
        self.clock: Clock = clock

    def pattern(self, args: argparse.Namespace) -> str:
        pattern: str | None = getattr(args, "pattern", None)
        return pattern if pattern is not None else self.config.formatting.default_pattern

    def value(self, raw: str) -> Instant:
        return read_value(raw, self.tz, self.clock)

    def run(self, args: argparse.Namespace) -> str:
        """Execute the sub-command and return its output line."""
        handlers: dict[str, Callable[[argparse.Namespace], str]] = {
            "now": self.cmd_now,
            "format": self.cmd_format,
            "parse": self.cmd_parse,
            "add": self.cmd_add,
            "diff": self.cmd_diff,
            "relative": self.cmd_relative,
            "locale": self.cmd_locale,
        }
        command: str = args.command
        logger.debug(f"Running command {command!r}")
        return handlers[command](args)

    def cmd_now(self, args: argparse.Namespace) -> str:
        return format(now(self.tz, clock=self.clock), self.pattern(args))

    def cmd_format(self, args: argparse.Namespace) -> str:
        return format(self.value(args.value), self.pattern(args), tz=self.tz)

    def cmd_parse(self, args: argparse.Namespace) -> str:
        if args.pattern is not None:
            result = parse_custom(args.value, args.pattern, tz=self.tz, clock=self.clock)
            return to_iso(result.unwrap())
        return to_iso(self.value(args.value))

    def cmd_add(self, args: argparse.Namespace) -> str:
        shifted = add(self.value(args.value), args.amount, args.unit, tz=self.tz)
        return format(shifted, self.pattern(args), tz=self.tz)

    def cmd_diff(self, args: argparse.Namespace) -> str:
        unit = args.unit if args.unit is not None else self.config.arithmetic.default_diff_unit
        return _format_number(diff(self.value(args.a), self.value(args.b), unit, tz=self.tz))

    def cmd_relative(self, args: argparse.Namespace) -> str:
        reference = None if args.reference is None else self.value(args.reference)
        return to_relative(self.value(args.value), reference, clock=self.clock)

    def cmd_locale(self, args: argparse.Namespace) -> str:
        instant = self.value(args.value)
        locale: str = args.locale if args.locale is not None else self.config.formatting.default_locale
        match args.style:
            case None:
                return format_with_locale(instant, locale, tz=self.tz)
            case "short":
                return to_short_date(instant, locale, tz=self.tz)
            case "full":
                return to_long_date(instant, locale, tz=self.tz)
            case style:
                return format_with_locale(instant, locale, date_style=style, tz=self.tz)


def main(argv: Sequence[str] | None = None, *, clock: Clock = system_clock) -> int:
    """
    Main entry point for the WristWatch command.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])
        clock: Source of the current time

    Returns:
        Process exit status: 0 on success, 1 on a parse or WristWatch error.
        Usage errors exit with status 2 through argparse.
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        config = load_configuration(args.config_file)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(args.log_level or config.logging.level, config.logging.file)

    tz: str | None = args.tz if args.tz is not None else config.timezone.default

    try:
        if tz is not None:
            _ = resolve_timezone(tz)
        output = CommandRunner(config, tz, clock).run(args)
    except (WristWatchError, ValueError, OverflowError) as e:
        logger.debug(f"Command {args.command!r} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
