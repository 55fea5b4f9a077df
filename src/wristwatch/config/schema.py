"""Configuration schema for WristWatch using nested Pydantic models."""

import re
from pathlib import Path
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.types import DEFAULT_LOCALE, DEFAULT_PATTERN, TimeUnit
from ..utils.time.timezone import is_valid_timezone

LOCALE_PATTERN = r"^[A-Za-z]{2,3}([-_][A-Za-z0-9]{2,8})*$"


class FormattingConfig(BaseModel):
    """Formatting defaults."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    default_pattern: str = Field(
        default=DEFAULT_PATTERN,
        description="Token pattern used when no pattern is given",
        min_length=1,
    )
    default_locale: str = Field(
        default=DEFAULT_LOCALE,
        description="Locale identifier for locale-aware formatting (e.g. en-US, fr_FR)",
    )

    @field_validator("default_locale")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        """Validate the shape of the locale identifier."""
        if not re.match(LOCALE_PATTERN, v):
            raise ValueError(f"Locale must look like 'en' or 'en-US', got: {v}")
        return v


class ArithmeticConfig(BaseModel):
    """Arithmetic defaults."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    default_diff_unit: TimeUnit = Field(
        default=TimeUnit.DAY,
        description="Unit used by diff when none is given",
    )


class TimezoneConfig(BaseModel):
    """Timezone configuration."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    default: str | None = Field(
        default=None,
        description="IANA timezone for wall-clock fields; null uses the host local zone",
    )

    @field_validator("default")
    @classmethod
    def validate_timezone(cls, v: str | None) -> str | None:
        """Validate the timezone against the IANA database."""
        if v is not None and not is_valid_timezone(v):
            raise ValueError(f"Unknown timezone: {v}")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration for the command-line interface."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Minimum level written to the console",
    )
    file: Path | None = Field(
        default=None,
        description="Optional log file, rotated at 5MB",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v


class WristWatchConfig(BaseModel):
    """
    Configuration model for WristWatch.

    Every section is optional; an empty file yields the defaults.
    """

    formatting: FormattingConfig = Field(default_factory=FormattingConfig)
    arithmetic: ArithmeticConfig = Field(default_factory=ArithmeticConfig)
    timezone: TimezoneConfig = Field(default_factory=TimezoneConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config: ClassVar[ConfigDict] = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="forbid",
    )
