"""Tests for configuration schema validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from wristwatch.config.schema import (
    ArithmeticConfig,
    FormattingConfig,
    LoggingConfig,
    TimezoneConfig,
    WristWatchConfig,
)
from wristwatch.core.types import DEFAULT_LOCALE, DEFAULT_PATTERN, TimeUnit


class TestDefaults:
    """Test default configuration values."""

    def test_defaults(self, default_config: WristWatchConfig) -> None:
        """Test that every section has working defaults."""
        assert default_config.formatting.default_pattern == DEFAULT_PATTERN
        assert default_config.formatting.default_locale == DEFAULT_LOCALE
        assert default_config.arithmetic.default_diff_unit is TimeUnit.DAY
        assert default_config.timezone.default is None
        assert default_config.logging.level == "WARNING"
        assert default_config.logging.file is None

    def test_empty_mapping(self) -> None:
        """Test that an empty mapping validates to the defaults."""
        assert WristWatchConfig.model_validate({}) == WristWatchConfig()


class TestValidation:
    """Test field validation."""

    def test_full_config(self, custom_config_dict: dict[str, object]) -> None:
        """Test a fully populated configuration."""
        config = WristWatchConfig.model_validate(custom_config_dict)
        assert config.formatting.default_pattern == "DD/MM/YYYY"
        assert config.formatting.default_locale == "fr-FR"
        assert config.arithmetic.default_diff_unit is TimeUnit.HOUR
        assert config.timezone.default == "Asia/Tokyo"
        assert config.logging.level == "INFO"

    def test_invalid_config(self, invalid_config_dict: dict[str, object]) -> None:
        """Test that each invalid field is reported."""
        with pytest.raises(ValidationError) as exc_info:
            _ = WristWatchConfig.model_validate(invalid_config_dict)

        locations = {error["loc"] for error in exc_info.value.errors()}
        assert ("formatting", "default_locale") in locations
        assert ("arithmetic", "default_diff_unit") in locations
        assert ("timezone", "default") in locations

    def test_unknown_keys_rejected(self) -> None:
        """Test that unknown keys are errors."""
        with pytest.raises(ValidationError):
            _ = WristWatchConfig.model_validate({"formatting": {}, "colors": {}})
        with pytest.raises(ValidationError):
            _ = WristWatchConfig.model_validate({"formatting": {"default_patern": "YYYY"}})

    def test_empty_pattern_rejected(self) -> None:
        """Test that the default pattern cannot be empty."""
        with pytest.raises(ValidationError):
            _ = FormattingConfig(default_pattern="")

    @pytest.mark.parametrize("locale", ["en", "en-US", "fr_FR", "zh-Hant-TW"])
    def test_locale_shapes(self, locale: str) -> None:
        """Test accepted locale identifiers."""
        assert FormattingConfig(default_locale=locale).default_locale == locale

    def test_unit_from_string(self) -> None:
        """Test unit coercion from its name."""
        assert ArithmeticConfig.model_validate({"default_diff_unit": "week"}).default_diff_unit is TimeUnit.WEEK

    def test_invalid_timezone(self) -> None:
        """Test that unknown zones are rejected."""
        with pytest.raises(ValidationError, match="Unknown timezone"):
            _ = TimezoneConfig(default="Mars/Olympus")

    def test_level_is_case_insensitive(self) -> None:
        """Test lowercase level names."""
        assert LoggingConfig.model_validate({"level": "debug"}).level == "DEBUG"

    def test_invalid_level(self) -> None:
        """Test that unknown levels are rejected."""
        with pytest.raises(ValidationError):
            _ = LoggingConfig.model_validate({"level": "LOUD"})

    def test_log_file_path(self) -> None:
        """Test that the log file is a Path."""
        config = LoggingConfig.model_validate({"file": "logs/wristwatch.log"})
        assert config.file == Path("logs/wristwatch.log")

    def test_assignment_is_validated(self, default_config: WristWatchConfig) -> None:
        """Test validate_assignment on the root model."""
        with pytest.raises(ValidationError):
            default_config.formatting = "nope"  # pyright: ignore[reportAttributeAccessIssue]
