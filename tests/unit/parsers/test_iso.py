"""
Tests for ISO 8601 and timestamp parsing and the parse() dispatcher.
"""

import math

import pytest

from wristwatch.core.types import ParseFailure, ParseSuccess
from wristwatch.operations.formatting import format
from wristwatch.parsers import parse, parse_iso, parse_timestamp
from wristwatch.utils.time.clock import fixed_clock

from tests.utils.test_helpers import make_instant


class TestParseIso:
    """Test ISO 8601 parsing."""

    @pytest.mark.parametrize(
        ("input", "expected"),
        [
            ("2025-12-05T10:00:00Z", 1764928800000),
            ("2025-12-05T10:00:00.250Z", 1764928800250),
            ("2025-12-05T19:00:00+09:00", 1764928800000),
            ("2025-12-05T05:00:00-05:00", 1764928800000),
            ("2025-12-05T10:00:00", 1764928800000),
            ("2025-12-05", 1764892800000),
        ],
    )
    def test_accepted_forms(self, input: str, expected: int) -> None:
        """Test offsets, fractions and date-only forms."""
        result = parse_iso(input)
        assert isinstance(result, ParseSuccess)
        assert result.value.timestamp == expected

    def test_naive_uses_tz(self) -> None:
        """Test that values without an offset use the given zone."""
        result = parse_iso("2025-12-05T19:00:00", tz="Asia/Tokyo")
        assert isinstance(result, ParseSuccess)
        assert result.value.timestamp == 1764928800000
        assert result.value.zone == "Asia/Tokyo"

    def test_naive_uses_host_zone(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the host zone applies by default."""
        monkeypatch.setenv("TZ", "America/New_York")
        result = parse_iso("2025-12-05T05:00:00")
        assert isinstance(result, ParseSuccess)
        assert result.value.timestamp == 1764928800000

    def test_offset_ignores_tz(self) -> None:
        """Test that an explicit offset wins over tz."""
        result = parse_iso("2025-12-05T10:00:00Z", tz="Asia/Tokyo")
        assert isinstance(result, ParseSuccess)
        assert result.value.timestamp == 1764928800000

    def test_offset_with_invalid_zone(self) -> None:
        """Test that an unknown zone fails even when the offset is explicit."""
        result = parse_iso("2025-12-05T10:00:00Z", tz="Invalid/Timezone")
        assert isinstance(result, ParseFailure)
        assert "Unknown timezone" in result.error

    @pytest.mark.parametrize(
        "input",
        ["", "   ", "not-a-date", "2025-13-01T00:00:00Z", "2025-02-30", "2025-12-05T25:00:00Z"],
    )
    def test_invalid_strings(self, input: str) -> None:
        """Test that invalid strings are failures, never exceptions."""
        assert isinstance(parse_iso(input), ParseFailure)

    @pytest.mark.parametrize("input", [None, 42, 1.5, ["2025-12-05"]])
    def test_non_strings(self, input: object) -> None:
        """Test that non-string input is a failure."""
        result = parse_iso(input)
        assert isinstance(result, ParseFailure)
        assert result.error == "Input must be a string"

    def test_invalid_zone(self) -> None:
        """Test that an unknown zone for a naive value is a failure."""
        assert isinstance(parse_iso("2025-12-05T10:00:00", tz="Invalid/Timezone"), ParseFailure)


class TestParseTimestamp:
    """Test millisecond timestamp parsing."""

    def test_integer(self) -> None:
        """Test an integer timestamp."""
        assert parse_timestamp(1764928800000).isoformat() == "2025-12-05T10:00:00.000Z"

    def test_negative(self) -> None:
        """Test a timestamp before the epoch."""
        assert parse_timestamp(-1).timestamp == -1

    def test_float_truncates(self) -> None:
        """Test truncation toward zero."""
        assert parse_timestamp(1.9).timestamp == 1
        assert parse_timestamp(-1.9).timestamp == -1

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite(self, value: float) -> None:
        """Test that non-finite numbers raise."""
        with pytest.raises(ValueError):
            _ = parse_timestamp(value)

    @pytest.mark.parametrize("value", [True, "123", None])
    def test_wrong_type(self, value: object) -> None:
        """Test that non-numbers raise TypeError."""
        with pytest.raises(TypeError):
            _ = parse_timestamp(value)  # pyright: ignore[reportArgumentType]


class TestParse:
    """Test the parse() dispatcher."""

    def test_number(self) -> None:
        """Test that numbers are timestamps."""
        result = parse(0)
        assert isinstance(result, ParseSuccess)
        assert result.value.timestamp == 0

    def test_timestamp_beyond_year_9999(self) -> None:
        """Test that a huge timestamp parses and then formats."""
        result = parse(10**15)
        assert isinstance(result, ParseSuccess)
        assert format(result.value.with_zone("UTC"), "YYYY-MM-DD") == "33658-09-27"

    def test_non_finite_number(self) -> None:
        """Test that non-finite numbers are failures."""
        assert isinstance(parse(math.nan), ParseFailure)

    def test_offset_with_invalid_zone(self) -> None:
        """Test that an unknown zone is a failure on the ISO path."""
        assert isinstance(parse("2025-12-05T10:00:00Z", tz="Invalid/Timezone"), ParseFailure)

    def test_iso_first(self) -> None:
        """Test that ISO strings are handled by the ISO parser."""
        result = parse("2025-12-05T10:00:00Z")
        assert isinstance(result, ParseSuccess)
        assert result.value.timestamp == 1764928800000

    def test_general_fallback(self) -> None:
        """Test free-form date strings."""
        result = parse("December 5, 2025 10:00", tz="UTC")
        assert isinstance(result, ParseSuccess)
        assert result.value == make_instant(2025, 12, 5, 10)

    def test_general_fallback_with_offset(self) -> None:
        """Test free-form strings carrying their own zone."""
        result = parse("Fri, 05 Dec 2025 10:00:00 +0000")
        assert isinstance(result, ParseSuccess)
        assert result.value.timestamp == 1764928800000

    def test_missing_fields_from_clock(self) -> None:
        """Test that a bare time takes today's date from the clock."""
        result = parse("3:15 pm", tz="UTC", clock=fixed_clock(1764945045123))
        assert isinstance(result, ParseSuccess)
        assert result.value == make_instant(2025, 12, 5, 15, 15)

    def test_unparsable(self) -> None:
        """Test that a string neither parser accepts is a failure."""
        result = parse("not-a-date")
        assert isinstance(result, ParseFailure)
        assert "not-a-date" in result.error

    @pytest.mark.parametrize("input", [None, True, [1], {"a": 1}])
    def test_other_types(self, input: object) -> None:
        """Test that other input types are failures."""
        result = parse(input)
        assert isinstance(result, ParseFailure)
        assert result.error == "Input must be a string or number"
