"""
End-to-end scenarios through the public package API.
"""

import pytest

import wristwatch
from wristwatch import (
    Instant,
    ParseFailure,
    ParseSuccess,
    add,
    format,
    parse_custom,
    parse_iso,
    to_relative,
)


def _iso(value: str) -> Instant:
    return parse_iso(value, tz="UTC").unwrap()


class TestScenarios:
    """Scenarios exercised through the top-level package."""

    @pytest.mark.parametrize(
        ("start", "expected"),
        [
            ("2025-01-31", "2025-02-28"),
            ("2025-03-31", "2025-04-30"),
        ],
    )
    def test_month_end_addition(self, start: str, expected: str) -> None:
        """Test month addition that clamps to the last day."""
        assert format(add(_iso(start), 1, "month"), "YYYY-MM-DD") == expected

    def test_twelve_hour_formatting(self) -> None:
        """Test 12-hour formats for an afternoon time."""
        instant = _iso("2025-12-06T14:30:45")
        assert format(instant, "h:mm A") == "2:30 PM"
        assert format(instant, "hh:mm:ss a") == "02:30:45 pm"

    def test_custom_parse(self) -> None:
        """Test a US date with a 12-hour time."""
        result = parse_custom("12/05/2025 2:30 PM", "MM/DD/YYYY h:mm A")
        assert isinstance(result, ParseSuccess)
        assert (result.value.hour, result.value.minute) == (14, 30)

    @pytest.mark.parametrize(
        ("offset", "expected"),
        [
            (5_000, "just now"),
            (-7_200_000, "2 hours ago"),
            (604_800_000, "in 1 week"),
        ],
    )
    def test_relative(self, offset: int, expected: str) -> None:
        """Test relative descriptions for fixed offsets."""
        reference = Instant(1764945045123)
        assert to_relative(Instant(reference.timestamp + offset), reference) == expected

    @pytest.mark.parametrize("value", ["", "not-a-date", "2025-13-01T00:00:00Z"])
    def test_invalid_iso(self, value: str) -> None:
        """Test that invalid ISO strings are failures, not exceptions."""
        assert isinstance(parse_iso(value), ParseFailure)

    def test_public_api(self) -> None:
        """Test that every exported name exists."""
        for name in wristwatch.__all__:
            assert hasattr(wristwatch, name), name
