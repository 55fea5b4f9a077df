"""
Property-based tests for round trips and ordering laws.
"""

from zoneinfo import ZoneInfo

from hypothesis import given
from hypothesis.strategies import builds, integers, sampled_from

from wristwatch.core.instant import Instant
from wristwatch.core.types import ParseSuccess
from wristwatch.operations.arithmetic import add, subtract
from wristwatch.operations.comparison import equals, is_after, is_before, is_between
from wristwatch.operations.formatting import format, to_iso
from wristwatch.parsers.custom import parse_custom
from wristwatch.parsers.iso import parse_iso
from wristwatch.utils.time.calendar import CYCLE_MS, wall_clock

# 1900-01-01 through 2100-01-01
timestamps = integers(min_value=-2_208_988_800_000, max_value=4_102_444_800_000)
wide_timestamps = integers(min_value=-(10**18), max_value=10**18)
instants = builds(Instant, timestamps, sampled_from([None, "UTC", "Asia/Tokyo", "America/New_York"]))
fixed_units = sampled_from(["millisecond", "second", "minute", "hour", "day", "week"])
numeric_patterns = sampled_from(
    [
        "YYYY-MM-DD HH:mm:ss",
        "DD/MM/YYYY HH:mm:ss",
        "YYYYMMDDHHmmss",
        "HH:mm:ss [on] YYYY.MM.DD",
    ]
)


class TestArithmeticProperties:
    """Test arithmetic laws."""

    @given(instants, integers(min_value=-10_000, max_value=10_000), fixed_units)
    def test_fixed_unit_round_trip(self, instant: Instant, amount: int, unit: str) -> None:
        """Test that subtract undoes add exactly."""
        assert subtract(add(instant, amount, unit), amount, unit) == instant


class TestRoundTrips:
    """Test format and parse round trips."""

    @given(instants)
    def test_iso_round_trip(self, instant: Instant) -> None:
        """Test that ISO output parses back to the same instant."""
        result = parse_iso(to_iso(instant))
        assert isinstance(result, ParseSuccess)
        assert result.value == instant

    @given(timestamps, numeric_patterns)
    def test_numeric_pattern_round_trip(self, timestamp: int, pattern: str) -> None:
        """Test that numeric fields survive format then parse_custom."""
        instant = Instant(timestamp, zone="UTC")
        result = parse_custom(format(instant, pattern), pattern, tz="UTC")
        assert isinstance(result, ParseSuccess)
        assert result.value.components()[:6] == instant.components()[:6]

    @given(timestamps)
    def test_full_pattern_round_trip(self, timestamp: int) -> None:
        """Test an exact round trip through a pattern with every field."""
        pattern = "dddd MMMM D YYYY hh:mm:ss.SSS A"
        instant = Instant(timestamp, zone="UTC")
        result = parse_custom(format(instant, pattern), pattern, tz="UTC")
        assert isinstance(result, ParseSuccess)
        assert result.value == instant


class TestOrderingProperties:
    """Test comparison laws."""

    @given(instants, instants)
    def test_trichotomy(self, a: Instant, b: Instant) -> None:
        """Test that exactly one relation holds."""
        assert [equals(a, b), is_before(a, b), is_after(a, b)].count(True) == 1

    @given(instants, instants, instants)
    def test_is_between_definition(self, x: Instant, start: Instant, end: Instant) -> None:
        """Test is_between against its definition and its inclusive bounds."""
        if start > end:
            start, end = end, start
        assert is_between(x, start, end) == (not is_before(x, start) and not is_after(x, end))
        assert is_between(start, start, end)
        assert is_between(end, start, end)

    @given(instants)
    def test_zone_never_changes_order(self, instant: Instant) -> None:
        """Test that display zones do not affect equality."""
        assert equals(instant, Instant(instant.timestamp, zone="Asia/Tokyo"))


class TestWallClockProperties:
    """Test decomposition over timestamps far outside datetime's range."""

    @given(wide_timestamps)
    def test_cycle_changes_only_year(self, timestamp: int) -> None:
        """Test that 400 Gregorian years later only the year differs."""
        zone = ZoneInfo("UTC")
        fields = wall_clock(timestamp, zone)
        assert wall_clock(timestamp + CYCLE_MS, zone) == fields._replace(year=fields.year + 400)

    @given(wide_timestamps)
    def test_fields_in_range(self, timestamp: int) -> None:
        """Test that every field stays inside its calendar range."""
        fields = wall_clock(timestamp, ZoneInfo("UTC"))
        assert 1 <= fields.month <= 12
        assert 1 <= fields.day <= 31
        assert 0 <= fields.hour <= 23
        assert 0 <= fields.weekday <= 6

    @given(wide_timestamps)
    def test_format_never_raises(self, timestamp: int) -> None:
        """Test that formatting accepts every integer timestamp."""
        assert format(Instant(timestamp, zone="UTC"), "dddd YYYY-MM-DD HH:mm:ss.SSS")
