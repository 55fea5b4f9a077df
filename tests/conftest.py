"""
Global test configuration fixtures for WristWatch tests.

Every test runs with the host zone pinned to UTC through the ``TZ``
environment variable, so local-time behaviour is deterministic. Tests that
need another host zone override ``TZ`` with ``monkeypatch`` themselves.
"""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest

from wristwatch.config.schema import WristWatchConfig
from wristwatch.core.instant import Instant
from wristwatch.utils.time.clock import Clock, fixed_clock

# 2025-12-05T14:30:45.123Z, a Friday
REFERENCE_TIMESTAMP = 1764945045123


@pytest.fixture(autouse=True)
def utc_host_zone(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Pin the host local zone to UTC for every test."""
    monkeypatch.setenv("TZ", "UTC")
    yield


@pytest.fixture
def reference_timestamp() -> int:
    """Millisecond timestamp of 2025-12-05T14:30:45.123Z."""
    return REFERENCE_TIMESTAMP


@pytest.fixture
def reference_instant() -> Instant:
    """Instant for 2025-12-05T14:30:45.123Z displayed in UTC."""
    return Instant(REFERENCE_TIMESTAMP, zone="UTC")


@pytest.fixture
def clock() -> Clock:
    """Clock frozen at 2025-12-05T14:30:45.123Z."""
    return fixed_clock(REFERENCE_TIMESTAMP)


@pytest.fixture
def default_config() -> WristWatchConfig:
    """Configuration with every default."""
    return WristWatchConfig()


@pytest.fixture
def custom_config_dict() -> dict[str, object]:
    """
    Create a fully populated configuration dictionary.

    Returns:
        dict[str, object]: Configuration dictionary with non-default values
    """
    return {
        "formatting": {
            "default_pattern": "DD/MM/YYYY",
            "default_locale": "fr-FR",
        },
        "arithmetic": {
            "default_diff_unit": "hour",
        },
        "timezone": {
            "default": "Asia/Tokyo",
        },
        "logging": {
            "level": "INFO",
            "file": None,
        },
    }


@pytest.fixture
def invalid_config_dict() -> dict[str, object]:
    """
    Create an invalid configuration dictionary for testing error scenarios.

    Returns:
        dict[str, object]: Configuration dictionary with validation issues
    """
    return {
        "formatting": {
            "default_locale": "not a locale",
        },
        "arithmetic": {
            "default_diff_unit": "fortnight",
        },
        "timezone": {
            "default": "Invalid/Timezone",
        },
    }


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Path for a configuration file inside a temporary directory."""
    return tmp_path / "config.yml"
