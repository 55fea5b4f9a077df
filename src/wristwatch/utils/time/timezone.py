"""
Unified timezone handling utilities for WristWatch.

This module is the single place where timezone identifiers are resolved
against the host's IANA database (``zoneinfo``). Instants never change
their timestamp when moved between zones: a zone only selects the wall
clock used for later field extraction and display.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from datetime import datetime, tzinfo
from pathlib import Path
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.exceptions import TimezoneError

if TYPE_CHECKING:
    from ...core.instant import Instant

logger = logging.getLogger(__name__)

UTC_ZONE = "UTC"


def _load_zone(tz_id: str) -> ZoneInfo | None:
    """Load a zone from the IANA database, returning None when it is unknown."""
    try:
        return ZoneInfo(tz_id)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        # ValueError covers malformed keys such as absolute paths
        return None


def _localtime_key() -> str | None:
    """Derive the IANA key from the /etc/localtime symlink, if there is one."""
    try:
        target = Path("/etc/localtime").resolve(strict=True)
    except (OSError, RuntimeError):
        return None

    parts = target.parts
    if "zoneinfo" not in parts:
        return None

    key = "/".join(parts[parts.index("zoneinfo") + 1 :])
    return key if key and _load_zone(key) is not None else None


def is_valid_timezone(tz_id: object) -> bool:
    """
    Check whether a value names a zone in the host timezone database.

    Args:
        tz_id: Candidate IANA identifier

    Returns:
        True if ``tz_id`` is a string naming a known zone

    Examples:
        >>> is_valid_timezone("Asia/Tokyo")
        True
        >>> is_valid_timezone("Invalid/Timezone")
        False
        >>> is_valid_timezone(42)
        False
    """
    if not isinstance(tz_id, str) or not tz_id.strip():
        return False
    return _load_zone(tz_id) is not None


def get_system_timezone() -> tzinfo:
    """
    Get the host's local timezone.

    The ``TZ`` environment variable wins when it names a known zone, then
    the ``/etc/localtime`` link, then whatever the runtime reports.

    Returns:
        tzinfo for the local timezone (a ZoneInfo whenever one can be found)

    Examples:
        >>> isinstance(get_system_timezone(), tzinfo)
        True
    """
    tz_env = os.environ.get("TZ", "").lstrip(":")
    if tz_env:
        zone = _load_zone(tz_env)
        if zone is not None:
            return zone
        logger.debug(f"Ignoring unknown TZ environment value: {tz_env!r}")

    key = _localtime_key()
    if key is not None:
        return ZoneInfo(key)

    # Try "localtime" next (works on most Linux/WSL installs)
    zone = _load_zone("localtime")
    if zone is not None:
        return zone

    # Fall back to getting the key from datetime for macOS/Windows
    local_tz = datetime.now().astimezone().tzinfo
    runtime_key = getattr(local_tz, "key", None)
    if isinstance(runtime_key, str):
        zone = _load_zone(runtime_key)
        if zone is not None:
            return zone
    if local_tz is not None:
        return local_tz

    return ZoneInfo(UTC_ZONE)


def get_local_timezone() -> str:
    """
    Get the identifier of the host's current timezone.

    Returns:
        IANA identifier (e.g. "Europe/Paris"), or "UTC" when the host zone
        has no name

    Examples:
        >>> isinstance(get_local_timezone(), str)
        True
    """
    tz = get_system_timezone()
    key = getattr(tz, "key", None)
    if isinstance(key, str) and key != "localtime":
        return key

    name = tz.tzname(None)
    return name if name else UTC_ZONE


def resolve_timezone(tz_id: str | None = None) -> tzinfo:
    """
    Resolve an optional zone identifier to a tzinfo.

    Args:
        tz_id: IANA identifier, or None for the host local zone

    Returns:
        The matching tzinfo

    Raises:
        TimezoneError: If ``tz_id`` is not a known zone

    Examples:
        >>> resolve_timezone("UTC").key
        'UTC'
    """
    if tz_id is None:
        return get_system_timezone()

    if not isinstance(tz_id, str):
        raise TimezoneError(
            f"Timezone must be a string, got {type(tz_id).__name__}", context=tz_id
        )

    zone = _load_zone(tz_id)
    if zone is None:
        raise TimezoneError(f"Unknown timezone: {tz_id}", context=tz_id)
    return zone


def ensure_timezone_aware(dt: datetime, tz_id: str | None = None) -> datetime:
    """
    Ensure a datetime object is timezone-aware.

    Naive datetimes are taken as wall-clock time in ``tz_id`` (the host
    local zone by default). Aware datetimes are returned unchanged.

    Args:
        dt: Datetime object that may be naive or timezone-aware
        tz_id: Zone for naive values

    Returns:
        Timezone-aware datetime object

    Examples:
        >>> naive_dt = datetime(2025, 7, 25, 14, 30, 0)
        >>> ensure_timezone_aware(naive_dt, "UTC").tzinfo.key
        'UTC'
    """
    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        return dt.replace(tzinfo=resolve_timezone(tz_id))
    return dt


def to_timezone(instant: Instant, tz_id: object) -> Instant | None:
    """
    Display an instant in another timezone.

    The timestamp is unchanged, so equality and ordering with the original
    are preserved; only the wall clock used by later formatting changes.

    Args:
        instant: Instant to convert
        tz_id: IANA timezone identifier (e.g. "Asia/Tokyo")

    Returns:
        Instant carrying ``tz_id`` as display zone, or None if the
        identifier is invalid

    Examples:
        >>> from wristwatch.core.instant import Instant
        >>> to_timezone(Instant(0), "Asia/Tokyo").zone
        'Asia/Tokyo'
        >>> to_timezone(Instant(0), "Invalid/Timezone") is None
        True
    """
    if not is_valid_timezone(tz_id):
        logger.debug(f"Rejected timezone identifier: {tz_id!r}")
        return None
    return dataclasses.replace(instant, zone=tz_id)


def to_utc(instant: Instant) -> Instant:
    """Display an instant in UTC; the timestamp is unchanged."""
    return dataclasses.replace(instant, zone=UTC_ZONE)


def to_local(instant: Instant) -> Instant:
    """Display an instant in the host local zone; the timestamp is unchanged."""
    return dataclasses.replace(instant, zone=None)
