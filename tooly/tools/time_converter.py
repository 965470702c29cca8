"""
Time Converter: epoch timestamps rendered in a set of time zones.

Seconds vs. milliseconds is auto-detected:
    - below 946684800 (year 2000 in seconds) or above 4102444800000
      (year 2100 in milliseconds): seconds
    - above 9999999999: milliseconds
    - otherwise: seconds
"""

from __future__ import annotations

import re
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable
from zoneinfo import ZoneInfo


@dataclass(frozen=True)
class TimezoneInfo:
    """A selectable time zone."""

    name: str
    timezone: str
    label: str
    location: str


TIMEZONES: tuple[TimezoneInfo, ...] = (
    TimezoneInfo("UTC", "UTC", "Coordinated Universal Time", "Universal"),
    TimezoneInfo("PST/PDT", "America/Los_Angeles", "Pacific Time", "US West Coast (LA, SF, Seattle)"),
    TimezoneInfo("EST/EDT", "America/New_York", "Eastern Time", "US East Coast (NYC, DC, Boston)"),
    TimezoneInfo("CST", "Asia/Shanghai", "China Standard Time", "Beijing Time (China, HK, Taiwan)"),
    TimezoneInfo("IST", "Asia/Kolkata", "India Standard Time", "India (Delhi, Mumbai)"),
    TimezoneInfo("JST", "Asia/Tokyo", "Japan Standard Time", "Japan (Tokyo, Osaka)"),
    TimezoneInfo("SGT", "Asia/Singapore", "Singapore Time", "Singapore"),
    TimezoneInfo("GMT", "Europe/London", "Greenwich Mean Time", "UK (London)"),
    TimezoneInfo("CET", "Europe/Paris", "Central European Time", "Central Europe (Paris, Berlin, Rome)"),
    TimezoneInfo("AEDT/AEST", "Australia/Sydney", "Australian Eastern Time", "Australia (Sydney, Melbourne)"),
)

TIMEZONES_BY_NAME: dict[str, TimezoneInfo] = {tz.name: tz for tz in TIMEZONES}

DEFAULT_ZONES: tuple[str, ...] = ("UTC", "PST/PDT")

SECONDS_LOWER_BOUND = 946684800
MILLISECONDS_UPPER_BOUND = 4102444800000
MILLISECONDS_THRESHOLD = 9999999999

DATE_FORMAT = "%m/%d/%Y, %I:%M:%S %p %Z"

INVALID_TIMESTAMP = "Invalid timestamp"

_STRIP_RE = re.compile(r"[^\d.\s-]")
_NUMBER_PREFIX_RE = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")


def parse_epochs(text: str) -> list[str]:
    """Return the whitespace-separated numeric tokens of the input.

    Characters other than digits, ``.``, ``-`` and whitespace are dropped
    first.
    """
    return _STRIP_RE.sub("", text).split()


def _to_number(token: str) -> float | None:
    match = _NUMBER_PREFIX_RE.match(token)
    if match is None:
        return None
    return float(match.group(0))


def epoch_to_datetime(value: float) -> datetime | None:
    """Interpret an epoch value (seconds or milliseconds) as a UTC datetime.

    Returns:
        The aware UTC datetime, or None if the value is out of range.
    """
    if value < SECONDS_LOWER_BOUND or value > MILLISECONDS_UPPER_BOUND:
        seconds = value
    elif value > MILLISECONDS_THRESHOLD:
        seconds = value / 1000
    else:
        seconds = value

    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def format_in_zone(moment: datetime, zone_name: str) -> str:
    """Format a datetime in one of the TIMEZONES, e.g. ``01/01/2022, 12:00:00 AM UTC``.

    Raises:
        KeyError: If zone_name is not a known zone.
    """
    tz = TIMEZONES_BY_NAME[zone_name]
    return moment.astimezone(ZoneInfo(tz.timezone)).strftime(DATE_FORMAT)


def convert_epochs(text: str, zones: Iterable[str] = DEFAULT_ZONES) -> dict[str, str]:
    """Convert every timestamp in the text to every selected zone.

    Args:
        text: One or more epoch timestamps.
        zones: Names from TIMEZONES; unknown names are skipped.

    Returns:
        A mapping of label to formatted time. Labels are prefixed with
        ``[n] `` when the input holds more than one timestamp.
    """
    selected = [name for name in zones if name in TIMEZONES_BY_NAME]
    tokens = parse_epochs(text)
    results: dict[str, str] = {}

    for index, token in enumerate(tokens):
        value = _to_number(token)
        if value is None:
            continue

        prefix = f"[{index + 1}] " if len(tokens) > 1 else ""
        moment = epoch_to_datetime(value)

        for name in selected:
            if moment is None:
                results[f"{prefix}{name}"] = INVALID_TIMESTAMP
                continue
            try:
                results[f"{prefix}{name}"] = format_in_zone(moment, name)
            except (OverflowError, ValueError):
                results[f"{prefix}{name}"] = "Error converting timezone"

    return results


def current_epoch_ms() -> int:
    """Current time as epoch milliseconds."""
    return time.time_ns() // 1_000_000
