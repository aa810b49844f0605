"""
Shared formatting helpers for the RideWithGPS MCP server.

Unit conversions and timestamp display used by every renderer.
Falsy values (None, 0, "") all render as UNKNOWN.
"""

from datetime import datetime
from typing import Optional


UNKNOWN = "Unknown"


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp, accepting a trailing 'Z' for UTC.

    Returns:
        datetime, or None if the string cannot be parsed
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_date(value: str) -> str:
    """Format an ISO-8601 timestamp in the local time zone and locale.

    Args:
        value: Timestamp string from the API

    Returns:
        Locale formatted date/time, the raw string if it can't be parsed,
        or UNKNOWN if empty
    """
    if not value:
        return UNKNOWN
    parsed = parse_timestamp(value)
    if parsed is None:
        return str(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.strftime("%c")


def format_distance(meters: float) -> str:
    """Format a distance in meters as kilometers.

    Args:
        meters: Distance in meters

    Returns:
        Formatted string like "42.20 km"
    """
    if not meters:
        return UNKNOWN
    return f"{meters / 1000:.2f} km"


def format_elevation(meters: float) -> str:
    """Format an elevation in meters, e.g. "512 m"."""
    if not meters:
        return UNKNOWN
    return f"{meters:.0f} m"


def format_duration(seconds: float) -> str:
    """Format seconds as hours and minutes.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted string like "2h 5m"
    """
    if not seconds:
        return UNKNOWN
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    return f"{hours}h {minutes}m"


def format_coordinates(lat: float, lng: float) -> str:
    if not lat or not lng:
        return UNKNOWN
    return f"{lat:.5f}, {lng:.5f}"


def or_unknown(value) -> str:
    return str(value) if value else UNKNOWN


def format_location(*parts) -> str:
    """Join location parts, e.g. "Portland, OR, US"."""
    return ", ".join(or_unknown(p) for p in parts)
