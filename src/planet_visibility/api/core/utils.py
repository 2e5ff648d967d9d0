"""
Utility functions for time handling and display formatting.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal

from .constants import COMPASS_POINTS, DEGREES_PER_COMPASS_POINT


__all__ = [
    "azimuth_to_compass",
    "ensure_utc",
    "format_instant",
    "round_half_up",
    "round_tenth",
]


def ensure_utc(dt: datetime) -> datetime:
    """
    Return ``dt`` as an aware UTC datetime.

    Naive datetimes are assumed to already be in UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def format_instant(dt: datetime) -> str:
    """
    Format an instant as an ISO-8601 UTC string with millisecond precision.

    Example:
        >>> format_instant(datetime(2024, 6, 21, 3, 15, tzinfo=UTC))
        '2024-06-21T03:15:00.000Z'
    """
    return ensure_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounding up."""
    return math.floor(value + 0.5)


def round_tenth(value: float) -> float:
    """
    Round to one decimal, with ties rounding away from zero.

    The exact binary value of ``value`` is rounded, so 0.15 (stored as
    0.1499...) gives 0.1 and 0.25 gives 0.3.
    """
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def azimuth_to_compass(azimuth_deg: float) -> str:
    """
    Convert an azimuth to a 16-point compass direction.

    Args:
        azimuth_deg: Azimuth in degrees clockwise from true north

    Returns:
        Compass point such as "N", "ENE" or "SSW"
    """
    index = round_half_up(azimuth_deg / DEGREES_PER_COMPASS_POINT) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]
