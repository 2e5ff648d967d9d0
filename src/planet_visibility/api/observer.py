"""
Observer Location and Day Window

Request-scoped observer location, reference instant parsing, and the UTC
calendar day that bounds every search in a visibility report.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import UTC, datetime

import deal

from .core.constants import DAY_LENGTH
from .core.exceptions import InvalidCoordinateError, InvalidDateError
from .core.utils import ensure_utc


logger = logging.getLogger(__name__)


__all__ = [
    "DayWindow",
    "Observer",
    "make_observer",
    "parse_coordinates",
    "parse_reference_instant",
]


@dataclass(frozen=True, slots=True)
class Observer:
    """Observer's geographic location."""

    latitude: float  # Degrees north (negative for south)
    longitude: float  # Degrees east (negative for west)
    elevation: float = 0.0  # Meters above sea level


@dataclass(frozen=True, slots=True)
class DayWindow:
    """The UTC calendar day ``[start, end)`` containing a reference instant."""

    start: datetime
    end: datetime

    @classmethod
    def for_instant(cls, instant: datetime) -> DayWindow:
        """Return the UTC day containing ``instant``."""
        start = ensure_utc(instant).replace(hour=0, minute=0, second=0, microsecond=0)
        return cls(start=start, end=start + DAY_LENGTH)

    def contains(self, instant: datetime) -> bool:
        """True if ``instant`` falls on this day (end excluded)."""
        return self.start <= instant < self.end


def _in_range(latitude: float, longitude: float) -> bool:
    return (
        math.isfinite(latitude) and math.isfinite(longitude) and -90 <= latitude <= 90 and -180 <= longitude <= 180
    )


@deal.raises(InvalidCoordinateError)
def make_observer(latitude: float, longitude: float) -> Observer:
    """
    Build an observer at sea level.

    Args:
        latitude: Degrees north, -90 to +90
        longitude: Degrees east, -180 to +180

    Returns:
        Observer for the location

    Raises:
        InvalidCoordinateError: If either coordinate is out of range
    """
    if not _in_range(latitude, longitude):
        raise InvalidCoordinateError()
    return Observer(latitude=latitude, longitude=longitude, elevation=0.0)


@deal.raises(InvalidCoordinateError)
def parse_coordinates(lat: str | float | None, lon: str | float | None) -> tuple[float, float]:
    """
    Parse raw latitude/longitude values from a request.

    Args:
        lat: Latitude as received (string, number, or missing)
        lon: Longitude as received (string, number, or missing)

    Returns:
        Tuple of (latitude, longitude) in degrees

    Raises:
        InvalidCoordinateError: If a value is missing, not numeric, or out of range
    """
    if lat is None or lon is None:
        raise InvalidCoordinateError()
    try:
        latitude = float(lat)
        longitude = float(lon)
    except (TypeError, ValueError):
        raise InvalidCoordinateError() from None

    if not _in_range(latitude, longitude):
        raise InvalidCoordinateError()
    return latitude, longitude


@deal.raises(InvalidDateError)
def parse_reference_instant(raw: str | None, now: datetime | None = None) -> datetime:
    """
    Parse the reference instant for a report.

    Accepts ISO-8601 dates ("2024-06-21", midnight UTC) and date-times
    ("2024-06-21T22:00:00Z"). Naive date-times are taken as UTC. A missing
    or empty value means "now".

    Args:
        raw: Date string from the request, or None
        now: Instant to use when no date is given (default: current time)

    Returns:
        Aware UTC datetime

    Raises:
        InvalidDateError: If the string cannot be parsed, or its UTC day
            ends past the last representable datetime
    """
    if raw is None or not raw.strip():
        return ensure_utc(now) if now is not None else datetime.now(UTC)

    try:
        instant = ensure_utc(datetime.fromisoformat(raw.strip()))
        DayWindow.for_instant(instant)
        return instant
    except (OverflowError, ValueError):
        logger.debug(f"Rejecting unparseable reference date {raw!r}")
        raise InvalidDateError() from None
