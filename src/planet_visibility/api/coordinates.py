"""
Coordinate Resolution

Equatorial and horizontal positions of a body for an observer at an instant.
Positions are recomputed on every call and never cached.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from .ephemeris import SkyfieldEphemeris
    from .observer import Observer


__all__ = [
    "EquatorialPosition",
    "HorizontalPosition",
    "equatorial_position",
    "horizontal_position",
    "horizontal_positions",
    "sun_altitude",
]


@dataclass(frozen=True, slots=True)
class EquatorialPosition:
    """Apparent equatorial coordinates of date."""

    ra_hours: float  # Right ascension, 0-24 hours
    dec_degrees: float  # Declination, -90 to +90 degrees


@dataclass(frozen=True, slots=True)
class HorizontalPosition:
    """Position in the observer's local sky."""

    altitude: float  # Degrees above (+) or below (-) the horizon
    azimuth: float  # Degrees clockwise from true north, 0-360


def equatorial_position(
    ephemeris: SkyfieldEphemeris, body: str, instant: datetime, observer: Observer
) -> EquatorialPosition:
    """Right ascension and declination of ``body`` at ``instant``."""
    ra_hours, dec_degrees = ephemeris.equatorial(body, instant, observer)
    return EquatorialPosition(ra_hours=ra_hours, dec_degrees=dec_degrees)


def horizontal_positions(
    ephemeris: SkyfieldEphemeris, body: str, instants: Sequence[datetime], observer: Observer
) -> tuple[HorizontalPosition, ...]:
    """
    Altitude and azimuth of ``body`` at each instant.

    Args:
        ephemeris: Ephemeris to query
        body: Body key ("sun", "mars", ...)
        instants: Instants to evaluate, in any order
        observer: Observer location

    Returns:
        One HorizontalPosition per instant, in input order
    """
    return tuple(
        HorizontalPosition(altitude=alt, azimuth=az) for alt, az in ephemeris.altaz(body, list(instants), observer)
    )


def horizontal_position(
    ephemeris: SkyfieldEphemeris, body: str, instant: datetime, observer: Observer
) -> HorizontalPosition:
    """Altitude and azimuth of ``body`` at a single instant."""
    return horizontal_positions(ephemeris, body, [instant], observer)[0]


def sun_altitude(ephemeris: SkyfieldEphemeris, instant: datetime, observer: Observer) -> float:
    """Altitude of the Sun at ``instant`` in degrees."""
    return horizontal_position(ephemeris, "sun", instant, observer).altitude
