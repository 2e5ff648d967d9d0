"""
Planet Visibility Reports

Builds the per-planet visibility report for an observer and reference
instant: rise/set/transit times, current position, magnitude, and the
dark-sky windows for the UTC day containing the reference instant.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any

from .bodies import PLANETS, BodyDescriptor
from .coordinates import horizontal_position, sun_altitude
from .core.config import get_settings
from .core.constants import DARK_SKY_SUN_ALTITUDE_DEG, HORIZON_ALTITUDE_DEG
from .core.exceptions import InvalidDateError
from .core.utils import azimuth_to_compass, format_instant, round_tenth
from .ephemeris import load_ephemeris
from .events import RISE, SET, rise_set, transit
from .magnitude import apparent_magnitude
from .nighttime import VisibilityWindow, calculate_nighttime_windows
from .observer import DayWindow, Observer, make_observer, parse_coordinates, parse_reference_instant


if TYPE_CHECKING:
    from .ephemeris import SkyfieldEphemeris

logger = logging.getLogger(__name__)


__all__ = [
    "PlanetReport",
    "VisibilityResponse",
    "build_planet_report",
    "build_visibility_report",
    "compute_visibility",
]


def _instant_or_none(dt: datetime | None) -> str | None:
    return format_instant(dt) if dt is not None else None


@dataclass(frozen=True, slots=True)
class PlanetReport:
    """Visibility of one planet for one day."""

    planet: BodyDescriptor
    rise: datetime | None
    set: datetime | None
    transit: datetime | None
    altitude: float  # Current altitude, one decimal
    azimuth: float  # Current azimuth, one decimal
    direction: str  # 16-point compass direction of the azimuth
    max_altitude: float  # Altitude at transit, 0 when no transit today
    magnitude: float | None
    visible_now: bool
    visible_tonight: bool
    nighttime_windows: tuple[VisibilityWindow, ...]

    def to_dict(self) -> dict[str, Any]:
        """Wire representation with camelCase keys and ISO-8601 instants."""
        return {
            "name": self.planet.name,
            "symbol": self.planet.symbol,
            "color": self.planet.color,
            "tip": self.planet.tip,
            "rise": _instant_or_none(self.rise),
            "set": _instant_or_none(self.set),
            "transit": _instant_or_none(self.transit),
            "altitude": self.altitude,
            "azimuth": self.azimuth,
            "direction": self.direction,
            "maxAltitude": self.max_altitude,
            "magnitude": self.magnitude,
            "visibleNow": self.visible_now,
            "visibleTonight": self.visible_tonight,
            "nighttimeWindows": [
                {"start": format_instant(w.start), "end": format_instant(w.end)} for w in self.nighttime_windows
            ],
        }


@dataclass(frozen=True, slots=True)
class VisibilityResponse:
    """Reports for all seven planets, in canonical order."""

    reference_time: datetime
    observer: Observer
    day: DayWindow
    planets: tuple[PlanetReport, ...]

    def to_dict(self) -> dict[str, Any]:
        """Wire representation of the full response."""
        return {
            "referenceTime": format_instant(self.reference_time),
            "location": {"lat": self.observer.latitude, "lon": self.observer.longitude},
            "planets": [report.to_dict() for report in self.planets],
        }


def build_planet_report(
    ephemeris: SkyfieldEphemeris,
    planet: BodyDescriptor,
    observer: Observer,
    reference: datetime,
    day: DayWindow,
    night_now: bool,
) -> PlanetReport:
    """
    Assemble the report for one planet.

    Search and magnitude failures are absorbed by the sub-queries and show
    up as empty fields; they never prevent the remaining fields from being
    computed.

    Args:
        ephemeris: Ephemeris to query
        planet: Planet descriptor
        observer: Observer location
        reference: Instant for the current position and magnitude
        day: UTC day bounding the searches
        night_now: Whether the sky is dark at the reference instant

    Returns:
        PlanetReport for the planet
    """
    body = planet.key

    rise = rise_set(ephemeris, body, observer, RISE, day.start)
    set_time = rise_set(ephemeris, body, observer, SET, day.start)
    transit_result = transit(ephemeris, body, observer, day)

    position = horizontal_position(ephemeris, body, reference, observer)
    altitude = round_tenth(position.altitude)
    azimuth = round_tenth(position.azimuth)

    magnitude = apparent_magnitude(ephemeris, body, reference)

    try:
        windows = calculate_nighttime_windows(ephemeris, body, observer, day.start)
    except Exception as e:
        logger.warning(f"Nighttime window scan failed for {planet.name}: {e}")
        windows = ()

    return PlanetReport(
        planet=planet,
        rise=rise,
        set=set_time,
        transit=transit_result.time,
        altitude=altitude,
        azimuth=azimuth,
        direction=azimuth_to_compass(azimuth),
        max_altitude=transit_result.max_altitude,
        magnitude=magnitude,
        visible_now=altitude > HORIZON_ALTITUDE_DEG and night_now,
        visible_tonight=len(windows) > 0,
        nighttime_windows=windows,
    )


def build_visibility_report(
    ephemeris: SkyfieldEphemeris, observer: Observer, reference: datetime
) -> VisibilityResponse:
    """
    Build reports for all seven planets.

    Args:
        ephemeris: Ephemeris to query
        observer: Observer location
        reference: Reference instant (aware UTC)

    Returns:
        VisibilityResponse with planets in canonical order

    Raises:
        InvalidDateError: If the loaded kernel does not cover the reference day
    """
    day = DayWindow.for_instant(reference)
    if not ephemeris.covers(day.start, day.end):
        logger.info(f"Reference day {day.start.date().isoformat()} is outside the loaded ephemeris")
        raise InvalidDateError()

    night_now = sun_altitude(ephemeris, reference, observer) < DARK_SKY_SUN_ALTITUDE_DEG
    logger.debug(
        f"Building report for ({observer.latitude:.4f}, {observer.longitude:.4f}) "
        f"on {day.start.date().isoformat()}, dark now: {night_now}"
    )

    planets = tuple(build_planet_report(ephemeris, planet, observer, reference, day, night_now) for planet in PLANETS)
    return VisibilityResponse(reference_time=reference, observer=observer, day=day, planets=planets)


def compute_visibility(
    lat: str | float | None,
    lon: str | float | None,
    date: str | None = None,
    now: datetime | None = None,
    ephemeris: SkyfieldEphemeris | None = None,
) -> VisibilityResponse:
    """
    Validate raw inputs and build the visibility report.

    Input is validated before any planet is computed, so a bad request
    never produces partial output.

    Args:
        lat: Observer latitude as received
        lon: Observer longitude as received
        date: ISO-8601 reference date, or None for now
        now: Instant used when no date is given (default: current time)
        ephemeris: Ephemeris to use (default: the configured kernel)

    Returns:
        VisibilityResponse

    Raises:
        InvalidCoordinateError: If lat/lon are missing, non-numeric or out of range
        InvalidDateError: If date is unparseable or outside the loaded ephemeris
    """
    latitude, longitude = parse_coordinates(lat, lon)
    reference = parse_reference_instant(date, now)
    observer = make_observer(latitude, longitude)

    if ephemeris is None:
        ephemeris = load_ephemeris(get_settings().ephemeris_file)

    return build_visibility_report(ephemeris, observer, reference)
