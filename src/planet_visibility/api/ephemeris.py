"""
Ephemeris Calculations for Solar System Objects

Uses Skyfield library to calculate positions, horizon crossings, meridian
transits and magnitudes of the Sun and planets.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta
from functools import cached_property, lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Any

from skyfield import almanac
from skyfield.api import wgs84
from skyfield.magnitudelib import planetary_magnitude

from .core.constants import EPHEMERIS_MARGIN_DAYS, PLANET_HORIZON_DEG
from .core.exceptions import EphemerisFileNotFoundError, UnknownEphemerisObjectError
from .core.utils import ensure_utc
from .skyfield_utils import get_skyfield_loader


if TYPE_CHECKING:
    from skyfield.jpllib import SpiceKernel
    from skyfield.timelib import Timescale

    from .observer import Observer

logger = logging.getLogger(__name__)


__all__ = [
    "BODY_NAMES",
    "SkyfieldEphemeris",
    "load_ephemeris",
]


# Body keys mapping to segment names present in both de421 and de440s
BODY_NAMES = {
    "sun": "sun",
    "mercury": "mercury",
    "venus": "venus",
    "mars": "mars barycenter",
    "jupiter": "jupiter barycenter",
    "saturn": "saturn barycenter",
    "uranus": "uranus barycenter",
    "neptune": "neptune barycenter",
}


class SkyfieldEphemeris:
    """
    Position and event queries against a loaded SPICE kernel.

    Instances hold only read-only kernel and timescale data, so one
    instance can serve any number of requests.
    """

    def __init__(self, kernel: SpiceKernel, timescale: Timescale) -> None:
        self._kernel = kernel
        self._ts = timescale
        self._earth = kernel["earth"]

    def _target(self, body: str) -> Any:
        body_key = body.lower()
        if body_key not in BODY_NAMES:
            raise UnknownEphemerisObjectError(
                f"Unknown body: {body}. Valid names: {', '.join(sorted(BODY_NAMES.keys()))}"
            )
        try:
            return self._kernel[BODY_NAMES[body_key]]
        except KeyError:
            raise UnknownEphemerisObjectError(
                f"Object '{BODY_NAMES[body_key]}' not found in the loaded ephemeris."
            ) from None

    @cached_property
    def time_span(self) -> tuple[float, float]:
        """TDB Julian dates (first, last) covered by every segment of the kernel."""
        segments = [segment.spk_segment for segment in self._kernel.segments]
        return max(s.start_jd for s in segments), min(s.end_jd for s in segments)

    def covers(self, start: datetime, end: datetime, margin_days: float = EPHEMERIS_MARGIN_DAYS) -> bool:
        """
        Check that the kernel can answer queries between ``start`` and ``end``.

        Args:
            start: First instant that will be queried
            end: Last instant that will be queried
            margin_days: Extra coverage required on each side

        Returns:
            True if ``[start - margin, end + margin]`` lies inside the kernel's span
        """
        first_jd, last_jd = self.time_span
        t0 = self._ts.from_datetime(ensure_utc(start)).tdb - margin_days
        t1 = self._ts.from_datetime(ensure_utc(end)).tdb + margin_days
        return first_jd <= t0 and t1 <= last_jd

    def _topos(self, observer: Observer) -> Any:
        return self._earth + wgs84.latlon(
            latitude_degrees=observer.latitude,
            longitude_degrees=observer.longitude,
            elevation_m=observer.elevation,
        )

    def equatorial(self, body: str, dt: datetime, observer: Observer) -> tuple[float, float]:
        """
        Apparent right ascension and declination of date.

        Returns:
            Tuple of (ra_hours, dec_degrees)
        """
        t = self._ts.from_datetime(ensure_utc(dt))
        apparent = self._topos(observer).at(t).observe(self._target(body)).apparent()
        ra, dec, _distance = apparent.radec("date")
        return float(ra.hours), float(dec.degrees)

    def altaz(self, body: str, dts: Sequence[datetime], observer: Observer) -> list[tuple[float, float]]:
        """
        Refracted altitude and azimuth at each instant, in one vectorized pass.

        Returns:
            List of (altitude_deg, azimuth_deg) tuples, one per instant
        """
        if not dts:
            return []
        t = self._ts.from_datetimes([ensure_utc(dt) for dt in dts])
        apparent = self._topos(observer).at(t).observe(self._target(body)).apparent()
        alt, az, _distance = apparent.altaz("standard")
        return list(zip(alt.degrees.tolist(), az.degrees.tolist(), strict=True))

    def find_rise_set(
        self, body: str, observer: Observer, direction: int, start: datetime, days: float = 1.0
    ) -> datetime | None:
        """
        First rising (direction +1) or setting (direction -1) after ``start``.

        Returns:
            UTC datetime of the crossing, or None if the body does not cross
            the horizon within ``days``
        """
        start = ensure_utc(start)
        t0 = self._ts.from_datetime(start)
        t1 = self._ts.from_datetime(start + timedelta(days=days))
        finder = almanac.find_risings if direction > 0 else almanac.find_settings

        # A False flag marks a grazing approach that never crossed the horizon
        times, crossed = finder(self._topos(observer), self._target(body), t0, t1, horizon_degrees=PLANET_HORIZON_DEG)
        for t, did_cross in zip(times, crossed, strict=True):
            if did_cross:
                return ensure_utc(t.utc_datetime())
        return None

    def find_transit(self, body: str, observer: Observer, start: datetime, days: float = 1.0) -> datetime | None:
        """
        First upper meridian transit (hour angle zero) after ``start``.

        Returns:
            UTC datetime of the transit, or None if none occurs within ``days``
        """
        start = ensure_utc(start)
        t0 = self._ts.from_datetime(start)
        t1 = self._ts.from_datetime(start + timedelta(days=days))
        times = almanac.find_transits(self._topos(observer), self._target(body), t0, t1)
        if len(times) == 0:
            return None
        return ensure_utc(times[0].utc_datetime())

    def magnitude(self, body: str, dt: datetime) -> float:
        """
        Geocentric apparent visual magnitude.

        Raises:
            ValueError: If Skyfield has no magnitude model for the body
        """
        t = self._ts.from_datetime(ensure_utc(dt))
        astrometric = self._earth.at(t).observe(self._target(body))
        return float(planetary_magnitude(astrometric))


@lru_cache(maxsize=4)
def load_ephemeris(bsp_file: str, directory: Path | None = None) -> SkyfieldEphemeris:
    """
    Load a SPICE kernel, downloading it into the Skyfield directory if missing.

    Cached to avoid reloading files on every call.

    Args:
        bsp_file: Name of the BSP file to load
        directory: Skyfield cache directory (default: configured directory)

    Returns:
        Ephemeris backed by the kernel

    Raises:
        EphemerisFileNotFoundError: If the kernel cannot be loaded or downloaded
    """
    loader = get_skyfield_loader(directory)
    try:
        kernel = loader(bsp_file)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load ephemeris {bsp_file}: {e}")
        raise EphemerisFileNotFoundError(f"Ephemeris file {bsp_file} could not be loaded: {e}") from e

    logger.info(f"Loaded ephemeris {bsp_file}")
    return SkyfieldEphemeris(kernel, loader.timescale())
