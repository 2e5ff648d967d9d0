"""
Physical and Astronomical Constants

Constants used throughout the Planet Visibility API for calculations.
"""

from datetime import timedelta
from typing import Final


__all__ = [
    "COMPASS_POINTS",
    "DARK_SKY_SUN_ALTITUDE_DEG",
    "DAY_LENGTH",
    "DEGREES_PER_COMPASS_POINT",
    "EPHEMERIS_MARGIN_DAYS",
    "HORIZON_ALTITUDE_DEG",
    "PLANET_HORIZON_DEG",
    "SAMPLE_COUNT",
    "SAMPLE_INTERVAL",
]


# Sky conditions
DARK_SKY_SUN_ALTITUDE_DEG: Final[float] = -6.0
"""Sun altitude below which the sky is dark enough to spot planets."""

HORIZON_ALTITUDE_DEG: Final[float] = 0.0
"""Altitude a body must exceed to count as above the horizon."""

PLANET_HORIZON_DEG: Final[float] = -0.5667
"""Horizon used by rise/set searches for point sources (standard refraction)."""

EPHEMERIS_MARGIN_DAYS: Final[float] = 1.0
"""Kernel coverage required on each side of the scanned day (light-time and search overrun)."""

# Day sampling
DAY_LENGTH: Final[timedelta] = timedelta(hours=24)
"""Length of the UTC calendar day scanned per report."""

SAMPLE_INTERVAL: Final[timedelta] = timedelta(minutes=15)
"""Spacing between nighttime window samples."""

SAMPLE_COUNT: Final[int] = 96
"""Number of sample intervals per day (97 sample instants, both ends included)."""

# Compass
COMPASS_POINTS: Final[tuple[str, ...]] = (
    "N",
    "NNE",
    "NE",
    "ENE",
    "E",
    "ESE",
    "SE",
    "SSE",
    "S",
    "SSW",
    "SW",
    "WSW",
    "W",
    "WNW",
    "NW",
    "NNW",
)
"""16-point compass rose, clockwise from north."""

DEGREES_PER_COMPASS_POINT: Final[float] = 360.0 / len(COMPASS_POINTS)
"""Width of one compass sector in degrees."""
