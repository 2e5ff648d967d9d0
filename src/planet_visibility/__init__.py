"""
Planet Visibility

Computes, for any observer location and date, when the seven planets from
Mercury to Neptune rise, set and transit, where they are now, how bright
they are, and the windows during which each is up in a dark sky.

Example:
    >>> from planet_visibility import compute_visibility
    >>> report = compute_visibility(45.0105, -93.4556, "2024-06-21")
    >>> [p.planet.name for p in report.planets if p.visible_tonight]
"""

from planet_visibility.api.bodies import PLANETS, BodyDescriptor

# Exceptions
from planet_visibility.api.core.exceptions import (
    EphemerisError,
    EphemerisFileNotFoundError,
    InvalidCoordinateError,
    InvalidDateError,
    InvalidInputError,
    PlanetVisibilityError,
    UnknownEphemerisObjectError,
)
from planet_visibility.api.nighttime import VisibilityWindow
from planet_visibility.api.observer import DayWindow, Observer

# Report building
from planet_visibility.api.visibility import (
    PlanetReport,
    VisibilityResponse,
    build_visibility_report,
    compute_visibility,
)


__version__ = "0.1.0"

__all__ = [
    "PLANETS",
    "BodyDescriptor",
    "DayWindow",
    "EphemerisError",
    "EphemerisFileNotFoundError",
    "InvalidCoordinateError",
    "InvalidDateError",
    "InvalidInputError",
    "Observer",
    "PlanetReport",
    "PlanetVisibilityError",
    "UnknownEphemerisObjectError",
    "VisibilityResponse",
    "VisibilityWindow",
    "build_visibility_report",
    "compute_visibility",
]
