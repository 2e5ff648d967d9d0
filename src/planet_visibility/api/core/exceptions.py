"""
Custom exception classes for planet visibility calculations.

This module defines specific exceptions for the errors that can
reject a request or break the ephemeris set-up. Per-field computation
failures are never raised past the sub-query that caught them.
"""

from __future__ import annotations


__all__ = [
    # Ephemeris exceptions
    "EphemerisError",
    "EphemerisFileNotFoundError",
    # Input exceptions
    "InvalidCoordinateError",
    "InvalidDateError",
    "InvalidInputError",
    # Base exception
    "PlanetVisibilityError",
    "UnknownEphemerisObjectError",
]


class PlanetVisibilityError(Exception):
    """
    Base exception for all planet visibility errors.

    All custom exceptions in this library inherit from this base class,
    making it easy to catch all visibility-related errors.
    """

    pass


# ============================================================================
# Input Exceptions
# ============================================================================


class InvalidInputError(PlanetVisibilityError):
    """
    Raised when request input is rejected before any computation starts.

    The message is safe to show to API clients.
    """

    pass


class InvalidCoordinateError(InvalidInputError):
    """
    Raised when observer coordinates are missing or out of valid range.

    This occurs when:
    - Latitude or longitude is missing or not a number
    - Latitude is outside -90 to +90 degrees
    - Longitude is outside -180 to +180 degrees
    """

    def __init__(self, message: str = "Invalid coordinates") -> None:
        super().__init__(message)


class InvalidDateError(InvalidInputError):
    """Raised when the reference date cannot be parsed."""

    def __init__(self, message: str = "Invalid date") -> None:
        super().__init__(message)


# ============================================================================
# Ephemeris Exceptions
# ============================================================================


class EphemerisError(PlanetVisibilityError):
    """Base exception for ephemeris-related errors."""

    pass


class EphemerisFileNotFoundError(EphemerisError):
    """Raised when a SPICE kernel cannot be loaded or downloaded."""

    pass


class UnknownEphemerisObjectError(EphemerisError):
    """Raised when a body is not present in the loaded ephemeris."""

    pass
