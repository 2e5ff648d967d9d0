"""
Apparent Magnitude

Magnitude lookups that degrade to None instead of raising.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import TYPE_CHECKING

from .core.utils import round_tenth


if TYPE_CHECKING:
    from .ephemeris import SkyfieldEphemeris

logger = logging.getLogger(__name__)


__all__ = ["apparent_magnitude"]


def apparent_magnitude(ephemeris: SkyfieldEphemeris, body: str, instant: datetime) -> float | None:
    """
    Apparent visual magnitude of a body, rounded to one decimal.

    Args:
        ephemeris: Ephemeris to query
        body: Body key
        instant: Instant to evaluate

    Returns:
        Magnitude, or None if the magnitude model is undefined for the
        body or instant
    """
    try:
        magnitude = ephemeris.magnitude(body, instant)
    except Exception as e:
        logger.debug(f"Magnitude unavailable for {body}: {e}")
        return None

    # Skyfield returns NaN outside a model's valid phase-angle range
    if not math.isfinite(magnitude):
        logger.debug(f"Magnitude undefined for {body} at {instant.isoformat()}")
        return None
    return round_tenth(magnitude)
