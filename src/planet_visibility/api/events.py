"""
Rise, Set and Transit Search

Finds horizon crossings and meridian transits of a body within one day.
Search failures only ever blank the field being searched for.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

import deal

from .coordinates import horizontal_position
from .core.utils import round_tenth


if TYPE_CHECKING:
    from .ephemeris import SkyfieldEphemeris
    from .observer import DayWindow, Observer

logger = logging.getLogger(__name__)


__all__ = [
    "RISE",
    "SET",
    "TransitResult",
    "rise_set",
    "transit",
]


RISE = +1
SET = -1


@dataclass(frozen=True, slots=True)
class TransitResult:
    """Meridian transit within a day, if any."""

    time: datetime | None = None
    max_altitude: float = 0.0  # Altitude at transit, floored at 0


@deal.pre(lambda ephemeris, body, observer, direction, day_start: direction in (RISE, SET))
def rise_set(
    ephemeris: SkyfieldEphemeris, body: str, observer: Observer, direction: int, day_start: datetime
) -> datetime | None:
    """
    Find the first rise or set of a body within one day of ``day_start``.

    Args:
        ephemeris: Ephemeris to query
        body: Body key
        observer: Observer location
        direction: RISE (+1) for below-to-above, SET (-1) for above-to-below
        day_start: Start of the search window

    Returns:
        Crossing instant, or None if the body does not cross the horizon
        (e.g. circumpolar at extreme latitudes) or the search fails
    """
    event = "rise" if direction == RISE else "set"
    try:
        return ephemeris.find_rise_set(body, observer, direction, day_start, days=1.0)
    except Exception as e:
        logger.warning(f"{event.capitalize()} search failed for {body}: {e}")
        return None


def transit(ephemeris: SkyfieldEphemeris, body: str, observer: Observer, day: DayWindow) -> TransitResult:
    """
    Find a body's meridian transit on the given day and its altitude there.

    A transit falling outside ``[day.start, day.end)`` is not reported. The
    altitude at transit is floored at 0 and rounded to one decimal, so a
    transit below the horizon reports 0.

    Returns:
        TransitResult; empty when no transit is found or the search fails
    """
    try:
        transit_time = ephemeris.find_transit(body, observer, day.start, days=1.0)
        if transit_time is None or not day.contains(transit_time):
            return TransitResult()

        altitude = horizontal_position(ephemeris, body, transit_time, observer).altitude
    except Exception as e:
        logger.warning(f"Transit search failed for {body}: {e}")
        return TransitResult()

    return TransitResult(time=transit_time, max_altitude=round_tenth(max(0.0, altitude)))
