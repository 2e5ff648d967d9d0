"""
Nighttime Visibility Windows

Samples a UTC day at fixed intervals, marks each sample where the body is
above the horizon while the sky is dark, and merges consecutive marked
samples into windows.

Window edges are accurate to one sample interval (15 minutes). Polar day
and polar night produce an empty list.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from functools import reduce
from typing import TYPE_CHECKING

import deal

from .coordinates import horizontal_positions
from .core.constants import DARK_SKY_SUN_ALTITUDE_DEG, HORIZON_ALTITUDE_DEG, SAMPLE_COUNT, SAMPLE_INTERVAL


if TYPE_CHECKING:
    from .ephemeris import SkyfieldEphemeris
    from .observer import Observer

logger = logging.getLogger(__name__)


__all__ = [
    "VisibilityWindow",
    "calculate_nighttime_windows",
    "is_dark_visible",
    "merge_windows",
    "sample_instants",
]


@dataclass(frozen=True, slots=True)
class VisibilityWindow:
    """A contiguous interval when a body is up in a dark sky."""

    start: datetime
    end: datetime


@dataclass(frozen=True, slots=True)
class _ScanState:
    closed: tuple[VisibilityWindow, ...] = ()
    open_start: datetime | None = None  # None while outside a window


def sample_instants(day_start: datetime) -> tuple[datetime, ...]:
    """Sample instants from ``day_start`` to ``day_start + 24h`` inclusive."""
    return tuple(day_start + i * SAMPLE_INTERVAL for i in range(SAMPLE_COUNT + 1))


def is_dark_visible(sun_altitude: float, body_altitude: float) -> bool:
    """True when the sky is dark and the body is above the horizon."""
    return sun_altitude < DARK_SKY_SUN_ALTITUDE_DEG and body_altitude > HORIZON_ALTITUDE_DEG


def _step(state: _ScanState, sample: tuple[datetime, bool]) -> _ScanState:
    instant, visible = sample
    if visible and state.open_start is None:
        return _ScanState(closed=state.closed, open_start=instant)
    if not visible and state.open_start is not None:
        window = VisibilityWindow(start=state.open_start, end=instant)
        return _ScanState(closed=(*state.closed, window))
    return state


def _ordered(windows: tuple[VisibilityWindow, ...]) -> bool:
    return all(w.start < w.end for w in windows) and all(a.end <= b.start for a, b in zip(windows, windows[1:]))


@deal.pre(lambda instants, flags: len(instants) == len(flags))
@deal.post(_ordered)
def merge_windows(instants: Sequence[datetime], flags: Sequence[bool]) -> tuple[VisibilityWindow, ...]:
    """
    Merge per-sample visibility flags into windows.

    A window opens at the first visible sample and closes at the first
    following non-visible sample. A window still open after the last
    sample closes at the last sample instant; one that opened on the last
    sample has no duration and is dropped.

    Args:
        instants: Chronological sample instants
        flags: Visibility flag for each instant

    Returns:
        Chronological, non-overlapping windows (possibly empty)
    """
    final = reduce(_step, zip(instants, flags), _ScanState())
    if final.open_start is None or final.open_start >= instants[-1]:
        return final.closed
    return (*final.closed, VisibilityWindow(start=final.open_start, end=instants[-1]))


def calculate_nighttime_windows(
    ephemeris: SkyfieldEphemeris, body: str, observer: Observer, day_start: datetime
) -> tuple[VisibilityWindow, ...]:
    """
    Find the dark-sky windows during which a body is above the horizon.

    Args:
        ephemeris: Ephemeris to query
        body: Body key
        observer: Observer location
        day_start: Midnight UTC of the day to scan

    Returns:
        Chronological windows within ``[day_start, day_start + 24h]``
    """
    instants = sample_instants(day_start)
    sun = horizontal_positions(ephemeris, "sun", instants, observer)
    planet = horizontal_positions(ephemeris, body, instants, observer)
    flags = [is_dark_visible(s.altitude, p.altitude) for s, p in zip(sun, planet, strict=True)]

    windows = merge_windows(instants, flags)
    logger.debug(f"{body}: {sum(flags)} dark-visible samples in {len(windows)} window(s)")
    return windows
