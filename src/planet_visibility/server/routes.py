"""Planet visibility API endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from ..api.core.config import Settings
from ..api.ephemeris import SkyfieldEphemeris, load_ephemeris
from ..api.observer import make_observer, parse_coordinates, parse_reference_instant
from ..api.visibility import build_visibility_report


logger = logging.getLogger(__name__)


router = APIRouter(tags=["planets"])


def get_ephemeris(request: Request) -> SkyfieldEphemeris:
    """Ephemeris injected into the app, or the configured kernel."""
    ephemeris = getattr(request.app.state, "ephemeris", None)
    if ephemeris is not None:
        return ephemeris
    settings: Settings = request.app.state.settings
    return load_ephemeris(settings.ephemeris_file, settings.skyfield_dir)


@router.get("/api/planets", summary="Planet visibility for a location and day")
def get_planets(
    request: Request,
    lat: str | None = Query(default=None, description="Observer latitude, -90 to 90"),
    lon: str | None = Query(default=None, description="Observer longitude, -180 to 180"),
    date: str | None = Query(default=None, description="ISO-8601 reference date (default: now)"),
) -> JSONResponse:
    """
    Compute rise/set/transit times, current position, magnitude and dark-sky
    windows for Mercury through Neptune.

    Inputs are validated before any computation:
    - 400 {"error": "Invalid coordinates"} for missing or out-of-range lat/lon
    - 400 {"error": "Invalid date"} for an unparseable date

    Example:
        GET /api/planets?lat=45.0105&lon=-93.4556&date=2024-06-21
    """
    latitude, longitude = parse_coordinates(lat, lon)
    reference = parse_reference_instant(date)
    observer = make_observer(latitude, longitude)

    report = build_visibility_report(get_ephemeris(request), observer, reference)

    settings: Settings = request.app.state.settings
    return JSONResponse(report.to_dict(), headers={"Cache-Control": settings.cache_control})


@router.get("/healthz", include_in_schema=False)
def healthz() -> dict[str, str]:
    return {"status": "ok"}
