"""Tracked flight endpoints consumed by the display layer."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from homecoming.core.geo import projection_bounds, route_path
from homecoming.models.flight import (
    EtaEstimate,
    GeoPoint,
    ProjectionBounds,
    ScreenPoint,
    Viewport,
    Waypoint,
)
from homecoming.services.tracker import FlightTracker, MarkerPlacement, TrackerSnapshot

from .dependencies import get_tracker, get_viewport

router = APIRouter(prefix="/api/v1", tags=["flight"])

logger = logging.getLogger("homecoming.flight")


class FlightResponse(TrackerSnapshot):
    """Tracker snapshot with the current arrival estimate attached."""

    eta: EtaEstimate


class RouteResponse(BaseModel):
    """Static route geometry for drawing the reference path."""

    departure: GeoPoint
    arrival: GeoPoint
    departure_name: str
    arrival_name: str
    waypoints: list[Waypoint]
    bounds: ProjectionBounds
    path: list[ScreenPoint] = Field(
        default_factory=list, description="Waypoints projected onto the viewport"
    )


def _flight_response(tracker: FlightTracker) -> FlightResponse:
    snapshot = tracker.snapshot
    return FlightResponse(**snapshot.model_dump(), eta=tracker.eta())


@router.get("/flight", response_model=FlightResponse, summary="Current flight state")
async def get_flight(tracker: FlightTracker = Depends(get_tracker)) -> FlightResponse:
    """Return the latest snapshot published by the poll loop."""

    return _flight_response(tracker)


@router.post(
    "/flight/refresh",
    response_model=FlightResponse,
    summary="Poll the feed now",
)
async def refresh_flight(
    tracker: FlightTracker = Depends(get_tracker),
) -> FlightResponse:
    """Run one poll cycle immediately instead of waiting for the timer."""

    snapshot = await tracker.poll_once()
    logger.info("Manual refresh completed: status=%s", snapshot.status.value)
    return _flight_response(tracker)


@router.get("/flight/eta", response_model=EtaEstimate, summary="Estimated time to arrival")
async def get_eta(tracker: FlightTracker = Depends(get_tracker)) -> EtaEstimate:
    return tracker.eta()


@router.get(
    "/flight/marker",
    response_model=MarkerPlacement,
    summary="Projected plane marker position",
)
async def get_marker(
    viewport: Viewport = Depends(get_viewport),
    tracker: FlightTracker = Depends(get_tracker),
) -> MarkerPlacement:
    return tracker.marker(viewport)


@router.get("/route", response_model=RouteResponse, summary="Reference route geometry")
async def get_route(
    viewport: Viewport = Depends(get_viewport),
    tracker: FlightTracker = Depends(get_tracker),
) -> RouteResponse:
    route = tracker.route
    bounds = projection_bounds(route.waypoints)
    return RouteResponse(
        departure=route.departure,
        arrival=route.arrival,
        departure_name=route.departure_name,
        arrival_name=route.arrival_name,
        waypoints=list(route.waypoints),
        bounds=bounds,
        path=route_path(route.waypoints, viewport, bounds),
    )
