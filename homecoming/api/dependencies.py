"""Shared FastAPI dependencies."""

from __future__ import annotations

from fastapi import HTTPException, Query, Request, status

from homecoming.models.flight import Viewport
from homecoming.services.tracker import FlightTracker


def get_tracker(request: Request) -> FlightTracker:
    """Return the tracker created during application startup."""

    tracker: FlightTracker | None = getattr(request.app.state, "tracker", None)
    if tracker is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Flight tracker is not running",
        )
    return tracker


def get_viewport(
    width: float = Query(default=1000.0, gt=0, description="Canvas width"),
    height: float = Query(default=500.0, gt=0, description="Canvas height"),
    padding: float = Query(default=80.0, ge=0, description="Symmetric padding"),
) -> Viewport:
    if 2 * padding >= min(width, height):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="padding must be less than half the width and height",
        )
    return Viewport(width=width, height=height, padding=padding)
