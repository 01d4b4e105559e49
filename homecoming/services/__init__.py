"""Service-layer helpers for the Homecoming tracker."""

from .tracker import (
    FlightTracker,
    MarkerPlacement,
    TrackerSnapshot,
    TrackingStatus,
)

__all__ = [
    "FlightTracker",
    "MarkerPlacement",
    "TrackerSnapshot",
    "TrackingStatus",
]
