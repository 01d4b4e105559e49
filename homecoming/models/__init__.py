"""Pydantic models for the Homecoming tracker."""

from .flight import (
    EtaEstimate,
    FlightState,
    GeoPoint,
    ProjectionBounds,
    RawAircraftState,
    ScreenPoint,
    Viewport,
    Waypoint,
)

__all__ = [
    "EtaEstimate",
    "FlightState",
    "GeoPoint",
    "ProjectionBounds",
    "RawAircraftState",
    "ScreenPoint",
    "Viewport",
    "Waypoint",
]
