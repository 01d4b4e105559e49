"""Great-circle distance, equirectangular projection, and marker bearing."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

from homecoming.domain import route as route_constants
from homecoming.models.flight import (
    GeoPoint,
    ProjectionBounds,
    ScreenPoint,
    Viewport,
    Waypoint,
)

EARTH_RADIUS_KM = 6371.0


def haversine_distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Return the great-circle distance between two points in kilometers."""

    if a.lat == b.lat and a.lon == b.lon:
        return 0.0

    d_lat = math.radians(b.lat - a.lat)
    d_lon = math.radians(b.lon - a.lon)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.lat))
        * math.cos(math.radians(b.lat))
        * math.sin(d_lon / 2) ** 2
    )
    h = min(max(h, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def projection_bounds(
    waypoints: Iterable[Waypoint], margin_deg: float | None = None
) -> ProjectionBounds:
    """Bounding box of the waypoints expanded by a fixed margin on every side."""

    points = list(waypoints)
    if not points:
        raise ValueError("projection bounds require at least one waypoint")
    if margin_deg is None:
        margin_deg = route_constants.PROJECTION_MARGIN_DEG

    return ProjectionBounds(
        min_lon=min(w.lon for w in points) - margin_deg,
        max_lon=max(w.lon for w in points) + margin_deg,
        min_lat=min(w.lat for w in points) - margin_deg,
        max_lat=max(w.lat for w in points) + margin_deg,
    )


def project(point: GeoPoint, viewport: Viewport, bounds: ProjectionBounds) -> ScreenPoint:
    """Map a geographic point linearly onto the padded viewport.

    Longitude grows to the right. Latitude grows upward, so ``y`` is inverted.
    A route with no longitude or latitude extent divides by zero; callers must
    supply bounds with real extent.
    """

    lon_range = bounds.max_lon - bounds.min_lon
    lat_range = bounds.max_lat - bounds.min_lat
    inner_width = viewport.width - 2 * viewport.padding
    inner_height = viewport.height - 2 * viewport.padding

    x = (point.lon - bounds.min_lon) / lon_range * inner_width + viewport.padding
    y = (
        viewport.height
        - (point.lat - bounds.min_lat) / lat_range * inner_height
        - viewport.padding
    )
    return ScreenPoint(x=x, y=y)


def route_path(
    waypoints: Sequence[Waypoint], viewport: Viewport, bounds: ProjectionBounds
) -> list[ScreenPoint]:
    """Project the waypoint sequence into the polyline drawn on the map."""

    return [project(w.point, viewport, bounds) for w in waypoints]


def bearing_degrees(from_point: Optional[GeoPoint], to_point: GeoPoint) -> float:
    """Heading for the plane marker, 0 = north and 90 = east.

    Computed from the flat lat/lon delta, not the true initial great-circle
    course. With no current position the default heading is returned.
    """

    if from_point is None:
        return route_constants.DEFAULT_BEARING_DEG

    dx = to_point.lon - from_point.lon
    dy = to_point.lat - from_point.lat
    angle = math.degrees(math.atan2(dx, dy))
    if angle <= -180.0:
        angle += 360.0
    return angle


__all__ = [
    "EARTH_RADIUS_KM",
    "bearing_degrees",
    "haversine_distance_km",
    "project",
    "projection_bounds",
    "route_path",
]
