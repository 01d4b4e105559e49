"""Static route and feed constants for the tracked flight."""

from __future__ import annotations

from dataclasses import dataclass, field

from homecoming.models.flight import GeoPoint, Waypoint

DEPARTURE = GeoPoint(lat=51.47, lon=-0.4543)
ARRIVAL = GeoPoint(lat=23.8103, lon=90.4125)
DEPARTURE_NAME = "London Heathrow"
ARRIVAL_NAME = "Dhaka, Bangladesh"

WAYPOINTS: tuple[Waypoint, ...] = (
    Waypoint(name="London", lat=51.47, lon=-0.4543, region="United Kingdom"),
    Waypoint(name="Brussels", lat=50.8, lon=4.3, region="Belgium"),
    Waypoint(name="Munich", lat=48.1, lon=11.6, region="Germany"),
    Waypoint(name="Vienna", lat=48.2, lon=16.4, region="Austria"),
    Waypoint(name="Istanbul", lat=41.0, lon=29.0, region="Turkey"),
    Waypoint(name="Ankara", lat=39.9, lon=32.8, region="Turkey"),
    Waypoint(name="Tehran", lat=35.7, lon=51.4, region="Iran"),
    Waypoint(name="Mashhad", lat=36.3, lon=59.6, region="Iran"),
    Waypoint(name="Kabul", lat=34.5, lon=69.2, region="Afghanistan"),
    Waypoint(name="Islamabad", lat=33.7, lon=73.1, region="Pakistan"),
    Waypoint(name="Lahore", lat=31.5, lon=74.3, region="Pakistan"),
    Waypoint(name="Delhi", lat=28.6, lon=77.2, region="India"),
    Waypoint(name="Kolkata", lat=22.6, lon=88.4, region="India"),
    Waypoint(name="Dhaka", lat=23.8103, lon=90.4125, region="Bangladesh"),
)

# Exclusive upper bounds on longitude, ascending. Latitude is ignored.
REGION_THRESHOLDS: tuple[tuple[float, str], ...] = (
    (10.0, "Western Europe"),
    (30.0, "Eastern Europe"),
    (45.0, "Turkey/Middle East"),
    (60.0, "Iran"),
    (70.0, "Central Asia"),
    (80.0, "Pakistan"),
    (88.0, "India"),
)
FINAL_REGION = "Bangladesh"
SEARCHING_REGION = "Searching..."

# Covers the whole London to Dhaka corridor.
SEARCH_BOUNDING_BOX: dict[str, float] = {
    "lamin": 20.0,
    "lomin": -5.0,
    "lamax": 55.0,
    "lomax": 95.0,
}

CRUISE_ALTITUDE_THRESHOLD_M = 6000.0
EXACT_CALLSIGNS: tuple[str, ...] = ("BG202", "BBC202")
CARRIER_PREFIX = "BBC"
CARRIER_NAME = "Biman Bangladesh"
FLIGHT_NUMBER = "BG202"

PROJECTION_MARGIN_DEG = 5.0
DEFAULT_BEARING_DEG = 90.0


@dataclass(frozen=True)
class Route:
    """Departure and arrival endpoints plus the waypoints drawn between them."""

    departure: GeoPoint
    arrival: GeoPoint
    departure_name: str = ""
    arrival_name: str = ""
    waypoints: tuple[Waypoint, ...] = field(default_factory=tuple)


def default_route() -> Route:
    return Route(
        departure=DEPARTURE,
        arrival=ARRIVAL,
        departure_name=DEPARTURE_NAME,
        arrival_name=ARRIVAL_NAME,
        waypoints=WAYPOINTS,
    )


__all__ = [
    "ARRIVAL",
    "ARRIVAL_NAME",
    "CARRIER_NAME",
    "CARRIER_PREFIX",
    "CRUISE_ALTITUDE_THRESHOLD_M",
    "DEFAULT_BEARING_DEG",
    "DEPARTURE",
    "DEPARTURE_NAME",
    "EXACT_CALLSIGNS",
    "FINAL_REGION",
    "FLIGHT_NUMBER",
    "PROJECTION_MARGIN_DEG",
    "REGION_THRESHOLDS",
    "Route",
    "SEARCHING_REGION",
    "SEARCH_BOUNDING_BOX",
    "WAYPOINTS",
    "default_route",
]
