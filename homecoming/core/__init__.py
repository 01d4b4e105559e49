"""Pure flight-state derivation functions."""

from .eta import estimate_eta
from .geo import (
    bearing_degrees,
    haversine_distance_km,
    project,
    projection_bounds,
    route_path,
)
from .selector import MatchRules, is_candidate, select_tracked_flight
from .state_builder import (
    build_flight_state,
    progress_fraction,
    region_label,
    searching_state,
)

__all__ = [
    "MatchRules",
    "bearing_degrees",
    "build_flight_state",
    "estimate_eta",
    "haversine_distance_km",
    "is_candidate",
    "progress_fraction",
    "project",
    "projection_bounds",
    "region_label",
    "route_path",
    "searching_state",
    "select_tracked_flight",
]
