"""Convert a selected OpenSky record into the display-ready flight state."""

from __future__ import annotations

import math
from typing import Sequence

from homecoming.core.geo import haversine_distance_km
from homecoming.domain import route as route_constants
from homecoming.domain.route import Route
from homecoming.models.flight import FlightState, GeoPoint, RawAircraftState

METERS_TO_FEET = 3.28084
MPS_TO_MPH = 2.23694
UNKNOWN_CALLSIGN = "Unknown"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _m_to_feet(value_m: float | None) -> int:
    if value_m is None:
        return 0
    return max(_round_half_up(value_m * METERS_TO_FEET), 0)


def _mps_to_mph(value_mps: float | None) -> int:
    if value_mps is None:
        return 0
    return max(_round_half_up(value_mps * MPS_TO_MPH), 0)


def region_label(
    lon: float,
    thresholds: Sequence[tuple[float, str]] | None = None,
    final_region: str | None = None,
) -> str:
    """Coarse region name from longitude alone."""

    if thresholds is None:
        thresholds = route_constants.REGION_THRESHOLDS
    if final_region is None:
        final_region = route_constants.FINAL_REGION

    for upper_bound, name in thresholds:
        if lon < upper_bound:
            return name
    return final_region


def progress_fraction(current: GeoPoint, route: Route) -> float:
    """Distance flown from departure over total route distance, clamped to [0, 1]."""

    total_km = haversine_distance_km(route.departure, route.arrival)
    if total_km == 0:
        return 0.0
    flown_km = haversine_distance_km(route.departure, current)
    return min(max(flown_km / total_km, 0.0), 1.0)


def build_flight_state(record: RawAircraftState, route: Route) -> FlightState:
    """Build a live FlightState from a located record."""

    position = record.position
    if position is None:
        raise ValueError("cannot build a flight state from a record without position")

    return FlightState(
        position=position,
        altitude_feet=_m_to_feet(record.baro_altitude),
        speed_mph=_mps_to_mph(record.velocity),
        progress_fraction=progress_fraction(position, route),
        region_label=region_label(position.lon),
        is_live=True,
        callsign=record.trimmed_callsign or UNKNOWN_CALLSIGN,
        on_ground=record.on_ground,
    )


def searching_state() -> FlightState:
    """State shown before the flight has been located."""

    return FlightState(region_label=route_constants.SEARCHING_REGION)


__all__ = [
    "METERS_TO_FEET",
    "MPS_TO_MPH",
    "UNKNOWN_CALLSIGN",
    "build_flight_state",
    "progress_fraction",
    "region_label",
    "searching_state",
]
