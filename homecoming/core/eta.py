"""Remaining flight time from current position and ground speed."""

from __future__ import annotations

import math
from typing import Optional

from homecoming.core.geo import haversine_distance_km
from homecoming.models.flight import EtaEstimate, GeoPoint

MPH_TO_KMH = 1.60934


def estimate_eta(
    current: Optional[GeoPoint], speed_mph: float, arrival: GeoPoint
) -> EtaEstimate:
    """Estimate hours and minutes to arrival.

    Returns 0h 0m when the position is unknown or the aircraft is not moving;
    that means "unknown", not "arriving now".
    """

    if current is None or speed_mph <= 0:
        return EtaEstimate(hours=0, minutes=0)

    remaining_km = haversine_distance_km(current, arrival)
    hours_remaining = remaining_km / (speed_mph * MPH_TO_KMH)

    # Round on total minutes so 59.6 carries into the hour instead of showing 60m.
    total_minutes = int(math.floor(hours_remaining * 60 + 0.5))
    hours, minutes = divmod(total_minutes, 60)
    return EtaEstimate(hours=hours, minutes=minutes)


__all__ = ["MPH_TO_KMH", "estimate_eta"]
