"""Pick the tracked flight out of a bulk OpenSky snapshot."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable, Optional

from homecoming.domain import route as route_constants
from homecoming.models.flight import RawAircraftState

logger = logging.getLogger("homecoming.selector")


@dataclass(frozen=True)
class MatchRules:
    """Callsign and altitude rules used to recognise the tracked flight."""

    exact_callsigns: tuple[str, ...]
    carrier_prefix: str
    min_altitude_m: float

    @classmethod
    def default(cls) -> "MatchRules":
        return cls(
            exact_callsigns=tuple(route_constants.EXACT_CALLSIGNS),
            carrier_prefix=route_constants.CARRIER_PREFIX,
            min_altitude_m=route_constants.CRUISE_ALTITUDE_THRESHOLD_M,
        )


def is_candidate(record: RawAircraftState, rules: MatchRules) -> bool:
    """Airborne, located, and above cruise threshold."""

    if record.on_ground:
        return False
    if record.latitude is None or record.longitude is None:
        return False
    if record.baro_altitude is None:
        return False
    return record.baro_altitude > rules.min_altitude_m


def select_tracked_flight(
    states: Iterable[RawAircraftState], rules: MatchRules | None = None
) -> Optional[RawAircraftState]:
    """Return the record for the tracked flight, or ``None``.

    A single pass in feed order. The first candidate carrying one of the exact
    flight identifiers wins and stops the scan. Otherwise the first candidate
    with the carrier prefix is latched and kept, even if a later carrier
    candidate would look better.
    """

    rules = rules or MatchRules.default()
    fallback: Optional[RawAircraftState] = None

    for record in states:
        if not is_candidate(record, rules):
            continue

        callsign = record.trimmed_callsign
        if any(ident in callsign for ident in rules.exact_callsigns):
            logger.debug("Exact callsign match: %s", callsign)
            return record

        if fallback is None and callsign.startswith(rules.carrier_prefix):
            logger.debug("Latched carrier fallback: %s", callsign)
            fallback = record

    return fallback


__all__ = ["MatchRules", "is_candidate", "select_tracked_flight"]
