"""Poll loop and state container for the tracked flight."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from enum import Enum
import logging
from typing import Optional

from pydantic import BaseModel, Field

from homecoming.config import settings
from homecoming.core.eta import estimate_eta
from homecoming.core.geo import bearing_degrees, project, projection_bounds
from homecoming.core.selector import MatchRules, select_tracked_flight
from homecoming.core.state_builder import build_flight_state, searching_state
from homecoming.domain import route as route_constants
from homecoming.domain.route import Route, default_route
from homecoming.ingestors.opensky import FeedFetchError, OpenSkyIngestor
from homecoming.models.flight import EtaEstimate, FlightState, ScreenPoint, Viewport

logger = logging.getLogger("homecoming.tracker")

FETCH_FAILED_MESSAGE = "Failed to fetch flight data"


def no_aircraft_message() -> str:
    return (
        f"No {route_constants.CARRIER_NAME} flights currently tracked - "
        f"{route_constants.FLIGHT_NUMBER} may not be in the air"
    )


def not_found_message() -> str:
    return (
        f"{route_constants.FLIGHT_NUMBER} not currently in flight - "
        "Flight may be scheduled later"
    )


class TrackingStatus(str, Enum):
    """Outcome of the most recent poll cycle."""

    SEARCHING = "searching"
    LIVE = "live"
    NOT_FOUND = "not_found"
    FETCH_ERROR = "fetch_error"


class TrackerSnapshot(BaseModel):
    """Everything the display layer needs after one poll cycle."""

    state: FlightState
    status: TrackingStatus = TrackingStatus.SEARCHING
    message: Optional[str] = Field(
        default=None, description="User-facing explanation when not live"
    )
    last_update: Optional[datetime] = Field(
        default=None, description="Time of the last successful fix (UTC)"
    )


class MarkerPlacement(BaseModel):
    """Projected plane marker and the direction it should point."""

    x: float
    y: float
    bearing_deg: float


class FlightTracker:
    """Owns the current flight snapshot and refreshes it from the feed.

    Each cycle builds a new snapshot and swaps it in with a single assignment,
    so readers never see a half-updated state. Overlapping cycles are
    last-writer-wins.
    """

    def __init__(
        self,
        *,
        ingestor: OpenSkyIngestor | None = None,
        route: Route | None = None,
        rules: MatchRules | None = None,
        poll_interval: float | None = None,
    ) -> None:
        self.ingestor = ingestor or OpenSkyIngestor()
        self.route = route or default_route()
        self.rules = rules
        self.poll_interval = poll_interval or settings.poll_interval_seconds
        self._snapshot = TrackerSnapshot(state=searching_state())

    @property
    def snapshot(self) -> TrackerSnapshot:
        return self._snapshot

    def _publish_miss(self, status: TrackingStatus, message: str) -> TrackerSnapshot:
        """Keep the last known values on screen but drop the live flag."""

        previous = self._snapshot
        self._snapshot = previous.model_copy(
            update={
                "state": previous.state.model_copy(update={"is_live": False}),
                "status": status,
                "message": message,
            }
        )
        return self._snapshot

    async def poll_once(self) -> TrackerSnapshot:
        """Run one fetch, select and build cycle and publish the result."""

        try:
            states = await self.ingestor.fetch_states()
        except FeedFetchError as exc:
            logger.warning("Flight data fetch failed: %s", exc)
            return self._publish_miss(TrackingStatus.FETCH_ERROR, FETCH_FAILED_MESSAGE)

        if not states:
            logger.info("Feed returned no aircraft in the search area")
            return self._publish_miss(TrackingStatus.NOT_FOUND, no_aircraft_message())

        record = select_tracked_flight(states, self.rules)
        if record is None:
            logger.info("No matching flight among %s aircraft", len(states))
            return self._publish_miss(TrackingStatus.NOT_FOUND, not_found_message())

        state = build_flight_state(record, self.route)
        self._snapshot = TrackerSnapshot(
            state=state,
            status=TrackingStatus.LIVE,
            message=None,
            last_update=datetime.now(tz=timezone.utc),
        )
        logger.info(
            "Tracking %s at %.4f, %.4f (%s ft, %s mph, %.0f%%)",
            state.callsign,
            state.position.lat,
            state.position.lon,
            state.altitude_feet,
            state.speed_mph,
            state.progress_fraction * 100,
        )
        return self._snapshot

    def eta(self) -> EtaEstimate:
        state = self._snapshot.state
        return estimate_eta(state.position, state.speed_mph, self.route.arrival)

    def marker(self, viewport: Viewport | None = None) -> MarkerPlacement:
        """Place the plane marker, parked at departure until located."""

        viewport = viewport or Viewport()
        bounds = projection_bounds(self.route.waypoints)
        position = self._snapshot.state.position
        screen: ScreenPoint = project(
            position or self.route.departure, viewport, bounds
        )
        return MarkerPlacement(
            x=screen.x,
            y=screen.y,
            bearing_deg=bearing_degrees(position, self.route.arrival),
        )

    async def run(self) -> None:
        """Poll until cancelled."""

        while True:
            try:
                await self.poll_once()
            except asyncio.CancelledError:
                logger.info("Flight tracker cancelled")
                raise
            except Exception as exc:
                logger.warning("Flight tracker cycle error: %s", exc)

            await asyncio.sleep(self.poll_interval)


__all__ = [
    "FETCH_FAILED_MESSAGE",
    "FlightTracker",
    "MarkerPlacement",
    "TrackerSnapshot",
    "TrackingStatus",
    "no_aircraft_message",
    "not_found_message",
]
