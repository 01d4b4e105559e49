#!/usr/bin/env python
"""
Run this to poll the live OpenSky feed once and print what the tracker sees.

Usage (from repo root):
    python scripts/run_tracker_live_test.py
"""

import asyncio

from homecoming.core import select_tracked_flight
from homecoming.ingestors import FeedFetchError, OpenSkyIngestor
from homecoming.services import FlightTracker


async def main() -> None:
    ingestor = OpenSkyIngestor()

    print("Requesting aircraft in the London-Dhaka corridor from OpenSky...")
    try:
        states = await ingestor.fetch_states()
    except FeedFetchError as exc:
        print(f"\nFeed fetch failed: {exc}")
        return

    print(f"\nReceived {len(states)} state vectors. Showing a few:")
    for idx, s in enumerate(states[:5], start=1):
        print(
            f"{idx}. callsign={s.trimmed_callsign!r}, icao24={s.icao24!r}, "
            f"lat={s.latitude}, lon={s.longitude}, "
            f"baro_alt_m={s.baro_altitude}, on_ground={s.on_ground}, "
            f"velocity_ms={s.velocity}"
        )

    match = select_tracked_flight(states)
    print(f"\nSelector picked: {match.trimmed_callsign if match else None!r}")

    # Second request through the tracker so the full cycle is exercised
    tracker = FlightTracker(ingestor=ingestor)
    snapshot = await tracker.poll_once()
    print("\nTrackerSnapshot:")
    print(snapshot.model_dump())
    print("\nETA:", tracker.eta().model_dump())
    print("Marker:", tracker.marker().model_dump())


if __name__ == "__main__":
    asyncio.run(main())
