from __future__ import annotations

import asyncio
import contextlib
import logging
import time

from fastapi import FastAPI, Request

from homecoming.api import api_router
from homecoming.config import settings
from homecoming.domain import route as route_constants
from homecoming.services import FlightTracker

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger("homecoming")


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the flight tracker and start polling if enabled."""

    app.state.tracker = FlightTracker()

    if settings.enable_poller:
        app.state.poll_task = asyncio.create_task(app.state.tracker.run())
        logger.info(
            "Flight poller started (every %s s)", settings.poll_interval_seconds
        )

    try:
        yield
    finally:
        task = getattr(app.state, "poll_task", None)
        if task:
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
        app.state.poll_task = None
        app.state.tracker = None


app = FastAPI(title="Homecoming Tracker Backend", lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log each request; health probes only at debug level."""

    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    level = logging.DEBUG if request.url.path == "/healthz" else logging.INFO
    logger.log(
        level,
        "HTTP %s %s -> %s (%.2f ms)",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


app.include_router(api_router)


@app.get("/", summary="Root")
def read_root() -> dict[str, str]:
    """Name the tracked flight and route so a browser hit shows what is being followed."""

    return {
        "message": f"Tracking {route_constants.CARRIER_NAME} {route_constants.FLIGHT_NUMBER}",
        "departure": route_constants.DEPARTURE_NAME,
        "arrival": route_constants.ARRIVAL_NAME,
    }
