"""OpenSky bulk state-vector ingestor for the route corridor."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from homecoming.config import settings
from homecoming.domain import route as route_constants
from homecoming.models.flight import RawAircraftState

logger = logging.getLogger("homecoming.ingestors.opensky")


class FeedFetchError(RuntimeError):
    """The state feed could not be fetched or decoded."""


def parse_states(payload: Any) -> list[RawAircraftState]:
    """Turn an OpenSky response body into state records.

    A missing or null ``states`` array is a valid, empty snapshot. Entries that
    are not usable state vectors are skipped.
    """

    if not isinstance(payload, dict):
        raise FeedFetchError("OpenSky payload is not a JSON object")

    raw_states = payload.get("states") or []
    if not isinstance(raw_states, list):
        raise FeedFetchError("OpenSky 'states' field is not an array")

    records: list[RawAircraftState] = []
    for entry in raw_states:
        record = RawAircraftState.from_state_vector(entry)
        if record is None:
            logger.debug("Skipping malformed state vector: %r", entry)
            continue
        records.append(record)
    return records


class OpenSkyIngestor:
    """Fetch the current aircraft snapshot inside the search bounding box."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        bounding_box: dict[str, float] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or settings.opensky_base_url
        self.timeout = timeout or settings.opensky_timeout
        self.bounding_box = bounding_box
        self.transport = transport

    def _params(self) -> dict[str, float]:
        box = self.bounding_box or route_constants.SEARCH_BOUNDING_BOX
        return {key: box[key] for key in ("lamin", "lomin", "lamax", "lomax")}

    async def fetch_states(self) -> list[RawAircraftState]:
        params = self._params()

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(self.base_url, params=params)
        except httpx.TimeoutException as exc:
            logger.warning("OpenSky request timed out: %s", exc)
            raise FeedFetchError("OpenSky request timed out") from exc
        except httpx.RequestError as exc:
            logger.warning("OpenSky request failed: %s", exc)
            raise FeedFetchError("OpenSky request failed") from exc

        if response.status_code == 429:
            logger.warning("OpenSky rate limit encountered: %s", response.text)
            raise FeedFetchError("OpenSky rate limit exceeded")
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "OpenSky returned HTTP %s: %s", exc.response.status_code, exc
            )
            raise FeedFetchError(
                f"OpenSky returned HTTP {exc.response.status_code}"
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("Failed to parse OpenSky JSON response: %s", exc)
            raise FeedFetchError("OpenSky returned invalid JSON") from exc

        records = parse_states(payload)
        logger.debug("Ingested %s state vectors", len(records))
        return records


__all__ = ["FeedFetchError", "OpenSkyIngestor", "parse_states"]
