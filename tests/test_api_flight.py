import time

import pytest
from fastapi.testclient import TestClient

from homecoming.api.dependencies import get_tracker
from homecoming.config import settings
from homecoming.core.geo import project, projection_bounds
from homecoming.domain.route import WAYPOINTS
from homecoming.ingestors.opensky import FeedFetchError
from homecoming import main as main_module
from homecoming.main import app
from homecoming.models.flight import RawAircraftState, Viewport
from homecoming.services.tracker import FlightTracker


def make_state(callsign, *, lat=35.0, lon=55.0):
    return RawAircraftState.from_state_vector(
        ["abc123", callsign, "Bangladesh", None, None, lon, lat, 11000.0, False, 240.0]
    )


class FakeIngestor:
    def __init__(self, response):
        self.response = response

    async def fetch_states(self):
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


@pytest.fixture
def make_client():
    def _make(response):
        tracker = FlightTracker(ingestor=FakeIngestor(response))
        app.dependency_overrides[get_tracker] = lambda: tracker
        return TestClient(app)

    yield _make

    app.dependency_overrides.clear()


def test_health_check(monkeypatch):
    monkeypatch.setattr(settings, "enable_poller", False)

    with TestClient(app) as client:
        response = client.get("/healthz")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_flight_unavailable_without_tracker():
    response = TestClient(app).get("/api/v1/flight")

    assert response.status_code == 503


def test_flight_starts_searching(make_client):
    client = make_client([])

    response = client.get("/api/v1/flight")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "searching"
    assert body["state"]["region_label"] == "Searching..."
    assert body["state"]["position"] is None
    assert body["eta"] == {"hours": 0, "minutes": 0}


def test_refresh_publishes_live_flight(make_client):
    client = make_client([make_state("BG202  ")])

    response = client.post("/api/v1/flight/refresh")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "live"
    assert body["message"] is None
    assert body["state"]["callsign"] == "BG202"
    assert body["state"]["is_live"] is True
    assert body["state"]["position"] == {"lat": 35.0, "lon": 55.0}
    assert body["eta"]["hours"] > 0

    follow_up = client.get("/api/v1/flight")
    assert follow_up.json()["status"] == "live"


def test_refresh_reports_fetch_failure(make_client):
    client = make_client(FeedFetchError("boom"))

    body = client.post("/api/v1/flight/refresh").json()

    assert body["status"] == "fetch_error"
    assert body["message"] == "Failed to fetch flight data"


def test_refresh_reports_flight_not_tracked(make_client):
    client = make_client([make_state("THY4")])

    body = client.post("/api/v1/flight/refresh").json()

    assert body["status"] == "not_found"
    assert body["message"] != "Failed to fetch flight data"


def test_eta_endpoint(make_client):
    client = make_client([])

    response = client.get("/api/v1/flight/eta")

    assert response.status_code == 200
    assert response.json() == {"hours": 0, "minutes": 0}


def test_marker_endpoint_uses_viewport(make_client):
    client = make_client([])

    response = client.get(
        "/api/v1/flight/marker", params={"width": 800, "height": 400, "padding": 40}
    )

    assert response.status_code == 200
    body = response.json()
    expected = project(
        WAYPOINTS[0].point,
        Viewport(width=800, height=400, padding=40),
        projection_bounds(WAYPOINTS),
    )
    assert body["x"] == pytest.approx(expected.x)
    assert body["y"] == pytest.approx(expected.y)
    assert body["bearing_deg"] == 90.0


def test_marker_rejects_oversized_padding(make_client):
    client = make_client([])

    response = client.get(
        "/api/v1/flight/marker", params={"width": 100, "height": 100, "padding": 60}
    )

    assert response.status_code == 400


def test_route_endpoint(make_client):
    client = make_client([])

    response = client.get("/api/v1/route")

    assert response.status_code == 200
    body = response.json()
    assert body["departure_name"] == "London Heathrow"
    assert body["arrival"] == {"lat": 23.8103, "lon": 90.4125}
    assert [w["name"] for w in body["waypoints"]][:3] == ["London", "Brussels", "Munich"]
    assert len(body["path"]) == len(WAYPOINTS)
    assert body["path"][-1]["x"] == pytest.approx(
        project(WAYPOINTS[-1].point, Viewport(), projection_bounds(WAYPOINTS)).x
    )
    assert body["bounds"]["min_lat"] == pytest.approx(17.6)


def test_lifespan_creates_tracker(monkeypatch):
    monkeypatch.setattr(settings, "enable_poller", False)

    with TestClient(app) as client:
        response = client.get("/api/v1/flight")

    assert response.status_code == 200
    assert response.json()["status"] == "searching"


def test_lifespan_starts_poller_when_enabled(monkeypatch):
    monkeypatch.setattr(settings, "enable_poller", True)
    monkeypatch.setattr(
        main_module,
        "FlightTracker",
        lambda: FlightTracker(ingestor=FakeIngestor([make_state("BG202")]), poll_interval=0.01),
    )

    with TestClient(app) as client:
        deadline = time.monotonic() + 5
        status = None
        while time.monotonic() < deadline:
            status = client.get("/api/v1/flight").json()["status"]
            if status == "live":
                break
            time.sleep(0.02)

    assert status == "live"


def test_root_names_tracked_flight(monkeypatch):
    monkeypatch.setattr(settings, "enable_poller", False)

    response = TestClient(app).get("/")

    assert response.status_code == 200
    body = response.json()
    assert "BG202" in body["message"]
    assert body["departure"] == "London Heathrow"
    assert body["arrival"] == "Dhaka, Bangladesh"
