import pytest
from pydantic import ValidationError

from homecoming.core.state_builder import (
    build_flight_state,
    progress_fraction,
    region_label,
    searching_state,
)
from homecoming.domain.route import ARRIVAL, DEPARTURE, Route, default_route
from homecoming.models.flight import FlightState, GeoPoint, RawAircraftState


def make_state(callsign="BG202  ", *, lat=40.0, lon=50.0, altitude=10000.0, velocity=250.0, on_ground=False):
    return RawAircraftState.from_state_vector(
        ["abc123", callsign, "Bangladesh", None, None, lon, lat, altitude, on_ground, velocity]
    )


def test_build_flight_state_converts_units():
    state = build_flight_state(make_state(), default_route())

    assert state.altitude_feet == 32808
    assert state.speed_mph == 559
    assert state.position == GeoPoint(lat=40.0, lon=50.0)
    assert state.callsign == "BG202"
    assert state.is_live is True
    assert state.on_ground is False
    assert state.region_label == "Iran"


def test_build_flight_state_treats_missing_numbers_as_zero():
    state = build_flight_state(make_state(altitude=None, velocity=None), default_route())

    assert state.altitude_feet == 0
    assert state.speed_mph == 0


@pytest.mark.parametrize("callsign", [None, "", "    "])
def test_build_flight_state_unknown_callsign(callsign):
    state = build_flight_state(make_state(callsign), default_route())

    assert state.callsign == "Unknown"


def test_build_flight_state_requires_position():
    with pytest.raises(ValueError):
        build_flight_state(make_state(lat=None), default_route())


def test_progress_at_departure_and_arrival():
    route = default_route()

    at_departure = build_flight_state(
        make_state(lat=DEPARTURE.lat, lon=DEPARTURE.lon), route
    )
    at_arrival = build_flight_state(make_state(lat=ARRIVAL.lat, lon=ARRIVAL.lon), route)

    assert at_departure.progress_fraction == 0.0
    assert at_arrival.progress_fraction == pytest.approx(1.0, abs=1e-9)


@pytest.mark.parametrize(
    "lat, lon",
    [(20.0, 120.0), (-60.0, 170.0), (51.47, -60.0), (35.0, 45.0), (0.0, 0.0)],
)
def test_progress_is_always_clamped(lat, lon):
    fraction = progress_fraction(GeoPoint(lat=lat, lon=lon), default_route())

    assert 0.0 <= fraction <= 1.0


def test_progress_beyond_arrival_is_one():
    assert progress_fraction(GeoPoint(lat=20.0, lon=120.0), default_route()) == 1.0


def test_progress_on_zero_length_route_is_zero():
    route = Route(departure=DEPARTURE, arrival=DEPARTURE)

    assert progress_fraction(GeoPoint(lat=10.0, lon=10.0), route) == 0.0


@pytest.mark.parametrize(
    "lon, expected",
    [
        (5.0, "Western Europe"),
        (-3.0, "Western Europe"),
        (10.0, "Eastern Europe"),
        (44.9, "Turkey/Middle East"),
        (59.0, "Iran"),
        (65.0, "Central Asia"),
        (75.0, "Pakistan"),
        (87.9, "India"),
        (88.0, "Bangladesh"),
        (91.0, "Bangladesh"),
    ],
)
def test_region_label_from_longitude(lon, expected):
    assert region_label(lon) == expected


def test_region_label_custom_buckets():
    thresholds = ((0.0, "West"), (100.0, "Middle"))

    assert region_label(-1.0, thresholds, "East") == "West"
    assert region_label(50.0, thresholds, "East") == "Middle"
    assert region_label(150.0, thresholds, "East") == "East"


def test_searching_state_defaults():
    state = searching_state()

    assert state.region_label == "Searching..."
    assert state.is_live is False
    assert state.position is None
    assert state.progress_fraction == 0.0


def test_live_state_requires_position():
    with pytest.raises(ValidationError):
        FlightState(region_label="Iran", is_live=True)


def test_flight_state_rejects_out_of_range_progress():
    with pytest.raises(ValidationError):
        FlightState(region_label="Iran", progress_fraction=1.5)
