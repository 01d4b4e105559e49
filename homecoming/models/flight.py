"""Models for the tracked flight and the raw OpenSky state vectors."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _to_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class GeoPoint(BaseModel):
    """A latitude/longitude pair in decimal degrees."""

    lat: float = Field(..., description="Latitude in decimal degrees")
    lon: float = Field(..., description="Longitude in decimal degrees")

    model_config = ConfigDict(frozen=True)


class Waypoint(BaseModel):
    """Named reference point along the illustrative route."""

    name: str = Field(..., description="Display name of the waypoint")
    lat: float = Field(..., description="Latitude in decimal degrees")
    lon: float = Field(..., description="Longitude in decimal degrees")
    region: str = Field(..., description="Region the waypoint sits in")

    model_config = ConfigDict(frozen=True)

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(lat=self.lat, lon=self.lon)


class RawAircraftState(BaseModel):
    """One entry of the OpenSky ``states`` array, in feed field order."""

    icao24: Optional[str] = Field(default=None, description="ICAO hex identifier")
    callsign: Optional[str] = Field(
        default=None, description="Broadcast callsign, possibly space padded"
    )
    origin_country: Optional[str] = Field(default=None)
    time_position: Optional[float] = Field(default=None)
    last_contact: Optional[float] = Field(default=None)
    longitude: Optional[float] = Field(default=None)
    latitude: Optional[float] = Field(default=None)
    baro_altitude: Optional[float] = Field(
        default=None, description="Barometric altitude in meters"
    )
    on_ground: Optional[bool] = Field(default=None)
    velocity: Optional[float] = Field(
        default=None, description="Ground velocity in meters per second"
    )
    true_track: Optional[float] = Field(
        default=None, description="Track heading in degrees clockwise from north"
    )
    vertical_rate: Optional[float] = Field(
        default=None, description="Vertical rate in meters per second"
    )

    model_config = ConfigDict(frozen=True, extra="ignore")

    @classmethod
    def from_state_vector(cls, entry: Any) -> Optional["RawAircraftState"]:
        """Build a record from a raw state array, or ``None`` if unusable."""

        if not isinstance(entry, (list, tuple)) or len(entry) < 10:
            return None

        def at(index: int) -> Any:
            return entry[index] if len(entry) > index else None

        icao24 = entry[0] if isinstance(entry[0], str) else None
        callsign = entry[1] if isinstance(entry[1], str) else None
        origin_country = entry[2] if isinstance(entry[2], str) else None
        on_ground = entry[8] if isinstance(entry[8], bool) else None

        return cls(
            icao24=icao24,
            callsign=callsign,
            origin_country=origin_country,
            time_position=_to_float(entry[3]),
            last_contact=_to_float(entry[4]),
            longitude=_to_float(entry[5]),
            latitude=_to_float(entry[6]),
            baro_altitude=_to_float(entry[7]),
            on_ground=on_ground,
            velocity=_to_float(entry[9]),
            true_track=_to_float(at(10)),
            vertical_rate=_to_float(at(11)),
        )

    @property
    def trimmed_callsign(self) -> str:
        return self.callsign.strip() if self.callsign else ""

    @property
    def position(self) -> Optional[GeoPoint]:
        if self.latitude is None or self.longitude is None:
            return None
        return GeoPoint(lat=self.latitude, lon=self.longitude)


class FlightState(BaseModel):
    """Display-ready state of the tracked flight for one poll cycle."""

    position: Optional[GeoPoint] = Field(
        default=None, description="Current position, absent until located"
    )
    altitude_feet: int = Field(default=0, ge=0, description="Altitude in feet")
    speed_mph: int = Field(default=0, ge=0, description="Ground speed in mph")
    progress_fraction: float = Field(
        default=0.0, ge=0.0, le=1.0, description="Route completion from 0 to 1"
    )
    region_label: str = Field(..., description="Coarse region from longitude")
    is_live: bool = Field(
        default=False, description="True only when matched during this poll"
    )
    callsign: Optional[str] = Field(default=None, description="Trimmed callsign")
    on_ground: Optional[bool] = Field(default=None)

    @model_validator(mode="after")
    def check_live_has_position(self) -> "FlightState":
        if self.is_live and self.position is None:
            raise ValueError("a live flight state requires a position")
        return self


class EtaEstimate(BaseModel):
    """Remaining time to arrival split into whole hours and minutes."""

    hours: int = Field(default=0, ge=0)
    minutes: int = Field(default=0, ge=0, le=59)


class Viewport(BaseModel):
    """Canvas size and symmetric padding used for projection."""

    width: float = Field(default=1000.0, gt=0)
    height: float = Field(default=500.0, gt=0)
    padding: float = Field(default=80.0, ge=0)


class ProjectionBounds(BaseModel):
    """Geographic extent mapped onto the viewport."""

    min_lon: float
    max_lon: float
    min_lat: float
    max_lat: float


class ScreenPoint(BaseModel):
    """Projected canvas coordinates."""

    x: float
    y: float


__all__ = [
    "EtaEstimate",
    "FlightState",
    "GeoPoint",
    "ProjectionBounds",
    "RawAircraftState",
    "ScreenPoint",
    "Viewport",
    "Waypoint",
]
