"""
Domain models (Pydantic).

These types are the JSON contract of the CLI (`geodist distance --json`).
Coordinates carry no range constraints: out-of-range values are computed like
any other.
"""

from __future__ import annotations

from pydantic import BaseModel

from geodist.core.geo import DistanceUnit, Location


class Coordinates(BaseModel):
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lon: float

    @classmethod
    def from_location(cls, location: Location) -> "Coordinates":
        return cls(lat=location.latitude, lon=location.longitude)

    def to_location(self, *, single_precision: bool = False) -> Location:
        if single_precision:
            return Location.from_single_precision(self.lat, self.lon)
        return Location(latitude=self.lat, longitude=self.lon)


class DistanceRequest(BaseModel):
    start: Coordinates
    end: Coordinates
    unit: DistanceUnit = "km"
    single_precision: bool = False


class DistanceResult(BaseModel):
    """A computed distance plus the (possibly widened) points it was computed from."""

    start: Coordinates
    end: Coordinates
    unit: DistanceUnit
    distance: float
    central_angle_rad: float


def compute_distance(request: DistanceRequest) -> DistanceResult:
    start = request.start.to_location(single_precision=request.single_precision)
    end = request.end.to_location(single_precision=request.single_precision)
    return DistanceResult(
        start=Coordinates.from_location(start),
        end=Coordinates.from_location(end),
        unit=request.unit,
        distance=start.distance_to(end, request.unit),
        central_angle_rad=start.central_angle(end),
    )
