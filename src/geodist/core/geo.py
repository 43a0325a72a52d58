from __future__ import annotations

from dataclasses import dataclass
from math import atan2, cos, nan, radians, sin, sqrt
from typing import Literal

import numpy as np

"""
Great-circle distance on a spherical Earth.

`Location` is a plain value type; distances come from the haversine formula
scaled by a mean Earth radius in the requested unit. There is no
range checking: out-of-range or NaN coordinates flow through the math as-is.
"""

# Mean Earth radius. Values from Moritz, H. Journal of Geodesy (2000) 74: 128.
# https://doi.org/10.1007/s001900050278
KILOMETERS = 6371.0087714
MILES = 3958.76131603933
NAUTICAL_MILES = MILES * 1.1508

DistanceUnit = Literal["mi", "nmi", "km"]

UNIT_RADII: dict[str, float] = {
    "mi": MILES,
    "nmi": NAUTICAL_MILES,
    "km": KILOMETERS,
}


def _widen_single(value: float) -> float:
    # Round to binary32, then widen back to binary64 (keeps the float32 error).
    return float(np.float32(value))


@dataclass(frozen=True)
class Location:
    """A point on the globe in decimal degrees."""

    latitude: float
    longitude: float

    @classmethod
    def from_pair(cls, latlon: tuple[float, float]) -> "Location":
        """Build a location from a `(lat, lon)` pair of doubles, stored verbatim."""
        lat, lon = latlon
        return cls(latitude=float(lat), longitude=float(lon))

    @classmethod
    def from_single_precision(cls, lat: float, lon: float) -> "Location":
        """Build a location from single-precision components.

        Each component is converted to float32 and widened back to a double,
        so `from_single_precision(38.898556, -77.037852)` stores
        `38.898555755615234, -77.03784942626953` rather than the decimal input.
        """
        return cls(latitude=_widen_single(lat), longitude=_widen_single(lon))

    @classmethod
    def from_single_precision_pair(cls, latlon: tuple[float, float]) -> "Location":
        lat, lon = latlon
        return cls.from_single_precision(lat, lon)

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)

    def distance_mi(self, other: "Location") -> float:
        """Distance in miles between two points."""
        return MILES * self.central_angle(other)

    def distance_nautical_mi(self, other: "Location") -> float:
        """Distance in nautical miles between two points."""
        return NAUTICAL_MILES * self.central_angle(other)

    def distance_km(self, other: "Location") -> float:
        """Distance in kilometers between two points."""
        return KILOMETERS * self.central_angle(other)

    def distance_to(self, other: "Location", unit: str = "km") -> float:
        """Distance in the named unit (`mi`, `nmi` or `km`)."""
        if unit == "mi":
            return self.distance_mi(other)
        if unit == "nmi":
            return self.distance_nautical_mi(other)
        if unit == "km":
            return self.distance_km(other)
        raise ValueError(f"Unknown distance unit '{unit}'; expected one of: {', '.join(UNIT_RADII)}")

    def central_angle(self, other: "Location") -> float:
        """Haversine central angle in radians, not yet scaled by a radius."""
        d_lat = radians(other.latitude - self.latitude)
        d_lon = radians(other.longitude - self.longitude)
        lat1 = radians(self.latitude)
        lat2 = radians(other.latitude)

        try:
            # cos product grouped: a(self, other) == a(other, self) bit for bit.
            a = sin(d_lat / 2.0) * sin(d_lat / 2.0) + sin(d_lon / 2.0) * sin(d_lon / 2.0) * (cos(lat1) * cos(lat2))
            return 2.0 * atan2(sqrt(a), sqrt(1.0 - a))
        except ValueError:
            # `math` raises on sin(inf) and sqrt(<0); IEEE arithmetic gives NaN there.
            return nan
