"""Geographic coordinates and great-circle distance."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

from ..core.constants import EARTH_RADIUS_KM
from ..core.exceptions import InvalidCoordinatesError


@dataclass(frozen=True)
class GeoLocation:
    """Immutable longitude/latitude pair, validated on construction."""

    longitude: float
    latitude: float

    def __post_init__(self):
        if not -180.0 <= self.longitude <= 180.0:
            raise InvalidCoordinatesError("Longitude must be between -180 and 180")
        if not -90.0 <= self.latitude <= 90.0:
            raise InvalidCoordinatesError("Latitude must be between -90 and 90")

    @classmethod
    def build(cls, *, longitude, latitude) -> "GeoLocation":
        """Coerce raw input to floats, then validate."""
        try:
            return cls(longitude=float(longitude), latitude=float(latitude))
        except (TypeError, ValueError):
            raise InvalidCoordinatesError("Invalid coordinates")

    @property
    def present(self) -> bool:
        return True

    def distance_to(self, other: "AnyGeoLocation") -> float:
        """Haversine distance in kilometers; infinite when ``other`` has no coordinates."""
        if not other.present:
            return math.inf
        if self == other:
            return 0.0
        return EARTH_RADIUS_KM * self._central_angle(other)

    def _central_angle(self, other: "GeoLocation") -> float:
        lat1 = math.radians(self.latitude)
        lat2 = math.radians(other.latitude)
        d_lat = math.radians(other.latitude - self.latitude)
        d_lon = math.radians(other.longitude - self.longitude)

        a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
        return 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


@dataclass(frozen=True)
class NullGeoLocation:
    """Stand-in for missing coordinates: every distance is undefined (infinite)."""

    longitude = None
    latitude = None

    @property
    def present(self) -> bool:
        return False

    def distance_to(self, other: "AnyGeoLocation") -> float:
        return math.inf


AnyGeoLocation = Union[GeoLocation, NullGeoLocation]


def geo_location_from(longitude: Optional[float], latitude: Optional[float]) -> AnyGeoLocation:
    if longitude is None or latitude is None:
        return NullGeoLocation()
    return GeoLocation(longitude=longitude, latitude=latitude)
