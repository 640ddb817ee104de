"""GeoPoint value object — immutable (latitude, longitude) pair in decimal degrees."""

from __future__ import annotations

import math
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    @classmethod
    def from_pair(cls, latitude: float | None, longitude: float | None) -> GeoPoint | None:
        """Point for a pair of optional coordinates; None unless both are set."""
        if latitude is None or longitude is None:
            return None
        return cls(latitude=latitude, longitude=longitude)

    def haversine_km(self, other: GeoPoint) -> float:
        """Great-circle distance in km on a spherical Earth."""
        phi1, phi2 = math.radians(self.latitude), math.radians(other.latitude)
        half_dphi = (phi2 - phi1) / 2
        half_dlambda = math.radians(other.longitude - self.longitude) / 2

        h = math.sin(half_dphi) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(half_dlambda) ** 2
        # Rounding can push h a hair past 1 for antipodal points
        return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(min(1.0, h)))
