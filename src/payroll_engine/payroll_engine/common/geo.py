from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_GEOFENCE_RADIUS_M, EARTH_RADIUS_M


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class OfficeGeofence:
    """Office location and the radius (meters) within which punches count as on-site."""

    center: GeoPoint
    allowed_radius_m: float = DEFAULT_GEOFENCE_RADIUS_M

    def contains(self, point: Optional[GeoPoint]) -> Optional[bool]:
        """None when the punch carried no location."""
        if point is None:
            return None
        return distance_m(self.center, point) <= self.allowed_radius_m


def distance_m(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle (haversine) distance in meters."""
    lat1, lat2 = math.radians(a.latitude), math.radians(b.latitude)
    d_lat = lat2 - lat1
    d_lon = math.radians(b.longitude - a.longitude)
    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(h))
