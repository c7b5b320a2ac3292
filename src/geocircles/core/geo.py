from __future__ import annotations
from dataclasses import dataclass
from math import asin, atan2, cos, degrees, radians, sin, sqrt

"""
Spherical geometry helpers.

The Earth is modelled as a sphere of radius `EARTH_RADIUS_MILES`; distances are in
statute miles and angles in decimal degrees. This is the accuracy target for circle
generation, so there is no ellipsoid support here.
"""

EARTH_RADIUS_MILES = 3958.8


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lon: float


def normalize_longitude(lon: float) -> float:
    """Wrap a longitude in degrees into the half-open range [-180, 180)."""
    wrapped = (lon + 180.0) % 360.0
    # Float modulo of a tiny negative number can round up to the divisor itself.
    if wrapped >= 360.0:
        wrapped = 0.0
    return wrapped - 180.0


def destination_point(
    origin: GeoPoint,
    bearing_deg: float,
    distance: float,
    *,
    radius: float = EARTH_RADIUS_MILES,
) -> GeoPoint:
    """Point reached from `origin` after `distance` along the initial `bearing_deg`.

    `distance` and `radius` share a unit (miles by default). The returned longitude is
    normalized into [-180, 180).
    """
    lat1 = radians(origin.lat)
    lon1 = radians(origin.lon)
    theta = radians(bearing_deg)
    delta = distance / radius

    sin_lat2 = sin(lat1) * cos(delta) + cos(lat1) * sin(delta) * cos(theta)
    lat2 = asin(max(-1.0, min(1.0, sin_lat2)))
    lon2 = lon1 + atan2(
        sin(theta) * sin(delta) * cos(lat1),
        cos(delta) - sin(lat1) * sin(lat2),
    )
    return GeoPoint(lat=degrees(lat2), lon=normalize_longitude(degrees(lon2)))


def haversine_miles(a: GeoPoint, b: GeoPoint, *, radius: float = EARTH_RADIUS_MILES) -> float:
    """Compute great-circle distance in miles between two points."""
    lat1 = radians(a.lat)
    lon1 = radians(a.lon)
    lat2 = radians(b.lat)
    lon2 = radians(b.lon)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    return 2 * radius * asin(min(1.0, sqrt(h)))
