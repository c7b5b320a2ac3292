"""
Circle point generation.

`generate` walks the compass in fixed bearing increments starting at 0 (north) and
places one point per bearing at the requested great-circle distance from the center,
using the spherical destination-point formula from `geocircles.core.geo`.

Notes:
- The function is pure: no I/O, no settings lookup, no shared state.
- A step that does not divide 360 is accepted; the ring then stops at the last
  bearing below 360 instead of closing exactly on 0.
- Centers on a pole are not special-cased. Every point lands on the right latitude
  but longitudes are numerically arbitrary there, as they are on a real sphere.
"""

from __future__ import annotations

import math
from typing import Any

from geocircles.core.geo import EARTH_RADIUS_MILES, GeoPoint, destination_point
from geocircles.domain.models import GeneratedPoint

DEFAULT_ANGULAR_STEP_DEGREES = 10.0
BEARING_COUNT_TOLERANCE = 1e-9


class InvalidDistance(ValueError):
    """Raised when a ring distance is not a finite number of miles greater than 0."""

    def __init__(self, distance: Any) -> None:
        self.distance = distance
        super().__init__(
            f"Invalid distance {distance!r}: must be a finite number of miles greater than 0."
        )


class InvalidAngularStep(ValueError):
    """Raised when the bearing increment cannot describe a ring (<= 0, > 360 or non-finite)."""

    def __init__(self, step: Any) -> None:
        self.step = step
        super().__init__(
            f"Invalid angular step {step!r}: must be a finite number of degrees in (0, 360]."
        )


def _center_point(center: Any) -> GeoPoint:
    if isinstance(center, GeoPoint):
        return center
    if hasattr(center, "latitude") and hasattr(center, "longitude"):
        return GeoPoint(lat=float(center.latitude), lon=float(center.longitude))
    lat, lon = center
    return GeoPoint(lat=float(lat), lon=float(lon))


def _validate_distance(distance: Any) -> float:
    try:
        value = float(distance)
    except (TypeError, ValueError) as e:
        raise InvalidDistance(distance) from e
    if not math.isfinite(value) or value <= 0:
        raise InvalidDistance(distance)
    return value


def _validate_step(step: Any) -> float:
    try:
        value = float(step)
    except (TypeError, ValueError) as e:
        raise InvalidAngularStep(step) from e
    if not math.isfinite(value) or value <= 0 or value > 360:
        raise InvalidAngularStep(step)
    return value


def bearings(angular_step_degrees: float = DEFAULT_ANGULAR_STEP_DEGREES) -> list[float]:
    """Return the bearings of one ring: 0, step, 2*step, ..., ceil(360 / step) values in total."""
    step = _validate_step(angular_step_degrees)
    # Count first: 360/n steps can multiply back to just under 360 and repeat the 0 bearing.
    count = math.ceil(360.0 / step - BEARING_COUNT_TOLERANCE)
    return [k * step for k in range(count)]


def generate(
    center: Any,
    distance_miles: float,
    angular_step_degrees: float = DEFAULT_ANGULAR_STEP_DEGREES,
    *,
    earth_radius_miles: float = EARTH_RADIUS_MILES,
) -> list[GeneratedPoint]:
    """Generate the ring of points `distance_miles` away from `center`.

    `center` may be a `Coordinate`, a core `GeoPoint`, or a `(lat, lon)` pair. Points
    come back in increasing bearing order starting at 0.

    Raises:
        InvalidDistance: `distance_miles` is <= 0, NaN or infinite.
        InvalidAngularStep: `angular_step_degrees` is <= 0, > 360 or non-finite.
    """
    distance = _validate_distance(distance_miles)
    origin = _center_point(center)

    points: list[GeneratedPoint] = []
    for angle in bearings(angular_step_degrees):
        dest = destination_point(origin, angle, distance, radius=earth_radius_miles)
        points.append(
            GeneratedPoint(
                distance=distance,
                angle=angle,
                latitude=dest.lat,
                longitude=dest.lon,
            )
        )
    return points
