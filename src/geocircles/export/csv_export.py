"""
CSV rendering of generated points.

Columns follow the legacy export: distance, angle, latitude, longitude. Integral
distances/angles print without a fractional part ("10", not "10.0").
"""

from __future__ import annotations

import csv
import io
from typing import Iterable

from geocircles.domain.models import GeneratedPoint

CSV_HEADER = ["Distance (miles)", "Angle (degrees)", "Latitude", "Longitude"]


def format_number(value: float) -> str:
    """Shortest text for a distance or angle: integers without ".0", others via repr."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_coordinate(value: float, decimal_places: int | None = None) -> str:
    """Format a latitude/longitude; `None` keeps full round-trip precision."""
    if decimal_places is None:
        return repr(float(value))
    return f"{value:.{decimal_places}f}"


def point_row(point: GeneratedPoint, *, decimal_places: int | None = None) -> list[str]:
    return [
        format_number(point.distance),
        format_number(point.angle),
        format_coordinate(point.latitude, decimal_places),
        format_coordinate(point.longitude, decimal_places),
    ]


def to_csv(points: Iterable[GeneratedPoint], *, decimal_places: int | None = None) -> str:
    """Render points as CSV text (header + one row per point, `\\n` line endings)."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for p in points:
        writer.writerow(point_row(p, decimal_places=decimal_places))
    return buf.getvalue()
