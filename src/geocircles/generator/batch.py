"""
Multi-ring generation.

Callers usually want several concentric rings around one center. This module holds the
glue around `geocircles.generator.circle.generate`:
- `parse_distances` keeps only usable distances from raw user input,
- `generate_circles` enforces the ring count limit and concatenates the rings,
- `run_batch` wraps everything into a `CircleBatchResult` envelope for the CLI/API.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import datetime, timezone
from typing import Any, Iterable

from geocircles.config.settings import Settings, get_settings
from geocircles.domain.models import CircleBatchRequest, CircleBatchResult, CircleRequest, GeneratedPoint
from geocircles.generator.circle import generate

logger = logging.getLogger(__name__)

NO_VALID_DISTANCES_MESSAGE = "Please provide at least one valid distance greater than 0."

# Leading decimal number of a form field; trailing text such as "mi" is ignored.
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_distances(raw: Iterable[Any]) -> list[float]:
    """Parse raw distance inputs, dropping blanks, non-numbers, non-finite and non-positive values.

    Strings are read up to the end of their leading number, so "5mi" gives 5 and "abc" is dropped.
    """
    out: list[float] = []
    for item in raw:
        if item is None:
            continue
        if isinstance(item, str):
            match = _LEADING_NUMBER.match(item.strip())
            if match is None:
                continue
            item = match.group(0)
        try:
            value = float(item)
        except (TypeError, ValueError):
            continue
        if math.isfinite(value) and value > 0:
            out.append(value)
    return out


def generate_ring(request: CircleRequest, *, settings: Settings | None = None) -> list[GeneratedPoint]:
    """Generate one ring for a validated single-distance request."""
    settings = settings or get_settings()
    step = request.angular_step if request.angular_step is not None else settings.generator.angular_step_degrees
    return generate(
        request.center,
        request.distance,
        step,
        earth_radius_miles=settings.generator.earth_radius_miles,
    )


def generate_circles(
    center: Any,
    distances: Iterable[float],
    *,
    angular_step: float | None = None,
    settings: Settings | None = None,
) -> list[GeneratedPoint]:
    """Generate one ring per distance and concatenate them in the given order.

    Raises:
        ValueError: no distances, or more than `generator.max_distances`.
        InvalidDistance: any distance is <= 0 or non-finite (no points are returned).
    """
    settings = settings or get_settings()
    distances = list(distances)
    if not distances:
        raise ValueError(NO_VALID_DISTANCES_MESSAGE)
    max_distances = settings.generator.max_distances
    if len(distances) > max_distances:
        raise ValueError(f"Too many distances ({len(distances)}); at most {max_distances} circles are allowed.")

    step = angular_step if angular_step is not None else settings.generator.angular_step_degrees
    points: list[GeneratedPoint] = []
    for distance in distances:
        points.extend(
            generate(
                center,
                distance,
                step,
                earth_radius_miles=settings.generator.earth_radius_miles,
            )
        )
    return points


def run_batch(request: CircleBatchRequest, *, settings: Settings | None = None) -> CircleBatchResult:
    """Run a batch request and wrap the concatenated rings with metadata."""
    settings = settings or get_settings()
    step = request.angular_step if request.angular_step is not None else settings.generator.angular_step_degrees

    points = generate_circles(
        request.center,
        request.distances,
        angular_step=step,
        settings=settings,
    )
    logger.info(
        "Generated %d points for %d circle(s) around (%s, %s)",
        len(points),
        len(request.distances),
        request.center.latitude,
        request.center.longitude,
    )
    return CircleBatchResult(
        generated_at=datetime.now(timezone.utc),
        query=request,
        points=points,
        meta={
            "circle_count": len(request.distances),
            "point_count": len(points),
            "angular_step": step,
            "earth_radius_miles": settings.generator.earth_radius_miles,
        },
    )
