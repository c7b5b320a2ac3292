"""
Domain models (Pydantic).

These types are the contract between the generator and its callers:
- inputs (`Coordinate`, `CircleRequest`, `CircleBatchRequest`)
- output records (`GeneratedPoint`)
- the envelope returned by the CLI/API (`CircleBatchResult`)

Bounds checks on the center live here so the generator itself can stay pure math.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Smallest bearing step accepted from request payloads (3600 points per ring).
MIN_REQUEST_ANGULAR_STEP = 0.1


class Coordinate(BaseModel):
    """A geographic point in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class GeneratedPoint(BaseModel):
    """One point on a ring: the radius and bearing used plus the resulting position."""

    model_config = ConfigDict(frozen=True)

    distance: float
    angle: float
    latitude: float
    longitude: float


class CircleRequest(BaseModel):
    """A single ring: one center, one distance.

    `distance` is left unconstrained here; the generator owns that check and reports it
    as `InvalidDistance`.
    """

    center: Coordinate
    distance: float
    angular_step: float | None = Field(default=None, ge=MIN_REQUEST_ANGULAR_STEP, le=360)


class CircleBatchRequest(BaseModel):
    """Center plus several distances; one ring is generated per distance."""

    center: Coordinate
    distances: list[float] = Field(..., min_length=1)
    angular_step: float | None = Field(default=None, ge=MIN_REQUEST_ANGULAR_STEP, le=360)

    @field_validator("distances")
    @classmethod
    def _finite_distances(cls, distances: list[float]) -> list[float]:
        for d in distances:
            if not math.isfinite(d):
                raise ValueError("distances must be finite numbers")
        return distances


class CircleBatchResult(BaseModel):
    """All generated points (rings concatenated in request order) plus the original query."""

    generated_at: datetime
    query: CircleBatchRequest
    points: list[GeneratedPoint]
    meta: dict[str, Any] = Field(default_factory=dict)
