"""
API routes.

Endpoints:
- GET  `/api/health`: liveness probe.
- GET  `/api/settings`: generator/export settings for a frontend.
- POST `/api/circles/ring`: one ring for a single distance.
- POST `/api/circles`: concatenated rings for several distances.
- POST `/api/circles/export`: the same batch as a CSV or HTML download.
"""

from __future__ import annotations

import logging
from typing import Literal

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import Response

from geocircles.config.settings import get_settings
from geocircles.domain.models import CircleBatchRequest, CircleBatchResult, CircleRequest, GeneratedPoint
from geocircles.export.csv_export import to_csv
from geocircles.export.html_export import to_html
from geocircles.generator.batch import generate_ring, run_batch
from geocircles.generator.circle import InvalidAngularStep, InvalidDistance

logger = logging.getLogger(__name__)

router = APIRouter()


def _bad_request(e: ValueError) -> HTTPException:
    if isinstance(e, InvalidDistance):
        code = "INVALID_DISTANCE"
    elif isinstance(e, InvalidAngularStep):
        code = "INVALID_ANGULAR_STEP"
    else:
        code = "VALIDATION_ERROR"
    logger.warning("Rejected circle request (%s): %s", code, str(e))
    return HTTPException(status_code=400, detail={"code": code, "message": str(e)})


def _run(request: CircleBatchRequest) -> CircleBatchResult:
    try:
        return run_batch(request, settings=get_settings())
    except ValueError as e:
        raise _bad_request(e) from e


@router.get("/api/health")
def get_health() -> dict:
    return {"status": "ok"}


@router.get("/api/settings")
def get_public_settings() -> dict:
    """Return the knobs a frontend needs (default step, ring limit, export names)."""
    settings = get_settings()
    return {
        "generator": settings.generator.model_dump(mode="json"),
        "export": settings.export.model_dump(mode="json"),
    }


@router.post("/api/circles/ring", response_model=list[GeneratedPoint])
def post_ring(request: CircleRequest) -> list[GeneratedPoint]:
    """Generate a single ring around the center."""
    try:
        return generate_ring(request, settings=get_settings())
    except ValueError as e:
        raise _bad_request(e) from e


@router.post("/api/circles", response_model=CircleBatchResult)
def post_circles(request: CircleBatchRequest) -> CircleBatchResult:
    """Generate one ring per distance and return all points in request order."""
    return _run(request)


@router.post("/api/circles/export")
def post_circles_export(
    request: CircleBatchRequest,
    format: Literal["csv", "html"] = Query("csv"),
) -> Response:
    """Generate rings and return them as a downloadable CSV or HTML file."""
    settings = get_settings()
    result = _run(request)
    decimals = settings.export.decimal_places

    if format == "html":
        content = to_html(result.points, decimal_places=decimals, title=settings.export.html_title)
        filename = settings.export.html_filename
        media_type = "text/html; charset=utf-8"
    else:
        content = to_csv(result.points, decimal_places=decimals)
        filename = settings.export.csv_filename
        media_type = "text/csv; charset=utf-8"

    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
