# src/geocircles/api/app.py
"""
GeoCircles HTTP entrypoint.

Serve with any ASGI server, e.g. `uvicorn geocircles.api.app:app`. The app only exposes
the JSON/export routes from `geocircles.api.routes`; the form that calls them is hosted
elsewhere, which is why CORS is configurable here.
"""

from __future__ import annotations

import os
from typing import Any

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from geocircles.core.logging import configure_logging

from .routes import router

LOCAL_ORIGIN_REGEX = r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$"


def _cors_options() -> dict[str, Any] | None:
    """CORS settings from env, or None to skip the middleware.

    `GEOCIRCLES_CORS_ORIGINS` is a comma-separated allow list. Without it, any localhost port
    is allowed unless `GEOCIRCLES_CORS_ALLOW_LOCAL=0`.
    """
    origins = [o.strip() for o in os.getenv("GEOCIRCLES_CORS_ORIGINS", "").split(",") if o.strip()]
    if origins:
        return {"allow_origins": origins}
    if os.getenv("GEOCIRCLES_CORS_ALLOW_LOCAL", "1").strip().lower() in {"0", "false", "no", "n"}:
        return None
    return {"allow_origin_regex": LOCAL_ORIGIN_REGEX}


configure_logging()

app = FastAPI(title="GeoCircles API", version="0.1.0")

cors = _cors_options()
if cors is not None:
    app.add_middleware(
        CORSMiddleware,
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        **cors,
    )

app.include_router(router)
