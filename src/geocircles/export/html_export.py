"""
Standalone HTML table rendering of generated points.

The page is a single self-contained document (inline CSS, no scripts) rendered from
`templates/points.html` with Jinja2 autoescaping enabled.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Iterable

from jinja2 import Environment, FileSystemLoader, select_autoescape

from geocircles.domain.models import GeneratedPoint
from geocircles.export.csv_export import point_row

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
DEFAULT_TITLE = "Geospatial Circle Coordinates"


@lru_cache
def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def to_html(
    points: Iterable[GeneratedPoint],
    *,
    decimal_places: int | None = None,
    title: str = DEFAULT_TITLE,
) -> str:
    """Render points as a full HTML document with one table row per point."""
    rows = [point_row(p, decimal_places=decimal_places) for p in points]
    template = _environment().get_template("points.html")
    return template.render(title=title, rows=rows)
