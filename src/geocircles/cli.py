"""
GeoCircles CLI entrypoint.

This CLI is intended for quick local runs without the HTTP API.
It delegates all ring generation to `geocircles.generator.batch.run_batch`.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from geocircles.config.settings import Settings, get_settings
from geocircles.core.logging import configure_logging
from geocircles.domain.models import CircleBatchRequest, CircleBatchResult, Coordinate
from geocircles.export.csv_export import format_coordinate, format_number, to_csv
from geocircles.export.html_export import to_html
from geocircles.generator.batch import NO_VALID_DISTANCES_MESSAGE, parse_distances, run_batch

EXIT_USAGE = 2


def _render(result: CircleBatchResult, fmt: str, settings: Settings) -> str:
    decimals = settings.export.decimal_places
    if fmt == "json":
        return json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2) + "\n"
    if fmt == "csv":
        return to_csv(result.points, decimal_places=decimals)
    if fmt == "html":
        return to_html(result.points, decimal_places=decimals, title=settings.export.html_title)

    lines = [f"Generated {len(result.points)} points for {result.meta['circle_count']} circle(s)."]
    for p in result.points:
        lines.append(
            f"{format_number(p.distance):>8} mi  {format_number(p.angle):>6} deg  "
            f"lat={format_coordinate(p.latitude, decimals)} lon={format_coordinate(p.longitude, decimals)}"
        )
    return "\n".join(lines) + "\n"


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the `generate` subcommand."""
    settings = get_settings()

    try:
        center = Coordinate(latitude=float(args.lat), longitude=float(args.lon))
    except ValidationError as e:
        field = str(e.errors()[0]["loc"][0])
        bound = 90 if field == "latitude" else 180
        print(f"Invalid {field.capitalize()}. Must be between -{bound} and {bound}.", file=sys.stderr)
        return EXIT_USAGE

    distances = parse_distances(args.distance)
    if not distances:
        print(NO_VALID_DISTANCES_MESSAGE, file=sys.stderr)
        return EXIT_USAGE

    try:
        request = CircleBatchRequest(center=center, distances=distances, angular_step=args.step)
        result = run_batch(request, settings=settings)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return EXIT_USAGE

    text = _render(result, args.format, settings)
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        print(f"Wrote {len(result.points)} points to {args.output}")
    else:
        sys.stdout.write(text)
    return 0


def _cmd_settings(_: argparse.Namespace) -> int:
    settings = get_settings()
    print(json.dumps(settings.model_dump(mode="json"), ensure_ascii=False, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the GeoCircles CLI."""
    parser = argparse.ArgumentParser(prog="geocircles")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate rings of points around a center coordinate.")
    gen.add_argument("--lat", required=True, type=float, help="Center latitude (-90..90)")
    gen.add_argument("--lon", required=True, type=float, help="Center longitude (-180..180)")
    gen.add_argument(
        "--distance",
        action="append",
        default=[],
        help="Ring distance in miles. Repeatable; blank or non-positive values are skipped.",
    )
    gen.add_argument("--step", type=float, default=None, help="Bearing step in degrees (default from config)")
    gen.add_argument("--format", choices=["table", "csv", "html", "json"], default="table")
    gen.add_argument("--output", type=str, default=None, help="Write to this file instead of stdout")
    gen.set_defaults(func=_cmd_generate)

    s = sub.add_parser("settings", help="Print the effective settings as JSON.")
    s.set_defaults(func=_cmd_settings)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m geocircles.cli`."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    func: Any = getattr(args, "func")
    return int(func(args))


if __name__ == "__main__":
    raise SystemExit(main())
