# src/geocircles/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/geocircles/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `GEOCIRCLES_CONFIG_PATH`
- a small whitelist of environment variables (e.g., `GEOCIRCLES_ANGULAR_STEP`)

Design rule:
- Tuning knobs live in YAML, not hard-coded in business logic.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any
from geocircles.core.env import load_dotenv_if_present

import yaml
from pydantic import BaseModel, Field


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `geocircles.config`."""
    text = resources.files("geocircles.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "GeoCircles"
    log_level: str = "INFO"


class GeneratorSettings(BaseModel):
    earth_radius_miles: float = Field(3958.8, gt=0)
    angular_step_degrees: float = Field(10.0, gt=0, le=360)
    max_distances: int = Field(5, ge=1)


class ExportSettings(BaseModel):
    decimal_places: int | None = Field(default=None, ge=0, le=15)
    csv_filename: str = "geospatial_circles.csv"
    html_filename: str = "geospatial_circles.html"
    html_title: str = "Geospatial Circle Coordinates"


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    generator: GeneratorSettings = Field(default_factory=GeneratorSettings)
    export: ExportSettings = Field(default_factory=ExportSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload.

    Values stay strings here; Pydantic coerces and range-checks them during validation.
    """
    load_dotenv_if_present()
    data = dict(data)

    log_level = os.getenv("GEOCIRCLES_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    step = os.getenv("GEOCIRCLES_ANGULAR_STEP")
    if step:
        data.setdefault("generator", {})["angular_step_degrees"] = step

    max_distances = os.getenv("GEOCIRCLES_MAX_DISTANCES")
    if max_distances:
        data.setdefault("generator", {})["max_distances"] = max_distances

    decimal_places = os.getenv("GEOCIRCLES_DECIMAL_PLACES")
    if decimal_places:
        data.setdefault("export", {})["decimal_places"] = decimal_places

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("GEOCIRCLES_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
