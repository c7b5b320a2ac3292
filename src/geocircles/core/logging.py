"""
Logging setup for the GeoCircles entrypoints.

The CLI and the API both call `configure_logging()` once at startup. Handlers and
formatters come from the packaged `geocircles/config/logging.yaml`; the level comes from
`app.log_level` (overridable with `GEOCIRCLES_LOG_LEVEL`). Library modules only create
module loggers, so importing `geocircles.generator` never touches global logging state.
"""

from __future__ import annotations

import copy
import logging.config
from typing import Any

from geocircles.config.settings import get_logging_config, get_settings


def _with_level(config: dict[str, Any], level: str) -> dict[str, Any]:
    # Root and handlers share one level; a handler left at INFO would hide DEBUG output.
    out = copy.deepcopy(config)
    out.setdefault("root", {})["level"] = level
    for handler in out.get("handlers", {}).values():
        if isinstance(handler, dict):
            handler["level"] = level
    return out


def configure_logging() -> None:
    """Apply the packaged logging config at the level chosen in settings."""
    level = get_settings().app.log_level.upper()
    logging.config.dictConfig(_with_level(get_logging_config(), level))
