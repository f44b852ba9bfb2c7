"""
Logging setup for entrypoints.

Library modules only create `logging.getLogger(__name__)` loggers. The CLI calls
`configure_logging()` to install the handlers from `config/logging.yaml`.
"""

from __future__ import annotations

import copy
import logging.config
from typing import Any

from simplehttp.config.settings import get_logging_config, get_settings


def _with_level(config: dict[str, Any], level: str) -> dict[str, Any]:
    """Return a copy of `config` with root and handler levels set to `level`."""
    config = copy.deepcopy(config)
    config.setdefault("root", {})["level"] = level
    for handler in config.get("handlers", {}).values():
        if "level" in handler:
            handler["level"] = level
    return config


def configure_logging(level: str | None = None) -> None:
    """Apply the packaged logging config; `level` falls back to `app.log_level`."""
    level = (level or get_settings().app.log_level).upper()
    logging.config.dictConfig(_with_level(get_logging_config(), level))
