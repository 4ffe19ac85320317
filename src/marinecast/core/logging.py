"""
Logging setup for the API and the CLI.

Handlers and formatters come from the packaged `logging.yaml`. The level comes
from `app.log_level`, so `MARINECAST_LOG_LEVEL=DEBUG` surfaces the simulators'
per-call debug lines without editing the YAML.
"""

from __future__ import annotations

import copy
import logging
import logging.config
from typing import Any

from marinecast.config.settings import Settings, get_logging_config, get_settings

PACKAGE_LOGGER = "marinecast"


def build_logging_config(settings: Settings) -> dict[str, Any]:
    """Return a dictConfig payload with the level taken from `settings`."""
    # get_logging_config() is cached; never mutate the shared dict.
    config = copy.deepcopy(get_logging_config())
    level = settings.app.log_level.upper()

    config.setdefault("root", {})["level"] = level
    config.setdefault("loggers", {}).setdefault(PACKAGE_LOGGER, {})["level"] = level
    for handler in config.get("handlers", {}).values():
        if isinstance(handler, dict) and "level" in handler:
            handler["level"] = level
    return config


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the packaged logging config; callers pass the settings they already loaded."""
    settings = settings or get_settings()
    logging.config.dictConfig(build_logging_config(settings))
    logging.getLogger(PACKAGE_LOGGER).debug(
        "logging configured for %s at %s", settings.app.name, settings.app.log_level.upper()
    )
