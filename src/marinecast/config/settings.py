# src/marinecast/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/marinecast/config/defaults.yaml`, then optionally overridden by:
- environment variables (e.g., `MARINECAST_LOG_LEVEL`, `MARINECAST_RANDOM_SEED`)
- an external YAML file via `MARINECAST_CONFIG_PATH`

The simulators themselves take plain arguments; only the request layers (API,
CLI, trip planner) read these settings and pass values down.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from marinecast.core.env import load_dotenv_if_present, resolve_project_path


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `marinecast.config`."""
    text = resources.files("marinecast.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(resolve_project_path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "MarineCast"
    timezone: str = "Asia/Kolkata"
    log_level: str = "INFO"
    # None means a fresh unseeded generator per request.
    random_seed: int | None = None


class CatalogSettings(BaseModel):
    # None means the harbor table packaged with marinecast.
    harbors_path: str | None = None


class RouteSettings(BaseModel):
    average_speed_kmh: float = Field(12.0, gt=0)
    fuel_rate_lph: float = Field(12.0, gt=0)


class SpotSettings(BaseModel):
    default_radius_km: float = Field(20.0, gt=0)


class BoundarySettings(BaseModel):
    territorial_limit_nm: float = Field(12.0, gt=0)


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    route: RouteSettings = Field(default_factory=RouteSettings)
    spots: SpotSettings = Field(default_factory=SpotSettings)
    boundary: BoundarySettings = Field(default_factory=BoundarySettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    load_dotenv_if_present()
    data = dict(data)

    log_level = os.getenv("MARINECAST_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    timezone = os.getenv("MARINECAST_TIMEZONE")
    if timezone:
        data.setdefault("app", {})["timezone"] = timezone

    seed = os.getenv("MARINECAST_RANDOM_SEED")
    if seed:
        data.setdefault("app", {})["random_seed"] = int(seed)

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("MARINECAST_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
