# src/officeparty/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/officeparty/config/defaults.yaml`, or from an external
YAML file named by `OFFICEPARTY_CONFIG_PATH`, then optionally overridden by a small
whitelist of environment variables (e.g., `OFFICEPARTY_LOG_LEVEL`).

Design rule:
- The office table lives in YAML, not in business logic.
- Settings are frozen and cached, so the office table is built once per process.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any
from officeparty.core.env import load_dotenv_if_present, resolve_config_path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `officeparty.config`."""
    text = resources.files("officeparty.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(resolve_config_path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class AppSettings(_Frozen):
    name: str = "OfficeParty"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


class DefaultsSettings(_Frozen):
    office: str = "Dublin"
    distance: str = "100km"


class OfficeLocation(_Frozen):
    """An office location in decimal degrees (range is not validated)."""

    lat: float
    lon: float


class Settings(_Frozen):
    app: AppSettings = Field(default_factory=AppSettings)
    defaults: DefaultsSettings = Field(default_factory=DefaultsSettings)
    offices: dict[str, OfficeLocation] = Field(default_factory=dict)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    load_dotenv_if_present()
    data = dict(data)

    log_level = os.getenv("OFFICEPARTY_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    office = os.getenv("OFFICEPARTY_DEFAULT_OFFICE")
    if office:
        data.setdefault("defaults", {})["office"] = office

    distance = os.getenv("OFFICEPARTY_DEFAULT_DISTANCE")
    if distance:
        data.setdefault("defaults", {})["distance"] = distance

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("OFFICEPARTY_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
