# src/simplehttp/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/simplehttp/config/defaults.yaml`, then optionally overridden by:
- environment variables (e.g., `SIMPLEHTTP_TIMEOUT_SECONDS`, `SIMPLEHTTP_TRANSPORT`)
- an external YAML file via `SIMPLEHTTP_CONFIG_PATH`

Design rule:
- Request defaults (timeout, User-Agent, encoding) live in YAML, not at call sites.
"""

from __future__ import annotations

import codecs
import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from simplehttp.core.constants import (
    DEFAULT_ENCODING,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)
from simplehttp.core.env import load_dotenv_if_present


TransportName = Literal["httpx", "requests"]


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `simplehttp.config`."""
    text = resources.files("simplehttp.config").joinpath(filename).read_text(encoding="utf-8")
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
    name: str = "simplehttp"
    log_level: str = "INFO"


class HttpSettings(BaseModel):
    timeout_seconds: float = Field(DEFAULT_TIMEOUT_SECONDS, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
    encoding: str = DEFAULT_ENCODING
    transport: TransportName = "httpx"

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, encoding: str) -> str:
        try:
            codecs.lookup(encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown text encoding '{encoding}'") from exc
        return encoding


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    load_dotenv_if_present()
    data = dict(data)

    log_level = os.getenv("SIMPLEHTTP_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    timeout = os.getenv("SIMPLEHTTP_TIMEOUT_SECONDS")
    if timeout:
        data.setdefault("http", {})["timeout_seconds"] = timeout

    user_agent = os.getenv("SIMPLEHTTP_USER_AGENT")
    if user_agent:
        data.setdefault("http", {})["user_agent"] = user_agent

    transport = os.getenv("SIMPLEHTTP_TRANSPORT")
    if transport:
        data.setdefault("http", {})["transport"] = transport.strip().lower()

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("SIMPLEHTTP_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
