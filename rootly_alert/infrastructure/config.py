"""
Configuration Module

Architectural Intent:
- Centralized configuration loading from a JSON file
- Provides typed access to API and logging settings
- Falls back to sensible defaults when config file is absent
- Environment variables override file-based config
- Reads action inputs from GitHub Actions INPUT_* variables

Design Decisions:
- Config is a frozen dataclass for immutability after load
- Nested config sections map to sub-dataclasses
- The API key is an action input, never a config-file value
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional
import dataclasses
import json
import logging
import os

from rootly_alert.application.dtos.alert_inputs import AlertInputs, INPUT_NAMES

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "rootly-alert.json"


@dataclass(frozen=True)
class ApiConfig:
    """Rootly API connection settings."""
    base_url: str = "https://api.rootly.com"
    timeout_seconds: float = 30.0


@dataclass(frozen=True)
class AppConfig:
    """Root configuration for the rootly-alert application."""
    api: ApiConfig = field(default_factory=ApiConfig)
    log_level: str = "WARNING"


def _env_override(data: dict, prefix: str = "ROOTLY_ALERT") -> dict:
    """Override config values with environment variables.

    Environment variables follow the pattern ROOTLY_ALERT_SECTION_KEY.
    For example: ROOTLY_ALERT_API_BASE_URL=https://api.example.com
    """
    for key, value in os.environ.items():
        if not key.startswith(f"{prefix}_"):
            continue
        name = key[len(prefix) + 1:].lower()
        if name == "log_level":
            data["log_level"] = value
            continue
        parts = name.split("_", 1)
        if len(parts) == 2:
            section, field_name = parts
            if not isinstance(data.get(section), dict):
                data[section] = {}
            data[section][field_name] = value
    return data


def _parse_config_file(path: Path) -> dict:
    """Parse a JSON config file. Returns empty dict on failure."""
    try:
        with open(path) as f:
            return json.load(f)
    except FileNotFoundError:
        logger.debug("Config file not found: %s", path)
        return {}
    except json.JSONDecodeError as e:
        logger.warning("Invalid config file %s: %s", path, e)
        return {}


def _build_sub_config(cls, data: dict):
    """Build a sub-config dataclass from a dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.items() if k in valid_fields}

    # Convert string numbers from the environment
    for f in dataclasses.fields(cls):
        if f.name in filtered and isinstance(filtered[f.name], str):
            if f.type == "float":
                filtered[f.name] = float(filtered[f.name])
            elif f.type == "int":
                filtered[f.name] = int(filtered[f.name])

    return cls(**filtered)


def load_config(
    path: Optional[str] = None,
    env_prefix: str = "ROOTLY_ALERT",
) -> AppConfig:
    """Load configuration from file and environment variables.

    Priority (highest to lowest):
    1. Environment variables (ROOTLY_ALERT_SECTION_KEY)
    2. Config file values
    3. Defaults

    Args:
        path: Path to config file (JSON). Defaults to rootly-alert.json in CWD.
        env_prefix: Environment variable prefix. Defaults to ROOTLY_ALERT.
    """
    config_path = Path(path) if path else Path(DEFAULT_CONFIG_FILE)
    data = _parse_config_file(config_path)
    data = _env_override(data, env_prefix)

    return AppConfig(
        api=_build_sub_config(ApiConfig, data.get("api", {})),
        log_level=data.get("log_level", "WARNING"),
    )


def input_variable(name: str) -> str:
    """Name of the environment variable the runner uses for an input."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def read_input(name: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Read one action input, trimmed. Missing inputs read as ""."""
    env = os.environ if environ is None else environ
    return env.get(input_variable(name), "").strip()


def load_inputs(environ: Optional[Mapping[str, str]] = None) -> AlertInputs:
    """Load all action inputs from INPUT_* environment variables.

    set_as_noise is only true for the exact string "true".
    """
    raw = {name: read_input(name, environ) for name in INPUT_NAMES}
    return AlertInputs(
        **{name: value for name, value in raw.items() if name != "set_as_noise"},
        set_as_noise=raw["set_as_noise"] == "true",
    )
