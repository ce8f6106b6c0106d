"""Configuration management for the Ploi client.

Reads and writes TOML config at ~/.config/ploi/config.toml.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

import tomli_w

CONFIG_DIR = Path.home() / ".config" / "ploi"
CONFIG_PATH = CONFIG_DIR / "config.toml"

DEFAULT_BASE_URL = "https://ploi.io/api"

logger = logging.getLogger(__name__)


@dataclass
class ApiConfig:
    api_token: str = ""
    base_url: str = DEFAULT_BASE_URL


@dataclass
class PloiConfig:
    api: ApiConfig = field(default_factory=ApiConfig)


def load_config() -> PloiConfig:
    """Load config from TOML file, returning defaults if missing or corrupt."""
    if not CONFIG_PATH.exists():
        return PloiConfig()
    try:
        with open(CONFIG_PATH, "rb") as f:
            data = tomllib.load(f)
    except (OSError, ValueError):
        logger.warning("Could not read %s, using defaults", CONFIG_PATH)
        return PloiConfig()

    api_data = data.get("api", {})
    if not isinstance(api_data, dict):
        api_data = {}

    return PloiConfig(
        api=ApiConfig(
            api_token=api_data.get("api_token", ""),
            base_url=api_data.get("base_url", DEFAULT_BASE_URL),
        ),
    )


def save_config(config: PloiConfig) -> None:
    """Write config to TOML file."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    os.chmod(CONFIG_DIR, 0o700)

    data = {
        "api": {
            "api_token": config.api.api_token,
            "base_url": config.api.base_url,
        },
    }

    with open(CONFIG_PATH, "wb") as f:
        tomli_w.dump(data, f)
    os.chmod(CONFIG_PATH, 0o600)


def has_api_token() -> bool:
    """Quick check if an API token is configured."""
    config = load_config()
    return bool(config.api.api_token)
