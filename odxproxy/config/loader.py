"""Configuration loading utilities."""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from odxproxy.config.schema import OdxProxySettings
from odxproxy.errors import ConfigError


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".odxproxy" / "config.json"


def load_config(config_path: Path | None = None) -> OdxProxySettings:
    """
    Load configuration from file (if present) and environment.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded settings.
    """
    path = config_path or get_config_path()
    data: dict[str, Any] = {}
    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Failed to load config from {path}: {e}", path=str(path)) from e
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file must be a JSON object: {path}", path=str(path))
        data = convert_keys(raw)
    try:
        return OdxProxySettings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {path}: {e}", path=str(path)) from e


def convert_keys(data: Any) -> Any:
    """Convert camelCase keys to snake_case for Pydantic."""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.lower())
    return "".join(result)
