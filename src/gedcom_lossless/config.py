"""
Project configuration.

Settings are read from ``config/gedcom_lossless.yml`` at the project root.
When the file is absent (e.g. an installed wheel) the built-in defaults apply.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_lossless.yml"

DEFAULTS: Dict[str, Any] = {
    "debug": False,
    "logging": {
        "level": "WARNING",
        "dir": "logs",
        "file": "gedcom_lossless.log",
        "rotate": False,
        "to_file": False,
    },
    "parser": {
        "source_format": "gedcom55",
        "custom_tag_prefix": "_",
    },
}


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or is malformed."""


class GLConfig:
    def __init__(self, data: Dict[str, Any]):
        self.logging: Dict[str, Any] = data.get("logging", {})
        self.parser: Dict[str, Any] = data.get("parser", {})
        self.debug: bool = bool(data.get("debug", False))

    @property
    def source_format(self) -> str:
        return str(self.parser.get("source_format", "gedcom55"))

    @property
    def custom_tag_prefix(self) -> str:
        return str(self.parser.get("custom_tag_prefix", "_"))


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: Optional[Path] = None) -> GLConfig:
    config_path = Path(path) if path is not None else CONFIG_PATH
    if not config_path.exists():
        return GLConfig(copy.deepcopy(DEFAULTS))

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read config file {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    return GLConfig(_merge(DEFAULTS, data))


_config_cache: Optional[GLConfig] = None


def get_config() -> GLConfig:
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached config so the next ``get_config()`` reloads it."""
    global _config_cache
    _config_cache = None
