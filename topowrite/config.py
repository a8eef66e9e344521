"""Configuration loading for topowrite project files (JSON or YAML)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

_YAML_SUFFIXES = {".yml", ".yaml"}


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


def load_config(config_path: Path) -> Any:
    """Read the project file at ``config_path`` into a raw value tree.

    The shape of the tree is checked later by :func:`topowrite.builder.build_items`.
    """
    config_file = Path(config_path).expanduser()
    if not config_file.is_file():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    try:
        text = config_file.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Failed to read {config_file.name}: {exc}") from exc
    if not text.strip():
        raise ConfigError(f"{config_file.name} is empty")

    if config_file.suffix.lower() in _YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Failed to parse {config_file.name}: {exc}") from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Failed to parse {config_file.name}: {exc}") from exc


__all__ = ["ConfigError", "load_config"]
