"""Read configuration files into plain dictionaries."""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

import yaml

from dict_kit.errors import ConfigLoadError


logger = logging.getLogger(__name__)

YAML_SUFFIXES = frozenset({".yaml", ".yml"})
SUPPORTED_SUFFIXES = YAML_SUFFIXES | {".json", ".toml"}


def _parse(text: str, suffix: str) -> Any:
    if suffix in YAML_SUFFIXES:
        return yaml.safe_load(text)
    if suffix == ".json":
        return json.loads(text)
    return tomllib.loads(text)


def load_config_file(path: str | Path) -> dict[str, Any]:
    """Load a YAML, JSON or TOML file whose top level is a mapping.

    An empty YAML document loads as an empty dict.
    """
    config_path = Path(path)
    if not config_path.exists():
        msg = f"config file not found: {config_path}"
        raise FileNotFoundError(msg)

    suffix = config_path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        msg = f"unsupported config format: {suffix or config_path.name}"
        raise ConfigLoadError(msg)

    text = config_path.read_text(encoding="utf-8")
    try:
        data = _parse(text, suffix)
    except (yaml.YAMLError, json.JSONDecodeError, tomllib.TOMLDecodeError) as error:
        msg = f"failed to parse {config_path}: {error}"
        raise ConfigLoadError(msg) from error

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = f"config file must contain a mapping at the top level: {config_path}"
        raise ConfigLoadError(msg)

    logger.debug("loaded %d top-level keys from %s", len(data), config_path)
    return data
