"""
probtree.config - Configuration loading and defaults

Configuration lives in ``.probtree.toml``, found by walking up from the
working directory. File values are merged over DEFAULT_CONFIG, then
``PROBTREE_<SECTION>_<KEY>`` environment variables override both.
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from probtree.config.defaults import DEFAULT_CONFIG, DEFAULT_CONFIG_TEMPLATE

CONFIG_FILENAME = ".probtree.toml"
ENV_PREFIX = "PROBTREE_"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or parsed."""


def parse_toml_document(content: str) -> tomlkit.TOMLDocument:
    """Parse TOML text into a round-trippable document.

    Raises:
        ConfigError: If the text is not valid TOML.
    """
    try:
        return tomlkit.parse(content)
    except TOMLKitError as e:
        raise ConfigError(f"Invalid TOML: {e}") from e


def parse_toml(content: str) -> dict[str, Any]:
    """Parse TOML text into plain Python dicts and lists."""
    return parse_toml_document(content).unwrap()


def find_config_file(start: Path) -> Path | None:
    """Find .probtree.toml in ``start`` or any parent directory.

    Args:
        start: Directory to start searching from.

    Returns:
        Path to the config file, or None if not found.
    """
    current = start.resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge ``override`` into a copy of ``base``."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def _try_parse_env_value(value: str) -> Any:
    """Interpret an environment variable value.

    JSON arrays and objects, booleans and numbers are converted; anything
    else (including malformed JSON) is returned as the original string.
    """
    stripped = value.strip()
    if stripped.lower() in ("true", "false"):
        return stripped.lower() == "true"
    if stripped[:1] in ("[", "{"):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return value
    for cast in (int, float):
        try:
            return cast(stripped)
        except ValueError:
            pass
    return value


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply PROBTREE_<SECTION>_<KEY> environment variables.

    The first underscore after the prefix separates section from key, so
    PROBTREE_LAYOUT_CHAR_WIDTH sets ``layout.char_width``.
    """
    for name, value in os.environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        section, _, key = name[len(ENV_PREFIX) :].lower().partition("_")
        if not section or not key:
            continue
        config.setdefault(section, {})[key] = _try_parse_env_value(value)
    return config


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration merged over defaults.

    Args:
        config_path: Explicit config file. If None, no file is read and
            only defaults and environment overrides apply.

    Returns:
        Configuration dictionary.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if config_path is not None:
        try:
            content = config_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot read {config_path}: {e}") from e
        config = merge_configs(config, parse_toml(content))
    return _apply_env_overrides(config)


def get_config(config_path: Path | None = None, start: Path | None = None) -> dict[str, Any]:
    """Load configuration from an explicit path or by discovery.

    Args:
        config_path: Explicit config file, used as-is when given.
        start: Directory to search from when no path is given (default: cwd).
    """
    if config_path is None:
        config_path = find_config_file(start or Path.cwd())
    return load_config(config_path)


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_TEMPLATE",
    "find_config_file",
    "get_config",
    "load_config",
    "merge_configs",
    "parse_toml",
    "parse_toml_document",
]
