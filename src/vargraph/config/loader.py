"""
vargraph.config.loader - Configuration file discovery and loading.

Configuration is layered:
1. Defaults (``DEFAULT_CONFIG``)
2. ``.vargraph.toml`` found in the start directory or any parent
3. Environment variables (``VARGRAPH_<SECTION>_<KEY>``) override the file
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from vargraph.config.defaults import DEFAULT_CONFIG

CONFIG_FILENAME = ".vargraph.toml"
ENV_PREFIX = "VARGRAPH_"


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or parsed."""


def find_config_file(start: Path) -> Path | None:
    """Find ``.vargraph.toml`` in ``start`` or its parents.

    Args:
        start: Directory (or file) to search from.

    Returns:
        Path to the config file, or None if none exists.
    """
    current = start.resolve()
    if current.is_file():
        current = current.parent
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge ``override`` into a copy of ``base``.

    Nested dicts merge key by key; any other value replaces the base value.
    """
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def parse_toml(text: str) -> dict[str, Any]:
    """Parse TOML text into plain Python containers.

    Raises:
        ConfigError: If the text is not valid TOML.
    """
    try:
        return tomlkit.parse(text).unwrap()
    except TOMLKitError as e:
        raise ConfigError(f"Invalid TOML: {e}") from e


def load_config(path: Path) -> dict[str, Any]:
    """Load a config file merged over defaults, with env overrides applied.

    Args:
        path: Path to a ``.vargraph.toml`` file.

    Returns:
        Configuration dict.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    config = merge_configs(DEFAULT_CONFIG, parse_toml(text))
    return _apply_env_overrides(config)


def get_config(
    start_dir: Path | None = None,
    config_path: Path | None = None,
) -> dict[str, Any]:
    """Resolve the effective configuration.

    Args:
        start_dir: Directory to search from (default: cwd).
        config_path: Explicit config file; skips discovery.

    Returns:
        Configuration dict (defaults + env overrides when no file is found).
    """
    if config_path is None:
        config_path = find_config_file(start_dir or Path.cwd())
    if config_path is None:
        return _apply_env_overrides(copy.deepcopy(DEFAULT_CONFIG))
    return load_config(config_path)


def _try_parse_env_value(value: str) -> Any:
    """Convert an environment string to a typed value.

    JSON arrays and objects are decoded, ``true``/``false`` become bools
    and integer strings become ints. Anything else, including malformed
    JSON, is returned unchanged.
    """
    stripped = value.strip()
    if stripped.startswith(("[", "{")):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return value
    lowered = stripped.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    try:
        return int(stripped)
    except ValueError:
        return value


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply ``VARGRAPH_<SECTION>_<KEY>`` environment overrides.

    The first underscore-separated part after the prefix names the
    section; the rest (lowercased) is the key.
    """
    for env_key, raw in os.environ.items():
        if not env_key.startswith(ENV_PREFIX):
            continue
        rest = env_key[len(ENV_PREFIX) :].lower()
        section, sep, key = rest.partition("_")
        if not sep or not key:
            continue
        target = config.setdefault(section, {})
        if isinstance(target, dict):
            target[key] = _try_parse_env_value(raw)
    return config
