"""
vargraph.config - Configuration loading and defaults
"""

from vargraph.config.defaults import DEFAULT_CONFIG
from vargraph.config.loader import (
    CONFIG_FILENAME,
    ConfigError,
    find_config_file,
    get_config,
    load_config,
    merge_configs,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_CONFIG",
    "find_config_file",
    "get_config",
    "load_config",
    "merge_configs",
]
