"""Configuration handling for notice-checker."""
from __future__ import annotations

from notice_checker.config.defaults import DEFAULT_CONFIG_NAMES, get_default_options
from notice_checker.config.loader import (
    find_config_file,
    get_options,
    load_config,
    load_config_file,
)
from notice_checker.models.config import PluginOptions

__all__ = [
    "DEFAULT_CONFIG_NAMES",
    "PluginOptions",
    "find_config_file",
    "get_default_options",
    "get_options",
    "load_config",
    "load_config_file",
]
