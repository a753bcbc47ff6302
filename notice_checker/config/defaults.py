"""Default configuration values for notice-checker."""

from __future__ import annotations

from notice_checker.models.config import PluginOptions

# Default configuration file names to search for
DEFAULT_CONFIG_NAMES = [".notice-checker.yaml", ".notice-checker.yml"]


def get_default_options() -> PluginOptions:
    """Get the default plugin options.

    Returns:
        PluginOptions with every option at its default value.
    """
    return PluginOptions()
