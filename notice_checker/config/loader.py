"""Plugin option validation and configuration file loading for notice-checker."""
from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from notice_checker.config.defaults import DEFAULT_CONFIG_NAMES, get_default_options
from notice_checker.exceptions import ConfigurationError
from notice_checker.models.config import PluginOptions


def _format_validation_errors(error: ValidationError) -> str:
    """Join Pydantic errors as ``location: message`` pairs.

    Model-level errors have no location and are reported as ``root``.
    """
    messages: list[str] = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "root"
        messages.append(f"{loc}: {err['msg']}")
    return "; ".join(messages)


def _validate_options(data: Mapping[str, Any], source: str) -> PluginOptions:
    try:
        return PluginOptions.model_validate(dict(data))
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid {source}: {_format_validation_errors(e)}"
        ) from e


def get_options(
    options: Optional[Union[PluginOptions, Mapping[str, Any]]] = None,
) -> PluginOptions:
    """Validate plugin options and merge them with the defaults.

    Args:
        options: Options mapping (snake_case or camelCase keys), an already
            validated PluginOptions, or None for all defaults.

    Returns:
        Validated PluginOptions.

    Raises:
        ConfigurationError: If an option is unknown or has an invalid value.
    """
    if options is None:
        return get_default_options()
    if isinstance(options, PluginOptions):
        return options
    return _validate_options(options, "plugin options")


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Look for `.notice-checker.yaml`, then `.notice-checker.yml`.

    Args:
        start_dir: Directory to search. Defaults to current working directory.

    Returns:
        Path to the first configuration file found, None otherwise.
    """
    search_dir = start_dir or Path.cwd()
    candidates = (search_dir / name for name in DEFAULT_CONFIG_NAMES)
    return next((path for path in candidates if path.exists()), None)


def load_config_file(path: Path) -> PluginOptions:
    """Read plugin options from a YAML file.

    Files that are empty or hold only comments give the default options.

    Args:
        path: Path to the configuration file.

    Returns:
        Validated PluginOptions instance.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid YAML,
            is not a mapping, or holds invalid options.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read configuration file '{path}': {e}"
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e

    if data is None:
        return get_default_options()

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )

    return _validate_options(data, f"configuration in '{path}'")


def load_config(
    config_path: str | None = None,
    start_dir: Path | None = None,
) -> PluginOptions:
    """Load plugin options for a run.

    An explicit ``config_path`` always wins. Otherwise ``start_dir`` is
    searched for a configuration file, and the defaults are used when
    there is none.

    Args:
        config_path: Optional path to configuration file.
        start_dir: Directory searched when no path is given.

    Returns:
        PluginOptions with loaded or default values.

    Raises:
        ConfigurationError: If the selected configuration file is invalid.
    """
    if config_path is not None:
        return load_config_file(Path(config_path))

    discovered = find_config_file(start_dir)
    if discovered is None:
        return get_default_options()
    return load_config_file(discovered)
