"""
This module manages global configuration settings for the electrode package.

It offers a simple, centralized mechanism for setting and retrieving
package-level options that affect the metadata produced by the annotation
factories. The main use case is renaming the namespaced keys (`"@require"`,
`"@singleton"`) to whatever the downstream container expects to read.

The module exposes `set_electrode_option` and `load_electrode_options` to
modify settings and an internal `_get_option` to retrieve them, providing a
controlled interface to a private, module-level settings dictionary.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .loaders import _load_options_data

logger = logging.getLogger(__name__)

_DEFAULTS = {
    "requires_key": "@require",
    "singleton_key": "@singleton",
}

# A private dictionary to hold all package settings.
_settings = dict(_DEFAULTS)


def set_electrode_option(options: Iterable[str], values: Iterable[Any]) -> None:
    """
    Set one or more configuration options for the electrode package.

    Args:
        options (Iterable): The name of the option to set (e.g., 'requires_key').
        values (Iterable): The value to set for the option.

    Raises:
        KeyError: If an option name is unknown.
        TypeError: If an option name or value is not a string.
    """

    if isinstance(options, str):
        options = [options]

    if isinstance(values, str):
        values = [values]

    if not isinstance(options, Iterable):
        raise TypeError("Key must be a string or an iterable of strings.")

    if not isinstance(values, Iterable):
        raise TypeError("Value must be a string or an iterable of strings.")

    for option, value in zip(options, values, strict=True):
        if not isinstance(option, str):
            raise TypeError("Key must be a string.")
        if option not in _settings:
            raise KeyError(
                f"Invalid option key: {option!r}. Valid options are: {list(_settings.keys())}"
            )
        if not isinstance(value, str) or not value:
            raise TypeError("Value must be a non-empty string.")

        logger.debug("Setting electrode option %r to %r", option, value)
        _settings[option] = value


def load_electrode_options(path: str | Path) -> dict[str, str]:
    """
    Load configuration options from a TOML, YAML or JSON file and apply them.

    The options may sit at the top level of the file or inside an `electrode`
    table, e.g.:

        [electrode]
        requires_key = "@inject"

    Args:
        path (str | Path): Path to the options file.

    Returns:
        dict[str, str]: The options that were applied.
    """
    data = _load_options_data(path)
    if data:
        set_electrode_option(list(data.keys()), list(data.values()))
    return data


def reset_electrode_options() -> None:
    """Restore every option to its default value."""
    _settings.clear()
    _settings.update(_DEFAULTS)


def _get_option(key: str) -> Any:
    """
    Get a configuration option for the electrode package.

    Args:
        key (str): The name of the option to get.
    """
    return _settings.get(key)
