"""
This module contains the logic for loading option data from files. It sits
between `load_electrode_options` and the format-specific readers of
`parsers.py`: it checks that the file exists, parses it and unwraps the
optional `electrode` table so that callers always receive a flat mapping of
option names to values.
"""

from pathlib import Path
from typing import Any

from .parsers import _ConfigReader

_SECTION = "electrode"


def _load_options_data(path: str | Path) -> dict[str, Any]:
    """Helper to read and unwrap an options file."""

    if not isinstance(path, (str, Path)):
        raise TypeError("Path must be a string or a pathlib.Path object.")

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Specified options file not found: {config_path}")

    data = _ConfigReader(config_path).read()

    # Empty YAML documents parse to None
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(f"Options file must contain a mapping, got {type(data).__name__}.")

    # Options may be namespaced under an [electrode] table
    if isinstance(data.get(_SECTION), dict):
        data = data[_SECTION]

    return dict(data)
