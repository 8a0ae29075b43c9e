"""
This module is responsible for parsing the option files accepted by
`load_electrode_options`. It provides a standardized way to read structured
data from files into Python dictionaries.

It contains individual, private reader functions for common formats:
- `_read_toml`: For TOML files.
- `_read_yaml`: For YAML files.
- `_read_json`: For JSON files.

The central component is the `_ConfigReader` class, which acts as a dispatcher.
It inspects a given file's extension and selects the appropriate reader
function to parse its content.
"""

import json
import tomllib
from pathlib import Path

import yaml


def _read_toml(path: str | Path) -> dict:
    """Convert a TOML file to a dictionary."""
    try:
        with Path(path).open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise FileNotFoundError(f"File not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Error decoding TOML file: {e}") from e


def _read_yaml(path: str | Path) -> dict:
    """Convert a YAML file to a dictionary."""
    try:
        with Path(path).open(encoding="utf-8") as f:
            return yaml.safe_load(f)
    except FileNotFoundError as e:
        raise FileNotFoundError(f"File not found: {path}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Error decoding YAML file: {e}") from e


def _read_json(path: str | Path) -> dict:
    """Convert a JSON file to a dictionary."""
    try:
        with Path(path).open(encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise FileNotFoundError(f"File not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Error decoding JSON file: {e}") from e


_ENGINES = {
    ".toml": _read_toml,
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".json": _read_json,
}


class _ConfigReader:
    """Read a file and return a dictionary."""

    def __init__(self, path: Path | str) -> None:
        if not isinstance(path, (Path, str)):
            raise TypeError("Path must be a string or a pathlib.Path object.")

        self.path = path
        self.extension = Path(path).suffix.lower()

        if self.extension not in _ENGINES:
            raise ValueError(
                f"Unsupported file extension {self.extension!r}. "
                f"Supported extensions are: {list(_ENGINES)}"
            )
        self._engine = _ENGINES[self.extension]

    def read(self) -> dict:
        """Read a file and return a dictionary."""
        return self._engine(self.path)
