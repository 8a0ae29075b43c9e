"""
This module provides small, general-purpose helper functions that are shared
across the `electrode` package.

`_dump_str_to_list` standardizes an argument that can be either a single string
or a sequence of strings into a list, which keeps `DependsOn` and the explicit
`params=` argument of `decorate` forgiving about their input.
`_component_name` derives the display name used by the inspection tools.
"""

from collections.abc import Callable, Iterable


def _dump_str_to_list(s: str | Iterable[str]) -> list[str]:
    """Convert a string or an iterable of strings to a list of strings."""
    if isinstance(s, str):
        return [s]
    elif isinstance(s, Iterable):
        names = list(s)
        if not all(isinstance(name, str) for name in names):
            raise TypeError("Argument must be a string or a list of strings.")
        return names
    else:
        raise TypeError("Argument must be a string or a list of strings.")


def _component_name(f: Callable) -> str:
    """Return a readable name for a callable."""
    name = getattr(f, "__qualname__", None) or getattr(f, "__name__", None)
    if name is None:
        # Callable instances carry the name of their class
        name = type(f).__qualname__
    return name
