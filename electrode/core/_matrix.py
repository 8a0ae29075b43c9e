"""
This module defines the AnnotationMatrix class, which provides a tabular,
matrix-like view of the metadata recorded for a set of decorated components.
It serves as an introspection tool for understanding which component needs
what before handing everything to a container.

- **Rows**: All dependency names found in the requires annotations, followed
  by one row per boolean flag (e.g. `@singleton`).
- **Columns**: The individual components.
- **Cells**: "required" if the component requires the dependency, "yes" if
  the flag is set on the component, "" otherwise.

It is the underlying component of `DependencyGraph.build_matrix()`.
"""

from collections.abc import Mapping
from typing import Any

import pandas as pd

from electrode._errors import InvalidComponentCollectionError, _validate_registry_type
from electrode._utils import _get_option


class AnnotationMatrix:
    """Matrix view for annotated components.

    The component collection is expected to be a mapping:
    component_name -> {"@require": list[str], "@singleton": bool, ...}
    as returned by `get_annotations`.
    """

    def __init__(self, components: dict[str, dict[str, Any]]):
        # Validate mapping type early to give a clear error
        if components is not None and not isinstance(components, Mapping):
            raise InvalidComponentCollectionError(
                "components must be a mapping of component_name -> dict"
            )
        components = _validate_registry_type(
            dict(components or {}), _get_option("requires_key")
        )
        self._components = components

    def build(self) -> pd.DataFrame:
        """Construct and return the annotation matrix as a pandas DataFrame."""
        requires_key = _get_option("requires_key")

        dependencies: set[str] = set()
        flags: set[str] = set()
        for annotations in self._components.values():
            dependencies.update(annotations.get(requires_key, []) or [])
            flags.update(k for k, v in annotations.items() if isinstance(v, bool))

        rows = sorted(dependencies) + sorted(flags)
        cols = sorted(self._components.keys())

        # If nothing to show, return a truly empty DataFrame
        if not rows and not cols:
            return pd.DataFrame()

        data: dict[str, list[str]] = {}
        for name in cols:
            annotations = self._components[name]
            required = set(annotations.get(requires_key, []) or [])

            col_values: list[str] = [
                "required" if dep in required else "" for dep in sorted(dependencies)
            ]
            col_values.extend(
                "yes" if annotations.get(flag) is True else "" for flag in sorted(flags)
            )
            data[name] = col_values

        return pd.DataFrame(data, index=rows, columns=cols)
