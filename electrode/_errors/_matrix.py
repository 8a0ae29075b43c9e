"""
This module defines custom exceptions related to the `AnnotationMatrix` and
`DependencyGraph` classes, which give a tabular and a visual view of the
metadata recorded for decorated components.

`InvalidComponentCollectionError`:
This `ValueError` is raised when the inspection tools receive a data structure
that does not conform to their expected input format. The matrix builder
requires a dictionary mapping component names to their annotations, and the
graph requires callables that went through `decorate`.
"""

from typing import Any


class InvalidComponentCollectionError(ValueError):
    """Raised when AnnotationMatrix receives an invalid or malformed component collection.

    Expected a mapping of the form:
    {
        component_name: {
            "@require": list[str],
            "@singleton": bool,
            }
    }
    - Missing keys are tolerated (treated as empty).
    - Values other than the requires list and bool flags (e.g.
      `"@scope": "request"`) are ignored.
    - The requires list must contain strings only.
    """  # noqa: E501

    def __init__(self, detail: str):
        """Initialize the InvalidComponentCollectionError with a detailed message."""
        super().__init__(f"Invalid component collection: {detail}")


def _validate_registry_type(
    registry: dict[str, dict[str, Any]], requires_key: str = "@require"
) -> dict:
    """Validate type of the registry.

    Iterates through the registry and checks that all keys are strings, all values are
    dictionaries, and all annotation keys are strings. The requires list must
    hold strings only. Other values are accepted as they are; only bool flags
    show up in the matrix.

    Args:
        registry (dict): The registry to validate.
        requires_key (str): Key holding the names of the required dependencies.

    Returns:
        dict: The validated registry.

    Raises:
        InvalidComponentCollectionError: If the registry is not a dictionary
    """
    if not isinstance(registry, dict):
        raise InvalidComponentCollectionError("Registry must be a dictionary")

    for component_name, annotations in registry.items():
        if not isinstance(component_name, str):
            raise InvalidComponentCollectionError("Component names must be strings")
        if not isinstance(annotations, dict):
            raise InvalidComponentCollectionError("Annotations must be a dictionary")
        for key, value in annotations.items():
            if not isinstance(key, str):
                raise InvalidComponentCollectionError("Annotation keys must be strings")

            if key != requires_key:
                continue
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise InvalidComponentCollectionError(
                    f"{requires_key!r} must be a list of strings"
                )

    return registry
