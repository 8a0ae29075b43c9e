"""
This module provides the annotation factories consumed by `decorate`.

Every factory is a pure function that produces one small mapping of
namespaced keys to values. The keys default to `"@require"` and
`"@singleton"` and can be renamed through `set_electrode_option` to match
what the downstream container reads.

- `DependsOn(dependencies)`: declares the names of the components that must
  be injected. You rarely need it directly, since `decorate` always adds it
  from the reflected argument names.
- `Singleton()`: marks the component as having a single instance in the
  managing container.

Adding a new kind of annotation only means adding a new zero-argument
function returning a dict.
"""

from collections.abc import Callable, Iterable

from electrode._utils import _dump_str_to_list, _get_option


def DependsOn(dependencies: str | Iterable[str]) -> dict[str, list[str]]:  # noqa: N802
    """
    Create a requires annotation listing the dependencies to inject.

    Args:
        dependencies (str | Iterable[str]): Names of the components to resolve.

    Returns:
        dict[str, list[str]]: Annotation key-value pair for the target callable.
    """
    return {_get_option("requires_key"): _dump_str_to_list(dependencies)}


def Singleton() -> dict[str, bool]:  # noqa: N802
    """
    Denote that a component should only have one instance in the managing
    container.

    Returns:
        dict[str, bool]: Annotation key-value pair for the target callable.
    """
    return {_get_option("singleton_key"): True}


class Annotations:
    """Collection of annotation factories."""

    DependsOn = staticmethod(DependsOn)
    Singleton = staticmethod(Singleton)


def _depends_on_factory(dependencies: list[str]) -> Callable[[], dict[str, list[str]]]:
    """Adapt `DependsOn` to the zero-argument contract of annotation factories."""

    def factory() -> dict[str, list[str]]:
        return DependsOn(dependencies)

    return factory
