"""
This module implements `decorate` and its decorator-syntax twin `@component`.

`decorate`:
This is the main entry point of `electrode`. It annotates a callable with the
metadata a dependency-injection container needs to build it:
- a requires annotation, derived automatically from the callable's declared
  argument names (see `reflect_arguments`), or taken from `params` when the
  names are given explicitly;
- any number of extra annotations produced by zero-argument factories such
  as `Singleton`.

The factories run in the order they are given and the implicit requires
factory always runs last, so its value wins over a requires key supplied by a
caller factory. Fragments are merged key by key onto whatever the callable
already carries. The callable itself is returned untouched: the merged
metadata is kept in a side-table and read back with `get_annotations`.

`@component`:
The same operation for use as a decorator on a function or class definition.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from electrode._errors import InvalidAnnotationError
from electrode._utils import _dump_str_to_list, reflect_arguments

from .annotations import _depends_on_factory
from .meta import _registry

logger = logging.getLogger(__name__)


def decorate(
    f: Callable,
    *annotation_factories: Callable[[], dict[str, Any]],
    params: str | Iterable[str] | None = None,
) -> Callable:
    """
    Decorate a callable with the provided annotations and automatically add
    the requires annotation from its argument names.

    Args:
        f (Callable): Target callable (function, lambda, method, class or
            callable instance).
        *annotation_factories (Callable[[], dict]): Zero-argument functions
            which return a dict whose key-value pairs are assigned to `f`.
        params (str | Iterable[str] | None, optional): Dependency names to use
            instead of reflecting them from the source of `f`. Defaults to None.

    Returns:
        Callable: The same callable `f`.

    Raises:
        TypeError: If `f` or any factory is not callable.
        InvalidAnnotationError: If a factory does not return a dict.
        ParseError: If `params` is None and the argument names of `f` cannot
            be reflected.

    Example:
        ```python
        import electrode as el


        class UserService:
            def __init__(self, database, mailer):
                ...


        el.decorate(UserService, el.Singleton)
        el.get_annotations(UserService)
        # {'@singleton': True, '@require': ['database', 'mailer']}
        ```
    """
    if not callable(f):
        raise TypeError(f"Expected a callable to decorate, got {type(f).__name__!r}.")

    for factory in annotation_factories:
        if not callable(factory):
            raise TypeError(
                f"Annotation factories must be callables, got {factory!r}. "
                f"Pass the factory itself (e.g. 'Singleton'), not its result."
            )

    if params is None:
        dependencies = reflect_arguments(f)
    else:
        dependencies = _dump_str_to_list(params)

    fragments = []
    for factory in [*annotation_factories, _depends_on_factory(dependencies)]:
        fragment = factory()
        if not isinstance(fragment, dict):
            raise InvalidAnnotationError(factory, fragment)
        fragments.append(fragment)

    _registry.merge(f, fragments)
    logger.debug("Decorated %r with %d annotation fragment(s)", f, len(fragments))

    return f


def component(
    *annotation_factories: Callable[[], dict[str, Any]],
    params: str | Iterable[str] | None = None,
) -> Callable[[Callable], Callable]:
    """
    Decorator form of `decorate`.

    Always call it, even without factories (`@component()`): a bare
    `@component` would treat the decorated callable as a factory.

    Args:
        *annotation_factories (Callable[[], dict]): Zero-argument annotation
            factories, e.g. `Singleton`.
        params (str | Iterable[str] | None, optional): Explicit dependency
            names. Defaults to None.

    Returns:
        Callable: A decorator returning the decorated callable unchanged.

    Example:
        ```python
        @component(Singleton)
        class Mailer:
            def __init__(self, settings):
                self.settings = settings
        ```
    """

    def decorator(f: Callable) -> Callable:
        return decorate(f, *annotation_factories, params=params)

    return decorator
