"""
This module defines the `AnnotationMeta` record and the side-table that
associates it with decorated callables.

`AnnotationMeta`:
    Stores the merged annotation mapping produced by `decorate`, e.g.
    `{"@require": ["db", "logger"], "@singleton": True}`, together with the
    display name of the component. The record is an immutable container:
    it is a `@dataclass(frozen=True)` and the annotation mapping (including
    its list values) is returned as a copy on every access.

`_AnnotationRegistry`:
    Maps a callable to its current `AnnotationMeta` without touching the
    callable itself. Keys are held weakly, so a record lives exactly as long
    as the callable it describes. Bound methods are keyed by their underlying
    function since Python creates a fresh bound method on every attribute
    access. Merges are serialised with a lock, which makes concurrent
    `decorate` calls on the same callable safe.
"""

import inspect
import logging
import threading
import weakref
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from electrode._utils import _component_name, _get_option

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnnotationMeta:
    """
    Metadata attached to a decorated callable.

    This class is frozen (attributes cannot be rebound). The annotation mapping
    is copied when the record is created and again whenever it is accessed, so
    external mutation does not affect the stored metadata.
    """

    _component: str
    _annotations: dict[str, Any]

    def __post_init__(self):
        object.__setattr__(self, "_annotations", _copy_annotations(self._annotations))

    def __getattribute__(self, name: str):
        # Intercept container access to return defensive copies
        val = super().__getattribute__(name)
        if name == "_annotations" and isinstance(val, dict):
            return _copy_annotations(val)
        return val

    @property
    def requires(self) -> list[str]:
        """Names of the dependencies the component requires."""
        return self._annotations.get(_get_option("requires_key"), [])

    @property
    def singleton(self) -> bool:
        """Whether the component should have a single instance."""
        return bool(self._annotations.get(_get_option("singleton_key"), False))


def _copy_annotations(annotations: dict[str, Any]) -> dict[str, Any]:
    return {
        key: list(value) if isinstance(value, list) else value
        for key, value in annotations.items()
    }


class _AnnotationRegistry:
    """Side-table from callables to their AnnotationMeta."""

    def __init__(self):
        self._table: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()
        self._lock = threading.Lock()

    @staticmethod
    def _key(f: Callable) -> Callable:
        if inspect.ismethod(f):
            return f.__func__
        return f

    def get(self, f: Callable) -> AnnotationMeta | None:
        """Return the record of `f`, or None if `f` was never decorated."""
        try:
            return self._table.get(self._key(f))
        except TypeError:
            # Objects without weak reference support are never registered
            return None

    def merge(self, f: Callable, fragments: Iterable[dict[str, Any]]) -> AnnotationMeta:
        """
        Merge fragments, in order, onto the record of `f`. Later keys override
        earlier ones; values are replaced, never combined.
        """
        key = self._key(f)
        with self._lock:
            current = self.get(f)
            merged = current._annotations if current is not None else {}
            for fragment in fragments:
                merged.update(fragment)

            meta = AnnotationMeta(_component=_component_name(f), _annotations=merged)
            try:
                self._table[key] = meta
            except TypeError as e:
                raise TypeError(
                    f"Cannot annotate {_component_name(f)!r}: objects of type "
                    f"{type(key).__name__!r} do not support weak references."
                ) from e

        logger.debug("Annotations of %r are now %s", meta._component, merged)
        return meta


_registry = _AnnotationRegistry()


def get_annotation_meta(f: Callable) -> AnnotationMeta | None:
    """Return the AnnotationMeta recorded for `f`, or None."""
    return _registry.get(f)


def get_annotations(f: Callable) -> dict[str, Any]:
    """
    Return a copy of the merged annotations of `f`.

    This is the mapping a container reads to resolve the component, e.g.
    `{"@require": ["db"], "@singleton": True}`. Callables that were never
    decorated yield an empty dict.
    """
    meta = _registry.get(f)
    if meta is None:
        return {}
    return meta._annotations


def is_component(f: Callable) -> bool:
    """Check if a callable has been decorated."""
    return callable(f) and _registry.get(f) is not None
