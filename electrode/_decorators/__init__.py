"""
This module aggregates the decorators and annotation factories from the
sub-modules, making them accessible under the 'electrode._decorators' namespace.
"""

from electrode._decorators.annotations import Annotations, DependsOn, Singleton
from electrode._decorators.decorate import component, decorate
from electrode._decorators.meta import (
    AnnotationMeta,
    get_annotation_meta,
    get_annotations,
    is_component,
)

__all__ = [
    "AnnotationMeta",
    "Annotations",
    "DependsOn",
    "Singleton",
    "component",
    "decorate",
    "get_annotation_meta",
    "get_annotations",
    "is_component",
]
