"""
This module serves as the main entry point for the electrode package,
exposing its primary public API. The pandas and graphviz inspection tools
live in `electrode.core` and are only loaded when imported from there.
"""

from electrode._decorators import (
    AnnotationMeta,
    Annotations,
    DependsOn,
    Singleton,
    component,
    decorate,
    get_annotation_meta,
    get_annotations,
    is_component,
)
from electrode._errors import ParseError
from electrode._utils import (
    load_electrode_options,
    reflect_arguments,
    set_electrode_option,
)

# --- Define main API for electrode module ---
__all__ = [
    "AnnotationMeta",
    "Annotations",
    "DependsOn",
    "ParseError",
    "Singleton",
    "component",
    "decorate",
    "get_annotation_meta",
    "get_annotations",
    "is_component",
    "load_electrode_options",
    "reflect_arguments",
    "set_electrode_option",
]
