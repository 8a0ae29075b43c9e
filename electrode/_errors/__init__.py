"""
This module centralizes custom exception types for the electrode package,
making them easily importable from a single location.
"""

from ._annotations import InvalidAnnotationError
from ._matrix import InvalidComponentCollectionError, _validate_registry_type
from ._reflection import ParseError

__all__ = [
    "InvalidAnnotationError",
    "InvalidComponentCollectionError",
    "ParseError",
    "_validate_registry_type",
]
