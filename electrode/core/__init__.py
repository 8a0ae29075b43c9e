"""
This module exposes the inspection tools of electrode: the tabular
annotation matrix and the dependency graph visualization.
"""

from electrode.core._matrix import AnnotationMatrix
from electrode.core.nxgraph import DependencyGraph

__all__ = ["AnnotationMatrix", "DependencyGraph"]
