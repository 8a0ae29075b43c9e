"""
This module provides the graph visualization capabilities for electrode.

`DependencyGraph` turns the metadata recorded for a set of decorated
components into a directed graph: one node per component, one node per
required dependency name, and an edge from every dependency to each
component that requires it. Components marked as singletons are styled
apart. The graph structure is built with `networkx` and rendered with
`graphviz`.

The graph only reflects recorded metadata. It does not check that a
required name is provided by any component, nor does it resolve anything.
"""

from collections.abc import Callable, Iterable

import graphviz
from networkx import DiGraph
from pandas import DataFrame

from electrode._decorators import get_annotations, is_component
from electrode._errors import InvalidComponentCollectionError
from electrode._utils import _component_name, _get_option

from ._matrix import AnnotationMatrix

# Node type -> (fill color, legend label)
_NODE_STYLES = {
    "component": ("#9999ff", "Components"),
    "singleton": ("#fbec5d", "Singletons"),
    "dependency": ("#f08080", "Dependencies"),
}

# Legend nodes live in the graph's node namespace, so they get their own prefix
_LEGEND_PREFIX = "legend_"

_GRAPH_ATTR = {
    "rankdir": "LR",
    "nodesep": "0.2",
    "ranksep": "1.0",
    "fontname": "Helvetica",
    "fontsize": "10",
    "labelloc": "t",
}


class DependencyGraph:
    """Generates and visualizes the dependency graph of annotated components.

    Attributes:
        components (dict[str, Callable]): The decorated callables by name.
        graph (DiGraph): The networkx graph populated by `build`.
    """

    def __init__(self, components: Iterable[Callable]):
        """Initializes the DependencyGraph.

        Args:
            components (Iterable[Callable]): Callables that went through
                `decorate` or `@component`.

        Raises:
            InvalidComponentCollectionError: If `components` is not iterable,
                contains an undecorated callable or two components share a name.
        """
        if not isinstance(components, Iterable):
            raise InvalidComponentCollectionError("'components' must be an Iterable")

        self.components: dict[str, Callable] = {}
        for f in components:
            if not is_component(f):
                raise InvalidComponentCollectionError(
                    f"{f!r} has not been decorated as a component"
                )
            name = _component_name(f)
            if name in self.components:
                raise InvalidComponentCollectionError(
                    f"Duplicate component name {name!r}"
                )
            self.components[name] = f

        self.graph = DiGraph()

    @property
    def _collector(self) -> dict[str, dict]:
        """Annotations of every component by name."""
        return {name: get_annotations(f) for name, f in self.components.items()}

    def _setup(self):
        """Builds the internal networkx graph from the recorded annotations."""
        requires_key = _get_option("requires_key")
        singleton_key = _get_option("singleton_key")

        self.graph = DiGraph()
        collector = self._collector

        for name, annotations in collector.items():
            singleton = annotations.get(singleton_key) is True
            node_type = "singleton" if singleton else "component"
            self.graph.add_node(name, type=node_type)

        for name, annotations in collector.items():
            for dependency in annotations.get(requires_key, []):
                # Components keep their own style when another component requires them
                if dependency not in self.graph.nodes:
                    self.graph.add_node(dependency, type="dependency")
                self.graph.add_edge(dependency, name)

    def build(
        self,
        graph: graphviz.Digraph | None = None,
        additional_graph_attr: dict[str, str] | None = None,
        size: int = 12,
        legend: bool = True,
        sink_source: bool = False,
    ) -> graphviz.Digraph:
        """Builds and returns the Graphviz Digraph object.

        Args:
            graph (graphviz.Digraph | None, optional): An existing graphviz
                graph to draw into. If None, a new graph is created.
                Defaults to None.
            additional_graph_attr (dict[str, str] | None, optional): Graph
                attributes overriding the defaults. Defaults to None.
            size (int, optional): The size of the graph in inches (e.g., "12,12!").
                Defaults to 12.
            legend (bool, optional): If True, includes a color-coded legend
                of the node types. Defaults to True.
            sink_source (bool, optional): If True, puts nodes without incoming
                edges first and nodes without outgoing edges last.
                Defaults to False.

        Returns:
            graphviz.Digraph: A Graphviz Digraph object. It can be rendered to
                various image formats (e.g., PNG, SVG) using its `.render()` method.

        Example:
            ```python
            from electrode.core import DependencyGraph

            g = DependencyGraph([UserService, Mailer]).build()
            g.render("dependency_graph", format="png", cleanup=True)
            ```
        """
        self._setup()

        graph_attr = _GRAPH_ATTR | {
            "size": f"{size},{size}!",
            "label": f"<<b>{type(self).__name__}</b>>",
        }
        graph_attr |= additional_graph_attr or {}
        g = graph or graphviz.Digraph(graph_attr=graph_attr)

        for node, data in self.graph.nodes(data=True):
            color, _ = _NODE_STYLES[data["type"]]
            g.node(node, shape="box", style="filled", fillcolor=color, height="0.35")
        g.edges(self.graph.edges())

        if sink_source:
            for rank, degrees in (
                ("source", self.graph.in_degree()),
                ("sink", self.graph.out_degree()),
            ):
                with g.subgraph() as s:
                    s.attr(rank=rank)
                    for node, degree in degrees:
                        if degree == 0:
                            s.node(node)

        if legend:
            with g.subgraph(name="cluster_legend") as c:
                c.attr(label="<<b>Legend</b>>", fontsize="12", style="rounded")
                for node_type, (color, label) in _NODE_STYLES.items():
                    c.node(
                        f"{_LEGEND_PREFIX}{node_type}",
                        label=label,
                        shape="box",
                        style="filled",
                        fillcolor=color,
                        height="0.12",
                    )

        return g

    def build_matrix(self) -> DataFrame:
        """Construct and return the AnnotationMatrix of the components.

        Returns:
            pd.DataFrame: A pandas DataFrame representing the AnnotationMatrix.
        """
        return AnnotationMatrix(self._collector).build()
