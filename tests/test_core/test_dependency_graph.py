import graphviz
import pandas as pd
import pytest

from electrode import Singleton, component, decorate, get_annotations
from electrode._errors import InvalidComponentCollectionError
from electrode.core import DependencyGraph


@component(Singleton)
def settings():
    return {}


@component()
def mailer(settings, transport):
    return settings, transport


@component()
def user_service(mailer, database):
    return mailer, database


def plain(a):
    return a


@pytest.mark.graph
@pytest.mark.smoke
def test_dependency_graph_build_smoke_no_legend():
    g = DependencyGraph([settings, mailer, user_service]).build(legend=False)

    assert isinstance(g, graphviz.Digraph)
    src = g.source
    assert "settings -> mailer" in src
    assert "transport -> mailer" in src
    assert "mailer -> user_service" in src
    assert "database -> user_service" in src


@pytest.mark.graph
def test_dependency_graph_node_styles():
    graph = DependencyGraph([settings, mailer, user_service])
    src = graph.build(legend=False).source

    assert graph.graph.nodes["settings"]["type"] == "singleton"
    assert graph.graph.nodes["mailer"]["type"] == "component"
    assert graph.graph.nodes["database"]["type"] == "dependency"
    assert 'fillcolor="#fbec5d"' in src  # singleton nodes
    assert 'fillcolor="#9999ff"' in src  # component nodes
    assert 'fillcolor="#f08080"' in src  # dependency nodes


@pytest.mark.graph
@pytest.mark.legend
def test_dependency_graph_legend_on_vs_off():
    g_with = DependencyGraph([mailer]).build(legend=True)
    g_without = DependencyGraph([mailer]).build(legend=False)

    # legend subgraph appears only when legend=True
    assert "cluster_legend" in g_with.source
    assert "cluster_legend" not in g_without.source


@pytest.mark.graph
def test_dependency_graph_build_is_repeatable():
    graph = DependencyGraph([mailer])
    assert graph.build().source == graph.build().source
    assert sorted(graph.graph.edges()) == [
        ("settings", "mailer"),
        ("transport", "mailer"),
    ]


@pytest.mark.graph
def test_dependency_graph_sink_source_and_attrs():
    g = DependencyGraph([mailer, user_service]).build(
        sink_source=True, additional_graph_attr={"rankdir": "TB"}
    )
    src = g.source
    assert "rank=source" in src
    assert "rank=sink" in src
    assert "rankdir=TB" in src


def test_dependency_graph_build_matrix():
    matrix = DependencyGraph([settings, mailer]).build_matrix()

    expected = pd.DataFrame(
        {
            "mailer": ["required", "required", ""],
            "settings": ["", "", "yes"],
        },
        index=["settings", "transport", "@singleton"],
        columns=["mailer", "settings"],
    )
    pd.testing.assert_frame_equal(matrix, expected)


def test_dependency_graph_rejects_undecorated_callables():
    with pytest.raises(InvalidComponentCollectionError, match="has not been decorated"):
        DependencyGraph([mailer, plain])


def test_dependency_graph_rejects_duplicate_names():
    with pytest.raises(InvalidComponentCollectionError, match="Duplicate component"):
        DependencyGraph([mailer, mailer])


def test_dependency_graph_rejects_non_iterable():
    with pytest.raises(InvalidComponentCollectionError, match="must be an Iterable"):
        DependencyGraph(mailer)


@pytest.mark.graph
@pytest.mark.legend
def test_legend_nodes_do_not_clash_with_dependencies():
    @component()
    def reporter(Components, Dependencies):  # noqa: N803
        return Components, Dependencies

    graph = DependencyGraph([reporter])
    src = graph.build(legend=True).source

    assert "legend_component" in src
    assert "legend_dependency" in src
    assert "Components -> reporter" in src
    assert sorted(graph.graph.nodes) == ["Components", "Dependencies", "reporter"]


def test_build_matrix_ignores_other_annotation_values():
    def scoped(database):
        return database

    decorate(scoped, lambda: {"@scope": "request"}, lambda: {"@tags": [1, 2]})
    assert get_annotations(scoped)["@scope"] == "request"

    matrix = DependencyGraph([scoped]).build_matrix()

    expected = pd.DataFrame(
        {"scoped": ["required"]}, index=["database"], columns=["scoped"]
    )
    pd.testing.assert_frame_equal(matrix, expected)
    assert "database -> scoped" in DependencyGraph([scoped]).build(legend=False).source


def test_inspection_tools_live_in_core_only():
    import electrode

    assert "DependencyGraph" not in electrode.__all__
    assert "AnnotationMatrix" not in electrode.__all__
    assert not hasattr(electrode, "DependencyGraph")
