from dataclasses import FrozenInstanceError

import pytest

from vizgraph.graph import Adjacency, build_graph_from_edges
from vizgraph.types import Link, PathEdge, edge_endpoints


def test_build_graph_symmetric():
    graph = build_graph_from_edges([("A", "B"), ("B", "C")])

    assert len(graph) == 3
    assert graph.edge_count == 2
    assert graph["A"] == Adjacency(
        incoming=frozenset({"B"}), outgoing=frozenset({"B"})
    )
    assert graph["B"] == Adjacency(
        incoming=frozenset({"A", "C"}), outgoing=frozenset({"A", "C"})
    )
    assert graph.neighbors("C") == {"B"}


def test_build_graph_first_sight_order():
    graph = build_graph_from_edges([("C", "A"), ("B", "C"), ("D", "A")])
    assert list(graph) == ["C", "A", "B", "D"]


def test_build_graph_duplicates_and_self_loops():
    graph = build_graph_from_edges([("A", "B"), ("B", "A"), ("A", "A")])

    assert len(graph) == 2
    assert graph.edge_count == 3
    assert graph.neighbors("A") == {"A", "B"}
    assert graph.neighbors("B") == {"A"}


def test_build_graph_empty():
    graph = build_graph_from_edges([])
    assert len(graph) == 0
    assert "A" not in graph


def test_graph_accessors_are_read_only():
    graph = build_graph_from_edges([("A", "B")])

    with pytest.raises(AttributeError):
        graph.neighbors("A").add("Z")
    with pytest.raises(AttributeError):
        graph["A"].outgoing.add("Z")
    with pytest.raises(FrozenInstanceError):
        graph["A"].outgoing = frozenset({"Z"})

    assert graph.neighbors("A") == {"B"}
    assert "Z" not in graph


def test_neighbors_unknown_node():
    graph = build_graph_from_edges([("A", "B")])
    with pytest.raises(KeyError):
        graph.neighbors("Z")


@pytest.mark.parametrize(
    "edge",
    [
        {"source": 1, "target": 2},
        {"source": 1, "target": 2, "id": 7, "label": "x"},
        Link(id=7, source=1, target=2),
        PathEdge(1, 2),
        (1, 2),
        [1, 2],
    ],
)
def test_edge_endpoints_shapes(edge):
    assert edge_endpoints(edge) == (1, 2)


@pytest.mark.parametrize("edge", [{"target": 2}, (1, 2, 3), "AB", 5])
def test_edge_endpoints_rejects_malformed(edge):
    with pytest.raises(TypeError):
        edge_endpoints(edge)
