from __future__ import annotations

import pytest

from egograph.core.exceptions import InvalidReferenceError, LoaderError
from egograph.core.graph import DirectedGraph


def test_add_vertices_and_edges():
    g = DirectedGraph()
    g.add_vertex(1)
    g.add_vertex(2)
    g.add_edge(1, 2)
    assert g.export_adjacency() == {1: {2}, 2: set()}
    assert g.vertex_count() == 2
    assert g.edge_count() == 1


def test_add_vertex_is_idempotent() -> None:
    g = DirectedGraph()
    g.add_vertex(7)
    g.add_vertex(8)
    g.add_edge(7, 8)
    g.add_vertex(7)
    assert g.vertex_count() == 2
    assert g.successors(7) == {8}


@pytest.mark.parametrize("source,target", [(1, 99), (99, 1), (98, 99)])
def test_add_edge_rejects_unregistered_endpoint(source: int, target: int) -> None:
    g = DirectedGraph()
    g.add_vertex(1)
    with pytest.raises(InvalidReferenceError):
        g.add_edge(source, target)
    assert g.export_adjacency() == {1: set()}
    assert g.edge_count() == 0
    assert g.vertex_count() == 1


def test_invalid_reference_is_a_value_error() -> None:
    g = DirectedGraph()
    with pytest.raises(ValueError) as excinfo:
        g.add_edge(3, 4)
    assert excinfo.value.vertex == 3


def test_edge_count_counts_calls_not_distinct_edges() -> None:
    g = DirectedGraph()
    g.add_vertex(1)
    g.add_vertex(2)
    g.add_edge(1, 2)
    g.add_edge(1, 2)
    assert g.edge_count() == 2
    assert g.successors(1) == {2}
    assert list(g.edges()) == [(1, 2)]


def test_self_loop_allowed() -> None:
    g = DirectedGraph()
    g.add_vertex(5)
    g.add_edge(5, 5)
    assert g.successors(5) == {5}


def test_export_adjacency_is_a_snapshot(triangle_with_tail) -> None:
    exported = triangle_with_tail.export_adjacency()
    exported[1].add(4)
    exported[42] = set()
    assert triangle_with_tail.successors(1) == {2}
    assert not triangle_with_tail.contains_vertex(42)


def test_successors_returns_copy(triangle_with_tail) -> None:
    succ = triangle_with_tail.successors(3)
    succ.clear()
    assert triangle_with_tail.successors(3) == {1, 4}
    with pytest.raises(InvalidReferenceError):
        triangle_with_tail.successors(100)


def test_membership_and_len(triangle_with_tail) -> None:
    assert 3 in triangle_with_tail
    assert triangle_with_tail.contains_vertex(4)
    assert 5 not in triangle_with_tail
    assert len(triangle_with_tail) == 4
    assert triangle_with_tail.vertices() == [1, 2, 3, 4]
    assert repr(triangle_with_tail) == "DirectedGraph(vertices=4, edges=4)"


def test_empty_graph() -> None:
    g = DirectedGraph()
    assert g.vertex_count() == 0
    assert g.edge_count() == 0
    assert g.export_adjacency() == {}
    assert g.get_sccs() == []
    ego = g.egonet(1)
    assert ego.vertex_count() == 0 and ego.edge_count() == 0


def test_error_messages_default_when_not_given() -> None:
    assert str(InvalidReferenceError(12)) == "Vertex 12 is not present in the graph"
    assert str(LoaderError("bad line")) == "bad line"
    assert LoaderError("bad line").lineno is None
