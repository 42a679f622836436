from __future__ import annotations

from typing import Iterable

from .graph import DirectedGraph


def induced_subgraph(graph: DirectedGraph, vertices: Iterable[int]) -> DirectedGraph:
    """Build the subgraph of ``graph`` induced by ``vertices``.

    Vertices keep the order they are given in; only edges whose endpoints are
    both in ``vertices`` are copied.
    """

    members = list(dict.fromkeys(vertices))
    member_set = set(members)
    subgraph = DirectedGraph()
    for vertex in members:
        subgraph.add_vertex(vertex)
    for vertex in members:
        for neighbor in graph._successors(vertex):
            if neighbor in member_set:
                subgraph.add_edge(vertex, neighbor)
    return subgraph
