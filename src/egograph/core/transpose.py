from __future__ import annotations

from .graph import DirectedGraph


def transpose(graph: DirectedGraph) -> DirectedGraph:
    """Return a new graph with the same vertices and every edge reversed."""

    reversed_graph = DirectedGraph()
    for vertex in graph.vertices():
        reversed_graph.add_vertex(vertex)
        for neighbor in graph._successors(vertex):
            reversed_graph.add_vertex(neighbor)
            reversed_graph.add_edge(neighbor, vertex)
    return reversed_graph
