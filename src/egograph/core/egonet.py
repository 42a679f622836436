"""
Ego network extraction
"""

from __future__ import annotations

import logging

from .graph import DirectedGraph

logger = logging.getLogger(__name__)


def egonet(graph: DirectedGraph, center: int) -> DirectedGraph:
    """Return the ego network of ``center``.

    The ego network is the subgraph induced by ``center`` and its direct
    out-neighbors. An unknown center yields an empty graph rather than an
    error.
    """

    ego = DirectedGraph()
    if not graph.contains_vertex(center):
        logger.debug(f"Vertex {center} not in graph, returning empty ego network")
        return ego

    neighbors = graph._successors(center)
    ego.add_vertex(center)
    for neighbor in neighbors:
        ego.add_vertex(neighbor)
        ego.add_edge(center, neighbor)

    # edges among the neighbors, and back to the center
    for neighbor in neighbors:
        for target in graph._successors(neighbor):
            if ego.contains_vertex(target):
                ego.add_edge(neighbor, target)

    logger.debug(f"Ego network of {center}: {ego.vertex_count()} vertices, {ego.edge_count()} edges")
    return ego
