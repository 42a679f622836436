"""
Strongly connected components via Kosaraju's two-pass depth-first search.

Pass 1 runs a DFS over the graph and records the order in which vertices
finish (post-order). Pass 2 runs a DFS over the transposed graph, taking
start vertices from the top of the finish stack; every tree it grows is one
strongly connected component. Both passes use an explicit stack of
``(vertex, neighbor iterator)`` frames, so traversal depth is bounded only by
memory and not by the interpreter recursion limit.
"""

from __future__ import annotations

import logging
from typing import List, Set

from .graph import DirectedGraph
from .subgraph import induced_subgraph
from .transpose import transpose

logger = logging.getLogger(__name__)


def _visit(graph: DirectedGraph, root: int, visited: Set[int],
           finished: List[int], component: List[int]) -> None:
    """Depth-first visit from ``root``.

    Vertices are appended to ``component`` when first discovered and to
    ``finished`` once all of their descendants have finished.
    """

    visited.add(root)
    component.append(root)
    frames = [(root, iter(graph._successors(root)))]
    while frames:
        vertex, neighbors = frames[-1]
        for neighbor in neighbors:
            if neighbor not in visited:
                visited.add(neighbor)
                component.append(neighbor)
                frames.append((neighbor, iter(graph._successors(neighbor))))
                break
        else:
            frames.pop()
            finished.append(vertex)


def _dfs(graph: DirectedGraph, vertices: List[int], finished: List[int]) -> List[List[int]]:
    """Pop ``vertices`` as a stack and visit each one not seen yet.

    Returns the vertex lists of the DFS trees, one per root. Only on the
    transposed graph, seeded by a finish order, are those trees the strongly
    connected components.
    """

    visited: Set[int] = set()
    trees: List[List[int]] = []
    while vertices:
        vertex = vertices.pop()
        if vertex not in visited:
            tree: List[int] = []
            _visit(graph, vertex, visited, finished, tree)
            trees.append(tree)
    return trees


def finish_order(graph: DirectedGraph) -> List[int]:
    """Vertices in DFS post-order; the last element finished last.

    Start vertices are taken from a stack filled in vertex insertion order, so
    the most recently added vertex is explored first.
    """

    finished: List[int] = []
    _dfs(graph, graph.vertices(), finished)
    return finished


def component_lists(graph: DirectedGraph) -> List[List[int]]:
    """Vertex lists of the strongly connected components of ``graph``."""

    finished = finish_order(graph)
    reversed_graph = transpose(graph)
    components = _dfs(reversed_graph, finished, [])
    logger.debug(f"Found {len(components)} strongly connected components over {graph.vertex_count()} vertices")
    return components


def strongly_connected_components(graph: DirectedGraph) -> List[DirectedGraph]:
    """Return each strongly connected component as an induced subgraph.

    Edges between different components are dropped. The result is computed
    from scratch on every call.
    """

    return [induced_subgraph(graph, component) for component in component_lists(graph)]
