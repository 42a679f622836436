from __future__ import annotations

from typing import Dict, Iterator, List, Protocol, Set, Tuple

from .exceptions import InvalidReferenceError


class Graph(Protocol):
    """Capabilities shared by every graph the analysis code accepts."""

    def add_vertex(self, vertex: int) -> None: ...

    def add_edge(self, source: int, target: int) -> None: ...

    def egonet(self, center: int) -> Graph: ...

    def get_sccs(self) -> List[Graph]: ...

    def export_adjacency(self) -> Dict[int, Set[int]]: ...

    def vertex_count(self) -> int: ...

    def edge_count(self) -> int: ...

    def contains_vertex(self, vertex: int) -> bool: ...


class DirectedGraph:
    """A directed graph over integer vertices stored as adjacency sets.

    Vertices must be registered with :meth:`add_vertex` before an edge may
    reference them. Duplicate edges are collapsed in the adjacency sets, but
    :meth:`edge_count` counts every successful :meth:`add_edge` call.

    ``_successors`` hands the live out-set to the traversal modules of this
    package (egonet, scc, subgraph, transpose). It is not public API and its
    result must not be mutated.
    """

    def __init__(self) -> None:
        self._adjacency: Dict[int, Set[int]] = {}
        self._num_edges = 0

    def add_vertex(self, vertex: int) -> None:
        if vertex not in self._adjacency:
            self._adjacency[vertex] = set()

    def add_edge(self, source: int, target: int) -> None:
        """Add the edge ``source -> target``.

        Raises InvalidReferenceError, leaving the graph untouched, when either
        endpoint is not a registered vertex.
        """
        if source not in self._adjacency:
            raise InvalidReferenceError(source, f"Edge source {source} is not present in the graph")
        if target not in self._adjacency:
            raise InvalidReferenceError(target, f"Edge target {target} is not present in the graph")
        self._adjacency[source].add(target)
        self._num_edges += 1

    def contains_vertex(self, vertex: int) -> bool:
        return vertex in self._adjacency

    def vertex_count(self) -> int:
        return len(self._adjacency)

    def edge_count(self) -> int:
        return self._num_edges

    def vertices(self) -> List[int]:
        """Vertex ids in insertion order."""
        return list(self._adjacency)

    def successors(self, vertex: int) -> Set[int]:
        """Return a copy of the out-neighbors of ``vertex``."""
        if vertex not in self._adjacency:
            raise InvalidReferenceError(vertex)
        return set(self._adjacency[vertex])

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Iterate over distinct ``(source, target)`` pairs."""
        for source, targets in self._adjacency.items():
            for target in targets:
                yield source, target

    def export_adjacency(self) -> Dict[int, Set[int]]:
        """Snapshot of the adjacency map; mutating it does not affect the graph."""
        return {vertex: set(targets) for vertex, targets in self._adjacency.items()}

    def _successors(self, vertex: int) -> Set[int]:
        # live set for in-package traversals; callers must not mutate it
        return self._adjacency[vertex]

    def egonet(self, center: int) -> DirectedGraph:
        from .egonet import egonet

        return egonet(self, center)

    def get_sccs(self) -> List[DirectedGraph]:
        from .scc import strongly_connected_components

        return strongly_connected_components(self)

    def transpose(self) -> DirectedGraph:
        from .transpose import transpose

        return transpose(self)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"DirectedGraph(vertices={self.vertex_count()}, edges={self.edge_count()})"
