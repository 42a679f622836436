from __future__ import annotations

from typing import Callable, Iterable, Tuple

import pytest

from egograph.core.graph import DirectedGraph


def _build_graph(edges: Iterable[Tuple[int, int]], vertices: Iterable[int] = ()) -> DirectedGraph:
    g = DirectedGraph()
    for v in vertices:
        g.add_vertex(v)
    for a, b in edges:
        g.add_vertex(a)
        g.add_vertex(b)
        g.add_edge(a, b)
    return g


@pytest.fixture
def make_graph() -> Callable[..., DirectedGraph]:
    return _build_graph


@pytest.fixture
def triangle_with_tail() -> DirectedGraph:
    """1 -> 2 -> 3 -> 1 plus 3 -> 4."""
    return _build_graph([(1, 2), (2, 3), (3, 1), (3, 4)], vertices=[1, 2, 3, 4])
