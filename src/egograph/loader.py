from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union

from .core.exceptions import LoaderError
from .core.graph import DirectedGraph

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]


def parse_edge_line(line: str, lineno: Optional[int] = None, comment_prefix: str = "#") -> Optional[Edge]:
    """Parse ``"from to"`` into an edge. Blank and comment lines give None."""

    line = line.strip()
    if not line or (comment_prefix and line.startswith(comment_prefix)):
        return None
    fields = line.split()
    if len(fields) != 2:
        raise LoaderError(f"expected two vertex ids, got {len(fields)} fields: {line!r}", lineno)
    try:
        return int(fields[0]), int(fields[1])
    except ValueError as e:
        raise LoaderError(f"vertex ids must be integers: {line!r}", lineno) from e


def iter_edge_pairs(lines: Iterable[str], comment_prefix: str = "#", strict: bool = True) -> Iterator[Edge]:
    """Yield ``(from, to)`` pairs from edge-list lines.

    With ``strict=False`` malformed lines are logged and skipped instead of
    raising LoaderError.
    """

    for lineno, line in enumerate(lines, start=1):
        try:
            edge = parse_edge_line(line, lineno, comment_prefix)
        except LoaderError as e:
            if strict:
                raise
            logger.warning(f"Skipping malformed edge: {e}")
            continue
        if edge is not None:
            yield edge


def add_edges(graph: DirectedGraph, pairs: Iterable[Edge]) -> int:
    """Register both endpoints of every pair, then add the edge. Returns count added."""

    count = 0
    for source, target in pairs:
        graph.add_vertex(source)
        graph.add_vertex(target)
        graph.add_edge(source, target)
        count += 1
    return count


def load_graph(path: Union[str, Path], graph: Optional[DirectedGraph] = None, *,
               comment_prefix: str = "#", strict: bool = True) -> DirectedGraph:
    """Read an edge-list file into ``graph`` (a new DirectedGraph by default).

    The whole file is parsed before ``graph`` is touched, so a LoaderError
    leaves a caller-supplied graph unchanged.
    """

    path = Path(path)
    if graph is None:
        graph = DirectedGraph()
    try:
        with path.open("r", encoding="utf-8") as f:
            pairs = list(iter_edge_pairs(f, comment_prefix, strict))
    except (OSError, UnicodeDecodeError) as e:
        raise LoaderError(f"Failed to read edge list {path}: {e}") from e

    count = add_edges(graph, pairs)
    logger.info(f"Loaded {count} edges from {path}: {graph.vertex_count()} vertices, {graph.edge_count()} edges")
    return graph
