"""
egograph - structural views of directed graphs
===============================================

Builds a directed graph from "from -> to" edge lists (for example a social
network) and derives two views of it:

- the ego network of a vertex: the vertex, its out-neighbors and the edges
  among them
- the strongly connected components, found with Kosaraju's two-pass DFS
"""

__version__ = "0.1.0"

from .core.graph import DirectedGraph, Graph
from .core.config import Config
from .core.exceptions import EgoGraphError, InvalidReferenceError, LoaderError
from .loader import load_graph

__all__ = [
    'DirectedGraph',
    'Graph',
    'Config',
    'EgoGraphError',
    'InvalidReferenceError',
    'LoaderError',
    'load_graph'
]
