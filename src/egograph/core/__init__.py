"""
Core egograph components
"""

from .config import Config
from .egonet import egonet
from .exceptions import ConfigurationError, EgoGraphError, InvalidReferenceError, LoaderError
from .graph import DirectedGraph, Graph
from .scc import component_lists, finish_order, strongly_connected_components
from .subgraph import induced_subgraph
from .transpose import transpose

__all__ = [
    'Config',
    'DirectedGraph',
    'Graph',
    'egonet',
    'transpose',
    'induced_subgraph',
    'finish_order',
    'component_lists',
    'strongly_connected_components',
    'EgoGraphError',
    'InvalidReferenceError',
    'LoaderError',
    'ConfigurationError'
]
