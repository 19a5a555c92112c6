"""
Data loading and generation utilities for safety-aware routing.
"""

from .graph_loader import load_graph_data, load_street_graph, DEFAULT_GRAPH_PATH
from .synthetic_graph import generate_random_graph

__all__ = [
    'load_graph_data',
    'load_street_graph',
    'DEFAULT_GRAPH_PATH',
    'generate_random_graph'
]
