"""
Core routing algorithms.
"""

from .cost_model import edge_cost
from .dijkstra_engine import PathResult, NoPath, SearchState, find_path, compare_strategies
from .dijkstra_router import DijkstraRouter

__all__ = [
    'edge_cost',
    'PathResult',
    'NoPath',
    'SearchState',
    'find_path',
    'compare_strategies',
    'DijkstraRouter'
]
