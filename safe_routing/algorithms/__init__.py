"""
Routing algorithms.

This module contains:
- Priority selection strategies (linear scan, binary heap)
- The Dijkstra path engine and cost model
- A config-bound router for coordinate-based queries
"""

from .selectors import (
    BasePrioritySelector,
    LinearScanSelector,
    BinaryHeapSelector,
    SelectorFactory,
    SelectorStrategy
)
from .routing import (
    edge_cost,
    PathResult,
    NoPath,
    SearchState,
    find_path,
    compare_strategies,
    DijkstraRouter
)

__all__ = [
    'BasePrioritySelector',
    'LinearScanSelector',
    'BinaryHeapSelector',
    'SelectorFactory',
    'SelectorStrategy',
    'edge_cost',
    'PathResult',
    'NoPath',
    'SearchState',
    'find_path',
    'compare_strategies',
    'DijkstraRouter'
]
