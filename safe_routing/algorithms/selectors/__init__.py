"""
Priority selection strategies for shortest-path search.
"""

from .base_selector import BasePrioritySelector
from .linear_scan_selector import LinearScanSelector
from .binary_heap_selector import BinaryHeapSelector
from .selector_factory import SelectorFactory, SelectorStrategy

__all__ = [
    'BasePrioritySelector',
    'LinearScanSelector',
    'BinaryHeapSelector',
    'SelectorFactory',
    'SelectorStrategy'
]
