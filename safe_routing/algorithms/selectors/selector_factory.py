"""
Factory for creating priority selection strategies.

Lets callers pick a strategy by name ("plain" / "heap") instead of
branching on a flag inside the search loop.
"""

from enum import Enum
from typing import Dict, Iterable, Union

from .base_selector import BasePrioritySelector
from .binary_heap_selector import BinaryHeapSelector
from .linear_scan_selector import LinearScanSelector


class SelectorStrategy(Enum):
    """Available selector strategies."""
    PLAIN = "plain"
    HEAP = "heap"

    @classmethod
    def parse(cls, value: Union['SelectorStrategy', str]) -> 'SelectorStrategy':
        """Accept an enum member or its string value (case-insensitive)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(f"Unsupported selector strategy: {value!r} (expected one of: {valid})") from None


class SelectorFactory:
    """
    Factory for creating selector instances.

    A new selector is created for every search; instances are never shared.
    """

    @staticmethod
    def create_selector(strategy: Union[SelectorStrategy, str],
                        vertex_order: Iterable[str]) -> BasePrioritySelector:
        """
        Create a selector for one search.

        Args:
            strategy: Strategy enum member or its string value
            vertex_order: Vertex ids in graph iteration order (used by the linear scan)

        Returns:
            Fresh selector instance

        Raises:
            ValueError: If strategy is not supported
        """
        strategy = SelectorStrategy.parse(strategy)

        if strategy == SelectorStrategy.PLAIN:
            return LinearScanSelector(vertex_order)
        elif strategy == SelectorStrategy.HEAP:
            return BinaryHeapSelector()
        else:
            raise ValueError(f"Unsupported selector strategy: {strategy}")

    @staticmethod
    def get_available_strategies() -> Dict[str, Dict[str, str]]:
        """
        Get available strategies with their complexity characteristics.

        Returns:
            Dictionary mapping strategy names to label, complexity and description
        """
        return {
            SelectorStrategy.PLAIN.value: {
                'label': "Dijkstra (linear scan)",
                'complexity': "O(V^2)",
                'description': "Scans every unfinalized vertex to pick the next one. "
                               "Simple, and competitive on small or dense graphs."
            },
            SelectorStrategy.HEAP.value: {
                'label': "Dijkstra (binary heap)",
                'complexity': "O((V+E) log V)",
                'description': "Keeps candidates in a binary min-heap with decrease-key. "
                               "Much faster on large sparse street networks."
            }
        }
