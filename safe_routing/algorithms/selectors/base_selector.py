"""
Base abstract class for priority selection strategies.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple


class BasePrioritySelector(ABC):
    """
    Abstract base class for picking the next vertex to finalize.

    Holds a working set of (vertex_id, cost) candidates. A selector
    instance belongs to a single search and is discarded afterwards.
    """

    name: str = "base"

    @abstractmethod
    def insert_or_update(self, vertex_id: str, cost: float) -> None:
        """
        Offer a candidate cost for a vertex.

        Args:
            vertex_id: Vertex to enqueue or update
            cost: Tentative cost-so-far
        """
        pass

    @abstractmethod
    def extract_minimum(self) -> Optional[Tuple[str, float]]:
        """
        Remove and return the lowest-cost candidate.

        Returns:
            (vertex_id, cost) tuple, or None when no candidates remain
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def is_empty(self) -> bool:
        return len(self) == 0
