"""
Linear-scan selection: O(V) per extraction, O(V^2) over a full search.
"""

import math
from typing import Dict, Iterable, List, Optional, Tuple

from .base_selector import BasePrioritySelector


class LinearScanSelector(BasePrioritySelector):
    """
    Selects the next vertex by scanning every vertex in graph order.

    No auxiliary ordering structure is kept. Each extraction walks the full
    vertex list and returns the pending vertex with the strictly lowest
    cost, so the first vertex in graph iteration order wins ties.
    """

    name = "plain"

    def __init__(self, vertex_order: Iterable[str]):
        """
        Args:
            vertex_order: All vertex ids in graph iteration order
        """
        self._order: List[str] = list(vertex_order)
        self._pending: Dict[str, float] = {}

    def insert_or_update(self, vertex_id: str, cost: float) -> None:
        current = self._pending.get(vertex_id, math.inf)
        if cost < current:
            self._pending[vertex_id] = cost

    def extract_minimum(self) -> Optional[Tuple[str, float]]:
        best_id = None
        lowest_cost = math.inf

        for vertex_id in self._order:
            cost = self._pending.get(vertex_id, math.inf)
            if cost < lowest_cost:
                lowest_cost = cost
                best_id = vertex_id

        if best_id is None:
            return None

        del self._pending[best_id]
        return best_id, lowest_cost

    def __len__(self) -> int:
        return len(self._pending)
