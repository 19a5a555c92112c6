"""
Binary min-heap selection with decrease-key: O((V+E) log V) over a full search.
"""

from typing import Dict, List, Optional, Tuple

from .base_selector import BasePrioritySelector


class BinaryHeapSelector(BasePrioritySelector):
    """
    Array-backed binary min-heap keyed on cost.

    A ``vertex_id -> index`` map makes decrease-key O(log V). Each vertex
    is present at most once. Ties in cost follow heap-internal order and
    are not stable.
    """

    name = "heap"

    def __init__(self):
        self._heap: List[List] = []        # [cost, vertex_id]
        self._positions: Dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._positions

    def insert(self, vertex_id: str, cost: float) -> None:
        if vertex_id in self._positions:
            raise ValueError(f"Vertex {vertex_id} is already enqueued")
        self._heap.append([cost, vertex_id])
        index = len(self._heap) - 1
        self._positions[vertex_id] = index
        self._sift_up(index)

    def extract_minimum(self) -> Optional[Tuple[str, float]]:
        if not self._heap:
            return None

        self._swap(0, len(self._heap) - 1)
        cost, vertex_id = self._heap.pop()
        del self._positions[vertex_id]

        if self._heap:
            self._sift_down(0)
        return vertex_id, cost

    def decrease_key(self, vertex_id: str, new_cost: float) -> bool:
        """
        Lower the cost of an enqueued vertex.

        Returns:
            True if the cost was lowered, False if ``new_cost`` was not smaller

        Raises:
            KeyError: If the vertex is not enqueued
        """
        index = self._positions[vertex_id]
        if new_cost < self._heap[index][0]:
            self._heap[index][0] = new_cost
            self._sift_up(index)
            return True
        return False

    def insert_or_update(self, vertex_id: str, cost: float) -> None:
        # Only the source is seeded, so first relaxation of a vertex inserts it.
        if vertex_id in self._positions:
            self.decrease_key(vertex_id, cost)
        else:
            self.insert(vertex_id, cost)

    def peek(self) -> Optional[Tuple[str, float]]:
        if not self._heap:
            return None
        cost, vertex_id = self._heap[0]
        return vertex_id, cost

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if self._heap[index][0] < self._heap[parent][0]:
                self._swap(index, parent)
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        size = len(self._heap)
        while True:
            smallest = index
            left = 2 * index + 1
            right = 2 * index + 2

            if left < size and self._heap[left][0] < self._heap[smallest][0]:
                smallest = left
            if right < size and self._heap[right][0] < self._heap[smallest][0]:
                smallest = right

            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]
        self._positions[self._heap[i][1]] = i
        self._positions[self._heap[j][1]] = j
