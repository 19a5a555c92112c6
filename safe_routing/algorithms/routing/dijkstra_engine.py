"""
Dijkstra shortest-path search with a pluggable priority selector.
"""

import logging
import math
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set, Tuple, Union

import numpy as np

from ...exceptions import PathReconstructionError, VertexNotFoundError
from ...graph.street_graph import Edge, StreetGraph, Vertex
from ..selectors import SelectorFactory, SelectorStrategy
from .cost_model import edge_cost

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathResult:
    """Outcome of a successful search."""

    vertices: Tuple[Vertex, ...]
    total_length: float
    total_risk: float
    total_cost: float
    visited_nodes: int
    algorithm: str
    execution_time_ms: float
    segment_risks: Tuple[float, ...] = ()

    found = True

    def __bool__(self) -> bool:
        return True

    @property
    def vertex_ids(self) -> List[str]:
        return [vertex.id for vertex in self.vertices]

    @property
    def coordinates(self) -> List[Tuple[float, float]]:
        """(lat, lon) pairs along the path."""
        return [vertex.coordinates for vertex in self.vertices]

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics for the route."""
        return {
            'algorithm': self.algorithm,
            'node_count': len(self.vertices),
            'total_length_m': round(self.total_length, 1),
            'total_length_km': round(self.total_length / 1000, 2),
            'total_risk': round(self.total_risk, 2),
            'total_cost': round(self.total_cost, 2),
            'average_risk': round(float(np.mean(self.segment_risks)), 2) if self.segment_risks else 0,
            'max_risk': round(float(np.max(self.segment_risks)), 2) if self.segment_risks else 0,
            'visited_nodes': self.visited_nodes,
            'execution_time_ms': round(self.execution_time_ms, 2)
        }


@dataclass(frozen=True)
class NoPath:
    """Explicit negative outcome: the target is unreachable from the source."""

    source_id: str
    target_id: str
    visited_nodes: int
    algorithm: str
    execution_time_ms: float

    found = False

    def __bool__(self) -> bool:
        return False


SearchOutcome = Union[PathResult, NoPath]


@dataclass
class SearchState:
    """Per-query bookkeeping. Allocated fresh for every search."""

    costs: Dict[str, float] = field(default_factory=dict)
    predecessors: Dict[str, Optional[str]] = field(default_factory=dict)
    finalized: Set[str] = field(default_factory=set)
    visited_count: int = 0

    @classmethod
    def initialize(cls, source_id: str) -> 'SearchState':
        state = cls()
        state.costs[source_id] = 0.0
        state.predecessors[source_id] = None
        return state

    def cost_of(self, vertex_id: str) -> float:
        return self.costs.get(vertex_id, math.inf)

    def predecessor_of(self, vertex_id: str) -> Optional[str]:
        return self.predecessors.get(vertex_id)

    def finalize(self, vertex_id: str) -> None:
        self.finalized.add(vertex_id)
        self.visited_count += 1

    def relax(self, vertex_id: str, cost: float, predecessor_id: str) -> bool:
        """Record a cheaper cost; returns False when ``cost`` is not strictly lower."""
        if cost < self.cost_of(vertex_id):
            self.costs[vertex_id] = cost
            self.predecessors[vertex_id] = predecessor_id
            return True
        return False


def find_path(graph: StreetGraph, source_id: str, target_id: str,
              distance_weight: float, safety_weight: float,
              strategy: Union[SelectorStrategy, str] = SelectorStrategy.HEAP) -> SearchOutcome:
    """
    Find the minimum-cost path between two vertices.

    Args:
        graph: Street graph to search
        source_id: Starting vertex id
        target_id: Destination vertex id
        distance_weight: Multiplier for segment length
        safety_weight: Multiplier for segment risk score
        strategy: "plain" (linear scan) or "heap" (binary heap)

    Returns:
        PathResult when the target is reachable, otherwise NoPath

    Raises:
        VertexNotFoundError: If source or target is not in the graph
        ValueError: If strategy is unknown
    """
    strategy = SelectorStrategy.parse(strategy)

    if source_id not in graph:
        raise VertexNotFoundError(source_id, "source")
    if target_id not in graph:
        raise VertexNotFoundError(target_id, "target")

    start_time = time.perf_counter()
    logger.debug(f"Finding path from {source_id} to {target_id} using {strategy.value} "
                 f"(distance: {distance_weight:.2f}, safety: {safety_weight:.2f})")

    state = SearchState.initialize(source_id)
    selector = SelectorFactory.create_selector(strategy, graph)
    selector.insert_or_update(source_id, 0.0)

    while True:
        candidate = selector.extract_minimum()
        if candidate is None:
            break

        current_id, current_cost = candidate
        if current_cost == math.inf:
            break
        if current_id in state.finalized:
            continue

        state.finalize(current_id)
        if current_id == target_id:
            break

        base_cost = state.cost_of(current_id)
        for edge in graph.outgoing_edges(current_id):
            new_cost = base_cost + edge_cost(edge, distance_weight, safety_weight)
            if state.relax(edge.target, new_cost, current_id):
                selector.insert_or_update(edge.target, new_cost)

    elapsed_ms = (time.perf_counter() - start_time) * 1000

    if state.cost_of(target_id) == math.inf:
        logger.warning(f"No path found from {source_id} to {target_id} "
                       f"({state.visited_count} vertices visited)")
        return NoPath(
            source_id=source_id,
            target_id=target_id,
            visited_nodes=state.visited_count,
            algorithm=strategy.value,
            execution_time_ms=elapsed_ms
        )

    path_ids = _reconstruct_path(state, source_id, target_id, len(graph))

    total_length = 0.0
    total_risk = 0.0
    segment_risks = []
    for from_id, to_id in zip(path_ids, path_ids[1:]):
        edge = _segment_edge(graph, from_id, to_id, distance_weight, safety_weight)
        total_length += edge.length
        total_risk += edge.risk_score
        segment_risks.append(edge.risk_score)

    elapsed_ms = (time.perf_counter() - start_time) * 1000

    result = PathResult(
        vertices=tuple(graph.get_vertex(vertex_id) for vertex_id in path_ids),
        total_length=total_length,
        total_risk=total_risk,
        total_cost=state.cost_of(target_id),
        visited_nodes=state.visited_count,
        algorithm=strategy.value,
        execution_time_ms=elapsed_ms,
        segment_risks=tuple(segment_risks)
    )

    logger.info(f"Route found ({strategy.value}): {len(path_ids)} nodes, "
                f"{total_length:.0f}m, {state.visited_count} visited, "
                f"calculated in {elapsed_ms:.1f}ms")
    return result


def compare_strategies(graph: StreetGraph, source_id: str, target_id: str,
                       distance_weight: float, safety_weight: float) -> Dict[str, SearchOutcome]:
    """
    Run the same query with every selector strategy.

    Both strategies agree on the total cost; visit counts and, when several
    optimal paths exist, the chosen path may differ.
    """
    return {
        strategy.value: find_path(graph, source_id, target_id,
                                  distance_weight, safety_weight, strategy)
        for strategy in SelectorStrategy
    }


def _reconstruct_path(state: SearchState, source_id: str, target_id: str,
                      max_length: int) -> List[str]:
    """Walk predecessor links from target back to source."""
    path = [target_id]
    current = target_id

    while current != source_id:
        previous = state.predecessor_of(current)
        if previous is None or len(path) > max_length:
            raise PathReconstructionError(
                f"Predecessor chain from {target_id} does not reach {source_id}"
            )
        path.append(previous)
        current = previous

    path.reverse()
    return path


def _segment_edge(graph: StreetGraph, from_id: str, to_id: str,
                  distance_weight: float, safety_weight: float) -> Edge:
    """Cheapest edge between consecutive path vertices (first one on ties)."""
    best_edge = None
    best_cost = math.inf

    for edge in graph.outgoing_edges(from_id):
        if edge.target != to_id:
            continue
        cost = edge_cost(edge, distance_weight, safety_weight)
        if best_edge is None or cost < best_cost:
            best_edge = edge
            best_cost = cost

    if best_edge is None:
        raise PathReconstructionError(f"No edge from {from_id} to {to_id} on reconstructed path")
    return best_edge
