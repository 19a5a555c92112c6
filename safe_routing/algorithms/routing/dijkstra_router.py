"""
Router binding a street graph to a routing configuration.
"""

import logging
import math
from typing import Dict, List, Optional, Tuple

from ...config.routing_config import RoutingConfig
from ...exceptions import SnapDistanceError
from ...graph.street_graph import StreetGraph, Vertex
from ..selectors import SelectorStrategy
from .dijkstra_engine import SearchOutcome, find_path

logger = logging.getLogger(__name__)


class DijkstraRouter:
    """
    Safety-aware Dijkstra routing over a fixed street graph.

    The router holds no per-query state, so one instance can serve
    concurrent requests.
    """

    def __init__(self, graph: StreetGraph, config: Optional[RoutingConfig] = None):
        """
        Initialize the router.

        Args:
            graph: Street graph to route on
            config: Routing configuration parameters
        """
        self.graph = graph
        self.config = config or RoutingConfig()
        self.config.validate()

        if not len(graph):
            logger.warning("Router created with an empty graph - every snap will fail")

    def snap(self, lat: float, lon: float) -> Vertex:
        """
        Snap a coordinate to the nearest graph vertex.

        Raises:
            EmptyGraphError: If the graph has no vertices
            SnapDistanceError: If the nearest vertex exceeds ``max_snap_distance``
        """
        vertex = self.graph.nearest_vertex(lat, lon)

        max_distance = self.config.max_snap_distance
        if max_distance is not None:
            distance = math.hypot(vertex.lat - lat, vertex.lon - lon)
            if distance > max_distance:
                raise SnapDistanceError(
                    f"Nearest vertex {vertex.id} is {distance:.5f} degrees from "
                    f"({lat}, {lon}), limit is {max_distance}"
                )

        logger.debug(f"Snapped ({lat:.5f}, {lon:.5f}) to vertex {vertex.id}")
        return vertex

    def find_route(self, source_id: str, target_id: str,
                   safety_weight: Optional[float] = None,
                   algorithm: Optional[str] = None) -> SearchOutcome:
        """
        Find the optimal route between two vertex ids.

        Args:
            source_id: Starting vertex id
            target_id: Destination vertex id
            safety_weight: Overrides the configured safety weight (0-1)
            algorithm: Overrides the configured strategy ("plain" / "heap")

        Returns:
            PathResult or NoPath
        """
        if safety_weight is None:
            safety_weight = self.config.safety_weight
        if algorithm is None:
            algorithm = self.config.algorithm

        distance_weight, safety_weight = RoutingConfig.weights_from_safety(safety_weight)
        return find_path(self.graph, source_id, target_id,
                         distance_weight, safety_weight, algorithm)

    def find_route_between_coordinates(self, start_coords: Tuple[float, float],
                                       end_coords: Tuple[float, float],
                                       safety_weight: Optional[float] = None,
                                       algorithm: Optional[str] = None) -> SearchOutcome:
        """
        Snap both coordinates to vertices and route between them.

        Args:
            start_coords: (lat, lon) of route start
            end_coords: (lat, lon) of route end
        """
        start_vertex = self.snap(*start_coords)
        end_vertex = self.snap(*end_coords)
        return self.find_route(start_vertex.id, end_vertex.id, safety_weight, algorithm)

    def find_multiple_routes(self, source_id: str, target_id: str,
                             algorithms: Optional[List[str]] = None,
                             safety_weight: Optional[float] = None) -> Dict[str, SearchOutcome]:
        """
        Find routes with several selector strategies for comparison.

        Args:
            source_id: Starting vertex id
            target_id: Destination vertex id
            algorithms: Strategy names to use (defaults to all)

        Returns:
            Dictionary mapping strategy names to outcomes
        """
        if algorithms is None:
            algorithms = [strategy.value for strategy in SelectorStrategy]

        routes = {}
        for algorithm in algorithms:
            strategy = SelectorStrategy.parse(algorithm)
            routes[strategy.value] = self.find_route(source_id, target_id, safety_weight, strategy.value)
        return routes
