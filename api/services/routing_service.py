"""
Service layer for safety-aware routing API.
"""

import logging
import math
from typing import Any, Dict, List, Optional, Tuple

import geojson

from safe_routing.advisory import create_advisor, normalize_weights
from safe_routing.algorithms import DijkstraRouter, NoPath, PathResult, SelectorFactory
from safe_routing.config.routing_config import RoutingConfig
from safe_routing.data.graph_loader import load_street_graph
from safe_routing.exceptions import GraphDataError
from safe_routing.graph.street_graph import StreetGraph, Vertex
from safe_routing.visualization import danger_color, danger_stroke_weight
from api.schemas.routing import (
    AdviceRequest,
    AdviceResponse,
    AlgorithmInfo,
    CompareResponse,
    HealthResponse,
    LocationRequest,
    RouteRequest,
    RouteResponse,
    RouteStats,
    VertexResponse
)

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


class ServiceUnavailableError(RuntimeError):
    """Raised when the service has no graph to route on."""


class SafeRoutingService:
    """
    Service class that provides safety-aware routing functionality for the API.

    The graph is loaded once; every request gets its own search state, so
    requests can run concurrently in the server threadpool.
    """

    def __init__(self, config: Optional[RoutingConfig] = None,
                 graph: Optional[StreetGraph] = None):
        """
        Initialize the routing service.

        Args:
            config: Routing configuration (graph path, advisor, defaults)
            graph: Pre-built graph; skips loading from ``config.graph_data_path``
        """
        self.config = config or RoutingConfig()
        self.graph: Optional[StreetGraph] = graph
        self.router: Optional[DijkstraRouter] = None
        self.advisor = create_advisor(config=self.config)
        self.is_initialized = False

        self._initialize()

    def _initialize(self) -> None:
        """Load the street graph and create the router."""
        try:
            logger.info("Initializing safety-aware routing service...")

            if self.graph is None:
                self.graph = load_street_graph(self.config.graph_data_path)

            self.router = DijkstraRouter(self.graph, self.config)
            self.is_initialized = len(self.graph) > 0
            logger.info(f"Service initialized with {len(self.graph)} intersections "
                        f"and {self.graph.edge_count} segments")

        except (OSError, GraphDataError, ValueError) as e:
            logger.error(f"Failed to initialize routing service: {e}")
            self.is_initialized = False

    def get_health_status(self) -> HealthResponse:
        """Get the health status of the routing service."""
        return HealthResponse(
            status="healthy" if self.is_initialized else "degraded",
            version=API_VERSION,
            graph_loaded=self.is_initialized,
            vertex_count=len(self.graph) if self.graph else 0,
            edge_count=self.graph.edge_count if self.graph else 0
        )

    def get_algorithms(self) -> List[AlgorithmInfo]:
        """Describe the available selector strategies."""
        return [
            AlgorithmInfo(name=name, **info)
            for name, info in SelectorFactory.get_available_strategies().items()
        ]

    def find_nearest(self, location: LocationRequest) -> VertexResponse:
        """
        Snap a coordinate to the nearest intersection.

        Raises:
            ServiceUnavailableError: If no graph is loaded
            SnapDistanceError: If the coordinate is too far from the network
        """
        self._ensure_ready()
        vertex = self.router.snap(location.latitude, location.longitude)
        return self._vertex_to_response(vertex)

    def calculate_route(self, request: RouteRequest) -> RouteResponse:
        """
        Calculate a safety-aware route between two points.

        Args:
            request: Route calculation request

        Returns:
            RouteResponse with route GeoJSON and statistics

        Raises:
            ValueError: If start or destination is missing
            VertexNotFoundError: If a requested intersection id does not exist
        """
        if not self.is_initialized:
            return RouteResponse(
                success=False,
                message="Service not properly initialized - street graph not available"
            )

        start_id, end_id = self._resolve_endpoints(request)
        logger.info(f"Calculating {request.algorithm} route from {start_id} to {end_id} "
                    f"(safety: {request.safety_weight:.2f})")

        result = self.router.find_route(start_id, end_id, request.safety_weight, request.algorithm)
        return self._convert_to_response(result)

    def compare_routes(self, request: RouteRequest) -> CompareResponse:
        """Run the request with both selector strategies."""
        if not self.is_initialized:
            return CompareResponse(
                success=False,
                message="Service not properly initialized - street graph not available",
                costs_match=False
            )

        start_id, end_id = self._resolve_endpoints(request)
        routes = self.router.find_multiple_routes(start_id, end_id, safety_weight=request.safety_weight)

        results = {name: self._convert_to_response(result) for name, result in routes.items()}
        found = [result for result in routes.values() if result]
        success = len(found) == len(routes)

        costs_match = success and all(
            math.isclose(result.total_cost, found[0].total_cost, rel_tol=1e-9, abs_tol=1e-9)
            for result in found
        )
        if success and not costs_match:
            logger.error(f"Strategies disagree on cost from {start_id} to {end_id}: "
                         f"{[result.total_cost for result in found]}")

        return CompareResponse(
            success=success,
            message="Routes calculated with all strategies" if success else "No route found",
            costs_match=costs_match,
            results=results
        )

    def advise_weights(self, request: AdviceRequest) -> AdviceResponse:
        """Ask the advisor for new weights and normalize them."""
        distance_weight, safety_weight = RoutingConfig.weights_from_safety(request.safety_weight)
        context = {'districts': request.districts} if request.districts else None

        proposal = self.advisor.propose_weights(distance_weight, safety_weight, context)
        normalized = normalize_weights(proposal)

        return AdviceResponse(
            distance_weight=round(normalized.distance_weight, 4),
            safety_weight=round(normalized.safety_weight, 4),
            reason=normalized.reason
        )

    def _ensure_ready(self) -> None:
        if not self.is_initialized:
            raise ServiceUnavailableError("Street graph not available")

    def _resolve_endpoints(self, request: RouteRequest) -> Tuple[str, str]:
        """Turn ids or coordinates into intersection ids."""
        return (
            self._resolve_endpoint(request.start_id, request.start, "start"),
            self._resolve_endpoint(request.destination_id, request.destination, "destination")
        )

    def _resolve_endpoint(self, vertex_id: Optional[str],
                          location: Optional[LocationRequest], role: str) -> str:
        if vertex_id is not None:
            return vertex_id
        if location is not None:
            return self.router.snap(location.latitude, location.longitude).id
        raise ValueError(f"Either {role} or {role}_id must be provided")

    def _convert_to_response(self, result) -> RouteResponse:
        """
        Convert a search outcome to API response format.

        Args:
            result: PathResult or NoPath

        Returns:
            Formatted RouteResponse
        """
        if isinstance(result, NoPath):
            return RouteResponse(
                success=False,
                message=f"No route found from {result.source_id} to {result.target_id}",
                visited_nodes=result.visited_nodes
            )

        return RouteResponse(
            success=True,
            message="Route calculated successfully",
            path=result.vertex_ids,
            route_geojson=self._route_to_geojson(result),
            route_stats=self._calculate_route_stats(result),
            visited_nodes=result.visited_nodes
        )

    def _route_to_geojson(self, result: PathResult) -> Dict[str, Any]:
        """
        Convert a route to GeoJSON.

        The FeatureCollection holds the full route LineString, one styled
        LineString per segment (risk color and stroke weight) and start/end
        Points. Coordinates are (lon, lat).

        Args:
            result: Successful search result

        Returns:
            GeoJSON FeatureCollection
        """
        geojson_coords = [[vertex.lon, vertex.lat] for vertex in result.vertices]

        features = [
            geojson.Feature(
                geometry=geojson.LineString(geojson_coords),
                properties={
                    "type": "route",
                    "algorithm": result.algorithm,
                    "total_cost": result.total_cost,
                    "total_length_m": result.total_length,
                    "total_risk": result.total_risk,
                    "node_count": len(result.vertices)
                }
            )
        ]

        for index, risk in enumerate(result.segment_risks):
            features.append(geojson.Feature(
                geometry=geojson.LineString([geojson_coords[index], geojson_coords[index + 1]]),
                properties={
                    "type": "segment",
                    "source": result.vertices[index].id,
                    "target": result.vertices[index + 1].id,
                    "risk_score": risk,
                    "color": danger_color(risk),
                    "stroke_weight": danger_stroke_weight(risk)
                }
            ))

        features.append(geojson.Feature(
            geometry=geojson.Point(geojson_coords[0]),
            properties={"type": "start", "name": "Start Point", "id": result.vertices[0].id}
        ))
        features.append(geojson.Feature(
            geometry=geojson.Point(geojson_coords[-1]),
            properties={"type": "end", "name": "End Point", "id": result.vertices[-1].id}
        ))

        return geojson.FeatureCollection(features)

    def _calculate_route_stats(self, result: PathResult) -> RouteStats:
        summary = result.get_summary()
        return RouteStats(
            total_cost=round(result.total_cost, 4),
            total_length_m=round(result.total_length, 1),
            total_risk=round(result.total_risk, 2),
            average_risk=summary['average_risk'],
            node_count=summary['node_count'],
            visited_nodes=result.visited_nodes,
            algorithm=result.algorithm,
            execution_time_ms=summary['execution_time_ms']
        )

    @staticmethod
    def _vertex_to_response(vertex: Vertex) -> VertexResponse:
        return VertexResponse(id=vertex.id, latitude=vertex.lat, longitude=vertex.lon)


# Global service instance
routing_service = SafeRoutingService()
