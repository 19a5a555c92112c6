"""
FastAPI routes for safety-aware routing endpoints.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status
import logging

from api.schemas.routing import (
    AdviceRequest,
    AdviceResponse,
    AlgorithmInfo,
    CompareResponse,
    HealthResponse,
    LocationRequest,
    RouteRequest,
    RouteResponse,
    VertexResponse
)
from api.services.routing_service import ServiceUnavailableError, routing_service
from safe_routing.exceptions import EmptyGraphError, SnapDistanceError, VertexNotFoundError

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api/routing", tags=["routing"])


@router.get("/health", response_model=HealthResponse, summary="Health Check")
async def health_check():
    """
    Check the health status of the routing service.

    Returns:
        HealthResponse: Service health information
    """
    return routing_service.get_health_status()


@router.get("/algorithms", response_model=List[AlgorithmInfo], summary="Selector Strategies")
async def list_algorithms():
    """
    List the available Dijkstra variants with their time complexity.
    """
    return routing_service.get_algorithms()


@router.post("/nearest", response_model=VertexResponse, summary="Snap to Nearest Intersection")
async def nearest_intersection(location: LocationRequest):
    """
    Snap a map click to the nearest street intersection.

    Args:
        location: Clicked coordinate

    Returns:
        VertexResponse: The intersection used as route endpoint
    """
    try:
        return routing_service.find_nearest(location)
    except (ServiceUnavailableError, EmptyGraphError) as e:
        logger.warning(f"Nearest lookup unavailable: {e}")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    except SnapDistanceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


# Plain ``def`` handlers run in the threadpool; a search never blocks the event loop.
@router.post("/calculate", response_model=RouteResponse, summary="Calculate Safety-Aware Route")
def calculate_route(request: RouteRequest):
    """
    Calculate a safety-aware route between two locations.

    Endpoints are given as coordinates (snapped to the nearest intersection)
    or as intersection ids. ``safety_weight`` sets the balance between
    distance and risk; the distance weight is ``1 - safety_weight``.

    Args:
        request: RouteRequest containing endpoints and preferences

    Returns:
        RouteResponse: Route data in GeoJSON format with statistics

    Example:
        ```json
        {
            "start": {"latitude": -12.0770, "longitude": -77.0900},
            "destination": {"latitude": -12.0790, "longitude": -77.0870},
            "safety_weight": 0.7,
            "algorithm": "heap"
        }
        ```
    """
    try:
        # An unreachable destination is a 200 with success=false
        return routing_service.calculate_route(request)

    except VertexNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except EmptyGraphError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    except ValueError as e:
        logger.warning(f"Route calculation validation error: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/compare", response_model=CompareResponse, summary="Compare Selector Strategies")
def compare_routes(request: RouteRequest):
    """
    Run the same query with the linear-scan and binary-heap variants.

    Both report the same total cost; the number of visited intersections
    and, when several optimal routes exist, the chosen route may differ.
    """
    try:
        return routing_service.compare_routes(request)

    except VertexNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except EmptyGraphError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    except ValueError as e:
        logger.warning(f"Route comparison validation error: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/advise", response_model=AdviceResponse, summary="Suggest Weights")
async def advise_weights(request: AdviceRequest):
    """
    Suggest distance/safety weights from (simulated) public-safety news.

    The suggestion is heuristic; the returned pair always sums to 1.0.
    """
    return routing_service.advise_weights(request)


@router.get("/", summary="API Information")
async def get_api_info():
    """
    Get information about the Safety-Aware Routing API.

    Returns:
        dict: API information and available endpoints
    """
    return {
        "api": "Safety-Aware Routing API",
        "version": "1.0.0",
        "description": "Dijkstra routing that balances street length against street risk",
        "endpoints": {
            "POST /api/routing/calculate": "Calculate a route with custom weight and strategy",
            "POST /api/routing/compare": "Run both Dijkstra variants on the same query",
            "POST /api/routing/nearest": "Snap a coordinate to the nearest intersection",
            "POST /api/routing/advise": "Suggest weights from simulated news analysis",
            "GET /api/routing/algorithms": "Available selector strategies",
            "GET /api/routing/health": "Check service health status",
            "GET /api/routing/": "This information endpoint"
        }
    }
