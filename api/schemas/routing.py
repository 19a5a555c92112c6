"""
Pydantic schemas for the safety-aware routing API.
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field, validator


class LocationRequest(BaseModel):
    """Request model for a single location."""
    latitude: float = Field(..., ge=-90, le=90, description="Latitude coordinate")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude coordinate")


class RouteRequest(BaseModel):
    """Request model for route calculation."""
    start: Optional[LocationRequest] = Field(default=None, description="Starting location (snapped to nearest intersection)")
    destination: Optional[LocationRequest] = Field(default=None, description="Destination location (snapped to nearest intersection)")
    start_id: Optional[str] = Field(default=None, description="Starting intersection id (overrides start)")
    destination_id: Optional[str] = Field(default=None, description="Destination intersection id (overrides destination)")
    safety_weight: float = Field(default=0.5, ge=0.0, le=1.0, description="Weight for risk avoidance (0-1); distance weight is 1 - safety_weight")
    algorithm: str = Field(default="heap", description="Selector strategy: 'plain' (O(V^2)) or 'heap' (O((V+E) log V))")

    @validator('algorithm')
    def validate_algorithm(cls, v):
        """Ensure the strategy is one of the supported names."""
        v = v.strip().lower()
        if v not in ('plain', 'heap'):
            raise ValueError("algorithm must be 'plain' or 'heap'")
        return v


class VertexResponse(BaseModel):
    """A graph intersection."""
    id: str = Field(..., description="Intersection id")
    latitude: float = Field(..., description="Latitude coordinate")
    longitude: float = Field(..., description="Longitude coordinate")


class RouteStats(BaseModel):
    """Statistics about a calculated route."""
    total_cost: float = Field(..., description="Weighted route cost")
    total_length_m: float = Field(..., description="Total route length in meters")
    total_risk: float = Field(..., description="Sum of segment risk scores")
    average_risk: float = Field(..., description="Mean segment risk score")
    node_count: int = Field(..., description="Intersections on the route")
    visited_nodes: int = Field(..., description="Intersections finalized during the search")
    algorithm: str = Field(..., description="Selector strategy used")
    execution_time_ms: float = Field(..., description="Search wall time in milliseconds")


class RouteResponse(BaseModel):
    """Response model for route calculation."""
    success: bool = Field(..., description="Whether a route was found")
    message: str = Field(..., description="Status message")
    path: List[str] = Field(default_factory=list, description="Intersection ids from start to destination")
    route_geojson: Optional[Dict[str, Any]] = Field(default=None, description="Route as GeoJSON FeatureCollection")
    route_stats: Optional[RouteStats] = Field(default=None, description="Route statistics")
    visited_nodes: Optional[int] = Field(default=None, description="Intersections finalized during the search")


class CompareResponse(BaseModel):
    """Both selector strategies run on the same query."""
    success: bool = Field(..., description="Whether both strategies found a route")
    message: str = Field(..., description="Status message")
    costs_match: bool = Field(..., description="Whether both strategies report the same total cost")
    results: Dict[str, RouteResponse] = Field(default_factory=dict, description="Result per strategy")


class AdviceRequest(BaseModel):
    """Request model for weight advice."""
    safety_weight: float = Field(default=0.5, ge=0.0, le=1.0, description="Current safety weight")
    districts: Optional[List[str]] = Field(default=None, description="Districts to analyze (defaults to all known districts)")


class AdviceResponse(BaseModel):
    """Normalized weights suggested by the advisor."""
    distance_weight: float = Field(..., ge=0.0, le=1.0, description="Suggested distance weight")
    safety_weight: float = Field(..., ge=0.0, le=1.0, description="Suggested safety weight")
    reason: str = Field(..., description="Why the advisor suggests these weights")


class AlgorithmInfo(BaseModel):
    """Description of a selector strategy."""
    name: str = Field(..., description="Strategy name used in requests")
    label: str = Field(..., description="Human-readable name")
    complexity: str = Field(..., description="Time complexity")
    description: str = Field(..., description="When to use it")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    graph_loaded: bool = Field(..., description="Whether the street graph is loaded")
    vertex_count: int = Field(..., description="Number of intersections loaded")
    edge_count: int = Field(..., description="Number of street segments loaded")


class ErrorResponse(BaseModel):
    """Error response model."""
    success: bool = Field(False, description="Always false for error responses")
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Detailed error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
