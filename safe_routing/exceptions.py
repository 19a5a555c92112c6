"""
Exception hierarchy for safety-aware routing.

A search that cannot reach its target is not an error: it returns a
``NoPath`` result instead of raising.
"""


class RoutingError(Exception):
    """Base class for all routing errors."""


class EmptyGraphError(RoutingError, ValueError):
    """Raised when a lookup needs at least one vertex and the graph has none."""


class VertexNotFoundError(RoutingError, LookupError):
    """Raised when a requested vertex id is not part of the graph."""

    def __init__(self, vertex_id: str, role: str = "vertex"):
        self.vertex_id = vertex_id
        self.role = role
        super().__init__(f"{role.capitalize()} '{vertex_id}' not found in graph")


class SnapDistanceError(RoutingError, ValueError):
    """Raised when a coordinate is farther from every vertex than allowed."""


class PathReconstructionError(RoutingError, RuntimeError):
    """Raised when predecessor links do not lead back to the source."""


class GraphDataError(RoutingError, ValueError):
    """Raised when a graph data file cannot be interpreted."""
