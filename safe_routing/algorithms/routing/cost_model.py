"""
Edge cost model blending segment length with risk.
"""

from ...graph.street_graph import Edge


def edge_cost(edge: Edge, distance_weight: float, safety_weight: float) -> float:
    """
    Scalar traversal cost of a street segment.

    Weights are not normalized here; callers that work with a single
    safety slider pass ``1 - safety_weight`` as the distance weight.
    Shortest-path correctness requires both weights to be non-negative.

    Args:
        edge: Street segment
        distance_weight: Multiplier for length in meters
        safety_weight: Multiplier for the 1-5 risk score

    Returns:
        length * distance_weight + risk_score * safety_weight
    """
    return edge.length * distance_weight + edge.risk_score * safety_weight
