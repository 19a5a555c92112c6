"""
Random street-like graphs for benchmarks and tests.
"""

from typing import Optional

import numpy as np

from ..graph.street_graph import Edge, StreetGraph, Vertex


def generate_random_graph(n_vertices: int = 500, edges_per_vertex: int = 3,
                          seed: Optional[int] = None,
                          center: tuple = (-12.0776, -77.0862),
                          spread: float = 0.02,
                          bidirectional: bool = True) -> StreetGraph:
    """
    Generate a random graph with street-like attributes.

    Vertices are scattered around ``center``; each vertex links to its
    nearest neighbours so the result resembles a local street grid.
    Lengths come from planar distance scaled to meters, risk scores are
    uniform in [1, 5].

    Args:
        n_vertices: Number of intersections
        edges_per_vertex: Nearest neighbours linked from every vertex
        seed: Random seed for reproducible graphs
        center: (lat, lon) around which vertices are placed
        spread: Half-width of the placement box in degrees
        bidirectional: Also add the reverse of every generated edge

    Returns:
        StreetGraph instance
    """
    rng = np.random.default_rng(seed)

    lats = center[0] + rng.uniform(-spread, spread, n_vertices)
    lons = center[1] + rng.uniform(-spread, spread, n_vertices)
    ids = [f"n{i}" for i in range(n_vertices)]
    vertices = [Vertex(ids[i], float(lats[i]), float(lons[i])) for i in range(n_vertices)]

    coords = np.column_stack([lats, lons])
    k = min(edges_per_vertex, n_vertices - 1)
    edges = []
    linked = set()  # (source index, target index) pairs already present

    for i in range(n_vertices):
        distances = np.sqrt(((coords - coords[i]) ** 2).sum(axis=1))
        neighbours = np.argsort(distances)[1:k + 1]
        for j in (int(n) for n in neighbours):
            if (i, j) in linked:
                continue
            # ~111 km per degree; floor keeps every length positive
            length = max(1.0, float(distances[j]) * 111000.0)
            risk = float(rng.uniform(1.0, 5.0))
            edges.append(Edge(ids[i], ids[j], length, risk))
            linked.add((i, j))
            if bidirectional and (j, i) not in linked:
                edges.append(Edge(ids[j], ids[i], length, risk))
                linked.add((j, i))

    return StreetGraph.build(vertices, edges)
