import pytest

from safe_routing.graph import StreetGraph


@pytest.fixture
def diamond_graph():
    """A->B->D is long but safe, A->C->D short but dangerous; E is isolated."""
    vertices = [
        {'id': 'A', 'lat': 0.0, 'lon': 0.0},
        {'id': 'B', 'lat': 1.0, 'lon': 0.0},
        {'id': 'C', 'lat': 0.0, 'lon': 1.0},
        {'id': 'D', 'lat': 1.0, 'lon': 1.0},
        {'id': 'E', 'lat': 5.0, 'lon': 5.0},
    ]
    edges = [
        {'source': 'A', 'target': 'B', 'length': 100, 'riskScore': 1},
        {'source': 'B', 'target': 'D', 'length': 100, 'riskScore': 1},
        {'source': 'A', 'target': 'C', 'length': 50, 'riskScore': 5},
        {'source': 'C', 'target': 'D', 'length': 50, 'riskScore': 5},
    ]
    return StreetGraph.build(vertices, edges)


@pytest.fixture
def sample_graph():
    from safe_routing.data import load_street_graph
    return load_street_graph()
