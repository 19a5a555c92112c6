import pytest

from safe_routing.algorithms import DijkstraRouter, NoPath
from safe_routing.config import RoutingConfig
from safe_routing.exceptions import EmptyGraphError, SnapDistanceError
from safe_routing.graph import StreetGraph
from safe_routing.main import main


def test_config_weights_and_validation():
    config = RoutingConfig(safety_weight=0.7)
    assert config.distance_weight == pytest.approx(0.3)
    assert config.weights() == pytest.approx((0.3, 0.7))
    assert RoutingConfig.create_shortest_distance_config().weights() == (1.0, 0.0)
    assert RoutingConfig.create_safety_first_config().safety_weight == 0.8

    with pytest.raises(ValueError):
        RoutingConfig(safety_weight=1.5).validate()
    with pytest.raises(ValueError):
        RoutingConfig(algorithm='dfs').validate()


def test_router_uses_config_weights(diamond_graph):
    router = DijkstraRouter(diamond_graph, RoutingConfig(safety_weight=0.0))
    assert router.find_route('A', 'D').vertex_ids == ['A', 'C', 'D']

    router = DijkstraRouter(diamond_graph, RoutingConfig(safety_weight=1.0, algorithm='plain'))
    result = router.find_route('A', 'D')
    assert result.vertex_ids == ['A', 'B', 'D']
    assert result.algorithm == 'plain'


def test_router_overrides(diamond_graph):
    router = DijkstraRouter(diamond_graph)
    result = router.find_route('A', 'D', safety_weight=1.0, algorithm='plain')
    assert result.total_cost == 2
    assert isinstance(router.find_route('A', 'E'), NoPath)


def test_route_between_coordinates_snaps_endpoints(sample_graph):
    router = DijkstraRouter(sample_graph)
    result = router.find_route_between_coordinates((-12.07701, -77.08999), (-12.07902, -77.08703))
    assert result.vertex_ids[0] == 'SM-00'
    assert result.vertex_ids[-1] == 'SM-23'


def test_snap_distance_limit(sample_graph):
    router = DijkstraRouter(sample_graph, RoutingConfig(max_snap_distance=0.001))
    assert router.snap(-12.0771, -77.0899).id == 'SM-00'
    with pytest.raises(SnapDistanceError):
        router.snap(-12.5, -77.5)


def test_snap_on_empty_graph():
    router = DijkstraRouter(StreetGraph([], []))
    with pytest.raises(EmptyGraphError):
        router.snap(0, 0)


def test_find_multiple_routes(sample_graph):
    router = DijkstraRouter(sample_graph, RoutingConfig(safety_weight=0.5))
    routes = router.find_multiple_routes('SM-00', 'SM-23')
    assert set(routes) == {'plain', 'heap'}
    assert routes['plain'].total_cost == pytest.approx(routes['heap'].total_cost)

    only_heap = router.find_multiple_routes('SM-00', 'SM-23', algorithms=['heap'])
    assert list(only_heap) == ['heap']


@pytest.mark.parametrize("safety_weight", [-0.1, 1.5, float('nan')])
def test_router_rejects_out_of_range_safety_override(diamond_graph, safety_weight):
    router = DijkstraRouter(diamond_graph)
    with pytest.raises(ValueError, match="between 0 and 1"):
        router.find_route('A', 'D', safety_weight=safety_weight)
    with pytest.raises(ValueError):
        router.find_multiple_routes('A', 'D', safety_weight=safety_weight)


def test_cli_rejects_out_of_range_safety_weight(capsys):
    assert main(["--benchmark", "10", "--safety-weight", "2.0"]) == 1
    assert "between 0 and 1" in capsys.readouterr().out
