import math
import random

import networkx as nx
import pytest

from safe_routing.algorithms import NoPath, PathResult, SearchState, compare_strategies, find_path
from safe_routing.algorithms.routing.dijkstra_engine import _reconstruct_path
from safe_routing.algorithms.routing.cost_model import edge_cost
from safe_routing.data import generate_random_graph
from safe_routing.exceptions import PathReconstructionError, VertexNotFoundError
from safe_routing.graph import Edge, StreetGraph, Vertex

STRATEGIES = ['plain', 'heap']


def nx_cost(graph, source, target, distance_weight, safety_weight):
    return nx.dijkstra_path_length(
        graph.to_networkx(), source, target,
        weight=lambda u, v, d: d['length'] * distance_weight + d['risk_score'] * safety_weight
    )


def test_edge_cost():
    edge = Edge('a', 'b', 120.0, 3.0)
    assert edge_cost(edge, 1.0, 0.0) == 120.0
    assert edge_cost(edge, 0.0, 1.0) == 3.0
    assert edge_cost(edge, 0.25, 0.75) == pytest.approx(32.25)
    # weights are not normalized
    assert edge_cost(edge, 2.0, 2.0) == 246.0


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_distance_only_prefers_short_dangerous_route(diamond_graph, strategy):
    result = find_path(diamond_graph, 'A', 'D', 1.0, 0.0, strategy)

    assert isinstance(result, PathResult)
    assert result.vertex_ids == ['A', 'C', 'D']
    assert result.total_cost == 100
    assert result.total_length == 100
    assert result.total_risk == 10
    assert result.algorithm == strategy


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_safety_only_prefers_long_safe_route(diamond_graph, strategy):
    result = find_path(diamond_graph, 'A', 'D', 0.0, 1.0, strategy)

    assert result.vertex_ids == ['A', 'B', 'D']
    assert result.total_cost == 2
    assert result.total_length == 200
    assert result.total_risk == 2


@pytest.mark.parametrize("strategy", STRATEGIES)
@pytest.mark.parametrize("weights", [(1, 0), (0, 1), (0.5, 0.5), (0, 0)])
def test_disconnected_target_returns_no_path(diamond_graph, strategy, weights):
    result = find_path(diamond_graph, 'A', 'E', *weights, strategy)

    assert isinstance(result, NoPath)
    assert not result
    assert result.found is False
    assert result.source_id == 'A' and result.target_id == 'E'
    assert result.visited_nodes == 4


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_source_equals_target(diamond_graph, strategy):
    for vertex_id in diamond_graph:
        result = find_path(diamond_graph, vertex_id, vertex_id, 0.3, 0.7, strategy)
        assert result.vertex_ids == [vertex_id]
        assert result.total_length == 0
        assert result.total_risk == 0
        assert result.total_cost == 0
        assert result.visited_nodes == 1


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_unknown_endpoints_raise_before_search(diamond_graph, strategy):
    with pytest.raises(VertexNotFoundError, match="Source 'X'"):
        find_path(diamond_graph, 'X', 'D', 1, 0, strategy)
    with pytest.raises(LookupError, match="Target 'Y'"):
        find_path(diamond_graph, 'A', 'Y', 1, 0, strategy)


def test_unknown_strategy_raises(diamond_graph):
    with pytest.raises(ValueError):
        find_path(diamond_graph, 'A', 'D', 1, 0, 'astar')


def test_early_exit_leaves_far_vertices_unvisited():
    vertices = [Vertex(v, 0, i) for i, v in enumerate('STUVW')]
    edges = [
        Edge('S', 'T', 1, 1),
        Edge('S', 'U', 10, 1),
        Edge('U', 'V', 10, 1),
        Edge('V', 'W', 10, 1),
    ]
    graph = StreetGraph(vertices, edges)

    for strategy in STRATEGIES:
        result = find_path(graph, 'S', 'T', 1, 0, strategy)
        assert result.vertex_ids == ['S', 'T']
        assert result.visited_nodes == 2


def test_dropped_edges_do_not_affect_paths():
    vertices = [Vertex('A', 0, 0), Vertex('B', 0, 1)]
    edges = [
        Edge('A', 'B', 100, 1),
        Edge('A', 'ghost', 1, 1),
        Edge('ghost', 'B', 1, 1),
    ]
    graph = StreetGraph(vertices, edges)

    result = find_path(graph, 'A', 'B', 1, 0)
    assert result.vertex_ids == ['A', 'B']
    assert result.total_cost == 100


def test_parallel_edges_report_the_edge_actually_used():
    vertices = [Vertex('A', 0, 0), Vertex('B', 0, 1)]
    edges = [Edge('A', 'B', 100, 5), Edge('A', 'B', 100, 1)]
    graph = StreetGraph(vertices, edges)

    for strategy in STRATEGIES:
        result = find_path(graph, 'A', 'B', 0.5, 0.5, strategy)
        assert result.total_cost == pytest.approx(50.5)
        assert result.total_risk == 1
        assert result.segment_risks == (1,)


def test_multiple_optimal_paths_share_cost():
    vertices = [Vertex(v, 0, 0) for v in 'ABCD']
    edges = [
        Edge('A', 'B', 10, 2), Edge('B', 'D', 10, 2),
        Edge('A', 'C', 10, 2), Edge('C', 'D', 10, 2),
    ]
    graph = StreetGraph(vertices, edges)

    results = compare_strategies(graph, 'A', 'D', 0.5, 0.5)
    assert set(results) == {'plain', 'heap'}
    assert results['plain'].total_cost == results['heap'].total_cost == pytest.approx(12.0)
    for result in results.values():
        assert result.vertex_ids[0] == 'A' and result.vertex_ids[-1] == 'D'
        assert len(result.vertex_ids) == 3


def test_totals_are_summed_per_edge(sample_graph):
    result = find_path(sample_graph, 'SM-00', 'SM-23', 0.4, 0.6)
    ids = result.vertex_ids

    length = sum(sample_graph.edge_between(a, b).length for a, b in zip(ids, ids[1:]))
    risk = sum(sample_graph.edge_between(a, b).risk_score for a, b in zip(ids, ids[1:]))
    assert result.total_length == length
    assert result.total_risk == risk
    assert result.total_cost == pytest.approx(0.4 * length + 0.6 * risk)


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_costs_match_networkx(sample_graph, strategy):
    for safety_weight in (0.0, 0.3, 0.9, 1.0):
        distance_weight = 1 - safety_weight
        result = find_path(sample_graph, 'SM-03', 'SM-20', distance_weight, safety_weight, strategy)
        expected = nx_cost(sample_graph, 'SM-03', 'SM-20', distance_weight, safety_weight)
        assert result.total_cost == pytest.approx(expected, rel=1e-9)


def test_strategies_agree_on_random_graph():
    graph = generate_random_graph(500, edges_per_vertex=3, seed=1234)
    rng = random.Random(99)
    ids = list(graph)

    for _ in range(50):
        source_id, target_id = rng.choice(ids), rng.choice(ids)
        safety_weight = rng.random()
        plain = find_path(graph, source_id, target_id, 1 - safety_weight, safety_weight, 'plain')
        heap = find_path(graph, source_id, target_id, 1 - safety_weight, safety_weight, 'heap')

        assert type(plain) is type(heap)
        if plain:
            assert math.isclose(plain.total_cost, heap.total_cost, rel_tol=1e-9, abs_tol=1e-12)


def test_heap_agrees_with_networkx_on_random_graph():
    graph = generate_random_graph(200, edges_per_vertex=4, seed=5)
    G = graph.to_networkx()
    rng = random.Random(3)
    ids = list(graph)

    for _ in range(20):
        source_id, target_id = rng.choice(ids), rng.choice(ids)
        result = find_path(graph, source_id, target_id, 0.5, 0.5, 'heap')
        if nx.has_path(G, source_id, target_id):
            assert result.total_cost == pytest.approx(nx_cost(graph, source_id, target_id, 0.5, 0.5), rel=1e-9)
        else:
            assert isinstance(result, NoPath)


def test_higher_safety_weight_never_raises_risk():
    graph = generate_random_graph(150, edges_per_vertex=3, seed=21)
    rng = random.Random(8)
    ids = list(graph)

    for _ in range(10):
        source_id, target_id = rng.choice(ids), rng.choice(ids)
        previous_risk = math.inf
        for safety_weight in (0.0, 1.0, 5.0, 20.0, 100.0):
            result = find_path(graph, source_id, target_id, 1.0, safety_weight)
            if not result:
                break
            assert result.total_risk <= previous_risk + 1e-9
            previous_risk = result.total_risk


def test_summary_fields(diamond_graph):
    summary = find_path(diamond_graph, 'A', 'D', 1, 0, 'plain').get_summary()
    assert summary['algorithm'] == 'plain'
    assert summary['node_count'] == 3
    assert summary['total_length_km'] == 0.1
    assert summary['average_risk'] == 5
    assert summary['max_risk'] == 5
    assert summary['visited_nodes'] >= 3


def test_reconstruction_detects_broken_chain():
    state = SearchState.initialize('A')
    state.costs['C'] = 5.0
    state.predecessors['C'] = 'B'  # B has no predecessor

    with pytest.raises(PathReconstructionError):
        _reconstruct_path(state, 'A', 'C', max_length=10)


def test_reconstruction_detects_cycle():
    state = SearchState.initialize('A')
    state.predecessors['B'] = 'C'
    state.predecessors['C'] = 'B'

    with pytest.raises(PathReconstructionError):
        _reconstruct_path(state, 'A', 'B', max_length=3)


def test_search_state_relax_is_strict():
    state = SearchState.initialize('A')
    assert state.cost_of('B') == math.inf
    assert state.relax('B', 4.0, 'A') is True
    assert state.relax('B', 4.0, 'X') is False
    assert state.predecessor_of('B') == 'A'
