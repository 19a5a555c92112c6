#!/usr/bin/env python3
"""
Safety-Aware Routing - Command Line Interface

Loads a street graph, snaps two coordinates to intersections and compares
both Dijkstra variants on the route between them.
"""

import argparse
import logging
import random
import sys
import time

from .algorithms import DijkstraRouter, SelectorStrategy, compare_strategies
from .config import RoutingConfig
from .data import generate_random_graph, load_street_graph
from .exceptions import RoutingError
from .visualization import RouteVisualizer

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Safety-aware Dijkstra routing demo")
    parser.add_argument("--graph", default=None, help="Path to graph JSON (defaults to bundled sample)")
    parser.add_argument("--start", type=float, nargs=2, metavar=("LAT", "LON"),
                        default=(-12.0770, -77.0900), help="Start coordinate")
    parser.add_argument("--end", type=float, nargs=2, metavar=("LAT", "LON"),
                        default=(-12.0790, -77.0870), help="End coordinate")
    parser.add_argument("--safety-weight", type=float, default=0.5, help="Safety weight (0-1)")
    parser.add_argument("--map", default=None, help="Write an interactive HTML map to this path")
    parser.add_argument("--benchmark", type=int, default=0, metavar="N",
                        help="Instead of routing, time both strategies on an N-vertex synthetic graph")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for --benchmark")
    parser.add_argument("--log-level", default="warning", choices=["debug", "info", "warning", "error"],
                        help="Log level")
    return parser.parse_args(argv)


def run_benchmark(n_vertices: int, seed: int, safety_weight: float, pairs: int = 20) -> int:
    print(f"Benchmarking on a {n_vertices}-vertex synthetic graph ({pairs} random pairs)")
    graph = generate_random_graph(n_vertices, seed=seed)
    distance_weight, safety_weight = RoutingConfig.weights_from_safety(safety_weight)

    rng = random.Random(seed)
    ids = list(graph)
    totals = {strategy.value: 0.0 for strategy in SelectorStrategy}
    visited = {strategy.value: 0 for strategy in SelectorStrategy}

    for _ in range(pairs):
        source_id, target_id = rng.choice(ids), rng.choice(ids)
        for name, result in compare_strategies(graph, source_id, target_id,
                                               distance_weight, safety_weight).items():
            totals[name] += result.execution_time_ms
            visited[name] += result.visited_nodes

    for name in totals:
        print(f"   {name:>5}: {totals[name] / pairs:8.2f} ms avg, {visited[name] / pairs:8.1f} vertices visited avg")
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = RoutingConfig(safety_weight=args.safety_weight, graph_data_path=args.graph)
    try:
        config.validate()
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        return 1

    if args.benchmark:
        return run_benchmark(args.benchmark, args.seed, config.safety_weight)

    try:
        graph = load_street_graph(config.graph_data_path)
        router = DijkstraRouter(graph, config)

        start_vertex = router.snap(*args.start)
        end_vertex = router.snap(*args.end)
    except (OSError, ValueError, RoutingError) as e:
        print(f"Error preparing route: {e}")
        return 1

    print(f"Graph: {len(graph)} intersections, {graph.edge_count} segments")
    print(f"Start: {start_vertex.id} {start_vertex.coordinates}")
    print(f"End:   {end_vertex.id} {end_vertex.coordinates}")
    print(f"Weights: distance {config.distance_weight:.2f}, safety {config.safety_weight:.2f}")

    started = time.perf_counter()
    routes = router.find_multiple_routes(start_vertex.id, end_vertex.id)
    logger.info(f"Both strategies finished in {(time.perf_counter() - started) * 1000:.1f}ms")

    for name, result in routes.items():
        if not result:
            print(f"\n{name}: no path found ({result.visited_nodes} vertices visited)")
            continue
        summary = result.get_summary()
        print(f"\n{name}:")
        print(f"   Path: {' -> '.join(result.vertex_ids)}")
        print(f"   Total cost: {summary['total_cost']:.2f}")
        print(f"   Length: {summary['total_length_km']:.2f} km")
        print(f"   Total risk: {summary['total_risk']:.2f}")
        print(f"   Visited nodes: {summary['visited_nodes']}")
        print(f"   Time: {summary['execution_time_ms']:.2f} ms")

    if args.map:
        route = routes.get(config.algorithm)
        visualizer = RouteVisualizer(config)
        visualizer.save_interactive_html(
            visualizer.create_route_map(graph, route if route else None),
            args.map
        )
        print(f"\nMap written to {args.map}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
