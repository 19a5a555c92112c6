"""
Safety-Aware Routing

Shortest paths over a fixed street-intersection graph where every segment
carries a length and a 1-5 risk score. Route cost blends the two:

    cost = length * distance_weight + risk_score * safety_weight

## Quick Start

```python
from safe_routing import DijkstraRouter, RoutingConfig, load_street_graph

graph = load_street_graph()  # bundled San Miguel sample
router = DijkstraRouter(graph, RoutingConfig(safety_weight=0.7, algorithm='heap'))

result = router.find_route_between_coordinates(
    start_coords=(-12.0770, -77.0900),
    end_coords=(-12.0790, -77.0870)
)
if result:
    print(result.get_summary())
```

## Main Components

- **StreetGraph**: Vertices, directed edges, nearest-vertex snapping
- **find_path**: Dijkstra search with a pluggable priority selector
- **LinearScanSelector / BinaryHeapSelector**: O(V^2) vs O((V+E) log V) selection
- **DijkstraRouter**: Config-bound router for coordinate queries
- **SimulatedNewsAdvisor**: Heuristic weight suggestions
- **RouteVisualizer**: Interactive risk maps

## Architecture

- `graph/`: Graph representation
- `algorithms/`: Selectors, cost model, path engine
- `data/`: Graph loading and synthetic generation
- `advisory/`: Weight advisors
- `visualization/`: Risk styles and map generation
- `config/`: Configuration management
"""

from .algorithms import (
    DijkstraRouter,
    PathResult,
    NoPath,
    SelectorStrategy,
    find_path,
    compare_strategies,
    edge_cost
)
from .config import RoutingConfig
from .graph import Edge, Vertex, StreetGraph
from .data import load_street_graph, generate_random_graph
from .advisory import create_advisor, normalize_weights
from .visualization import RouteVisualizer, danger_color, danger_stroke_weight
from .exceptions import (
    RoutingError,
    EmptyGraphError,
    VertexNotFoundError,
    SnapDistanceError,
    PathReconstructionError,
    GraphDataError
)

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    'DijkstraRouter',
    'RoutingConfig',
    'find_path',
    'compare_strategies',
    'PathResult',
    'NoPath',
    'SelectorStrategy',
    'edge_cost',

    # Graph
    'Edge',
    'Vertex',
    'StreetGraph',

    # Utilities
    'load_street_graph',
    'generate_random_graph',
    'create_advisor',
    'normalize_weights',
    'RouteVisualizer',
    'danger_color',
    'danger_stroke_weight',

    # Errors
    'RoutingError',
    'EmptyGraphError',
    'VertexNotFoundError',
    'SnapDistanceError',
    'PathReconstructionError',
    'GraphDataError',

    '__version__'
]
