"""
Graph data loader for flat node/edge JSON files.
"""

import json
import logging
import math
import os
from typing import Any, Dict, List, Optional, Tuple

from ..exceptions import GraphDataError
from ..graph.street_graph import StreetGraph

logger = logging.getLogger(__name__)

DEFAULT_GRAPH_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'sample_graph.json')

MIN_RISK_SCORE = 1.0
MAX_RISK_SCORE = 5.0


def load_graph_data(data_path: Optional[str] = None) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
    """
    Load the raw vertex and edge records of a street graph.

    The file holds ``{"nodes": [{id, lat, lon}], "edges": [{source, target,
    length, peligrosidad}]}``; ``riskScore`` / ``risk_score`` are accepted
    in place of ``peligrosidad``.

    Args:
        data_path: Path to the JSON file (defaults to the bundled sample graph)

    Returns:
        (vertex_records, edge_records)

    Raises:
        FileNotFoundError: If the file does not exist
        GraphDataError: If the file is not valid graph JSON, or an edge has a
            non-positive length or a risk score outside [1, 5]
    """
    if data_path is None:
        data_path = DEFAULT_GRAPH_PATH

    if not os.path.exists(data_path):
        raise FileNotFoundError(f"Graph data file not found: {data_path}")

    logger.info(f"Loading graph data from: {data_path}")

    try:
        with open(data_path, 'r', encoding='utf-8') as f:
            graph_data = json.load(f)
    except json.JSONDecodeError as e:
        raise GraphDataError(f"Invalid JSON format in graph data file: {e}") from e

    if not isinstance(graph_data, dict):
        raise GraphDataError("Graph data must be a JSON object with 'nodes' and 'edges' keys")

    nodes = graph_data.get('nodes', graph_data.get('vertices'))
    edges = graph_data.get('edges')
    if not isinstance(nodes, list) or not isinstance(edges, list):
        raise GraphDataError("Graph data must contain 'nodes' and 'edges' lists")

    vertex_records = []
    for index, node in enumerate(nodes):
        try:
            vertex_records.append({
                'id': str(node['id']),
                'lat': float(node['lat']),
                'lon': float(node['lon'])
            })
        except (KeyError, TypeError, ValueError) as e:
            raise GraphDataError(f"Invalid node record at index {index}: {e}") from e

    edge_records = []
    for index, edge in enumerate(edges):
        try:
            risk = next(edge[key] for key in ('risk_score', 'riskScore', 'peligrosidad') if key in edge)
            record = {
                'source': str(edge['source']),
                'target': str(edge['target']),
                'length': float(edge['length']),
                'risk_score': float(risk)
            }
        except StopIteration:
            raise GraphDataError(f"Edge record at index {index} has no risk score") from None
        except (KeyError, TypeError, ValueError) as e:
            raise GraphDataError(f"Invalid edge record at index {index}: {e}") from e

        # lengths must be finite and positive, risk scores within bounds
        if not (math.isfinite(record['length']) and record['length'] > 0):
            raise GraphDataError(f"Edge record at index {index} has invalid length {record['length']}")
        if not MIN_RISK_SCORE <= record['risk_score'] <= MAX_RISK_SCORE:
            raise GraphDataError(
                f"Edge record at index {index} has risk score {record['risk_score']} "
                f"outside [{MIN_RISK_SCORE}, {MAX_RISK_SCORE}]"
            )
        edge_records.append(record)

    logger.info(f"Loaded {len(vertex_records)} nodes and {len(edge_records)} edges")
    return vertex_records, edge_records


def load_street_graph(data_path: Optional[str] = None) -> StreetGraph:
    """Load a graph data file and build the street graph from it."""
    vertex_records, edge_records = load_graph_data(data_path)
    return StreetGraph.build(vertex_records, edge_records)
