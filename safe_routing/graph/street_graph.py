"""
Street-intersection graph with directed, risk-scored segments.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

import networkx as nx

from ..exceptions import EmptyGraphError, VertexNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    """A directed street segment."""

    source: str
    target: str
    length: float       # meters
    risk_score: float   # 1 (safest) .. 5 (most dangerous)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> 'Edge':
        """
        Build an edge from a parsed data record.

        Accepts ``riskScore``, ``risk_score`` or the original dataset's
        ``peligrosidad`` key for the risk value.
        """
        if 'risk_score' in record:
            risk = record['risk_score']
        elif 'riskScore' in record:
            risk = record['riskScore']
        else:
            risk = record['peligrosidad']

        return cls(
            source=str(record['source']),
            target=str(record['target']),
            length=float(record['length']),
            risk_score=float(risk)
        )


@dataclass(frozen=True)
class Vertex:
    """A street intersection."""

    id: str
    lat: float
    lon: float
    edges: Tuple[Edge, ...] = field(default=(), compare=False, repr=False)

    @property
    def coordinates(self) -> Tuple[float, float]:
        """(lat, lon) pair."""
        return (self.lat, self.lon)


VertexInput = Union[Vertex, Mapping[str, Any]]
EdgeInput = Union[Edge, Mapping[str, Any]]


class StreetGraph:
    """
    Read-only directed graph of intersections and street segments.

    Edges whose source or target is not a known vertex are dropped while
    the graph is built. Nothing mutates the graph afterwards, so a single
    instance can be shared by concurrent queries.
    """

    def __init__(self, vertices: Iterable[VertexInput], edges: Iterable[EdgeInput]):
        """
        Build the vertex mapping and adjacency index.

        Args:
            vertices: Vertex objects or ``{id, lat, lon}`` records
            edges: Edge objects or ``{source, target, length, riskScore}`` records
        """
        coordinates: Dict[str, Tuple[float, float]] = {}
        duplicate_ids = 0

        for item in vertices:
            if isinstance(item, Vertex):
                vertex_id, lat, lon = item.id, item.lat, item.lon
            else:
                vertex_id = str(item['id'])
                lat, lon = float(item['lat']), float(item['lon'])

            if vertex_id in coordinates:
                duplicate_ids += 1
                logger.debug(f"Ignoring duplicate vertex id {vertex_id}")
                continue
            coordinates[vertex_id] = (lat, lon)

        adjacency: Dict[str, List[Edge]] = {vertex_id: [] for vertex_id in coordinates}
        dropped = 0

        for item in edges:
            edge = item if isinstance(item, Edge) else Edge.from_record(item)
            if edge.source not in adjacency or edge.target not in adjacency:
                dropped += 1
                logger.debug(f"Dropping edge {edge.source} -> {edge.target}: unknown endpoint")
                continue
            adjacency[edge.source].append(edge)

        self._adjacency: Dict[str, Tuple[Edge, ...]] = {
            vertex_id: tuple(out_edges) for vertex_id, out_edges in adjacency.items()
        }
        self._vertices: Dict[str, Vertex] = {
            vertex_id: Vertex(vertex_id, lat, lon, self._adjacency[vertex_id])
            for vertex_id, (lat, lon) in coordinates.items()
        }
        self._edge_count = sum(len(out_edges) for out_edges in self._adjacency.values())
        self.dropped_edge_count = dropped

        if duplicate_ids:
            logger.warning(f"Ignored {duplicate_ids} duplicate vertex ids")
        if dropped:
            logger.warning(f"Dropped {dropped} edges referencing unknown vertices")

        logger.info(f"Street graph built: {len(self._vertices)} vertices, {self._edge_count} edges")

    @classmethod
    def build(cls, vertices: Iterable[VertexInput], edges: Iterable[EdgeInput]) -> 'StreetGraph':
        """Alternate constructor mirroring the loader's two flat lists."""
        return cls(vertices, edges)

    @property
    def vertices(self) -> Mapping[str, Vertex]:
        return self._vertices

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    def __iter__(self) -> Iterator[str]:
        return iter(self._vertices)

    def get_vertex(self, vertex_id: str) -> Vertex:
        try:
            return self._vertices[vertex_id]
        except KeyError:
            raise VertexNotFoundError(vertex_id) from None

    def outgoing_edges(self, vertex_id: str) -> Tuple[Edge, ...]:
        """Outgoing edges of a vertex; empty for unknown or isolated vertices."""
        return self._adjacency.get(vertex_id, ())

    def edges(self) -> Iterator[Edge]:
        for out_edges in self._adjacency.values():
            yield from out_edges

    def edge_between(self, source_id: str, target_id: str) -> Optional[Edge]:
        """First edge from ``source_id`` to ``target_id``, or None."""
        for edge in self.outgoing_edges(source_id):
            if edge.target == target_id:
                return edge
        return None

    def nearest_vertex(self, lat: float, lon: float) -> Vertex:
        """
        Find the vertex closest to a coordinate.

        Uses planar Euclidean distance on raw lat/lon degrees, which is
        adequate at city scale. Ties go to the first vertex in iteration order.

        Raises:
            EmptyGraphError: If the graph has no vertices
        """
        nearest = None
        min_distance = math.inf

        for vertex in self._vertices.values():
            distance = math.sqrt((vertex.lat - lat) ** 2 + (vertex.lon - lon) ** 2)
            if distance < min_distance:
                min_distance = distance
                nearest = vertex

        if nearest is None:
            raise EmptyGraphError("No vertices in graph")
        return nearest

    def get_bounds(self) -> Dict[str, float]:
        """
        Get the geographic bounds of the graph.

        Returns:
            Dictionary with lat_min, lat_max, lon_min, lon_max
        """
        if not self._vertices:
            raise EmptyGraphError("No vertices in graph")

        lats = [vertex.lat for vertex in self._vertices.values()]
        lons = [vertex.lon for vertex in self._vertices.values()]

        return {
            'lat_min': min(lats),
            'lat_max': max(lats),
            'lon_min': min(lons),
            'lon_max': max(lons)
        }

    def to_networkx(self) -> nx.DiGraph:
        """
        Export to a NetworkX DiGraph.

        Node attributes follow the OSMnx convention (``y`` = lat, ``x`` = lon);
        edges carry ``length`` and ``risk_score``. Parallel edges collapse to
        the first one.
        """
        G = nx.DiGraph()
        for vertex in self._vertices.values():
            G.add_node(vertex.id, y=vertex.lat, x=vertex.lon)
        for edge in self.edges():
            if not G.has_edge(edge.source, edge.target):
                G.add_edge(edge.source, edge.target, length=edge.length, risk_score=edge.risk_score)
        return G
