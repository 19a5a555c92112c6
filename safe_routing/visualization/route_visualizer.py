"""
Route visualization tools for creating interactive HTML maps of risk-scored streets.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

import folium
import numpy as np

from ..algorithms.routing.dijkstra_engine import PathResult
from ..config.routing_config import RoutingConfig
from ..graph.street_graph import StreetGraph
from .danger_styles import (
    DANGER_COLOR_BUCKETS,
    MOST_DANGEROUS_COLOR,
    MOST_DANGEROUS_LABEL,
    danger_label,
    edge_style
)

logger = logging.getLogger(__name__)


class RouteVisualizer:
    """
    Create interactive HTML maps showing street risk and a computed route.
    """

    def __init__(self, config: Optional[RoutingConfig] = None):
        """
        Initialize route visualizer.

        Args:
            config: Routing configuration for styling options
        """
        self.config = config or RoutingConfig()

    def create_route_map(self, graph: StreetGraph,
                         route: Optional[PathResult] = None,
                         center_coords: Optional[Tuple[float, float]] = None,
                         show_network: bool = True) -> folium.Map:
        """
        Create a map of the street network colored by risk, with an optional route.

        Args:
            graph: Street graph to draw
            route: Route to highlight
            center_coords: Map center (lat, lon); defaults to the graph centroid
            show_network: Draw every street segment colored by risk

        Returns:
            Folium map object
        """
        if center_coords is None:
            center_coords = self._calculate_map_center(graph)

        m = folium.Map(
            location=center_coords,
            zoom_start=self.config.map_zoom_start,
            tiles=self.config.map_style
        )

        if show_network:
            self._add_network_layer(m, graph)

        if route is not None:
            self._add_route_layer(m, route)
            self._add_start_end_markers(m, route)

        self._add_legend(m)

        if len(graph) > 1:
            bounds = graph.get_bounds()
            m.fit_bounds([[bounds['lat_min'], bounds['lon_min']],
                          [bounds['lat_max'], bounds['lon_max']]])

        return m

    def _calculate_map_center(self, graph: StreetGraph) -> Tuple[float, float]:
        if not len(graph):
            return (-12.0776, -77.0862)  # San Miguel, Lima

        lats = [vertex.lat for vertex in graph.vertices.values()]
        lons = [vertex.lon for vertex in graph.vertices.values()]
        return (float(np.mean(lats)), float(np.mean(lons)))

    def _add_network_layer(self, m: folium.Map, graph: StreetGraph) -> None:
        """Draw every street segment with its risk color and stroke weight."""
        network_layer = folium.FeatureGroup(name='Street risk')

        for edge in graph.edges():
            source = graph.vertices[edge.source]
            target = graph.vertices[edge.target]
            style = edge_style(edge)
            folium.PolyLine(
                locations=[source.coordinates, target.coordinates],
                color=style['color'],
                weight=style['weight'],
                opacity=0.6,
                tooltip=f"{edge.length:.0f}m - risk {edge.risk_score:.1f} ({danger_label(edge.risk_score)})"
            ).add_to(network_layer)

        network_layer.add_to(m)
        logger.debug(f"Added {graph.edge_count} street segments")

    def _add_route_layer(self, m: folium.Map, route: PathResult) -> None:
        folium.PolyLine(
            locations=route.coordinates,
            color=self.config.route_color,
            weight=self.config.route_weight,
            opacity=0.9,
            popup=self._create_route_popup(route)
        ).add_to(m)

        logger.debug(f"Added {route.algorithm} route with {len(route.vertices)} points")

    def _create_route_popup(self, route: PathResult) -> str:
        """Create HTML popup content for a route."""
        summary = route.get_summary()

        return f"""
        <div style="width: 200px;">
            <h4>Dijkstra ({summary['algorithm']})</h4>
            <p><strong>Total cost:</strong> {summary['total_cost']:.2f}</p>
            <p><strong>Length:</strong> {summary['total_length_km']:.2f} km</p>
            <p><strong>Total risk:</strong> {summary['total_risk']:.2f}</p>
            <p><strong>Visited nodes:</strong> {summary['visited_nodes']}</p>
            <p><strong>Calc Time:</strong> {summary['execution_time_ms']:.2f}ms</p>
        </div>
        """

    def _add_start_end_markers(self, m: folium.Map, route: PathResult) -> None:
        """Add start and end point markers."""
        if not route.vertices:
            return

        start = route.vertices[0]
        end = route.vertices[-1]

        folium.Marker(
            location=start.coordinates,
            popup=f'Start: {start.id}',
            icon=folium.Icon(color='green', icon='play')
        ).add_to(m)

        folium.Marker(
            location=end.coordinates,
            popup=f'End: {end.id}',
            icon=folium.Icon(color='red', icon='stop')
        ).add_to(m)

    def _add_legend(self, m: folium.Map) -> None:
        m.get_root().html.add_child(folium.Element(self._create_legend_html()))

    def _create_legend_html(self) -> str:
        """Create HTML legend for the risk colors."""
        entries = [(color, label) for _, color, label in DANGER_COLOR_BUCKETS]
        entries.append((MOST_DANGEROUS_COLOR, MOST_DANGEROUS_LABEL))

        legend_items = []
        for color, label in entries:
            legend_items.append(f"""
                <div style="margin-bottom: 4px;">
                    <span style="background-color: {color};
                                 width: 20px; height: 4px;
                                 display: inline-block; margin-right: 8px;"></span>
                    {label}
                </div>
            """)

        return f"""
        <div style="position: fixed;
                   bottom: 50px; left: 50px; width: 180px; height: auto;
                   background-color: white; border:2px solid grey; z-index:9999;
                   font-size:14px; padding: 10px;">
            <h4 style="margin-top: 0;">Street Risk</h4>
            {''.join(legend_items)}
        </div>
        """

    def save_interactive_html(self, map_obj: folium.Map, filepath: str) -> None:
        """
        Save interactive map to HTML file.

        Args:
            map_obj: Folium map object
            filepath: Output file path
        """
        try:
            Path(filepath).parent.mkdir(parents=True, exist_ok=True)
            map_obj.save(filepath)
            logger.info(f"Interactive map saved to {filepath}")

        except Exception as e:
            logger.error(f"Failed to save map to {filepath}: {e}")
            raise
