import folium
import pytest

from safe_routing.algorithms import find_path
from safe_routing.graph import Edge
from safe_routing.visualization import (
    RouteVisualizer,
    danger_color,
    danger_label,
    danger_stroke_weight,
    edge_style
)


@pytest.mark.parametrize("risk, color", [
    (1.0, '#4CAF50'),
    (1.5, '#4CAF50'),
    (1.51, '#8BC34A'),
    (2.5, '#8BC34A'),
    (3.0, '#FFEB3B'),
    (3.5, '#FFEB3B'),
    (4.5, '#FF9800'),
    (4.51, '#F44336'),
    (5.0, '#F44336'),
])
def test_danger_color_buckets(risk, color):
    assert danger_color(risk) == color


@pytest.mark.parametrize("risk, weight", [
    (1.0, 5),
    (2.0, 5),
    (2.01, 6),
    (4.0, 6),
    (4.01, 7),
    (5.0, 7),
])
def test_danger_stroke_weight_steps(risk, weight):
    assert danger_stroke_weight(risk) == weight


def test_edge_style_and_label():
    assert edge_style(Edge('a', 'b', 10, 4.8)) == {'color': '#F44336', 'weight': 7}
    assert danger_label(1.2) == 'Very safe'
    assert danger_label(4.9) == 'Very dangerous'


def test_route_map_written_to_html(sample_graph, tmp_path):
    route = find_path(sample_graph, 'SM-00', 'SM-23', 0.5, 0.5)
    visualizer = RouteVisualizer()

    m = visualizer.create_route_map(sample_graph, route)
    assert isinstance(m, folium.Map)

    output = tmp_path / "maps" / "route.html"
    visualizer.save_interactive_html(m, str(output))

    html = output.read_text(encoding='utf-8')
    assert "Street Risk" in html
    assert "Start: SM-00" in html


def test_network_map_without_route(diamond_graph):
    m = RouteVisualizer().create_route_map(diamond_graph, show_network=False)
    assert isinstance(m, folium.Map)


def test_legend_rendered_once_in_html(diamond_graph, tmp_path):
    output = tmp_path / "network.html"
    visualizer = RouteVisualizer()
    visualizer.save_interactive_html(visualizer.create_route_map(diamond_graph), str(output))

    html = output.read_text(encoding='utf-8')
    assert html.count("Street Risk") == 1
    assert "Very dangerous" in html
