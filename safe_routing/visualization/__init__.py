"""
Visualization helpers for risk-scored street maps.
"""

from .danger_styles import danger_color, danger_label, danger_stroke_weight, edge_style
from .route_visualizer import RouteVisualizer

__all__ = [
    'danger_color',
    'danger_label',
    'danger_stroke_weight',
    'edge_style',
    'RouteVisualizer'
]
