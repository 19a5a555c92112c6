"""
Risk-score to map-style lookups for rendering street segments.
"""

from typing import Dict, Union

from ..graph.street_graph import Edge

# (upper bound inclusive, color, label)
DANGER_COLOR_BUCKETS = (
    (1.5, '#4CAF50', 'Very safe'),
    (2.5, '#8BC34A', 'Safe'),
    (3.5, '#FFEB3B', 'Moderate'),
    (4.5, '#FF9800', 'Dangerous'),
)
MOST_DANGEROUS_COLOR = '#F44336'
MOST_DANGEROUS_LABEL = 'Very dangerous'


def danger_color(risk_score: float) -> str:
    """Hex color for a risk score: green (<= 1.5) through red (> 4.5)."""
    for upper_bound, color, _ in DANGER_COLOR_BUCKETS:
        if risk_score <= upper_bound:
            return color
    return MOST_DANGEROUS_COLOR


def danger_label(risk_score: float) -> str:
    for upper_bound, _, label in DANGER_COLOR_BUCKETS:
        if risk_score <= upper_bound:
            return label
    return MOST_DANGEROUS_LABEL


def danger_stroke_weight(risk_score: float) -> int:
    """Line width for a risk score; widens at 2 and 4."""
    if risk_score <= 2:
        return 5
    if risk_score <= 4:
        return 6
    return 7


def edge_style(edge: Edge) -> Dict[str, Union[str, int]]:
    """Color and stroke weight for one street segment."""
    return {
        'color': danger_color(edge.risk_score),
        'weight': danger_stroke_weight(edge.risk_score)
    }
