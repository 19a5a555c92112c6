"""
Configuration management for safety-aware routing parameters.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

VALID_ALGORITHMS = ('plain', 'heap')


@dataclass
class RoutingConfig:
    """Configuration parameters for safety-aware routing."""

    # Weight Balancing
    safety_weight: float = 0.5  # importance of risk avoidance (0-1); distance weight is the complement

    # Algorithm Behavior
    algorithm: str = 'heap'  # 'plain' (linear scan) or 'heap' (binary heap)
    max_snap_distance: Optional[float] = None  # degrees - reject clicks farther than this from any vertex

    # Data
    graph_data_path: Optional[str] = None  # None uses the bundled sample graph

    # Advisory
    advisor_method: str = 'simulated_news'
    district_names: List[str] = field(default_factory=lambda: [
        'San Miguel', 'Magdalena del Mar', 'Pueblo Libre', 'Jesus Maria',
        'Lima Centro', 'La Victoria', 'Callao', 'San Juan de Lurigancho'
    ])

    # Visualization
    map_style: str = 'OpenStreetMap'
    map_zoom_start: int = 15
    route_color: str = '#1E88E5'
    route_weight: int = 7

    @property
    def distance_weight(self) -> float:
        return 1.0 - self.safety_weight

    def weights(self) -> Tuple[float, float]:
        """(distance_weight, safety_weight) pair."""
        return self.weights_from_safety(self.safety_weight)

    @staticmethod
    def weights_from_safety(safety_weight: float) -> Tuple[float, float]:
        """
        Derive (distance_weight, safety_weight) from a single safety slider value.

        Raises:
            ValueError: If safety_weight is outside [0, 1]
        """
        if not 0 <= safety_weight <= 1:
            raise ValueError(f"safety_weight must be between 0 and 1, got {safety_weight}")
        return 1.0 - safety_weight, safety_weight

    def validate(self) -> None:
        """Validate configuration parameters."""
        self.weights_from_safety(self.safety_weight)
        if self.algorithm not in VALID_ALGORITHMS:
            raise ValueError(f"algorithm must be one of {VALID_ALGORITHMS}")
        if self.max_snap_distance is not None and self.max_snap_distance <= 0:
            raise ValueError("max_snap_distance must be positive")

    @classmethod
    def create_balanced_config(cls) -> 'RoutingConfig':
        """Create balanced configuration (default)."""
        return cls()

    @classmethod
    def create_safety_first_config(cls) -> 'RoutingConfig':
        """Create configuration that prioritizes safety over distance."""
        return cls(safety_weight=0.8)

    @classmethod
    def create_distance_first_config(cls) -> 'RoutingConfig':
        """Create configuration that prioritizes distance over safety."""
        return cls(safety_weight=0.2)

    @classmethod
    def create_shortest_distance_config(cls) -> 'RoutingConfig':
        """Ignore risk entirely - plain shortest path by length."""
        return cls(safety_weight=0.0)
