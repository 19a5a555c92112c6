"""
Configuration management for safety-aware routing.
"""

from .routing_config import RoutingConfig, VALID_ALGORITHMS

__all__ = ['RoutingConfig', 'VALID_ALGORITHMS']
