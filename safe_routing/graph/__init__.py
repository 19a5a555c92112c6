"""
Street graph representation.
"""

from .street_graph import Edge, Vertex, StreetGraph

__all__ = ['Edge', 'Vertex', 'StreetGraph']
