"""
Delaunay triangulation.

Provides a brute-force reference implementation that builds the
counterclockwise rotation system consumed by the planar graph layer.
"""

from .naive import Triangulation, delaunay_triangulation, is_delaunay, sort_around

__all__ = ["Triangulation", "delaunay_triangulation", "is_delaunay", "sort_around"]
