"""
Wang Terrain Tools - Editor Algorithms

Pointer geometry for the terrain tools.
"""

from .pointer_geometry import edge_index_at, edge_index_for_move, sample_index_at

__all__ = ["edge_index_at", "edge_index_for_move", "sample_index_at"]
