"""
Wang Terrain Tools - Editor Data

Data structures for clipboard functionality.
"""

from .terrain_clipboard import TerrainClipboard

__all__ = ["TerrainClipboard"]
