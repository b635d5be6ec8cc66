"""
Wang Terrain Tools - Terrain Library

Host-independent terrain (Wang tile) model and autotiling algorithms.
"""
