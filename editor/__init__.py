"""
Wang Terrain Tools - Editor Package

Pygame-side terrain tools: terrain rectangle and force edge painting,
terrain clipboard actions and metatile terrain import.
"""
