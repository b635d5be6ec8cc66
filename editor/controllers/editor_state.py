"""
Wang Terrain Tools - Editor State

Holds the host-side selection the terrain tools read from: the open map and
current layer, the terrain set and color picked in the terrains panel, the
tiles selected in the tileset view, canvas position, status text and the
undo history.
"""

from typing import Optional

from editor.data.terrain_clipboard import TerrainClipboard
from terrain.core.tile_map import TileLayer, TileMap
from terrain.core.tileset import TerrainSet, Tile, Tileset

from .undo_manager import UndoManager


class EditorState:
    """Manages editor application state."""

    def __init__(self, tile_map: Optional[TileMap] = None):
        # Document
        self.tile_map: Optional[TileMap] = tile_map
        self.current_layer: Optional[TileLayer] = None
        if tile_map is not None and tile_map.tile_layers():
            self.current_layer = tile_map.tile_layers()[0]

        # Terrains panel selection; -1 means no terrain picked
        self.terrain_set: Optional[TerrainSet] = None
        self.color: int = -1

        # Tileset view selection
        self.current_tileset: Optional[Tileset] = None
        self.selected_tiles: list[Tile] = []

        # Canvas position and zoom
        self.canvas_offset_x: int = 0
        self.canvas_offset_y: int = 0
        self.canvas_scale: int = 1

        self.status_message: str = ""
        self.terrain_clipboard = TerrainClipboard()
        self.undo_manager = UndoManager()

    def select_terrain(self, terrain_set: Optional[TerrainSet], color: int = -1):
        """Pick a terrain in the terrains panel. A None set clears the color."""
        self.terrain_set = terrain_set
        self.color = color if terrain_set is not None else -1

    def select_tiles(self, tiles: list[Tile]):
        """Replace the tileset view selection."""
        self.selected_tiles = list(tiles)
        if self.selected_tiles:
            self.current_tileset = self.selected_tiles[0].tileset

    def set_status(self, message: str):
        self.status_message = message
