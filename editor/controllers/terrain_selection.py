"""
Wang Terrain Tools - Terrain Selection

Resolves which terrain set and color a terrain tool paints with, and keeps
the candidate index for that pair cached between strokes.
"""

import logging
from typing import Optional

from terrain.core.candidates import CandidateIndex, build_candidate_index
from terrain.core.tile_map import TileLayer
from terrain.core.tileset import TerrainSet, Tile
from terrain.core.wang_id import TerrainSetType, first_color

logger = logging.getLogger(__name__)


def terrain_from_tile(tile: Optional[Tile]) -> tuple[Optional[TerrainSet], int]:
    """
    Guess a terrain from a tile's labels.

    Uses the first terrain set of the tile's tileset in which the tile
    carries a label, and the first non-zero label clockwise from Top. The
    set's type is not considered, so a label on a slot the set does not
    use can still be picked.

    Returns:
        (terrain_set, color), or (None, -1) if the tile has no labels
    """
    if tile is None:
        return (None, -1)
    for terrain_set in tile.tileset.terrain_sets:
        color = first_color(terrain_set.wang_id(tile))
        if color > 0:
            return (terrain_set, color)
    return (None, -1)


class TerrainSelection:
    """
    The terrain a tool is currently painting with.

    Call refresh() at the start of each interactive operation to pick up
    changes made in the terrains panel or the tileset view.
    """

    def __init__(self):
        self.terrain_set: Optional[TerrainSet] = None
        self.color: int = -1
        self._index: Optional[CandidateIndex] = None
        self._revision = -1

    @property
    def index(self) -> Optional[CandidateIndex]:
        """Candidate index for the current (terrain set, color) pair."""
        return self._index

    @property
    def effective_type(self) -> Optional[TerrainSetType]:
        if self._index is None:
            return None
        return self._index.effective_type

    @property
    def has_edges(self) -> bool:
        """Whether the current color can be painted as edges."""
        return self._index is not None and self._index.effective_type != TerrainSetType.CORNER

    def is_valid(self, minimum_color: int = 1) -> bool:
        return self.terrain_set is not None and self.color >= minimum_color

    def refresh(self, state, use_selected_tiles: bool = True) -> bool:
        """
        Re-fetch the terrain from the editor state.

        The terrains panel selection wins. If it has no terrain set or no
        positive color, the first selected tile is used instead (when
        use_selected_tiles is set).

        Returns:
            True if the terrain set or color changed
        """
        terrain_set = state.terrain_set
        color = state.color if terrain_set is not None else -1

        if use_selected_tiles and (terrain_set is None or color <= 0):
            first_tile = state.selected_tiles[0] if state.selected_tiles else None
            tile_set, tile_color = terrain_from_tile(first_tile)
            if tile_set is not None:
                terrain_set, color = tile_set, tile_color

        return self.set_terrain(terrain_set, color)

    def set_terrain(self, terrain_set: Optional[TerrainSet], color: int) -> bool:
        """Select a terrain directly, rebuilding the candidate index if it changed."""
        if terrain_set is None:
            color = -1
        changed = terrain_set is not self.terrain_set or color != self.color
        self.terrain_set = terrain_set
        self.color = color
        stale = terrain_set is not None and terrain_set.revision != self._revision
        if changed or stale:
            self._rebuild_index()
        return changed

    def clear(self):
        self.terrain_set = None
        self.color = -1
        self._index = None
        self._revision = -1

    def describe(self) -> str:
        """Status suffix naming the terrain in use, or "" if there is none."""
        if self.terrain_set is None or self.color <= 0:
            return ""
        return (
            f' [Using Terrain "{self.terrain_set.color_name(self.color)}"'
            f' from Terrain Set "{self.terrain_set.name}"]'
        )

    def _rebuild_index(self):
        if self.terrain_set is None or self.color < 0:
            self._index = None
            return
        self._revision = self.terrain_set.revision
        logger.debug(
            "Rebuilding candidate index for color %d of %r",
            self.color, self.terrain_set.name,
        )
        self._index = build_candidate_index(self.terrain_set, self.color)


def cell_status(layer: Optional[TileLayer], position: tuple[int, int]) -> str:
    """Position and tile id under the cursor, e.g. '3, 4 [12]' or '3, 4 [empty]'."""
    x, y = position
    tile = layer.tile_at(x, y) if layer is not None else None
    return f"{x}, {y} [{tile.id if tile is not None else 'empty'}]"
