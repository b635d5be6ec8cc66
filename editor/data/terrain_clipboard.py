"""
Wang Terrain Tools - Terrain Clipboard

Copies tile labels between tiles of a tileset, either exactly or as an
arrangement of a single terrain color that can be pasted as another color.
"""

from terrain.core.tileset import TerrainSet, Tile
from terrain.core.wang_id import EMPTY_WANG_ID, NUM_INDEXES, WangId, compared_indexes


def _pairs(copied: list, tiles: list[Tile]) -> list[tuple]:
    """
    Pair copied entries with destination tiles.

    A single copied entry goes to every tile; otherwise entries are paired
    in order until either list runs out.
    """
    if len(copied) == 1:
        return [(copied[0], tile) for tile in tiles]
    return list(zip(copied, tiles))


class TerrainClipboard:
    """
    Stores copied terrain labels.

    Tiles are handled as a flat, ordered list. To keep a 2D arrangement,
    paste into a selection of the same shape as the one copied.
    """

    def __init__(self):
        self.wang_ids: list[WangId] = []
        # One slot mask per tile: True where the copied color was found
        self.arrangements: list[tuple[bool, ...]] = []

    def copy_terrains(self, terrain_set: TerrainSet, tiles: list[Tile]) -> int:
        """
        Copy the labels of tiles exactly.

        Returns:
            Number of tiles copied
        """
        self.wang_ids = [terrain_set.wang_id(tile) or EMPTY_WANG_ID for tile in tiles]
        return len(self.wang_ids)

    def paste_terrains(self, terrain_set: TerrainSet, tiles: list[Tile]) -> int:
        """
        Paste copied labels onto tiles.

        Only the slots the terrain set's type uses are written; the others
        keep their current labels.

        Returns:
            Number of tiles written
        """
        relevant = compared_indexes(terrain_set.type)
        pairs = _pairs(self.wang_ids, tiles)
        for copied, tile in pairs:
            labels = list(terrain_set.wang_id(tile) or EMPTY_WANG_ID)
            for index in relevant:
                labels[index] = copied[index]
            terrain_set.set_wang_id(tile, labels)
        return len(pairs)

    def copy_arrangement(self, terrain_set: TerrainSet, color: int, tiles: list[Tile]) -> bool:
        """
        Copy where color appears on each tile.

        Color 0 copies the unlabeled slots.

        Returns:
            True if color was found on at least one slot
        """
        self.arrangements = []
        found = False
        for tile in tiles:
            labels = terrain_set.wang_id(tile) or EMPTY_WANG_ID
            mask = tuple(labels[index] == color for index in range(NUM_INDEXES))
            found = found or any(mask)
            self.arrangements.append(mask)
        return found

    def paste_arrangement(self, terrain_set: TerrainSet, color: int, tiles: list[Tile]) -> int:
        """
        Write color into the copied slots of each tile.

        Slots outside the copied arrangement keep their labels, so pasting
        several arrangements onto one tile combines them.

        Returns:
            Number of tiles written
        """
        relevant = compared_indexes(terrain_set.type)
        pairs = _pairs(self.arrangements, tiles)
        for mask, tile in pairs:
            labels = list(terrain_set.wang_id(tile) or EMPTY_WANG_ID)
            for index in relevant:
                if mask[index]:
                    labels[index] = color
            terrain_set.set_wang_id(tile, labels)
        return len(pairs)

    def clear(self):
        self.wang_ids = []
        self.arrangements = []
