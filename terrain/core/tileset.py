"""
Wang Terrain Tools - Tileset Model

Tiles, tilesets and the terrain sets that label them with WangIDs.
"""

import copy
import itertools

from .wang_id import EMPTY_WANG_ID, TerrainSetType, WangId, make_wang_id

_tileset_uids = itertools.count(1)


class Tile:
    """
    Opaque tile handle.

    Identity is the (tileset uid, tile id) pair rather than the Python object,
    so copies of a tile made for snapshots still compare equal.
    """

    def __init__(self, tileset: "Tileset", tile_id: int, probability: float = 1.0):
        if probability < 0:
            raise ValueError(f"Tile probability must be >= 0, got {probability}")
        self.tileset = tileset
        self.id = tile_id
        self.probability = probability

    @property
    def handle(self) -> tuple[int, int]:
        return (self.tileset.uid, self.id)

    def __eq__(self, other):
        if not isinstance(other, Tile):
            return NotImplemented
        return self.handle == other.handle

    def __hash__(self):
        return hash(self.handle)

    def __repr__(self):
        return f"Tile({self.tileset.name!r}, {self.id})"


class TerrainSet:
    """A named group of terrain colors and the tile labels that realize them."""

    def __init__(self, tileset: "Tileset", name: str, set_type: TerrainSetType):
        self.tileset = tileset
        self.name = name
        self.type = set_type
        # Index 0 is reserved for "no terrain"
        self.colors: list[str] = [""]
        self._wang_ids: dict[tuple[int, int], WangId] = {}
        # Bumped whenever labels change, so cached lookups can be rebuilt
        self.revision = 0

    @property
    def color_count(self) -> int:
        return len(self.colors) - 1

    @color_count.setter
    def color_count(self, count: int):
        if count < 0:
            raise ValueError(f"Color count must be >= 0, got {count}")
        del self.colors[count + 1:]
        while len(self.colors) < count + 1:
            self.colors.append(f"Terrain {len(self.colors)}")

    def add_color(self, name: str) -> int:
        """Append a terrain color and return its index."""
        self.colors.append(name)
        return len(self.colors) - 1

    def color_name(self, index: int) -> str:
        if 0 < index < len(self.colors):
            return self.colors[index]
        return ""

    def set_color_name(self, index: int, name: str):
        if not 0 < index < len(self.colors):
            raise ValueError(f"No terrain color {index} in terrain set {self.name!r}")
        self.colors[index] = name

    def wang_id(self, tile: Tile | None) -> WangId | None:
        """Labels of a tile in this set, or None if the tile is unlabeled."""
        if tile is None:
            return None
        return self._wang_ids.get(tile.handle)

    def set_wang_id(self, tile: Tile, wang_id) -> None:
        """
        Label a tile. An all-zero WangID removes the label.

        Raises:
            ValueError: If the tile belongs to another tileset or the WangID
                        is malformed
        """
        if tile.tileset.uid != self.tileset.uid:
            raise ValueError(
                f"{tile!r} does not belong to tileset {self.tileset.name!r}"
            )
        wang_id = make_wang_id(wang_id)
        self.revision += 1
        if wang_id == EMPTY_WANG_ID:
            self._wang_ids.pop(tile.handle, None)
        else:
            self._wang_ids[tile.handle] = wang_id

    def labeled_tiles(self) -> list[Tile]:
        """Tiles carrying a label, in tileset order."""
        return [
            tile for tile in self.tileset.tiles
            if tile is not None and tile.handle in self._wang_ids
        ]

    def __repr__(self):
        return f"TerrainSet({self.name!r}, {self.type.value})"


class Tileset:
    """An ordered collection of tiles plus the terrain sets defined on them."""

    def __init__(
        self,
        name: str,
        tile_width: int,
        tile_height: int,
        image_width: int = 0,
        margin: int = 0,
        spacing: int = 0,
        columns: int | None = None,
    ):
        self.uid = next(_tileset_uids)
        self.name = name
        self.tile_width = tile_width
        self.tile_height = tile_height
        self.image_width = image_width
        self.margin = margin
        self.spacing = spacing
        self.columns = columns
        # May contain None where the host collection has gaps
        self.tiles: list[Tile | None] = []
        self.terrain_sets: list[TerrainSet] = []
        # Map the tileset image was rendered from, for metatilesets
        self.source_map = None

    @property
    def tile_count(self) -> int:
        return len(self.tiles)

    def add_tile(self, probability: float = 1.0) -> Tile:
        tile = Tile(self, len(self.tiles), probability)
        self.tiles.append(tile)
        return tile

    def add_gap(self) -> None:
        """Reserve a tile id with no tile behind it."""
        self.tiles.append(None)

    def tile(self, tile_id: int) -> Tile | None:
        if 0 <= tile_id < len(self.tiles):
            return self.tiles[tile_id]
        return None

    def column_count(self) -> int:
        """Number of tile columns in the tileset image."""
        if self.columns:
            return self.columns
        if self.tile_width + self.spacing <= 0:
            return 0
        return (self.image_width - self.margin + self.spacing) // (
            self.tile_width + self.spacing
        )

    def add_terrain_set(self, name: str, set_type: TerrainSetType) -> TerrainSet:
        terrain_set = TerrainSet(self, name, set_type)
        self.terrain_sets.append(terrain_set)
        return terrain_set

    def snapshot(self) -> list[tuple]:
        """Copy of the terrain set state, for undo."""
        return [
            (terrain_set, terrain_set.name, terrain_set.type,
             list(terrain_set.colors), copy.copy(terrain_set._wang_ids))
            for terrain_set in self.terrain_sets
        ]

    def restore(self, snapshot: list[tuple]) -> None:
        # Restore in place so references to the terrain sets stay valid
        self.terrain_sets = []
        for terrain_set, name, set_type, colors, wang_ids in snapshot:
            terrain_set.name = name
            terrain_set.type = set_type
            terrain_set.colors = list(colors)
            terrain_set._wang_ids = copy.copy(wang_ids)
            terrain_set.revision += 1
            self.terrain_sets.append(terrain_set)

    def __repr__(self):
        return f"Tileset({self.name!r}, {self.tile_count} tiles)"
