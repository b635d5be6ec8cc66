"""
Wang Terrain Tools - Metatile Terrain Importer

Labels a metatileset (a tileset whose image is a rendering of a finer source
map) by reading the terrain labels of the source tiles under each metatile.

Each metatile covers a ratio-sized block of source cells. Eight of those
cells are sampled: the four corner cells and the middle cell of each side.
Every sample contributes one slot of the new WangID, read from the corner of
the source tile that sits on the matching metatile corner or edge midpoint.
"""

import logging
import math

from .tile_map import TileLayer, TileMap, find_bottom_tile_layer
from .tileset import TerrainSet, Tile, Tileset
from .transform import transform_wang_id
from .wang_id import EMPTY_WANG_ID, NUM_INDEXES, TerrainSetType, WangIndex

logger = logging.getLogger(__name__)

_T = WangIndex

# Destination slot -> slot read from the sampled source tile
SOURCE_SLOTS = {
    _T.TOP_LEFT: _T.TOP_LEFT,
    _T.TOP: _T.TOP_LEFT,
    _T.TOP_RIGHT: _T.TOP_RIGHT,
    _T.RIGHT: _T.TOP_RIGHT,
    _T.BOTTOM_RIGHT: _T.BOTTOM_RIGHT,
    _T.BOTTOM: _T.BOTTOM_LEFT,
    _T.BOTTOM_LEFT: _T.BOTTOM_LEFT,
    _T.LEFT: _T.TOP_LEFT,
}


class MalformedSourceMapError(ValueError):
    """Raised when a metatileset's source map cannot be imported from."""


def _far_offset(ratio: float) -> int:
    """Offset of the last source cell inside a metatile span."""
    offset = math.floor(ratio)
    if offset == ratio:
        offset -= 1
    return offset


def sampling_offsets(width_ratio: float, height_ratio: float) -> dict[int, tuple[int, int]]:
    """
    Source cell offsets, relative to a metatile's top-left source cell.

    Right and bottom offsets step back by one when the ratio is a whole
    number, so they stay on the metatile's own last row/column instead of
    the first row/column of the next metatile.

    Returns:
        Mapping of WangIndex to (dx, dy)
    """
    right = _far_offset(width_ratio)
    bottom = _far_offset(height_ratio)
    middle_x = math.floor(width_ratio / 2)
    middle_y = math.floor(height_ratio / 2)
    return {
        _T.TOP_LEFT: (0, 0),
        _T.TOP: (middle_x, 0),
        _T.TOP_RIGHT: (right, 0),
        _T.LEFT: (0, middle_y),
        _T.RIGHT: (right, middle_y),
        _T.BOTTOM_LEFT: (0, bottom),
        _T.BOTTOM: (middle_x, bottom),
        _T.BOTTOM_RIGHT: (right, bottom),
    }


def _metatile_wang_id(
    source_layer: TileLayer,
    source_set: TerrainSet,
    origin: tuple[int, int],
    offsets: dict[int, tuple[int, int]],
) -> tuple[int, ...] | None:
    """
    WangID for one metatile, or None if it cannot come from source_set.

    Metatiles whose sampled cells use more than one tileset are rejected.
    """
    source_tileset = source_set.tileset
    samples: dict[int, tuple[Tile, int]] = {}
    for index, (dx, dy) in offsets.items():
        x, y = origin[0] + dx, origin[1] + dy
        tile = source_layer.tile_at(x, y)
        if tile is None:
            continue
        if tile.tileset.uid != source_tileset.uid:
            return None
        samples[index] = (tile, source_layer.flags_at(x, y))

    values = [0] * NUM_INDEXES
    for index, (tile, flags) in samples.items():
        labels = transform_wang_id(source_set.wang_id(tile) or EMPTY_WANG_ID, flags)
        values[index] = labels[SOURCE_SLOTS[index]]
    return tuple(values)


def import_metatile_terrains(
    source_layer: TileLayer,
    destination: Tileset,
    ratio: tuple[float, float],
    source_tilesets: list[Tileset] | None = None,
) -> list[TerrainSet]:
    """
    Create terrain sets on destination mirroring those of the source tilesets.

    Nothing is attached to destination until every terrain set has been
    computed. A set is only created if at least one metatile received a
    non-empty WangID.

    Args:
        source_layer: Tile layer the metatileset was rendered from
        destination: The metatileset to label
        ratio: (width_ratio, height_ratio) of metatile size to source tile size
        source_tilesets: Tilesets to import from; defaults to those used by
                         source_layer

    Returns:
        The terrain sets added to destination, in creation order
    """
    width_ratio, height_ratio = ratio
    if width_ratio <= 0 or height_ratio <= 0:
        raise MalformedSourceMapError("Tile width and height must be above 0.")

    columns = destination.column_count()
    if columns <= 0:
        raise MalformedSourceMapError(
            f"Tileset {destination.name!r} has no tile columns to import into."
        )

    if source_tilesets is None:
        source_tilesets = source_layer.used_tilesets()
    offsets = sampling_offsets(width_ratio, height_ratio)

    pending: list[tuple[TerrainSet, list[tuple[Tile, tuple[int, ...]]]]] = []
    for source_tileset in source_tilesets:
        logger.info(
            "Importing %d terrain sets from tileset %r",
            len(source_tileset.terrain_sets), source_tileset.name,
        )
        for source_set in source_tileset.terrain_sets:
            contents = []
            rejected = 0
            for tile_index, tile in enumerate(destination.tiles):
                if tile is None:
                    continue
                origin = (
                    math.floor((tile_index % columns) * width_ratio),
                    math.floor((tile_index // columns) * height_ratio),
                )
                wang_id = _metatile_wang_id(source_layer, source_set, origin, offsets)
                if wang_id is None:
                    rejected += 1
                elif any(wang_id):
                    contents.append((tile, wang_id))
            if rejected:
                logger.debug(
                    "Skipped %d metatiles spanning several tilesets for %r",
                    rejected, source_set.name,
                )
            if contents:
                pending.append((source_set, contents))

    created = []
    for source_set, contents in pending:
        new_set = TerrainSet(destination, source_set.name, TerrainSetType.MIXED)
        new_set.colors = list(source_set.colors)
        for tile, wang_id in contents:
            new_set.set_wang_id(tile, wang_id)
        created.append(new_set)
    destination.terrain_sets.extend(created)
    return created


def import_from_source_map(source_map: TileMap, destination: Tileset) -> list[TerrainSet]:
    """
    Import terrains into a metatileset from the map it was rendered from.

    The bottom-most tile layer of the source map is sampled.

    Raises:
        MalformedSourceMapError: If tile sizes are not positive, or the map
                                 has no tile layer or uses no tilesets
    """
    if (
        source_map.tile_width <= 0
        or source_map.tile_height <= 0
        or destination.tile_width <= 0
        or destination.tile_height <= 0
    ):
        raise MalformedSourceMapError("Tile width and height must be above 0.")

    source_layer = find_bottom_tile_layer(source_map)
    if source_layer is None:
        raise MalformedSourceMapError(
            "The source map for this metatileset does not contain any tiles, "
            "so there are no terrains to copy."
        )

    source_tilesets = source_map.used_tilesets()
    if not source_tilesets:
        raise MalformedSourceMapError(
            "The source map for this metatileset does not use any tilesets, "
            "so there are no terrains to copy."
        )

    ratio = (
        destination.tile_width / source_map.tile_width,
        destination.tile_height / source_map.tile_height,
    )
    return import_metatile_terrains(source_layer, destination, ratio, source_tilesets)
