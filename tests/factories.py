"""Builders for test tilesets and screen positions."""

import itertools

from editor.core.constants import CANVAS_OFFSET_X, CANVAS_OFFSET_Y
from terrain.core.tileset import Tileset
from terrain.core.wang_id import TerrainSetType

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
MAP_TILE_SIZE = 16


def make_terrain_tileset(labels, set_type=TerrainSetType.MIXED, colors=("Grass",), name="terrain"):
    """
    Build a tileset with one terrain set.

    Args:
        labels: One WangID per tile; all-zero entries leave the tile unlabeled
        set_type: Type of the terrain set
        colors: Names of colors 1..n

    Returns:
        (tileset, terrain_set, tiles)
    """
    tileset = Tileset(name, MAP_TILE_SIZE, MAP_TILE_SIZE, columns=max(len(labels), 1))
    terrain_set = tileset.add_terrain_set(f"{name} terrains", set_type)
    for color_name in colors:
        terrain_set.add_color(color_name)
    tiles = []
    for wang_id in labels:
        tile = tileset.add_tile()
        terrain_set.set_wang_id(tile, wang_id)
        tiles.append(tile)
    return tileset, terrain_set, tiles


def corner_labels(color):
    """All 16 corner combinations of color and 0, as Corner-set WangIDs."""
    labels = []
    for tr, br, bl, tl in itertools.product((0, color), repeat=4):
        labels.append((0, tr, 0, br, 0, bl, 0, tl))
    return labels


def edge_labels(color):
    """All 16 edge combinations of color and 0, as Edge-set WangIDs."""
    labels = []
    for top, right, bottom, left in itertools.product((0, color), repeat=4):
        labels.append((top, 0, right, 0, bottom, 0, left, 0))
    return labels


def screen_pos(x, y, fx=0.5, fy=0.5):
    """Screen position inside map cell (x, y) at the default view."""
    return (
        CANVAS_OFFSET_X + int((x + fx) * MAP_TILE_SIZE),
        CANVAS_OFFSET_Y + int((y + fy) * MAP_TILE_SIZE),
    )
