"""Unit tests for the Import Metatile Terrains action tool."""

import pytest

from editor.tools.import_metatile_terrains_tool import ImportMetatileTerrainsTool
from terrain.core.tile_map import TileMap
from terrain.core.tileset import Tileset
from tests.factories import make_terrain_tileset


@pytest.fixture
def metatileset():
    tileset = Tileset("meta", 16, 16, columns=2)
    for _ in range(4):
        tileset.add_tile()
    return tileset


@pytest.fixture
def source_map():
    _, _, tiles = make_terrain_tileset([(1,) * 8])
    tile_map = TileMap(4, 4, 8, 8)
    layer = tile_map.new_tile_layer("source")
    with layer.edit() as edit:
        for y in range(4):
            for x in range(4):
                edit.set_tile(x, y, tiles[0])
    return tile_map


@pytest.fixture
def tool():
    return ImportMetatileTerrainsTool()


def test_import(tool, context, metatileset, source_map):
    metatileset.source_map = source_map
    context.state.select_tiles([metatileset.tiles[0]])

    result = tool.execute(context)
    assert result.message == "Imported 1 terrain sets: terrain terrains"
    [terrain_set] = metatileset.terrain_sets
    assert terrain_set.colors == ["", "Grass"]
    for tile in metatileset.tiles:
        assert terrain_set.wang_id(tile) == (1,) * 8


def test_import_is_undoable(tool, context, metatileset, source_map):
    metatileset.source_map = source_map
    context.state.select_tiles([metatileset.tiles[0]])
    tool.execute(context)

    assert context.undo_manager.undo() == "Import Metatile Terrains"
    assert metatileset.terrain_sets == []


def test_no_tileset(tool, context):
    result = tool.execute(context)
    assert result.message.startswith("The active asset must be an image-based Tileset")


def test_not_a_metatileset(tool, context, metatileset):
    context.state.select_tiles([metatileset.tiles[0]])
    result = tool.execute(context)
    assert "Perhaps this tileset is not a metatileset?" in result.message


def test_source_map_without_tilesets(tool, context, metatileset):
    source = TileMap(4, 4, 8, 8)
    source.new_tile_layer("empty")
    metatileset.source_map = source
    context.state.select_tiles([metatileset.tiles[0]])

    result = tool.on_activated(context)
    assert result is None
    assert context.state.status_message.startswith("The source map for this metatileset does not use")
    assert not context.undo_manager.can_undo()
    assert metatileset.terrain_sets == []


def test_unlabeled_source(tool, context, metatileset):
    tileset = Tileset("plain", 8, 8)
    tile = tileset.add_tile()
    source = TileMap(4, 4, 8, 8)
    with source.new_tile_layer("source").edit() as edit:
        edit.set_tile(0, 0, tile)
    metatileset.source_map = source
    context.state.select_tiles([metatileset.tiles[0]])

    assert tool.execute(context).message == "No terrains were found to import."
