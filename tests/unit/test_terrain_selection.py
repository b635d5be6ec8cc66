"""Unit tests for resolving the terrain a tool paints with."""

from editor.controllers.editor_state import EditorState
from editor.controllers.terrain_selection import TerrainSelection, cell_status, terrain_from_tile
from terrain.core.tile_map import TileLayer
from terrain.core.wang_id import TerrainSetType
from tests.factories import make_terrain_tileset


def test_terrain_from_tile_picks_first_labeled_set():
    tileset, first, tiles = make_terrain_tileset([(0, 0, 2, 0, 0, 0, 0, 0)], colors=("Grass", "Sand"))
    assert terrain_from_tile(tiles[0]) == (first, 2)


def test_terrain_from_tile_without_labels():
    tileset, terrain_set, tiles = make_terrain_tileset([(0,) * 8])
    assert terrain_from_tile(tiles[0]) == (None, -1)
    assert terrain_from_tile(None) == (None, -1)


class TestRefresh:
    """Tests for TerrainSelection.refresh()."""

    def test_panel_selection_wins(self, corner_terrain):
        _, terrain_set, tiles = corner_terrain
        state = EditorState()
        state.select_terrain(terrain_set, 1)
        state.select_tiles([tiles[3]])

        selection = TerrainSelection()
        assert selection.refresh(state) is True
        assert selection.terrain_set is terrain_set
        assert selection.color == 1
        assert selection.effective_type == TerrainSetType.CORNER

    def test_falls_back_to_selected_tile(self, edge_terrain):
        _, terrain_set, tiles = edge_terrain
        state = EditorState()
        state.select_tiles([tiles[1]])

        selection = TerrainSelection()
        selection.refresh(state)
        assert selection.terrain_set is terrain_set
        assert selection.color == 1

    def test_selected_tiles_ignored_when_disabled(self, edge_terrain):
        _, terrain_set, tiles = edge_terrain
        state = EditorState()
        state.select_tiles([tiles[1]])

        selection = TerrainSelection()
        selection.refresh(state, use_selected_tiles=False)
        assert not selection.is_valid(minimum_color=0)
        assert selection.index is None

    def test_unchanged_refresh(self, corner_terrain):
        _, terrain_set, _ = corner_terrain
        state = EditorState()
        state.select_terrain(terrain_set, 1)

        selection = TerrainSelection()
        selection.refresh(state)
        index = selection.index
        assert selection.refresh(state) is False
        assert selection.index is index

    def test_label_change_rebuilds_index(self, corner_terrain):
        tileset, terrain_set, _ = corner_terrain
        state = EditorState()
        state.select_terrain(terrain_set, 1)
        selection = TerrainSelection()
        selection.refresh(state)
        count = len(selection.index)

        terrain_set.set_wang_id(tileset.add_tile(), (0, 1, 0, 1, 0, 1, 0, 1))
        selection.refresh(state)
        assert len(selection.index) == count + 1


class TestHasEdges:
    """Tests for whether a color can be painted as edges."""

    def test_corner_set_has_no_edges(self, corner_terrain):
        _, terrain_set, _ = corner_terrain
        selection = TerrainSelection()
        selection.set_terrain(terrain_set, 1)
        assert selection.has_edges is False

    def test_mixed_color_used_on_corners_only(self):
        _, terrain_set, _ = make_terrain_tileset([(0, 1, 0, 1, 0, 1, 0, 1)])
        selection = TerrainSelection()
        selection.set_terrain(terrain_set, 1)
        assert selection.effective_type == TerrainSetType.CORNER
        assert selection.has_edges is False

    def test_mixed_color_with_edges(self):
        _, terrain_set, _ = make_terrain_tileset([(1, 1, 1, 1, 1, 1, 1, 1)])
        selection = TerrainSelection()
        selection.set_terrain(terrain_set, 1)
        assert selection.has_edges is True


def test_describe(corner_terrain):
    _, terrain_set, _ = corner_terrain
    selection = TerrainSelection()
    assert selection.describe() == ""
    selection.set_terrain(terrain_set, 1)
    assert selection.describe() == ' [Using Terrain "Grass" from Terrain Set "corners terrains"]'


def test_clear(corner_terrain):
    _, terrain_set, _ = corner_terrain
    selection = TerrainSelection()
    selection.set_terrain(terrain_set, 1)
    selection.clear()
    assert selection.terrain_set is None
    assert selection.index is None


def test_cell_status(corner_terrain):
    _, _, tiles = corner_terrain
    layer = TileLayer("ground", 4, 4)
    with layer.edit() as edit:
        edit.set_tile(1, 2, tiles[5])
    assert cell_status(layer, (1, 2)) == "1, 2 [5]"
    assert cell_status(layer, (0, 0)) == "0, 0 [empty]"
