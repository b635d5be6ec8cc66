"""Unit tests for tiles, tilesets and terrain sets."""

import pytest

from terrain.core.tileset import Tile, Tileset
from terrain.core.wang_id import TerrainSetType


@pytest.fixture
def tileset():
    tileset = Tileset("grass", 16, 16)
    for _ in range(4):
        tileset.add_tile()
    return tileset


@pytest.fixture
def terrain_set(tileset):
    terrain_set = tileset.add_terrain_set("Ground", TerrainSetType.MIXED)
    terrain_set.add_color("Grass")
    terrain_set.add_color("Dirt")
    return terrain_set


class TestTile:
    """Tests for tile handles."""

    def test_identity_is_tileset_and_id(self, tileset):
        """Two handles to the same tile compare equal."""
        copy = Tile(tileset, 2)
        assert copy == tileset.tile(2)
        assert hash(copy) == hash(tileset.tile(2))
        assert copy != tileset.tile(1)

    def test_same_id_in_other_tileset_differs(self, tileset):
        other = Tileset("other", 16, 16)
        assert other.add_tile() != tileset.tile(0)

    def test_negative_probability_rejected(self, tileset):
        with pytest.raises(ValueError, match="probability"):
            tileset.add_tile(probability=-0.5)


class TestTileset:
    """Tests for tile collections and geometry."""

    def test_tile_lookup_with_gaps(self, tileset):
        tileset.add_gap()
        assert tileset.tile_count == 5
        assert tileset.tile(4) is None
        assert tileset.tile(99) is None

    def test_column_count_from_image(self):
        """floor((image_width - margin + spacing) / (tile_width + spacing))"""
        tileset = Tileset("sheet", 16, 16, image_width=100, margin=2, spacing=1)
        assert tileset.column_count() == 5

    def test_explicit_columns_win(self):
        tileset = Tileset("sheet", 16, 16, image_width=100, columns=3)
        assert tileset.column_count() == 3

    def test_snapshot_restore_keeps_terrain_set_objects(self, tileset, terrain_set):
        """Restoring puts labels back on the same TerrainSet objects."""
        tile = tileset.tile(0)
        terrain_set.set_wang_id(tile, [1] * 8)
        snapshot = tileset.snapshot()

        terrain_set.set_wang_id(tile, [2] * 8)
        tileset.add_terrain_set("Extra", TerrainSetType.EDGE)
        tileset.restore(snapshot)

        assert tileset.terrain_sets == [terrain_set]
        assert terrain_set.wang_id(tile) == (1,) * 8


class TestTerrainSet:
    """Tests for terrain colors and tile labels."""

    def test_colors_start_at_one(self, terrain_set):
        assert terrain_set.color_count == 2
        assert terrain_set.color_name(1) == "Grass"
        assert terrain_set.color_name(0) == ""
        assert terrain_set.color_name(3) == ""

    def test_color_count_setter_grows_and_shrinks(self, terrain_set):
        terrain_set.color_count = 4
        assert terrain_set.colors[1:] == ["Grass", "Dirt", "Terrain 3", "Terrain 4"]
        terrain_set.color_count = 1
        assert terrain_set.colors[1:] == ["Grass"]

    def test_set_color_name_rejects_reserved_index(self, terrain_set):
        with pytest.raises(ValueError):
            terrain_set.set_color_name(0, "Nothing")

    def test_unlabeled_tile_has_no_wang_id(self, tileset, terrain_set):
        assert terrain_set.wang_id(tileset.tile(0)) is None
        assert terrain_set.wang_id(None) is None

    def test_set_and_clear_label(self, tileset, terrain_set):
        tile = tileset.tile(1)
        terrain_set.set_wang_id(tile, [1, 0, 1, 0, 2, 0, 2, 0])
        assert terrain_set.wang_id(tile) == (1, 0, 1, 0, 2, 0, 2, 0)
        assert terrain_set.labeled_tiles() == [tile]

        terrain_set.set_wang_id(tile, [0] * 8)
        assert terrain_set.wang_id(tile) is None
        assert terrain_set.labeled_tiles() == []

    def test_foreign_tile_rejected(self, terrain_set):
        foreign = Tileset("other", 16, 16).add_tile()
        with pytest.raises(ValueError, match="does not belong"):
            terrain_set.set_wang_id(foreign, [1] * 8)

    def test_malformed_label_rejected(self, tileset, terrain_set):
        with pytest.raises(ValueError):
            terrain_set.set_wang_id(tileset.tile(0), [1, 1, 1])

    def test_revision_changes_with_labels(self, tileset, terrain_set):
        before = terrain_set.revision
        terrain_set.set_wang_id(tileset.tile(0), [1] * 8)
        assert terrain_set.revision > before
