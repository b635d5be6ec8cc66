"""Unit tests for the candidate index."""

from terrain.core.candidates import build_candidate_index, effective_type_for_color
from terrain.core.wang_id import TerrainSetType
from tests.factories import make_terrain_tileset


class TestCandidateFiltering:
    """Tests for which tiles end up in the index."""

    def test_tiles_without_color_are_excluded(self):
        _, terrain_set, tiles = make_terrain_tileset([
            (1,) * 8,
            (2,) * 8,
            (0, 0, 0, 1, 0, 0, 0, 0),
        ])
        index = build_candidate_index(terrain_set, 1)
        assert [c.tile for c in index.candidates] == [tiles[0], tiles[2]]

    def test_each_tile_listed_once(self):
        _, terrain_set, tiles = make_terrain_tileset([(1,) * 8])
        assert len(build_candidate_index(terrain_set, 1)) == 1

    def test_only_relevant_slots_count(self):
        """A color found only on edges does not make a tile a Corner-set candidate."""
        _, terrain_set, _ = make_terrain_tileset(
            [(1, 0, 1, 0, 1, 0, 1, 0)], TerrainSetType.CORNER
        )
        assert len(build_candidate_index(terrain_set, 1)) == 0

    def test_gaps_and_unlabeled_tiles_skipped(self):
        tileset, terrain_set, tiles = make_terrain_tileset([(1,) * 8, (0,) * 8])
        tileset.add_gap()
        index = build_candidate_index(terrain_set, 1)
        assert [c.tile for c in index.candidates] == [tiles[0]]

    def test_candidate_keeps_labels(self):
        _, terrain_set, _ = make_terrain_tileset([(1, 0, 1, 0, 0, 0, 0, 0)])
        candidate = build_candidate_index(terrain_set, 1).candidates[0]
        assert candidate.wang_id == (1, 0, 1, 0, 0, 0, 0, 0)


class TestEffectiveType:
    """Tests for resolving how a Mixed set is matched for one color."""

    def test_mixed_with_edges_and_corners_stays_mixed(self):
        _, terrain_set, _ = make_terrain_tileset([(1,) * 8])
        assert effective_type_for_color(terrain_set, 1) == TerrainSetType.MIXED

    def test_mixed_with_corners_only_behaves_as_corner(self):
        _, terrain_set, _ = make_terrain_tileset([
            (0, 1, 0, 1, 0, 1, 0, 1),
            (0, 1, 0, 0, 0, 0, 0, 0),
        ])
        assert effective_type_for_color(terrain_set, 1) == TerrainSetType.CORNER

    def test_mixed_with_edges_only_behaves_as_edge(self):
        _, terrain_set, _ = make_terrain_tileset([(1, 0, 0, 0, 1, 0, 0, 0)])
        assert effective_type_for_color(terrain_set, 1) == TerrainSetType.EDGE

    def test_mixed_usage_found_across_tiles(self):
        """Edge use on one tile and corner use on another still means Mixed."""
        _, terrain_set, _ = make_terrain_tileset([
            (1, 0, 0, 0, 0, 0, 0, 0),
            (0, 1, 0, 0, 0, 0, 0, 0),
        ])
        assert effective_type_for_color(terrain_set, 1) == TerrainSetType.MIXED

    def test_declared_type_used_for_non_mixed_sets(self, corner_terrain):
        _, terrain_set, _ = corner_terrain
        assert effective_type_for_color(terrain_set, 1) == TerrainSetType.CORNER

    def test_with_type_keeps_candidates(self):
        _, terrain_set, _ = make_terrain_tileset([(1,) * 8])
        index = build_candidate_index(terrain_set, 1)
        forced = index.with_type(TerrainSetType.EDGE)
        assert forced.effective_type == TerrainSetType.EDGE
        assert forced.candidates == index.candidates
        assert index.effective_type == TerrainSetType.MIXED
