"""
Wang Terrain Tools - Candidate Index

Collects the tiles of a terrain set that carry a given terrain color and
works out how a Mixed set should be matched for that color.
"""

import logging
from dataclasses import dataclass, field, replace

from .tileset import TerrainSet, Tile
from .wang_id import TerrainSetType, WangId, compared_indexes, is_edge

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Candidate:
    tile: Tile
    wang_id: WangId


@dataclass(frozen=True)
class CandidateIndex:
    """Tiles relevant to one terrain color, plus the matching mode to use."""

    terrain_set: TerrainSet
    color: int
    candidates: tuple[Candidate, ...] = field(default_factory=tuple)
    effective_type: TerrainSetType = TerrainSetType.MIXED

    def __len__(self):
        return len(self.candidates)

    def with_type(self, set_type: TerrainSetType) -> "CandidateIndex":
        """Same candidates, matched as a different terrain set type."""
        return replace(self, effective_type=set_type)


def build_candidate_index(terrain_set: TerrainSet, color: int) -> CandidateIndex:
    """
    Build the candidate index for a terrain color.

    A tile is included once if the color appears in at least one slot that is
    relevant to the set's declared type. For Mixed sets the scan continues
    past the first hit to record whether the color is used on edges, corners
    or both; a color used on only one kind makes the set behave as that
    simpler type.

    Args:
        terrain_set: Terrain set to index
        color: Terrain color index

    Returns:
        CandidateIndex with the effective matching type resolved
    """
    relevant = compared_indexes(terrain_set.type)
    uses_edges = False
    uses_corners = False
    candidates = []

    for tile in terrain_set.tileset.tiles:
        # Host tile collections can contain gaps
        if tile is None:
            continue
        wang_id = terrain_set.wang_id(tile)
        if wang_id is None:
            continue

        included = False
        for index in relevant:
            if wang_id[index] != color:
                continue
            if is_edge(index):
                uses_edges = True
            else:
                uses_corners = True
            if not included:
                candidates.append(Candidate(tile, wang_id))
                included = True
                if terrain_set.type != TerrainSetType.MIXED:
                    break

    if terrain_set.type == TerrainSetType.MIXED:
        if uses_edges == uses_corners:
            effective_type = TerrainSetType.MIXED
        elif uses_corners:
            effective_type = TerrainSetType.CORNER
        else:
            effective_type = TerrainSetType.EDGE
    else:
        effective_type = terrain_set.type

    logger.debug(
        "Indexed %d candidate tiles for color %d of %r (%s)",
        len(candidates), color, terrain_set.name, effective_type.value,
    )
    return CandidateIndex(terrain_set, color, tuple(candidates), effective_type)


def effective_type_for_color(terrain_set: TerrainSet, color: int) -> TerrainSetType:
    """Matching mode a terrain color behaves as within its set."""
    return build_candidate_index(terrain_set, color).effective_type
