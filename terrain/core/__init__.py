"""
Core terrain functionality.

This package contains the WangID model, flip transforms, tile matching,
neighbor constraint propagation, stroke painting and metatile terrain import.
"""

from .candidates import CandidateIndex, build_candidate_index, effective_type_for_color
from .matcher import TileMatch, match_tiles, random_from
from .metatile_importer import (
    MalformedSourceMapError,
    import_from_source_map,
    import_metatile_terrains,
)
from .neighbors import NeighborConstraintPropagator, derive_target_wang_id
from .stroke import EdgeStroke, paint_stroke
from .tile_map import LayerGroup, TileLayer, TileMap
from .tileset import TerrainSet, Tile, Tileset
from .transform import FlipFlags, transform_wang_id
from .wang_id import TerrainSetType, WangIndex, make_wang_id

__all__ = [
    "CandidateIndex",
    "EdgeStroke",
    "FlipFlags",
    "LayerGroup",
    "MalformedSourceMapError",
    "NeighborConstraintPropagator",
    "TerrainSet",
    "TerrainSetType",
    "Tile",
    "TileLayer",
    "TileMap",
    "TileMatch",
    "Tileset",
    "WangIndex",
    "build_candidate_index",
    "derive_target_wang_id",
    "effective_type_for_color",
    "import_from_source_map",
    "import_metatile_terrains",
    "make_wang_id",
    "match_tiles",
    "paint_stroke",
    "random_from",
    "transform_wang_id",
]
