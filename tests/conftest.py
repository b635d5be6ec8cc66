"""Shared pytest fixtures for terrain tests."""

import random

import pytest

from editor.controllers.editor_state import EditorState
from editor.tools.base_tool import ToolContext
from terrain.core.tile_map import TileMap
from terrain.core.wang_id import TerrainSetType
from tests.factories import (
    MAP_TILE_SIZE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    corner_labels,
    edge_labels,
    make_terrain_tileset,
)


@pytest.fixture
def rng():
    """Seeded random source for deterministic tile selection."""
    return random.Random(1234)


@pytest.fixture
def corner_terrain():
    """Corner set with every combination of color 1 and empty corners."""
    return make_terrain_tileset(corner_labels(1), TerrainSetType.CORNER, name="corners")


@pytest.fixture
def edge_terrain():
    """Edge set with every combination of color 1 and empty edges."""
    return make_terrain_tileset(edge_labels(1), TerrainSetType.EDGE, name="edges")


@pytest.fixture
def tile_map():
    """10x10 map with one empty tile layer."""
    tile_map = TileMap(10, 10, MAP_TILE_SIZE, MAP_TILE_SIZE)
    tile_map.new_tile_layer("Ground")
    return tile_map


@pytest.fixture
def layer(tile_map):
    return tile_map.tile_layers()[0]


@pytest.fixture
def editor_state(tile_map):
    return EditorState(tile_map)


@pytest.fixture
def context(editor_state, rng):
    return ToolContext(editor_state, SCREEN_WIDTH, SCREEN_HEIGHT, rng=rng)
