"""Unit tests for screen to map coordinate conversion."""

import pytest
from pygame import Rect

from editor.controllers.view_state import ViewState


@pytest.fixture
def view_state():
    return ViewState(Rect(200, 40, 600, 530), tile_width=16, tile_height=16)


def test_screen_to_tile(view_state):
    assert view_state.screen_to_tile((200, 40)) == (0, 0)
    assert view_state.screen_to_tile((233, 57)) == (2, 1)


def test_outside_canvas(view_state):
    assert view_state.screen_to_tile((10, 10)) is None
    assert view_state.screen_to_tile_fraction((10, 10)) is None


def test_fraction_within_tile(view_state):
    assert view_state.screen_to_tile_fraction((204, 52)) == (0.25, 0.75)


def test_offset_and_scale():
    view_state = ViewState(Rect(0, 0, 400, 400), offset_x=32, scale=2, tile_width=8, tile_height=8)
    assert view_state.tile_size == (16, 16)
    assert view_state.screen_to_tile((0, 0)) == (2, 0)
