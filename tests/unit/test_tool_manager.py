"""Unit tests for tool registration and activation."""

import pygame
import pytest

from editor.tools.tool_manager import ToolManager, create_tool_manager
from tests.factories import screen_pos


@pytest.fixture(autouse=True)
def pygame_init():
    """Initialize pygame for key names."""
    pygame.init()
    yield
    pygame.quit()


class TestRegistration:
    """Tests for registering tools."""

    def test_all_terrain_tools_registered(self):
        manager = create_tool_manager()
        assert set(manager.tools) == {
            "terrain_rectangle",
            "force_edge_terrain",
            "import_metatile_terrains",
            "copy_terrains",
            "paste_terrains",
            "copy_terrain_arrangement",
            "paste_terrain_arrangement",
        }

    def test_hotkeys(self):
        manager = create_tool_manager()
        assert manager.hotkey_map[pygame.K_r] == "terrain_rectangle"
        assert manager.hotkey_map[pygame.K_e] == "force_edge_terrain"
        assert manager.hotkey_map[pygame.K_i] == "import_metatile_terrains"

    def test_hotkey_conflict(self):
        manager = create_tool_manager()
        with pytest.raises(ValueError, match="Hotkey conflict"):
            manager.register_tool("another_rectangle", manager.get_tool("terrain_rectangle"))

    def test_unknown_tool(self, context):
        manager = ToolManager()
        assert manager.get_tool("missing") is None
        assert manager.set_active_tool("missing", context) is False


class TestActivation:
    """Tests for switching tools."""

    def test_activate_by_hotkey(self, context):
        manager = create_tool_manager()
        assert manager.activate_by_hotkey(pygame.K_r, context)
        assert manager.get_active_tool_name() == "terrain_rectangle"

    def test_unbound_hotkey(self, context):
        manager = create_tool_manager()
        assert manager.activate_by_hotkey(pygame.K_z, context) is False

    def test_switching_resets_previous_tool(self, context, corner_terrain):
        _, terrain_set, _ = corner_terrain
        context.state.select_terrain(terrain_set, 1)
        manager = create_tool_manager()
        manager.set_active_tool("terrain_rectangle", context)
        rectangle = manager.get_tool("terrain_rectangle")
        rectangle.handle_mouse_down(screen_pos(1, 1), 1, 0, context)
        assert rectangle.is_dragging

        manager.set_active_tool("force_edge_terrain", context)
        assert not rectangle.is_dragging
        assert manager.get_active_tool() is manager.get_tool("force_edge_terrain")

    def test_action_tool_keeps_active_tool(self, context):
        manager = create_tool_manager()
        manager.set_active_tool("terrain_rectangle", context)

        assert manager.set_active_tool("paste_terrains", context)
        assert manager.get_active_tool_name() == "terrain_rectangle"
        assert context.state.status_message == "There are no terrains to paste."
