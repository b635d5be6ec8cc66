"""
Tool manager for registering and switching between editor tools.
"""

from typing import Literal, overload

import pygame

from .base_tool import Tool, ToolContext
from .force_edge_terrain_tool import ForceEdgeTerrainTool
from .import_metatile_terrains_tool import ImportMetatileTerrainsTool
from .terrain_clipboard_tools import (
    CopyTerrainArrangementTool,
    CopyTerrainsTool,
    PasteTerrainArrangementTool,
    PasteTerrainsTool,
)
from .terrain_rectangle_tool import TerrainRectangleTool


class ToolManager:
    """Manages tool registration and activation."""

    def __init__(self):
        self.tools: dict[str, Tool] = {}
        self.active_tool: Tool | None = None
        self.active_tool_name: str | None = None
        self.hotkey_map: dict[int, str] = {}  # pygame key → tool name

    def register_tool(self, name: str, tool: Tool):
        """Register a tool with a name and validate hotkey uniqueness."""
        # Check if tool has a hotkey
        hotkey = tool.get_hotkey() if hasattr(tool, 'get_hotkey') else None
        if hotkey:
            if hotkey in self.hotkey_map:
                existing = self.hotkey_map[hotkey]
                raise ValueError(
                    f"Hotkey conflict: {name} and {existing} both use {pygame.key.name(hotkey)}"
                )
            self.hotkey_map[hotkey] = name

        self.tools[name] = tool

    @overload
    def get_tool(self, name: Literal["terrain_rectangle"]) -> TerrainRectangleTool | None: ...

    @overload
    def get_tool(self, name: Literal["force_edge_terrain"]) -> ForceEdgeTerrainTool | None: ...

    def get_tool(self, name: str) -> Tool | None:
        """Get a tool by name."""
        return self.tools.get(name)

    def set_active_tool(self, name: str, context: ToolContext) -> bool:
        """Set the active tool by name. Action tools execute immediately without switching."""
        if name not in self.tools:
            return False

        tool = self.tools[name]

        # Check if this is an action tool (has an is_action_tool attribute)
        is_action = hasattr(tool, 'is_action_tool') and callable(tool.is_action_tool) and tool.is_action_tool()

        if is_action:
            # Execute action tool without changing active tool
            tool.on_activated(context)
            return True

        # Normal modal tool behavior
        if self.active_tool and self.active_tool_name != name:
            self.active_tool.on_deactivated(context)

        self.active_tool = tool
        self.active_tool_name = name
        self.active_tool.on_activated(context)
        return True

    def get_active_tool(self) -> Tool | None:
        """Get the currently active tool."""
        return self.active_tool

    def get_active_tool_name(self) -> str | None:
        """Get the name of the currently active tool."""
        return self.active_tool_name

    def activate_by_hotkey(self, key: int, context: ToolContext) -> bool:
        """Activate tool by hotkey. Returns True if handled."""
        if key in self.hotkey_map:
            tool_name = self.hotkey_map[key]
            return self.set_active_tool(tool_name, context)
        return False


def create_tool_manager() -> ToolManager:
    """Tool manager with every terrain tool registered."""
    manager = ToolManager()
    manager.register_tool("terrain_rectangle", TerrainRectangleTool())
    manager.register_tool("force_edge_terrain", ForceEdgeTerrainTool())
    manager.register_tool("import_metatile_terrains", ImportMetatileTerrainsTool())
    manager.register_tool("copy_terrains", CopyTerrainsTool())
    manager.register_tool("paste_terrains", PasteTerrainsTool())
    manager.register_tool("copy_terrain_arrangement", CopyTerrainArrangementTool())
    manager.register_tool("paste_terrain_arrangement", PasteTerrainArrangementTool())
    return manager
