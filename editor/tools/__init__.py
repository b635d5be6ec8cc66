"""
Wang Terrain Tools - Tools

Editor tools for painting terrain and editing tileset terrain labels.
"""

from .base_tool import Tool, ToolContext, ToolResult
from .force_edge_terrain_tool import ForceEdgeTerrainTool
from .import_metatile_terrains_tool import ImportMetatileTerrainsTool
from .terrain_clipboard_tools import (
    CopyTerrainArrangementTool,
    CopyTerrainsTool,
    PasteTerrainArrangementTool,
    PasteTerrainsTool,
)
from .terrain_rectangle_tool import TerrainRectangleTool
from .tool_manager import ToolManager, create_tool_manager

__all__ = [
    "Tool",
    "ToolContext",
    "ToolResult",
    "ToolManager",
    "create_tool_manager",
    "TerrainRectangleTool",
    "ForceEdgeTerrainTool",
    "ImportMetatileTerrainsTool",
    "CopyTerrainsTool",
    "PasteTerrainsTool",
    "CopyTerrainArrangementTool",
    "PasteTerrainArrangementTool",
]
