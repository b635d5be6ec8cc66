"""Action tool for importing terrains into a metatileset from its source map."""

import logging

import pygame

from terrain.core.metatile_importer import MalformedSourceMapError, import_from_source_map

from .base_tool import ToolContext, ToolResult

logger = logging.getLogger(__name__)


class ImportMetatileTerrainsTool:
    """
    Action tool that labels the current tileset from the map it was rendered from.

    The whole import is one undo step. If the source map cannot be used, the
    tileset is left unchanged and the reason is shown in the status bar.
    """

    def handle_mouse_down(self, pos, button, modifiers, context):
        return ToolResult.not_handled()

    def handle_mouse_up(self, pos, button, context):
        return ToolResult.not_handled()

    def handle_mouse_motion(self, pos, context):
        return ToolResult.not_handled()

    def handle_key_down(self, key, modifiers, context):
        return ToolResult.not_handled()

    def handle_key_up(self, key, context):
        return ToolResult.not_handled()

    def on_activated(self, context: ToolContext):
        """Execute the import when activated."""
        result = self.execute(context)
        if result.message:
            context.set_status(result.message)

    def on_deactivated(self, context: ToolContext):
        pass

    def reset(self):
        pass

    def get_hotkey(self):
        """Return 'I' key."""
        return pygame.K_i

    def is_action_tool(self):
        """Identify this as an action tool."""
        return True

    def execute(self, context: ToolContext) -> ToolResult:
        tileset = context.state.current_tileset
        if tileset is None:
            return ToolResult(
                handled=True,
                message="The active asset must be an image-based Tileset with "
                        "its Image property set to a TileMap.",
            )
        if tileset.source_map is None:
            return ToolResult(
                handled=True,
                message="Could not open the tileset source image as a TileMap, so the "
                        "original terrain data could not be read. Perhaps this tileset "
                        "is not a metatileset?",
            )

        try:
            with context.undo_manager.transaction(tileset, "Import Metatile Terrains"):
                created = import_from_source_map(tileset.source_map, tileset)
        except MalformedSourceMapError as e:
            logger.warning("Import into %r failed: %s", tileset.name, e)
            return ToolResult(handled=True, message=str(e))

        if not created:
            return ToolResult(handled=True, message="No terrains were found to import.")
        names = ", ".join(terrain_set.name for terrain_set in created)
        return ToolResult.modified(
            map_modified=False,
            message=f"Imported {len(created)} terrain sets: {names}",
        )
