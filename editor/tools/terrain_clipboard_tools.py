"""Action tools for copying and pasting terrain labels between tiles."""

import logging

import pygame

from .base_tool import ToolContext, ToolResult

logger = logging.getLogger(__name__)


class _TerrainClipboardAction:
    """Shared plumbing for the clipboard action tools."""

    label = ""

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
        """Run the action and report the outcome in the status bar."""
        result = self.execute(context)
        if result.message:
            context.set_status(result.message)

    def on_deactivated(self, context: ToolContext):
        pass

    def reset(self):
        pass

    def get_hotkey(self):
        return None

    def is_action_tool(self):
        """Identify this as an action tool."""
        return True

    def execute(self, context: ToolContext) -> ToolResult:
        raise NotImplementedError

    def _selection(self, context: ToolContext):
        """
        Terrain set and selected tiles to work on.

        Returns:
            (terrain_set, tiles, error message); the message is None when
            the selection is usable
        """
        state = context.state
        terrain_set = state.terrain_set
        if terrain_set is None:
            return None, [], "No terrain set selected."
        tiles = [
            tile for tile in state.selected_tiles
            if tile.tileset.uid == terrain_set.tileset.uid
        ]
        if not tiles:
            return terrain_set, [], f"No tiles of tileset \"{terrain_set.tileset.name}\" selected."
        return terrain_set, tiles, None


class CopyTerrainsTool(_TerrainClipboardAction):
    """Copies the labels of the selected tiles exactly."""

    label = "Copy Terrains"

    def get_hotkey(self):
        """Return 'C' key."""
        return pygame.K_c

    def execute(self, context):
        terrain_set, tiles, error = self._selection(context)
        if error:
            return ToolResult(handled=True, message=error)
        count = context.state.terrain_clipboard.copy_terrains(terrain_set, tiles)
        return ToolResult(handled=True, message=f"Copied terrains of {count} tiles.")


class PasteTerrainsTool(_TerrainClipboardAction):
    """Pastes copied labels onto the selected tiles."""

    label = "Paste Terrains"

    def get_hotkey(self):
        """Return 'V' key."""
        return pygame.K_v

    def execute(self, context):
        clipboard = context.state.terrain_clipboard
        if not clipboard.wang_ids:
            return ToolResult(handled=True, message="There are no terrains to paste.")
        terrain_set, tiles, error = self._selection(context)
        if error:
            return ToolResult(handled=True, message=error)

        tileset = terrain_set.tileset
        with context.undo_manager.transaction(tileset, self.label):
            count = clipboard.paste_terrains(terrain_set, tiles)
        logger.info("Pasted terrains onto %d tiles of %r", count, tileset.name)
        return ToolResult.modified(
            map_modified=False, message=f"Pasted terrains onto {count} tiles."
        )


class CopyTerrainArrangementTool(_TerrainClipboardAction):
    """Copies where the selected terrain color appears on the selected tiles."""

    label = "Copy Terrain Arrangement"

    def execute(self, context):
        terrain_set, tiles, error = self._selection(context)
        if error:
            return ToolResult(handled=True, message=error)
        color = max(context.state.color, 0)
        found = context.state.terrain_clipboard.copy_arrangement(terrain_set, color, tiles)
        if not found:
            return ToolResult(
                handled=True,
                message=f'No labels of terrain "{terrain_set.color_name(color)}" were copied.',
            )
        return ToolResult(
            handled=True, message=f"Copied terrain arrangement of {len(tiles)} tiles."
        )


class PasteTerrainArrangementTool(_TerrainClipboardAction):
    """Pastes a copied arrangement using the selected terrain color."""

    label = "Paste Terrain Arrangement"

    def execute(self, context):
        clipboard = context.state.terrain_clipboard
        if not clipboard.arrangements:
            return ToolResult(handled=True, message="There are no terrain arrangements to paste.")
        terrain_set, tiles, error = self._selection(context)
        if error:
            return ToolResult(handled=True, message=error)

        color = max(context.state.color, 0)
        tileset = terrain_set.tileset
        with context.undo_manager.transaction(tileset, self.label):
            count = clipboard.paste_arrangement(terrain_set, color, tiles)
        logger.info("Pasted terrain arrangement onto %d tiles of %r", count, tileset.name)
        return ToolResult.modified(
            map_modified=False,
            message=f"Pasted terrain arrangement onto {count} tiles.",
        )
