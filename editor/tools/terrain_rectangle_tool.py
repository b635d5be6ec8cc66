"""
Terrain Rectangle tool - drag out a rectangle of terrain.

The border of the rectangle is matched against the tiles around it, unless a
modifier key is held, in which case the surroundings are treated as empty.
Cells with no matching tile are left untouched.
"""

import logging

import pygame

from editor.controllers.terrain_selection import TerrainSelection, cell_status
from editor.core.constants import BUTTON_PRIMARY, BUTTON_SECONDARY, MODIFIER_KEYS, MODIFIER_MASK
from terrain.core.neighbors import NeighborConstraintPropagator
from terrain.core.stroke import (
    PreviewResult,
    build_preview,
    commit_preview,
    normalize_rect,
    rectangle_targets,
)

from .base_tool import ToolContext, ToolResult

logger = logging.getLogger(__name__)


class TerrainRectangleTool:
    """Terrain Rectangle tool - fills a dragged rectangle with the selected terrain."""

    def __init__(self):
        self.selection = TerrainSelection()
        self.start_point: tuple[int, int] | None = None
        self.end_point: tuple[int, int] | None = None
        self.position: tuple[int, int] = (0, 0)
        self.ignore_surroundings = False
        self.held_modifiers: set[int] = set()
        self.result: PreviewResult | None = None

    @property
    def is_dragging(self) -> bool:
        return self.start_point is not None

    @property
    def preview(self):
        """Scratch layer with the tiles the current drag would place."""
        return self.result.preview if self.result else None

    def handle_mouse_down(self, pos, button, modifiers, context):
        tile_pos = context.view_state().screen_to_tile(pos)
        if tile_pos is None:
            return ToolResult.not_handled()
        self.position = tile_pos

        if button == BUTTON_SECONDARY:
            return self._sample(context)

        if button != BUTTON_PRIMARY:
            return ToolResult.not_handled()

        self.selection.refresh(context.state)
        if not self.selection.is_valid():
            return ToolResult(handled=True, message=self._status(context))

        self.ignore_surroundings = bool(modifiers & MODIFIER_MASK) or bool(self.held_modifiers)
        self.start_point = tile_pos
        self.end_point = tile_pos
        self._update_preview(context)
        return ToolResult.preview(self._status(context))

    def handle_mouse_up(self, pos, button, context):
        if button != BUTTON_PRIMARY or not self.is_dragging:
            return ToolResult.not_handled()

        result = self.result
        layer = context.layer
        self._end_drag()

        if result is None or layer is None or not result.changed:
            return ToolResult(handled=True, needs_render=True, message=self._status(context))

        with context.undo_manager.transaction(layer, "Terrain Rectangle"):
            commit_preview(layer, result.preview)
        return ToolResult.modified(message=self._status(context))

    def handle_mouse_motion(self, pos, context):
        tile_pos = context.view_state().screen_to_tile(pos)
        if tile_pos is None or tile_pos == self.position:
            return ToolResult.not_handled()
        self.position = tile_pos

        if self.is_dragging:
            self.end_point = tile_pos
            self._update_preview(context)
            return ToolResult.preview(self._status(context))
        return ToolResult(handled=True, message=self._status(context))

    def handle_key_down(self, key, modifiers, context):
        if key not in MODIFIER_KEYS:
            return ToolResult.not_handled()
        self.held_modifiers.add(key)
        return self._modifiers_changed(context)

    def handle_key_up(self, key, context):
        if key not in MODIFIER_KEYS:
            return ToolResult.not_handled()
        self.held_modifiers.discard(key)
        return self._modifiers_changed(context)

    def on_activated(self, context):
        self.selection.refresh(context.state)
        context.set_status(self._status(context))

    def on_deactivated(self, context):
        self.reset()

    def reset(self):
        self._end_drag()
        self.held_modifiers.clear()
        self.ignore_surroundings = False

    def get_hotkey(self) -> int | None:
        """Return 'R' key for Terrain Rectangle tool."""
        return pygame.K_r

    def _end_drag(self):
        self.start_point = None
        self.end_point = None
        self.result = None

    def _modifiers_changed(self, context: ToolContext) -> ToolResult:
        ignore = bool(self.held_modifiers)
        if ignore == self.ignore_surroundings:
            return ToolResult.handled()
        self.ignore_surroundings = ignore
        if self.is_dragging:
            self._update_preview(context)
            return ToolResult.preview(self._status(context))
        return ToolResult.handled()

    def _sample(self, context: ToolContext) -> ToolResult:
        """Select the tile under the cursor and take the terrain from it."""
        layer = context.layer
        if layer is None:
            return ToolResult.not_handled()
        tile = layer.tile_at(*self.position)
        if tile is not None:
            context.state.select_tiles([tile])
        self.selection.refresh(context.state)
        return ToolResult(handled=True, message=self._status(context))

    def _update_preview(self, context: ToolContext):
        """Rebuild the preview from scratch for the current drag."""
        layer = context.layer
        index = self.selection.index
        if layer is None or index is None or not self.is_dragging:
            self.result = None
            return

        rect = normalize_rect(self.start_point, self.end_point)
        propagator = NeighborConstraintPropagator(
            layer, self.selection.terrain_set, self.ignore_surroundings
        )
        targets = rectangle_targets(rect, self.selection.color, propagator)
        self.result = build_preview(layer, targets, index, context.rng)
        logger.debug(
            "Rectangle preview %dx%d: %d painted, %d unmatched",
            rect.width, rect.height, self.result.painted, len(self.result.unmatched),
        )

    def _status(self, context: ToolContext) -> str:
        if context.tile_map is None or context.state.current_layer is None:
            return "Terrain Rectangle Tool has no map or selected layers, so it cannot draw anything."
        if not self.selection.is_valid(minimum_color=0):
            return "No terrain selected."
        if context.layer is None:
            return "The selected layer is not a Tile Layer."

        x, y = self.position
        if self.is_dragging and self.selection.color > 0:
            rect = normalize_rect(self.start_point, self.end_point)
            terrain_set = self.selection.terrain_set
            return (
                f"{x}, {y} [{rect.width}x{rect.height} using Terrain "
                f'"{terrain_set.color_name(self.selection.color)}" '
                f'from Terrain Set "{terrain_set.name}"]'
            )
        return cell_status(context.layer, self.position) + self.selection.describe()
