"""
Force Edge Terrain tool - paint terrain along tile edges.

Mixed terrain sets are matched as if they were Edge sets, which makes it
easy to draw thin shapes such as paths and fences. Hovering previews the
edge nearest the cursor; dragging paints every edge the cursor crosses.
"""

import logging

import pygame

from editor.algorithms.pointer_geometry import edge_index_at, edge_index_for_move, sample_index_at
from editor.controllers.terrain_selection import TerrainSelection, cell_status
from editor.core.constants import BUTTON_PRIMARY, BUTTON_SECONDARY
from terrain.core.neighbors import NeighborConstraintPropagator
from terrain.core.stroke import EdgeStroke, PreviewResult, build_preview, commit_preview, edge_stroke_targets
from terrain.core.wang_id import TerrainSetType

from .base_tool import ToolContext, ToolResult

logger = logging.getLogger(__name__)


class ForceEdgeTerrainTool:
    """Force Edge Terrain tool - draws terrain edges with drag strokes."""

    def __init__(self):
        self.selection = TerrainSelection()
        self.stroke = EdgeStroke()
        self.is_painting = False
        self.position: tuple[int, int] = (0, 0)
        self.last_cell: tuple[int, int] | None = None
        self.last_index: int | None = None
        self.result: PreviewResult | None = None

    @property
    def preview(self):
        """Scratch layer with the tiles the hover or current stroke would place."""
        return self.result.preview if self.result else None

    def handle_mouse_down(self, pos, button, modifiers, context):
        view_state = context.view_state()
        tile_pos = view_state.screen_to_tile(pos)
        if tile_pos is None:
            return ToolResult.not_handled()
        self.position = tile_pos

        if button == BUTTON_SECONDARY:
            return self._sample(view_state.screen_to_tile_fraction(pos), context)

        if button != BUTTON_PRIMARY:
            return ToolResult.not_handled()

        self.selection.refresh(context.state, use_selected_tiles=False)
        if not self._can_paint(context):
            self.result = None
            return ToolResult(handled=True, needs_render=True, message=self._status(context))

        self.is_painting = True
        self.last_cell = tile_pos
        if self.last_index is None:
            self.last_index = edge_index_at(*view_state.screen_to_tile_fraction(pos))

        # The hovered edge is the first edge of the stroke
        self.stroke.clear()
        self.stroke.set_edge(tile_pos[0], tile_pos[1], self.last_index, self.selection.color)
        self._update_preview(context)
        return ToolResult.preview(self._status(context))

    def handle_mouse_up(self, pos, button, context):
        if button != BUTTON_PRIMARY or not self.is_painting:
            return ToolResult.not_handled()

        result = self.result
        layer = context.layer
        self._end_stroke()

        if result is None or layer is None or not result.changed:
            return ToolResult(handled=True, needs_render=True, message=self._status(context))

        with context.undo_manager.transaction(layer, "Force Edge Terrain"):
            commit_preview(layer, result.preview, result.erased)
        return ToolResult.modified(message=self._status(context))

    def handle_mouse_motion(self, pos, context):
        view_state = context.view_state()
        tile_pos = view_state.screen_to_tile(pos)
        if tile_pos is None:
            return ToolResult.not_handled()

        if self.is_painting:
            index = edge_index_for_move(tile_pos, self.last_cell, self.last_index)
            if index is None:
                # Diagonal jump; fall back to the triangle under the pointer
                index = edge_index_at(*view_state.screen_to_tile_fraction(pos))
        else:
            index = edge_index_at(*view_state.screen_to_tile_fraction(pos))

        moved = tile_pos != self.position
        changed = moved or index != self.last_index
        self.position = tile_pos
        self.last_index = index
        if not changed:
            return ToolResult.handled()

        if self.is_painting:
            if tile_pos != self.last_cell:
                self.stroke.add_line(self.last_cell, tile_pos, self.selection.color)
                self.last_cell = tile_pos
            self._update_preview(context)
        else:
            self._hover(context)
        return ToolResult.preview(self._status(context))

    def handle_key_down(self, key, modifiers, context):
        return ToolResult.not_handled()

    def handle_key_up(self, key, context):
        return ToolResult.not_handled()

    def on_activated(self, context):
        self.selection.refresh(context.state, use_selected_tiles=False)
        context.set_status(self._status(context))

    def on_deactivated(self, context):
        self.reset()

    def reset(self):
        self._end_stroke()
        self.last_index = None

    def get_hotkey(self) -> int | None:
        """Return 'E' key for Force Edge Terrain tool."""
        return pygame.K_e

    def _end_stroke(self):
        self.is_painting = False
        self.last_cell = None
        self.stroke.clear()
        self.result = None

    def _can_paint(self, context: ToolContext) -> bool:
        return (
            context.layer is not None
            and self.selection.is_valid(minimum_color=0)
            and self.selection.has_edges
        )

    def _hover(self, context: ToolContext):
        """Preview the single edge under the cursor."""
        self.stroke.clear()
        if self.last_index is None or not self._can_paint(context):
            self.result = None
            return
        x, y = self.position
        self.stroke.set_edge(x, y, self.last_index, self.selection.color)
        self._update_preview(context)
        self.stroke.clear()

    def _update_preview(self, context: ToolContext):
        """Rebuild the preview from scratch for the edges painted so far."""
        layer = context.layer
        if layer is None or self.selection.index is None or not self.stroke:
            self.result = None
            return
        propagator = NeighborConstraintPropagator(layer, self.selection.terrain_set)
        targets = edge_stroke_targets(self.stroke, propagator)
        index = self.selection.index.with_type(TerrainSetType.EDGE)
        self.result = build_preview(layer, targets, index, context.rng, erase_empty=True)
        logger.debug(
            "Edge preview: %d edges over %d cells, %d painted",
            sum(len(edges) for edges in self.stroke.edges.values()) // 2,
            len(targets), self.result.painted,
        )

    def _sample(self, fraction, context: ToolContext) -> ToolResult:
        """Pick up the terrain color at the clicked part of the tile under the cursor."""
        terrain_set = self.selection.terrain_set
        layer = context.layer
        if terrain_set is None or layer is None or fraction is None:
            return ToolResult.not_handled()

        propagator = NeighborConstraintPropagator(layer, terrain_set)
        wang_id = propagator.cell_wang_id(*self.position)
        if wang_id is None:
            return ToolResult.handled()
        index = sample_index_at(fraction[0], fraction[1], terrain_set.type)
        if index is None:
            return ToolResult.handled()

        context.state.select_terrain(terrain_set, wang_id[index])
        self.selection.refresh(context.state, use_selected_tiles=False)
        return ToolResult(handled=True, message=self._status(context))

    def _status(self, context: ToolContext) -> str:
        if context.tile_map is None or context.state.current_layer is None:
            return "Force Edge Terrain Tool has no map or selected layers, so it cannot draw anything."
        if not self.selection.is_valid(minimum_color=0):
            return "No terrain selected."
        if not self.selection.has_edges:
            return "Selected Terrain does not have Edge labels."
        if context.layer is None:
            return "The selected layer is not a Tile Layer."
        return cell_status(context.layer, self.position) + self.selection.describe()
