"""
Tool protocol, context facade and result type shared by the terrain tools.
"""

import random
from typing import Protocol

from pygame import Rect

from editor.controllers.view_state import ViewState
from editor.core.constants import (
    CANVAS_OFFSET_X,
    CANVAS_OFFSET_Y,
    STATUS_HEIGHT,
    TILE_SIZE,
)
from terrain.core.tile_map import TileLayer, TileMap


class Tool(Protocol):
    """Interface every editor tool provides.

    Tools are duck-typed: nothing inherits from this class. Action tools
    additionally define is_action_tool() returning True and do their work
    in on_activated().
    """

    def handle_mouse_down(
        self, pos: tuple[int, int], button: int, modifiers: int, context: "ToolContext"
    ) -> "ToolResult":
        """Button pressed over the canvas; modifiers is the pygame KMOD state."""
        ...

    def handle_mouse_up(
        self, pos: tuple[int, int], button: int, context: "ToolContext"
    ) -> "ToolResult":
        """Button released; painting tools commit here."""
        ...

    def handle_mouse_motion(
        self, pos: tuple[int, int], context: "ToolContext"
    ) -> "ToolResult":
        """Pointer moved; painting tools refresh their preview."""
        ...

    def handle_key_down(
        self, key: int, modifiers: int, context: "ToolContext"
    ) -> "ToolResult":
        ...

    def handle_key_up(self, key: int, context: "ToolContext") -> "ToolResult":
        ...

    def on_activated(self, context: "ToolContext") -> None:
        """Tool selected; re-read the terrain selection and show status."""
        ...

    def on_deactivated(self, context: "ToolContext") -> None:
        """Another tool selected; drop any stroke in progress."""
        ...

    def reset(self) -> None:
        ...

    def get_hotkey(self) -> int | None:
        """pygame key that selects the tool, or None."""
        ...


class ToolContext:
    """What a tool may touch: editor state, screen size and the tool manager.

    Tools read the map, layer and undo history through this object rather
    than through the application, so they can be driven directly in tests.
    """

    def __init__(
        self,
        state,
        screen_width: int,
        screen_height: int,
        tool_manager=None,
        rng: random.Random | None = None,
    ):
        self.state = state
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.tool_manager = tool_manager
        self.rng = rng

    @property
    def tile_map(self) -> TileMap | None:
        return self.state.tile_map

    @property
    def layer(self) -> TileLayer | None:
        """The current layer, if it is a tile layer."""
        layer = self.state.current_layer
        return layer if isinstance(layer, TileLayer) else None

    @property
    def undo_manager(self):
        return self.state.undo_manager

    def view_state(self) -> ViewState:
        """View state for converting screen positions into map coordinates."""
        canvas_rect = Rect(
            CANVAS_OFFSET_X,
            CANVAS_OFFSET_Y,
            self.screen_width - CANVAS_OFFSET_X,
            self.screen_height - CANVAS_OFFSET_Y - STATUS_HEIGHT,
        )
        tile_map = self.tile_map
        if tile_map is not None:
            tile_width, tile_height = tile_map.tile_width, tile_map.tile_height
        else:
            tile_width, tile_height = TILE_SIZE, TILE_SIZE
        return ViewState(
            canvas_rect,
            self.state.canvas_offset_x,
            self.state.canvas_offset_y,
            self.state.canvas_scale,
            tile_width,
            tile_height,
        )

    def set_status(self, message: str) -> None:
        self.state.set_status(message)


class ToolResult:
    """
    Outcome of a tool event.

    Tools record their own undo steps through UndoManager.transaction(), so
    map_modified only tells the host that the document is now dirty.
    """

    def __init__(
        self,
        handled: bool = False,
        needs_render: bool = False,
        map_modified: bool = False,
        message: str | None = None,
    ):
        self.handled = handled
        self.needs_render = needs_render
        self.map_modified = map_modified
        self.message = message

    @staticmethod
    def handled() -> "ToolResult":
        return ToolResult(handled=True)

    @staticmethod
    def not_handled() -> "ToolResult":
        return ToolResult(handled=False)

    @staticmethod
    def preview(message: str | None = None) -> "ToolResult":
        """The preview changed; the document was not touched."""
        return ToolResult(handled=True, needs_render=True, message=message)

    @staticmethod
    def modified(map_modified: bool = True, message: str | None = None) -> "ToolResult":
        """A committed edit. Pass map_modified=False for tileset-only edits."""
        return ToolResult(
            handled=True,
            needs_render=True,
            map_modified=map_modified,
            message=message,
        )
