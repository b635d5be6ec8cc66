"""
Wang Terrain Tools - View State

Manages viewport camera position, zoom, and coordinate transformations.
"""


from pygame import Rect

from editor.core.constants import TILE_SIZE


class ViewState:
    """Manages viewport camera and coordinate transformations."""

    def __init__(
        self,
        canvas_rect: Rect,
        offset_x: int = 0,
        offset_y: int = 0,
        scale: int = 1,
        tile_width: int = TILE_SIZE,
        tile_height: int = TILE_SIZE,
    ):
        """
        Initialize view state.

        Args:
            canvas_rect: The canvas drawing area (screen coordinates)
            offset_x: Horizontal scroll offset in pixels
            offset_y: Vertical scroll offset in pixels
            scale: Zoom scale multiplier
            tile_width: Map tile width in pixels at scale 1
            tile_height: Map tile height in pixels at scale 1
        """
        self.canvas_rect = canvas_rect
        self.offset_x = offset_x
        self.offset_y = offset_y
        self.scale = scale
        self.tile_width = tile_width
        self.tile_height = tile_height

    @property
    def tile_size(self) -> tuple[int, int]:
        """Get the current tile size in pixels (based on scale)."""
        return (self.tile_width * self.scale, self.tile_height * self.scale)

    def _local(self, screen_pos: tuple[int, int]) -> tuple[int, int] | None:
        if not self.canvas_rect.collidepoint(screen_pos):
            return None
        local_x = screen_pos[0] - self.canvas_rect.x + self.offset_x
        local_y = screen_pos[1] - self.canvas_rect.y + self.offset_y
        return (local_x, local_y)

    def screen_to_tile(self, screen_pos: tuple[int, int]) -> tuple[int, int] | None:
        """
        Convert screen position to tile coordinates.

        Args:
            screen_pos: Screen position (x, y) in pixels

        Returns:
            Tile coordinates (x, y), or None if outside canvas
        """
        local = self._local(screen_pos)
        if local is None:
            return None
        width, height = self.tile_size
        return (local[0] // width, local[1] // height)

    def screen_to_tile_fraction(
        self, screen_pos: tuple[int, int]
    ) -> tuple[float, float] | None:
        """
        Position within the tile under the cursor.

        Returns:
            (fx, fy) with each value in [0, 1), or None if outside canvas
        """
        local = self._local(screen_pos)
        if local is None:
            return None
        width, height = self.tile_size
        return ((local[0] % width) / width, (local[1] % height) / height)
