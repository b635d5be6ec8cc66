"""
Wang Terrain Tools - Pointer Geometry

Maps a pointer position inside a tile to the WangID slot under it.

Positions are fractions (fx, fy) of the tile size, with (0, 0) at the
tile's top-left corner and both values in [0, 1).
"""

from typing import Optional

from terrain.core.wang_id import TerrainSetType, WangIndex

_T = WangIndex


def edge_index_at(fx: float, fy: float) -> WangIndex:
    """
    Edge slot of the triangle under the pointer.

    The two diagonals split the tile into four triangles, one per edge.
    """
    if fx < fy:
        # Below the \ diagonal: Bottom or Left
        return _T.BOTTOM if (1 - fx) < fy else _T.LEFT
    # Above it: Top or Right
    return _T.RIGHT if (1 - fx) < fy else _T.TOP


def edge_index_for_move(
    cell: tuple[int, int],
    last_cell: tuple[int, int],
    last_index: Optional[int],
) -> Optional[int]:
    """
    Edge crossed when the pointer moves from last_cell into cell.

    Returns the edge of cell facing last_cell, or last_index if the pointer
    is still in the same cell. None when the cells share no row or column.
    """
    x, y = cell
    last_x, last_y = last_cell
    if x != last_x and y != last_y:
        return None
    if x > last_x:
        return _T.LEFT
    if x < last_x:
        return _T.RIGHT
    if y > last_y:
        return _T.TOP
    if y < last_y:
        return _T.BOTTOM
    return last_index


def _corner_index_at(fx: float, fy: float) -> WangIndex:
    if fx < 0.5:
        return _T.TOP_LEFT if fy < 0.5 else _T.BOTTOM_LEFT
    return _T.TOP_RIGHT if fy < 0.5 else _T.BOTTOM_RIGHT


# 3x3 grid of slots, indexed [row][column]; the middle has no slot
_MIXED_GRID = (
    (_T.TOP_LEFT, _T.TOP, _T.TOP_RIGHT),
    (_T.LEFT, None, _T.RIGHT),
    (_T.BOTTOM_LEFT, _T.BOTTOM, _T.BOTTOM_RIGHT),
)


def _third(value: float) -> int:
    if value < 1 / 3:
        return 0
    if value < 2 / 3:
        return 1
    return 2


def sample_index_at(fx: float, fy: float, set_type: TerrainSetType) -> Optional[WangIndex]:
    """
    Slot to sample a terrain color from, for a click inside a tile.

    Corner sets use the four quadrants, Edge sets the four triangles and
    Mixed sets a 3x3 grid. Returns None for the middle of a Mixed tile.
    """
    if set_type == TerrainSetType.CORNER:
        return _corner_index_at(fx, fy)
    if set_type == TerrainSetType.EDGE:
        return edge_index_at(fx, fy)
    return _MIXED_GRID[_third(fy)][_third(fx)]
