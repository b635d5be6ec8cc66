"""
Wang Terrain Tools - Neighbor Constraint Propagation

Derives the labels a cell must carry so that its shared edges and corners
agree with the tiles already painted around it.
"""

from .tile_map import TileLayer
from .tileset import TerrainSet
from .transform import transform_wang_id
from .wang_id import EMPTY_WANG_ID, WangId, WangIndex, filled_wang_id, with_slots

_T = WangIndex

UP, RIGHT, DOWN, LEFT = "up", "right", "down", "left"
SIDES = (UP, RIGHT, DOWN, LEFT)

SIDE_DELTAS = {
    UP: (0, -1),
    RIGHT: (1, 0),
    DOWN: (0, 1),
    LEFT: (-1, 0),
}

OPPOSITE_SIDES = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

# For each side: (slot on this cell, slot on the neighbor it must equal)
SHARED_SLOTS = {
    UP: (
        (_T.TOP, _T.BOTTOM),
        (_T.TOP_LEFT, _T.BOTTOM_LEFT),
        (_T.TOP_RIGHT, _T.BOTTOM_RIGHT),
    ),
    DOWN: (
        (_T.BOTTOM, _T.TOP),
        (_T.BOTTOM_LEFT, _T.TOP_LEFT),
        (_T.BOTTOM_RIGHT, _T.TOP_RIGHT),
    ),
    LEFT: (
        (_T.LEFT, _T.RIGHT),
        (_T.TOP_LEFT, _T.TOP_RIGHT),
        (_T.BOTTOM_LEFT, _T.BOTTOM_RIGHT),
    ),
    RIGHT: (
        (_T.RIGHT, _T.LEFT),
        (_T.TOP_RIGHT, _T.TOP_LEFT),
        (_T.BOTTOM_RIGHT, _T.BOTTOM_LEFT),
    ),
}

# Edge slot facing each side
SIDE_EDGE = {UP: _T.TOP, RIGHT: _T.RIGHT, DOWN: _T.BOTTOM, LEFT: _T.LEFT}
EDGE_SIDE = {index: side for side, index in SIDE_EDGE.items()}

# Horizontal sides first, so a vertical neighbor decides shared corners
_SIDE_ORDER = (LEFT, RIGHT, UP, DOWN)


def derive_edge_constraint(neighbor_wang_id: WangId | None, side: str) -> dict[int, int]:
    """
    Slots a cell must take from its neighbor on the given side.

    Args:
        neighbor_wang_id: Neighbor labels as drawn (already flip-transformed),
                          or None when there is no neighbor
        side: Which side of the cell the neighbor is on

    Returns:
        Mapping of this cell's slot index to required color. All zeros when
        there is no neighbor.
    """
    neighbor = neighbor_wang_id or EMPTY_WANG_ID
    return {own: neighbor[theirs] for own, theirs in SHARED_SLOTS[side]}


class NeighborConstraintPropagator:
    """Reads painted neighbors of a layer through a terrain set."""

    def __init__(
        self,
        layer: TileLayer,
        terrain_set: TerrainSet,
        ignore_surroundings: bool = False,
    ):
        self.layer = layer
        self.terrain_set = terrain_set
        self.ignore_surroundings = ignore_surroundings

    def cell_wang_id(self, x: int, y: int) -> WangId | None:
        """
        Labels of the tile at (x, y) as drawn, or None for an empty cell.

        The cell's own flip flags are applied before anything is read from
        the result. Tiles without a label in the terrain set read as all zero.
        """
        tile = self.layer.tile_at(x, y)
        if tile is None:
            return None
        wang_id = self.terrain_set.wang_id(tile) or EMPTY_WANG_ID
        return transform_wang_id(wang_id, self.layer.flags_at(x, y))

    def constraint_from(self, x: int, y: int, side: str) -> dict[int, int]:
        """Slots of (x, y) dictated by its neighbor on one side."""
        if self.ignore_surroundings:
            return derive_edge_constraint(None, side)
        dx, dy = SIDE_DELTAS[side]
        return derive_edge_constraint(self.cell_wang_id(x + dx, y + dy), side)

    def derive_target(self, x: int, y: int, color: int, outward_sides=()) -> WangId:
        """
        Target labels for a cell painted with color.

        Every slot starts as color. Each outward side (a side facing away
        from the painted shape) then takes its three slots from the neighbor
        on that side, or 0 when that neighbor is empty or surroundings are
        ignored.
        """
        target = filled_wang_id(color)
        for side in _SIDE_ORDER:
            if side in outward_sides:
                target = with_slots(target, self.constraint_from(x, y, side))
        return target


def derive_target_wang_id(
    layer: TileLayer,
    terrain_set: TerrainSet,
    x: int,
    y: int,
    color: int,
    outward_sides=(),
    ignore_surroundings: bool = False,
) -> WangId:
    """Target labels for one cell; see NeighborConstraintPropagator.derive_target."""
    propagator = NeighborConstraintPropagator(layer, terrain_set, ignore_surroundings)
    return propagator.derive_target(x, y, color, outward_sides)
