"""
Wang Terrain Tools - WangID Model

A WangID is a fixed 8-slot vector of terrain colors, one per edge and corner
of a square tile, ordered clockwise from the top edge. 0 means "no terrain".
"""

from enum import Enum, IntEnum


class WangIndex(IntEnum):
    """Slot positions within a WangID."""

    TOP = 0
    TOP_RIGHT = 1
    RIGHT = 2
    BOTTOM_RIGHT = 3
    BOTTOM = 4
    BOTTOM_LEFT = 5
    LEFT = 6
    TOP_LEFT = 7


NUM_INDEXES = 8

EDGE_INDEXES = (0, 2, 4, 6)
CORNER_INDEXES = (1, 3, 5, 7)
ALL_INDEXES = tuple(range(NUM_INDEXES))

WangId = tuple[int, ...]

EMPTY_WANG_ID: WangId = (0,) * NUM_INDEXES


class TerrainSetType(Enum):
    """Which WangID slots are meaningful for a terrain set."""

    EDGE = "edge"
    CORNER = "corner"
    MIXED = "mixed"


def compared_indexes(set_type: TerrainSetType) -> tuple[int, ...]:
    """Slots that take part in matching for the given terrain set type."""
    if set_type == TerrainSetType.EDGE:
        return EDGE_INDEXES
    if set_type == TerrainSetType.CORNER:
        return CORNER_INDEXES
    return ALL_INDEXES


def make_wang_id(values) -> WangId:
    """
    Build a WangID from any iterable of 8 non-negative integers.

    Raises:
        ValueError: If the length is not 8 or a value is negative
    """
    wang_id = tuple(int(v) for v in values)
    if len(wang_id) != NUM_INDEXES:
        raise ValueError(
            f"WangID must have exactly {NUM_INDEXES} slots, got {len(wang_id)}"
        )
    for index, value in enumerate(wang_id):
        if value < 0:
            raise ValueError(f"WangID slot {index} is negative: {value}")
    return wang_id


def filled_wang_id(color: int) -> WangId:
    """WangID with every slot set to color."""
    return make_wang_id([color] * NUM_INDEXES)


def is_edge(index: int) -> bool:
    return index % 2 == 0


def is_corner(index: int) -> bool:
    return index % 2 == 1


def opposite_index(index: int) -> int:
    """Slot on the far side of the tile (Top <-> Bottom, TopLeft <-> BottomRight)."""
    return (index + 4) % NUM_INDEXES


def first_color(wang_id: WangId | None) -> int:
    """First non-zero label checking clockwise from Top, or 0 if unlabeled."""
    if not wang_id:
        return 0
    for color in wang_id:
        if color > 0:
            return color
    return 0


def with_slots(wang_id: WangId, slots: dict[int, int]) -> WangId:
    """Copy of wang_id with the given slot values replaced."""
    values = list(wang_id)
    for index, color in slots.items():
        values[index] = color
    return make_wang_id(values)
