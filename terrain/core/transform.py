"""
Wang Terrain Tools - Constraint Transforms

Permutes WangID slots to follow the host's quantized tile flips.
"""

from enum import IntFlag

from .wang_id import WangId, WangIndex

_T = WangIndex


class FlipFlags(IntFlag):
    """Cell flip flags, using the host's bit values."""

    NONE = 0
    HORIZONTAL = 0x1
    VERTICAL = 0x2
    ANTI_DIAGONAL = 0x4


# Slot pairs swapped by each reflection
_ANTI_DIAGONAL_SWAPS = (
    (_T.TOP, _T.LEFT),
    (_T.RIGHT, _T.BOTTOM),
    (_T.TOP_RIGHT, _T.BOTTOM_LEFT),
)
_HORIZONTAL_SWAPS = (
    (_T.LEFT, _T.RIGHT),
    (_T.TOP_LEFT, _T.TOP_RIGHT),
    (_T.BOTTOM_LEFT, _T.BOTTOM_RIGHT),
)
_VERTICAL_SWAPS = (
    (_T.TOP, _T.BOTTOM),
    (_T.TOP_LEFT, _T.BOTTOM_LEFT),
    (_T.TOP_RIGHT, _T.BOTTOM_RIGHT),
)

# Application order for a flipped tile
_STEPS = (
    (FlipFlags.ANTI_DIAGONAL, _ANTI_DIAGONAL_SWAPS),
    (FlipFlags.HORIZONTAL, _HORIZONTAL_SWAPS),
    (FlipFlags.VERTICAL, _VERTICAL_SWAPS),
)


def _swap(values: list[int], swaps) -> None:
    for a, b in swaps:
        values[a], values[b] = values[b], values[a]


def transform_wang_id(wang_id: WangId, flags: int) -> WangId:
    """
    Return the labels a tile shows once drawn with the given flip flags.

    Anti-diagonal is applied first, then horizontal, then vertical. The input
    is never modified.

    Args:
        wang_id: Labels of the unflipped tile
        flags: Any combination of FlipFlags

    Returns:
        New permuted WangID
    """
    values = list(wang_id)
    for flag, swaps in _STEPS:
        if flags & flag:
            _swap(values, swaps)
    return tuple(values)


def untransform_wang_id(wang_id: WangId, flags: int) -> WangId:
    """Inverse of transform_wang_id for the same flags."""
    values = list(wang_id)
    for flag, swaps in reversed(_STEPS):
        if flags & flag:
            _swap(values, swaps)
    return tuple(values)
