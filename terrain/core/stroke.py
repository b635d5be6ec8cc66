"""
Wang Terrain Tools - Stroke Engine

Turns the cells visited by a stroke (a rectangle or a chain of painted
edges) into per-cell target WangIDs, resolves tiles for them into a scratch
preview layer and merges the preview into the real layer on commit.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Iterable

from pygame import Rect

from .candidates import CandidateIndex, build_candidate_index
from .matcher import match_tiles, random_from
from .neighbors import (
    DOWN,
    EDGE_SIDE,
    LEFT,
    RIGHT,
    SIDE_DELTAS,
    SIDE_EDGE,
    SIDES,
    UP,
    NeighborConstraintPropagator,
)
from .tile_map import TileLayer
from .tileset import TerrainSet
from .wang_id import EMPTY_WANG_ID, WangId, opposite_index, with_slots

logger = logging.getLogger(__name__)


@dataclass
class PreviewResult:
    """Outcome of resolving a set of target WangIDs."""

    preview: TileLayer
    painted: int = 0
    unmatched: list[tuple[int, int]] = field(default_factory=list)
    # Occupied cells whose target has no labels left
    erased: list[tuple[int, int]] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        """Whether committing would modify the layer."""
        return bool(self.painted or self.erased)


# =============================================================================
# Geometry
# =============================================================================

def normalize_rect(start: tuple[int, int], end: tuple[int, int]) -> Rect:
    """Rect spanning two cells (x, y), both inclusive, in any drag direction."""
    left = min(start[0], end[0])
    top = min(start[1], end[1])
    right = max(start[0], end[0])
    bottom = max(start[1], end[1])
    return Rect(left, top, right - left + 1, bottom - top + 1)


def outward_sides(x: int, y: int, rect: Rect) -> tuple[str, ...]:
    """Sides of cell (x, y) that lie on the border of rect."""
    sides = []
    if y == rect.top:
        sides.append(UP)
    if x == rect.right - 1:
        sides.append(RIGHT)
    if y == rect.bottom - 1:
        sides.append(DOWN)
    if x == rect.left:
        sides.append(LEFT)
    return tuple(sides)


def points_on_line(
    start: tuple[int, int], end: tuple[int, int], manhattan: bool = True
) -> list[tuple[int, int]]:
    """
    Cells on a Bresenham line from start to end, both included.

    With manhattan=True every diagonal step is split into a horizontal step
    followed by a vertical one, so consecutive cells always share an edge.
    """
    x0, y0 = start
    x1, y1 = end
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    step_x = 1 if x0 < x1 else -1
    step_y = 1 if y0 < y1 else -1
    error = dx + dy

    points = [(x0, y0)]
    while (x0, y0) != (x1, y1):
        doubled = 2 * error
        move_x = doubled >= dy
        move_y = doubled <= dx
        if move_x:
            error += dy
            x0 += step_x
        if move_x and move_y and manhattan:
            points.append((x0, y0))
        if move_y:
            error += dx
            y0 += step_y
        points.append((x0, y0))
    return points


def side_toward(a: tuple[int, int], b: tuple[int, int]) -> str:
    """
    Side of cell a that faces the orthogonally adjacent cell b.

    Raises:
        ValueError: If the cells are not orthogonally adjacent
    """
    delta = (b[0] - a[0], b[1] - a[1])
    for side, side_delta in SIDE_DELTAS.items():
        if delta == side_delta:
            return side
    raise ValueError(f"Cells not orthogonally adjacent: {a} -> {b}")


# =============================================================================
# Target derivation
# =============================================================================

def rectangle_targets(
    rect: Rect, color: int, propagator: NeighborConstraintPropagator
) -> dict[tuple[int, int], WangId]:
    """
    Target WangIDs for every cell of a filled terrain rectangle.

    Interior cells get color on every slot. Border cells get color on the
    slots facing the interior and neighbor-derived (or 0) labels on the
    three slots of each side facing out, so corners of the rectangle end up
    with color on exactly three slots and straight border cells on five.
    """
    targets = {}
    for y in range(rect.top, rect.bottom):
        for x in range(rect.left, rect.right):
            targets[(x, y)] = propagator.derive_target(
                x, y, color, outward_sides(x, y, rect)
            )
    return targets


class EdgeStroke:
    """
    Edges painted so far in one edge-tool stroke.

    Painting an edge of a cell also paints the mirrored edge of the cell on
    the other side, so both tiles agree on the shared border.
    """

    def __init__(self):
        self.edges: dict[tuple[int, int], dict[int, int]] = {}

    def __bool__(self):
        return bool(self.edges)

    def clear(self):
        self.edges.clear()

    def set_edge(self, x: int, y: int, index: int, color: int) -> None:
        """Paint edge slot index of cell (x, y) with color."""
        side = EDGE_SIDE[index]
        dx, dy = SIDE_DELTAS[side]
        self.edges.setdefault((x, y), {})[index] = color
        self.edges.setdefault((x + dx, y + dy), {})[opposite_index(index)] = color

    def add_line(self, start: tuple[int, int], end: tuple[int, int], color: int) -> int:
        """
        Paint the edges joining consecutive cells of a 4-connected line.

        Returns:
            Number of edges painted
        """
        line = points_on_line(start, end, manhattan=True)
        for current, following in zip(line, line[1:]):
            side = side_toward(current, following)
            self.set_edge(current[0], current[1], SIDE_EDGE[side], color)
        return len(line) - 1

    def cells(self) -> list[tuple[int, int]]:
        return list(self.edges)


def edge_stroke_targets(
    stroke: EdgeStroke, propagator: NeighborConstraintPropagator
) -> dict[tuple[int, int], WangId]:
    """
    Target WangIDs for the cells touched by an edge stroke.

    An occupied cell keeps its current labels (as drawn) except for the
    painted slots. An empty cell takes its labels from its neighbors, so that
    unpainted sides stay consistent with what is already there.
    """
    layer = propagator.layer
    targets = {}
    for (x, y), painted in stroke.edges.items():
        if not layer.contains(x, y):
            continue
        base = propagator.cell_wang_id(x, y)
        if base is None:
            base = EMPTY_WANG_ID
            for side in SIDES:
                base = with_slots(base, propagator.constraint_from(x, y, side))
        targets[(x, y)] = with_slots(base, painted)
    return targets


# =============================================================================
# Preview and commit
# =============================================================================

def build_preview(
    layer: TileLayer,
    targets: dict[tuple[int, int], WangId],
    index: CandidateIndex,
    rng: random.Random | None = None,
    erase_empty: bool = False,
) -> PreviewResult:
    """
    Resolve target WangIDs to tiles on a fresh scratch layer.

    The preview is always built from scratch. Cells with no matching tile
    are left empty and reported in PreviewResult.unmatched.

    With erase_empty, an occupied cell whose target is all zeros is listed
    in PreviewResult.erased instead, so committing clears it. Labels are
    never stored as all zeros, so such a target could not match anyway.
    """
    result = PreviewResult(TileLayer("preview", layer.width, layer.height))
    with result.preview.edit() as edit:
        for (x, y), target in sorted(targets.items(), key=lambda item: (item[0][1], item[0][0])):
            if not layer.contains(x, y):
                continue
            if erase_empty and not any(target):
                if layer.tile_at(x, y) is not None:
                    result.erased.append((x, y))
                continue
            matches = match_tiles(target, index)
            if not matches:
                result.unmatched.append((x, y))
                continue
            choice = random_from(matches, rng)
            edit.set_tile(x, y, choice.tile, choice.flags)
            result.painted += 1
    logger.debug(
        "Preview resolved %d of %d cells, %d erased",
        result.painted, len(targets), len(result.erased),
    )
    return result


def commit_preview(
    layer: TileLayer, preview: TileLayer, erased: Iterable[tuple[int, int]] = ()
) -> int:
    """Merge a preview into the layer, clearing erased cells, as one edit session."""
    written = layer.merge(preview, erased)
    logger.info("Committed %d tiles to layer %r", written, layer.name)
    return written


def paint_stroke(
    layer: TileLayer,
    terrain_set: TerrainSet,
    color: int,
    rect: Rect,
    ignore_surroundings: bool = False,
    rng: random.Random | None = None,
    index: CandidateIndex | None = None,
) -> PreviewResult:
    """
    Paint a terrain rectangle directly into a layer.

    A zero-area rectangle or a color <= 0 is a no-op.

    Args:
        layer: Layer to paint into
        terrain_set: Terrain set to match against
        color: Terrain color to fill with
        rect: Cells to paint, in tile coordinates
        ignore_surroundings: Treat every cell around the rectangle as empty
        rng: Random source for tile selection
        index: Prebuilt candidate index for (terrain_set, color)

    Returns:
        The committed PreviewResult
    """
    if color <= 0 or rect.width <= 0 or rect.height <= 0:
        return PreviewResult(TileLayer("preview", layer.width, layer.height))

    if index is None:
        index = build_candidate_index(terrain_set, color)
    propagator = NeighborConstraintPropagator(layer, terrain_set, ignore_surroundings)
    result = build_preview(layer, rectangle_targets(rect, color, propagator), index, rng)
    commit_preview(layer, result.preview)
    return result
