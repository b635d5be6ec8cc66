"""
Wang Terrain Tools - Map Model

In-memory tile map: layers, cells, scoped edit sessions and layer-tree walks.
The terrain algorithms only read cells through tile_at/flags_at and only
write through LayerEdit, so any host map can stand in for these classes.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from pygame import Rect

from .tileset import Tile, Tileset
from .transform import FlipFlags


@dataclass(frozen=True)
class Cell:
    """A placed tile with its flip flags."""

    tile: Tile
    flags: FlipFlags = FlipFlags.NONE


class Layer:
    """Base class for map layers."""

    is_tile_layer = False
    is_group_layer = False

    def __init__(self, name: str = ""):
        self.name = name


class TileLayer(Layer):
    """A grid of cells. Cells outside the layer bounds are always empty."""

    is_tile_layer = True

    def __init__(self, name: str = "", width: int = 0, height: int = 0):
        super().__init__(name)
        self.width = width
        self.height = height
        self._cells: dict[tuple[int, int], Cell] = {}

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> Cell | None:
        return self._cells.get((x, y))

    def tile_at(self, x: int, y: int) -> Tile | None:
        cell = self._cells.get((x, y))
        return cell.tile if cell else None

    def flags_at(self, x: int, y: int) -> FlipFlags:
        cell = self._cells.get((x, y))
        return cell.flags if cell else FlipFlags.NONE

    def cells(self) -> Iterator[tuple[tuple[int, int], Cell]]:
        """Occupied cells in row-major order."""
        for pos in sorted(self._cells, key=lambda p: (p[1], p[0])):
            yield pos, self._cells[pos]

    def is_empty(self) -> bool:
        return not self._cells

    def region(self) -> list[Rect]:
        """
        Rectangles covering the occupied cells, one per horizontal run.

        Returns:
            List of pygame Rects in tile coordinates
        """
        rects: list[Rect] = []
        run_start: tuple[int, int] | None = None
        run_end_x = 0
        for (x, y), _cell in self.cells():
            if run_start is not None and y == run_start[1] and x == run_end_x + 1:
                run_end_x = x
                continue
            if run_start is not None:
                rects.append(
                    Rect(run_start[0], run_start[1], run_end_x - run_start[0] + 1, 1)
                )
            run_start = (x, y)
            run_end_x = x
        if run_start is not None:
            rects.append(Rect(run_start[0], run_start[1], run_end_x - run_start[0] + 1, 1))
        return rects

    def used_tilesets(self) -> list[Tileset]:
        """Tilesets referenced by this layer's cells, in first-use order."""
        seen: dict[int, Tileset] = {}
        for _pos, cell in self.cells():
            seen.setdefault(cell.tile.tileset.uid, cell.tile.tileset)
        return list(seen.values())

    def edit(self) -> "LayerEdit":
        return LayerEdit(self)

    def merge(self, preview: "TileLayer", erased: Iterable[tuple[int, int]] = ()) -> int:
        """
        Copy every occupied cell of preview onto this layer and clear the
        erased cells, in one edit session.

        Returns:
            Number of cells written
        """
        with self.edit() as edit:
            for (x, y), cell in preview.cells():
                edit.set_tile(x, y, cell.tile, cell.flags)
            for x, y in erased:
                edit.set_tile(x, y, None)
            return len(edit)

    def snapshot(self) -> dict[tuple[int, int], Cell]:
        return dict(self._cells)

    def restore(self, snapshot: dict[tuple[int, int], Cell]) -> None:
        self._cells = dict(snapshot)

    def _write(self, x: int, y: int, tile: Tile | None, flags: FlipFlags):
        if not self.contains(x, y):
            return
        if tile is None:
            self._cells.pop((x, y), None)
        else:
            self._cells[(x, y)] = Cell(tile, FlipFlags(flags))


class LayerEdit:
    """
    Buffered edit session for a tile layer.

    Changes become visible on apply(). Used as a context manager, the edit is
    applied when the block exits normally and discarded if it raises.
    """

    def __init__(self, layer: TileLayer):
        self.layer = layer
        self._pending: dict[tuple[int, int], tuple[Tile | None, FlipFlags]] = {}

    def set_tile(self, x: int, y: int, tile: Tile | None, flags: int = 0):
        self._pending[(x, y)] = (tile, FlipFlags(flags))

    def __len__(self):
        return len(self._pending)

    def apply(self):
        for (x, y), (tile, flags) in self._pending.items():
            self.layer._write(x, y, tile, flags)
        self._pending.clear()

    def discard(self):
        self._pending.clear()

    def __enter__(self) -> "LayerEdit":
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.apply()
        else:
            self.discard()
        return False


class LayerGroup(Layer):
    """Ordered container of layers, bottom-most first."""

    is_group_layer = True

    def __init__(self, name: str = "", layers: list[Layer] | None = None):
        super().__init__(name)
        self.layers: list[Layer] = list(layers or [])

    @property
    def layer_count(self) -> int:
        return len(self.layers)

    def layer_at(self, index: int) -> Layer:
        return self.layers[index]

    def add_layer(self, layer: Layer) -> Layer:
        self.layers.append(layer)
        return layer


class TileMap(LayerGroup):
    """An orthogonal tile map."""

    def __init__(self, width: int, height: int, tile_width: int, tile_height: int):
        super().__init__("map")
        self.width = width
        self.height = height
        self.tile_width = tile_width
        self.tile_height = tile_height

    def new_tile_layer(self, name: str = "") -> TileLayer:
        """Create a map-sized tile layer on top of the stack."""
        layer = TileLayer(name, self.width, self.height)
        self.add_layer(layer)
        return layer

    def tile_layers(self) -> list[TileLayer]:
        return walk_layers(self, lambda layer: layer.is_tile_layer, first_only=False)

    def used_tilesets(self) -> list[Tileset]:
        seen: dict[int, Tileset] = {}
        for layer in self.tile_layers():
            for tileset in layer.used_tilesets():
                seen.setdefault(tileset.uid, tileset)
        return list(seen.values())

    def snapshot(self) -> list[tuple[TileLayer, dict]]:
        return [(layer, layer.snapshot()) for layer in self.tile_layers()]

    def restore(self, snapshot: list[tuple[TileLayer, dict]]) -> None:
        for layer, cells in snapshot:
            layer.restore(cells)


def walk_layers(
    root: LayerGroup,
    predicate: Callable[[Layer], bool],
    first_only: bool = True,
):
    """
    Depth-first search of a layer tree, bottom-most layers first.

    Uses an explicit stack, so arbitrarily deep group nesting is fine.

    Args:
        root: Map or group layer to search
        predicate: Test applied to every non-root layer
        first_only: Return the first match (or None) instead of all matches

    Returns:
        First matching layer or None if first_only, else a list of matches
    """
    matches = []
    stack = list(reversed(root.layers))
    while stack:
        layer = stack.pop()
        if predicate(layer):
            if first_only:
                return layer
            matches.append(layer)
        if layer.is_group_layer:
            stack.extend(reversed(layer.layers))
    return None if first_only else matches


def find_bottom_tile_layer(root: LayerGroup) -> TileLayer | None:
    """Bottom-most tile layer of a map, searching inside groups."""
    return walk_layers(root, lambda layer: layer.is_tile_layer, first_only=True)
