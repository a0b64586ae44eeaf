"""core/grid.py — Road surface: cells, passability, world↔cell mapping.

The pursuit core never builds a surface; it only talks to anything that
satisfies :class:`GridSurface`.  :class:`TileGrid` is the concrete
implementation used by the encounter host and the tests.

Cell coordinates are ``(x, y)`` integers.  World positions are
``pygame.math.Vector2``.  A cell covers the half-open square
``[origin + cell * size, origin + (cell + 1) * size)``.
"""

from __future__ import annotations
import math
from typing import Iterable, Iterator, NamedTuple, Protocol

from pygame.math import Vector2

from core.constants import ASCII_TILES, PASSABLE_TILES, TILE_VOID


class Cell(NamedTuple):
    """Integer grid coordinate (value type — hashable, comparable)."""
    x: int
    y: int


class GridSurface(Protocol):
    """Read-only passability oracle over integer cells.

    Implementations must be deterministic and side-effect free for a
    given static level so multiple agents can query them freely.
    """

    def is_passable(self, cell: Cell) -> bool: ...

    def world_to_cell(self, pos: Vector2) -> Cell: ...

    def cell_center_to_world(self, cell: Cell) -> Vector2: ...


class TileGrid:
    """Rectangular tile map; ``tiles[y][x]`` holds a tile ID.

    Row 0 is the *bottom* row (lowest world ``y``).  Anything outside
    the map, and any tile not in *passable*, is blocked.
    """

    def __init__(self, tiles: list[list[int]], *,
                 cell_size: float = 1.0,
                 origin: tuple[float, float] = (0.0, 0.0),
                 passable: Iterable[int] = PASSABLE_TILES):
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")
        self.tiles = tiles
        self.height = len(tiles)
        self.width = max((len(row) for row in tiles), default=0)
        self.cell_size = float(cell_size)
        self.origin = Vector2(origin)
        self.passable = frozenset(passable)

    # -- Construction helpers --

    @classmethod
    def from_ascii(cls, lines: str | list[str], **kw) -> "TileGrid":
        """Build a grid from an ASCII picture (first line = top row).

        Legend: ``.`` road, ``#`` obstacle, space / ``~`` void.  Short
        lines are padded with void.
        """
        if isinstance(lines, str):
            lines = [ln for ln in lines.splitlines() if ln.strip("\n")]
        width = max((len(ln) for ln in lines), default=0)
        rows: list[list[int]] = []
        for ln in reversed(lines):
            row = [ASCII_TILES.get(ch, TILE_VOID) for ch in ln]
            row.extend([TILE_VOID] * (width - len(row)))
            rows.append(row)
        return cls(rows, **kw)

    @classmethod
    def filled(cls, width: int, height: int, tile: int, **kw) -> "TileGrid":
        """A *width*×*height* grid where every cell holds *tile*."""
        return cls([[tile] * width for _ in range(height)], **kw)

    # -- GridSurface --

    def is_passable(self, cell: Cell) -> bool:
        return self.tile_at(cell) in self.passable

    def world_to_cell(self, pos: Vector2) -> Cell:
        local = (Vector2(pos) - self.origin) / self.cell_size
        return Cell(int(math.floor(local.x)), int(math.floor(local.y)))

    def cell_center_to_world(self, cell: Cell) -> Vector2:
        return Vector2(
            self.origin.x + (cell[0] + 0.5) * self.cell_size,
            self.origin.y + (cell[1] + 0.5) * self.cell_size,
        )

    # -- Queries --

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= y < self.height and 0 <= x < len(self.tiles[y])

    def tile_at(self, cell: Cell) -> int:
        """Tile ID at *cell*; ``TILE_VOID`` outside the map."""
        if not self.in_bounds(cell):
            return TILE_VOID
        return self.tiles[cell[1]][cell[0]]

    def set_tile(self, cell: Cell, tile: int) -> None:
        """Paint *tile* at *cell* (level setup only — agents assume a static map)."""
        if not self.in_bounds(cell):
            raise IndexError(f"cell {tuple(cell)} outside {self.width}x{self.height} grid")
        self.tiles[cell[1]][cell[0]] = tile

    def passable_cells(self) -> Iterator[Cell]:
        """Yield every passable cell, bottom row first."""
        for y, row in enumerate(self.tiles):
            for x, tile in enumerate(row):
                if tile in self.passable:
                    yield Cell(x, y)

    def __repr__(self) -> str:
        return (f"TileGrid({self.width}x{self.height}, "
                f"cell_size={self.cell_size}, origin={tuple(self.origin)})")
