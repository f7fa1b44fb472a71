"""Grid representation for the celltris playfield."""

from __future__ import annotations

from dataclasses import dataclass, replace
import random
from typing import Dict, List, Optional

import numpy as np
from numpy.typing import NDArray

from .cell import Cell, Position
from .controls import Instruction, Vector
from .shapes import ShapeTable, TRIOMINOES

Cells = Dict[Position, Cell]
Grid = NDArray[np.uint8]


def create_cells(width: int, height: int) -> Cells:
    """Return one empty, inactive cell per position.

    Cells are inserted column by column (``x`` outer, ``y`` inner).  The
    engine iterates in this order, so it also decides which active cell is
    "second" when no pivot is tracked.
    """

    cells: Cells = {}
    for x in range(width):
        for y in range(height):
            cells[(x, y)] = Cell((x, y))
    return cells


def cloned_cells(cells: Cells) -> Cells:
    """Return a write buffer holding an independent copy of every cell."""

    return {position: replace(cell) for position, cell in cells.items()}


@dataclass
class World:
    """One player's grid together with the falling piece's bookkeeping."""

    cells: Cells
    dimensions: tuple[int, int]
    player: Optional[int] = None
    pending: Optional[Instruction] = None
    table: ShapeTable = TRIOMINOES
    pivot: Optional[Position] = None

    @property
    def width(self) -> int:
        return self.dimensions[0]

    @property
    def height(self) -> int:
        return self.dimensions[1]

    def active_cells(self) -> List[Cell]:
        """Return the cells of the falling piece in mapping order."""

        return [cell for cell in self.cells.values() if cell.active]

    def row(self, y: int) -> List[Cell]:
        return [self.cells[(x, y)] for x in range(self.width)]

    def colour_grid(self) -> Grid:
        """Return an ``(height, width)`` array of colour codes.

        ``0`` represents an empty cell; see :attr:`Colour.code`.
        """

        grid = np.zeros((self.height, self.width), dtype=np.uint8)
        for (x, y), cell in self.cells.items():
            grid[y, x] = cell.colour.code
        return grid

    def active_mask(self) -> NDArray[np.bool_]:
        """Return an ``(height, width)`` boolean array of active flags."""

        mask = np.zeros((self.height, self.width), dtype=bool)
        for (x, y), cell in self.cells.items():
            mask[y, x] = cell.active
        return mask


def make_world(
    width: int,
    height: int,
    *,
    player: Optional[int] = None,
    table: ShapeTable = TRIOMINOES,
    rng: Optional[random.Random] = None,
) -> World:
    """Create a ``width`` x ``height`` world and spawn its first piece.

    Raises:
        ValueError: If either dimension is smaller than one.
    """

    if width < 1 or height < 1:
        raise ValueError(f"World dimensions must be positive, got {width}x{height}")

    # engine imports this module
    from .engine import spawn_block

    world = World(create_cells(width, height), (width, height), player=player, table=table)
    spawn_block(world, rng=rng)
    return world


def get_cell(world: World, position: Position) -> Optional[Cell]:
    """Return the cell at ``position`` or ``None`` if it is off the grid."""

    return world.cells.get(position)


def relative_cell(world: World, cell: Cell, displacement: Vector) -> Cell:
    """Return the neighbour of ``cell`` at ``displacement``.

    Both axes are clamped into the grid independently.  A cell on the border
    asked for a neighbour beyond it therefore gets itself back, which callers
    use as the wall/floor sentinel.
    """

    dx, dy = displacement
    x, y = cell.position
    rx = min(max(x + dx, 0), world.width - 1)
    ry = min(max(y + dy, 0), world.height - 1)
    return world.cells[(rx, ry)]


def top_cell(world: World) -> Cell:
    """Return the spawn anchor at the top centre of the grid."""

    return world.cells[(world.width // 2, 0)]
