"""Quarter-turn rotation of the falling piece."""

from __future__ import annotations

from typing import List, Optional

from .cell import Cell
from .world import World, cloned_cells, get_cell


class RotationBlockedError(RuntimeError):
    """Raised when a rotated cell would leave the grid or hit a settled block."""


def _pivot(world: World, cells: List[Cell]) -> Cell:
    """Return the cell the piece turns about.

    The spawn anchor tracked on ``world`` is used while it is part of the
    piece.  Otherwise fall back to the second active cell.
    """

    if world.pivot is not None:
        for cell in cells:
            if cell.position == world.pivot:
                return cell
    return cells[1]


def rotate_active_cells(world: World, cells: Optional[List[Cell]] = None) -> None:
    """Rotate the active piece by 90 degrees.

    Each cell's offset ``(dx, dy)`` from the pivot becomes ``(-dy, dx)``.  The
    whole rotation is computed in a buffer and committed at once.

    Raises:
        RotationBlockedError: If any target position is off the grid or holds
            a settled block.  The grid is left unmodified.
    """

    if cells is None:
        cells = world.active_cells()
    if len(cells) < 2:
        return

    pivot = _pivot(world, cells)
    ox, oy = pivot.position
    buffer = cloned_cells(world.cells)

    for cell in cells:
        if cell.position == pivot.position:
            continue
        x, y = cell.position
        dx, dy = x - ox, y - oy
        target = get_cell(world, (ox - dy, oy + dx))
        if target is None or not (target.active or target.is_empty):
            raise RotationBlockedError("No space for rotation")

        # The cell that rotates into this one's old position, if any.
        source = get_cell(world, (ox + dy, oy - dx))
        if source is None or not source.active:
            buffer[cell.position].clear()

        written = buffer[target.position]
        written.colour = cell.colour
        written.active = True

    world.cells = buffer
