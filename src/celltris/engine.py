"""Gravity, collision, line clearing and spawning.

All grid-wide updates follow the same pattern: clone every cell into a write
buffer, read from the live grid while writing to the buffer, then either swap
the buffer in or throw it away.  Reading and writing never touch the same
mapping within a pass.
"""

from __future__ import annotations

from dataclasses import dataclass
import random
from typing import Optional

from .cell import Colour
from .controls import GRAVITY, Vector
from .world import World, cloned_cells, relative_cell, top_cell


@dataclass(frozen=True)
class MoveResult:
    """Outcome of :func:`move_active_cells`.

    ``collided`` is ``True`` when the move was blocked.  For freezing moves
    ``rows_cleared`` and ``spawn_blocked`` describe what happened after the
    piece settled.
    """

    collided: bool
    rows_cleared: int = 0
    spawn_blocked: bool = False


def move_active_cells(
    world: World,
    forward: Vector,
    backward: Vector,
    freeze: bool = True,
    *,
    rng: Optional[random.Random] = None,
) -> MoveResult:
    """Shift every active cell by ``forward``.

    Parameters
    ----------
    world:
        Grid to update.
    forward:
        Displacement applied to each active cell.
    backward:
        Opposite of ``forward``.  A moving cell whose trailing neighbour in
        this direction is inactive (or the wall) leaves an empty cell behind.
    freeze:
        When ``True`` a collision settles the piece, clears full rows and
        spawns the next piece.  When ``False`` a collision rejects the move
        and leaves the grid untouched.
    rng:
        Random source for the respawn; defaults to the :mod:`random` module.
    """

    buffer = cloned_cells(world.cells)
    collided = False

    for position, cell in world.cells.items():
        if not cell.active:
            continue
        below = relative_cell(world, cell, forward)
        if below.position == position or below.is_settled:
            collided = True
            if freeze:
                cell.active = False
            break

        target = buffer[below.position]
        target.colour = cell.colour
        target.active = True

        above = relative_cell(world, cell, backward)
        if above.position == position or not above.active:
            buffer[position].clear()

    if not collided:
        world.cells = buffer
        if world.pivot is not None:
            px, py = world.pivot
            world.pivot = (px + forward[0], py + forward[1])
        return MoveResult(collided=False)

    if not freeze:
        return MoveResult(collided=True)

    for cell in world.cells.values():
        cell.active = False
    world.pivot = None
    cleared = check_rows_clear(world)
    spawned = spawn_block(world, rng=rng)
    return MoveResult(collided=True, rows_cleared=cleared, spawn_blocked=not spawned)


def update_world(world: World, *, rng: Optional[random.Random] = None) -> MoveResult:
    """Advance the falling piece one row (one gravity tick)."""

    forward, backward = GRAVITY
    return move_active_cells(world, forward, backward, rng=rng)


def check_rows_clear(world: World) -> int:
    """Clear every full row, scanning top to bottom, and return the count."""

    return sum(1 for y in range(world.height) if check_row_clear(world, y))


def check_row_clear(world: World, y: int) -> bool:
    """Collapse row ``y`` if it is full.

    Every cell at or above ``y`` takes the colour of the cell directly above
    it; the top row, having nothing above, becomes empty.  Rows below ``y``
    are left alone.
    """

    if any(cell.is_empty for cell in world.row(y)):
        return False

    buffer = cloned_cells(world.cells)
    for position, cell in world.cells.items():
        if position[1] > y:
            continue
        above = relative_cell(world, cell, (0, -1))
        if above.position == position:
            buffer[position].colour = Colour.EMPTY
        else:
            buffer[position].colour = above.colour
    world.cells = buffer
    return True


def spawn_block(
    world: World,
    *,
    rng: Optional[random.Random] = None,
    shape_index: Optional[int] = None,
) -> bool:
    """Place a new active piece at the top centre of ``world``.

    The shape is drawn uniformly from ``world.table`` unless ``shape_index``
    is given.  Offsets are resolved with the clamped lookup, so shapes never
    spill off narrow grids.  Returns ``False`` if the piece overwrote settled
    blocks, which the game loop treats as a top-out.
    """

    if shape_index is None:
        shape_index = (rng or random).randrange(len(world.table))
    offsets, colour = world.table.piece(shape_index)

    anchor = top_cell(world)
    targets = [relative_cell(world, anchor, offset) for offset in offsets]
    clear = not any(target.is_settled for target in targets)
    for target in targets:
        target.colour = colour
        target.active = True
    world.pivot = anchor.position
    return clear
