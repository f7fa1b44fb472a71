import numpy as np
import pytest

from celltris.cell import Colour
from celltris.engine import spawn_block, update_world
from celltris.rotation import RotationBlockedError, rotate_active_cells
from celltris.shapes import Triomino
from celltris.world import World, create_cells


def blank_world(width=10, height=20):
    return World(create_cells(width, height), (width, height))


def paint(world, positions, colour=Colour.GREEN, active=True):
    for position in positions:
        cell = world.cells[position]
        cell.colour = colour
        cell.active = active


def active_positions(world):
    return {cell.position for cell in world.active_cells()}


def test_bar_turns_about_its_centre():
    world = blank_world()
    paint(world, [(4, 5), (5, 5), (6, 5)])
    world.pivot = (5, 5)

    rotate_active_cells(world)

    assert active_positions(world) == {(5, 4), (5, 5), (5, 6)}
    assert world.cells[(4, 5)].is_empty
    assert world.cells[(6, 5)].is_empty
    assert all(cell.colour is Colour.GREEN for cell in world.active_cells())


def test_without_tracked_pivot_second_active_cell_is_used():
    world = blank_world()
    paint(world, [(4, 5), (5, 5), (6, 5)])
    assert world.pivot is None

    rotate_active_cells(world)

    assert active_positions(world) == {(5, 4), (5, 5), (5, 6)}


def test_pivot_that_is_not_active_falls_back_to_second_cell():
    world = blank_world()
    paint(world, [(4, 5), (5, 5), (6, 5)])
    world.pivot = (0, 0)

    rotate_active_cells(world)

    assert active_positions(world) == {(5, 4), (5, 5), (5, 6)}


@pytest.mark.parametrize("shape", list(Triomino))
def test_four_rotations_restore_the_piece(shape):
    world = blank_world()
    spawn_block(world, shape_index=shape)
    for _ in range(3):
        update_world(world)
    colours_before = world.colour_grid()
    mask_before = world.active_mask()

    for _ in range(4):
        rotate_active_cells(world)

    assert np.array_equal(world.colour_grid(), colours_before)
    assert np.array_equal(world.active_mask(), mask_before)


def test_right_elbow_quarter_turn():
    world = blank_world()
    spawn_block(world, shape_index=Triomino.RIGHT_ELBOW)
    for _ in range(5):
        update_world(world)
    assert active_positions(world) == {(5, 5), (5, 6), (6, 6)}

    rotate_active_cells(world)

    assert active_positions(world) == {(5, 5), (4, 5), (4, 6)}
    assert world.cells[(6, 6)].is_empty
    assert world.cells[(5, 6)].is_empty


def test_rotation_off_the_grid_is_rejected():
    world = blank_world()
    spawn_block(world, shape_index=Triomino.BAR)
    cells_before = world.cells
    colours_before = world.colour_grid()
    mask_before = world.active_mask()

    with pytest.raises(RotationBlockedError, match="No space for rotation"):
        rotate_active_cells(world)

    assert world.cells is cells_before
    assert np.array_equal(world.colour_grid(), colours_before)
    assert np.array_equal(world.active_mask(), mask_before)


def test_rotation_into_settled_block_is_rejected():
    world = blank_world()
    paint(world, [(4, 5), (5, 5), (6, 5)])
    paint(world, [(5, 6)], colour=Colour.RED, active=False)
    world.pivot = (5, 5)
    colours_before = world.colour_grid()

    with pytest.raises(RotationBlockedError):
        rotate_active_cells(world)

    assert np.array_equal(world.colour_grid(), colours_before)


def test_old_position_cleared_when_inverse_source_is_off_grid():
    world = blank_world()
    paint(world, [(0, 4), (0, 5)])
    world.pivot = (0, 5)

    rotate_active_cells(world)

    assert active_positions(world) == {(0, 5), (1, 5)}
    assert world.cells[(0, 4)].is_empty


def test_single_cell_rotation_is_a_no_op():
    world = blank_world()
    paint(world, [(3, 3)])
    cells_before = world.cells

    rotate_active_cells(world)

    assert world.cells is cells_before
    assert active_positions(world) == {(3, 3)}


def test_grid_invariant_holds_after_rotations():
    world = blank_world(6, 8)
    spawn_block(world, shape_index=Triomino.LEFT_ELBOW)
    for _ in range(3):
        update_world(world)

    for _ in range(4):
        rotate_active_cells(world)
        expected = {(x, y) for x in range(6) for y in range(8)}
        assert set(world.cells) == expected
        assert all(cell.position == key for key, cell in world.cells.items())
        assert len(world.active_cells()) == 3

    # A rejected rotation keeps the invariant as well
    paint(world, [(2, 2)], colour=Colour.RED, active=False)
    with pytest.raises(RotationBlockedError):
        rotate_active_cells(world)
    assert set(world.cells) == {(x, y) for x in range(6) for y in range(8)}
