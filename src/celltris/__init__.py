"""Cell-based falling block puzzle engine."""

from .cell import Cell, Colour, Position
from .shapes import ShapeTable, Triomino, TRIOMINOES, MONOMINOES
from .world import World, make_world, get_cell, relative_cell, top_cell
from .engine import (
    MoveResult,
    move_active_cells,
    update_world,
    check_rows_clear,
    check_row_clear,
    spawn_block,
)
from .rotation import RotationBlockedError, rotate_active_cells
from .controls import Instruction
from .config import GameConfig
from .game_state import GameSession
from .utils import render_grid

__all__ = [
    "Cell",
    "Colour",
    "Position",
    "ShapeTable",
    "Triomino",
    "TRIOMINOES",
    "MONOMINOES",
    "World",
    "make_world",
    "get_cell",
    "relative_cell",
    "top_cell",
    "MoveResult",
    "move_active_cells",
    "update_world",
    "check_rows_clear",
    "check_row_clear",
    "spawn_block",
    "RotationBlockedError",
    "rotate_active_cells",
    "Instruction",
    "GameConfig",
    "GameSession",
    "render_grid",
]
