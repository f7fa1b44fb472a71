"""Piece geometry tables.

A piece is described by a set of ``(dx, dy)`` offsets from the spawn anchor.
Each table pairs its shapes with a parallel tuple of colours so that shape
``i`` always spawns with colour ``i``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Tuple

from .cell import Colour

Offsets = Tuple[Tuple[int, int], ...]


class Triomino(IntEnum):
    """Indices into :data:`TRIOMINOES`."""

    BAR = 0
    RIGHT_ELBOW = 1
    LEFT_ELBOW = 2


@dataclass(frozen=True)
class ShapeTable:
    """Static table of piece shapes and their matching colours."""

    shapes: Tuple[Offsets, ...]
    colours: Tuple[Colour, ...]

    def __post_init__(self) -> None:
        if not self.shapes:
            raise ValueError("Shape table must contain at least one shape")
        if len(self.shapes) != len(self.colours):
            raise ValueError(
                f"Expected {len(self.shapes)} colours, got {len(self.colours)}"
            )

    def __len__(self) -> int:
        return len(self.shapes)

    def piece(self, index: int) -> Tuple[Offsets, Colour]:
        """Return ``(offsets, colour)`` for shape ``index``."""

        return self.shapes[index], self.colours[index]


# Anchor offset (0, 0) is part of every shape, otherwise the anchor cell itself
# stays empty on spawn.
TRIOMINOES = ShapeTable(
    shapes=(
        ((-1, 0), (0, 0), (1, 0)),
        ((0, 0), (0, 1), (1, 1)),
        ((0, 0), (-1, 1), (0, 1)),
    ),
    colours=(Colour.GREEN, Colour.BLUE, Colour.RED),
)

MONOMINOES = ShapeTable(
    shapes=(((0, 0),), ((0, 0),)),
    colours=(Colour.GREEN, Colour.BLUE),
)

SHAPE_SETS: Dict[str, ShapeTable] = {
    "triomino": TRIOMINOES,
    "monomino": MONOMINOES,
}
