"""Cell definitions for the celltris grid.

Every square of the playfield is a :class:`Cell`.  There is no separate piece
object: the falling piece is simply the set of cells whose ``active`` flag is
set.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

Position = Tuple[int, int]  # (x, y)


class Colour(str, Enum):
    """Palette of cell colours.  ``EMPTY`` marks an unoccupied cell."""

    EMPTY = "black"
    GREEN = "green"
    BLUE = "blue"
    RED = "red"

    @property
    def code(self) -> int:
        """Integer stored in numpy snapshots; ``0`` is always ``EMPTY``."""

        return _COLOUR_CODES[self]

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return _COLOUR_RGB[self]


_COLOUR_CODES = {colour: i for i, colour in enumerate(Colour)}

_COLOUR_RGB = {
    Colour.EMPTY: (0, 0, 0),
    Colour.GREEN: (0, 255, 0),
    Colour.BLUE: (0, 0, 255),
    Colour.RED: (255, 0, 0),
}


@dataclass
class Cell:
    """One grid square."""

    position: Position
    colour: Colour = Colour.EMPTY
    active: bool = False

    @property
    def is_empty(self) -> bool:
        return self.colour is Colour.EMPTY

    @property
    def is_settled(self) -> bool:
        """``True`` for a frozen block: coloured but no longer falling."""

        return not self.active and self.colour is not Colour.EMPTY

    def clear(self) -> None:
        self.colour = Colour.EMPTY
        self.active = False
