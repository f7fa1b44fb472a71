"""Player instructions and their key bindings."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

Vector = Tuple[int, int]


class Instruction(str, Enum):
    """Directional intents a player can send to their board."""

    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    ROTATE = "rotate"


# (forward, backward) displacement pairs for the move engine.  The backward
# vector points at the trailing neighbour that decides whether a cell's old
# position is erased.
MOVE_VECTORS: Dict[Instruction, Tuple[Vector, Vector]] = {
    Instruction.LEFT: ((-1, 0), (1, 0)),
    Instruction.RIGHT: ((1, 0), (-1, 0)),
    Instruction.DOWN: ((0, 1), (0, -1)),
}

GRAVITY = MOVE_VECTORS[Instruction.DOWN]

# Keyed by pygame key name (see ``pygame.key.key_code``).  Player 0 sits on the
# left half of the window, player 1 on the right.
PLAYER_BINDINGS: Dict[int, Dict[str, Instruction]] = {
    0: {
        "a": Instruction.LEFT,
        "d": Instruction.RIGHT,
        "s": Instruction.DOWN,
        "w": Instruction.ROTATE,
    },
    1: {
        "left": Instruction.LEFT,
        "right": Instruction.RIGHT,
        "down": Instruction.DOWN,
        "up": Instruction.ROTATE,
    },
}
