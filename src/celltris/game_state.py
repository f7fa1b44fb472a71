"""Per-player game loop state."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import random
from typing import Optional

from .config import GameConfig
from .controls import Instruction, MOVE_VECTORS
from .engine import MoveResult, move_active_cells, update_world
from .rotation import RotationBlockedError, rotate_active_cells
from .world import World, make_world

LOGGER = logging.getLogger(__name__)


@dataclass
class GameSession:
    """Mutable state for one player's board.

    The session owns everything that used to live in loose globals: the
    frame counter driving gravity, the random source used for spawns and the
    world itself.
    """

    config: GameConfig = field(default_factory=GameConfig)
    player: Optional[int] = None
    ticks: int = 0
    pieces: int = 0
    rng: random.Random = field(init=False, repr=False)
    world: World = field(init=False, repr=False)

    def __post_init__(self) -> None:
        seed = self.config.seed
        if seed is not None:
            seed += self.player or 0
        self.rng = random.Random(seed)
        self.reset()

    def reset(self) -> None:
        """Start a fresh board for this player."""

        self.world = make_world(
            self.config.width,
            self.config.height,
            player=self.player,
            table=self.config.table,
            rng=self.rng,
        )
        self.ticks = 0
        self.pieces = 0
        LOGGER.info("Player %s: new game on a %dx%d board", self._label, *self.world.dimensions)

    @property
    def _label(self) -> str:
        return "-" if self.player is None else str(self.player)

    def queue(self, instruction: Instruction) -> None:
        """Defer ``instruction`` to the next :meth:`frame`.  Last one wins."""

        self.world.pending = instruction

    def apply(self, instruction: Instruction) -> bool:
        """Run ``instruction`` immediately.

        Returns ``False`` when the move or rotation was blocked.
        """

        if instruction is Instruction.ROTATE:
            try:
                rotate_active_cells(self.world)
            except RotationBlockedError as exc:
                LOGGER.debug("Player %s: %s", self._label, exc)
                return False
            return True

        forward, backward = MOVE_VECTORS[instruction]
        freeze = instruction is Instruction.DOWN
        result = move_active_cells(self.world, forward, backward, freeze, rng=self.rng)
        if freeze:
            self._after_gravity(result)
        return not result.collided

    def frame(self) -> Optional[MoveResult]:
        """Advance one rendered frame.

        Any pending instruction is applied first.  Every
        ``config.ticks_per_update`` frames the piece falls one row; the
        resulting :class:`MoveResult` is returned, otherwise ``None``.
        """

        pending = self.world.pending
        if pending is not None:
            self.world.pending = None
            self.apply(pending)

        self.ticks += 1
        if self.ticks < self.config.ticks_per_update:
            return None
        self.ticks = 0
        result = update_world(self.world, rng=self.rng)
        self._after_gravity(result)
        return result

    def _after_gravity(self, result: MoveResult) -> None:
        if not result.collided:
            return
        self.pieces += 1
        if result.rows_cleared:
            LOGGER.info("Player %s: cleared %d row(s)", self._label, result.rows_cleared)
        if result.spawn_blocked:
            LOGGER.info("Player %s: game over after %d pieces. Resetting.", self._label, self.pieces)
            self.reset()
