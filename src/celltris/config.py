"""Game configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .shapes import SHAPE_SETS, ShapeTable


@dataclass
class GameConfig:
    """Settings shared by every board in a game."""

    width: int = 10
    height: int = 20
    players: int = 1
    # Frames between automatic gravity steps
    ticks_per_update: int = 10
    fps: int = 60
    # Size of a single board cell in pixels
    cell_size: int = 30
    # Horizontal gap between boards in pixels
    gap: int = 40
    shape_set: str = "triomino"
    seed: Optional[int] = None

    @property
    def table(self) -> ShapeTable:
        return SHAPE_SETS[self.shape_set]

    def validate(self) -> "GameConfig":
        """Return ``self`` after checking the values are usable.

        Raises:
            ValueError: If any setting is out of range.
        """

        if self.width < 1 or self.height < 1:
            raise ValueError(f"Board must be at least 1x1, got {self.width}x{self.height}")
        if self.players not in (1, 2):
            raise ValueError(f"Only 1 or 2 players are supported, got {self.players}")
        if self.ticks_per_update < 1:
            raise ValueError("ticks_per_update must be positive")
        if self.fps < 1 or self.cell_size < 1 or self.gap < 0:
            raise ValueError("fps and cell_size must be positive and gap non-negative")
        if self.shape_set not in SHAPE_SETS:
            raise ValueError(
                f"Unknown shape set {self.shape_set!r}; choose from {sorted(SHAPE_SETS)}"
            )
        return self
