"""Utility helpers for the celltris engine."""

from __future__ import annotations

from typing import List

from .cell import Colour
from .world import World

_GLYPHS = {colour.code: colour.value[0] for colour in Colour if colour is not Colour.EMPTY}
_GLYPHS[Colour.EMPTY.code] = "."


def render_grid(world: World) -> List[str]:
    """Return the world as one string per row.

    Empty cells are ``.``; coloured cells use the first letter of their colour,
    upper case while falling and lower case once settled.
    """

    grid = world.colour_grid()
    active = world.active_mask()
    rows: List[str] = []
    for codes, flags in zip(grid, active):
        glyphs = (_GLYPHS[int(code)] for code in codes)
        rows.append(
            "".join(g.upper() if flag else g for g, flag in zip(glyphs, flags))
        )
    return rows
