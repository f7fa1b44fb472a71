"""Command line entry point for celltris.

Run with: `python -m celltris`

By default this prints a single ASCII frame of each board after advancing a
few frames, useful as a minimal smoke test without a display.  Pass
``--pygame`` to open a window and play.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .config import GameConfig
from .game_state import GameSession
from .shapes import SHAPE_SETS
from .utils import render_grid


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="celltris", description=__doc__)
    parser.add_argument("--players", type=int, default=1, help="Number of boards (1 or 2).")
    parser.add_argument("--width", type=int, default=10, help="Board width in cells.")
    parser.add_argument("--height", type=int, default=20, help="Board height in cells.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for piece selection.")
    parser.add_argument(
        "--shapes",
        choices=sorted(SHAPE_SETS),
        default="triomino",
        help="Piece set to spawn from.",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=10,
        help="Frames between gravity steps.",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=0,
        help="Frames to simulate before printing (ASCII mode only).",
    )
    parser.add_argument("--pygame", action="store_true", help="Open a pygame window.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        width=args.width,
        height=args.height,
        players=args.players,
        ticks_per_update=args.ticks,
        shape_set=args.shapes,
        seed=args.seed,
    ).validate()


def print_boards(sessions: List[GameSession]) -> None:
    frames = [render_grid(session.world) for session in sessions]
    for rows in zip(*frames):
        print("   ".join(rows))


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = config_from_args(args)

    if args.pygame:
        from .run_pygame import main as run_window

        run_window(config)
        return

    sessions = [
        GameSession(config, player=i if config.players > 1 else None)
        for i in range(config.players)
    ]
    for _ in range(max(0, args.frames)):
        for session in sessions:
            session.frame()
    print_boards(sessions)


if __name__ == "__main__":
    main()
