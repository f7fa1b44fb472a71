"""pygame front-end for celltris.

Draws one board per player side by side and maps key presses onto the
engine's move and rotate entry points.  With two players each board has its
own key set (``WASD`` on the left, the arrow keys on the right); a single
player may use either.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Optional, Sequence, Tuple

import pygame

from .config import GameConfig
from .controls import Instruction, PLAYER_BINDINGS
from .cell import Colour
from .game_state import GameSession
from .world import World

LOGGER = logging.getLogger(__name__)

# Colour of the strip between boards
BACKGROUND = (40, 40, 40)

KeyMap = Dict[int, Tuple[int, Instruction]]


def _key_constant(name: str) -> int:
    """Return the pygame key constant for a binding name such as ``"left"``."""

    attr = f"K_{name}" if len(name) == 1 else f"K_{name.upper()}"
    return getattr(pygame, attr)


def build_keymap(players: int) -> KeyMap:
    """Map pygame key codes to ``(board index, instruction)`` pairs."""

    keymap: KeyMap = {}
    for player, bindings in PLAYER_BINDINGS.items():
        board = player if players > 1 else 0
        for name, instruction in bindings.items():
            keymap[_key_constant(name)] = (board, instruction)
    return keymap


def board_rects(config: GameConfig) -> List[pygame.Rect]:
    """Return the screen rectangle of every board, left to right."""

    width = config.width * config.cell_size
    height = config.height * config.cell_size
    return [
        pygame.Rect(i * (width + config.gap), 0, width, height)
        for i in range(config.players)
    ]


def window_size(config: GameConfig) -> Tuple[int, int]:
    rects = board_rects(config)
    return rects[-1].right, rects[-1].bottom


def draw_world(surface: pygame.Surface, world: World) -> None:
    """Clear ``surface`` and draw one filled rectangle per cell."""

    surface.fill(Colour.EMPTY.rgb)
    surface_w, surface_h = surface.get_size()
    for (x, y), cell in world.cells.items():
        left = x * surface_w // world.width
        top = y * surface_h // world.height
        right = (x + 1) * surface_w // world.width
        bottom = (y + 1) * surface_h // world.height
        pygame.draw.rect(surface, cell.colour.rgb, pygame.Rect(left, top, right - left, bottom - top))


def handle_key(event: pygame.event.Event, sessions: Sequence[GameSession], keymap: KeyMap) -> bool:
    """Apply the instruction bound to ``event.key``.

    Returns ``False`` if the key is unbound or the move was blocked.
    """

    binding = keymap.get(event.key)
    if binding is None:
        return False
    board, instruction = binding
    return sessions[board].apply(instruction)


class GameRunner:
    """Manage the game loop with start/pause/resume/stop controls."""

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = (config or GameConfig()).validate()
        self._running = False
        self._paused = False
        self._task: asyncio.Task | None = None
        self._screen: pygame.Surface | None = None
        self._boards: List[pygame.Surface] = []
        self._clock: pygame.time.Clock | None = None
        self.sessions: List[GameSession] = []
        self.keymap: KeyMap = {}

    @property
    def running(self) -> bool:
        return self._running

    @property
    def paused(self) -> bool:
        return self._paused

    def new_game(self) -> None:
        """Create one session per player and the key map routing input to them."""

        players = self.config.players
        self.sessions = [
            GameSession(self.config, player=i if players > 1 else None)
            for i in range(players)
        ]
        self.keymap = build_keymap(players)

    def step(self) -> None:
        """Advance every board by one frame unless paused."""

        if self._paused:
            return
        for session in self.sessions:
            session.frame()

    def draw(self) -> None:
        if self._screen is None:
            return
        self._screen.fill(BACKGROUND)
        for surface, session in zip(self._boards, self.sessions):
            draw_world(surface, session.world)
        pygame.display.flip()

    def _handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.stop()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.stop()
            elif event.key == pygame.K_p:
                if self._paused:
                    self.resume()
                else:
                    self.pause()
            elif not self._paused:
                handle_key(event, self.sessions, self.keymap)

    async def _run_loop(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode(window_size(self.config))
        pygame.display.set_caption("celltris")
        self._boards = [self._screen.subsurface(rect) for rect in board_rects(self.config)]
        self._clock = pygame.time.Clock()

        self.new_game()
        LOGGER.info("Game started with %d player(s)", self.config.players)

        self._running = True
        while self._running:
            self._clock.tick(self.config.fps)
            # Even when paused, process events so the window remains responsive
            for event in pygame.event.get():
                self._handle_event(event)
            self.step()
            self.draw()
            # Yield to the host event loop
            await asyncio.sleep(0)

        pygame.quit()
        LOGGER.info("Game stopped")

    def start(self) -> None:
        if self._task and not self._task.done():
            LOGGER.warning("Game already running")
            return
        self._paused = False
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No running loop (plain Python); run until the window closes
            asyncio.run(self._run_loop())
        else:
            self._task = loop.create_task(self._run_loop())

    def pause(self) -> None:
        if not self._running:
            LOGGER.info("Pause ignored: game not running")
            return
        self._paused = True
        LOGGER.info("Paused")

    def resume(self) -> None:
        if not self._running:
            LOGGER.info("Resume ignored: game not running")
            return
        self._paused = False
        LOGGER.info("Resumed")

    def stop(self) -> None:
        if not self._running:
            LOGGER.info("Stop ignored: game not running")
            return
        # The loop notices the flag on its next frame
        self._running = False


def main(config: Optional[GameConfig] = None) -> None:
    """Open a window and play until it is closed."""

    GameRunner(config).start()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
