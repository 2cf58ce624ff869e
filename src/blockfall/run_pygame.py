"""Simple pygame front-end for the engine.

Run with: ``python -m blockfall.run_pygame``

Keys: arrows move/rotate, space hard-drops, ``p`` pauses and enter starts a
new game.  The module is only glue: it turns pygame key presses into key
names for :func:`blockfall.controls.dispatch`, calls :meth:`Engine.tick` on the
gravity timer and draws snapshots.
"""

from __future__ import annotations

import argparse
import logging
from typing import Iterable, Optional

import pygame

from .board import HEIGHT, WIDTH
from .controls import dispatch
from .engine import Engine
from .events import Event, GameOver, LevelUp, LinesCleared
from .game_state import Snapshot
from .highscore import HighScoreStore
from .tetromino import Tetromino
from .utils import gravity_interval_ms, render_grid

LOGGER = logging.getLogger(__name__)

# Size of a single board cell in pixels
CELL_SIZE = 30
# Width of the side panel showing the upcoming piece
PANEL_WIDTH = 6 * CELL_SIZE
# Frames per second to run the game loop at
FPS = 60

BACKGROUND = "#1a1f2c"
GRID_LINE = (50, 50, 50)

PYGAME_KEYS = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_DOWN: "down",
    pygame.K_UP: "up",
    pygame.K_SPACE: "space",
    pygame.K_p: "p",
    pygame.K_RETURN: "enter",
}


def draw_cell(screen: pygame.Surface, row: int, col: int, color: str, x0: int = 0, y0: int = 0) -> None:
    rect = pygame.Rect(x0 + col * CELL_SIZE, y0 + row * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, pygame.Color(color), rect)
    pygame.draw.rect(screen, GRID_LINE, rect, 1)


def draw_board(screen: pygame.Surface, snapshot: Snapshot) -> None:
    """Render the locked cells with the active piece overlaid."""

    grid = render_grid(snapshot.board, snapshot.active)
    for r, row in enumerate(grid):
        for c, color in enumerate(row):
            draw_cell(screen, r, c, color or BACKGROUND)


def draw_upcoming(screen: pygame.Surface, piece: Tetromino, board_px: int) -> None:
    for r, c in piece.cells():
        draw_cell(screen, r, c, piece.color, x0=board_px + CELL_SIZE, y0=CELL_SIZE)


class GameRunner:
    """Own the engine for one window and run the frame loop."""

    def __init__(self, engine: Optional[Engine] = None, store: Optional[HighScoreStore] = None) -> None:
        self.engine = engine or Engine()
        self.store = store or HighScoreStore()
        self.high_score = self.store.load()
        self._drop_timer = 0
        self._running = False

    def handle_events(self, events: Iterable[Event]) -> None:
        """Log engine events and persist a beaten high score."""

        for event in events:
            if isinstance(event, LinesCleared):
                LOGGER.info("Cleared %d row(s): +%d", event.count, event.points)
            elif isinstance(event, LevelUp):
                LOGGER.info("Level %d", event.level)
            elif isinstance(event, GameOver):
                LOGGER.info("Game over. Final score %d", event.final_score)
                if self.store.submit(event.final_score):
                    self.high_score = event.final_score

    def advance(self, dt: int) -> None:
        """Accumulate ``dt`` milliseconds and tick once the gravity delay passes."""

        state = self.engine.state
        if not state.accepts_commands() or state.paused:
            self._drop_timer = 0
            return
        self._drop_timer += dt
        if self._drop_timer >= gravity_interval_ms(state.level):
            self._drop_timer = 0
            self.handle_events(self.engine.tick().events)

    def press(self, key: str) -> None:
        result = dispatch(self.engine, key)
        if result is not None:
            self.handle_events(result.events)

    def _caption(self, snapshot: Snapshot) -> str:
        if snapshot.game_over:
            status = "Game over - Enter to restart - "
        elif not snapshot.playing:
            status = "Enter to start - "
        elif snapshot.paused:
            status = "Paused - "
        else:
            status = ""
        return (
            f"Blockfall - {status}Score: {snapshot.score}  Level: {snapshot.level}"
            f"  Lines: {snapshot.lines}  Best: {self.high_score}"
        )

    def run(self) -> None:
        pygame.init()
        board_px = WIDTH * CELL_SIZE
        screen = pygame.display.set_mode((board_px + PANEL_WIDTH, HEIGHT * CELL_SIZE))
        clock = pygame.time.Clock()
        LOGGER.info("Window opened")

        self._running = True
        while self._running:
            dt = clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._running = False
                elif event.type == pygame.KEYDOWN and event.key in PYGAME_KEYS:
                    self.press(PYGAME_KEYS[event.key])

            self.advance(dt)

            snapshot = self.engine.snapshot()
            screen.fill(pygame.Color(BACKGROUND))
            draw_board(screen, snapshot)
            draw_upcoming(screen, snapshot.upcoming, board_px)
            pygame.display.set_caption(self._caption(snapshot))
            pygame.display.flip()

        pygame.quit()
        LOGGER.info("Window closed")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play blockfall in a pygame window.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for piece selection.")
    parser.add_argument("--highscore-file", default=None, help="Where to keep the best score.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    runner = GameRunner(Engine(seed=args.seed), HighScoreStore(args.highscore_file))
    runner.run()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
