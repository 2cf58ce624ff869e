"""Command API driving a game session.

:class:`Engine` is the only entry point for hosts.  Every command runs to
completion synchronously and returns a :class:`~blockfall.game_state.StepResult`
carrying an immutable snapshot plus the events the command produced.  Rejected
moves and rotations are silent no-ops; the only terminal condition is a new
piece colliding at its spawn position.

The engine does no locking of its own: hosts must serialise calls, typically
from a single event or timer loop.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from .board import HEIGHT, WIDTH, Board
from .events import Event, GameOver, LevelUp, LinesCleared
from .game_state import GameState, Snapshot, StepResult
from .scoring import level_for, score_for
from .tetromino import RandomSource, Tetromino, random_type


LOGGER = logging.getLogger(__name__)


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"


# (row, col) offsets for each direction.
_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
}


class Engine:
    """Owns one :class:`GameState` and applies commands to it."""

    def __init__(
        self,
        *,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
        width: int = WIDTH,
        height: int = HEIGHT,
    ) -> None:
        self._rng: RandomSource = rng if rng is not None else random.Random(seed)
        self._width = width
        self._height = height
        self.state = GameState(board=Board(width, height))
        self.state.upcoming = self._spawn()

    # Internal helpers -------------------------------------------------
    def _spawn(self) -> Tetromino:
        return Tetromino.spawn(random_type(self._rng), self._width)

    def _result(self, events: Optional[List[Event]] = None) -> StepResult:
        return StepResult(self.state.snapshot(), tuple(events or ()))

    def _can_steer(self, command: str) -> bool:
        state = self.state
        if not state.accepts_commands() or state.paused:
            LOGGER.debug(
                "Ignoring %s (playing=%s, game_over=%s, paused=%s)",
                command,
                state.playing,
                state.game_over,
                state.paused,
            )
            return False
        return True

    def _lock(self) -> List[Event]:
        """Lock the active piece, score cleared rows and spawn the next piece."""

        state = self.state
        assert state.active is not None and state.upcoming is not None
        events: List[Event] = []

        state.board.merge(state.active)
        cleared = state.board.clear_lines()
        LOGGER.debug("Locked %s at %s", state.active.shape.value, state.active.position)

        if cleared:
            points = score_for(cleared)
            state.score += points
            state.lines += cleared
            events.append(LinesCleared(cleared, points))
            LOGGER.debug("Cleared %d row(s) for %d points", cleared, points)
            level = level_for(state.lines)
            if level > state.level:
                state.level = level
                events.append(LevelUp(level))
                LOGGER.info("Reached level %d", level)

        state.active = state.upcoming
        state.upcoming = self._spawn()

        if state.board.collides(state.active.matrix, state.active.position):
            state.game_over = True
            state.playing = False
            events.append(GameOver(state.score))
            LOGGER.info("Game over with score %d", state.score)
        return events

    # Public API -------------------------------------------------------
    def snapshot(self) -> Snapshot:
        return self.state.snapshot()

    def start(self) -> StepResult:
        """Begin a fresh game, discarding whatever came before."""

        self.state = GameState(board=Board(self._width, self._height))
        self.state.active = self._spawn()
        self.state.upcoming = self._spawn()
        self.state.playing = True
        LOGGER.info("Game started")
        return self._result()

    def move(self, direction: Union[Direction, str]) -> StepResult:
        """Shift the active piece one cell; a blocked downward move locks it.

        Raises:
            ValueError: If ``direction`` is not ``left``, ``right`` or ``down``.
        """

        direction = Direction(direction)
        if not self._can_steer(f"move {direction.value}"):
            return self._result()

        active = self.state.active
        assert active is not None
        dy, dx = _OFFSETS[direction]
        candidate = active.move(dy, dx)
        if not self.state.board.collides(candidate.matrix, candidate.position):
            self.state.active = candidate
            return self._result()
        if direction is Direction.DOWN:
            return self._result(self._lock())
        return self._result()

    def rotate(self) -> StepResult:
        """Rotate the active piece clockwise unless the result would collide."""

        if not self._can_steer("rotate"):
            return self._result()
        active = self.state.active
        assert active is not None
        rotated = active.rotate()
        if not self.state.board.collides(rotated.matrix, rotated.position):
            self.state.active = rotated
        return self._result()

    def hard_drop(self) -> StepResult:
        """Drop the active piece as far as it goes and lock it immediately."""

        if not self._can_steer("hard drop"):
            return self._result()
        active = self.state.active
        assert active is not None
        board = self.state.board
        row, col = active.position
        while not board.collides(active.matrix, (row + 1, col)):
            row += 1
        self.state.active = active.at((row, col))
        return self._result(self._lock())

    def tick(self) -> StepResult:
        """Apply one step of gravity."""

        return self.move(Direction.DOWN)

    def toggle_pause(self) -> StepResult:
        if self.state.accepts_commands():
            self.state.paused = not self.state.paused
            LOGGER.debug("Paused" if self.state.paused else "Resumed")
        return self._result()
