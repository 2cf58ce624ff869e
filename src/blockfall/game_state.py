"""High level game state container and the snapshots handed to the host."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .board import Board, ColorGrid
from .events import Event
from .tetromino import Tetromino


@dataclass
class GameState:
    """Mutable state for a single game session.

    Owned exclusively by an :class:`~blockfall.engine.Engine`; hosts only ever
    see it through a :class:`Snapshot`.
    """

    board: Board = field(default_factory=Board)
    active: Optional[Tetromino] = None
    upcoming: Optional[Tetromino] = None
    score: int = 0
    level: int = 1
    lines: int = 0
    game_over: bool = False
    paused: bool = False
    playing: bool = False

    def accepts_commands(self) -> bool:
        """Return ``True`` while a started game has not ended."""

        return self.playing and not self.game_over

    def snapshot(self) -> "Snapshot":
        assert self.upcoming is not None
        return Snapshot(
            board=self.board.colors(),
            active=self.active,
            upcoming=self.upcoming,
            score=self.score,
            level=self.level,
            lines=self.lines,
            game_over=self.game_over,
            paused=self.paused,
            playing=self.playing,
        )


@dataclass(frozen=True)
class Snapshot:
    """Immutable view of the engine state used for rendering and persistence."""

    board: ColorGrid
    active: Optional[Tetromino]
    upcoming: Tetromino
    score: int
    level: int
    lines: int
    game_over: bool
    paused: bool
    playing: bool


@dataclass(frozen=True)
class StepResult:
    """Outcome of one engine command: the new snapshot and what happened."""

    snapshot: Snapshot
    events: Tuple[Event, ...] = ()
