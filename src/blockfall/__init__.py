"""Falling-block puzzle engine."""

from .board import Board
from .tetromino import Tetromino, TetrominoType, rotate_matrix
from .scoring import score_for, level_for
from .events import GameOver, LevelUp, LinesCleared
from .game_state import GameState, Snapshot, StepResult
from .engine import Direction, Engine
from .utils import gravity_interval_ms, render_grid

__all__ = [
    "Board",
    "Tetromino",
    "TetrominoType",
    "rotate_matrix",
    "score_for",
    "level_for",
    "GameOver",
    "LevelUp",
    "LinesCleared",
    "GameState",
    "Snapshot",
    "StepResult",
    "Direction",
    "Engine",
    "gravity_interval_ms",
    "render_grid",
]
