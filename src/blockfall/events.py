"""Events reported by engine commands for the host to act on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class LinesCleared:
    count: int
    points: int


@dataclass(frozen=True)
class LevelUp:
    level: int


@dataclass(frozen=True)
class GameOver:
    final_score: int


Event = Union[LinesCleared, LevelUp, GameOver]
