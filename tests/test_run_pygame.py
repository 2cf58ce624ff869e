import itertools

import pytest

pytest.importorskip("pygame")

from blockfall.engine import Engine
from blockfall.events import GameOver, LinesCleared
from blockfall.highscore import HighScoreStore
from blockfall.run_pygame import GameRunner, parse_args
from blockfall.tetromino import TetrominoType


class SequenceRandom:
    def __init__(self, kinds):
        self._kinds = itertools.cycle(kinds)

    def choice(self, _seq):
        return next(self._kinds)


def make_runner(tmp_path):
    engine = Engine(rng=SequenceRandom([TetrominoType.O]))
    return GameRunner(engine, HighScoreStore(tmp_path / "best.json"))


def test_gravity_timer_ticks_after_interval(tmp_path):
    runner = make_runner(tmp_path)
    runner.press("enter")
    runner.advance(799)
    assert runner.engine.snapshot().active.position == (0, 4)
    runner.advance(1)
    assert runner.engine.snapshot().active.position == (1, 4)


def test_timer_resets_while_paused(tmp_path):
    runner = make_runner(tmp_path)
    runner.press("enter")
    runner.advance(500)
    runner.press("p")
    runner.advance(5000)
    runner.press("p")
    runner.advance(400)
    assert runner.engine.snapshot().active.position == (0, 4)


def test_game_over_saves_high_score(tmp_path):
    runner = make_runner(tmp_path)
    runner.handle_events([LinesCleared(1, 100), GameOver(1200)])
    assert runner.high_score == 1200
    assert runner.store.load() == 1200

    runner.handle_events([GameOver(50)])
    assert runner.high_score == 1200
    assert runner.store.load() == 1200


def test_parse_args_defaults():
    args = parse_args([])
    assert args.seed is None
    assert args.log_level == "INFO"
