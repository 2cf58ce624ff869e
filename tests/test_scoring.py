import pytest

from blockfall.scoring import level_for, score_for


def test_scoring_table():
    assert [score_for(n) for n in range(5)] == [0, 100, 300, 500, 800]


@pytest.mark.parametrize("lines", [-1, 5])
def test_score_outside_table_raises(lines):
    with pytest.raises(ValueError):
        score_for(lines)


def test_level_advances_every_10_lines():
    assert level_for(0) == 1
    assert level_for(9) == 1
    assert level_for(10) == 2
    assert level_for(25) == 3


def test_level_never_decreases():
    levels = [level_for(n) for n in range(200)]
    assert levels == sorted(levels)
