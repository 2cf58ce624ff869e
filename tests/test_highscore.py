import logging

import pytest

from blockfall.highscore import ENV_VAR, HighScoreStore, default_path


def test_missing_file_means_zero(tmp_path):
    assert HighScoreStore(tmp_path / "best.json").load() == 0


def test_submit_only_keeps_better_scores(tmp_path):
    store = HighScoreStore(tmp_path / "nested" / "best.json")
    assert store.submit(500) is True
    assert store.submit(300) is False
    assert store.submit(500) is False
    assert store.load() == 500
    assert HighScoreStore(store.path).load() == 500


def test_corrupt_file_raises(tmp_path, caplog):
    path = tmp_path / "best.json"
    path.write_text("not json", encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="blockfall.highscore"):
        with pytest.raises(ValueError):
            HighScoreStore(path).load()
    assert str(path) in caplog.text


def test_default_path_honours_environment(monkeypatch, tmp_path):
    target = tmp_path / "score.json"
    monkeypatch.setenv(ENV_VAR, str(target))
    assert default_path() == target
    assert HighScoreStore().path == target
