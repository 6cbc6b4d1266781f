"""Tests for high-score persistence."""

import json

import pytest

from game.defender.storage import HIGH_SCORE_KEY, JsonHighScoreStore, MemoryHighScoreStore


def test_missing_file_reads_zero(tmp_path):
    assert JsonHighScoreStore(str(tmp_path / "none.json")).read_high_score() == 0


def test_write_then_read(tmp_path):
    path = tmp_path / "scores" / "high.json"
    store = JsonHighScoreStore(str(path))
    store.write_high_score(340)
    assert store.read_high_score() == 340
    assert json.loads(path.read_text()) == {HIGH_SCORE_KEY: 340}


def test_other_keys_are_preserved(tmp_path):
    path = tmp_path / "high.json"
    path.write_text(json.dumps({"volume": 3}))
    JsonHighScoreStore(str(path)).write_high_score(20)
    assert json.loads(path.read_text()) == {"volume": 3, HIGH_SCORE_KEY: 20}


def test_corrupt_file_reads_zero(tmp_path):
    path = tmp_path / "high.json"
    path.write_text("{not json")
    assert JsonHighScoreStore(str(path)).read_high_score() == 0


def test_non_numeric_value_reads_zero(tmp_path):
    path = tmp_path / "high.json"
    path.write_text(json.dumps({HIGH_SCORE_KEY: "lots"}))
    assert JsonHighScoreStore(str(path)).read_high_score() == 0


@pytest.mark.parametrize("raw", ["Infinity", "-Infinity", "NaN", "1e400"])
def test_non_finite_value_reads_zero(tmp_path, raw):
    path = tmp_path / "high.json"
    path.write_text('{"' + HIGH_SCORE_KEY + '": ' + raw + "}")
    assert JsonHighScoreStore(str(path)).read_high_score() == 0


def test_non_object_reads_zero(tmp_path):
    path = tmp_path / "high.json"
    path.write_text("[1, 2, 3]")
    assert JsonHighScoreStore(str(path)).read_high_score() == 0


def test_write_failure_is_ignored(tmp_path):
    # A directory where the file should be makes open() fail
    path = tmp_path / "high.json"
    path.mkdir()
    store = JsonHighScoreStore(str(path))
    store.write_high_score(99)
    assert store.read_high_score() == 0


def test_memory_store_counts_writes():
    store = MemoryHighScoreStore(5)
    assert store.read_high_score() == 5
    store.write_high_score(8)
    assert store.read_high_score() == 8
    assert store.writes == 1
