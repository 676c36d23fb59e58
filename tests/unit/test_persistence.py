import json
from pathlib import Path

from grid_tron.persistence import (
    InMemoryHighScoreStore,
    InMemoryScoreSink,
    JsonHighScoreStore,
    SubmittedScore,
)


def test_in_memory_store_never_decreases() -> None:
    store = InMemoryHighScoreStore()
    assert store.load() == 0
    store.save(5)
    store.save(3)
    assert store.load() == 5


def test_json_store_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "scores" / "local.json"
    store = JsonHighScoreStore(path)
    assert store.load() == 0
    store.save(12)
    assert JsonHighScoreStore(path).load() == 12
    assert json.loads(path.read_text())["tronHighScore"] == 12


def test_json_store_ignores_lower_scores(tmp_path: Path) -> None:
    store = JsonHighScoreStore(tmp_path / "local.json")
    store.save(9)
    store.save(4)
    assert store.load() == 9


def test_json_store_preserves_other_keys(tmp_path: Path) -> None:
    path = tmp_path / "local.json"
    path.write_text(json.dumps({"volume": 3}))
    JsonHighScoreStore(path).save(2)
    assert json.loads(path.read_text()) == {"tronHighScore": 2, "volume": 3}


def test_json_store_malformed_file_reads_zero(tmp_path: Path) -> None:
    path = tmp_path / "local.json"
    path.write_text("{not json")
    assert JsonHighScoreStore(path).load() == 0
    path.write_text(json.dumps({"tronHighScore": "abc"}))
    assert JsonHighScoreStore(path).load() == 0


def test_in_memory_sink_records() -> None:
    sink = InMemoryScoreSink()
    sink.submit_score("u1", "Flynn", 7)
    assert sink.submissions == [SubmittedScore("u1", "Flynn", 7)]
