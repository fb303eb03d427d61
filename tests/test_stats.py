import json
from pathlib import Path

from wordleclone.stats import GameStats, StatsStore, record_game


def test_fresh_stats():
    s = GameStats()
    assert s.games_played == 0
    assert s.win_distribution == (0, 0, 0, 0, 0, 0)
    assert s.best_time_seconds is None
    assert s.win_percentage == 0 and s.average_time_seconds == 0


def test_win_updates_everything():
    s = record_game(GameStats(), won=True, guesses=3, seconds=40)
    assert s.games_played == 1 and s.total_wins == 1
    assert s.win_distribution == (0, 0, 1, 0, 0, 0)
    assert s.current_streak == 1 and s.max_streak == 1
    assert s.best_time_seconds == 40 and s.total_time_seconds == 40


def test_loss_resets_streak_only():
    s = record_game(GameStats(), True, 2, 30)
    s = record_game(s, True, 4, 50)
    s = record_game(s, False, 6, 99)
    assert s.games_played == 3 and s.total_wins == 2
    assert s.current_streak == 0 and s.max_streak == 2
    assert s.total_time_seconds == 80 and s.best_time_seconds == 30
    assert s.win_percentage == 66
    assert s.average_time_seconds == 40


def test_best_time_takes_minimum():
    s = record_game(GameStats(), True, 1, 90)
    s = record_game(s, True, 1, 20)
    s = record_game(s, True, 1, 60)
    assert s.best_time_seconds == 20
    assert s.win_distribution[0] == 3


def test_guess_count_clamps_into_last_bucket():
    s = record_game(GameStats(), True, 9, 10)
    assert s.win_distribution == (0, 0, 0, 0, 0, 1)


def test_store_missing_file_is_fresh(tmp_path: Path):
    assert StatsStore(tmp_path / "none.json").load() == GameStats()


def test_store_round_trip(tmp_path: Path):
    store = StatsStore(tmp_path / "sub" / "stats.json")
    store.record(True, 3, 25)
    store.record(False, 6, 80)
    s = store.load()
    assert s.games_played == 2
    assert s.win_distribution == (0, 0, 1, 0, 0, 0)
    assert s.best_time_seconds == 25
    data = json.loads((tmp_path / "sub" / "stats.json").read_text(encoding="utf-8"))
    assert data["win_distribution"] == [0, 0, 1, 0, 0, 0]


def test_store_unset_best_time_is_null(tmp_path: Path):
    store = StatsStore(tmp_path / "stats.json")
    store.record(False, 6, 10)
    assert json.loads(store.path.read_text(encoding="utf-8"))["best_time_seconds"] is None


def test_store_corrupt_file_falls_back(tmp_path: Path, caplog):
    p = tmp_path / "stats.json"
    p.write_text("{not json", encoding="utf-8")
    assert StatsStore(p).load() == GameStats()
    assert "Failed to load stats" in caplog.text


def test_store_reads_legacy_sentinel(tmp_path: Path):
    p = tmp_path / "stats.json"
    p.write_text(json.dumps({"games_played": 4, "best_time_seconds": 2 ** 63 - 1}), encoding="utf-8")
    s = StatsStore(p).load()
    assert s.games_played == 4 and s.best_time_seconds is None
