import csv
from pathlib import Path

import pytest
from wordleclone.datasets import WordList
from wordleclone.harness import create_strategy, get_strategy_ids, run_batch, run_case, summarize, write_csv
from wordleclone.harness.strategies import BaseStrategy, register

WORDS = WordList(["CRANE", "RAISE", "STARE", "TRACE", "CARED", "SLATE"])


@pytest.mark.parametrize("strategy_id", ["first", "random", "letter_freq"])
def test_run_case_wins_small_list(strategy_id):
    strategy = create_strategy(strategy_id)
    r = run_case(strategy, "CRANE", words=WORDS, seed=42)
    assert r["success"] is True
    assert 1 <= r["guesses"] <= 6
    assert r["history"][-1] == ("CRANE", "GGGGG")
    # candidate pool never grows
    assert r["candidates"] == sorted(r["candidates"], reverse=True)


def test_first_strategy_follows_word_list_order():
    r = run_case(create_strategy("first"), "CRANE", words=WORDS)
    assert r["guesses"] == 1


def test_run_batch_and_summary():
    results = run_batch(create_strategy("letter_freq"), WORDS, words=WORDS, seed=7, sample=4)
    assert [r["answer"] for r in results] == list(WORDS)[:4]
    s = summarize(results)
    assert s["games"] == 4 and s["wins"] == 4 and s["win_rate"] == 1.0


def test_unknown_strategy():
    assert get_strategy_ids() == sorted(get_strategy_ids())
    with pytest.raises(ValueError):
        create_strategy("nope")


def test_duplicate_registration_rejected():
    with pytest.raises(ValueError):
        @register
        class Again(BaseStrategy):
            id = "first"


def test_write_csv(tmp_path: Path):
    r = run_case(create_strategy("first"), "STARE", words=WORDS)
    r["strategy_id"] = "first"
    path = write_csv([r], str(tmp_path / "out" / "run.csv"))
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["answer"] == "STARE"
    assert rows[0]["strategy"] == "first"
    assert rows[0]["guess_1"] == "CRANE"
    assert rows[0]["patt_1"].startswith("'")
    assert rows[0]["guess_6"] == ""


def test_accented_word_in_source_list_does_not_break_self_play():
    words = WordList(["éclat", "crane"])
    r = run_case(create_strategy("first"), "CRANE", words=words)
    assert r["success"] is True and r["guesses"] == 1
