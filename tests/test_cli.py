import itertools
import json
import random
from pathlib import Path

import pytest
from apps.cli import autoplay as autoplay_cli
from apps.cli import play as play_cli
from apps.cli import solve as solve_cli
from wordleclone.datasets import WordList
from wordleclone.stats import StatsStore


def _words_file(tmp_path: Path) -> Path:
    p = tmp_path / "words.txt"
    p.write_text("apple\nalarm\nangle\ncrane\nllama\nplant\n", encoding="utf-8")
    return p


def test_solve_cli_lists_matches(tmp_path: Path, capsys):
    rc = solve_cli.main(["--words", str(_words_file(tmp_path)), "--green", "A____", "--gray", "r"])
    out = capsys.readouterr().out
    assert rc == 0
    assert out.splitlines()[0] == "Matches Found: 2"
    assert "APPLE" in out and "ANGLE" in out and "ALARM" not in out


def test_solve_cli_bad_template(tmp_path: Path, capsys):
    rc = solve_cli.main(["--words", str(_words_file(tmp_path)), "--green", "AB"])
    assert rc == 2


def test_solve_cli_missing_words(tmp_path: Path):
    assert solve_cli.main(["--words", str(tmp_path / "missing.txt")]) == 1


def test_play_session_records_stats(tmp_path: Path):
    lines = iter(["cr", "CRANE", "n"])
    written = []
    clock = itertools.count()
    store = StatsStore(tmp_path / "stats.json")

    finished = play_cli.play(
        WordList(["CRANE"]),
        store,
        read_line=lambda prompt: next(lines),
        write=written.append,
        rng=random.Random(1),
        clock=lambda: float(next(clock)),
    )

    text = "\n".join(written)
    assert finished == 1
    assert "Not enough letters" in text
    assert "YOU WON!" in text and "Answer: CRANE" in text
    stats = store.load()
    assert stats.games_played == 1 and stats.win_distribution[0] == 1


def test_play_quits_on_eof(tmp_path: Path):
    def eof(prompt):
        raise EOFError

    assert play_cli.play(WordList(["CRANE"]), StatsStore(tmp_path / "s.json"), read_line=eof,
                         write=lambda s: None) == 0


def test_play_main_fails_without_word_list(tmp_path: Path, capsys):
    rc = play_cli.main(["--words", str(tmp_path / "missing.txt"), "--stats", str(tmp_path / "s.json")])
    assert rc == 1
    assert "failed to load word list" in capsys.readouterr().err


def _autoplay(tmp_path: Path, outdir: Path, *extra):
    argv = ["--words", str(_words_file(tmp_path)), "--sample", "3", "--outdir", str(outdir)]
    return autoplay_cli.main(argv + list(extra))


def test_autoplay_writes_csv_and_manifest(tmp_path: Path, capsys):
    outdir = tmp_path / "reports"
    assert _autoplay(tmp_path, outdir, "--progress", "off") == 0

    csvs = list(outdir.glob("autoplay_*.csv"))
    manifests = list(outdir.glob("autoplay_*_manifest.json"))
    assert len(csvs) == 1 and len(manifests) == 1
    manifest = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert manifest["summary"]["games"] == 3
    assert manifest["word_list"]["passed"] is True
    assert manifest["strategy_id"] == "letter_freq"
    assert "N=5" in capsys.readouterr().out


def test_autoplay_progress_bar(tmp_path: Path, capsys):
    outdir = tmp_path / "bar"
    assert _autoplay(tmp_path, outdir, "--progress", "bar", "--strategy", "first") == 0
    assert "Playing" in capsys.readouterr().err
    manifest = json.loads(next(outdir.glob("autoplay_*_manifest.json")).read_text(encoding="utf-8"))
    assert manifest["summary"]["games"] == 3


def test_autoplay_rejects_empty_sample(tmp_path: Path):
    with pytest.raises(SystemExit) as exc:
        autoplay_cli.main(["--words", str(_words_file(tmp_path)), "--sample", "0",
                           "--outdir", str(tmp_path / "r")])
    assert exc.value.code == 2
    assert not (tmp_path / "r").exists()
