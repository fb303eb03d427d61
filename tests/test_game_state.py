import random

import pytest
from wordleclone.datasets import WordList
from wordleclone.engine import LetterStatus
from wordleclone.engine.validation import NOT_ENOUGH_LETTERS, NOT_IN_WORD_LIST
from wordleclone.game import (
    GameStatus, KeyEvent, KeyKind, MESSAGE_SECONDS, SUBMIT,
    clear_expired_message, delete_letter, new_game, outcome, parse_keys, reduce, type_letter,
)

WORDS = WordList(["ALARM", "LLAMA", "CRANE", "SLATE", "APPLE", "PLANT", "ANGLE", "ABIDE"])


def _enter(state, text, now=0.0):
    for ev in parse_keys(text):
        state = reduce(state, ev, WORDS, now)
    return state


def test_new_game_is_empty_and_playing():
    s = new_game(WORDS, target="alarm", now=5.0)
    assert s.target == "ALARM"
    assert s.status is GameStatus.PLAYING
    assert (s.row, s.col) == (0, 0)
    assert all(c.letter == " " for row in s.board for c in row)
    assert s.started_at == 5.0
    assert outcome(s) is None


def test_new_game_picks_target_from_words():
    s = new_game(WORDS, rng=random.Random(0))
    assert s.target in WORDS


def test_new_game_needs_words():
    with pytest.raises(ValueError):
        new_game(WordList([]))


def test_typing_and_deleting():
    s = new_game(WORDS, target="ALARM")
    s = type_letter(type_letter(s, "c"), "r")
    assert s.entry == "CR"
    s = delete_letter(s)
    assert s.entry == "C" and s.col == 1
    assert delete_letter(delete_letter(s)).col == 0


def test_reducers_do_not_mutate_input():
    s0 = new_game(WORDS, target="ALARM")
    s1 = type_letter(s0, "A")
    assert s0.col == 0 and s0.board[0][0].letter == " "
    assert s1.col == 1


def test_sixth_letter_is_ignored():
    s = new_game(WORDS, target="ALARM")
    for ch in "CRANES":
        s = type_letter(s, ch)
    assert s.entry == "CRANE"


def test_incomplete_guess_raises_transient_message():
    s = _enter(new_game(WORDS, target="ALARM"), "CRA", now=10.0)
    assert s.message == NOT_ENOUGH_LETTERS
    assert s.status is GameStatus.PLAYING
    assert s.row == 0 and s.entry == "CRA"
    assert clear_expired_message(s, 10.0 + MESSAGE_SECONDS - 0.1).message == NOT_ENOUGH_LETTERS
    assert clear_expired_message(s, 10.0 + MESSAGE_SECONDS).message is None


def test_unknown_word_is_rejected():
    s = _enter(new_game(WORDS, target="ALARM"), "ZZZZZ")
    assert s.message == NOT_IN_WORD_LIST
    assert s.row == 0 and s.results == ()


def test_accepted_guess_fills_row_and_keyboard():
    s = _enter(new_game(WORDS, target="ALARM"), "LLAMA")
    assert s.row == 1 and s.col == 0
    assert [c.status for c in s.board[0]] == [
        LetterStatus.ABSENT, LetterStatus.CORRECT, LetterStatus.CORRECT,
        LetterStatus.MISPLACED, LetterStatus.MISPLACED,
    ]
    assert s.keys["L"] is LetterStatus.CORRECT


def test_win_on_matching_guess():
    s = new_game(WORDS, target="ALARM", now=100.0)
    s = _enter(s, "CRANE", now=110.0)
    s = _enter(s, "ALARM", now=142.5)
    assert s.status is GameStatus.WON
    res = outcome(s)
    assert res.won is True and res.guesses == 2 and res.seconds == 42


def test_loss_only_after_sixth_guess():
    s = new_game(WORDS, target="ALARM")
    for i, g in enumerate(["LLAMA", "CRANE", "SLATE", "APPLE", "PLANT"]):
        s = _enter(s, g)
        assert s.status is GameStatus.PLAYING, f"ended early after guess {i + 1}"
    s = _enter(s, "ANGLE")
    assert s.status is GameStatus.LOST
    res = outcome(s)
    assert res.won is False and res.guesses == 6


def test_win_on_sixth_guess_is_a_win():
    s = new_game(WORDS, target="ALARM")
    for g in ["LLAMA", "CRANE", "SLATE", "APPLE", "PLANT", "ALARM"]:
        s = _enter(s, g)
    assert s.status is GameStatus.WON


def test_terminal_state_ignores_keys():
    s = _enter(new_game(WORDS, target="ALARM"), "ALARM")
    assert reduce(s, KeyEvent.letter_key("c"), WORDS, 0.0) is s
    assert reduce(s, SUBMIT, WORDS, 0.0) is s
    assert delete_letter(s) is s


def test_parse_keys():
    evs = parse_keys("cra<n")
    assert [e.kind for e in evs] == [KeyKind.LETTER] * 3 + [KeyKind.DELETE, KeyKind.LETTER, KeyKind.SUBMIT]
    assert parse_keys("ab", submit=False)[-1].letter == "B"
    with pytest.raises(ValueError):
        KeyEvent.letter_key("1")


def test_new_game_rejects_non_ascii_target():
    with pytest.raises(ValueError):
        new_game(WORDS, target="ÉCLAT")
