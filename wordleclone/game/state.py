"""
Game progression as an immutable value plus pure reducers.

    PLAYING --(guess == target)--------------> WON
    PLAYING --(6th guess, no match)----------> LOST
    WON / LOST --(new_game)------------------> PLAYING (fresh target, empty board)

Every reducer takes a GameState and returns a new one; nothing is mutated
in place. Rejected submissions (too short, unknown word) keep the game in
PLAYING and only raise a transient message that `clear_expired_message`
drops after MESSAGE_SECONDS. Terminal states ignore all key events.

Timestamps are caller-supplied (`now`) so reducers stay deterministic;
the CLIs pass time.monotonic().
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Container, Mapping, NamedTuple, Optional, Sequence, Tuple

from wordleclone.engine import EvaluationResult, LetterStatus, evaluate, merge_key_states
from wordleclone.engine.validation import NOT_ENOUGH_LETTERS, rejection_reason
from .events import KeyEvent, KeyKind

WORD_LENGTH = 5
MAX_GUESSES = 6
MESSAGE_SECONDS = 2.0


class GameStatus(str, Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class Cell(NamedTuple):
    letter: str = " "
    status: LetterStatus = LetterStatus.UNKNOWN


Row = Tuple[Cell, ...]
Board = Tuple[Row, ...]

EMPTY_ROW: Row = (Cell(),) * WORD_LENGTH
EMPTY_BOARD: Board = (EMPTY_ROW,) * MAX_GUESSES


class GameOutcome(NamedTuple):
    """What a finished game contributes to statistics."""
    won: bool
    guesses: int
    seconds: int


@dataclass(frozen=True)
class GameState:
    target: str
    board: Board = EMPTY_BOARD
    row: int = 0
    col: int = 0
    status: GameStatus = GameStatus.PLAYING
    keys: Mapping[str, LetterStatus] = field(default_factory=lambda: MappingProxyType({}))
    results: Tuple[EvaluationResult, ...] = ()
    message: Optional[str] = None
    message_expires: Optional[float] = None
    started_at: float = 0.0
    finished_at: Optional[float] = None

    @property
    def entry(self) -> str:
        """Letters typed so far on the current row."""
        return "".join(c.letter for c in self.board[self.row][: self.col])

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.PLAYING


def new_game(words: Sequence[str], *, rng: random.Random | None = None,
             target: str | None = None, now: float | None = None) -> GameState:
    """
    Start a fresh game with a random target from `words` (or the given one).

    Raises ValueError when there is nothing to pick from; the game cannot
    start without a loaded word list.
    """
    if target is None:
        if not len(words):
            raise ValueError("cannot start a game: the word list is empty")
        target = (rng or random).choice(list(words))
    target = target.strip().upper()
    if len(target) != WORD_LENGTH or not (target.isascii() and target.isalpha()):
        raise ValueError(f"target must be {WORD_LENGTH} letters A-Z; got {target!r}")
    return GameState(target=target, started_at=time.monotonic() if now is None else now)


def _set_cell(board: Board, row: int, col: int, cell: Cell) -> Board:
    r = board[row][:col] + (cell,) + board[row][col + 1:]
    return board[:row] + (r,) + board[row + 1:]


def _set_row(board: Board, row: int, cells: Row) -> Board:
    return board[:row] + (cells,) + board[row + 1:]


def with_message(state: GameState, msg: str, now: float) -> GameState:
    return replace(state, message=msg, message_expires=now + MESSAGE_SECONDS)


def clear_expired_message(state: GameState, now: float) -> GameState:
    if state.message is None or state.message_expires is None or now < state.message_expires:
        return state
    return replace(state, message=None, message_expires=None)


def type_letter(state: GameState, letter: str) -> GameState:
    if state.is_over or state.col >= WORD_LENGTH:
        return state
    ch = letter.upper()
    if len(ch) != 1 or not "A" <= ch <= "Z":
        raise ValueError(f"not an A-Z letter: {letter!r}")
    board = _set_cell(state.board, state.row, state.col, Cell(ch))
    return replace(state, board=board, col=state.col + 1)


def delete_letter(state: GameState) -> GameState:
    if state.is_over or state.col == 0:
        return state
    board = _set_cell(state.board, state.row, state.col - 1, Cell())
    return replace(state, board=board, col=state.col - 1)


def submit(state: GameState, words: Container[str], now: float) -> GameState:
    """
    Submit the current row.

    Short entries and words outside `words` are rejected with a transient
    message. An accepted guess is evaluated, written to the board, folded
    into the keyboard, and may end the game.
    """
    if state.is_over:
        return state
    if state.col != WORD_LENGTH:
        return with_message(state, NOT_ENOUGH_LETTERS, now)

    guess = state.entry
    reason = rejection_reason(guess, words, WORD_LENGTH)
    if reason is not None:
        return with_message(state, reason, now)

    result = evaluate(guess, state.target)
    board = _set_row(state.board, state.row, tuple(Cell(ch, st) for ch, st in result))
    keys = MappingProxyType(merge_key_states(state.keys, result))
    state = replace(state, board=board, keys=keys, results=state.results + (result,))

    if guess == state.target:
        return replace(state, status=GameStatus.WON, finished_at=now)
    if state.row == MAX_GUESSES - 1:
        return replace(state, status=GameStatus.LOST, finished_at=now)
    return replace(state, row=state.row + 1, col=0)


def reduce(state: GameState, event: KeyEvent, words: Container[str], now: float) -> GameState:
    """Apply one key event."""
    if event.kind is KeyKind.LETTER:
        return type_letter(state, event.letter or "")
    if event.kind is KeyKind.DELETE:
        return delete_letter(state)
    if event.kind is KeyKind.SUBMIT:
        return submit(state, words, now)
    raise ValueError(f"unknown key event: {event!r}")


def outcome(state: GameState) -> Optional[GameOutcome]:
    """None while playing; otherwise the (won, guesses, seconds) record for stats."""
    if not state.is_over:
        return None
    elapsed = (state.finished_at or state.started_at) - state.started_at
    return GameOutcome(
        won=state.status is GameStatus.WON,
        guesses=len(state.results),
        seconds=max(0, int(elapsed)),
    )
