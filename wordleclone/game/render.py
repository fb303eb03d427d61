"""
Plain-text rendering for the terminal front-end.

Board rows show the letters with the G/Y/- pattern underneath once a row
has been submitted. Keys on the keyboard are shown as the letter when
untouched, lowercase when ABSENT, and wrapped as [A] / (A) for CORRECT /
MISPLACED.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from wordleclone.engine import LetterStatus, key_status, pattern
from wordleclone.engine.keyboard import KEYBOARD_ROWS
from wordleclone.stats import GameStats
from .state import GameState, GameStatus


def render_board(state: GameState) -> str:
    lines: List[str] = []
    for i, row in enumerate(state.board):
        letters = " ".join(c.letter if c.letter.strip() else "_" for c in row)
        if i < len(state.results):
            lines.append(f"{letters}   {pattern(state.results[i])}")
        else:
            lines.append(letters)
    return "\n".join(lines)


def _key_label(letter: str, status: LetterStatus) -> str:
    if status is LetterStatus.CORRECT:
        return f"[{letter}]"
    if status is LetterStatus.MISPLACED:
        return f"({letter})"
    if status is LetterStatus.ABSENT:
        return f" {letter.lower()} "
    return f" {letter} "


def render_keyboard(state: GameState) -> str:
    rows = []
    for i, keys in enumerate(KEYBOARD_ROWS):
        rows.append(" " * i + "".join(_key_label(k, key_status(state.keys, k)) for k in keys))
    return "\n".join(rows)


def render_stats(stats: GameStats, state: GameState) -> str:
    """Text version of the end-of-game dialog."""
    headline = "YOU WON!" if state.status is GameStatus.WON else "GAME OVER"
    best = "-" if stats.best_time_seconds is None else str(stats.best_time_seconds)
    dist = "  ".join(f"{i}:{n}" for i, n in enumerate(stats.win_distribution, start=1))
    return "\n".join([
        headline,
        f"Answer: {state.target}",
        f"Played {stats.games_played} | Win % {stats.win_percentage}% "
        f"| Streak {stats.current_streak} | Max {stats.max_streak}",
        f"Guesses  {dist}",
        f"Avg Time: {stats.average_time_seconds}s | Best Time: {best}s",
    ])


def chunked(items: Sequence[str], size: int) -> Iterable[Sequence[str]]:
    for i in range(0, len(items), size):
        yield items[i:i + size]


def render_matches(words: Sequence[str], per_row: int = 4) -> str:
    """Solver output: a count header followed by the words, `per_row` per line."""
    lines = [f"Matches Found: {len(words)}"]
    lines += ["  ".join(row) for row in chunked(words, per_row)]
    return "\n".join(lines)
