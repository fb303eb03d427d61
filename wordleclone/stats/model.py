"""
Player statistics and their update rule.

`record_game` is pure: it takes the current GameStats and one finished
game and returns the next GameStats. Persistence lives in `store.py`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

MAX_GUESSES = 6


@dataclass(frozen=True)
class GameStats:
    games_played: int = 0
    win_distribution: Tuple[int, ...] = (0,) * MAX_GUESSES  # wins in 1 guess, 2 guesses, ...
    current_streak: int = 0
    max_streak: int = 0
    best_time_seconds: Optional[int] = None  # None until the first win
    total_time_seconds: int = 0               # summed over wins only
    total_wins: int = 0

    @property
    def win_percentage(self) -> int:
        if self.games_played <= 0:
            return 0
        return self.total_wins * 100 // self.games_played

    @property
    def average_time_seconds(self) -> int:
        if self.total_wins <= 0:
            return 0
        return self.total_time_seconds // self.total_wins


def record_game(stats: GameStats, won: bool, guesses: int, seconds: int) -> GameStats:
    """
    Fold one finished game into `stats`.

    Win: bump the distribution bucket for `guesses` (anything above 6 lands
    in the last bucket), total wins, streaks and times.
    Loss: only games played moves, and the current streak resets.
    """
    played = stats.games_played + 1
    if not won:
        return replace(stats, games_played=played, current_streak=0)

    bucket = min(max(guesses, 1), MAX_GUESSES) - 1
    dist = list(stats.win_distribution)
    dist[bucket] += 1
    streak = stats.current_streak + 1
    seconds = max(0, int(seconds))
    best = seconds if stats.best_time_seconds is None else min(stats.best_time_seconds, seconds)

    return replace(
        stats,
        games_played=played,
        win_distribution=tuple(dist),
        current_streak=streak,
        max_streak=max(stats.max_streak, streak),
        best_time_seconds=best,
        total_time_seconds=stats.total_time_seconds + seconds,
        total_wins=stats.total_wins + 1,
    )
