"""JSON-file persistence for GameStats."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict

from .model import MAX_GUESSES, GameStats, record_game

logger = logging.getLogger(__name__)

# Older records stored "no best time yet" as the max 64-bit integer.
_LEGACY_UNSET = 2 ** 63 - 1


def stats_to_dict(stats: GameStats) -> Dict[str, Any]:
    d = asdict(stats)
    d["win_distribution"] = list(stats.win_distribution)
    return d


def stats_from_dict(d: Dict[str, Any]) -> GameStats:
    """Build GameStats from a stored dict; missing keys fall back to defaults."""
    dist = [int(x) for x in d.get("win_distribution", [])][:MAX_GUESSES]
    dist += [0] * (MAX_GUESSES - len(dist))
    best = d.get("best_time_seconds")
    if best is not None:
        best = int(best)
        if best >= _LEGACY_UNSET:
            best = None
    return GameStats(
        games_played=int(d.get("games_played", 0)),
        win_distribution=tuple(dist),
        current_streak=int(d.get("current_streak", 0)),
        max_streak=int(d.get("max_streak", 0)),
        best_time_seconds=best,
        total_time_seconds=int(d.get("total_time_seconds", 0)),
        total_wins=int(d.get("total_wins", 0)),
    )


class StatsStore:
    """
    Read/modify/write statistics kept in a single JSON file.

    A missing file means fresh stats. An unreadable one is logged and
    treated as fresh too; the next save overwrites it.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> GameStats:
        if not self.path.exists():
            return GameStats()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
            return stats_from_dict(data)
        except (OSError, ValueError, TypeError):
            logger.exception("Failed to load stats from %s; starting fresh", self.path)
            return GameStats()

    def save(self, stats: GameStats) -> str:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(stats_to_dict(stats), indent=2), encoding="utf-8")
        return str(self.path)

    def record(self, won: bool, guesses: int, seconds: int) -> GameStats:
        """Apply one finished game and persist the result."""
        stats = record_game(self.load(), won, guesses, seconds)
        self.save(stats)
        logger.info("Recorded game won=%s guesses=%d seconds=%d", won, guesses, seconds)
        return stats
