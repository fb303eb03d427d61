"""
Self-play harness.

- run_case:  play one game against a known target, letting a strategy pick
             every guess from the solver's current matches.
- run_batch: run many targets in sequence (optionally a sample prefix).

Games go through the same reducers a human player drives, so the 6-guess
limit and dictionary checks are enforced by the game itself. Constraints
are rebuilt from the feedback after each guess; words already guessed are
skipped because the positional model cannot rule them out on its own.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List

from wordleclone.engine import Constraints, pattern, solve
from wordleclone.game import MAX_GUESSES, GameStatus, new_game, parse_keys, reduce
from .strategies import BaseStrategy

logger = logging.getLogger(__name__)


def run_case(
        strategy: BaseStrategy,
        target: str,
        *,
        words,
        seed: int | None = None,
) -> Dict:
    """
    Play one game until the strategy wins or the game runs out of guesses.

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), candidates (list[int])
    """
    strategy.reset(seed=seed)
    state = new_game(words, target=target, now=0.0)
    guessed: set = set()
    sizes: List[int] = []
    total_ms = 0.0

    for turn in range(1, MAX_GUESSES + 1):
        candidates = [w for w in solve(words, Constraints.from_feedback(state.results))
                      if w not in guessed]
        if not candidates:
            # Only reachable when the target is missing from `words`.
            logger.warning("No candidates left for %s after %d guesses", target, turn - 1)
            break
        sizes.append(len(candidates))

        t0 = time.perf_counter_ns()
        guess = strategy.next_guess(candidates)
        total_ms += (time.perf_counter_ns() - t0) / 1_000_000.0
        guessed.add(guess)

        for event in parse_keys(guess):
            state = reduce(state, event, words, now=float(turn))
        if state.is_over:
            break

    return {
        "answer": state.target,
        "success": state.status is GameStatus.WON,
        "guesses": len(state.results),
        "time_ms": total_ms,
        "history": [("".join(ch for ch, _ in r), pattern(r)) for r in state.results],
        "candidates": sizes,
    }


def run_batch(
        strategy: BaseStrategy,
        targets: Iterable[str],
        *,
        words,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    targets are used.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases.
    """
    pool = list(targets)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, target in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(strategy, target, words=words, seed=case_seed))
    return out


def summarize(results: List[Dict]) -> Dict:
    """Win rate and mean guesses over wins for a batch."""
    wins = [r for r in results if r["success"]]
    return {
        "games": len(results),
        "wins": len(wins),
        "win_rate": (len(wins) / len(results)) if results else 0.0,
        "mean_guesses": (sum(r["guesses"] for r in wins) / len(wins)) if wins else 0.0,
    }
