# apps/cli/play.py
"""
Play Wordle in the terminal.

Type a word and press Enter to submit it. '<' deletes the last letter,
so "CRAN<NE" enters CRANE. A line of just "?" prints the board again,
"quit" leaves.

The word list is loaded on a background thread while the intro prints; the
first game starts once it is ready. If it cannot be loaded the error is
logged and the program exits with status 1.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from typing import Callable

from wordleclone.config import DEFAULT_WORDS_PATH, default_stats_path, setup_logging
from wordleclone.datasets import BackgroundLoad, WordList
from wordleclone.game import DELETE, clear_expired_message, new_game, outcome, parse_keys, reduce
from wordleclone.game.render import render_board, render_keyboard, render_stats
from wordleclone.stats import StatsStore

logger = logging.getLogger(__name__)

INTRO = "WORDLE: guess the five-letter word in six tries. Type 'quit' to leave."


def play(
        words: WordList,
        store: StatsStore,
        *,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
) -> int:
    """
    Run games until the player quits. Returns the number of games finished.
    """
    rng = rng or random.Random()
    finished = 0

    while True:
        state = new_game(words, rng=rng, now=clock())
        logger.debug("Target word: %s", state.target)
        write(render_board(state))

        while not state.is_over:
            try:
                line = read_line("> ")
            except EOFError:
                return finished
            if line.strip().lower() == "quit":
                return finished
            if line.strip() == "?":
                write(render_board(state))
                write(render_keyboard(state))
                continue

            now = clock()
            state = clear_expired_message(state, now)
            raised_before = state.message_expires
            # Each line is a fresh attempt at the row; wipe whatever a
            # rejected submission left behind.
            for event in [DELETE] * state.col + parse_keys(line):
                state = reduce(state, event, words, now)
            if state.message and state.message_expires != raised_before:
                write(state.message)
                continue

            write(render_board(state))
            write(render_keyboard(state))

        result = outcome(state)
        stats = store.record(result.won, result.guesses, result.seconds)
        finished += 1
        write(render_stats(stats, state))

        try:
            again = read_line("Play again? [Y/n] ")
        except EOFError:
            return finished
        if again.strip().lower().startswith("n"):
            return finished


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordleclone — play in the terminal")
    ap.add_argument("--words", default=str(DEFAULT_WORDS_PATH), help="word list (one per line)")
    ap.add_argument("--stats", default=None, help="statistics JSON file (default: ~/.wordleclone/stats.json)")
    ap.add_argument("--seed", type=int, help="RNG seed for target selection")
    ap.add_argument("--log-level", default="WARNING")
    ap.add_argument("--log-file", default=None, help="write logs here instead of stderr")
    args = ap.parse_args(argv)

    setup_logging(args.log_level, args.log_file)
    loading = BackgroundLoad(args.words).start()
    print(INTRO)

    try:
        words = loading.wait()
    except (OSError, ValueError):
        print(f"Cannot start: failed to load word list {args.words}", file=sys.stderr)
        return 1

    store = StatsStore(args.stats or default_stats_path())
    play(words, store, rng=random.Random(args.seed))
    return 0


if __name__ == "__main__":
    sys.exit(main())
