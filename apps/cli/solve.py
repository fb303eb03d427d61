# apps/cli/solve.py
"""
Solver CLI: list every word matching what you know so far.

    python -m apps.cli.solve --green A_P__ --yellow L --gray "R S T"

  --green   5-character template, '_' for unknown slots
  --yellow  letters that must appear somewhere
  --gray    letters that must not appear
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordleclone.config import DEFAULT_WORDS_PATH, setup_logging
from wordleclone.datasets import load_word_list
from wordleclone.engine import Constraints, solve
from wordleclone.game.render import render_matches

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordleclone — list candidate words")
    ap.add_argument("--green", default="_____", help="known positions, e.g. A_P__")
    ap.add_argument("--yellow", default="", help="letters that must appear")
    ap.add_argument("--gray", default="", help="letters that must not appear")
    ap.add_argument("--words", default=str(DEFAULT_WORDS_PATH), help="word list (one per line)")
    ap.add_argument("--per-row", type=int, default=4, help="words per output line")
    ap.add_argument("--log-level", default="WARNING")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        constraints = Constraints.parse(args.green, args.yellow, args.gray)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        words = load_word_list(args.words)
    except (OSError, ValueError):
        logger.exception("Cannot load word list %s", args.words)
        return 1

    print(render_matches(solve(words, constraints), per_row=args.per_row))
    return 0


if __name__ == "__main__":
    sys.exit(main())
