# apps/cli/autoplay.py
"""
Self-play runner: let the solver play many games and record how it did.

This script:
  1) Checks the word list (prints counts + SHA).
  2) Loads it and instantiates the requested guess-picking strategy.
  3) Plays one game per target with a live progress indicator and writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: manifest with config, word-list report and a summary
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordleclone.config import DEFAULT_WORDS_PATH, setup_logging
from wordleclone.datasets import load_word_list, pretty_summary, validate_word_list
from wordleclone.harness import (
    create_strategy, get_strategy_ids, run_case, summarize,
    timestamp_id, write_csv, write_manifest,
)

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordleclone — solver self-play")
    ap.add_argument("--strategy", default="letter_freq",
                    help=f"strategy id (one of: {', '.join(get_strategy_ids())})")
    ap.add_argument("--words", default=str(DEFAULT_WORDS_PATH), help="word list (one per line)")
    ap.add_argument("--sample", type=int, help="play only a subset of targets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="show run progress (auto=bar on a terminal, else plain text)")
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args(argv)
    if args.sample is not None and args.sample < 1:
        ap.error("--sample must be at least 1")

    setup_logging(args.log_level)

    # 1) Word-list report
    rep = validate_word_list(5, args.words)
    print(pretty_summary(rep))
    try:
        words = load_word_list(args.words)
    except (OSError, ValueError):
        logger.exception("Cannot load word list %s", args.words)
        return 1

    # 2) Strategy
    try:
        strategy = create_strategy(args.strategy)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    # 3) Targets (deterministic sample by seed)
    rng = random.Random(args.seed)
    targets = list(words)
    if args.sample is not None and args.sample < len(targets):
        rng.shuffle(targets)
        targets = targets[: args.sample]
    total = len(targets)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"
    iterator = tqdm(targets, ncols=80, desc="Playing", unit="game") if mode == "bar" else targets

    results = []
    start = time.time()
    last_print = 0.0
    for idx, target in enumerate(iterator, 1):
        r = run_case(strategy, target, words=words, seed=args.seed + idx)
        r["strategy_id"] = strategy.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 4) Outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"autoplay_{run_id}.csv"
    manifest_path = outdir / f"autoplay_{run_id}_manifest.json"

    summary = summarize(results)
    write_csv(results, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "config": vars(args),
        "word_list": rep,
        "strategy_id": strategy.id,
        "summary": summary,
    }, str(manifest_path))

    print(f"Won {summary['wins']}/{summary['games']} ({100 * summary['win_rate']:.1f}%), "
          f"mean guesses {summary['mean_guesses']:.2f}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
