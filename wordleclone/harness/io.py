"""
Output files for self-play runs.

- write_csv:      one row per game, guesses/patterns spread over fixed columns.
- write_manifest: JSON with the run configuration and word-list report.
- timestamp_id:   UTC run id for file names.

Patterns are prefixed with an apostrophe so spreadsheet apps keep strings
like "-GYY-" as text instead of parsing them as formulas.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
from pathlib import Path
from typing import Dict, List

from wordleclone.game import MAX_GUESSES


def _excel_safe_pattern(patt: str) -> str:
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, max_guesses: int = MAX_GUESSES) -> str:
    """
    Schema (columns):
      strategy, answer, success, guesses, time_ms,
      guess_1, patt_1, ..., guess_6, patt_6
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["strategy", "answer", "success", "guesses", "time_ms"]
    for i in range(1, max_guesses + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "strategy": r.get("strategy_id", "?"),
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            hist = r.get("history", [])
            for i in range(1, max_guesses + 1):
                g, patt = hist[i - 1] if i <= len(hist) else ("", "")
                row[f"guess_{i}"] = g
                row[f"patt_{i}"] = _excel_safe_pattern(patt)
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
