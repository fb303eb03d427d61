"""
Word-list diagnostics for wordleclone.

What this module does:
- Inspect a word list file the way the game will read it (trim, uppercase,
  alphabetic only, exact length N, one per line).
- Count invalid lines and duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

The game itself is lenient: invalid lines are skipped and duplicates
collapse. This report only tells you how much of the file was thrown away.

Typical use:
    from wordleclone.datasets import validate_word_list, pretty_summary
    rep = validate_word_list(5, "wordleclone/datasets/data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class WordListReport:
    """Diagnostics and metadata for one word list file."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID lines
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # blank lines, wrong length, non-alphabetic
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Returns:
      (valid_words, invalid_count) with valid words uppercased, in file order
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip().upper()
            if w and w.isascii() and w.isalpha() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_word_list(N: int, path: str) -> Dict:
    """
    Inspect the word list at `path` for words of length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordListReport). `passed` is True
        when the file exists and yields at least one valid word; invalid or
        duplicate lines are reported in `issues` but do not fail it.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        return asdict(WordListReport(N, path, False, 0, 0, 0, "", False, issues))

    words, invalid = _load_and_check(p, N)
    unique = len(set(words))

    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if unique != len(words):
        issues.append(f"word list contains {len(words) - unique} duplicate line(s)")

    rep = WordListReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=bool(words),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=2315 (uniq=2315, invalid=0, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
