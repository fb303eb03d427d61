"""
Keyboard status aggregation.

Each key shows the best status its letter has ever received across all
submitted guesses. Once a letter is CORRECT anywhere it stays CORRECT.
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping

from .scoring import EvaluationResult, LetterStatus

KeyStates = Mapping[str, LetterStatus]

KEYBOARD_ROWS = ("QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM")


def merge_key_states(keys: KeyStates, result: EvaluationResult) -> Dict[str, LetterStatus]:
    """Return a new key map with `result` folded in; never downgrades a key."""
    merged = dict(keys)
    for letter, status in result:
        current = merged.get(letter, LetterStatus.UNKNOWN)
        if status.rank > current.rank:
            merged[letter] = status
    return merged


def aggregate(results: Iterable[EvaluationResult]) -> Dict[str, LetterStatus]:
    out: Dict[str, LetterStatus] = {}
    for r in results:
        out = merge_key_states(out, r)
    return out


def key_status(keys: KeyStates, letter: str) -> LetterStatus:
    return keys.get(letter.upper(), LetterStatus.UNKNOWN)
