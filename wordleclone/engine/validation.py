"""
Lightweight guess validation.

This module answers the question: "Can this entry be submitted right now?"
An entry is acceptable iff:
  - it has exactly N letters
  - it is alphabetic A-Z only
  - it exists in the loaded word list

A rejection never changes the game; the caller surfaces the reason as a
transient message.
"""

from __future__ import annotations

from typing import Container, Optional

NOT_ENOUGH_LETTERS = "Not enough letters"
NOT_IN_WORD_LIST = "Not in word list"


def rejection_reason(word: str, words: Container[str], N: int = 5) -> Optional[str]:
    """
    Return None if `word` may be submitted, else the user-facing reason.

    Notes:
      - `words` should support fast membership (a WordList or set); it is
        not copied here.
    """
    w = word.strip().upper()
    if len(w) < N:
        return NOT_ENOUGH_LETTERS
    if len(w) != N or not (w.isascii() and w.isalpha()) or w not in words:
        return NOT_IN_WORD_LIST
    return None


def validate_guess(word: str, words: Container[str], N: int = 5) -> bool:
    if not isinstance(word, str):
        return False
    return rejection_reason(word, words, N) is None
