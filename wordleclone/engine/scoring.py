"""
Wordle-style evaluation of a single (guess, target) pair.

Conventions:
  - CORRECT   : right letter, right position          (pattern 'G')
  - MISPLACED : right letter, wrong position          (pattern 'Y')
  - ABSENT    : letter not present, or present fewer
                times than guessed                    (pattern '-')
  - UNKNOWN   : nothing guessed for this slot/key yet

Algorithm (two-pass, duplicate-safe):
  1) Count every target letter in a 26-slot array.
  2) Pass 1 marks exact matches CORRECT and consumes their counts.
  3) Pass 2 marks the remaining positions MISPLACED while the letter still
     has a count left, consuming one each time; otherwise they stay ABSENT.

Pass 1 must finish before pass 2 starts, otherwise an early duplicate can
consume the count that a later exact match needs ("LLAMA" vs "ALARM").
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class LetterStatus(str, Enum):
    CORRECT = "correct"
    MISPLACED = "misplaced"
    ABSENT = "absent"
    UNKNOWN = "unknown"

    @property
    def rank(self) -> int:
        """Display precedence: CORRECT > MISPLACED > ABSENT > UNKNOWN."""
        return _RANK[self]


_RANK = {
    LetterStatus.UNKNOWN: 0,
    LetterStatus.ABSENT: 1,
    LetterStatus.MISPLACED: 2,
    LetterStatus.CORRECT: 3,
}

_PATTERN_CHARS = {
    LetterStatus.CORRECT: "G",
    LetterStatus.MISPLACED: "Y",
    LetterStatus.ABSENT: "-",
    LetterStatus.UNKNOWN: " ",
}

# One (letter, status) pair per position, aligned with the guess.
EvaluationResult = Tuple[Tuple[str, LetterStatus], ...]


def _offset(ch: str) -> int:
    i = ord(ch) - ord("A")
    if not 0 <= i < 26:
        raise ValueError(f"not an A-Z letter: {ch!r}")
    return i


def evaluate(guess: str, target: str) -> EvaluationResult:
    """
    Classify every letter of `guess` against `target`.

    Preconditions:
      - len(guess) == len(target); both alphabetic (case-insensitive)

    Examples:
      pattern(evaluate("LLAMA", "ALARM")) -> "-GGYY"
      pattern(evaluate("BELLE", "LEVEL")) -> "-GYYY"
    """
    guess = guess.strip().upper()
    target = target.strip().upper()
    if len(guess) != len(target):
        raise ValueError(
            f"guess and target must be the same length; got {len(guess)} and {len(target)}"
        )

    statuses = [LetterStatus.ABSENT] * len(guess)
    remaining = [0] * 26
    for ch in target:
        remaining[_offset(ch)] += 1

    # Pass 1: exact matches
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            statuses[i] = LetterStatus.CORRECT
            remaining[_offset(g)] -= 1

    # Pass 2: present elsewhere, capped by what pass 1 left over
    for i, g in enumerate(guess):
        if statuses[i] is LetterStatus.CORRECT:
            continue
        k = _offset(g)
        if remaining[k] > 0:
            statuses[i] = LetterStatus.MISPLACED
            remaining[k] -= 1

    return tuple(zip(guess, statuses))


def pattern(result: EvaluationResult) -> str:
    """Compact 'G'/'Y'/'-' rendering of an evaluation result."""
    return "".join(_PATTERN_CHARS[status] for _, status in result)


def is_win(result: EvaluationResult) -> bool:
    return bool(result) and all(status is LetterStatus.CORRECT for _, status in result)
