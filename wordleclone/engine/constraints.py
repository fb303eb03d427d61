"""
Candidate filtering for the solver.

Given:
  - a pool of words (the loaded word list)
  - fixed letters per position ("green"), letters that must appear somewhere
    ("yellow") and letters that must not appear at all ("gray")

Return:
  - every word satisfying all three, in the pool's order.

This is an exact boolean filter: no scoring, no ranking. Filtering a result
again with the same constraints returns it unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple, Union

from .scoring import EvaluationResult, LetterStatus

WORD_LENGTH = 5

# Characters accepted as "no letter fixed here" in a green template like "A_P__".
_BLANKS = {"_", ".", "?", " ", "*"}

Fixed = Tuple[Optional[str], ...]


def _letters(text: Optional[str]) -> FrozenSet[str]:
    """Pull the alphabetic characters out of free text, uppercased."""
    return frozenset(ch.upper() for ch in (text or "") if ch.isalpha())


def parse_fixed(green: Union[str, Sequence[Optional[str]], None], N: int = WORD_LENGTH) -> Fixed:
    """
    Normalize green input to N slots of an uppercase letter or None.

    Accepts a template string ("A_P__") or a sequence of single letters /
    blanks (["A", "", "P", "", ""]). Anything that isn't exactly N slots is
    a caller error.
    """
    if green is None:
        return (None,) * N
    slots = list(green)
    if len(slots) != N:
        raise ValueError(f"fixed letters must have {N} slots; got {len(slots)}")

    out: List[Optional[str]] = []
    for s in slots:
        s = (s or "").strip()
        if not s or s in _BLANKS:
            out.append(None)
        elif len(s) == 1 and s.isalpha():
            out.append(s.upper())
        else:
            raise ValueError(f"fixed slot must be a single letter or blank; got {s!r}")
    return tuple(out)


@dataclass(frozen=True)
class Constraints:
    """Positional, inclusion and exclusion constraints for one solve call."""
    fixed: Fixed = (None,) * WORD_LENGTH
    must_contain: FrozenSet[str] = field(default_factory=frozenset)
    must_exclude: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def parse(cls, green=None, yellow: Optional[str] = None, gray: Optional[str] = None) -> "Constraints":
        """Build constraints from raw solver inputs (green template, yellow text, gray text)."""
        return cls(
            fixed=parse_fixed(green),
            must_contain=_letters(yellow),
            must_exclude=_letters(gray),
        )

    @classmethod
    def from_feedback(cls, results: Iterable[EvaluationResult], N: int = WORD_LENGTH) -> "Constraints":
        """
        Fold evaluation results into a constraint set the target still satisfies.

        A letter only goes to `must_exclude` when no guess ever marked it
        CORRECT or MISPLACED; an ABSENT duplicate ("LLAMA" vs "ALARM") does
        not rule the letter out.
        """
        fixed: List[Optional[str]] = [None] * N
        present, absent = set(), set()
        for result in results:
            for i, (letter, status) in enumerate(result):
                if status is LetterStatus.CORRECT:
                    fixed[i] = letter
                    present.add(letter)
                elif status is LetterStatus.MISPLACED:
                    present.add(letter)
                elif status is LetterStatus.ABSENT:
                    absent.add(letter)
        return cls(
            fixed=tuple(fixed),
            must_contain=frozenset(present),
            must_exclude=frozenset(absent - present),
        )

    def matches(self, word: str) -> bool:
        return matches(word, self.fixed, self.must_contain, self.must_exclude)

    def is_empty(self) -> bool:
        return all(f is None for f in self.fixed) and not self.must_contain and not self.must_exclude


def matches(word: str, fixed: Sequence[Optional[str]], must_contain: Iterable[str],
            must_exclude: Iterable[str]) -> bool:
    if len(word) != len(fixed):
        return False
    for ch, want in zip(word, fixed):
        if want is not None and ch != want:
            return False
    letters = set(word)
    if any(c not in letters for c in must_contain):
        return False
    if any(c in letters for c in must_exclude):
        return False
    return True


def filter_candidates(
        words: Iterable[str],
        fixed: Sequence[Optional[str]],
        must_contain: Iterable[str] = (),
        must_exclude: Iterable[str] = (),
) -> List[str]:
    """
    Keep the words that satisfy every constraint.

    Args:
      words        : candidate pool (e.g. a WordList), uppercase
      fixed        : one slot per position, a letter or None
      must_contain : letters that must appear somewhere
      must_exclude : letters that must not appear anywhere

    Returns:
      List[str] of matching words (order preserved as in `words`).
    """
    fixed = parse_fixed(fixed)
    contain = frozenset(c.upper() for c in must_contain)
    exclude = frozenset(c.upper() for c in must_exclude)

    # A letter both required and forbidden matches nothing; the loop below
    # finds that out on its own.
    return [w for w in words if matches(w, fixed, contain, exclude)]


def solve(words: Iterable[str], constraints: Constraints) -> List[str]:
    return filter_candidates(words, constraints.fixed, constraints.must_contain,
                             constraints.must_exclude)
