"""
Guess-picking strategies for self-play.

A strategy receives the words still consistent with the feedback so far
(already filtered by the solver) and picks the next guess. Strategies
register themselves by `id` so the CLI can look them up by name.
"""

from __future__ import annotations

import random
from collections import Counter
from typing import Dict, List, Type

# ---- Global strategy registry ----
REGISTRY: Dict[str, Type["BaseStrategy"]] = {}


def register(cls: Type["BaseStrategy"]) -> Type["BaseStrategy"]:
    """
    Decorator: @register on a strategy class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate strategy id: {sid}")
    REGISTRY[sid] = cls
    return cls


class BaseStrategy:
    id = "base"
    name = "Base"

    def __init__(self):
        self.rng = random.Random()

    def reset(self, *, seed: int | None = None) -> None:
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, candidates: List[str]) -> str:
        raise NotImplementedError("Override in subclass")


@register
class FirstCandidate(BaseStrategy):
    """Take the solver's first match, i.e. word-list order."""
    id = "first"
    name = "First Candidate"

    def next_guess(self, candidates: List[str]) -> str:
        return candidates[0]


@register
class RandomCandidate(BaseStrategy):
    id = "random"
    name = "Random Candidate"

    def next_guess(self, candidates: List[str]) -> str:
        return candidates[self.rng.randrange(len(candidates))]


@register
class LetterFreqCandidate(BaseStrategy):
    """
    Score each candidate by the summed frequency of its DISTINCT letters
    across all candidates; highest wins, ties broken by the seeded RNG.
    Prefers words that split the remaining pool on common letters.
    """
    id = "letter_freq"
    name = "Letter Frequency (distinct)"

    def next_guess(self, candidates: List[str]) -> str:
        counts = Counter("".join(candidates))

        best_score = None
        best_words: List[str] = []
        for w in candidates:
            s = sum(counts[ch] for ch in set(w))
            if best_score is None or s > best_score:
                best_score, best_words = s, [w]
            elif s == best_score:
                best_words.append(w)

        return best_words[self.rng.randrange(len(best_words))]


def create_strategy(strategy_id: str) -> BaseStrategy:
    """
    Factory: instantiate a registered strategy by id.
    """
    try:
        cls = REGISTRY[strategy_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown strategy id: {strategy_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_strategy_ids() -> List[str]:
    """
    Return all registered strategy ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
